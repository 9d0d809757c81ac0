"""Base64url primitives used by the share code codec."""

import base64
import re


class Base64UrlCodec:
    """Encode raw bytes as unpadded base64url text and back.

    The codec only depends on ``encode_bytes`` and ``decode_text``, so a
    different implementation can be dropped in without touching it.
    """

    ALPHABET_RE = re.compile(r"[A-Za-z0-9_-]*")

    def encode_bytes(self, data: bytes) -> str:
        """Encode bytes to base64url with the trailing padding removed.

        Args:
            data: Raw bytes to encode

        Returns:
            Unpadded base64url text
        """
        return base64.urlsafe_b64encode(bytes(data)).decode("ascii").rstrip("=")

    def decode_text(self, text: str) -> bytes:
        """Decode unpadded base64url text to bytes.

        Args:
            text: Base64url text without padding

        Returns:
            Decoded bytes

        Raises:
            ValueError: If the text contains characters outside the base64url
                alphabet or has an impossible length
        """
        if not isinstance(text, str) or not self.ALPHABET_RE.fullmatch(text):
            raise ValueError("Text is not base64url")

        if len(text) % 4 == 1:
            raise ValueError(f"Invalid base64url length: {len(text)}")

        padded = text + "=" * (-len(text) % 4)
        return base64.urlsafe_b64decode(padded)


default_codec = Base64UrlCodec()
