"""Compact share codes.

A share id minted by the backend looks like::

    project_<uuid1>_YYYYMMDD_HHMMSS_<uuid2>

and is re-encoded, without any lookup table, into::

    <prefix>-<A>-<B>-<C>

where ``A`` and ``C`` are the raw UUID bytes in unpadded base64url (22 chars
each) and ``B`` is the 14-digit timestamp in base 36. Anyone can decode a
code, so it must never be treated as an access token.
"""

import enum
import re
from typing import NamedTuple, Optional, Tuple

from . import entities
from .base64url import Base64UrlCodec, default_codec


UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
DATE_RE = re.compile(r"[0-9]{8}")
TIME_RE = re.compile(r"[0-9]{6}")
UUID_PAYLOAD_RE = re.compile(r"[A-Za-z0-9_-]{22}")
TIMESTAMP_PAYLOAD_RE = re.compile(r"[0-9A-Za-z]{1,9}")

UUID_PAYLOAD_LENGTH = 22
TIMESTAMP_DIGITS = 14
MAX_TIMESTAMP = 10 ** TIMESTAMP_DIGITS - 1
SLUG_MAX_LENGTH = 60

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


class CodecError(enum.Enum):
    """Why a share id or share code was rejected."""

    NOT_A_STRING = "not_a_string"
    EMPTY_INPUT = "empty_input"
    TOO_FEW_FIELDS = "too_few_fields"
    UNKNOWN_ENTITY = "unknown_entity"
    BAD_DATE = "bad_date"
    BAD_TIME = "bad_time"
    BAD_UUID = "bad_uuid"
    BAD_SEGMENT_COUNT = "bad_segment_count"
    UNKNOWN_PREFIX = "unknown_prefix"
    BAD_UUID_PAYLOAD = "bad_uuid_payload"
    BAD_TIMESTAMP_PAYLOAD = "bad_timestamp_payload"


class CodecResult(NamedTuple):
    """Outcome of a codec step: exactly one of ``value`` / ``error`` is set."""

    value: Optional[str] = None
    error: Optional[CodecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: str) -> "CodecResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CodecError) -> "CodecResult":
        return cls(error=error)


class ParsedShareId(NamedTuple):
    entity: entities.EntityType
    uuid1_hex: str
    timestamp: str
    uuid2_hex: str


class ParsedShareCode(NamedTuple):
    entity: entities.EntityType
    uuid1_payload: str
    timestamp_payload: str
    uuid2_payload: str


def _to_base36(num: int) -> str:
    if num == 0:
        return _BASE36_DIGITS[0]

    result = []
    while num > 0:
        num, remainder = divmod(num, 36)
        result.append(_BASE36_DIGITS[remainder])

    return "".join(reversed(result))


def _hex_to_uuid(hex32: str) -> str:
    return f"{hex32[:8]}-{hex32[8:12]}-{hex32[12:16]}-{hex32[16:20]}-{hex32[20:]}"


def parse_share_id(share_id) -> Tuple[Optional[ParsedShareId], Optional[CodecError]]:
    """Shape-check a share id field by field.

    Args:
        share_id: Candidate share id

    Returns:
        Tuple of (parsed share id, error); exactly one is None
    """
    if not isinstance(share_id, str):
        return None, CodecError.NOT_A_STRING
    if not share_id:
        return None, CodecError.EMPTY_INPUT

    parts = share_id.split("_")
    if len(parts) < 5:
        return None, CodecError.TOO_FEW_FIELDS

    entity = entities.by_name(parts[0])
    if entity is None:
        return None, CodecError.UNKNOWN_ENTITY

    uuid1, ymd, hms, uuid2 = parts[1], parts[2], parts[3], parts[4]
    if not DATE_RE.fullmatch(ymd):
        return None, CodecError.BAD_DATE
    if not TIME_RE.fullmatch(hms):
        return None, CodecError.BAD_TIME
    if not UUID_RE.fullmatch(uuid1) or not UUID_RE.fullmatch(uuid2):
        return None, CodecError.BAD_UUID

    return ParsedShareId(
        entity=entity,
        uuid1_hex=uuid1.replace("-", "").lower(),
        timestamp=ymd + hms,
        uuid2_hex=uuid2.replace("-", "").lower(),
    ), None


def parse_share_code(code) -> Tuple[Optional[ParsedShareCode], Optional[CodecError]]:
    """Split a share code into its prefix and three payload segments.

    The base64url alphabet contains ``-``, so the UUID payloads are located by
    their fixed width instead of by splitting. The timestamp segment is
    base 36 and never contains ``-``.

    Args:
        code: Candidate share code

    Returns:
        Tuple of (parsed share code, error); exactly one is None
    """
    if not isinstance(code, str):
        return None, CodecError.NOT_A_STRING
    if not code:
        return None, CodecError.EMPTY_INPUT

    prefix, sep, payload = code.partition("-")
    if not sep:
        return None, CodecError.BAD_SEGMENT_COUNT

    entity = entities.by_code_prefix(prefix)
    if entity is None:
        return None, CodecError.UNKNOWN_PREFIX

    # A, "-", at least one base36 char, "-", C
    if len(payload) < 2 * UUID_PAYLOAD_LENGTH + 3:
        return None, CodecError.BAD_SEGMENT_COUNT

    first = payload[:UUID_PAYLOAD_LENGTH]
    last = payload[-UUID_PAYLOAD_LENGTH:]
    middle = payload[UUID_PAYLOAD_LENGTH:-UUID_PAYLOAD_LENGTH]
    if middle[0] != "-" or middle[-1] != "-" or "-" in middle[1:-1]:
        return None, CodecError.BAD_SEGMENT_COUNT

    if not UUID_PAYLOAD_RE.fullmatch(first) or not UUID_PAYLOAD_RE.fullmatch(last):
        return None, CodecError.BAD_UUID_PAYLOAD

    timestamp = middle[1:-1]
    if not TIMESTAMP_PAYLOAD_RE.fullmatch(timestamp):
        return None, CodecError.BAD_TIMESTAMP_PAYLOAD

    return ParsedShareCode(
        entity=entity,
        uuid1_payload=first,
        timestamp_payload=timestamp,
        uuid2_payload=last,
    ), None


def encode_result(share_id, b64: Base64UrlCodec = default_codec) -> CodecResult:
    """Encode a share id into a share code, reporting why it failed if it did."""
    parsed, error = parse_share_id(share_id)
    if error is not None:
        return CodecResult.failure(error)

    first = b64.encode_bytes(bytes.fromhex(parsed.uuid1_hex))
    middle = _to_base36(int(parsed.timestamp, 10))
    last = b64.encode_bytes(bytes.fromhex(parsed.uuid2_hex))

    return CodecResult.success(f"{parsed.entity.code_prefix}-{first}-{middle}-{last}")


def decode_result(code, b64: Base64UrlCodec = default_codec) -> CodecResult:
    """Decode a share code into a share id, reporting why it failed if it did."""
    parsed, error = parse_share_code(code)
    if error is not None:
        return CodecResult.failure(error)

    uuid1_bytes = b64.decode_text(parsed.uuid1_payload)
    uuid2_bytes = b64.decode_text(parsed.uuid2_payload)
    if len(uuid1_bytes) != 16 or len(uuid2_bytes) != 16:
        return CodecResult.failure(CodecError.BAD_UUID_PAYLOAD)

    # The last char carries 4 unused bits; only the zero-filled spelling is valid
    if (b64.encode_bytes(uuid1_bytes) != parsed.uuid1_payload
            or b64.encode_bytes(uuid2_bytes) != parsed.uuid2_payload):
        return CodecResult.failure(CodecError.BAD_UUID_PAYLOAD)

    timestamp_value = int(parsed.timestamp_payload, 36)
    if timestamp_value > MAX_TIMESTAMP:
        return CodecResult.failure(CodecError.BAD_TIMESTAMP_PAYLOAD)

    uuid1 = _hex_to_uuid(uuid1_bytes.hex().rjust(32, "0"))
    uuid2 = _hex_to_uuid(uuid2_bytes.hex().rjust(32, "0"))
    ts14 = str(timestamp_value).rjust(TIMESTAMP_DIGITS, "0")

    return CodecResult.success(
        f"{parsed.entity.name}_{uuid1}_{ts14[:8]}_{ts14[8:]}_{uuid2}"
    )


def encode(share_id) -> Optional[str]:
    """Encode a share id into a compact share code.

    Args:
        share_id: e.g. ``project_<uuid>_20240115_093000_<uuid>``

    Returns:
        Share code such as ``p-<A>-<B>-<C>``, or None if the share id is
        malformed or its entity type is not supported
    """
    return encode_result(share_id).value


def decode(code) -> Optional[str]:
    """Decode a share code back into the share id that produced it.

    Args:
        code: Share code such as ``pr-<A>-<B>-<C>``

    Returns:
        Share id with lowercase hex, or None if the code is not well formed
    """
    return decode_result(code).value


def slugify(text) -> str:
    """Turn a display title into a lowercase, hyphenated URL fragment.

    Never fails; returns an empty string when nothing alphanumeric survives.
    """
    if not isinstance(text, str):
        return ""

    slug = _NON_ALNUM_RE.sub("-", text.lower()).strip("-")
    return slug[:SLUG_MAX_LENGTH].rstrip("-")
