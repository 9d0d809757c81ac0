#!/usr/bin/env python3
"""
Command-line interface for share links.

Usage:
    python sharelink_cli.py encode <share_id>
    python sharelink_cli.py decode <code>
    python sharelink_cli.py slugify <text>
    python sharelink_cli.py link <share_id> [--title TITLE] [--origin ORIGIN]
    python sharelink_cli.py resolve <route_prefix> <vanity>
"""

import argparse
import json
import os
import sys
from typing import List, Optional

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from sharelink import codec
from sharelink.links import build_short_link, resolve_vanity
from sharelink.common.logging_config import setup_logging
from sharelink.common.validators import is_valid_origin


class ShareLinkCLI:
    """Command-line interface for share links."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")

    def _ok(self, **payload) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0

    def _fail(self, error: str, reason: Optional[str] = None) -> int:
        payload = {"success": False, "error": error}
        if reason:
            payload["reason"] = reason
        print(json.dumps(payload, indent=2), file=sys.stderr)
        return 1

    def encode(self, share_id: str) -> int:
        """Encode a share id."""
        result = codec.encode_result(share_id)
        if not result.ok:
            return self._fail("Share id cannot be encoded", result.error.value)
        return self._ok(share_id=share_id, code=result.value)

    def decode(self, code: str) -> int:
        """Decode a share code."""
        result = codec.decode_result(code)
        if not result.ok:
            return self._fail(f"Code '{code}' cannot be decoded", result.error.value)
        return self._ok(code=code, share_id=result.value)

    def slugify(self, text: str) -> int:
        return self._ok(text=text, slug=codec.slugify(text))

    def link(self, share_id: str, title: Optional[str], origin: str) -> int:
        """Build a short link."""
        is_valid, error = is_valid_origin(origin)
        if not is_valid:
            return self._fail(error, "bad_origin")

        link = build_short_link(share_id, title, origin)
        if link is None:
            return self._fail("Share id cannot be encoded", codec.encode_result(share_id).error.value)

        self.logger.debug(f"Built {link.entity_type} link {link.url}")
        return self._ok(**link._asdict())

    def resolve(self, route_prefix: str, vanity: str, shared_path: str) -> int:
        """Resolve a vanity segment."""
        resolution = resolve_vanity(route_prefix, vanity, shared_path=shared_path)
        if resolution is None:
            return self._fail(f"Cannot resolve '{route_prefix}/{vanity}'", "unresolvable")
        return self._ok(**resolution._asdict())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Share link CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a share id
  %(prog)s encode project_<uuid>_20240115_093000_<uuid>

  # Decode a code
  %(prog)s decode p-C54vGhERIiIzM0REVVVmZg-...

  # Build a link
  %(prog)s link project_<uuid>_20240115_093000_<uuid> --title "Q3 Report"

  # Resolve a vanity segment
  %(prog)s resolve p q3-report-p-C54vGhERIiIzM0REVVVmZg-...
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    encode_parser = subparsers.add_parser("encode", help="Encode a share id")
    encode_parser.add_argument("share_id", help="Share id to encode")

    decode_parser = subparsers.add_parser("decode", help="Decode a share code")
    decode_parser.add_argument("code", help="Share code to decode")

    slugify_parser = subparsers.add_parser("slugify", help="Slugify a title")
    slugify_parser.add_argument("text", help="Title to slugify")

    link_parser = subparsers.add_parser("link", help="Build a short link")
    link_parser.add_argument("share_id", help="Share id to link")
    link_parser.add_argument("--title", help="Display title for the slug")
    link_parser.add_argument(
        "--origin",
        default=os.getenv("BASE_URL", "http://localhost:9300"),
        help="Origin for the link (default: from BASE_URL env or http://localhost:9300)"
    )

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a vanity segment")
    resolve_parser.add_argument("route_prefix", help="Route prefix (p, pr)")
    resolve_parser.add_argument("vanity", help="Trailing path segment of the link")
    resolve_parser.add_argument(
        "--shared-path",
        default=os.getenv("SHARED_PATH", "/shared"),
        help="Path the shared pages live under (default: from SHARED_PATH env or /shared)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShareLinkCLI(verbose=args.verbose)

    if args.command == "encode":
        return cli.encode(args.share_id)
    elif args.command == "decode":
        return cli.decode(args.code)
    elif args.command == "slugify":
        return cli.slugify(args.text)
    elif args.command == "link":
        return cli.link(args.share_id, args.title, args.origin)
    elif args.command == "resolve":
        return cli.resolve(args.route_prefix, args.vanity, args.shared_path)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
