"""Command-line entry point: render a JSON document as a plan diff.

Usage::

    terrafactor plan.json create
    terrafactor --indent 2 --no-color - destroy < plan.json
    terrafactor https://example.com/plan.json create

Environment variables:
    TERRAFACTOR_INDENT      Spaces per nesting level (default: 4).
    TERRAFACTOR_TIMEOUT     Request timeout in seconds for URL sources (default: 30).
    TERRAFACTOR_VERIFY_TLS  Set to "0" to skip TLS verification (default: on).
    NO_COLOR                Any non-empty value disables ANSI colours.

Exit codes:
    0 - document rendered successfully.
    1 - invalid operation, unreadable or malformed document, or output error.
    2 - invalid command-line usage.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from terrafactor.config import RenderSettings
from terrafactor.errors import TerrafactorError, WriteFailureError
from terrafactor.loader import load_document
from terrafactor.model.operation import Operation
from terrafactor.render import render

logger = logging.getLogger(__name__)

_EPILOG: str = """\
environment variables:
  TERRAFACTOR_INDENT      spaces per nesting level
  TERRAFACTOR_TIMEOUT     request timeout in seconds for URL sources
  TERRAFACTOR_VERIFY_TLS  set to "0" to skip TLS verification
  NO_COLOR                any non-empty value disables ANSI colours
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terrafactor",
        description="Render a JSON document as a Terraform-plan style diff.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("json_file", help='JSON file path, http(s) URL, or "-" for stdin')
    parser.add_argument(
        "operation",
        help="Operation tag: 'create' (green +) or 'destroy' (red -)",
    )
    parser.add_argument("--indent", type=int, help="Spaces per nesting level (default: 4)")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Print markers without ANSI colour codes",
    )
    parser.add_argument("--timeout", type=float, help="Request timeout for URL sources")
    parser.add_argument(
        "--insecure",
        dest="verify_tls",
        action="store_false",
        default=None,
        help="Do not verify TLS certificates for https sources",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    out = stdout if stdout is not None else sys.stdout

    try:
        settings = RenderSettings.from_env(os.environ if environ is None else environ).override(
            indent=args.indent,
            color=args.color,
            timeout_s=args.timeout,
            verify_tls=args.verify_tls,
        )
        # Reject a bad tag before touching the document.
        Operation.from_tag(args.operation)
        data = load_document(
            args.json_file,
            timeout_s=settings.timeout_s,
            verify_tls=settings.verify_tls,
            stdin=stdin,
        )
        render(data, args.operation, settings.indent_unit, out, palette=settings.palette)
        try:
            out.flush()
        except OSError as exc:
            raise WriteFailureError(exc) from exc
    except TerrafactorError as exc:
        logger.debug("Rendering %s failed", args.json_file, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
