#!/usr/bin/env python3
"""Render a JSON document as both a create and a destroy plan.

Usage::

    python examples/render_plan.py                       # uses subscribers.json
    python examples/render_plan.py path/to/doc.json
    INDENT=2 python examples/render_plan.py

Exit codes:
    0 - both plans rendered.
    1 - the document could not be loaded.
"""

from __future__ import annotations

import os
import pathlib
import sys

from terrafactor.errors import DocumentError
from terrafactor.loader import load_document
from terrafactor.render import render

DEFAULT_DOC = pathlib.Path(__file__).with_name("subscribers.json")
INDENT = int(os.getenv("INDENT", "4"))


def main() -> None:
    source = sys.argv[1] if len(sys.argv) > 1 else str(DEFAULT_DOC)
    try:
        data = load_document(source)
    except DocumentError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    for tag in ("create", "destroy"):
        print(f"\n=== {tag} ===\n")
        render(data, tag, " " * INDENT, sys.stdout)


if __name__ == "__main__":
    main()
