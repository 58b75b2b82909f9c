from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import office2text
from office2text.exceptions import MalformedXmlError
from office2text.extractors.data_types import LimitUnit

DEFAULT_LIMIT = 1000


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="office2text",
        description="Extract up to N characters of plain text from an ODT or DOCX file.",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the .odt or .docx file to extract.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of characters to emit (default: {DEFAULT_LIMIT}).",
    )
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="Count the limit in UTF-8 bytes instead of characters.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON object with the text and whether it was truncated.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log extraction progress to stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"office2text: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    unit = LimitUnit.BYTES if args.bytes else LimitUnit.CHARS
    try:
        result = office2text.read_limited_file(args.path, args.limit, unit=unit)
    except MalformedXmlError as exc:
        # the text read before the damage is still worth showing
        if exc.partial_text:
            sys.stdout.write(exc.partial_text)
            sys.stdout.write("\n")
        print(f"office2text: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"office2text: {exc}", file=sys.stderr)
        return 1

    if args.json:
        json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
    else:
        sys.stdout.write(result.text)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
