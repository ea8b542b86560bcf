"""CLI entry point for converting Mermaid diagram text to the graph model JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from parsers import parse_mermaid_graph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert Mermaid class diagrams and flowcharts to graph JSON.")
    parser.add_argument("--in", dest="input_path", default="-", help="Path to the diagram file ('-' reads stdin)")
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the detected dialect and skipped lines to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.input_path == "-":
        code = sys.stdin.read()
    else:
        code = Path(args.input_path).read_text(encoding="utf-8")
    model = parse_mermaid_graph(code)
    if args.report:
        dialect = model.dialect.value if model.dialect else "empty"
        print(f"Dialect: {dialect}", file=sys.stderr)
        for line in model.unprocessed:
            print(f"  skipped: {line}", file=sys.stderr)
    print(json.dumps(model.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
