"""CLI entry point for converting graph model JSON back to diagram code."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from generators import GraphDocumentError, generate_dot, generate_mermaid, validate_graph_document

GeneratorFn = Callable[..., str]

FORMAT_TO_GENERATOR: Dict[str, GeneratorFn] = {
    "dot": generate_dot,
    "mermaid": generate_mermaid,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert graph JSON to diagram code.")
    parser.add_argument("--in", dest="input_path", required=True, help="Path to the graph JSON file")
    parser.add_argument(
        "--fmt",
        dest="format",
        required=True,
        choices=sorted(FORMAT_TO_GENERATOR),
        help="Output format",
    )
    parser.add_argument("--orientation", default="TB", help="Layout direction (TB, LR, BT, RL)")
    parser.add_argument(
        "--out",
        dest="output_path",
        default=None,
        help="Optional path to write the generated code; defaults to stdout",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    generator_fn = FORMAT_TO_GENERATOR[args.format]
    input_path = Path(args.input_path)
    try:
        with input_path.open("r", encoding="utf-8") as handle:
            graph = validate_graph_document(json.load(handle))
    except (OSError, json.JSONDecodeError, GraphDocumentError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    result = generator_fn(graph, orientation=args.orientation)
    if args.output_path:
        Path(args.output_path).write_text(result, encoding="utf-8")
    else:
        print(result, end="")


if __name__ == "__main__":
    main()
