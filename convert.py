#!/usr/bin/env python3
"""
Mermaid diagram-to-graph converter.

Converts Mermaid class diagrams and flowcharts to the {nodes, links} graph
model in JSON format, optionally writing Graphviz DOT source alongside.
"""

import argparse
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Optional

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from generators import generate_dot
from parsers import GraphModel, parse_mermaid_graph

MERMAID_SUFFIXES = ('.mmd', '.mermaid', '.txt')


def convert_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    save_dot: bool = False
) -> GraphModel:
    """
    Convert a single diagram file to a graph model.

    Args:
        input_path: Path to input diagram file
        output_path: Path to output JSON file (default: same name with .json)
        save_dot: Whether to save DOT source alongside JSON

    Returns:
        Parsed graph model
    """
    code = input_path.read_text(encoding='utf-8')

    if not output_path:
        output_path = input_path.with_suffix('.json')

    model = parse_mermaid_graph(code)
    graph = model.to_dict()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(graph, f, ensure_ascii=False, indent=2)

    if save_dot:
        dot_path = output_path.with_suffix('.dot')
        dot_path.write_text(generate_dot(graph, orientation=model.orientation or 'TB'), encoding='utf-8')

    return model


def batch_convert(
    input_dir: Path,
    output_dir: Path,
    save_dot: bool = False
) -> Dict[str, Any]:
    """
    Batch convert all diagrams in a directory.

    Args:
        input_dir: Input directory containing diagram files
        output_dir: Output directory for JSON (and DOT) files
        save_dot: Whether to save DOT files

    Returns:
        Summary statistics
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    input_files = sorted(
        path for path in input_dir.iterdir()
        if path.is_file() and path.suffix.lower() in MERMAID_SUFFIXES
    )

    stats = {"total": 0, "success": 0, "failed": 0, "empty": 0}
    results = []

    if not input_files:
        print(f"No Mermaid files found in {input_dir}")
        return {"stats": stats, "results": results}

    print(f"Found {len(input_files)} Mermaid files")
    print("=" * 70)

    # Files sharing a stem keep their suffix in the output name
    stem_counts = Counter(path.stem for path in input_files)

    for input_file in input_files:
        file_id = input_file.stem
        stats["total"] += 1

        print(f"\n[{stats['total']}] Processing: {input_file.name}")
        if stem_counts[file_id] > 1:
            file_id = f"{file_id}_{input_file.suffix.lstrip('.').lower()}"
            print(f"  ⚠ Name clash: {input_file.name} written as {file_id}.json")

        try:
            json_path = output_dir / f"{file_id}.json"
            model = convert_file(input_file, json_path, save_dot)

            node_count = len(model.nodes)
            link_count = len(model.links)
            dialect = model.dialect.value if model.dialect else "empty"

            if node_count == 0:
                status = "⊘ Empty"
                stats["empty"] += 1
            else:
                status = "✓ Success"
                stats["success"] += 1

            print(f"  Dialect: {dialect}")
            print(f"  Nodes: {node_count}, Links: {link_count}")
            if model.unprocessed:
                print(f"  Skipped lines: {len(model.unprocessed)}")
            print(f"  {status}")

            results.append({
                "id": file_id,
                "dialect": dialect,
                "nodes": node_count,
                "links": link_count,
                "skipped": len(model.unprocessed),
            })

        except (OSError, UnicodeDecodeError) as e:
            print(f"  ✗ Failed: {e}")
            stats["failed"] += 1

    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"Total: {stats['total']}, Success: {stats['success']}, Failed: {stats['failed']}, Empty: {stats['empty']}")

    summary = {"stats": stats, "results": results}
    summary_file = output_dir / "conversion_summary.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump(summary, f, ensure_ascii=False, indent=2)

    print(f"\nOutput: {output_dir}")
    print(f"Summary: {summary_file}")

    return summary


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Convert Mermaid diagrams to graph JSON',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Convert single file
  python convert.py diagram.mmd -o output.json

  # Batch convert directory
  python convert.py --batch diagrams/ -o output/

  # Also write Graphviz DOT source
  python convert.py diagram.mmd --dot
        '''
    )

    parser.add_argument('input', type=Path, help='Input file or directory')
    parser.add_argument('-o', '--output', type=Path, help='Output file or directory')
    parser.add_argument('-b', '--batch', action='store_true',
                        help='Batch convert all files in input directory')
    parser.add_argument('--dot', action='store_true',
                        help='Also write Graphviz DOT files')

    args = parser.parse_args(argv)

    try:
        if args.batch:
            if not args.input.is_dir():
                print(f"Error: {args.input} is not a directory", file=sys.stderr)
                sys.exit(1)

            output_dir = args.output or (PROJECT_ROOT / "output")
            batch_convert(args.input, output_dir, save_dot=args.dot)
        else:
            if not args.input.is_file():
                print(f"Error: {args.input} is not a file", file=sys.stderr)
                sys.exit(1)

            model = convert_file(args.input, args.output, save_dot=args.dot)

            print(f"\n✓ Converted {args.input}")
            print(f"  Dialect: {model.dialect.value if model.dialect else 'empty'}")
            print(f"  Nodes: {len(model.nodes)}")
            print(f"  Links: {len(model.links)}")
            print(f"  Skipped lines: {len(model.unprocessed)}")

            output_file = args.output or args.input.with_suffix('.json')
            print(f"  Output: {output_file}")

    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
