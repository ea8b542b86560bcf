"""Mermaid ``classDiagram`` parser."""

from __future__ import annotations

import re
from typing import List, Optional

from .operators import parse_relationship
from .utils import Dialect, GraphBuilder, GraphModel, GraphNode, clean_label, meaningful_lines

CLASS_HEADER = "classDiagram"
NAMESPACE_PREFIX = "namespace"
NOTE_PREFIX = "note"

CLASS_PATTERN = re.compile(
    r"^class\s+(?P<name>\w+)"
    r"(?:~[^~]*~)?"
    r"(?:\s*\[\s*\"(?P<bracket_label>[^\"]*)\"\s*\]|\s+\"(?P<quoted_label>[^\"]*)\")?"
    r"(?::::\w+)?"
)


def _is_stereotype(line: str) -> bool:
    return line.startswith("<<") and line.endswith(">>") and len(line) >= 4


def _scan_body(lines: List[str], index: int, node: GraphNode) -> int:
    """Consume body lines starting at ``index``; return the index of the closing brace."""

    while index < len(lines) and not lines[index].startswith("}"):
        member = lines[index]
        if _is_stereotype(member):
            node.stereotype = member[2:-2].strip()
        else:
            node.members.append(member)
        index += 1
    return index


def _add_inline_members(inline: str, node: GraphNode) -> None:
    for segment in inline.split(","):
        member = segment.strip()
        if member:
            node.members.append(member)


def _parse_class_declaration(lines: List[str], index: int, builder: GraphBuilder) -> Optional[int]:
    """Handle a ``class`` line; return the index of the last consumed line."""

    match = CLASS_PATTERN.match(lines[index])
    if not match:
        return None
    label = match.group("bracket_label") or match.group("quoted_label") or ""
    node = builder.ensure_node(match.group("name"), clean_label(label))
    rest = lines[index][match.end():]
    opener = rest.find("{")
    if opener < 0:
        return index
    closer = rest.find("}", opener)
    if closer >= 0:
        _add_inline_members(rest[opener + 1:closer], node)
        return index
    return _scan_body(lines, index + 1, node)


def parse_class_diagram(lines: List[str]) -> GraphModel:
    """Build a graph from normalized ``classDiagram`` lines.

    Unrecognized lines are skipped and recorded on ``GraphModel.unprocessed``.
    """

    builder = GraphBuilder()
    statements = meaningful_lines(lines, extra_prefixes=(NOTE_PREFIX,))

    index = 0
    if statements and statements[0].startswith(CLASS_HEADER):
        index += 1

    while index < len(statements):
        line = statements[index]

        # Namespace grouping is not modeled
        if line.startswith(NAMESPACE_PREFIX) or line in {"{", "}"}:
            index += 1
            continue

        last = _parse_class_declaration(statements, index, builder)
        if last is not None:
            index = last + 1
            continue

        relationship = parse_relationship(line)
        if relationship is not None:
            builder.add_link(
                relationship.source,
                relationship.target,
                relationship.kind,
                relationship.label,
                allow_self_loop=False,
            )
        else:
            builder.skip(line)
        index += 1

    return builder.build(dialect=Dialect.CLASS_DIAGRAM)
