"""Mermaid ``flowchart`` / ``graph`` parser."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .operators import flow_kind, flow_operator_pattern
from .utils import Dialect, GraphBuilder, GraphModel, clean_label, meaningful_lines

SUBGRAPH_PREFIX = "subgraph"
SKIPPED_PREFIXES = (
    "flowchart ",
    "graph ",
    "subgraph ",
    "style ",
    "classDef ",
    "class ",
    "linkStyle ",
    "click ",
    "direction ",
)


@dataclass(frozen=True)
class NodeShape:
    name: str
    opener: str
    closer: str


# Two-character delimiters are checked before the single ones they start with.
NODE_SHAPES: Tuple[NodeShape, ...] = (
    NodeShape("subroutine", "[[", "]]"),
    NodeShape("stadium", "([", "])"),
    NodeShape("circle", "((", "))"),
    NodeShape("rect", "[", "]"),
    NodeShape("round", "(", ")"),
    NodeShape("diamond", "{", "}"),
)

_SHAPE_ALTERNATIVES = "|".join(
    f"{re.escape(shape.opener)}.*?{re.escape(shape.closer)}" for shape in NODE_SHAPES
)
_CLASS_SUFFIX = r"(?::::\w+)?"
_NODE_TOKEN = rf"\w+(?:{_SHAPE_ALTERNATIVES})?{_CLASS_SUFFIX}"
_EDGE_OPERATOR = flow_operator_pattern()
_ARROW_OPERATOR = flow_operator_pattern(include_bare_dash=False)

NODE_TOKEN_PATTERN = re.compile(rf"^{_NODE_TOKEN}$")
PIPE_LABEL_EDGE_PATTERN = re.compile(
    rf"^(?P<left>{_NODE_TOKEN})\s*(?P<op>{_EDGE_OPERATOR})\s*\|(?P<label>[^|]*)\|\s*(?P<right>{_NODE_TOKEN})$"
)
SPACE_LABEL_EDGE_PATTERN = re.compile(
    rf"^(?P<left>{_NODE_TOKEN})\s*--\s+(?P<label>.+?)\s+(?P<op>{_ARROW_OPERATOR})\s*(?P<right>{_NODE_TOKEN})$"
)
BARE_EDGE_PATTERN = re.compile(
    rf"^(?P<left>{_NODE_TOKEN})\s*(?P<op>{_EDGE_OPERATOR})\s*(?P<right>{_NODE_TOKEN})$"
)

EDGE_PATTERNS = (PIPE_LABEL_EDGE_PATTERN, SPACE_LABEL_EDGE_PATTERN, BARE_EDGE_PATTERN)


def _is_block_line(line: str) -> bool:
    return line == SUBGRAPH_PREFIX or line == "end"


def _split_node_token(token: str) -> Tuple[str, str]:
    """Split ``A[Label]`` style tokens into identifier and label text."""

    # ":::name" style classes are presentation only
    token = re.sub(r":::\w+$", "", token.strip())
    match = re.match(r"^\w+", token)
    if not match:
        return token, ""
    identifier = match.group(0)
    remainder = token[match.end():]
    for shape in NODE_SHAPES:
        if remainder.startswith(shape.opener) and remainder.endswith(shape.closer):
            inner = remainder[len(shape.opener): len(remainder) - len(shape.closer)]
            return identifier, clean_label(inner)
    return identifier, ""


def _register_node(token: str, builder: GraphBuilder) -> str:
    node_id, label = _split_node_token(token)
    builder.ensure_node(node_id, label)
    return node_id


def _parse_flow_edge(line: str, builder: GraphBuilder) -> bool:
    for pattern in EDGE_PATTERNS:
        match = pattern.match(line)
        if not match:
            continue
        source = _register_node(match.group("left"), builder)
        target = _register_node(match.group("right"), builder)
        label = clean_label(match.groupdict().get("label") or "")
        # Self-loops are kept for flowcharts.
        builder.add_link(source, target, flow_kind(match.group("op")), label)
        return True
    return False


def _parse_flow_node(line: str, builder: GraphBuilder) -> bool:
    if not NODE_TOKEN_PATTERN.match(line):
        return False
    _register_node(line, builder)
    return True


def parse_flowchart(lines: List[str], orientation: Optional[str] = None) -> GraphModel:
    """Build a graph from normalized flowchart lines."""

    builder = GraphBuilder()
    for raw_line in meaningful_lines(lines, extra_prefixes=SKIPPED_PREFIXES):
        line = raw_line.rstrip(";").rstrip()
        if not line or _is_block_line(line):
            continue
        if _parse_flow_edge(line, builder):
            continue
        if _parse_flow_node(line, builder):
            continue
        builder.skip(line)
    return builder.build(dialect=Dialect.FLOWCHART, orientation=orientation)
