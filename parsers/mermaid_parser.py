"""Mermaid parser entry points: dialect detection and dispatch."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from .class_parser import parse_class_diagram
from .flowchart_parser import parse_flowchart
from .utils import COMMENT_PREFIX, Dialect, GraphModel, normalize_mermaid

DEFAULT_MERMAID_ORIENTATION = "TB"
FLOWCHART_DIRECTIONS = ("TB", "TD", "BT", "RL", "LR")
FLOWCHART_HEADER_PATTERN = re.compile(
    r"^(?:graph|flowchart)\s+(?P<direction>" + "|".join(FLOWCHART_DIRECTIONS) + r")\b"
)


def _first_statement(lines: List[str]) -> Optional[str]:
    for line in lines:
        if line and not line.startswith(COMMENT_PREFIX):
            return line
    return None


def detect_dialect(code: Optional[str]) -> Optional[Dialect]:
    """Return the dialect the first meaningful line selects, or ``None`` for empty input."""

    first = _first_statement(normalize_mermaid(code))
    if first is None:
        return None
    if FLOWCHART_HEADER_PATTERN.match(first):
        return Dialect.FLOWCHART
    return Dialect.CLASS_DIAGRAM


def parse_mermaid_graph(code: Optional[str]) -> GraphModel:
    """Parse Mermaid text into a :class:`GraphModel`.

    Never raises for string input: lines no grammar rule understands are skipped and
    listed on ``GraphModel.unprocessed``.
    """

    lines = normalize_mermaid(code)
    first = _first_statement(lines)
    if first is None:
        return GraphModel()

    header = FLOWCHART_HEADER_PATTERN.match(first)
    if header:
        return parse_flowchart(lines, orientation=header.group("direction"))
    model = parse_class_diagram(lines)
    model.orientation = DEFAULT_MERMAID_ORIENTATION
    return model


def parse_mermaid_code(code: Optional[str]) -> Dict[str, List[Dict[str, Any]]]:
    """Parse Mermaid text into the ``{"nodes": [...], "links": [...]}`` graph model."""

    return parse_mermaid_graph(code).to_dict()
