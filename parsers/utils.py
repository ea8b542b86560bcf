"""Shared utilities and lightweight data models for diagram parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

COMMENT_PREFIX = "%%"

_IDENTIFIER_PATTERN = re.compile(r"^\w+$")


class RelationKind(str, Enum):
    """Semantic kind carried by every link in the graph model."""

    INHERITANCE = "inheritance"
    REALIZATION = "realization"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    ASSOCIATION = "association"
    DEPENDENCY = "dependency"
    LINK = "link"


class Dialect(str, Enum):
    CLASS_DIAGRAM = "classDiagram"
    FLOWCHART = "flowchart"


@dataclass
class GraphNode:
    node_id: str
    label: Optional[str] = None
    members: List[str] = field(default_factory=list)
    stereotype: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.node_id

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.node_id,
            "label": self.display_label,
            "members": list(self.members),
            "stereotype": self.stereotype,
        }


@dataclass(frozen=True)
class GraphLink:
    source: str
    target: str
    kind: RelationKind
    label: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "source": self.source,
            "target": self.target,
            "type": self.kind.value,
            "label": self.label,
        }


@dataclass
class GraphModel:
    """Result of one parse: ordered nodes and links plus parse diagnostics.

    Only ``nodes`` and ``links`` belong to the serialized model; ``dialect``,
    ``orientation`` and ``unprocessed`` describe how the text was read.
    """

    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)
    dialect: Optional[Dialect] = None
    orientation: Optional[str] = None
    unprocessed: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[Dict[str, object]]]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


class GraphBuilder:
    """Accumulates nodes (deduplicated by id, in discovery order) and links."""

    def __init__(self) -> None:
        self._nodes: Dict[str, GraphNode] = {}
        self._links: List[GraphLink] = []
        self.unprocessed: List[str] = []

    def ensure_node(self, node_id: str, label: Optional[str] = None) -> GraphNode:
        node = self._nodes.get(node_id)
        if node is None:
            node = GraphNode(node_id=node_id, label=label or None)
            self._nodes[node_id] = node
        elif label and not node.label:
            node.label = label
        return node

    def add_link(
        self,
        source: str,
        target: str,
        kind: RelationKind,
        label: str = "",
        allow_self_loop: bool = True,
    ) -> Optional[GraphLink]:
        self.ensure_node(source)
        self.ensure_node(target)
        if source == target and not allow_self_loop:
            return None
        link = GraphLink(source=source, target=target, kind=kind, label=label)
        self._links.append(link)
        return link

    def skip(self, line: str) -> None:
        self.unprocessed.append(line)

    def build(self, dialect: Optional[Dialect] = None, orientation: Optional[str] = None) -> GraphModel:
        return GraphModel(
            nodes=list(self._nodes.values()),
            links=list(self._links),
            dialect=dialect,
            orientation=orientation,
            unprocessed=list(self.unprocessed),
        )


def is_identifier(text: str) -> bool:
    return bool(_IDENTIFIER_PATTERN.match(text))


def normalize_mermaid(code: Optional[str]) -> List[str]:
    """Normalize Mermaid text into a list of lines without surrounding whitespace."""

    text = (code or "").replace("\r\n", "\n").replace("\r", "\n")
    if text.startswith("\ufeff"):
        text = text[1:]
    return [line.strip() for line in text.split("\n")]


def meaningful_lines(lines: List[str], extra_prefixes: tuple = ()) -> List[str]:
    """Drop blank lines, ``%%`` comments and lines starting with ``extra_prefixes``."""

    result: List[str] = []
    for line in lines:
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        if extra_prefixes and line.startswith(extra_prefixes):
            continue
        result.append(line)
    return result


def clean_label(text: str) -> str:
    value = text.strip()

    # Strip surrounding quotes
    if value.startswith('"') and value.endswith('"') and len(value) >= 2:
        value = value[1:-1]
    if value.startswith("'") and value.endswith("'") and len(value) >= 2:
        value = value[1:-1]

    value = re.sub(r"<br\s*/?>", " ", value, flags=re.IGNORECASE)

    # Collapse whitespace
    return " ".join(value.split())
