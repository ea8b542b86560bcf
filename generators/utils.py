"""Shared helpers for graph model to code generators."""

from __future__ import annotations

from typing import Any, Dict, List

import graphviz

# UML-style notation per relationship kind. The whole/part diamonds sit on the
# source end, so those kinds draw their marker as an arrow tail.
_DOT_EDGE_ATTRS: Dict[str, Dict[str, str]] = {
    "inheritance": {"arrowhead": "empty"},
    "realization": {"arrowhead": "empty", "style": "dashed"},
    "composition": {"dir": "both", "arrowtail": "diamond", "arrowhead": "none"},
    "aggregation": {"dir": "both", "arrowtail": "odiamond", "arrowhead": "none"},
    "association": {"arrowhead": "normal"},
    "dependency": {"arrowhead": "vee", "style": "dashed"},
    "link": {"arrowhead": "none"},
}


def relation_to_dot_attrs(kind: str) -> Dict[str, str]:
    return dict(_DOT_EDGE_ATTRS.get((kind or "link").lower(), _DOT_EDGE_ATTRS["link"]))


def orientation_to_rankdir(value: str) -> str:
    mapping = {"TB": "TB", "TD": "TB", "BT": "BT", "LR": "LR", "RL": "RL"}
    return mapping.get((value or "TB").upper(), "TB")


def escape_label(text: str) -> str:
    """Make free text safe inside a DOT label: literal backslashes, explicit line breaks."""

    return str(graphviz.escape(text or "")).replace("\n", "\\n")


def node_label_lines(node: Dict[str, Any]) -> List[str]:
    """Stereotype, display label and members of a graph node, in drawing order."""

    lines: List[str] = []
    if node.get("stereotype"):
        lines.append(f"«{node['stereotype']}»")
    lines.append(node.get("label") or node.get("id", ""))
    lines.extend(node.get("members") or [])
    return lines


class GraphDocumentError(ValueError):
    """Raised when a JSON document is not a ``{nodes, links}`` graph model."""


def validate_graph_document(document: Any) -> Dict[str, Any]:
    if not isinstance(document, dict):
        raise GraphDocumentError("graph document must be a JSON object")
    for key in ("nodes", "links"):
        if not isinstance(document.get(key), list):
            raise GraphDocumentError(f"graph document is missing a '{key}' list")
    return document
