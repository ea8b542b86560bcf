"""Generate Mermaid code from a graph model."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from parsers.operators import CLASS_OPERATORS, FLOW_OPERATORS
from parsers.utils import Dialect

from .utils import orientation_to_rankdir

_CLASS_ONLY_KINDS = {"inheritance", "realization", "aggregation"}

_CLASS_TOKENS: Dict[str, str] = {}
for _operator in CLASS_OPERATORS:
    if not _operator.reversed:
        _CLASS_TOKENS.setdefault(_operator.kind.value, _operator.token)

_FLOW_TOKENS: Dict[str, str] = {}
for _token, _kind in FLOW_OPERATORS:
    _FLOW_TOKENS.setdefault(_kind.value, _token)


def _mermaid_label(text: str) -> str:
    return (text or "").replace('"', "'").replace("\n", " ")


def _infer_dialect(graph: Dict[str, Any]) -> Dialect:
    for node in graph.get("nodes", []):
        if node.get("members") or node.get("stereotype"):
            return Dialect.CLASS_DIAGRAM
    for link in graph.get("links", []):
        if link.get("type") in _CLASS_ONLY_KINDS:
            return Dialect.CLASS_DIAGRAM
    return Dialect.FLOWCHART


def _render_class_diagram(graph: Dict[str, Any]) -> str:
    lines: List[str] = ["classDiagram"]
    for node in graph.get("nodes", []):
        node_id = node.get("id")
        if not node_id:
            continue
        header = f"  class {node_id}"
        label = node.get("label")
        if label and label != node_id:
            header += f'["{_mermaid_label(label)}"]'
        members = node.get("members") or []
        stereotype = node.get("stereotype")
        if not members and not stereotype:
            lines.append(header)
            continue
        lines.append(header + " {")
        if stereotype:
            lines.append(f"    <<{stereotype}>>")
        lines.extend(f"    {member}" for member in members)
        lines.append("  }")

    for link in graph.get("links", []):
        src = link.get("source")
        dst = link.get("target")
        if not src or not dst:
            continue
        token = _CLASS_TOKENS.get(link.get("type"), "--")
        line = f"  {src} {token} {dst}"
        if link.get("label"):
            line += f" : {link['label']}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def _render_flowchart(graph: Dict[str, Any], orientation: str) -> str:
    lines: List[str] = [f"flowchart {orientation_to_rankdir(orientation)}"]
    for node in graph.get("nodes", []):
        node_id = node.get("id")
        if not node_id:
            continue
        label = node.get("label")
        if label and label != node_id:
            lines.append(f'  {node_id}["{_mermaid_label(label)}"]')
        else:
            lines.append(f"  {node_id}")

    for link in graph.get("links", []):
        src = link.get("source")
        dst = link.get("target")
        if not src or not dst:
            continue
        token = _FLOW_TOKENS.get(link.get("type"), "-->")
        label = link.get("label")
        if label:
            lines.append(f"  {src} {token}|{_mermaid_label(label).replace('|', '/')}| {dst}")
        else:
            lines.append(f"  {src} {token} {dst}")
    return "\n".join(lines) + "\n"


def generate_mermaid(graph: Dict[str, Any], dialect: Optional[Dialect] = None, orientation: str = "TB") -> str:
    if (dialect or _infer_dialect(graph)) == Dialect.CLASS_DIAGRAM:
        return _render_class_diagram(graph)
    return _render_flowchart(graph, orientation)
