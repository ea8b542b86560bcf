"""Generate Graphviz DOT code from a graph model."""

from __future__ import annotations

from typing import Any, Dict, List

import graphviz

from .utils import escape_label, node_label_lines, orientation_to_rankdir, relation_to_dot_attrs


def build_digraph(graph: Dict[str, Any], name: str = "G", orientation: str = "TB") -> graphviz.Digraph:
    nodes: List[Dict[str, Any]] = graph.get("nodes", [])
    links: List[Dict[str, Any]] = graph.get("links", [])

    dot = graphviz.Digraph(name)
    dot.attr(rankdir=orientation_to_rankdir(orientation))
    dot.attr("node", shape="box")

    for node in nodes:
        node_id = node.get("id")
        if not node_id:
            continue
        label = graphviz.nohtml("\\n".join(escape_label(line) for line in node_label_lines(node)))
        dot.node(node_id, label=label)

    for link in links:
        src = link.get("source")
        dst = link.get("target")
        if not src or not dst:
            continue
        attrs = relation_to_dot_attrs(link.get("type"))
        if link.get("label"):
            attrs["label"] = graphviz.nohtml(escape_label(link["label"]))
        dot.edge(src, dst, **attrs)

    return dot


def generate_dot(graph: Dict[str, Any], orientation: str = "TB") -> str:
    return build_digraph(graph, orientation=orientation).source
