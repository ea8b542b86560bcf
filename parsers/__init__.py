"""Parser package exports."""

from .class_parser import parse_class_diagram
from .flowchart_parser import parse_flowchart
from .mermaid_parser import detect_dialect, parse_mermaid_code, parse_mermaid_graph
from .operators import CLASS_OPERATORS, FLOW_OPERATORS, parse_relationship
from .utils import Dialect, GraphLink, GraphModel, GraphNode, RelationKind

__all__ = [
    "parse_mermaid_code",
    "parse_mermaid_graph",
    "detect_dialect",
    "parse_class_diagram",
    "parse_flowchart",
    "parse_relationship",
    "CLASS_OPERATORS",
    "FLOW_OPERATORS",
    "Dialect",
    "GraphLink",
    "GraphModel",
    "GraphNode",
    "RelationKind",
]
