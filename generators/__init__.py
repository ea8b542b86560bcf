"""Generator package exports."""

from .to_dot import build_digraph, generate_dot
from .to_mermaid import generate_mermaid
from .utils import GraphDocumentError, validate_graph_document

__all__ = [
    "build_digraph",
    "generate_dot",
    "generate_mermaid",
    "GraphDocumentError",
    "validate_graph_document",
]
