"""Resolved-graph loaders — auto-registered on import."""

from narcheck.loaders import (
    tree_json,  # noqa: F401
    tree_text,  # noqa: F401
)
from narcheck.loaders.registry import (
    LOADER_REGISTRY,
    GraphLoader,
    get_loader,
    load_graph,
    loader_for,
    register_loader,
)

__all__ = [
    "LOADER_REGISTRY",
    "GraphLoader",
    "get_loader",
    "load_graph",
    "loader_for",
    "register_loader",
]
