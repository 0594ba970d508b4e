"""Loader registry — match resolved-graph files to loaders."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from narcheck.exceptions import GraphBuildError
from narcheck.models import DependencyNode

log = structlog.get_logger("narcheck.loader")

DEFAULT_FORMAT = "tree-text"


@runtime_checkable
class GraphLoader(Protocol):
    """Interface that every resolved-graph loader must satisfy."""

    format_name: str
    file_patterns: list[str]

    def load(self, content: str, source: str) -> DependencyNode: ...


LOADER_REGISTRY: dict[str, GraphLoader] = {}


def register_loader(loader: GraphLoader) -> None:
    """Register a loader instance by its format_name."""
    LOADER_REGISTRY[loader.format_name] = loader


def get_loader(format_name: str) -> GraphLoader:
    try:
        return LOADER_REGISTRY[format_name]
    except KeyError:
        raise GraphBuildError(
            format_name, f"unknown graph format (known: {', '.join(sorted(LOADER_REGISTRY))})"
        ) from None


def loader_for(path: Path) -> GraphLoader:
    """Pick a loader from the file name, falling back to the text tree loader."""
    for loader in LOADER_REGISTRY.values():
        if any(fnmatch(path.name, pattern) for pattern in loader.file_patterns):
            return loader
    return get_loader(DEFAULT_FORMAT)


def load_graph(path: Path, format_name: str | None = None) -> DependencyNode:
    """Read ``path`` and build its dependency graph.

    Raises :class:`GraphBuildError` when the file cannot be read or parsed.
    """
    loader = get_loader(format_name) if format_name else loader_for(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphBuildError(str(path), str(e)) from e
    root = loader.load(content, str(path))
    log.info("loader.parsed", source=str(path), format=loader.format_name, root=str(root.artifact))
    return root
