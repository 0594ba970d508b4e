"""GraphIndexer: record the dependencies a bundle contributes directly."""

from __future__ import annotations

import structlog

from narcheck.models import (
    COMPILE_SCOPE,
    NAR_TYPE,
    ArtifactIdentity,
    DependencyIndex,
    DependencyNode,
)

log = structlog.get_logger("narcheck.indexer")


class GraphIndexer:
    """Index the shallowest compile-scope, non-NAR occurrence of every artifact.

    The walk is a pre-order DFS over the children of the root. Once a node
    qualifies it is recorded with its path from the root and its subtree is
    not visited. NAR-typed nodes are bundle boundaries: neither recorded nor
    descended into. Nodes of other scopes are walked through.
    """

    def __init__(self, bundle_type: str = NAR_TYPE, scope: str = COMPILE_SCOPE) -> None:
        self.bundle_type = bundle_type
        self.scope = scope

    def index(self, root: DependencyNode) -> DependencyIndex:
        index: DependencyIndex = {}
        hierarchy: list[ArtifactIdentity] = []
        for child in root.children:
            self._visit(child, hierarchy, index)
        log.debug("indexer.done", root=str(root.artifact), entries=len(index))
        return index

    def _visit(
        self,
        node: DependencyNode,
        hierarchy: list[ArtifactIdentity],
        index: DependencyIndex,
    ) -> None:
        artifact = node.artifact
        if artifact.type == self.bundle_type:
            return
        hierarchy.append(artifact)
        try:
            if artifact.scope == self.scope:
                index.setdefault(artifact.key, tuple(hierarchy))
                return
            for child in node.children:
                self._visit(child, hierarchy, index)
        finally:
            hierarchy.pop()
