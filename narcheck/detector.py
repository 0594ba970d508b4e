"""DuplicateDetector: find bundle dependencies repackaged by the nested NAR."""

from __future__ import annotations

import structlog

from narcheck.models import (
    COMPILE_SCOPE,
    ArtifactIdentity,
    ConflictRecord,
    DependencyIndex,
    DependencyNode,
)

log = structlog.get_logger("narcheck.detector")


class DuplicateDetector:
    """Walk a nested NAR's whole subtree and match it against a bundle index.

    Unlike :class:`~narcheck.indexer.GraphIndexer`, the walk starts at the
    nested root itself and never stops early: every matching occurrence is
    reported, in pre-order.
    """

    def __init__(self, scope: str = COMPILE_SCOPE) -> None:
        self.scope = scope

    def find_duplicates(
        self, index: DependencyIndex, nested_root: DependencyNode
    ) -> list[ConflictRecord]:
        conflicts: list[ConflictRecord] = []
        self._visit(nested_root, [], index, conflicts)
        log.debug(
            "detector.done",
            nested=str(nested_root.artifact),
            conflicts=len(conflicts),
        )
        return conflicts

    def _visit(
        self,
        node: DependencyNode,
        hierarchy: list[ArtifactIdentity],
        index: DependencyIndex,
        conflicts: list[ConflictRecord],
    ) -> None:
        artifact = node.artifact
        hierarchy.append(artifact)
        try:
            if artifact.scope == self.scope and artifact.key in index:
                conflicts.append(
                    ConflictRecord(
                        artifact=artifact,
                        bundle_hierarchy=index[artifact.key],
                        nested_hierarchy=tuple(hierarchy),
                    )
                )
            for child in node.children:
                self._visit(child, hierarchy, index, conflicts)
        finally:
            hierarchy.pop()
