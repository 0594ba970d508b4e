"""Core data types for NAR duplicate-dependency detection."""

from __future__ import annotations

from dataclasses import dataclass, field

COMPILE_SCOPE = "compile"
NAR_TYPE = "nar"


@dataclass(frozen=True)
class ArtifactIdentity:
    """
    Coordinates of a resolved artifact.
    Scope is carried for display and filtering but is not part of equality:
    two occurrences of the same coordinates are the same artifact wherever
    they sit in the graph.
    """

    group_id: str
    artifact_id: str
    version: str
    type: str = "jar"
    classifier: str | None = None
    scope: str | None = field(default=None, compare=False)

    @property
    def key(self) -> str:
        """Canonical coordinate string used as the index key."""
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)

    def __str__(self) -> str:
        if self.scope:
            return f"{self.key}:{self.scope}"
        return self.key


@dataclass(eq=False)
class DependencyNode:
    """A node of a resolved dependency graph. Equality is object identity."""

    artifact: ArtifactIdentity
    children: list[DependencyNode] = field(default_factory=list)


Hierarchy = tuple[ArtifactIdentity, ...]

DependencyIndex = dict[str, Hierarchy]


@dataclass(frozen=True)
class ConflictRecord:
    """An artifact owned by the bundle that is packaged again in the nested NAR."""

    artifact: ArtifactIdentity
    bundle_hierarchy: Hierarchy  # path inside the outer bundle
    nested_hierarchy: Hierarchy  # path from the nested NAR root
