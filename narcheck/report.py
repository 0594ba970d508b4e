"""Render conflicts as build diagnostics (text blocks or a JSON report)."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from narcheck.models import COMPILE_SCOPE, ArtifactIdentity, ConflictRecord, Hierarchy


def advice(scope: str = COMPILE_SCOPE) -> str:
    """Suggested remedy for a dependency duplicated in ``scope``."""
    return (
        f'Consider changing the scope from "{scope}" to "provided" or exclude it '
        "in case it's a transitive dependency."
    )


ADVICE = advice()

_INDENT = "|  "
_BRANCH = "+- "


def indent(depth: int) -> str:
    return _INDENT * depth + _BRANCH


def render_hierarchy(hierarchy: Hierarchy, suffix: str) -> Iterator[str]:
    """Yield one tree line per artifact; the last line carries ``suffix``."""
    last = len(hierarchy) - 1
    for depth, artifact in enumerate(hierarchy):
        line = f"{indent(depth)}{artifact}"
        if depth == last:
            line += f" ({suffix})"
        yield line


def render_conflict(record: ConflictRecord, bundle_root: ArtifactIdentity) -> str:
    """Render one conflict as the multi-line diagnostic block.

    Example::

        org.slf4j:slf4j-api:jar:2.0.7:compile already included in the bundle
        org.example:my-nar:nar:1.0 (this nar)
        +- org.slf4j:slf4j-api:jar:2.0.7:compile (duplicate)
        +- org.example:parent-nar:nar:1.0:compile
        |  +- org.slf4j:slf4j-api:jar:2.0.7:compile (already included here)
    """
    lines = [
        f"{record.artifact} already included in the bundle",
        f"{bundle_root} (this nar)",
    ]
    lines.extend(render_hierarchy(record.bundle_hierarchy, "duplicate"))
    lines.extend(render_hierarchy(record.nested_hierarchy, "already included here"))
    return "".join(f"{line}\n" for line in lines)


# ── JSON report ──────────────────────────────────────────────────────────


class ArtifactSchema(BaseModel):
    group_id: str
    artifact_id: str
    version: str
    type: str
    classifier: str | None = None
    scope: str | None = None

    @classmethod
    def from_identity(cls, artifact: ArtifactIdentity) -> ArtifactSchema:
        return cls(
            group_id=artifact.group_id,
            artifact_id=artifact.artifact_id,
            version=artifact.version,
            type=artifact.type,
            classifier=artifact.classifier,
            scope=artifact.scope,
        )


class ConflictSchema(BaseModel):
    artifact: ArtifactSchema
    bundle_path: list[ArtifactSchema]
    nested_path: list[ArtifactSchema]


class ConflictReport(BaseModel):
    """Machine-readable form of a duplicate-dependency check."""

    bundle: ArtifactSchema
    nested_bundle: ArtifactSchema | None = None
    conflicts: list[ConflictSchema]
    advice: str | None = None


def build_report(
    records: list[ConflictRecord],
    bundle_root: ArtifactIdentity,
    nested_root: ArtifactIdentity | None = None,
    scope: str = COMPILE_SCOPE,
) -> ConflictReport:
    return ConflictReport(
        bundle=ArtifactSchema.from_identity(bundle_root),
        nested_bundle=ArtifactSchema.from_identity(nested_root) if nested_root else None,
        conflicts=[
            ConflictSchema(
                artifact=ArtifactSchema.from_identity(r.artifact),
                bundle_path=[ArtifactSchema.from_identity(a) for a in r.bundle_hierarchy],
                nested_path=[ArtifactSchema.from_identity(a) for a in r.nested_hierarchy],
            )
            for r in records
        ],
        advice=advice(scope) if records else None,
    )


def conflicts_to_json(
    records: list[ConflictRecord],
    bundle_root: ArtifactIdentity,
    nested_root: ArtifactIdentity | None = None,
    scope: str = COMPILE_SCOPE,
) -> str:
    return build_report(records, bundle_root, nested_root, scope).model_dump_json(indent=2)
