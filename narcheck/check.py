"""Duplicate NAR dependency check — locate, index, detect, report."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from narcheck.config import CheckSettings
from narcheck.detector import DuplicateDetector
from narcheck.exceptions import DuplicateDependenciesError, PreconditionError
from narcheck.indexer import GraphIndexer
from narcheck.loaders import load_graph
from narcheck.models import COMPILE_SCOPE, NAR_TYPE, ConflictRecord, DependencyNode
from narcheck.report import advice, conflicts_to_json, render_conflict

log = structlog.get_logger("narcheck.check")


@dataclass
class BundleLookup:
    """Result of looking up the nested NAR among the bundle's direct children."""

    node: DependencyNode | None = None
    error: PreconditionError | None = None

    @property
    def ok(self) -> bool:
        return self.node is not None

    def unwrap(self) -> DependencyNode:
        if self.node is None:
            raise self.error or PreconditionError("Project does not have any NAR dependencies.")
        return self.node


def find_bundle_dependency(root: DependencyNode, bundle_type: str = NAR_TYPE) -> BundleLookup:
    """Find the single direct child of ``root`` whose type is ``bundle_type``."""
    candidates = [child for child in root.children if child.artifact.type == bundle_type]
    if not candidates:
        return BundleLookup(error=PreconditionError("Project does not have any NAR dependencies."))
    if len(candidates) > 1:
        names = ", ".join(str(c.artifact) for c in candidates)
        return BundleLookup(
            error=PreconditionError(f"Project has more than one NAR dependency: {names}")
        )
    return BundleLookup(node=candidates[0])


@dataclass
class CheckResult:
    """Outcome of a check run. ``conflicts`` is empty on success."""

    bundle: DependencyNode
    nested_bundle: DependencyNode
    conflicts: list[ConflictRecord]
    scope: str = COMPILE_SCOPE

    @property
    def ok(self) -> bool:
        return not self.conflicts

    def render(self) -> list[str]:
        return [render_conflict(c, self.bundle.artifact) for c in self.conflicts]

    def to_json(self) -> str:
        return conflicts_to_json(
            self.conflicts, self.bundle.artifact, self.nested_bundle.artifact, self.scope
        )


def analyze(root: DependencyNode, settings: CheckSettings | None = None) -> CheckResult:
    """Run the detection on a resolved graph without deciding on failure.

    Raises :class:`PreconditionError` when the bundle has no single NAR
    dependency; duplicates are returned, not raised.
    """
    settings = settings or CheckSettings()
    nested = find_bundle_dependency(root, settings.bundle_type).unwrap()

    index = GraphIndexer(bundle_type=settings.bundle_type, scope=settings.scope).index(root)
    conflicts = DuplicateDetector(scope=settings.scope).find_duplicates(index, nested)
    log.debug(
        "check.analyzed",
        bundle=str(root.artifact),
        nested=str(nested.artifact),
        indexed=len(index),
        conflicts=len(conflicts),
    )
    return CheckResult(
        bundle=root, nested_bundle=nested, conflicts=conflicts, scope=settings.scope
    )


def check_graph(root: DependencyNode, settings: CheckSettings | None = None) -> CheckResult:
    """Analyze ``root`` and fail the check when duplicates are found.

    Every conflict block is logged at error level, followed by the advice.
    """
    result = analyze(root, settings)
    if not result.ok:
        for block in result.render():
            log.error("check.duplicate", message=block)
        log.info("check.advice", message=advice(result.scope))
        raise DuplicateDependenciesError(result)
    return result


def check_file(path: Path, settings: CheckSettings | None = None) -> CheckResult:
    """Load a resolved graph file and run :func:`check_graph` on it."""
    settings = settings or CheckSettings()
    log.info("check.analyzing", source=str(path))
    root = load_graph(path, settings.graph_format)
    return check_graph(root, settings)
