"""Custom exceptions for narcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from narcheck.check import CheckResult


class NarCheckError(Exception):
    """Base exception for all narcheck errors."""


class PreconditionError(NarCheckError):
    """Raised when the bundle does not have exactly one NAR dependency."""


class GraphBuildError(NarCheckError):
    """Raised when the dependency graph cannot be built from its source."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot build project dependency tree from {source}: {reason}")


class DuplicateDependenciesError(NarCheckError):
    """Raised by the check when the nested NAR repackages bundle dependencies."""

    def __init__(self, result: CheckResult):
        self.result = result
        self.conflicts = result.conflicts
        super().__init__("Found duplicate dependencies")
