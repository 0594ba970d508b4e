"""narcheck: detect dependencies packaged twice by a NAR and its parent NAR."""

from narcheck.check import (
    BundleLookup,
    CheckResult,
    analyze,
    check_file,
    check_graph,
    find_bundle_dependency,
)
from narcheck.detector import DuplicateDetector
from narcheck.indexer import GraphIndexer
from narcheck.models import (
    ArtifactIdentity,
    ConflictRecord,
    DependencyIndex,
    DependencyNode,
    Hierarchy,
)

__all__ = [
    "ArtifactIdentity",
    "BundleLookup",
    "CheckResult",
    "ConflictRecord",
    "DependencyIndex",
    "DependencyNode",
    "DuplicateDetector",
    "GraphIndexer",
    "Hierarchy",
    "analyze",
    "check_file",
    "check_graph",
    "find_bundle_dependency",
]
