"""Shared pytest fixtures for narcheck tests."""

from __future__ import annotations

import pytest

from narcheck.models import ArtifactIdentity, DependencyNode


def _art(name: str, scope: str | None = "compile", type: str = "jar", **kw) -> ArtifactIdentity:
    """Shorthand identity with ``org.example`` group and version ``1.0``."""
    return ArtifactIdentity(
        group_id=kw.pop("group_id", "org.example"),
        artifact_id=name,
        version=kw.pop("version", "1.0"),
        type=type,
        scope=scope,
        **kw,
    )


def _node(artifact: ArtifactIdentity, *children: DependencyNode) -> DependencyNode:
    return DependencyNode(artifact, list(children))


@pytest.fixture
def art():
    """Identity factory: ``art("l1")`` -> ``org.example:l1:jar:1.0:compile``."""
    return _art


@pytest.fixture
def node():
    return _node


@pytest.fixture
def example_graph():
    """B -> (L1, E); E -> (L1, L2). Returns (root, nested_root)."""
    nested = _node(_art("e", type="nar"), _node(_art("l1")), _node(_art("l2")))
    root = _node(_art("b", scope=None, type="nar"), _node(_art("l1")), nested)
    return root, nested


SAMPLE_TREE = """\
[INFO] Scanning for projects...
[INFO]
[INFO] --- maven-dependency-plugin:3.6.1:tree (default-cli) @ nifi-foo-nar ---
[INFO] org.apache.nifi:nifi-foo-nar:nar:1.0.0
[INFO] +- org.apache.nifi:nifi-foo-processors:jar:1.0.0:compile
[INFO] |  +- commons-codec:commons-codec:jar:1.15:compile
[INFO] |  \\- org.slf4j:slf4j-api:jar:2.0.7:provided
[INFO] +- com.google.guava:guava:jar:32.1.2-jre:compile
[INFO] +- commons-io:commons-io:jar:2.11.0:compile
[INFO] \\- org.apache.nifi:nifi-standard-services-api-nar:nar:1.0.0:compile
[INFO]    +- org.apache.nifi:nifi-ssl-context-service-api:jar:1.0.0:compile
[INFO]    |  \\- com.google.guava:guava:jar:32.1.2-jre:compile
[INFO]    +- commons-io:commons-io:jar:2.11.0:compile
[INFO]    \\- commons-codec:commons-codec:jar:1.15:compile
[INFO] ------------------------------------------------------------------------
[INFO] BUILD SUCCESS
"""


@pytest.fixture
def sample_tree() -> str:
    return SAMPLE_TREE
