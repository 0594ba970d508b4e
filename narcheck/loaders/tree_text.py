"""Loader for the text output of ``mvn dependency:tree``."""

from __future__ import annotations

import re

from narcheck.exceptions import GraphBuildError
from narcheck.loaders.registry import register_loader
from narcheck.models import ArtifactIdentity, DependencyNode

# Maven log prefix, e.g. "[INFO] "
_LOG_PREFIX_RE = re.compile(r"^\[[A-Z]+\]\s?")

# Tree line: "|  |  +- g:a:t:v:scope", "   \- g:a:t:v:scope"
_TREE_LINE_RE = re.compile(r"^((?:[| ]  )*)([+\\]- )(.+)$")

# Bare coordinates: at least four colon-separated segments, no whitespace
_COORDS_RE = re.compile(r"^[^\s:()]+(?::[^\s:()]+){3,5}$")

_INDENT_WIDTH = 3


def _parse_coordinates(token: str, *, with_scope: bool) -> ArtifactIdentity | None:
    """Parse ``g:a:t[:c]:v[:scope]`` into an identity.

    The root of a tree carries no scope; every other line does.
    """
    parts = token.split(":")
    scope = None
    if with_scope:
        if len(parts) not in (5, 6):
            return None
        scope = parts.pop()
    elif len(parts) not in (4, 5):
        return None

    if len(parts) == 5:
        group_id, artifact_id, type_, classifier, version = parts
    else:
        group_id, artifact_id, type_, version = parts
        classifier = None
    return ArtifactIdentity(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        type=type_,
        classifier=classifier,
        scope=scope,
    )


class DependencyTreeTextLoader:
    format_name = "tree-text"
    file_patterns = ["*.txt", "*.tree", "*.log"]

    def load(self, content: str, source: str) -> DependencyNode:
        root: DependencyNode | None = None
        # stack[d] is the most recent node seen at depth d
        stack: list[DependencyNode] = []

        for lineno, raw_line in enumerate(content.splitlines(), start=1):
            line = _LOG_PREFIX_RE.sub("", raw_line).rstrip()
            if not line:
                continue

            m = _TREE_LINE_RE.match(line)
            if m is None:
                if root is not None:
                    # First non-tree line after the root ends the tree
                    break
                token = line.split(" ", 1)[0]
                if not _COORDS_RE.match(token):
                    continue
                artifact = _parse_coordinates(token, with_scope=False)
                if artifact is None:
                    continue
                root = DependencyNode(artifact)
                stack = [root]
                continue

            if root is None:
                raise GraphBuildError(source, f"line {lineno}: tree entry before the root artifact")

            prefix, _branch, body = m.groups()
            # Verbose trees list omitted nodes in parentheses
            if body.startswith("("):
                continue

            depth = len(prefix) // _INDENT_WIDTH + 1
            if depth > len(stack):
                raise GraphBuildError(source, f"line {lineno}: unexpected indentation")

            token = body.split(" ", 1)[0]
            artifact = _parse_coordinates(token, with_scope=True)
            if artifact is None:
                raise GraphBuildError(source, f"line {lineno}: malformed coordinates {token!r}")

            node = DependencyNode(artifact)
            stack[depth - 1].children.append(node)
            del stack[depth:]
            stack.append(node)

        if root is None:
            raise GraphBuildError(source, "no root artifact found")
        return root


register_loader(DependencyTreeTextLoader())
