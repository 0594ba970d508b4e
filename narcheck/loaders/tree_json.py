"""Loader for ``mvn dependency:tree -DoutputType=json`` output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from narcheck.exceptions import GraphBuildError
from narcheck.loaders.registry import register_loader
from narcheck.models import ArtifactIdentity, DependencyNode


class JsonDependencyNode(BaseModel):
    """One node of the plugin's JSON tree. Empty strings mean "absent"."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    group_id: str = Field(alias="groupId", min_length=1)
    artifact_id: str = Field(alias="artifactId", min_length=1)
    version: str = Field(min_length=1)
    type: str = "jar"
    scope: str = ""
    classifier: str = ""
    optional: bool | str = False
    children: list[JsonDependencyNode] = Field(default_factory=list)

    def to_node(self) -> DependencyNode:
        artifact = ArtifactIdentity(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
            type=self.type or "jar",
            classifier=self.classifier or None,
            scope=self.scope or None,
        )
        return DependencyNode(artifact, [child.to_node() for child in self.children])


class DependencyTreeJsonLoader:
    format_name = "tree-json"
    file_patterns = ["*.json"]

    def load(self, content: str, source: str) -> DependencyNode:
        try:
            tree = JsonDependencyNode.model_validate_json(content)
        except ValidationError as e:
            raise GraphBuildError(source, f"invalid dependency tree JSON ({e.error_count()} errors)") from e
        return tree.to_node()


register_loader(DependencyTreeJsonLoader())
