"""Tests for CLI commands."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from narcheck.check import check_file
from narcheck.cli import EXIT_DUPLICATES, EXIT_ERROR, main
from narcheck.report import ADVICE, advice

CLEAN_TREE = """\
org.example:b:nar:1.0
+- org.example:l1:jar:1.0:compile
\\- org.example:e:nar:1.0:compile
   \\- org.example:l2:jar:1.0:compile
"""

DUPLICATE_TREE = """\
org.example:b:nar:1.0
+- org.example:l1:jar:1.0:compile
\\- org.example:e:nar:1.0:compile
   +- org.example:l1:jar:1.0:compile
   \\- org.example:l2:jar:1.0:compile
"""


def _quiet_setup(level=None):
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("narcheck.cli.setup_logging", _quiet_setup):
        yield
    structlog.reset_defaults()


@pytest.fixture
def write_tree(tmp_path):
    def _write(content: str, name: str = "tree.txt"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write


class TestCheckCommand:
    def test_clean(self, write_tree):
        result = CliRunner().invoke(main, ["check", write_tree(CLEAN_TREE)])
        assert result.exit_code == 0
        assert "No duplicate dependencies found." in result.output

    def test_duplicates(self, write_tree):
        result = CliRunner().invoke(main, ["check", write_tree(DUPLICATE_TREE)])
        assert result.exit_code == EXIT_DUPLICATES
        assert "org.example:l1:jar:1.0:compile already included in the bundle" in result.output
        assert "org.example:b:nar:1.0 (this nar)" in result.output
        assert "+- org.example:l1:jar:1.0:compile (duplicate)" in result.output
        assert "|  +- org.example:l1:jar:1.0:compile (already included here)" in result.output
        assert ADVICE in result.output

    def test_json_output(self, write_tree):
        result = CliRunner().invoke(main, ["check", write_tree(DUPLICATE_TREE), "--json"])
        assert result.exit_code == EXIT_DUPLICATES
        data = json.loads(result.output)
        assert data["bundle"]["artifact_id"] == "b"
        assert data["nested_bundle"]["artifact_id"] == "e"
        assert [c["artifact"]["artifact_id"] for c in data["conflicts"]] == ["l1"]

    def test_json_output_clean(self, write_tree):
        result = CliRunner().invoke(main, ["check", write_tree(CLEAN_TREE), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["conflicts"] == []

    def test_no_nar_dependency(self, write_tree):
        tree = "org.example:b:nar:1.0\n\\- org.example:l1:jar:1.0:compile\n"
        result = CliRunner().invoke(main, ["check", write_tree(tree)])
        assert result.exit_code == EXIT_ERROR
        assert "Project does not have any NAR dependencies." in result.output

    def test_unparseable_graph(self, write_tree):
        result = CliRunner().invoke(main, ["check", write_tree("{", name="tree.json")])
        assert result.exit_code == EXIT_ERROR
        assert "Cannot build project dependency tree" in result.output

    def test_explicit_format(self, write_tree):
        path = write_tree(DUPLICATE_TREE, name="tree.json")
        result = CliRunner().invoke(main, ["check", path, "--format", "tree-text"])
        assert result.exit_code == EXIT_DUPLICATES

    def test_bundle_type_option(self, write_tree):
        tree = DUPLICATE_TREE.replace(":nar:", ":zip:")
        assert CliRunner().invoke(main, ["check", write_tree(tree)]).exit_code == EXIT_ERROR
        result = CliRunner().invoke(main, ["check", write_tree(tree), "--bundle-type", "zip"])
        assert result.exit_code == EXIT_DUPLICATES

    def test_bundle_type_from_env(self, write_tree):
        tree = DUPLICATE_TREE.replace(":nar:", ":zip:")
        runner = CliRunner(env={"NARCHECK_BUNDLE_TYPE": "zip"})
        assert runner.invoke(main, ["check", write_tree(tree)]).exit_code == EXIT_DUPLICATES

    def test_runs_through_check_file(self, write_tree):
        with patch("narcheck.cli.check_file", wraps=check_file) as spy:
            result = CliRunner().invoke(main, ["check", write_tree(DUPLICATE_TREE)])
        assert result.exit_code == EXIT_DUPLICATES
        spy.assert_called_once()

    def test_advice_follows_scope_from_env(self, write_tree):
        tree = DUPLICATE_TREE.replace(":compile", ":runtime")
        runner = CliRunner(env={"NARCHECK_SCOPE": "runtime"})
        result = runner.invoke(main, ["check", write_tree(tree)])
        assert result.exit_code == EXIT_DUPLICATES
        assert advice("runtime") in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(main, ["check", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2


class TestFormatsCommand:
    def test_lists_loaders(self):
        result = CliRunner().invoke(main, ["formats"])
        assert result.exit_code == 0
        assert "tree-text" in result.output
        assert "tree-json" in result.output
