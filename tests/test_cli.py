"""Unit tests for the ft-sync CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from ftsync.cli import main
from ftsync.exceptions import TreeBuildError


@pytest.fixture
def runner():
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(docs_dir):
    """Write a config for the docs fixture next to it."""
    path = docs_dir.parent / "ft-sync.json"
    path.write_text(json.dumps({"root": "docs", "collection": "testuser/index"}))
    return path


class TestMainGroup:
    """Tests for the main CLI group."""

    def test_main_help(self, runner):
        """Test main help shows all commands."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "ft-sync" in result.output
        assert "--config" in result.output
        for command in ["status", "toc", "markdown", "ancestors", "plan"]:
            assert command in result.output

    def test_missing_config(self, runner, tmp_path):
        """Test that a missing config file exits with an error."""
        result = runner.invoke(main, ["-c", str(tmp_path / "nope.json"), "toc"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_default_config_in_cwd(self, runner, config_file):
        """Test that ft-sync.json in the current directory is used."""
        result = runner.invoke(main, ["toc"], env={"FT_SYNC_CONFIG": None})

        assert result.exit_code == 0
        assert "- testuser/index/docs/a" in result.output

    def test_missing_root(self, runner, tmp_path, monkeypatch):
        """Test that a configured root that does not exist fails cleanly."""
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "ft-sync.json"
        config.write_text(json.dumps({"root": "missing", "collection": "c"}))

        result = runner.invoke(main, ["-c", str(config), "status"])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_build_failure_reported(self, runner, config_file):
        """Test that a tree build failure is reported, not raised."""
        with patch(
            "ftsync.config.TreeBuilder.build",
            side_effect=TreeBuildError("Failed to list directory docs/a"),
        ):
            result = runner.invoke(main, ["-c", str(config_file), "markdown"])

        assert result.exit_code == 1
        assert "Failed to list directory docs/a" in result.output


class TestStatusCommand:
    """Tests for the status command."""

    def test_status(self, runner, config_file):
        """Test the status summary."""
        result = runner.invoke(main, ["-c", str(config_file), "status"])

        assert result.exit_code == 0
        assert "Sync Status" in result.output
        assert "testuser/index" in result.output
        assert "Directories" in result.output

    def test_status_json(self, runner, config_file):
        """Test the status summary as JSON."""
        result = runner.invoke(main, ["-c", str(config_file), "--json", "status"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["root"] == "docs"
        assert data["collection"] == "testuser/index"
        assert data["directories"] == 5
        assert data["files"] == 1


class TestRenderCommands:
    """Tests for the toc and markdown commands."""

    def test_toc(self, runner, config_file):
        """Test printing the TOC."""
        result = runner.invoke(main, ["-c", str(config_file), "toc"])

        assert result.exit_code == 0
        assert "- testuser/index/docs/a\n  `a/`\n" in result.output
        assert "          - testuser/index/docs/a/b/c/d/e/f.txt\n" in result.output
        assert "            `f.txt`" in result.output

    def test_toc_to_file(self, runner, config_file, tmp_path):
        """Test writing the TOC to a file."""
        output = tmp_path / "out" / "toc.txt"

        result = runner.invoke(main, ["-c", str(config_file), "toc", "-o", str(output)])

        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert text.startswith("- testuser/index/docs/a\n")
        assert text.endswith("`f.txt`\n")

    def test_markdown(self, runner, config_file):
        """Test printing the markdown list."""
        result = runner.invoke(main, ["-c", str(config_file), "markdown"])

        assert result.exit_code == 0
        assert "- [`a`](testuser/index/docs/a)" in result.output
        assert (
            "          - [`f.txt`](testuser/index/docs/a/b/c/d/e/f.txt)"
            in result.output
        )

    def test_markdown_json(self, runner, config_file):
        """Test markdown output wrapped in JSON."""
        result = runner.invoke(main, ["-c", str(config_file), "--json", "markdown"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["markdown"].splitlines()[0] == "- [`a`](testuser/index/docs/a)"


class TestAncestorsCommand:
    """Tests for the ancestors command."""

    def test_ancestors(self, runner, config_file):
        """Test listing the ancestors of a deep file."""
        result = runner.invoke(
            main, ["-c", str(config_file), "ancestors", "docs/a/b/c/d/e/f.txt"]
        )

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == [
            "docs/a/b/c/d/e",
            "docs/a/b/c/d",
            "docs/a/b/c",
            "docs/a/b",
            "docs/a",
        ]

    def test_ancestors_json(self, runner, config_file):
        """Test the ancestor chain as JSON."""
        result = runner.invoke(
            main, ["-c", str(config_file), "--json", "ancestors", "docs/a/b/"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"path": "docs/a/b", "found": True, "ancestors": ["docs/a"]}

    def test_ancestors_not_found(self, runner, config_file):
        """Test that an unknown path warns but succeeds."""
        result = runner.invoke(
            main, ["-c", str(config_file), "ancestors", "docs/missing.txt"]
        )

        assert result.exit_code == 0
        assert "Path not found in tree: docs/missing.txt" in result.output

    def test_ancestors_direct_child(self, runner, config_file):
        """Test a path directly under the root."""
        result = runner.invoke(main, ["-c", str(config_file), "ancestors", "docs/a"])

        assert result.exit_code == 0
        assert "has no ancestors" in result.output


class TestPlanCommand:
    """Tests for the plan command."""

    def test_plan(self, runner, config_file):
        """Test printing the sync plan."""
        result = runner.invoke(main, ["-c", str(config_file), "plan"])

        assert result.exit_code == 0
        assert "mkdir   testuser/index/docs/a\n" in result.output
        assert (
            "upload  docs/a/b/c/d/e/f.txt -> testuser/index/docs/a/b/c/d/e/f.txt"
            in result.output
        )
        assert "Sync Plan" in result.output

    def test_plan_json(self, runner, config_file):
        """Test the sync plan as JSON."""
        result = runner.invoke(main, ["-c", str(config_file), "--json", "plan"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [step["action"] for step in data["steps"]] == ["mkdir"] * 5 + [
            "upload"
        ]

    def test_plan_empty(self, runner, tmp_path, monkeypatch):
        """Test the plan for an empty directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "empty").mkdir()
        config = Path("ft-sync.json")
        config.write_text(json.dumps({"root": "empty", "collection": "c"}))

        result = runner.invoke(main, ["-c", str(config), "plan"])

        assert result.exit_code == 0
        assert "Nothing to sync." in result.output
