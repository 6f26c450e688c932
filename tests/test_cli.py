"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest
import yaml
from typer.testing import CliRunner

from nestconf.cli.__main__ import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path):
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "config.py").write_text(
        "from nestconf import Config\n"
        "def build(c):\n"
        "    c.set('server.port', 4000)\n"
        "    c.push('build.steps', 'lint')\n"
        "config = Config.create(build)\n"
    )
    return tmp_path


class TestCli:
    """Test suite for the CLI commands."""

    def test_get(self, project):
        """Test reading a value."""
        result = runner.invoke(app, ["get", "server.port", "--base-dir", str(project)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"key": "server.port", "value": 4000}

    def test_get_default(self, project):
        """Test --default for missing values."""
        result = runner.invoke(
            app, ["get", "server.host", "--base-dir", str(project), "--default", "localhost"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["value"] == "localhost"

    def test_get_required_missing(self, project):
        """Test --required exits non-zero on a missing value."""
        result = runner.invoke(
            app, ["get", "server.host", "--base-dir", str(project), "--required"]
        )
        assert result.exit_code == 1
        assert "Missing required config value" in result.output

    def test_dump_json(self, project):
        """Test dumping the config as JSON."""
        result = runner.invoke(app, ["dump", "--base-dir", str(project)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "server": {"port": 4000},
            "build": {"steps": ["lint"]},
        }

    def test_dump_yaml_flat(self, project):
        """Test dumping flattened YAML."""
        result = runner.invoke(
            app, ["dump", "--base-dir", str(project), "--format", "yaml", "--flat"]
        )
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout) == {
            "server.port": 4000,
            "build.steps": ["lint"],
        }

    def test_dump_unknown_format(self, project):
        """Test unsupported formats are rejected."""
        result = runner.invoke(app, ["dump", "--base-dir", str(project), "--format", "toml"])
        assert result.exit_code == 2

    def test_dump_without_project(self, tmp_path):
        """Test an empty config is dumped when nothing is found."""
        result = runner.invoke(app, ["dump", "--base-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {}

    def test_env(self, project, monkeypatch):
        """Test printing the environment name."""
        monkeypatch.setenv("ENV", "production")
        result = runner.invoke(app, ["env", "--base-dir", str(project)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "production"

    def test_broken_module(self, tmp_path):
        """Test load errors exit non-zero."""
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "config.py").write_text("raise ValueError('bad config')\n")
        result = runner.invoke(app, ["dump", "--base-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "bad config" in result.output
