"""Tests for pyproject.toml and package layout."""
from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


class TestPackage:
    """Test that the package is importable."""

    def test_version_defined(self):
        import piccy_tts
        assert isinstance(piccy_tts.__version__, str)
        assert len(piccy_tts.__version__) > 0

    def test_core_modules_importable(self):
        from piccy_tts.api import middleware, routes, schemas
        from piccy_tts.core import config, logging
        from piccy_tts.services import piccy_client, speech_service

        for module in (middleware, routes, schemas, config, logging, piccy_client, speech_service):
            assert module is not None


class TestCLIEntryPoint:
    """Test the CLI entry point."""

    def test_cli_help_exits_zero(self):
        result = subprocess.run(
            [sys.executable, "-m", "piccy_tts.cli", "--help"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent,
            env={**os.environ, "PYTHONPATH": str(Path(__file__).parent.parent / "src")},
        )
        assert result.returncode == 0
        assert "piccy-tts CLI" in result.stdout


class TestPyprojectToml:
    """Test pyproject.toml configuration."""

    @pytest.fixture
    def data(self):
        tomllib = pytest.importorskip("tomllib")
        return tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))

    def test_name(self, data):
        assert data["project"]["name"] == "piccy-tts"

    def test_dependencies(self, data):
        dep_names = [d.split(">=")[0].split("[")[0] for d in data["project"]["dependencies"]]
        for name in ("fastapi", "uvicorn", "pydantic", "httpx", "pyyaml"):
            assert name in dep_names

    def test_script(self, data):
        assert data["project"]["scripts"]["piccy-tts"] == "piccy_tts.cli:main"
