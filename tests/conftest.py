"""
Pytest fixtures for the generator tests.

Layout used by most tests:
    tmp_path/
      app/            ← BOILERPLATE_HOME (settings, default templates/)
        templates/
      work/           ← current working directory
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from boilerplate.domain.constants import HOME_ENV_VAR

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def app_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Application base directory, exported as BOILERPLATE_HOME."""
    home = tmp_path / "app"
    home.mkdir()
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home.resolve()


@pytest.fixture
def templates_root(app_home: Path) -> Path:
    """Default templates root: <app_home>/templates."""
    root = app_home / "templates"
    root.mkdir()
    return root


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory for the test (chdir'd into)."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return Path.cwd()


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def write_record() -> Callable[..., Path]:
    """
    Write a template record.

    Usage:
        write_record(root / "cqrs-query", "query", fileName="Query", template="...")
    """

    def _write(directory: Path, name: str, **fields: Any) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}.json"
        path.write_text(json.dumps(fields), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def query_record() -> dict[str, str]:
    """Single CQRS query record."""
    return {
        "fileName": "GetUser",
        "fileExtension": "cs",
        "outputDirectory": "output",
        "template": "public class {@QueryName}Query{}",
    }
