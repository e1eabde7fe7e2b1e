"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict[str, Any]:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_project_uses_uv_style_metadata_without_poetry() -> None:
    pyproject = _pyproject()
    dev_dependencies = pyproject["dependency-groups"]["dev"]

    assert not any(entry.startswith("black") for entry in dev_dependencies)
    assert "black" not in pyproject["tool"]
    assert "poetry" not in pyproject["tool"]
    assert pyproject["build-system"]["build-backend"] != "poetry.core.masonry.api"


def test_runtime_dependencies_are_generation_and_configuration_only() -> None:
    dependencies = _pyproject()["project"]["dependencies"]
    names = {re.split(r"[<>=!~ ]", entry, maxsplit=1)[0].lower() for entry in dependencies}

    assert names == {"hypothesis", "pyyaml"}
