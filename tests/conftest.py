"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path
from typing import Any

import pytest

import printflags.config as config_module
from printflags.logging import MODULE_LOGGER_NAME

POD_MANIFEST = """\
apiVersion: v1
kind: Pod
metadata:
  name: foo
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
"""


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    for var in ("PRINTFLAGS_OUTPUT_FORMAT", "PRINTFLAGS_OUTPUT_DRY_RUN", "PRINTFLAGS_LOG_LEVEL", "PRINTFLAGS_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    config_module._settings = None
    yield
    config_module._settings = None

    logger = logging.getLogger(MODULE_LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def pod() -> dict[str, Any]:
    """A core-group object: Pod "foo"."""
    return {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "foo"}}


@pytest.fixture
def deployment() -> dict[str, Any]:
    """A named-group object: Deployment "web" in apps."""
    return {"apiVersion": "apps/v1", "kind": "Deployment", "metadata": {"name": "web"}}


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """Two-document manifest with a Pod and a Deployment."""
    path = tmp_path / "manifest.yaml"
    path.write_text(POD_MANIFEST, encoding="utf-8")
    return path
