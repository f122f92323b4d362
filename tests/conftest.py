"""Shared pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest

from contentsync.api.config.SiteOptions import SiteOptions
from contentsync.api.mapping.SyncMapping import SyncMapping


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


MARKDOWN_WITH_LINKS = """
# Hello World
![[./test.jpg]]
![Alt Text](./new-image.png)
![Image](./image.png)
[Link](./link.md)
[External Link](https://example.com)
"""


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Keep log files and config lookups out of the real home directory."""
    monkeypatch.setenv("CONTENTSYNC_HOME", str(tmp_path / ".contentsync"))
    monkeypatch.delenv("CONTENTSYNC_CONFIG", raising=False)
    monkeypatch.delenv("CONTENT_SYNC", raising=False)
    monkeypatch.delenv("CONTENT_SYNC_IGNORED", raising=False)


@pytest.fixture
def logger() -> logging.Logger:
    test_logger = logging.getLogger("contentsync.test")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def site(tmp_path) -> SiteOptions:
    """Site layout under tmp_path/site (src/content and public)."""
    root = tmp_path / "site"
    (root / "src" / "content").mkdir(parents=True)
    (root / "public").mkdir()
    return SiteOptions(root_dir=str(root))


@pytest.fixture
def vault(tmp_path) -> Path:
    """Empty source directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def mapping(vault, site) -> SyncMapping:
    return SyncMapping(source=vault, target=site.content_dir, ignored=[])
