"""
Pytest configuration and shared fixtures for gvs tests.
"""

from pathlib import Path

import pytest

from gvs.core.config import GvsConfig
from gvs.versions.registry import COMPLETION_MARKER, LocalVersionRegistry
from gvs.versions.switch import ActiveVersionSwitch


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access or a Go toolchain",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests without external effects")
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def gvs_home(tmp_path) -> Path:
    """Empty fake home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def config(gvs_home) -> GvsConfig:
    """Default configuration rooted at the fake home."""
    return GvsConfig.for_home(gvs_home)


@pytest.fixture
def registry(config) -> LocalVersionRegistry:
    return LocalVersionRegistry(config.versions_root)


@pytest.fixture
def switch(registry, config) -> ActiveVersionSwitch:
    return ActiveVersionSwitch(registry, config.link_path)


@pytest.fixture
def make_release(config):
    """
    Factory creating a fake installed release.

    Example:
        def test_x(make_release):
            release_dir = make_release("go1.22.1")
    """

    def _make(name: str, complete: bool = True) -> Path:
        release_dir = config.versions_root / name
        (release_dir / "bin").mkdir(parents=True)
        go_bin = release_dir / "bin" / "go"
        go_bin.write_text("#!/bin/sh\necho fake go\n")
        go_bin.chmod(0o755)
        if complete:
            (release_dir / COMPLETION_MARKER).touch()
        return release_dir

    return _make
