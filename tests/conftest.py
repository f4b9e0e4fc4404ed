from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterator
from pathlib import Path

import pytest

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.repos",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Runs for every test so log output goes to stderr at WARNING level and
    does not mix with stdout assertions.
    """
    from vcsdriver.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture
def temp_dir(tmp_path: Path) -> Iterator[Path]:
    """Temporary directory; restores the cwd for tests that chdir."""
    original_cwd = os.getcwd()
    yield tmp_path
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all VCSDRIVER_ environment variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("VCSDRIVER_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)
