"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the repository root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.station_list.loader import StationLoader
from site_builder.config import BuildConfig
from tests.fixtures.sample_stations import (
    SAMPLE_LIST_JSON,
    SAMPLE_README,
    SAMPLE_SPLIT_README,
    SAMPLE_TEMPLATE,
    get_station_batch,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def loader():
    """Create a lenient station loader."""
    return StationLoader()


@pytest.fixture
def strict_loader():
    """Create a loader that fails on malformed entries."""
    return StationLoader(strict=True)


@pytest.fixture
def stations():
    """The sample stations as records."""
    return get_station_batch()


# ============================================================================
# Site Directory Fixtures
# ============================================================================


@pytest.fixture
def site_dir(tmp_path):
    """A working directory with list.json, README.MD and index.html."""
    (tmp_path / "list.json").write_text(SAMPLE_LIST_JSON, encoding="utf-8")
    (tmp_path / "README.MD").write_text(SAMPLE_README, encoding="utf-8")
    (tmp_path / "index.html").write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def split_site_dir(site_dir):
    """Like site_dir, but with a README laid out for free and paid tables."""
    (site_dir / "README.MD").write_text(SAMPLE_SPLIT_README, encoding="utf-8")
    return site_dir


@pytest.fixture
def build_config(site_dir):
    """Default configuration rooted at the sample site."""
    return BuildConfig(root=str(site_dir))
