from pathlib import Path

import pytest

from models.context import PublishingContext
from settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample card description files."""
    return FIXTURES_DIR


@pytest.fixture
def context() -> PublishingContext:
    """Publishing context for a site served from the domain root."""
    return PublishingContext(site_url="/")


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only; ignores any CARDKIT_* variables in the environment."""
    return Settings(_env_file=None, site_url="/", log_level="INFO")


@pytest.fixture
def tmp_settings(tmp_path: Path) -> Settings:
    """Settings writing output into a fresh temp directory."""
    return Settings(_env_file=None, output_dir=tmp_path / "output")
