"""Global pytest configuration and fixtures."""

# Standard library imports
import sys
from pathlib import Path

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Local imports
from datatypes.collections import EntityCollection
from datatypes.config import reset_config
from tests.helpers import make_article


@pytest.fixture(autouse=True)
def reset_datatypes_config(monkeypatch):
    """Clear cached configuration and library env vars between tests."""
    for name in (
        "DATATYPES_LOCALE",
        "DATATYPES_DEFAULT_CAPACITY",
        "DATATYPES_LOG_LEVEL",
        "DATATYPES_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def articles():
    """Three articles with IDs 1, 2 and 3."""
    return [make_article(1, "First"), make_article(2, "Second"), make_article(3, "Third")]


@pytest.fixture
def collection(articles) -> EntityCollection:
    """Entity collection holding the three sample articles."""
    return EntityCollection(articles)


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
