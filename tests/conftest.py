"""
Pytest configuration and shared fixtures for fast-rules tests.
"""

import pytest
from faker import Faker

from fast_rules.core import localization

fake = Faker()


@pytest.fixture(autouse=True)
def isolated_localization(tmp_path):
    """Fresh translation state per test, with an empty user lang dir."""
    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    localization.clear_cache()
    localization.set_locale_path(str(lang_dir))
    localization.set_locale("en")
    localization.set_enabled(True)
    yield lang_dir
    localization.clear_cache()
    localization.set_locale("en")
    localization.set_enabled(True)


@pytest.fixture
def sample_person():
    """Provide a sample object to validate."""
    return {
        "name": fake.name(),
        "email": fake.email(),
        "company": fake.company(),
    }

