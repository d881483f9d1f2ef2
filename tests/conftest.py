import os

import pytest

# Keep a developer's .env or shell overrides out of the expected values.
for key in list(os.environ):
    if key.startswith("NUMEROCALC_"):
        del os.environ[key]

from numerocalc.config import settings  # noqa: E402


@pytest.fixture()
def name_intensity(monkeypatch):
    monkeypatch.setattr(settings, "intensity_source", "name")
    yield settings
