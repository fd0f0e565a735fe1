"""
Pytest configuration for sports_api. Seed the upstream key and reset the cached settings per test.
"""
import os

import pytest

from sports_api import config as config_module

os.environ["SPORTS_API_KEY"] = "sports-test-key"
os.environ.pop("SPORTS_API_BASE_URL", None)


@pytest.fixture(autouse=True)
def reset_settings():
    config_module._settings = None
    yield
    config_module._settings = None
