"""
Pytest configuration for livekit_token. Seed LiveKit env vars and reset the cached settings per test.
"""
import os

import pytest

from livekit_token import config as config_module

os.environ["LIVEKIT_API_KEY"] = "APItestkey"
# HS256 secret >= 32 bytes so PyJWT does not warn about key length
os.environ["LIVEKIT_API_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["LIVEKIT_URL"] = "wss://livekit.test.example"


@pytest.fixture(autouse=True)
def reset_settings():
    config_module._settings = None
    yield
    config_module._settings = None
