"""
Global test configuration.
"""

import os

import pytest

from reading_coach.config import get_settings, warn_missing_api_key


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
    config.addinivalue_line(
        "markers", "contract: behavioral guarantees of the public capabilities"
    )
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep the real environment for this test"
    )


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_gemini_env(request, monkeypatch):
    """Ensure a clean key/model environment for each test.

    Removes GEMINI_* variables and the bare API_KEY, and resets the cached
    process-wide settings and the one-time key warning for every test.

    Escape hatch: @pytest.mark.allow_env_pollution keeps the current env.
    """
    get_settings.cache_clear()
    warn_missing_api_key.cache_clear()
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("GEMINI_") or key == "API_KEY":
                monkeypatch.delenv(key, raising=False)
    yield
    get_settings.cache_clear()
    warn_missing_api_key.cache_clear()
