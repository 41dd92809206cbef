import os

import pytest

from specfoundry.core.config import reset_settings

# List of environment variables that may be modified by tests
_ENV_VARS_TO_ISOLATE = [
    "SPECFOUNDRY_LOG_LEVEL",
    "SPECFOUNDRY_LOG_JSON",
    "SPECFOUNDRY_DEFAULT_THREAD_ENGAGEMENT",
    "SPECFOUNDRY_DEFAULT_SINE_BAR_LENGTH",
    "SPECFOUNDRY_DEFAULT_BOLT_GRADE",
]


@pytest.fixture(autouse=True)
def env_isolation():
    """Isolate environment variables and cached settings between tests."""
    backup = {k: os.environ.get(k) for k in _ENV_VARS_TO_ISOLATE}
    reset_settings()
    try:
        yield
    finally:
        for k, v in backup.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        reset_settings()
