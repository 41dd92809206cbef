"""Runtime settings for the calculator library.

Only defaults live here; no computed result is ever stored.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Thread engagement as a fraction of full thread (0..1]
    DEFAULT_THREAD_ENGAGEMENT: float = 0.75
    # Common sine bar lengths are 5" and 10"
    DEFAULT_SINE_BAR_LENGTH: float = 5.0
    # grade2|grade5|grade8
    DEFAULT_BOLT_GRADE: str = "grade5"

    model_config = {
        "env_prefix": "SPECFOUNDRY_",
        "env_file": ".env",
        "case_sensitive": False,
    }


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = Settings()
    return _settings_cache


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_cache
    _settings_cache = None
