"""Settings for catalog2model, read from CATALOG2MODEL_* environment variables.

A ``.env`` file in the working directory or one of its parents is loaded
first; variables already set in the environment win over it.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

ENV_PREFIX = "CATALOG2MODEL_"


def load_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """Load the nearest .env file at or above start (cwd by default)."""
    directory = (start or Path.cwd()).resolve()
    for candidate in [directory, *directory.parents]:
        env_path = candidate / ".env"
        if env_path.is_file():
            load_dotenv(env_path, override=False)
            return env_path
    return None


class Settings(BaseSettings):
    """Knobs of an introspection run and of its logging."""

    # Keep column defaults containing a double quote (engine expressions)
    keep_quoted_defaults: bool = False

    # Appended to collection-valued navigation column names
    plural_suffix: str = "s"

    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        load_env_file()
        super().__init__(**kwargs)
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, created on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
