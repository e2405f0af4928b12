import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

VALID_LOG_LEVELS = ("debug", "info", "warn", "warning", "error")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "info"
    seed_sample_data: bool = True


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Builds AppConfig from environment variables.

    Call ``load_dotenv()`` first if values should come from a .env file.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ

    return AppConfig(
        log_level=_log_level(env.get("LOG_LEVEL", "info")),
        seed_sample_data=_flag("SEED_SAMPLE_DATA", env.get("SEED_SAMPLE_DATA", "true")),
    )


def _log_level(raw: str) -> str:
    level = raw.strip().lower()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid LOG_LEVEL: {raw}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )
    return level


def _flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid {name}: {raw}. Expected a boolean such as true/false.")
