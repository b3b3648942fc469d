"""
Configuration
=============

Settings read once from the environment (populated from .env by the CLI).

Variables:
- YT_API_KEY          YouTube Data API key (required)
- TVPROMO_OUTPUT_DIR  Folder that receives the generated post (required)
- TVPROMO_LOG_LEVEL   Logging level name (optional, default WARNING)
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

from .errors import ConfigurationError

API_KEY_VAR = "YT_API_KEY"
OUTPUT_DIR_VAR = "TVPROMO_OUTPUT_DIR"
LOG_LEVEL_VAR = "TVPROMO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Process-wide settings handed to the pipeline."""
    youtube_api_key: str
    output_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL


def _require(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigurationError(f"{name} value is missing from the environment")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ConfigurationError if a required value is missing or blank
    """
    env = os.environ if environ is None else environ
    return Settings(
        youtube_api_key=_require(env, API_KEY_VAR),
        output_dir=Path(_require(env, OUTPUT_DIR_VAR)),
        log_level=(env.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).strip().upper(),
    )
