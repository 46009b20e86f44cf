# cipherdesk/config/loader.py
import json
import os
from typing import Optional

from pydantic import ValidationError
from loguru import logger

from .schema import AppConfig
from .paths import get_user_config_file

LOG_LEVEL_ENV = "CIPHERDESK_LOG_LEVEL"

_cached_config: Optional[AppConfig] = None

def _apply_env_overrides(data: dict) -> dict:
    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        logger.debug(f"Log level overridden by {LOG_LEVEL_ENV}={level}")
        data = {**data, "log_level": level}
    return data

def load_config() -> AppConfig:
    """Loads the application configuration. The file is only ever read, never written."""
    global _cached_config
    if _cached_config:
        return _cached_config

    config_path = get_user_config_file()
    loaded_data = {}

    if config_path.exists():
        logger.info(f"Loading user configuration from: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded_data = json.load(f)
            if not isinstance(loaded_data, dict):
                logger.error(f"Config file {config_path} does not contain a JSON object. Ignoring it.")
                loaded_data = {}
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load user config file {config_path}: {e}")
            loaded_data = {} # Fallback to defaults
    else:
        logger.info("No user config found. Using default settings.")

    loaded_data = _apply_env_overrides(loaded_data)

    try:
        config = AppConfig(**loaded_data)
        logger.info("Configuration loaded successfully.")
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        logger.warning("Falling back to default configuration.")
        config = AppConfig()
    _cached_config = config
    return config

def get_config() -> AppConfig:
    """Returns the cached configuration object, loading if necessary."""
    if _cached_config is None:
        return load_config()
    return _cached_config

def reset_config_cache() -> None:
    """Forgets the cached configuration so the next get_config() reloads it."""
    global _cached_config
    _cached_config = None
