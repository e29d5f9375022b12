"""
Configuration management module.

This module loads the backend settings from the process environment,
reading a local .env file first when one is present.

Author: SafeSteps Team
Date: 2026-10-16
"""

import os
from typing import Dict, Any

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ENV_PATH = os.path.join(BASE_DIR, ".env")

DEFAULT_DATABASE_URL = "sqlite:///./safesteps.db"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


def load_config() -> Dict[str, Any]:
    """Load configuration from the environment.

    Values already set in the process environment win over the .env file.

    Returns:
        Configuration dictionary with all required fields ensured.
    """
    load_dotenv(ENV_PATH)

    config = {
        "database_url": os.getenv("DATABASE_URL"),
        "host": os.getenv("HOST"),
        "port": os.getenv("PORT"),
    }
    return ensure_config_fields(config)


def get_default_config() -> Dict[str, Any]:
    """Get default configuration structure.

    Returns:
        Default configuration dictionary.
    """
    return {
        "database_url": DEFAULT_DATABASE_URL,
        "host": DEFAULT_HOST,
        "port": DEFAULT_PORT,
    }


def ensure_config_fields(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in missing or empty fields with defaults and normalise the port.

    Args:
        config: Configuration dictionary to update.

    Returns:
        Updated configuration dictionary.

    Raises:
        ValueError: If PORT is set but is not an integer.
    """
    for key, default in get_default_config().items():
        if config.get(key) in (None, ""):
            config[key] = default

    config["port"] = int(config["port"])
    return config
