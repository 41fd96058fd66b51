# src/a11y_auditor/utils/config_loader.py
import json
import logging
from typing import Any, Dict, Optional
from a11y_auditor.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def load_config() -> Dict[str, Any]:
    """Loads the application configuration from settings.json."""
    try:
        config_path = PathUtils.get_settings_file()

        if not config_path.exists():
            logger.warning("Configuration file 'settings.json' not found at %s. Using empty config.", config_path)
            return {}

        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)

    except Exception as e:
        logger.error("Failed to load settings.json: %s", e, exc_info=True)
        return {}


CONFIG = load_config()


def get_nested_config(key_path: str, default: Optional[Any] = None, config: Optional[Dict[str, Any]] = None) -> Any:
    """
    Safely retrieves a nested value from the configuration dictionary.

    Uses a dot as a separator, e.g., 'report.indent'.

    Args:
        key_path (str): The dotted path to the configuration value.
        default (Any, optional): The value to return if the key is not found.
        config (dict, optional): Configuration to read from; the global CONFIG by default.

    Returns:
        Any: The configuration value or the provided default.
    """
    value = CONFIG if config is None else config

    for key in key_path.split('.'):
        if isinstance(value, dict):
            value = value.get(key)
        else:
            # The current level is not a dictionary, so the path is invalid
            return default

    return value if value is not None else default
