"""
Configuration Module for Blog Data.

Loads settings from config.yml: where the blog payload lives, whether post
categories must reference the category list, the server bind address, CORS
origins and the log file.

Usage:
    >>> from config import load_config, get_content_settings
    >>> config = load_config()
    >>> settings = get_content_settings(config)
    >>> settings["strict_categories"]
    False
"""
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml


logger = logging.getLogger(__name__)
DEFAULT_BIND = "0.0.0.0:5000"
DEFAULT_LOG_FILE = "blogdata.log"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from config.yml file.

    Args:
        config_path: Path to config.yml file. If None, looks in current directory
                    and parent directories, then in the project root.

    Returns:
        Dictionary containing configuration settings. Sections missing from
        the file are filled in from get_default_config().

    Example:
        >>> config = load_config()
        >>> config["server"]["bind"]
        '0.0.0.0:5000'
    """
    if config_path is None:
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            candidate = parent / "config.yml"
            if candidate.exists():
                config_path = str(candidate)
                break

        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            candidate = project_root / "config.yml"
            if candidate.exists():
                config_path = str(candidate)

    if config_path is None:
        logger.warning("config.yml not found, using default configuration")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Configuration file not found: {config_path}")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration file: {e}")
        return get_default_config()

    if not isinstance(config, dict):
        logger.warning("Configuration root must be a mapping, using default configuration")
        return get_default_config()

    logger.info(f"Loaded configuration from {config_path}")
    return _merge_defaults(config)


def _merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill sections and keys missing from a loaded config with defaults."""
    merged = get_default_config()
    for section, value in config.items():
        if isinstance(value, dict) and isinstance(merged.get(section), dict):
            merged[section].update(value)
        else:
            merged[section] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Return default configuration when config.yml is not available.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "content": {
            "path": None,
            "strict_categories": False
        },
        "server": {
            "bind": DEFAULT_BIND
        },
        "cors": {
            "enabled": False,
            "origins": []
        },
        "logging": {
            "file": DEFAULT_LOG_FILE
        }
    }


def get_content_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated content settings from config.

    A relative content path is kept relative to the working directory. An
    empty or non-string path means the bundled payload.

    Returns:
        Dictionary with "path" (str or None) and "strict_categories" (bool)
    """
    content_config = config.get("content") or {}
    if not isinstance(content_config, dict):
        logger.warning(f"Invalid content configuration {content_config!r}; using defaults")
        content_config = {}

    path = content_config.get("path")
    if path is not None and (not isinstance(path, str) or not path.strip()):
        logger.warning(f"Invalid content path {path!r}; using bundled blog data")
        path = None

    return {
        "path": path.strip() if path else None,
        "strict_categories": bool(content_config.get("strict_categories", False))
    }
