# src/clockface/config.py

import json
import logging
import os

import yaml

logger = logging.getLogger("Config")

DEFAULT_PREFERENCE_PATH = os.path.join(os.path.expanduser("~"), ".clockface", "preference.json")


def load_config(config_path):
    """
    Load a YAML-based configuration file.
    Returns {} if the file is missing or cannot be parsed.
    """
    config = {}
    if os.path.isfile(config_path):
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
            logger.debug(f"Configuration loaded from {config_path}.")
        except yaml.YAMLError as e:
            logger.error(f"Error loading config file {config_path}: {e}")
    else:
        logger.warning(f"Config file {config_path} not found. Using default configuration.")
    if not isinstance(config, dict):
        logger.error(f"Config file {config_path} is not a mapping; ignoring it.")
        config = {}
    return config


def load_preferences(path=DEFAULT_PREFERENCE_PATH):
    """
    Load user preferences (e.g. clock colors, continuous_redraw) from a JSON file, if present.
    Returns {} if the file is not found or if there's an error parsing JSON.
    """
    if not os.path.exists(path):
        logger.debug(f"No preference file at {path}, returning defaults.")
        return {}
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.error(f"Error loading JSON from {path}, using defaults. Error={e}")
        return {}
    if not isinstance(data, dict):
        logger.error(f"Preference file {path} is not a JSON object, using defaults.")
        return {}
    logger.info(f"Loaded preferences from {path}: {data}")
    return data


def merged_config(config_path, preference_path=DEFAULT_PREFERENCE_PATH):
    """YAML config with the JSON preferences layered on top (per top-level key)."""
    config = load_config(config_path)
    config.update(load_preferences(preference_path))
    return config
