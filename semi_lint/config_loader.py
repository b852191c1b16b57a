# === semi_lint/config_loader.py ===

import yaml
import logging
from typing import Optional

from semi_lint.models import LintConfig

CONFIG_KEYS = ("require_return_terminator",)


class ConfigError(ValueError):
    """A config file parsed fine but holds a value of the wrong type."""


def load_config_file(file_path: str) -> Optional[dict]:
    """
    Loads a YAML config file into a dict. Returns None (after a warning) if the
    file can't be read, doesn't parse, or isn't a mapping.
    """
    logger = logging.getLogger(__name__)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw_text = f.read()
    except OSError as e:
        logger.warning(f"Could not open config '{file_path}': {e}")
        return None

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as ye:
        logger.warning(f"Could not parse config '{file_path}': {ye}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config '{file_path}': expected a mapping, got {type(data).__name__}")
        return None

    for key in data:
        if key not in CONFIG_KEYS:
            logger.warning(f"Unknown config key '{key}' in '{file_path}'")
    return data


def build_config(config_path: Optional[str] = None, allow_return_no_semi: bool = False) -> LintConfig:
    """
    Default → config file → command-line flag, later sources winning.
    """
    require_return = True

    if config_path:
        data = load_config_file(config_path) or {}
        if "require_return_terminator" in data:
            value = data["require_return_terminator"]
            if not isinstance(value, bool):
                raise ConfigError(
                    f"'require_return_terminator' in '{config_path}' must be true or false, got {value!r}"
                )
            require_return = value

    if allow_return_no_semi:
        require_return = False

    return LintConfig(require_return_terminator=require_return)
