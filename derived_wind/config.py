import logging
from typing import Any, Dict

import yaml

from .engine import WindEngine
from .exceptions import ConfigError
from .services.delta_service import DEFAULT_CONTEXT
from .services.wind_service import DEFAULT_SOURCE

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULTS = {
    "loglevel": "INFO",
    "source": DEFAULT_SOURCE,
    "context": DEFAULT_CONTEXT,
    "enable_wind_calculations": True,
    "navigation": [],
    "anchor": None,
    "events": [],
}


def parse_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    level_str = str(level_str).upper()
    if level_str not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level: {level_str}. Must be one of {', '.join(LOG_LEVELS.keys())}"
        )
    return LOG_LEVELS[level_str]


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Missing keys are filled from DEFAULTS.
    """
    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    config = dict(DEFAULTS)
    config.update(loaded)
    return config


def create_engine(config: Dict[str, Any]) -> WindEngine:
    """
    Create a wind engine and apply the initial vessel state from configuration.

    Args:
        config: Configuration dictionary, typically from load_config()

    Returns:
        WindEngine: Engine without sinks
    """
    enabled = config.get("enable_wind_calculations", True)
    if not isinstance(enabled, bool):
        raise ConfigError(
            f"Invalid enable_wind_calculations: {enabled!r}. Must be true or false"
        )

    engine = WindEngine(
        source=config.get("source", DEFAULT_SOURCE),
        enabled=enabled,
    )

    for entry in config.get("navigation") or []:
        try:
            engine.update_navigation_path(entry["path"], float(entry["value"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid navigation entry: {entry}") from e

    anchor = config.get("anchor")
    if anchor is not None:
        try:
            engine.tracker.set_anchored(float(anchor["bearing"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid anchor entry: {anchor}") from e

    return engine
