"""
Configuration serialization for iosh.

Functions for saving and loading the device configuration to/from JSON.
"""

import json
from dataclasses import asdict
from pathlib import Path

from .constants import CONFIG_FILE
from .dataclasses import CliConfig


def to_dict(obj):
    """Convert dataclasses to dicts recursively."""
    if hasattr(obj, '__dataclass_fields__'):
        return asdict(obj)
    return obj


def save_config(config: CliConfig, config_file: Path = CONFIG_FILE) -> None:
    """
    Save configuration to a JSON file, overwriting previous contents.

    Raises:
        OSError: if the file cannot be written
    """
    config_file = Path(config_file)
    if config_file.parent != Path("."):
        config_file.parent.mkdir(parents=True, exist_ok=True)

    data = to_dict(config)

    with open(config_file, 'w') as f:
        json.dump(data, f, indent=2)


def load_config(config_file: Path = CONFIG_FILE) -> CliConfig:
    """
    Load configuration from a JSON file.

    Returns the default configuration when the file is absent or does
    not hold a valid configuration; never raises.
    """
    from iosh_lib.common import warn

    config_file = Path(config_file)
    if not config_file.exists():
        return CliConfig()

    try:
        with open(config_file) as f:
            data = json.load(f)
        return _config_from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        warn(f"Ignoring unreadable configuration {config_file}: {e}")
        return CliConfig()


def _config_from_dict(data) -> CliConfig:
    if not isinstance(data, dict):
        raise TypeError("configuration must be a JSON object")

    running = data.get('running_config', {})
    startup = data.get('startup_config', {})
    hostname = data.get('hostname', CliConfig().hostname)

    if not isinstance(running, dict) or not isinstance(startup, dict):
        raise TypeError("running_config and startup_config must be objects")
    if not isinstance(hostname, str) or not hostname:
        raise TypeError("hostname must be a non-empty string")

    return CliConfig(
        running_config={str(k): str(v) for k, v in running.items()},
        startup_config={str(k): str(v) for k, v in startup.items()},
        hostname=hostname,
    )
