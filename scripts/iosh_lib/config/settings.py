"""
Settings resolution for the iosh shell.

Paths come from an explicit argument, then the environment, then the
built-in default.
"""

import os
from pathlib import Path
from typing import Optional

from .constants import CONFIG_FILE, CONFIG_FILE_ENV, HISTORY_FILE, HISTORY_FILE_ENV


def get_history_file(arg_path: Optional[str] = None) -> Path:
    """Get the history file path from args, env, or default."""
    if arg_path:
        return Path(arg_path)
    if os.environ.get(HISTORY_FILE_ENV):
        return Path(os.environ[HISTORY_FILE_ENV])
    return HISTORY_FILE


def get_config_file(arg_path: Optional[str] = None) -> Path:
    """Get the startup config file path from args, env, or default."""
    if arg_path:
        return Path(arg_path)
    if os.environ.get(CONFIG_FILE_ENV):
        return Path(os.environ[CONFIG_FILE_ENV])
    return CONFIG_FILE
