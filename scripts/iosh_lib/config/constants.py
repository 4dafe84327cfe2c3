"""
Configuration constants for iosh.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Persistence and history paths (relative to the working directory)
CONFIG_FILE = Path("startup-config.json")
HISTORY_FILE = Path("history.txt")

DEFAULT_HOSTNAME = "Router"

# Environment overrides
CONFIG_FILE_ENV = "IOSH_CONFIG_FILE"
HISTORY_FILE_ENV = "IOSH_HISTORY_FILE"
