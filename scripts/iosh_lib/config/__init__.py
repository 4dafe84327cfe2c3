"""
iosh_lib.config - Device configuration dataclasses and utilities.

This package contains:
- dataclasses: Configuration data structure (CliConfig)
- validation: IPv4 address, netmask and broadcast utilities
- constants: Path constants (CONFIG_FILE, HISTORY_FILE) and defaults
- serialization: JSON save/load functions
- settings: Path resolution from args and environment
"""

from .constants import (
    CONFIG_FILE,
    HISTORY_FILE,
    DEFAULT_HOSTNAME,
)

from .validation import (
    validate_ipv4,
    validate_netmask,
    netmask_to_prefix,
    calculate_broadcast,
)

from .dataclasses import CliConfig

from .serialization import (
    to_dict,
    save_config,
    load_config,
)

from .settings import (
    get_history_file,
    get_config_file,
)

__all__ = [
    # Constants
    'CONFIG_FILE',
    'HISTORY_FILE',
    'DEFAULT_HOSTNAME',
    # Validation
    'validate_ipv4',
    'validate_netmask',
    'netmask_to_prefix',
    'calculate_broadcast',
    # Dataclasses
    'CliConfig',
    # Serialization
    'to_dict',
    'save_config',
    'load_config',
    # Settings
    'get_history_file',
    'get_config_file',
]
