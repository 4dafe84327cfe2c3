"""
Configuration dataclasses for the device configuration.

These define the structure of the configuration as stored in
startup-config.json.
"""

from dataclasses import dataclass, field

from .constants import DEFAULT_HOSTNAME


@dataclass
class CliConfig:
    """Hostname plus the running and startup key-value configuration."""
    running_config: dict[str, str] = field(default_factory=dict)
    startup_config: dict[str, str] = field(default_factory=dict)
    hostname: str = DEFAULT_HOSTNAME

    def set_running(self, key: str, value: str) -> None:
        """Record a line of running configuration."""
        self.running_config[key] = value

    def save_running_to_startup(self) -> None:
        """Copy the running configuration over the startup configuration."""
        self.startup_config = dict(self.running_config)
