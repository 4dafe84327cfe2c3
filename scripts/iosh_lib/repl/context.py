"""
Device modes, shell context and prompt utilities.

This module contains:
- UserMode / PrivilegedMode / ConfigMode / InterfaceMode: the mode variants
- CliContext: Mutable state threaded through every command invocation
- get_prompt_text: Generates the prompt string from hostname and mode
- apply_interrupt: Mode reset applied by the REPL host after Ctrl-C
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from iosh_lib.config import CONFIG_FILE, CliConfig
from iosh_lib.device import NetworkState, NtpState


@dataclass(frozen=True)
class UserMode:
    """User EXEC mode."""


@dataclass(frozen=True)
class PrivilegedMode:
    """Privileged EXEC mode."""


@dataclass(frozen=True)
class ConfigMode:
    """Global configuration mode."""


@dataclass(frozen=True)
class InterfaceMode:
    """Interface configuration mode for one interface."""
    interface: str


Mode = Union[UserMode, PrivilegedMode, ConfigMode, InterfaceMode]


def get_prompt_text(hostname: str, mode: Mode) -> str:
    """Generate the prompt string for a hostname in a mode."""
    if isinstance(mode, UserMode):
        return f"{hostname}>"
    if isinstance(mode, PrivilegedMode):
        return f"{hostname}#"
    if isinstance(mode, ConfigMode):
        return f"{hostname}(config)#"
    if isinstance(mode, InterfaceMode):
        return f"{hostname}(config-if)# {mode.interface}"
    raise TypeError(f"Unknown mode: {mode!r}")


@dataclass
class CliContext:
    """Current mode, configuration, interface, NTP and debug state of the device."""
    mode: Mode = field(default_factory=UserMode)
    config: CliConfig = field(default_factory=CliConfig)
    network: NetworkState = field(default_factory=NetworkState)
    ntp: NtpState = field(default_factory=NtpState)
    config_file: Path = CONFIG_FILE
    debug_all: bool = False
    prompt: str = field(init=False, default="")

    def __post_init__(self):
        self._refresh_prompt()

    def _refresh_prompt(self) -> None:
        self.prompt = get_prompt_text(self.config.hostname, self.mode)

    @property
    def hostname(self) -> str:
        return self.config.hostname

    @property
    def selected_interface(self) -> Optional[str]:
        """Interface being configured, only set in interface mode."""
        if isinstance(self.mode, InterfaceMode):
            return self.mode.interface
        return None

    def set_mode(self, mode: Mode) -> None:
        """Switch mode and recompute the prompt."""
        self.mode = mode
        self._refresh_prompt()

    def set_hostname(self, hostname: str) -> None:
        """Change hostname and recompute the prompt."""
        self.config.hostname = hostname
        self._refresh_prompt()


def apply_interrupt(ctx: CliContext) -> bool:
    """
    Apply a keyboard interrupt to the context.

    Any mode other than user mode drops back to privileged mode, which
    also clears the selected interface. Returns True if the mode changed.
    """
    if isinstance(ctx.mode, UserMode):
        return False
    changed = not isinstance(ctx.mode, PrivilegedMode)
    ctx.set_mode(PrivilegedMode())
    return changed
