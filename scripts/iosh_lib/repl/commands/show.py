"""
Show commands for configuration and interface state, plus `do` for
running them from configuration modes.
"""

from typing import Optional

from iosh_lib.device import Clock
from iosh_lib.repl.context import CliContext, PrivilegedMode, ConfigMode, InterfaceMode
from iosh_lib.repl.display import show_startup_config, show_interfaces, show_ip_interface_brief
from iosh_lib.repl.errors import (
    WrongMode,
    MissingArgument,
    InvalidArgumentFormat,
    PersistenceFailure,
)

from .modes import require_no_args

DO_USAGE = "Usage: do show <command>"


def _require_privileged(ctx: CliContext, name: str) -> None:
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode(f"The '{name}' command is only available in Privileged EXEC mode.")


def cmd_show_running_config(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display the configuration file as last written."""
    _require_privileged(ctx, "show running-config")
    require_no_args(args, "show running-config")
    if not ctx.config_file.exists():
        raise PersistenceFailure("File not found")
    try:
        content = ctx.config_file.read_text()
    except OSError as e:
        raise PersistenceFailure(f"Error reading the file: {e}") from e
    print(content)


def cmd_show_startup_config(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display the startup configuration as IOS text."""
    _require_privileged(ctx, "show startup-config")
    require_no_args(args, "show startup-config")
    show_startup_config(ctx.hostname, ctx.config.startup_config)


def cmd_show_interfaces(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display router interface details."""
    _require_privileged(ctx, "show interfaces")
    require_no_args(args, "show interfaces")
    show_interfaces(ctx.network)


def cmd_show_ip_interface_brief(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display the router interface summary."""
    _require_privileged(ctx, "show ip interface brief")
    require_no_args(args, "show ip interface brief")
    show_ip_interface_brief(ctx.network)


def cmd_do(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """
    Run a privileged `show` command from a configuration mode.

    The show command runs as if in privileged EXEC mode; the
    configuration mode (and selected interface) is restored afterwards.
    """
    if not isinstance(ctx.mode, (ConfigMode, InterfaceMode)):
        raise WrongMode("The 'do' command is only available in configuration modes.")
    if not args:
        raise MissingArgument(DO_USAGE)
    if args[0] != "show" or len(args) < 2:
        raise InvalidArgumentFormat(DO_USAGE)

    from iosh_lib.repl.dispatcher import resolve_command
    from iosh_lib.repl.registry import build_command_registry

    command, show_args = resolve_command(" ".join(args), build_command_registry())

    mode = ctx.mode
    ctx.set_mode(PrivilegedMode())
    try:
        command.handler(show_args, ctx, clock)
    finally:
        ctx.set_mode(mode)
