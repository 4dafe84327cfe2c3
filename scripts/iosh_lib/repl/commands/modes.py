"""
Mode navigation commands.

enable, disable, configure terminal, interface, exit, end and hostname:
the commands that move the device between modes or rename it.
"""

from typing import Optional

from iosh_lib.device import Clock
from iosh_lib.repl.context import (
    CliContext,
    UserMode,
    PrivilegedMode,
    ConfigMode,
    InterfaceMode,
)
from iosh_lib.repl.errors import WrongMode, MissingArgument, InvalidArgumentFormat


def require_no_args(args: list[str], name: str) -> None:
    """Reject trailing tokens for commands that take no arguments."""
    if args:
        raise InvalidArgumentFormat(
            f"Invalid arguments provided to '{name}'. "
            "This command does not accept additional arguments."
        )


def cmd_enable(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Enter privileged EXEC mode."""
    if not isinstance(ctx.mode, UserMode):
        raise WrongMode("The 'enable' command is only available in User EXEC mode.")
    require_no_args(args, "enable")
    ctx.set_mode(PrivilegedMode())
    print("Entering privileged EXEC mode...")


def cmd_disable(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Leave privileged EXEC mode."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'disable' command is only available in Privileged EXEC mode.")
    require_no_args(args, "disable")
    ctx.set_mode(UserMode())
    print("Exiting Privileged EXEC Mode...")


def cmd_configure_terminal(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Enter global configuration mode."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'configure terminal' command is only available in Privileged EXEC mode.")
    require_no_args(args, "configure terminal")
    ctx.set_mode(ConfigMode())
    print("Entering Global configuration mode...")


def cmd_interface(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Enter interface configuration mode for the named interface."""
    if not isinstance(ctx.mode, ConfigMode):
        raise WrongMode("The 'interface' command is only available in Global Configuration mode.")
    if not args:
        raise MissingArgument("Please specify an interface, e.g., 'interface f0/0'.")
    interface = " ".join(args)
    ctx.network.get_interface(interface)
    ctx.set_mode(InterfaceMode(interface))
    print(f"Entering Interface configuration mode for: {interface}")


def cmd_hostname(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Set the device hostname."""
    if not isinstance(ctx.mode, ConfigMode):
        raise WrongMode("The 'hostname' command is only available in Global Configuration Mode.")
    if not args:
        raise MissingArgument("Please specify a new hostname. Usage: hostname <new_hostname>")
    if len(args) > 1:
        raise InvalidArgumentFormat("Hostname must be a single word. Usage: hostname <new_hostname>")
    new_hostname = args[0]
    ctx.set_hostname(new_hostname)
    ctx.config.set_running("hostname", new_hostname)
    print(f"Hostname changed to '{new_hostname}'")


def cmd_exit(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Step back one mode."""
    require_no_args(args, "exit")
    mode = ctx.mode
    if isinstance(mode, InterfaceMode):
        ctx.set_mode(ConfigMode())
        print("Exiting Interface Configuration Mode...")
    elif isinstance(mode, ConfigMode):
        ctx.set_mode(PrivilegedMode())
        print("Exiting Global Configuration Mode...")
    elif isinstance(mode, PrivilegedMode):
        ctx.set_mode(UserMode())
        print("Exiting Privileged EXEC Mode...")
    elif isinstance(mode, UserMode):
        raise WrongMode("No mode to exit.")


def cmd_end(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Return straight to privileged EXEC mode from any configuration mode."""
    if not isinstance(ctx.mode, (ConfigMode, InterfaceMode)):
        raise WrongMode("The 'end' command is only available in configuration modes.")
    require_no_args(args, "end")
    ctx.set_mode(PrivilegedMode())
