"""
System commands.

write memory, copy running-config, help, show version, reload and
the debug switches.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

from iosh_lib.common import prompt_yes_no
from iosh_lib.config import save_config
from iosh_lib.device import Clock
from iosh_lib.repl.context import CliContext, UserMode, PrivilegedMode, ConfigMode
from iosh_lib.repl.display import render_config_text
from iosh_lib.repl.errors import (
    WrongMode,
    MissingArgument,
    InvalidArgumentFormat,
    PersistenceFailure,
)

from .modes import require_no_args

HELP_TEXT = """Available commands:
  enable                       - Enter privileged EXEC mode
  disable                      - Return to user EXEC mode
  configure terminal           - Enter Global configuration mode
  interface <name>             - Enter Interface configuration mode
  hostname <name>              - Set the device hostname
  ip address <ip> <netmask>    - Address the selected interface
  shutdown / no shutdown       - Disable / enable the selected interface
  ifconfig [<iface> <ip> up]   - Display or configure network details
  show running-config          - Display the saved running configuration
  show startup-config          - Display the startup configuration
  show interfaces              - Display interface details
  show ip interface brief      - Display an interface summary
  show clock                   - Display the clock
  show uptime                  - Display the system uptime
  show version                 - Display the software version
  show ntp associations        - Display the NTP associations
  do show <command>            - Run a show command from configuration mode
  ntp server <ip>              - Configure an NTP server
  clear ntp associations       - Reset the NTP associations
  debug all / undebug all      - Turn all debugging on / off
  clock set <hh:mm:ss> <day> <month> <year>
                               - Set the clock
  write memory                 - Save the running configuration
  copy running-config <dest>   - Copy the running configuration
  reload                       - Reload the system
  exit / end                   - Leave the current mode
  help                         - Display this help message
  <prefix>?                    - List possible completions
  exit cli                     - Quit the shell"""

VERSION_TEXT = """Cisco IOS Software, C2900 Software (C2900-UNIVERSALK9-M), Version 15.1(4)M4, RELEASE SOFTWARE (fc2)
Technical Support: http://www.cisco.com/techsupport
Compiled on: 2024-12-01"""

BOOT_BANNER = """System Bootstrap, Version 15.1(4)M4, RELEASE SOFTWARE (fc1)
Technical Support: http://www.cisco.com/techsupport
Total memory size = 512 MB - On-board = 512 MB, DIMM0 = 0 MB"""


def write_startup_config(ctx: CliContext) -> None:
    """Copy running config to startup config and persist it."""
    saved = replace(ctx.config, startup_config=dict(ctx.config.running_config))
    try:
        save_config(saved, ctx.config_file)
    except OSError as e:
        raise PersistenceFailure(f"Failed to save configuration: {e}") from e
    ctx.config.save_running_to_startup()


def cmd_write_memory(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Save the running configuration to the startup configuration."""
    require_no_args(args, "write memory")
    print("Building configuration...")
    write_startup_config(ctx)
    print("Configuration saved successfully.")


def cmd_copy_running_config(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Copy the running configuration to startup-config or to a file."""
    if not isinstance(ctx.mode, (PrivilegedMode, ConfigMode)):
        raise WrongMode("The 'copy' command is only available in Privileged EXEC mode and Config mode.")
    if not args:
        raise MissingArgument("Usage: copy running-config <startup-config|file_name>")
    if len(args) > 1:
        raise InvalidArgumentFormat("Usage: copy running-config <startup-config|file_name>")

    destination = args[0]
    if destination == "startup-config":
        write_startup_config(ctx)
        print("Configuration saved successfully.")
        return

    text = render_config_text(ctx.hostname, ctx.config.running_config)
    try:
        Path(destination).write_text(text)
    except OSError as e:
        raise PersistenceFailure(f"Failed to write {destination}: {e}") from e
    print(f"Running configuration copied to {destination}")


def cmd_help(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display available commands."""
    print(HELP_TEXT)


def cmd_show_version(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display the software version."""
    print(VERSION_TEXT)


def cmd_reload(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Optionally save, then reload the device back to user EXEC mode."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'reload' command is only available in Privileged EXEC mode.")
    require_no_args(args, "reload")

    save = prompt_yes_no("System configuration has been modified. Save?")
    if save is None:
        raise InvalidArgumentFormat("Invalid input. Please enter 'yes' or 'no'.")
    if save:
        print("Building configuration...")
        write_startup_config(ctx)
        print("[OK]")
    else:
        print("Configuration not saved.")

    proceed = prompt_yes_no("Proceed with reload?")
    if proceed is None:
        raise InvalidArgumentFormat("Invalid input. Please enter 'yes' or 'no'.")
    if not proceed:
        print("Reload aborted.")
        return

    print(BOOT_BANNER)
    ctx.set_mode(UserMode())
    if clock is not None:
        clock.reset_uptime()
    print()
    print("Press RETURN to get started!")


def cmd_debug_all(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Turn on every debug level after confirmation."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'debug all' command is only available in Privileged EXEC mode.")
    require_no_args(args, "debug all")

    proceed = prompt_yes_no("This may severely impact network performance. Continue?")
    if proceed is None:
        raise InvalidArgumentFormat("Invalid input. Please enter 'yes' or 'no'.")
    if not proceed:
        print("Debugging left unchanged.")
        return
    ctx.debug_all = True
    print("All possible debugging has been turned on")


def cmd_undebug_all(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Turn off every debug level."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'undebug all' command is only available in Privileged EXEC mode.")
    require_no_args(args, "undebug all")
    ctx.debug_all = False
    print("All possible debugging has been turned off")
