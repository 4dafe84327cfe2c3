"""
Command registry for the shell.

This module contains the Command descriptor and the fixed table of
commands the dispatcher resolves input against. Names may contain
spaces ("configure terminal"); the registry itself does no mode
gating, each handler checks the mode it is legal in.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from iosh_lib.device import Clock

from .context import CliContext
from .commands import (
    cmd_enable,
    cmd_disable,
    cmd_configure_terminal,
    cmd_interface,
    cmd_hostname,
    cmd_exit,
    cmd_end,
    cmd_ifconfig,
    cmd_ip_address,
    cmd_shutdown,
    cmd_no_shutdown,
    cmd_write_memory,
    cmd_copy_running_config,
    cmd_help,
    cmd_show_version,
    cmd_reload,
    cmd_debug_all,
    cmd_undebug_all,
    cmd_clock_set,
    cmd_show_clock,
    cmd_show_uptime,
    cmd_show_running_config,
    cmd_show_startup_config,
    cmd_show_interfaces,
    cmd_show_ip_interface_brief,
    cmd_do,
    cmd_ntp_server,
    cmd_show_ntp_associations,
    cmd_clear_ntp_associations,
)

Handler = Callable[[list[str], CliContext, Optional[Clock]], None]


@dataclass(frozen=True)
class Command:
    """A registered command."""
    name: str
    description: str
    handler: Handler
    suggestions: Optional[tuple[str, ...]] = None  # Literal argument completions


INTERFACE_SUGGESTIONS = (
    "FastEthernet0/0",
    "FastEthernet0/1",
    "GigabitEthernet0/0",
    "GigabitEthernet0/1",
    "Serial0/0/0",
)


def _command_table() -> list[Command]:
    return [
        # Mode navigation
        Command("enable", "Enter privileged EXEC mode", cmd_enable),
        Command("disable", "Return to user EXEC mode", cmd_disable),
        Command("configure terminal", "Enter global configuration mode", cmd_configure_terminal),
        Command("interface", "Enter Interface configuration mode", cmd_interface,
                suggestions=INTERFACE_SUGGESTIONS),
        Command("hostname", "Set the device hostname", cmd_hostname),
        Command("exit", "Exit the current mode and return to the previous mode", cmd_exit),
        Command("end", "Return to privileged EXEC mode", cmd_end),

        # Interfaces
        Command("ifconfig", "Display or configure network details of the router", cmd_ifconfig,
                suggestions=("ens33",)),
        Command("ip address", "Assign an IP address and netmask to the selected interface", cmd_ip_address),
        Command("shutdown", "Disable the selected network interface", cmd_shutdown),
        Command("no shutdown", "Enable the selected network interface", cmd_no_shutdown),

        # Configuration storage
        Command("write memory", "Save the running configuration to the startup configuration",
                cmd_write_memory),
        Command("copy running-config", "Copy the running configuration", cmd_copy_running_config,
                suggestions=("startup-config",)),
        Command("reload", "Reload the system", cmd_reload),

        # Show
        Command("show running-config", "Display the current running configuration (from JSON file)",
                cmd_show_running_config),
        Command("show startup-config", "Display the startup configuration", cmd_show_startup_config),
        Command("show interfaces", "Display interface details", cmd_show_interfaces),
        Command("show ip interface brief", "Display a summary of the router interfaces",
                cmd_show_ip_interface_brief),
        Command("show version", "Display the software version", cmd_show_version),
        Command("show clock", "Show the current clock date and time", cmd_show_clock),
        Command("show uptime", "Show the time since the last reload", cmd_show_uptime),
        Command("show ntp associations", "Display the NTP association table",
                cmd_show_ntp_associations),
        Command("do", "Run a privileged show command from a configuration mode", cmd_do,
                suggestions=("show",)),

        # NTP and debugging
        Command("ntp server", "Configure an NTP server", cmd_ntp_server),
        Command("clear ntp associations", "Reset the NTP associations", cmd_clear_ntp_associations),
        Command("debug all", "Turn on all debug levels", cmd_debug_all),
        Command("undebug all", "Turn off all debug levels", cmd_undebug_all),

        # Clock and help
        Command("clock set", "Change the clock date and time", cmd_clock_set),
        Command("help", "Display available commands", cmd_help),
    ]


def build_command_registry() -> dict[str, Command]:
    """
    Build the command registry keyed by command name.

    Raises:
        ValueError: if two commands share a name
    """
    commands: dict[str, Command] = {}
    for command in _command_table():
        if command.name in commands:
            raise ValueError(f"Duplicate command name: {command.name}")
        commands[command.name] = command
    return commands
