"""
iosh_lib.repl.commands - Command handlers for the shell

Every handler takes (args, ctx, clock), checks the mode it is legal in,
mutates the context and raises a CommandError subclass on failure.
Handlers are organized by feature area:
- modes: enable, disable, configure terminal, interface, hostname, exit, end
- network: ifconfig, ip address, shutdown, no shutdown
- system: write memory, copy running-config, help, show version, reload,
  debug all, undebug all
- clock: clock set, show clock, show uptime
- show: show running-config, show startup-config, show interfaces,
  show ip interface brief, do
- ntp: ntp server, show ntp associations, clear ntp associations
"""

# Mode navigation
from .modes import (
    require_no_args,
    cmd_enable,
    cmd_disable,
    cmd_configure_terminal,
    cmd_interface,
    cmd_hostname,
    cmd_exit,
    cmd_end,
)

# Interfaces
from .network import (
    cmd_ifconfig,
    cmd_ip_address,
    cmd_shutdown,
    cmd_no_shutdown,
)

# System
from .system import (
    write_startup_config,
    cmd_write_memory,
    cmd_copy_running_config,
    cmd_help,
    cmd_show_version,
    cmd_reload,
    cmd_debug_all,
    cmd_undebug_all,
)

# Clock
from .clock import (
    cmd_clock_set,
    cmd_show_clock,
    cmd_show_uptime,
)

# Show
from .show import (
    cmd_show_running_config,
    cmd_show_startup_config,
    cmd_show_interfaces,
    cmd_show_ip_interface_brief,
    cmd_do,
)

# NTP
from .ntp import (
    cmd_ntp_server,
    cmd_show_ntp_associations,
    cmd_clear_ntp_associations,
)

__all__ = [
    # Modes
    'require_no_args',
    'cmd_enable', 'cmd_disable', 'cmd_configure_terminal',
    'cmd_interface', 'cmd_hostname', 'cmd_exit', 'cmd_end',
    # Interfaces
    'cmd_ifconfig', 'cmd_ip_address', 'cmd_shutdown', 'cmd_no_shutdown',
    # System
    'write_startup_config', 'cmd_write_memory', 'cmd_copy_running_config',
    'cmd_help', 'cmd_show_version', 'cmd_reload',
    'cmd_debug_all', 'cmd_undebug_all',
    # Clock
    'cmd_clock_set', 'cmd_show_clock', 'cmd_show_uptime',
    # Show
    'cmd_show_running_config', 'cmd_show_startup_config',
    'cmd_show_interfaces', 'cmd_show_ip_interface_brief', 'cmd_do',
    # NTP
    'cmd_ntp_server', 'cmd_show_ntp_associations', 'cmd_clear_ntp_associations',
]
