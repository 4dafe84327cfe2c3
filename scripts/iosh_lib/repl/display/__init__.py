"""
iosh_lib.repl.display - Display functions for REPL

This package contains functions for displaying configuration and state:
- config: IOS-style configuration text rendering
- interfaces: ifconfig and show interfaces output
- ntp: show ntp associations table
"""

from .config import (
    render_config_text,
    show_startup_config,
)

from .interfaces import (
    print_host_interface,
    show_host_interfaces,
    show_interfaces,
    show_ip_interface_brief,
)

from .ntp import show_ntp_associations

__all__ = [
    # Config display
    'render_config_text',
    'show_startup_config',
    # Interface display
    'print_host_interface',
    'show_host_interfaces',
    'show_interfaces',
    'show_ip_interface_brief',
    # NTP display
    'show_ntp_associations',
]
