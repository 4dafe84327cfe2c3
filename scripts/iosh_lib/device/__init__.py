"""
iosh_lib.device - Simulated device collaborators

This package contains the state the command handlers act upon besides
the configuration itself:
- clock: Software clock with validated set/show and uptime
- interfaces: In-memory network interface state
- ntp: Configured NTP servers and associations
"""

from .clock import Clock, MONTHS, format_clock, format_uptime
from .interfaces import (
    HostInterface,
    RouterInterface,
    NetworkState,
    DEFAULT_HOST_INTERFACE,
)
from .ntp import NtpAssociation, NtpState

__all__ = [
    'Clock', 'MONTHS', 'format_clock', 'format_uptime',
    'HostInterface', 'RouterInterface', 'NetworkState',
    'DEFAULT_HOST_INTERFACE',
    'NtpAssociation', 'NtpState',
]
