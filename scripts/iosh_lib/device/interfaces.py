"""
In-memory network interface state.

Two tables are kept apart:
- host_interfaces: what `ifconfig` reads and edits (name -> IP, broadcast)
- interfaces: router ports configured from interface mode
  (`ip address`, `shutdown`, `no shutdown`)
"""

from dataclasses import dataclass
from typing import Optional

from iosh_lib.config.validation import calculate_broadcast


DEFAULT_HOST_INTERFACE = "ens33"
DEFAULT_HOST_IP = "192.168.253.135"
DEFAULT_PREFIX_LEN = 24


@dataclass
class HostInterface:
    """An interface as listed by ifconfig."""
    name: str
    ip_address: str
    broadcast: str


@dataclass
class RouterInterface:
    """A router port configured from interface configuration mode."""
    name: str
    ip_address: Optional[str] = None
    netmask: Optional[str] = None
    is_up: bool = False  # administratively down until `no shutdown`


class NetworkState:
    """Interface state owned by the shell context."""

    def __init__(self, with_defaults: bool = True):
        self.host_interfaces: dict[str, HostInterface] = {}
        self.interfaces: dict[str, RouterInterface] = {}
        if with_defaults:
            self.host_interfaces[DEFAULT_HOST_INTERFACE] = HostInterface(
                name=DEFAULT_HOST_INTERFACE,
                ip_address=DEFAULT_HOST_IP,
                broadcast=calculate_broadcast(DEFAULT_HOST_IP, DEFAULT_PREFIX_LEN),
            )

    def ifconfig_up(self, name: str, ip_address: str) -> tuple[HostInterface, bool]:
        """
        Bring up a host interface with the given address.

        New interfaces get a /24 broadcast address; existing interfaces
        keep their broadcast address and only the IP is replaced.

        Returns:
            Tuple of (interface, created)
        """
        existing = self.host_interfaces.get(name)
        if existing:
            existing.ip_address = ip_address
            return existing, False

        iface = HostInterface(
            name=name,
            ip_address=ip_address,
            broadcast=calculate_broadcast(ip_address, DEFAULT_PREFIX_LEN),
        )
        self.host_interfaces[name] = iface
        return iface, True

    def get_interface(self, name: str) -> RouterInterface:
        """Get a router interface, creating an unconfigured entry on first use."""
        if name not in self.interfaces:
            self.interfaces[name] = RouterInterface(name=name)
        return self.interfaces[name]
