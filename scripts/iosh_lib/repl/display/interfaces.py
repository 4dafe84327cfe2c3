"""
Interface display functions for the shell.

Prints ifconfig listings and the `show interfaces` family of output.
"""

from rich.console import Console
from rich.table import Table

from iosh_lib.device import HostInterface, NetworkState, RouterInterface


def print_host_interface(iface: HostInterface, heading: str = "") -> None:
    """Print one interface in ifconfig format."""
    print(f"{heading}{iface.name}: flags=4163<UP,BROADCAST,RUNNING,MULTICAST>  mtu 1500")
    print(f"    inet {iface.ip_address}  netmask 255.255.255.0  broadcast {iface.broadcast}")
    print("    inet6 fe80::6a01:72f9:adf2:3ffb  prefixlen 64  scopeid 0x20<link>")
    print("    ether 00:0c:29:16:30:92  txqueuelen 1000  (Ethernet)")


def show_host_interfaces(network: NetworkState) -> None:
    """Print every host interface."""
    if not network.host_interfaces:
        print("No interfaces found.")
        return
    for name in sorted(network.host_interfaces):
        print_host_interface(network.host_interfaces[name])


def _status(iface: RouterInterface) -> tuple[str, str]:
    if iface.is_up:
        return "up", "up"
    return "administratively down", "down"


def show_interfaces(network: NetworkState) -> None:
    """Print detail for every configured router interface."""
    if not network.interfaces:
        print("No interfaces found.")
        return
    for name in sorted(network.interfaces):
        iface = network.interfaces[name]
        status, protocol = _status(iface)
        print(f"{name} is {status}, line protocol is {protocol}")
        if iface.ip_address:
            print(f"  Internet address is {iface.ip_address}, subnet mask {iface.netmask}")
        else:
            print("  Internet address is unassigned")
        print("  MTU 1500 bytes, BW 10000 Kbit, DLY 100000 usec")
        print("  Encapsulation ARPA, loopback not set, keepalive set (10 sec)")


def show_ip_interface_brief(network: NetworkState, console: Console = None) -> None:
    """Print the interface summary table."""
    table = Table(box=None, show_edge=False, pad_edge=False)
    for column in ("Interface", "IP-Address", "OK?", "Method", "Status", "Protocol"):
        table.add_column(column)

    for name in sorted(network.interfaces):
        iface = network.interfaces[name]
        status, protocol = _status(iface)
        table.add_row(name, iface.ip_address or "unassigned", "YES", "manual", status, protocol)

    (console or Console(highlight=False)).print(table)
