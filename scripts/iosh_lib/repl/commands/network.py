"""
Interface commands.

ifconfig edits the host interface table; ip address, shutdown and
no shutdown configure the interface selected in interface mode.
"""

from typing import Optional

from iosh_lib.config import validate_ipv4, validate_netmask
from iosh_lib.device import Clock
from iosh_lib.repl.context import CliContext, InterfaceMode
from iosh_lib.repl.display import print_host_interface, show_host_interfaces
from iosh_lib.repl.errors import WrongMode, MissingArgument, InvalidArgumentFormat

from .modes import require_no_args

IFCONFIG_USAGE = "Usage: ifconfig [<interface> [<ip_address> up]]"


def cmd_ifconfig(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display or configure host interfaces."""
    network = ctx.network

    if not args:
        show_host_interfaces(network)
        return

    if len(args) == 1:
        iface = network.host_interfaces.get(args[0])
        if iface is None:
            raise InvalidArgumentFormat(f"Interface {args[0]} not found.")
        print_host_interface(iface)
        return

    if len(args) == 3 and args[2] == "up":
        name, ip_address = args[0], args[1]
        if not validate_ipv4(ip_address):
            raise InvalidArgumentFormat(f"Invalid IP address format: {ip_address}")
        iface, created = network.ifconfig_up(name, ip_address)
        print_host_interface(iface, heading="Created new interface " if created else "Updated ")
        return

    raise InvalidArgumentFormat(f"Invalid arguments provided to 'ifconfig'. {IFCONFIG_USAGE}")


def _selected_interface(ctx: CliContext, name: str) -> str:
    if not isinstance(ctx.mode, InterfaceMode):
        raise WrongMode(f"The '{name}' command is only available in Interface Configuration mode.")
    return ctx.mode.interface


def cmd_ip_address(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Assign an address and netmask to the selected interface."""
    interface = _selected_interface(ctx, "ip address")
    if len(args) < 2:
        raise MissingArgument("Usage: ip address <ip_address> <netmask>")
    if len(args) > 2:
        raise InvalidArgumentFormat("Usage: ip address <ip_address> <netmask>")

    ip_address, netmask = args
    if not validate_ipv4(ip_address):
        raise InvalidArgumentFormat("Invalid IP address format.")
    if not validate_netmask(netmask):
        raise InvalidArgumentFormat("Invalid netmask format.")

    iface = ctx.network.get_interface(interface)
    updated = iface.ip_address is not None
    iface.ip_address = ip_address
    iface.netmask = netmask
    ctx.config.set_running(f"interface {interface}", f"ip address {ip_address} {netmask}")

    if updated:
        print(f"Updated interface {interface} with IP {ip_address} and netmask {netmask}")
    else:
        print(f"Assigned IP {ip_address} and netmask {netmask} to interface {interface}")


def cmd_shutdown(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Administratively disable the selected interface."""
    interface = _selected_interface(ctx, "shutdown")
    require_no_args(args, "shutdown")
    ctx.network.get_interface(interface).is_up = False
    ctx.config.set_running(f"interface {interface} shutdown", "true")
    print(f"%LINK-5-CHANGED: Interface {interface}, changed state to administratively down")


def cmd_no_shutdown(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Enable the selected interface."""
    interface = _selected_interface(ctx, "no shutdown")
    require_no_args(args, "no shutdown")
    ctx.network.get_interface(interface).is_up = True
    ctx.config.set_running(f"interface {interface} shutdown", "false")
    print(f"%LINK-5-CHANGED: Interface {interface}, changed state to up")
    print(f"%LINEPROTO-5-UPDOWN: Line protocol on Interface {interface}, changed state to up")
