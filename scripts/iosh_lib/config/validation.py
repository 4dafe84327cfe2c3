"""
Validation functions for device configuration.

IPv4 address, netmask and subnet arithmetic utilities.
"""

import ipaddress


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_netmask(mask: str) -> bool:
    """Validate a dotted-quad IPv4 netmask (contiguous ones)."""
    if not validate_ipv4(mask):
        return False
    try:
        network = ipaddress.IPv4Network(f"0.0.0.0/{mask}")
    except (ipaddress.NetmaskValueError, ValueError):
        return False
    # IPv4Network also accepts hostmasks such as 0.0.0.255
    return str(network.netmask) == mask


def netmask_to_prefix(mask: str) -> int:
    """Convert a dotted-quad netmask to a prefix length."""
    return ipaddress.IPv4Network(f"0.0.0.0/{mask}").prefixlen


def calculate_broadcast(ip: str, prefix_len: int) -> str:
    """
    Calculate the broadcast address for an address and prefix length.

    broadcast = ip | ~mask, e.g. 10.0.0.5/24 -> 10.0.0.255
    """
    if not 0 <= prefix_len <= 32:
        raise ValueError(f"Invalid prefix length: {prefix_len}")
    ip_int = int(ipaddress.IPv4Address(ip))
    mask = (0xFFFFFFFF << (32 - prefix_len)) & 0xFFFFFFFF
    return str(ipaddress.IPv4Address(ip_int | (~mask & 0xFFFFFFFF)))
