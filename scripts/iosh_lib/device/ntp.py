"""
NTP server configuration and association table.

Servers are configured from global configuration mode; each configured
server gets an association that starts unsynchronized (.INIT., stratum 16).
"""

from dataclasses import dataclass


@dataclass
class NtpAssociation:
    """One row of `show ntp associations`."""
    address: str
    ref_clock: str = ".INIT."
    stratum: int = 16
    when: str = "-"
    poll: int = 64
    reach: int = 0
    delay: float = 0.0
    offset: float = 0.0
    dispersion: float = 0.01


class NtpState:
    """Configured NTP servers and their associations."""

    def __init__(self):
        self.servers: list[str] = []
        self.associations: list[NtpAssociation] = []

    def add_server(self, address: str) -> bool:
        """
        Configure an NTP server.

        Returns:
            False if the server was already configured
        """
        if address in self.servers:
            return False
        self.servers.append(address)
        self.associations.append(NtpAssociation(address=address))
        return True

    def clear_associations(self) -> None:
        """Drop association state and start over for every configured server."""
        self.associations = [NtpAssociation(address=server) for server in self.servers]
