"""
NTP display functions for the shell.
"""

from rich.console import Console
from rich.table import Table

from iosh_lib.device import NtpState


def show_ntp_associations(ntp: NtpState, console: Console = None) -> None:
    """Print the NTP association table."""
    if not ntp.associations:
        print("No NTP associations configured.")
        return

    table = Table(box=None, show_edge=False, pad_edge=False)
    for column in ("address", "ref clock", "st", "when", "poll", "reach", "delay", "offset", "disp"):
        table.add_column(column)

    for assoc in ntp.associations:
        table.add_row(
            f"~{assoc.address}",
            assoc.ref_clock,
            str(assoc.stratum),
            assoc.when,
            str(assoc.poll),
            str(assoc.reach),
            f"{assoc.delay:.2f}",
            f"{assoc.offset:.2f}",
            f"{assoc.dispersion:.2f}",
        )

    console = console or Console(highlight=False)
    console.print(table)
    console.print(" * sys.peer, # selected, + candidate, - outlyer, x falseticker, ~ configured")
