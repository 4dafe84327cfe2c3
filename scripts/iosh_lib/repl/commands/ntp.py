"""
NTP commands.

ntp server configures a server from global configuration mode;
show ntp associations and clear ntp associations work from privileged
EXEC mode.
"""

from typing import Optional

from iosh_lib.config import validate_ipv4
from iosh_lib.device import Clock
from iosh_lib.repl.context import CliContext, PrivilegedMode, ConfigMode
from iosh_lib.repl.display import show_ntp_associations
from iosh_lib.repl.errors import WrongMode, MissingArgument, InvalidArgumentFormat

from .modes import require_no_args

NTP_SERVER_USAGE = "Usage: ntp server <ip_address>"


def cmd_ntp_server(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Configure an NTP server."""
    if not isinstance(ctx.mode, ConfigMode):
        raise WrongMode("The 'ntp server' command is only available in Global Configuration mode.")
    if not args:
        raise MissingArgument(NTP_SERVER_USAGE)
    if len(args) > 1:
        raise InvalidArgumentFormat(NTP_SERVER_USAGE)

    address = args[0]
    if not validate_ipv4(address):
        raise InvalidArgumentFormat("Invalid IP address format.")
    if ctx.ntp.add_server(address):
        print(f"NTP server {address} configured.")
    else:
        print(f"NTP server {address} is already configured.")


def cmd_show_ntp_associations(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Display NTP associations."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'show ntp associations' command is only available in Privileged EXEC mode.")
    require_no_args(args, "show ntp associations")
    show_ntp_associations(ctx.ntp)


def cmd_clear_ntp_associations(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Reset NTP associations for the configured servers."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'clear ntp associations' command is only available in Privileged EXEC mode.")
    require_no_args(args, "clear ntp associations")
    ctx.ntp.clear_associations()
    print("NTP associations cleared and reinitialized.")
