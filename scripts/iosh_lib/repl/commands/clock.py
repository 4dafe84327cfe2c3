"""
Clock commands.

clock set, show clock and show uptime. All of them need the device
clock; without one they fail with FeatureUnavailable.
"""

from typing import Optional

from iosh_lib.device import Clock, format_clock, format_uptime
from iosh_lib.repl.context import CliContext, UserMode, PrivilegedMode
from iosh_lib.repl.errors import (
    WrongMode,
    MissingArgument,
    InvalidArgumentFormat,
    FeatureUnavailable,
)

from .modes import require_no_args

CLOCK_SET_USAGE = "Correct Usage of 'clock set' command is 'clock set <hh:mm:ss> <day> <month> <year>'."


def _require_clock(clock: Optional[Clock]) -> Clock:
    if clock is None:
        raise FeatureUnavailable("Clock functionality is unavailable.")
    return clock


def cmd_clock_set(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Set the clock date and time."""
    clock = _require_clock(clock)
    if len(args) < 4:
        raise MissingArgument(CLOCK_SET_USAGE)
    if len(args) > 4:
        raise InvalidArgumentFormat(CLOCK_SET_USAGE)

    time_value, day, month, year = args
    try:
        clock.set(time_value, day, month, year)
    except ValueError as e:
        raise InvalidArgumentFormat(str(e)) from e
    print(f"Clock set to: {format_clock(clock.current_datetime())}")


def cmd_show_clock(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Show the current clock date and time."""
    if not isinstance(ctx.mode, PrivilegedMode):
        raise WrongMode("The 'show clock' command is only available in Privileged EXEC mode.")
    clock = _require_clock(clock)
    require_no_args(args, "show clock")
    print(format_clock(clock.current_datetime()))


def cmd_show_uptime(args: list[str], ctx: CliContext, clock: Optional[Clock]) -> None:
    """Show time since the last boot."""
    if not isinstance(ctx.mode, (UserMode, PrivilegedMode)):
        raise WrongMode("The 'show uptime' command is only available in User EXEC and Privileged EXEC mode.")
    clock = _require_clock(clock)
    require_no_args(args, "show uptime")
    print(format_uptime(ctx.hostname, clock.uptime()))
