"""
Command dispatcher for the shell.

This module resolves a line of input to a registered command using
longest-prefix matching, runs it, and produces `?` completions.
Command errors are reported here and never escape to the REPL loop.
"""

from typing import Optional

from iosh_lib.common import log, error
from iosh_lib.device import Clock

from .context import CliContext, Mode, UserMode, PrivilegedMode, ConfigMode, InterfaceMode
from .errors import CommandError, UnknownCommand
from .registry import Command

HELP_SUFFIX = "?"


def resolve_command(text: str, commands: dict[str, Command]) -> tuple[Command, list[str]]:
    """
    Find the command for a line of input.

    Picks the longest registered name that is a literal prefix of the
    trimmed input; the rest of the input is split on whitespace into
    argument tokens.

    Raises:
        UnknownCommand: if no registered name prefixes the input
    """
    normalized = text.strip()
    matches = [name for name in commands if normalized.startswith(name)]
    if not matches:
        raise UnknownCommand(f"Invalid command: {text.strip()}")

    # Distinct names of equal length cannot both prefix the same string
    name = max(matches, key=len)
    args = normalized[len(name):].split()
    return commands[name], args


def allowed_for_completion(name: str, mode: Mode) -> bool:
    """Whether a command is offered by `?` completion in a mode."""
    if isinstance(mode, UserMode):
        return name == "enable"
    if isinstance(mode, PrivilegedMode):
        return (name in ("configure terminal", "help", "write memory")
                or name.startswith("show")
                or name.startswith("ifconfig"))
    if isinstance(mode, ConfigMode):
        return (name in ("hostname", "interface", "help", "write memory")
                or name.startswith("ifconfig"))
    if isinstance(mode, InterfaceMode):
        return False
    raise TypeError(f"Unknown mode: {mode!r}")


def completion_prefix(text: str) -> str:
    """Strip the trailing `?` and surrounding whitespace."""
    return text.strip().rstrip(HELP_SUFFIX).strip()


def complete(prefix: str, commands: dict[str, Command], mode: Mode) -> list[str]:
    """
    Next-token completions for a prefix in the given mode.

    Once something has been typed, the word after the one being typed
    is offered (`conf` -> `terminal`), falling back to the first word
    for single-word commands. An empty prefix lists first words.
    """
    suggestions: list[str] = []
    for name in sorted(commands):
        if not name.startswith(prefix) or not allowed_for_completion(name, mode):
            continue
        words = name.split()
        first_word = words[0]
        if " " in prefix or (prefix and first_word.startswith(prefix)):
            suggestion = words[1] if len(words) > 1 else first_word
        else:
            suggestion = first_word
        if suggestion not in suggestions:
            suggestions.append(suggestion)
    return suggestions


def show_completions(prefix: str, suggestions: list[str]) -> None:
    if not suggestions:
        print(f"No matching commands found for '{prefix}?'")
        return
    print(f"Possible completions for '{prefix}?':")
    for suggestion in suggestions:
        print(f"  {suggestion}")


def execute_command(line: str, commands: dict[str, Command], ctx: CliContext,
                    clock: Optional[Clock]) -> bool:
    """
    Execute one line of input, or list completions if it ends with `?`.

    Returns:
        False if the command was unknown or failed, True otherwise
    """
    normalized = line.strip()
    if not normalized:
        return True

    if normalized.endswith(HELP_SUFFIX):
        prefix = completion_prefix(normalized)
        show_completions(prefix, complete(prefix, commands, ctx.mode))
        return True

    try:
        command, args = resolve_command(normalized, commands)
        command.handler(args, ctx, clock)
    except CommandError as e:
        error(str(e))
        return False

    log(f"Command '{command.name}' executed successfully.")
    return True
