"""
Main REPL loop for the shell.

Reads a line, dispatches it, and repeats. Ctrl-C is recorded in an
InterruptFlag and applied to the context before the next read.
"""

import argparse
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from iosh_lib.common import Colors, info
from iosh_lib.config import get_config_file, get_history_file, load_config
from iosh_lib.device import Clock

from .completer import CommandCompleter
from .context import CliContext, apply_interrupt
from .dispatcher import execute_command
from .registry import build_command_registry
from .signals import InterruptFlag

EXIT_SENTINEL = "exit cli"

IOSH_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


def create_context(config_file: Path) -> CliContext:
    """Create the shell context from the persisted configuration."""
    config = load_config(config_file)
    return CliContext(config=config, config_file=config_file)


def run_repl(history_file: Path, config_file: Path, session=None,
             clock: Optional[Clock] = None, interrupt: Optional[InterruptFlag] = None) -> int:
    """Main REPL entry point."""
    print()
    print(f"{Colors.BOLD}iosh - network device shell{Colors.NC}")
    print(f"Type 'help' for commands, '{EXIT_SENTINEL}' to quit")
    print()

    ctx = create_context(config_file)
    commands = build_command_registry()
    clock = clock or Clock()
    interrupt = interrupt or InterruptFlag()

    if session is None:
        session = PromptSession(
            history=FileHistory(str(history_file)),
            completer=CommandCompleter(commands),
            style=IOSH_STYLE,
        )

    discard_history = False
    interrupt.install()
    try:
        while True:
            if interrupt.consume() and apply_interrupt(ctx):
                info("Interrupted - returning to privileged EXEC mode")

            try:
                line = session.prompt(f"{ctx.prompt} ")
            except KeyboardInterrupt:
                print("^C")
                interrupt.set()
                continue
            except EOFError:
                print()
                break

            if line.strip() == EXIT_SENTINEL:
                discard_history = True
                break

            execute_command(line, commands, ctx, clock)
    finally:
        interrupt.restore()

    if discard_history:
        history_file.unlink(missing_ok=True)

    print("Goodbye!")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Cisco-IOS-style network device shell")
    parser.add_argument("history_file", nargs="?", help="Command history file (default: history.txt)")
    args = parser.parse_args(argv)

    return run_repl(get_history_file(args.history_file), get_config_file())
