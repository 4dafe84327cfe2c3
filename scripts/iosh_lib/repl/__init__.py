"""
iosh_lib.repl - REPL components for iosh

This package contains the modular components of the device shell:
- context: Modes, shell context and prompt
- errors: Command error taxonomy
- registry: Command descriptors and the registry
- dispatcher: Longest-prefix resolution, execution and `?` completion
- completer: Tab completion
- signals: Interrupt flag for Ctrl-C
- loop: Main REPL loop
- display/: Show output rendering
- commands/: Command handlers
"""

from .context import (
    UserMode,
    PrivilegedMode,
    ConfigMode,
    InterfaceMode,
    CliContext,
    get_prompt_text,
    apply_interrupt,
)
from .errors import (
    CommandError,
    WrongMode,
    MissingArgument,
    InvalidArgumentFormat,
    UnknownCommand,
    PersistenceFailure,
    FeatureUnavailable,
)
from .registry import Command, build_command_registry
from .dispatcher import resolve_command, complete, execute_command
from .completer import CommandCompleter
from .signals import InterruptFlag

__all__ = [
    'UserMode', 'PrivilegedMode', 'ConfigMode', 'InterfaceMode',
    'CliContext', 'get_prompt_text', 'apply_interrupt',
    'CommandError', 'WrongMode', 'MissingArgument', 'InvalidArgumentFormat',
    'UnknownCommand', 'PersistenceFailure', 'FeatureUnavailable',
    'Command', 'build_command_registry',
    'resolve_command', 'complete', 'execute_command',
    'CommandCompleter',
    'InterruptFlag',
]
