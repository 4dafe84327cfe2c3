"""
Command error taxonomy.

Handlers raise these; the dispatcher catches CommandError, shows the
message and keeps the REPL running.
"""


class CommandError(Exception):
    """Base class for any failure a command reports to the user."""


class WrongMode(CommandError):
    """Command exists but is not legal in the current mode."""


class MissingArgument(CommandError):
    """A required argument was not given."""


class InvalidArgumentFormat(CommandError):
    """An argument was given but is malformed (IP, time, date, extra tokens)."""


class UnknownCommand(CommandError):
    """No registered command name prefixes the input."""


class PersistenceFailure(CommandError):
    """Reading or writing the configuration file failed."""


class FeatureUnavailable(CommandError):
    """An optional collaborator (such as the clock) is not present."""
