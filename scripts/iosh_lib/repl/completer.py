"""
Tab completion for the shell.

This module provides command completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from .registry import Command


class CommandCompleter(Completer):
    """Completes command names, then the literal suggestions of the command typed."""

    def __init__(self, commands: dict[str, Command]):
        self.commands = commands

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()

        # A full command name followed by a space - complete its argument
        for name in sorted(self.commands, key=len, reverse=True):
            if text.startswith(name + " "):
                word = text[len(name):].lstrip()
                if " " in word:
                    return
                for suggestion in self.commands[name].suggestions or ():
                    if suggestion.lower().startswith(word.lower()):
                        yield Completion(suggestion, start_position=-len(word))
                return

        for name in sorted(self.commands):
            if name.startswith(text):
                yield Completion(
                    name,
                    start_position=-len(text),
                    display_meta=self.commands[name].description,
                )
