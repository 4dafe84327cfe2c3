"""
Interactive prompt utilities for the shell.

Wraps prompt_toolkit for the confirmations some device commands
ask for (e.g. reload).
"""

from typing import Optional

from prompt_toolkit import prompt


def prompt_yes_no(question: str, default: bool = True) -> Optional[bool]:
    """
    Prompt for yes/no confirmation.

    Args:
        question: Question to ask
        default: Answer used when the user just presses Enter

    Returns:
        True for yes, False for no, None if cancelled or unrecognised
    """
    suffix = " [yes/no]"
    try:
        answer = prompt(f"{question}{suffix}: ").strip().lower()
    except (KeyboardInterrupt, EOFError):
        return None

    if not answer:
        return default
    if answer in ('y', 'yes'):
        return True
    if answer in ('n', 'no'):
        return False
    return None
