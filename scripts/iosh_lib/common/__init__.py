"""
iosh_lib.common - Shared utilities for iosh

This module provides:
- colors: ANSI color codes and logging functions
- prompts: Interactive confirmation prompts
"""

from .colors import Colors, log, warn, error, info
from .prompts import prompt_yes_no

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info',
    'prompt_yes_no',
]
