"""
iosh_lib - Shared library for the iosh device shell

This package contains the components of a Cisco-IOS-style command line:
the mode state machine, the command registry and dispatcher, and the
device collaborators (clock, interface state, configuration storage).
"""

__version__ = "1.0.0"
