#!/usr/bin/env python3
"""
iosh_repl.py - Interactive shell emulating a Cisco-IOS-style device

Usage: iosh_repl.py [history_file]
"""

import sys

from iosh_lib.repl.loop import main


if __name__ == "__main__":
    sys.exit(main())
