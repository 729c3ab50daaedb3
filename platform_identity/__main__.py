#!/usr/bin/env python3
"""
Entry point for running platform_identity as a module.
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
