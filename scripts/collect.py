# -*- coding: utf-8 -*-
"""
Run (from project root):
  python -m scripts.collect samsung iphone oneplus

See search_collector/cli.py for options and env vars.
"""

import sys

from search_collector.cli import main

if __name__ == "__main__":
    sys.exit(main())
