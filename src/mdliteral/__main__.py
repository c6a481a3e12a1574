#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/__main__.py
"""Run the command line with ``python -m mdliteral``."""

import sys

from mdliteral.cli import main

sys.exit(main())
