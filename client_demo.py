#!/usr/bin/env python3
#
# PROJECT: surface-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from surface_cli_renderer.demo import cli


if __name__ == "__main__":
    sys.exit(cli())
