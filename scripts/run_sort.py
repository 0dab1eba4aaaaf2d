#!/usr/bin/env python3
"""Standalone proximity-sort runner script."""

from __future__ import annotations

import sys

from proximity_sort.cli import main

if __name__ == "__main__":
    sys.exit(main())
