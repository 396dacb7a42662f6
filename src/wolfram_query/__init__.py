"""Wolfram Query packages module.

This module provides the project paths used to locate configuration files.
"""

from pathlib import Path

THIS_DIR = Path(__file__).parent
PROJECT_DIR = (THIS_DIR / "../..").resolve()
