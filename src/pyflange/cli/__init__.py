"""
Command-line tools for pyflange.

This module provides the ``pyflange`` command:
- Sizing a joint from a design file
- Searching bolt size and count
- Listing reference tables
- Writing a default design file
"""

from .helper_cli import cli

__all__ = ["cli"]
