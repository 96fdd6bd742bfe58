"""Command-line interface module for the shift cipher.

This module provides the shift-encipher and shift-decipher tools and the
option model they share.
"""

from .main import decipher_main, encipher_main, main

__all__ = ["main", "encipher_main", "decipher_main"]
