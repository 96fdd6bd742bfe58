"""Level 1 API: one-call enciphering and deciphering."""

from .cipher import decipher, encipher, transform_file

__all__ = ["encipher", "decipher", "transform_file"]
