"""Developer tools for the shift cipher.

Provides run profiling used by the diagnostic summary.
"""

from .profiling import RunProfiler

__all__ = ["RunProfiler"]
