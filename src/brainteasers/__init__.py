"""
Brain Teasers - run a snippet, see what happened.

Wraps a single call and prints its signature, arguments, timing and outcome.
"""

__version__ = "1.0.0"

from brainteasers.logging_config import setup_logging
from brainteasers.lab import Char, call, lazy, run, run_void

__all__ = [
    "__version__",
    "Char",
    "call",
    "lazy",
    "run",
    "run_void",
    "setup_logging",
]
