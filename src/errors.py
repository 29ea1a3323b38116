"""
Error types raised by the sieve.

Responsibility: error taxonomy only. The core raises these; the CLI reports them.
"""

import os
from typing import Union


class SieveError(Exception):
    """Base class for errors raised by this package."""


class AllocationError(SieveError, MemoryError):
    """The flag table could not be allocated for the requested bound."""

    def __init__(self, bound: int):
        super().__init__(f"Memory allocation failed for bound {bound}")
        self.bound = bound


class OutputError(SieveError, OSError):
    """The record destination could not be opened or written."""

    def __init__(self, destination: Union[str, os.PathLike], reason: str = ""):
        message = f"Failed to open file {os.fspath(destination)} for writing"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.destination = destination
