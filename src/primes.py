"""
Prime generation utilities.

Responsibility: the flag table and the Sieve of Eratosthenes that fills it.
No formatting, no I/O.

The table is an explicit value: ``initialize`` builds it, ``eliminate_composites``
marks composites in place and then seals it, and the emitters only read it.
"""

import numpy as np

from .errors import AllocationError

# Largest bound accepted (unsigned 32-bit maximum).
MAX_BOUND = 2**32 - 1


class PrimeTable:
    """
    Boolean primality flags for the integers 0..bound.

    Attributes
    ----------
    bound : int
        Upper bound (inclusive).
    flags : np.ndarray
        Boolean array of length bound+1 where flags[i] is True iff i is
        (currently believed) prime. Read-only once sealed.
    """

    def __init__(self, bound: int, flags: np.ndarray):
        if len(flags) != bound + 1:
            raise ValueError(f"flags must have {bound + 1} entries, got {len(flags)}")
        self.bound = bound
        self.flags = flags

    @property
    def sealed(self) -> bool:
        """True once elimination has finished and the flags are read-only."""
        return not self.flags.flags.writeable

    def seal(self) -> None:
        self.flags.flags.writeable = False

    def primes(self) -> np.ndarray:
        """Return the indices of all True flags, ascending."""
        return np.flatnonzero(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def __repr__(self) -> str:
        state = "sealed" if self.sealed else "open"
        return f"PrimeTable(bound={self.bound}, {state})"


def _check_bound(bound) -> int:
    if isinstance(bound, bool) or not isinstance(bound, (int, np.integer)):
        raise TypeError(f"bound must be an integer, got {type(bound).__name__}")
    bound = int(bound)
    if not 2 <= bound <= MAX_BOUND:
        raise ValueError(f"bound must be between 2 and {MAX_BOUND}, got {bound}")
    return bound


def initialize(bound: int) -> PrimeTable:
    """
    Allocate a table for 0..bound with every entry but 0 and 1 set True.

    Parameters
    ----------
    bound : int
        Upper bound (inclusive), 2 <= bound <= MAX_BOUND.

    Returns
    -------
    PrimeTable
        Unsieved table.

    Raises
    ------
    AllocationError
        If numpy cannot allocate bound+1 flags.
    """
    bound = _check_bound(bound)
    try:
        flags = np.ones(bound + 1, dtype=bool)
    except MemoryError as exc:
        raise AllocationError(bound) from exc
    flags[0] = flags[1] = False
    return PrimeTable(bound, flags)


def eliminate_composites(table: PrimeTable) -> None:
    """
    Run the Sieve of Eratosthenes over ``table`` in place, then seal it.

    For every i with i*i <= bound that is still flagged, clear i*i, i*i+i, ...
    up to bound. Smaller multiples of i were already cleared by smaller
    primes. A sealed table is left as is, so repeated calls are harmless.
    """
    if table.sealed:
        return

    flags = table.flags
    # Python ints: i*i cannot overflow for any bound.
    i = 2
    while i * i <= table.bound:
        if flags[i]:
            flags[i*i::i] = False
        i += 1
    table.seal()
