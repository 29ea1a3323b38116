"""
Output of a finished prime table.

Responsibility: turning a sealed PrimeTable into text. Two formats:

- text listing: ``"2 3 5 7 \\n"`` (every prime followed by a space, one newline)
- record listing: ``"2,3,5,7\\n"`` written to a file (no leading/trailing comma)

Emitters never modify the table and never keep the destination around.
"""

import os
import sys
from typing import Iterator, Optional, TextIO, Union

from .errors import OutputError
from .primes import PrimeTable

# Primes formatted per write, for both listings.
CHUNK_SIZE = 1 << 16


def iter_text(table: PrimeTable, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """
    Yield the text listing in pieces.

    Each piece holds up to ``chunk_size`` primes, each followed by a space.
    The last piece is the terminating newline.
    """
    primes = table.primes()
    for start in range(0, len(primes), chunk_size):
        chunk = primes[start:start + chunk_size]
        yield "".join(f"{p} " for p in chunk.tolist())
    yield "\n"


def format_text(table: PrimeTable) -> str:
    """Return the whole text listing as one string."""
    return "".join(iter_text(table))


def emit_text(table: PrimeTable, stream: Optional[TextIO] = None) -> None:
    """
    Write the text listing to ``stream`` (stdout by default).

    Parameters
    ----------
    table : PrimeTable
        Sealed table.
    stream : file-like, optional
        Text stream to write to.
    """
    if stream is None:
        stream = sys.stdout
    for piece in iter_text(table):
        stream.write(piece)
    stream.flush()


def iter_record(table: PrimeTable, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """
    Yield the record listing in pieces.

    Commas go between primes only, including across piece boundaries; the
    last piece is the terminating newline.
    """
    primes = table.primes()
    for start in range(0, len(primes), chunk_size):
        piece = ",".join(str(p) for p in primes[start:start + chunk_size].tolist())
        yield piece if start == 0 else "," + piece
    yield "\n"


def format_record(table: PrimeTable) -> str:
    """Return the record listing, e.g. ``"2,3,5,7\\n"``."""
    return "".join(iter_record(table))


def emit_records(table: PrimeTable, destination: Union[str, os.PathLike],
                 chunk_size: int = CHUNK_SIZE) -> None:
    """
    Write the primes of ``table`` as one comma-separated line to ``destination``.

    Any existing file is truncated. The path is used exactly as given; its
    extension is not checked here. The line is written piece by piece, so
    memory use does not grow with the number of primes beyond the table.

    Parameters
    ----------
    table : PrimeTable
        Sealed table.
    destination : str or path-like
        File to write.
    chunk_size : int, optional
        Primes formatted per write.

    Raises
    ------
    OutputError
        If the file cannot be opened or written, or the listing cannot be
        formatted for lack of memory.
    """
    try:
        with open(destination, "w", newline="\n") as f:
            for piece in iter_record(table, chunk_size):
                f.write(piece)
    except OSError as exc:
        raise OutputError(destination, exc.strerror or str(exc)) from exc
    except MemoryError as exc:
        raise OutputError(destination, "out of memory") from exc
