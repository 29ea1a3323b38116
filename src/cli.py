"""
Command line front end.

Resolves the limit and the optional output file from flags or interactive
prompts, runs the sieve, and hands the table to exactly one emitter.

Usage:
    python run_sieve.py -n 100
    python run_sieve.py -f output.csv -n 100
    python run_sieve.py                      # prompts for both values
"""

import argparse
import sys
import time
from typing import List, Optional, TextIO

import yaml

from .config import load_config
from .emitters import emit_records, emit_text
from .errors import AllocationError, OutputError
from .primes import eliminate_composites, initialize

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Marks a flag given without its value.
_MISSING = object()


def parse_bound(text: str, max_bound: int) -> int:
    """
    Parse a limit typed by the user.

    Raises
    ------
    ValueError
        If ``text`` is not an integer in [2, max_bound].
    """
    message = f"Limit must be between 2 and {max_bound}"
    try:
        bound = int(text.strip())
    except ValueError:
        raise ValueError(message) from None
    if not 2 <= bound <= max_bound:
        raise ValueError(message)
    return bound


def check_extension(destination: str, extension: str) -> Optional[str]:
    """Return a warning if ``destination`` does not end with ``extension``."""
    if len(destination) > len(extension) and not destination.endswith(extension):
        return f"Output file name should end with {extension}. Using {destination} instead."
    return None


def build_parser(max_bound: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run_sieve.py",
        description="Sieve of Eratosthenes: list every prime up to a limit.",
        epilog=(
            "Example: run_sieve.py -f output.csv -n 100\n"
            "This will generate a sieve of Eratosthenes up to 100 and save it to output.csv"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-n', '-N', dest='limit', nargs='?', const=_MISSING, default=None,
                        metavar='LIMIT',
                        help=f'Limit for prime number generation (must be between 2 and {max_bound})')
    parser.add_argument('-f', '-F', dest='output', nargs='?', const=_MISSING, default=None,
                        metavar='FILE',
                        help='Output file for the sieve. When omitted, primes go to standard output.')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print timing information to stderr')
    return parser


def _warn(message: str, color: bool) -> None:
    prefix = "\033[1;31mWarning:\033[0m" if color else "Warning:"
    print(f"{prefix} {message}", file=sys.stderr)


def _report_unknown(unknown: List[str]) -> None:
    """Warn about ignored arguments. An unknown flag takes its value with it."""
    i = 0
    while i < len(unknown):
        arg = unknown[i]
        if arg.startswith("-"):
            print(f"Undefined parameter {arg} ignored.", file=sys.stderr)
            if i + 1 < len(unknown) and not unknown[i + 1].startswith("-"):
                i += 1
        else:
            print(f"Invalid parameter format {arg}. Parameter ignored.", file=sys.stderr)
        i += 1


def _prompt(text: str, stdin: TextIO) -> Optional[str]:
    """Show ``text`` and read one line. Returns None at end of input."""
    print(text, end="", flush=True)
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def run(bound: int, destination: Optional[str] = None, verbose: bool = False) -> int:
    """
    Sieve up to ``bound`` and emit the primes.

    Writes the record listing to ``destination`` if given, otherwise prints the
    text listing. Returns the process exit status.
    """
    t0 = time.time()
    try:
        table = initialize(bound)
    except AllocationError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    eliminate_composites(table)
    if verbose:
        print(f"  Sieved up to {bound:,} in {time.time() - t0:.1f}s", file=sys.stderr)

    if destination:
        t0 = time.time()
        try:
            emit_records(table, destination)
        except OutputError as exc:
            print(exc, file=sys.stderr)
            return EXIT_FAILURE
        if verbose:
            print(f"  Written in {time.time() - t0:.1f}s", file=sys.stderr)
        print(f"Sieve written to {destination}")
    else:
        print(f"Prime numbers up to {bound}:")
        emit_text(table, sys.stdout)

    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    if stdin is None:
        stdin = sys.stdin

    # --config has to be known before the help text can show the limit.
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument('--config', type=str, default=None)
    pre_args, _ = pre.parse_known_args(argv)
    try:
        config = load_config(pre_args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    max_bound = config["max_bound"]
    parser = build_parser(max_bound)
    args, unknown = parser.parse_known_args(argv)

    _report_unknown(unknown)
    if args.limit is _MISSING:
        print("Missing value for parameter -n. Parameter ignored.", file=sys.stderr)
        args.limit = None
    if args.output is _MISSING:
        print("Missing value for parameter -f. Parameter ignored.", file=sys.stderr)
        args.output = None

    limit_text = args.limit
    if limit_text is None:
        limit_text = _prompt(
            "Please enter an upper limit for prime number generation "
            f"(between 2 and {max_bound}): ",
            stdin,
        )
        if limit_text is None:
            print("Invalid input. Program aborted.", file=sys.stderr)
            return EXIT_FAILURE

    try:
        bound = parse_bound(limit_text, max_bound)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        print("Program aborted due to invalid limit.")
        return EXIT_FAILURE

    destination = args.output
    if destination is None:
        destination = _prompt(
            "Enter filename for output file (*.csv) or <enter> for screenprint: ",
            stdin,
        ) or None

    if destination is not None:
        warning = check_extension(destination, config["record_extension"])
        if warning:
            _warn(warning, config["color"])

    status = run(bound, destination, verbose=args.verbose)
    if status == EXIT_SUCCESS:
        print("Program completed successfully.")
    return status


if __name__ == '__main__':
    sys.exit(main())
