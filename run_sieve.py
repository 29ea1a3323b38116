#!/usr/bin/env python3
"""
List all primes up to a limit with the Sieve of Eratosthenes.

Usage:
    python run_sieve.py -n 100
    python run_sieve.py -f output.csv -n 100
    python run_sieve.py --config config/custom.yaml
"""

import sys

from src.cli import main


if __name__ == '__main__':
    sys.exit(main())
