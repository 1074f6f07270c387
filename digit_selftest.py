#!/usr/bin/env python3
"""
digit_selftest — BCD increment self-test for the packed-digit ALU

Usage:
    python digit_selftest.py

Takes no command line arguments. Prints a comparison table for the
mantissa (slots 3-12) and exponent (slots 0-1) incrementers followed by
the number of vectors with a mismatch. The exit status does not depend
on mismatches.

Environment:
    DIGIT_ARITH_LOG_LEVEL   console log level (default WARNING)
    DIGIT_ARITH_LOG_FILE    also write a DEBUG log to this file
"""

import argparse
import sys
from typing import List, Optional

from digit_arith import __version__
from digit_arith.log_setup import setup_logging
from digit_arith.selftest import run_vectors, format_table, count_failures


def build_parser() -> argparse.ArgumentParser:
    # No -h/--help: the harness accepts no arguments at all.
    return argparse.ArgumentParser(
        prog="digit_selftest",
        description=f"Packed-digit ALU self-test (digit_arith {__version__})",
        usage="%(prog)s   (takes no command line arguments)",
        add_help=False,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)   # exits with status 2 on any argument

    log = setup_logging("digit_arith")
    log.debug("digit_selftest %s starting", __version__)

    results = run_vectors()
    for line in format_table(results):
        print(line)

    log.info("%d of %d vectors have failure(s)", count_failures(results), len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
