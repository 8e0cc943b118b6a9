#!/usr/bin/env python3
"""
Decodes a fixed set of sample values into their IEEE-754 sign, exponent and
fraction fields and prints one report per value to stdout:

    binary32 5.0, binary32 0.1, binary64 0.1, binary32 -0.0

Reports are separated by a "----" line. Diagnostics go to stderr and never
change the report text.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO, Tuple

from libfloatdecode.formats import FloatFormat, BINARY32, BINARY64
from libfloatdecode.report import report

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "FLOAT_DECODE_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DIVIDER = "----"

SAMPLES: List[Tuple[float, FloatFormat]] = [
    (5.0, BINARY32),
    (0.1, BINARY32),
    (0.1, BINARY64),
    (-0.0, BINARY32),
]


def run(out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    for i, (value, fmt) in enumerate(SAMPLES):
        if i > 0:
            out.write(DIVIDER + "\n")
        logger.debug("Decoding sample %d: %r as %s", i, value, fmt.name)
        report(value, fmt, out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    default_level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if default_level not in LOG_LEVELS:
        default_level = "WARNING"

    parser = argparse.ArgumentParser(
        description="Print the IEEE-754 bit fields of a few sample floats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  float-decode                     # Print the four sample reports
  float-decode -v                  # Same, with debug diagnostics on stderr
  {LOG_LEVEL_ENV}=INFO float-decode
        """
    )
    # --log-level must be registered first so its default owns the shared dest
    parser.add_argument('--log-level', dest='log_level', choices=LOG_LEVELS,
                        default=default_level, type=str.upper,
                        help=f'Diagnostic level on stderr (default: ${LOG_LEVEL_ENV} or WARNING)')
    parser.add_argument('-v', '--verbose', action='store_const',
                        dest='log_level', const='DEBUG',
                        help='Shorthand for --log-level DEBUG')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
