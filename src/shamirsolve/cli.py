"""Command line driver: solve one or more test-case files.

    shamirsolve [--check] [--keep-going] [-v] [FILE ...]

Prints "Secret for <file>: <secret>" per solved file. With no files the
two default inputs in the working directory are used.
"""

import argparse
import logging
import sys

from shamirsolve.errors import ShamirSolveError
from shamirsolve.solver import find_secret, inconsistent_shares
from shamirsolve.testcase import load_test_case

_logger = logging.getLogger(__name__)

DEFAULT_FILES = ('test1.json', 'test2.json')
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shamirsolve',
        description="Recover Shamir secrets from base-encoded shares")
    parser.add_argument(
        'files', nargs='*', metavar='FILE',
        help=f"test-case files (default: {' '.join(DEFAULT_FILES)})")
    parser.add_argument(
        '--check', action='store_true',
        help="also report shares beyond the first k that disagree")
    parser.add_argument(
        '--keep-going', action='store_true',
        help="continue with the next file after a failure")
    parser.add_argument(
        '-v', '--verbose', action='store_true', help="debug logging")
    return parser


def solve_file(path: str, check: bool = False, out=None) -> int:
    """Load, solve and print one test case. Returns the secret."""
    out = out or sys.stdout
    tc = load_test_case(path)
    _logger.debug("%s: n=%d k=%d shares=%d", path, tc.n, tc.k, len(tc.points))
    secret = find_secret(tc.points, tc.k)
    print(f"Secret for {path}: {secret}", file=out)
    if check:
        bad = inconsistent_shares(tc.points, tc.k)
        if bad:
            xs = ', '.join(str(tc.points[i].x) for i in bad)
            _logger.warning("%s: shares inconsistent with secret at x = %s",
                            path, xs)
        else:
            _logger.debug("%s: all %d shares consistent", path, len(tc.points))
    return secret


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if args.verbose else logging.WARNING)

    files = args.files or list(DEFAULT_FILES)
    failed = 0
    for path in files:
        try:
            solve_file(path, check=args.check)
        except (ShamirSolveError, ZeroDivisionError, OSError) as exc:
            failed += 1
            _logger.error("%s: %s: %s", path, type(exc).__name__, exc)
            if not args.keep_going:
                break
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
