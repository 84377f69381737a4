"""Test-case loading: thresholds and encoded shares from JSON-like text.

The expected shape is

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

but fields are located by pattern rather than by a strict JSON parse, so
extra keys, nesting and trailing commas are tolerated. Shares are kept in
document order, which decides which k of them the solver uses.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from shamirsolve.errors import MalformedTestCase
from shamirsolve.radix import MIN_BASE, MAX_BASE, decode
from shamirsolve.solver import Point

_N_RE = re.compile(r'"n"\s*:\s*(\d+)')
_K_RE = re.compile(r'"k"\s*:\s*(\d+)')
_SHARE_RE = re.compile(
    r'"(\d+)"\s*:\s*\{[^}]*"base"\s*:\s*"(\d+)"[^}]*"value"\s*:\s*"([^"]+)"[^}]*\}')


@dataclass
class TestCase:
    n: int
    k: int
    points: list = field(default_factory=list)
    source: Optional[str] = None

    __test__ = False  # not a pytest class


def parse_test_case(text: str, source: Optional[str] = None) -> TestCase:
    """Parse n, k and the decoded shares out of `text`.

    Missing "n" defaults to the number of shares found. A missing or
    non-positive "k", or a base outside [2, 36], raises MalformedTestCase.
    InvalidDigit from decoding a share value propagates unchanged.
    """
    label = source or '<string>'
    k_match = _K_RE.search(text)
    if k_match is None:
        raise MalformedTestCase(f"{label}: missing \"k\"")
    k = int(k_match.group(1))
    if k < 1:
        raise MalformedTestCase(f"{label}: threshold k must be >= 1, got {k}")

    points = []
    for m in _SHARE_RE.finditer(text):
        x, base, value = int(m.group(1)), int(m.group(2)), m.group(3)
        if not (MIN_BASE <= base <= MAX_BASE):
            raise MalformedTestCase(
                f"{label}: share {x} has base {base}, "
                f"expected [{MIN_BASE}, {MAX_BASE}]")
        points.append(Point(x, decode(value, base)))

    n_match = _N_RE.search(text)
    n = int(n_match.group(1)) if n_match else len(points)
    return TestCase(n=n, k=k, points=points, source=source)


def load_test_case(path) -> TestCase:
    """Read and parse a test-case file.

    A file that is not valid UTF-8 raises MalformedTestCase; OSError from
    opening or reading propagates.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as exc:
        raise MalformedTestCase(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    return parse_test_case(text, source=str(path))
