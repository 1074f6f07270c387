"""
Digit Arithmetic — BCD Increment Self-Test

Runs both field incrementers over a fixed table of words and builds the
comparison table printed by digit_selftest.py:

  arg            exp result m   result m       exp result x   result x
  -------------- -------------- -------------- -------------- --------------
  00000000000000 00000000001000                00000000000001

A result column is left blank when it matches the expected value and
shows the actual value when it doesn't. Mismatches are reported only as
a count; they are not treated as errors.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .alu import add_one_bcd_m, add_one_bcd_x
from .config import DISPLAY_WIDTH
from .digits import format_word

__all__ = [
    'TestVector', 'VectorResult', 'TEST_VECTORS',
    'run_vectors', 'count_failures', 'format_table',
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestVector:
    """Input word and the expected mantissa / exponent increments."""
    __test__ = False   # not a pytest test class

    arg: int
    expected_m: int
    expected_x: int


# Words include non-decimal nibbles outside (and inside) the incremented
# fields to exercise pass-through and BCD carry on A-F.
TEST_VECTORS = (
    TestVector(0x00000000000000, 0x00000000001000, 0x00000000000001),
    TestVector(0x00000000009009, 0x00000000010009, 0x00000000009010),
    TestVector(0x0000000000a00a, 0x0000000001100a, 0x0000000000a011),
    TestVector(0xf006a0000000ab, 0xf00700000010ab, 0xf006a000000012),
)


@dataclass(frozen=True)
class VectorResult:
    vector: TestVector
    result_m: int
    result_x: int

    @property
    def m_ok(self) -> bool:
        return self.result_m == self.vector.expected_m

    @property
    def x_ok(self) -> bool:
        return self.result_x == self.vector.expected_x

    @property
    def failed(self) -> bool:
        return not (self.m_ok and self.x_ok)


def run_vectors(vectors: Iterable[TestVector] = TEST_VECTORS) -> List[VectorResult]:
    """Evaluate add_one_bcd_m and add_one_bcd_x for every vector."""
    results = []
    for vector in vectors:
        res = VectorResult(vector, add_one_bcd_m(vector.arg), add_one_bcd_x(vector.arg))
        log.debug("arg=%s m=%s x=%s", format_word(vector.arg),
                  format_word(res.result_m), format_word(res.result_x))
        if not res.m_ok:
            log.warning("add_one_bcd_m(%s): expected %s, got %s",
                        format_word(vector.arg), format_word(vector.expected_m),
                        format_word(res.result_m))
        if not res.x_ok:
            log.warning("add_one_bcd_x(%s): expected %s, got %s",
                        format_word(vector.arg), format_word(vector.expected_x),
                        format_word(res.result_x))
        results.append(res)
    return results


def count_failures(results: Sequence[VectorResult]) -> int:
    """Number of vectors with at least one mismatching result."""
    return sum(1 for r in results if r.failed)


def _actual_column(ok: bool, value: int) -> str:
    return " " * DISPLAY_WIDTH if ok else format_word(value)


def format_table(results: Sequence[VectorResult]) -> List[str]:
    """Render the comparison table plus the failure summary line."""
    w = DISPLAY_WIDTH
    headers = ("arg", "exp result m", "result m", "exp result x", "result x")
    lines = [
        " ".join(f"{h:<{w}}" for h in headers),
        " ".join("-" * w for _ in headers),
    ]
    for r in results:
        lines.append(" ".join((
            format_word(r.vector.arg),
            format_word(r.vector.expected_m),
            _actual_column(r.m_ok, r.result_m),
            format_word(r.vector.expected_x),
            _actual_column(r.x_ok, r.result_x),
        )))
    lines.append("")
    lines.append(f"{count_failures(results)} test cases have failure(s).")
    return lines
