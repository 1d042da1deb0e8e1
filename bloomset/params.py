# ==================================================
# bloomset/params.py
# ==================================================
from math import log, ceil, exp, isfinite
from numbers import Real

from .errors import InvalidParameter

LN2 = log(2)


def _is_number(x) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool) and isfinite(x)


def calculate(expected_items, fp_prob) -> tuple[int, int]:
    """Return the optimal ``(m, k)`` for ``expected_items`` keys at ``fp_prob``.

    m is the bit-array size and k the number of probes.  Both are rounded up.
    """
    if not _is_number(expected_items) or expected_items <= 0:
        raise InvalidParameter(f"expected_items must be > 0, got {expected_items!r}")
    if not _is_number(fp_prob) or not 0 < fp_prob < 1:
        raise InvalidParameter(f"false positive probability must be in (0, 1), got {fp_prob!r}")

    m = ceil(-(expected_items * log(fp_prob)) / (LN2 ** 2))
    k = ceil((m / expected_items) * LN2)
    return m, k


def estimate_false_positive_rate(m:int, k:int, n:int) -> float:
    """Textbook (1 - e^(-kn/m))^k for n keys in an m-bit, k-probe filter."""
    if m <= 0 or k <= 0:
        raise InvalidParameter("m and k must be positive")
    if n <= 0:
        return 0.0
    return (1 - exp(-k * n / m)) ** k
