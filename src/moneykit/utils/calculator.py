"""Integer arithmetic on raw amounts (smallest currency units).

All functions are pure and know nothing about currencies. Results are kept in
the signed 64-bit range; anything outside raises `ArithmeticOverflowError`.
"""

from __future__ import annotations

from moneykit.domain.monetary.errors import ArithmeticOverflowError, DivisionByZeroError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _checked(operation: str, result: int) -> int:
    # Raise: result must fit into int64
    if result < INT64_MIN or result > INT64_MAX:
        raise ArithmeticOverflowError(operation, result)
    return result


def add(a: int, b: int) -> int:
    return _checked("add", a + b)


def subtract(a: int, b: int) -> int:
    return _checked("subtract", a - b)


def multiply(a: int, m: int) -> int:
    return _checked("multiply", a * m)


def divide(a: int, d: int) -> int:
    """Divide $a by $d, truncating toward zero.

    Python's `//` floors, so the quotient is computed on absolute values and
    the sign is applied afterwards: `divide(-7, 2) == -3`.

    Raises:
        DivisionByZeroError: If $d is 0.
    """
    # Raise: divisor must not be zero
    if d == 0:
        raise DivisionByZeroError("divide")

    quotient = abs(a) // abs(d)
    if (a < 0) != (d < 0):
        quotient = -quotient
    return _checked("divide", quotient)


def modulus(a: int, d: int) -> int:
    """Return the remainder of $a / $d with the sign of the dividend.

    `modulus(-7, 2) == -1` (Python's `%` would give 1).

    Raises:
        DivisionByZeroError: If $d is 0.
    """
    # Raise: divisor must not be zero
    if d == 0:
        raise DivisionByZeroError("modulus")

    return a - d * divide(a, d)


def absolute(a: int) -> int:
    if a < 0:
        return _checked("absolute", -a)
    return a


def negate(a: int) -> int:
    """Flip the sign of $a. Not a clamp: `negate(-5) == 5`."""
    return _checked("negate", -a)


def round_half_up(a: int, precision: int) -> int:
    """Round $a half up so that only the first of its $precision decimal digits remains.

    An amount carrying $precision decimal digits is rounded to a multiple of
    `10 ** (precision - 1)`, e.g. 12.35 (1235, precision 2) becomes 12.40.
    The rounding happens on the absolute value and the original sign is
    restored, so halves move away from zero for negative amounts too.

    Args:
        a: Amount in smallest units.
        precision: Number of decimal digits the amount carries (usually the
            currency fraction). With 0 or 1 there is nothing to round away.

    Returns:
        Rounded amount.

    Raises:
        ValueError: If $precision is negative.

    Examples:
        >>> round_half_up(1235, 2)
        1240
        >>> round_half_up(1234, 2)
        1230
        >>> round_half_up(-1235, 2)
        -1240
        >>> round_half_up(1235, 0)
        1235
    """
    # Raise: precision must be non-negative
    if precision < 0:
        raise ValueError(f"Cannot call `round_half_up` because $precision ({precision}) is negative")

    factor = 10 ** max(precision - 1, 0)
    if a == 0 or factor == 1:
        return a

    abs_amount = absolute(a)
    remainder = abs_amount % factor

    # Half up: remainder >= factor / 2, kept in integers
    if remainder * 2 >= factor:
        abs_amount += factor

    rounded = _checked("round_half_up", (abs_amount // factor) * factor)
    return -rounded if a < 0 else rounded


def allocate(a: int, ratio: int, total_ratio: int) -> int:
    """Return the share of $a for $ratio out of $total_ratio, truncated toward zero.

    Returns 0 when $a or $total_ratio is 0 instead of failing; callers
    handle the zero-sum case themselves. The product `a * ratio` is computed
    with unbounded ints, so only the final share is range-checked.
    """
    if a == 0 or total_ratio == 0:
        return 0

    return divide(a * ratio, total_ratio)
