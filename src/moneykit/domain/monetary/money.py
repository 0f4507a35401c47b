from __future__ import annotations

from decimal import Decimal

from moneykit.domain.monetary.currency import Currency, CurrencyRegistry
from moneykit.domain.monetary.currency_registry import ISO_CURRENCIES
from moneykit.domain.monetary.errors import (
    ArithmeticOverflowError,
    CurrencyMismatchError,
    InvalidPartitionCountError,
    NegativeRatioNotAllowedError,
    NoRatiosSpecifiedError,
    RatioSumOverflowError,
)
from moneykit.utils import calculator
from moneykit.utils.calculator import INT64_MAX, INT64_MIN


def _require_int(name: str, value: object) -> int:
    # Raise: amounts and factors are plain ints (bool is excluded on purpose)
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"${name} must be an int, but provided value is: {value!r}")
    return value


class Money:
    """Represents a monetary amount in the smallest unit of its currency.

    The amount is an int (e.g. cents for USD) limited to the signed 64-bit
    range, so arithmetic is exact. Instances are immutable; every operation
    returns a new instance.

    Binary operations require both operands to share the same currency and
    raise `CurrencyMismatchError` otherwise. The only exception is `==`, which
    simply reports different currencies as unequal so Money can be used in
    sets and as dict keys.

    Example:
        ```python
        bill = Money.of(1000, "USD")    # $10.00
        shares = bill.split(3)          # [$3.34, $3.33, $3.33]
        revenue = Money.of(10000, "USD")
        parts = revenue.allocate(50, 30, 20)  # [$50.00, $30.00, $20.00]
        ```
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount (int): Amount in the currency's smallest unit.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $amount is not an int or $currency is not a Currency.
            ArithmeticOverflowError: If $amount is outside the signed 64-bit range.
        """
        _require_int("amount", amount)

        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: amount must fit into int64
        if amount < INT64_MIN or amount > INT64_MAX:
            raise ArithmeticOverflowError("Money", amount)

        self._amount = amount
        self._currency = currency

    # region Factories

    @classmethod
    def of(cls, amount: int, code: str, registry: CurrencyRegistry | None = None) -> Money:
        """Create Money from $amount in smallest units and a currency $code.

        The code is resolved once (case-insensitive) through $registry, which
        defaults to the read-only ISO 4217 registry. Unknown codes resolve to
        a default currency with 2 decimal digits.
        """
        registry = registry if registry is not None else ISO_CURRENCIES
        return cls(amount, registry.resolve(code))

    @classmethod
    def from_float(cls, value: float, code: str, registry: CurrencyRegistry | None = None) -> Money:
        """Create Money from a value in major units (e.g. 25.50 dollars).

        The value is scaled by the currency fraction and truncated toward zero
        once; from then on everything is integer arithmetic. Prefer `of` where
        the amount is already known in smallest units.
        """
        registry = registry if registry is not None else ISO_CURRENCIES
        currency = registry.resolve(code)

        # Floats go through str so 0.29 scales to 29, not 28.999...
        scaled = Decimal(str(value)).scaleb(currency.fraction)
        return cls(int(scaled), currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(0, currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> int:
        """Get the amount in smallest units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Currency checks and comparison

    def same_currency(self, other: Money) -> bool:
        return self._currency == other._currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        if not self.same_currency(other):
            raise CurrencyMismatchError(self._currency, other._currency)

    def _compare(self, other: Money) -> int:
        if self._amount > other._amount:
            return 1
        if self._amount < other._amount:
            return -1
        return 0

    def compare(self, other: Money) -> int:
        """Return 1, 0 or -1 when this amount is greater than, equal to or less than $other.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(other)
        return self._compare(other)

    def equals(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._compare(other) == 0

    def greater_than(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._compare(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._compare(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self._compare(other) <= 0

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    # endregion

    # region Arithmetic

    def add(self, *others: Money) -> Money:
        """Return the sum of this Money and all $others.

        All currencies are checked before anything is summed, so a mismatch
        anywhere in $others fails the whole operation.

        Raises:
            CurrencyMismatchError: If any operand has a different currency.
            ArithmeticOverflowError: If the sum leaves the int64 range.
        """
        if not others:
            return self

        for other in others:
            self._check_same_currency(other)

        result = self._amount
        for other in others:
            result = calculator.add(result, other._amount)

        return Money(result, self._currency)

    def subtract(self, *others: Money) -> Money:
        """Return this Money minus all $others.

        Raises:
            CurrencyMismatchError: If any operand has a different currency.
            ArithmeticOverflowError: If the result leaves the int64 range.
        """
        if not others:
            return self

        for other in others:
            self._check_same_currency(other)

        result = self._amount
        for other in others:
            result = calculator.subtract(result, other._amount)

        return Money(result, self._currency)

    def multiply(self, multiplier: int, *multipliers: int) -> Money:
        """Return this Money multiplied by $multiplier and every further multiplier.

        At least one multiplier is required; calling `multiply()` without one
        is a programming error and Python reports it as `TypeError`.

        Example:
            `Money.of(1000, "USD").multiply(2, 3)` is $60.00.
        """
        factors = [_require_int("multiplier", m) for m in (multiplier, *multipliers)]

        result = self._amount
        for m in factors:
            result = calculator.multiply(result, m)

        return Money(result, self._currency)

    def absolute(self) -> Money:
        return Money(calculator.absolute(self._amount), self._currency)

    def negative(self) -> Money:
        """Return Money with the sign flipped (`-$5.00` becomes `$5.00` and vice versa)."""
        return Money(calculator.negate(self._amount), self._currency)

    def round(self) -> Money:
        """Return Money rounded half up according to the currency fraction.

        See `calculator.round_half_up`; currencies without decimal digits are
        returned unchanged.
        """
        return Money(calculator.round_half_up(self._amount, self._currency.fraction), self._currency)

    # endregion

    # region Distribution

    def split(self, n: int) -> list[Money]:
        """Split this Money into $n parts as evenly as integer arithmetic allows.

        The remainder is handed out one smallest unit at a time to the first
        parts, so the parts differ by at most one unit and always sum to the
        original amount. Negative amounts hand out negative units.

        Args:
            n (int): Number of parts; must be positive.

        Returns:
            list[Money]: $n parts in the same currency.

        Raises:
            InvalidPartitionCountError: If $n <= 0.

        Example:
            `Money.of(1000, "USD").split(3)` gives 334, 333, 333 cents.
        """
        _require_int("n", n)

        # Raise: at least one part is required
        if n <= 0:
            raise InvalidPartitionCountError(n)

        base = calculator.divide(self._amount, n)
        amounts = [base] * n

        leftover = calculator.absolute(calculator.modulus(self._amount, n))
        step = 1 if self._amount >= 0 else -1
        for i in range(leftover):
            amounts[i] = calculator.add(amounts[i], step)

        return [Money(amount, self._currency) for amount in amounts]

    def allocate(self, *ratios: int) -> list[Money]:
        """Distribute this Money proportionally to $ratios.

        Every part first gets its truncated proportional share. Whatever the
        truncation left over is handed out one smallest unit at a time,
        round-robin from the first part, until the parts sum to the original
        amount exactly.

        If all ratios are zero, every part is zero and no remainder is
        distributed.

        Args:
            *ratios (int): Non-negative weights, one per part.

        Returns:
            list[Money]: One part per ratio, in the same currency.

        Raises:
            NoRatiosSpecifiedError: If no ratio is given.
            NegativeRatioNotAllowedError: If any ratio is negative.
            RatioSumOverflowError: If the sum of ratios exceeds the int64 range.

        Example:
            `Money.of(100, "USD").allocate(33, 33, 33)` gives 34, 33, 33 cents.
        """
        # Raise: at least one ratio is required
        if not ratios:
            raise NoRatiosSpecifiedError()

        total_ratio = 0
        for index, ratio in enumerate(ratios):
            _require_int("ratio", ratio)

            # Raise: ratios must be non-negative
            if ratio < 0:
                raise NegativeRatioNotAllowedError(index, ratio)

            # Raise: the sum of ratios must stay within int64
            if ratio > INT64_MAX - total_ratio:
                raise RatioSumOverflowError(index)

            total_ratio += ratio

        amounts = [calculator.allocate(self._amount, ratio, total_ratio) for ratio in ratios]

        if total_ratio == 0:
            return [Money(amount, self._currency) for amount in amounts]

        leftover = self._amount - sum(amounts)
        step = 1 if leftover > 0 else -1
        cursor = 0
        while leftover != 0:
            index = cursor % len(amounts)
            amounts[index] = calculator.add(amounts[index], step)
            leftover -= step
            cursor += 1

        return [Money(amount, self._currency) for amount in amounts]

    # endregion

    # region Display

    def display(self) -> str:
        """Return the amount formatted with the currency's display rules (e.g. '$1,234.56')."""
        return self._currency.formatter().format(self._amount)

    def as_major_units(self) -> float:
        """Return the amount in major units as float. Use for display only."""
        return self._currency.formatter().to_major_units(self._amount)

    # endregion

    # region Python operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (amount and currency)."""
        if not isinstance(other, Money):
            return False
        if not self.same_currency(other):
            return False
        return self._amount == other._amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by an int (returns Money)."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self.negative()

    def __abs__(self):
        return self.absolute()

    # String representations
    def __str__(self) -> str:
        """Return string like '$1,000.50'."""
        return self.display()

    def __repr__(self) -> str:
        """Return string like 'Money(100050, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
