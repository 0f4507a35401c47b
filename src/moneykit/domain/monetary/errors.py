"""Exceptions raised by monetary operations.

Every error derives from `MoneyError` and also from the closest built-in
exception, so callers can catch either the library base class or the usual
Python exception (e.g. `ValueError`, `ZeroDivisionError`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moneykit.domain.monetary.currency import Currency


class MoneyError(Exception):
    """Base class for all errors raised by moneykit."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when a binary operation combines amounts of different currencies."""

    def __init__(self, left: Currency, right: Currency):
        self.left = left
        self.right = right
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when an amount is divided (or taken modulo) by zero."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` because $divisor is 0")


class InvalidPartitionCountError(MoneyError, ValueError):
    """Raised when an amount is split into a non-positive number of parts."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"Cannot call `split` because $n ({n}) is not positive")


class NoRatiosSpecifiedError(MoneyError, ValueError):
    """Raised when allocation is requested without any ratio."""

    def __init__(self):
        super().__init__("Cannot call `allocate` because no $ratios were specified")


class NegativeRatioNotAllowedError(MoneyError, ValueError):
    """Raised when one of the allocation ratios is negative."""

    def __init__(self, index: int, ratio: int):
        self.index = index
        self.ratio = ratio
        super().__init__(f"Cannot call `allocate` because $ratios[{index}] ({ratio}) is negative")


class RatioSumOverflowError(MoneyError, OverflowError):
    """Raised when the sum of allocation ratios does not fit into a signed 64-bit integer."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Cannot call `allocate` because the sum of $ratios exceeds max int64 at index {index}")


class ArithmeticOverflowError(MoneyError, OverflowError):
    """Raised when an arithmetic result does not fit into a signed 64-bit integer."""

    def __init__(self, operation: str, result: int):
        self.operation = operation
        self.result = result
        super().__init__(f"Result of `{operation}` ({result}) is outside of the signed 64-bit range")


class UnknownCurrencyError(MoneyError, LookupError):
    """Raised when a strict currency lookup does not find the requested code."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Currency with code {code!r} not found in registry")


class RegistryFrozenError(MoneyError, TypeError):
    """Raised when a frozen currency registry is modified."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Cannot add currency '{code}' because the registry is frozen. Use `copy()` to get a mutable registry.")


class InvalidJSONError(MoneyError, ValueError):
    """Raised when a JSON payload cannot be decoded into Money."""


class ScanError(MoneyError, ValueError):
    """Raised when a database value cannot be decoded into Money or Currency."""
