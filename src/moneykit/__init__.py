__version__ = "0.1.0"

from moneykit.domain.monetary.currency import Currency, CurrencyRegistry
from moneykit.domain.monetary.currency_registry import ISO_CURRENCIES, create_registry
from moneykit.domain.monetary.errors import (
    ArithmeticOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidJSONError,
    InvalidPartitionCountError,
    MoneyError,
    NegativeRatioNotAllowedError,
    NoRatiosSpecifiedError,
    RatioSumOverflowError,
    RegistryFrozenError,
    ScanError,
    UnknownCurrencyError,
)
from moneykit.domain.monetary.money import Money

__all__ = [
    "Money",
    "Currency",
    "CurrencyRegistry",
    "ISO_CURRENCIES",
    "create_registry",
    "MoneyError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "InvalidPartitionCountError",
    "NoRatiosSpecifiedError",
    "NegativeRatioNotAllowedError",
    "RatioSumOverflowError",
    "ArithmeticOverflowError",
    "UnknownCurrencyError",
    "RegistryFrozenError",
    "InvalidJSONError",
    "ScanError",
]
