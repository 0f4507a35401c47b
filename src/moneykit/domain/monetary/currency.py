from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from moneykit.domain.monetary.errors import RegistryFrozenError, UnknownCurrencyError
from moneykit.formatting.formatter import Formatter

logger = logging.getLogger(__name__)


class Currency:
    """Represents a currency with its code and display metadata.

    Two currencies are equal when their codes are equal; the remaining
    attributes are display metadata and take no part in equality.

    Attributes:
        code (str): ISO 4217 alphabetic code (e.g., "USD", "EUR").
        numeric_code (str): ISO 4217 numeric code (e.g., "840"); may be empty.
        fraction (int): Number of decimal digits of the smallest unit (0-18).
        grapheme (str): Currency symbol (e.g., "$", "€").
        template (str): Display template, see `Formatter`.
        decimal (str): Decimal separator.
        thousand (str): Thousands separator.
    """

    __slots__ = ("_code", "_numeric_code", "_fraction", "_grapheme", "_template", "_decimal", "_thousand")

    def __init__(
        self,
        code: str,
        numeric_code: str = "",
        fraction: int = 2,
        grapheme: str | None = None,
        template: str = "1$",
        decimal: str = ".",
        thousand: str = ",",
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code; stored upper-cased.
            numeric_code (str): ISO 4217 numeric code, or "" when there is none.
            fraction (int): Number of decimal digits (0-18).
            grapheme (str | None): Currency symbol. Defaults to the code.
            template (str): Display template.
            decimal (str): Decimal separator.
            thousand (str): Thousands separator.

        Raises:
            ValueError: If $code is empty or $fraction is out of range.
        """
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: fraction must be an int within the supported range
        if not isinstance(fraction, int) or isinstance(fraction, bool) or fraction < 0 or fraction > 18:
            raise ValueError(f"$fraction must be an integer between 0 and 18, but provided value is: {fraction}")

        self._code = code.upper().strip()
        self._numeric_code = numeric_code
        self._fraction = fraction
        self._grapheme = grapheme if grapheme is not None else self._code
        self._template = template
        self._decimal = decimal
        self._thousand = thousand

    @classmethod
    def default_for(cls, code: str) -> Currency:
        """Return the fallback currency used for codes missing from a registry."""
        return cls(code, fraction=2, template="1$", decimal=".", thousand=",")

    @property
    def code(self) -> str:
        return self._code

    @property
    def numeric_code(self) -> str:
        return self._numeric_code

    @property
    def fraction(self) -> int:
        return self._fraction

    @property
    def grapheme(self) -> str:
        return self._grapheme

    @property
    def template(self) -> str:
        return self._template

    @property
    def decimal(self) -> str:
        return self._decimal

    @property
    def thousand(self) -> str:
        return self._thousand

    def formatter(self) -> Formatter:
        """Return a `Formatter` configured with this currency's display rules."""
        return Formatter(
            fraction=self._fraction,
            decimal=self._decimal,
            thousand=self._thousand,
            grapheme=self._grapheme,
            template=self._template,
        )

    def __eq__(self, other) -> bool:
        """Check equality with another Currency (by code)."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', fraction={self.fraction})"


class CurrencyRegistry:
    """Lookup table of currencies by code.

    A registry is an explicit object handed to whoever needs to resolve
    currency codes; there is no process-wide registry. A frozen registry
    rejects modifications and is safe to share between threads.

    Example:
        ```python
        registry = CurrencyRegistry()
        registry.add(Currency("BTC", fraction=8, grapheme="₿", template="$1"))

        registry.resolve("btc")  # Currency('BTC', fraction=8)
        registry.resolve("XYZ")  # default currency with fraction 2
        ```
    """

    def __init__(self, currencies: Iterable[Currency] = (), frozen: bool = False):
        self._currencies: dict[str, Currency] = {}
        for currency in currencies:
            self._currencies[currency.code] = currency
        self._frozen = frozen
        logger.debug(f"Created CurrencyRegistry with {len(self._currencies)} currencies (frozen={frozen})")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, currency: Currency, overwrite: bool = True) -> CurrencyRegistry:
        """Add or replace $currency in this registry.

        Args:
            currency (Currency): The currency to add.
            overwrite (bool): Whether an existing currency with the same code may be replaced.

        Returns:
            CurrencyRegistry: This registry, to allow chaining.

        Raises:
            RegistryFrozenError: If the registry is frozen.
            ValueError: If the code already exists and $overwrite is False.
            TypeError: If $currency is not a Currency instance.
        """
        # Raise: only Currency instances can be registered
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: frozen registries are read-only
        if self._frozen:
            raise RegistryFrozenError(currency.code)

        # Raise: refuse silent replacement when asked to
        if currency.code in self._currencies and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        self._currencies[currency.code] = currency
        logger.debug(f"Added currency '{currency.code}' to CurrencyRegistry")
        return self

    def get(self, code: str) -> Currency | None:
        """Return the registered currency for $code (case-insensitive), or None."""
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")
        return self._currencies.get(code.upper().strip())

    def by_numeric_code(self, numeric_code: str) -> Currency | None:
        """Return the registered currency with ISO 4217 $numeric_code, or None."""
        if not numeric_code:
            return None
        for currency in self._currencies.values():
            if currency.numeric_code == numeric_code:
                return currency
        return None

    def resolve(self, code: str) -> Currency:
        """Return the currency for $code, falling back to `Currency.default_for`.

        Lookup is case-insensitive. Codes not present in the registry get a
        default currency with 2 decimal digits and the code as grapheme.
        """
        currency = self.get(code)
        if currency is None:
            return Currency.default_for(code)
        return currency

    def require(self, code: str) -> Currency:
        """Return the registered currency for $code.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        currency = self.get(code)
        if currency is None:
            raise UnknownCurrencyError(code)
        return currency

    def copy(self, frozen: bool = False) -> CurrencyRegistry:
        """Return an independent registry with the same currencies."""
        return CurrencyRegistry(self._currencies.values(), frozen=frozen)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper().strip() in self._currencies

    def __len__(self) -> int:
        return len(self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(currencies={len(self._currencies)}, frozen={self._frozen})"
