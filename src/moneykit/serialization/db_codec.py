"""Database string encoding of Money: "<amount><separator><code>", e.g. "2550|USD"."""

from __future__ import annotations

from moneykit.config import MoneyKitConfig
from moneykit.domain.monetary.currency import Currency, CurrencyRegistry
from moneykit.domain.monetary.currency_registry import ISO_CURRENCIES
from moneykit.domain.monetary.errors import ArithmeticOverflowError, ScanError
from moneykit.domain.monetary.money import Money


class DbCodec:
    """Encodes Money into a single string column and decodes it back.

    The separator comes from the `MoneyKitConfig` given at construction, so
    two codecs with different separators can live side by side.

    Example:
        ```python
        codec = DbCodec(MoneyKitConfig(db_separator=":"))
        codec.encode(Money.of(2550, "USD"))  # "2550:USD"
        codec.decode("2550:USD")             # Money(2550, USD)
        ```
    """

    def __init__(self, config: MoneyKitConfig | None = None, registry: CurrencyRegistry | None = None):
        self._config = config if config is not None else MoneyKitConfig()
        self._registry = registry if registry is not None else ISO_CURRENCIES

    @property
    def separator(self) -> str:
        return self._config.db_separator

    def encode(self, money: Money) -> str:
        return f"{money.amount}{self.separator}{money.currency.code}"

    def encode_currency(self, currency: Currency) -> str:
        return currency.code

    def decode(self, src: object) -> Money:
        """Decode Money from a database value such as "2550|USD".

        Raises:
            ScanError: If $src is not a string, is malformed, has a non-integer
                amount, or names a currency missing from the registry.
        """
        # Raise: only string columns are supported
        if not isinstance(src, str):
            raise ScanError(
                f"Don't know how to decode {type(src).__name__} into Money; "
                f"store Money as a '{self.separator}'-separated pair of \"amount{self.separator}currency_code\""
            )

        parts = src.split(self.separator)
        # Raise: value must be exactly "amount<sep>code"
        if len(parts) != 2 or parts[0] == "" or parts[1] == "":
            raise ScanError(
                f"{src!r} is not valid to decode into Money; "
                f"expected a '{self.separator}'-separated pair of \"amount{self.separator}currency_code\""
            )

        amount_part, code_part = parts
        digits = amount_part[1:] if amount_part[0] in "+-" else amount_part
        # Raise: amount must be plain ASCII digits with an optional sign
        if not (digits.isascii() and digits.isdigit()):
            raise ScanError(f"Decoding {amount_part!r} into an amount failed: not an integer")
        amount = int(amount_part)

        try:
            currency = self.decode_currency(code_part)
        except ScanError as e:
            raise ScanError(f"Decoding {code_part!r} into a Currency failed: {e}") from e

        try:
            return Money(amount, currency)
        except ArithmeticOverflowError as e:
            raise ScanError(f"Decoding {amount_part!r} into an amount failed: {e}") from e

    def decode_currency(self, src: object) -> Currency:
        """Decode a Currency from its code stored as a string.

        Raises:
            ScanError: If $src is not a string or the code is not registered.
        """
        # Raise: currency is stored as its code only
        if not isinstance(src, str):
            raise ScanError(f"{type(src).__name__} is not a supported type for a Currency (store the Currency code as a string only)")

        currency = self._registry.get(src)
        # Raise: unknown codes are rejected when reading back
        if currency is None:
            raise ScanError(f"Currency code {src!r} is not registered")

        return currency
