"""JSON encoding of Money.

The wire format is decided by a strategy object handed to `JsonCodec`; the
default one produces `{"amount": 1000, "currency": "USD"}`. Applications with
a legacy format plug in their own strategy instead of patching globals.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from moneykit.domain.monetary.currency import CurrencyRegistry
from moneykit.domain.monetary.currency_registry import ISO_CURRENCIES
from moneykit.domain.monetary.errors import ArithmeticOverflowError, InvalidJSONError
from moneykit.domain.monetary.money import Money


class JsonStrategy(Protocol):
    """Converts Money to and from JSON-compatible objects."""

    def encode(self, money: Money | None) -> Any:
        """Return a JSON-compatible object for $money (None is the empty value)."""
        ...

    def decode(self, data: Any, registry: CurrencyRegistry) -> Money | None:
        """Return Money decoded from $data, resolving currency codes through $registry."""
        ...


class DefaultJsonStrategy:
    """`{"amount": <int>, "currency": "<code>"}`.

    The empty value (no money at all) is encoded as
    `{"amount": 0, "currency": ""}` and decodes back to None.
    """

    def encode(self, money: Money | None) -> dict[str, Any]:
        if money is None:
            return {"amount": 0, "currency": ""}
        return {"amount": money.amount, "currency": money.currency.code}

    def decode(self, data: Any, registry: CurrencyRegistry) -> Money | None:
        # Raise: payload must be a JSON object
        if not isinstance(data, dict):
            raise InvalidJSONError(f"Cannot decode Money because payload is not a JSON object: {data!r}")

        amount = data.get("amount", 0)
        # Raise: amount must be an integer number of smallest units
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise InvalidJSONError(f"Cannot decode Money because $amount is not an integer: {amount!r}")

        code = data.get("currency", "")
        # Raise: currency must be a string code
        if not isinstance(code, str):
            raise InvalidJSONError(f"Cannot decode Money because $currency is not a string: {code!r}")

        if amount == 0 and code == "":
            return None

        # Raise: a non-zero amount needs a currency
        if code == "":
            raise InvalidJSONError(f"Cannot decode Money because $currency is missing for $amount {amount}")

        try:
            return Money(amount, registry.resolve(code))
        except (ArithmeticOverflowError, ValueError) as e:
            raise InvalidJSONError(f"Cannot decode Money from $amount {amount} and $currency {code!r}: {e}") from e


class JsonCodec:
    """Serializes Money to JSON text and back using an injected `JsonStrategy`."""

    def __init__(self, strategy: JsonStrategy | None = None, registry: CurrencyRegistry | None = None):
        self._strategy = strategy if strategy is not None else DefaultJsonStrategy()
        self._registry = registry if registry is not None else ISO_CURRENCIES

    @property
    def strategy(self) -> JsonStrategy:
        return self._strategy

    def dumps(self, money: Money | None) -> str:
        return json.dumps(self._strategy.encode(money))

    def loads(self, text: str | bytes) -> Money | None:
        """Decode Money from JSON $text.

        Raises:
            InvalidJSONError: If $text is not valid JSON or not a valid Money payload.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidJSONError(f"Cannot decode Money because $text is not valid JSON: {e}") from e

        return self._strategy.decode(data, self._registry)
