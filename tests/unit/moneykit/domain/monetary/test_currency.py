import pytest

from moneykit.domain.monetary.currency import Currency, CurrencyRegistry
from moneykit.domain.monetary.currency_registry import ISO_CURRENCIES, USD, create_registry
from moneykit.domain.monetary.errors import RegistryFrozenError, UnknownCurrencyError

# Constants
BTC = Currency("btc", fraction=8, grapheme="₿", template="$1")


def test_currency_construction():
    """Code is normalized to upper case and grapheme defaults to the code."""
    currency = Currency(" xyz ", fraction=3)

    assert currency.code == "XYZ"
    assert currency.fraction == 3
    assert currency.grapheme == "XYZ"
    assert currency.template == "1$"
    assert currency.decimal == "."
    assert currency.thousand == ","
    assert currency.numeric_code == ""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"code": ""},
        {"code": "   "},
        {"code": "USD", "fraction": -1},
        {"code": "USD", "fraction": 19},
        {"code": "USD", "fraction": True},
    ],
)
def test_currency_rejects_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        Currency(**kwargs)


def test_currency_equality_is_by_code():
    """Identity is the code value; display metadata does not matter."""
    assert Currency("USD") == USD
    assert Currency("usd", fraction=4, grapheme="US$") == USD
    assert hash(Currency("USD")) == hash(USD)
    assert Currency("USD") != Currency("EUR")
    assert USD != "USD"


def test_iso_registry_contents():
    assert len(ISO_CURRENCIES) > 150
    assert "usd" in ISO_CURRENCIES
    assert ISO_CURRENCIES.get("USD").numeric_code == "840"
    assert ISO_CURRENCIES.get("JPY").fraction == 0
    assert ISO_CURRENCIES.get("KWD").fraction == 3
    assert ISO_CURRENCIES.get("NOPE") is None


def test_resolve_is_case_insensitive_with_default_fallback():
    assert ISO_CURRENCIES.resolve("eur").code == "EUR"
    assert ISO_CURRENCIES.resolve("EuR") is ISO_CURRENCIES.get("EUR")

    fallback = ISO_CURRENCIES.resolve("abc")
    assert fallback.code == "ABC"
    assert fallback.fraction == 2
    assert fallback.grapheme == "ABC"
    assert "ABC" not in ISO_CURRENCIES


def test_require_raises_for_unknown_code():
    assert ISO_CURRENCIES.require("gbp").code == "GBP"

    with pytest.raises(UnknownCurrencyError):
        ISO_CURRENCIES.require("ABC")


def test_by_numeric_code():
    assert ISO_CURRENCIES.by_numeric_code("840").code == "USD"
    assert ISO_CURRENCIES.by_numeric_code("978").code == "EUR"
    assert ISO_CURRENCIES.by_numeric_code("000") is None
    assert ISO_CURRENCIES.by_numeric_code("") is None


def test_iso_registry_is_frozen():
    with pytest.raises(RegistryFrozenError):
        ISO_CURRENCIES.add(BTC)

    assert "BTC" not in ISO_CURRENCIES


def test_mutable_copy_accepts_custom_currencies():
    registry = create_registry()
    registry.add(BTC)

    assert registry.resolve("btc").fraction == 8
    assert len(registry) == len(ISO_CURRENCIES) + 1
    # The shared ISO registry is untouched
    assert "BTC" not in ISO_CURRENCIES


def test_add_overwrite_rules():
    registry = CurrencyRegistry()
    registry.add(BTC)
    registry.add(Currency("BTC", fraction=6))
    assert registry.get("BTC").fraction == 6

    with pytest.raises(ValueError):
        registry.add(Currency("BTC", fraction=8), overwrite=False)

    with pytest.raises(TypeError):
        registry.add("BTC")


def test_registry_iteration():
    registry = CurrencyRegistry([USD, BTC])

    assert {c.code for c in registry} == {"USD", "BTC"}
    assert registry.copy(frozen=True).frozen
