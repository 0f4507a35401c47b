import pytest

from moneykit.domain.monetary.currency import Currency, CurrencyRegistry
from moneykit.domain.monetary.currency_registry import EUR, JPY, USD
from moneykit.domain.monetary.errors import ArithmeticOverflowError, CurrencyMismatchError
from moneykit.domain.monetary.money import Money
from moneykit.utils.calculator import INT64_MAX, INT64_MIN

# Constants
PRICE = Money.of(2550, "USD")
TAX = Money.of(255, "USD")
EURO_PRICE = Money.of(2550, "EUR")


def test_construction_and_accessors():
    """Money keeps the raw amount and resolves the currency code once."""
    money = Money.of(2550, "usd")

    assert money.amount == 2550
    assert money.currency == USD
    assert money.currency.code == "USD"
    assert Money(2550, USD) == money


def test_construction_rejects_invalid_input():
    with pytest.raises(TypeError):
        Money(25.5, USD)
    with pytest.raises(TypeError):
        Money(True, USD)
    with pytest.raises(TypeError):
        Money(100, "USD")
    with pytest.raises(ArithmeticOverflowError):
        Money(INT64_MAX + 1, USD)
    with pytest.raises(ArithmeticOverflowError):
        Money(INT64_MIN - 1, USD)


def test_unknown_code_resolves_to_default_currency():
    money = Money.of(1000, "xyz")

    assert money.currency.code == "XYZ"
    assert money.currency.fraction == 2
    assert money.display() == "10.00XYZ"


def test_of_uses_explicit_registry():
    registry = CurrencyRegistry([Currency("BTC", fraction=8, grapheme="₿", template="$1")])

    money = Money.of(150_000_000, "btc", registry)

    assert money.currency.fraction == 8
    assert money.display() == "₿1.50000000"


def test_from_float_truncates_once_into_smallest_units():
    assert Money.from_float(25.50, "USD").amount == 2550
    assert Money.from_float(-3.5, "USD").amount == -350
    assert Money.from_float(1000.0, "JPY").amount == 1000
    assert Money.from_float(1.2345, "KWD").amount == 1234
    # No binary floating-point noise: 0.29 * 100 would be 28.999...
    assert Money.from_float(0.29, "USD").amount == 29


def test_compare_and_predicates():
    """Comparisons are plain integer comparisons of the amounts."""
    assert PRICE.compare(TAX) == 1
    assert TAX.compare(PRICE) == -1
    assert PRICE.compare(Money.of(2550, "USD")) == 0

    assert PRICE.equals(Money.of(2550, "USD"))
    assert not PRICE.equals(TAX)
    assert PRICE.greater_than(TAX)
    assert PRICE.greater_than_or_equal(PRICE)
    assert TAX.less_than(PRICE)
    assert TAX.less_than_or_equal(TAX)

    assert Money.zero(USD).is_zero()
    assert PRICE.is_positive()
    assert PRICE.negative().is_negative()


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a.equals(b),
        lambda a, b: a.compare(b),
        lambda a, b: a.greater_than(b),
        lambda a, b: a.greater_than_or_equal(b),
        lambda a, b: a.less_than(b),
        lambda a, b: a.less_than_or_equal(b),
        lambda a, b: a.add(b),
        lambda a, b: a.subtract(b),
        lambda a, b: a < b,
        lambda a, b: a >= b,
        lambda a, b: a + b,
        lambda a, b: a - b,
    ],
)
def test_binary_operations_reject_different_currencies(operation):
    """Every currency-checked operation fails and leaves both operands unchanged."""
    usd = Money.of(100, "USD")
    eur = Money.of(100, "EUR")

    with pytest.raises(CurrencyMismatchError):
        operation(usd, eur)

    assert usd.amount == 100 and usd.currency == USD
    assert eur.amount == 100 and eur.currency == EUR


def test_currency_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        Money.of(100, "USD").add(Money.of(100, "EUR"))


def test_structural_equality_does_not_raise():
    """`==` reports different currencies as unequal instead of raising."""
    assert PRICE == Money.of(2550, "USD")
    assert PRICE != EURO_PRICE
    assert PRICE != 2550
    assert len({PRICE, Money.of(2550, "USD"), EURO_PRICE}) == 2


def test_add_and_subtract_many():
    base = Money.of(1000, "USD")
    tip = Money.of(150, "USD")
    tax = Money.of(80, "USD")

    assert base.add(tip, tax).amount == 1230
    assert Money.of(2550, "USD").subtract(Money.of(255, "USD"), Money.of(51, "USD")).amount == 2244
    assert (base + tip - tax).amount == 1070

    # No operands returns the value unchanged
    assert base.add() == base
    assert base.subtract() == base


def test_add_fails_atomically_on_any_mismatch():
    """A mismatch anywhere in the operands fails the whole operation."""
    base = Money.of(1000, "USD")

    with pytest.raises(CurrencyMismatchError):
        base.add(Money.of(1, "USD"), Money.of(1, "EUR"), Money.of(1, "USD"))
    with pytest.raises(CurrencyMismatchError):
        base.subtract(Money.of(1, "USD"), Money.of(1, "JPY"))

    assert base.amount == 1000


def test_multiply():
    price = Money.of(1000, "USD")

    assert price.multiply(2).amount == 2000
    assert price.multiply(2, 3).amount == 6000
    assert price.multiply(-1).amount == -1000
    assert (price * 3).amount == 3000
    assert (3 * price).amount == 3000


def test_multiply_requires_a_multiplier():
    """Calling multiply without a multiplier is a programming error, not a MoneyError."""
    with pytest.raises(TypeError):
        PRICE.multiply()


def test_multiply_rejects_non_int():
    with pytest.raises(TypeError):
        PRICE.multiply(1.5)
    with pytest.raises(TypeError):
        PRICE * 1.5


def test_arithmetic_overflow_surfaces():
    with pytest.raises(ArithmeticOverflowError):
        Money(INT64_MAX, USD).add(Money.of(1, "USD"))
    with pytest.raises(ArithmeticOverflowError):
        Money(INT64_MAX, USD).multiply(2)


def test_operands_fold_into_anchor_without_false_overflow():
    """Operands are applied to the amount one by one, so only real overflows are reported."""
    assert Money(INT64_MAX, USD).subtract(Money(INT64_MAX, USD), Money(1, USD)).amount == -1
    assert Money(INT64_MIN, USD).add(Money(INT64_MAX, USD), Money(1, USD)).amount == 0

    # The product of the multipliers alone does not fit into int64
    assert Money(0, USD).multiply(2**62, 4).amount == 0
    assert Money(1, USD).multiply(2**62, -2).amount == INT64_MIN


def test_absolute_negative_and_operators():
    debt = Money.of(-500, "USD")

    assert debt.absolute().amount == 500
    assert debt.negative().amount == 500
    assert Money.of(500, "USD").negative().amount == -500
    assert (-debt).amount == 500
    assert abs(debt).amount == 500


def test_operations_return_new_instances():
    price = Money.of(1000, "USD")

    doubled = price.multiply(2)
    total = price.add(Money.of(1, "USD"))

    assert price.amount == 1000
    assert doubled is not price
    assert total is not price


def test_round_uses_currency_fraction():
    assert Money.of(1235, "USD").round().amount == 1240
    assert Money.of(1234, "USD").round().amount == 1230
    assert Money.of(-1235, "USD").round().amount == -1240

    # No decimal digits, nothing to round away
    assert Money(1235, JPY).round().amount == 1235


def test_display_and_major_units():
    assert Money.of(123456, "USD").display() == "$1,234.56"
    assert Money.of(123456, "EUR").display() == "€1,234.56"
    assert Money.of(12345, "JPY").display() == "¥12,345"
    assert Money.of(-500, "USD").display() == "-$5.00"
    assert str(Money.of(2550, "USD")) == "$25.50"
    assert repr(Money.of(2550, "USD")) == "Money(2550, USD)"

    assert Money.of(2550, "USD").as_major_units() == 25.5
    assert Money.of(1000, "JPY").as_major_units() == 1000.0
