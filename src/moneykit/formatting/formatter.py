from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Formatter:
    """Formats integer amounts (smallest units) for display.

    Attributes:
        fraction (int): Number of decimal digits.
        decimal (str): Decimal separator (e.g. "." or ",").
        thousand (str): Thousands separator; empty string disables grouping.
        grapheme (str): Currency symbol (e.g. "$", "€").
        template (str): Layout where "1" is replaced by the number and "$" by
            the grapheme (e.g. "$1" or "1 $").

    Examples:
        >>> Formatter(2, ".", ",", "$", "$1").format(123456)
        '$1,234.56'
        >>> Formatter(2, ".", ",", "$", "$1").format(-500)
        '-$5.00'
    """

    fraction: int
    decimal: str
    thousand: str
    grapheme: str
    template: str

    def format(self, amount: int) -> str:
        """Return $amount as a display string using this formatter's rules."""
        digits = str(abs(amount))

        # Pad so there is at least one integer digit in front of the fraction
        if len(digits) <= self.fraction:
            digits = "0" * (self.fraction - len(digits) + 1) + digits

        if self.thousand:
            i = len(digits) - self.fraction - 3
            while i > 0:
                digits = digits[:i] + self.thousand + digits[i:]
                i -= 3

        if self.fraction > 0:
            digits = digits[: -self.fraction] + self.decimal + digits[-self.fraction :]

        result = self.template.replace("1", digits, 1)
        result = result.replace("$", self.grapheme, 1)

        if amount < 0:
            result = "-" + result

        return result

    def to_major_units(self, amount: int) -> float:
        """Convert $amount to major units. Use for display only, never for calculations."""
        if self.fraction == 0:
            return float(amount)

        return amount / 10**self.fraction
