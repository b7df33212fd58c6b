from __future__ import annotations

from decimal import Decimal


class Formatter:
    """Turns integer minor-unit amounts into display strings and major units.

    Args:
        fraction: Number of minor-unit decimal digits.
        decimal: Decimal separator placed before the last $fraction digits.
        thousand: Separator inserted every 3 integer digits. Empty string disables grouping.
        grapheme: Currency symbol substituted for "$" in $template.
        template: Display template. "1" is replaced by the formatted number, "$" by $grapheme.

    Examples:
        >>> Formatter(2, ".", ",", "$", "$1").format(123456)
        '$1,234.56'
        >>> Formatter(2, ".", ",", "$", "$1").format(-1)
        '-$0.01'
    """

    __slots__ = ("fraction", "decimal", "thousand", "grapheme", "template")

    def __init__(self, fraction: int, decimal: str, thousand: str, grapheme: str, template: str) -> None:
        self.fraction = fraction
        self.decimal = decimal
        self.thousand = thousand
        self.grapheme = grapheme
        self.template = template

    def format(self, amount: int) -> str:
        digits = str(abs(amount))

        # Ensure at least one integer digit in front of the fraction digits
        if len(digits) <= self.fraction:
            digits = "0" * (self.fraction - len(digits) + 1) + digits

        if self.thousand:
            i = len(digits) - self.fraction - 3
            while i > 0:
                digits = digits[:i] + self.thousand + digits[i:]
                i -= 3

        if self.fraction > 0:
            digits = digits[: -self.fraction] + self.decimal + digits[-self.fraction :]

        # Substitute the symbol in the template only, never inside the number
        number_pos = self.template.index("1")
        head, tail = self.template[:number_pos], self.template[number_pos + 1 :]
        if "$" in head:
            head = head.replace("$", self.grapheme, 1)
        else:
            tail = tail.replace("$", self.grapheme, 1)
        result = head + digits + tail

        if amount < 0:
            result = "-" + result

        return result

    def to_major_units(self, amount: int) -> Decimal:
        """Return $amount expressed in major units, e.g. 150 cents -> Decimal("1.50").

        Exact; no float conversion is involved.
        """
        return Decimal(amount).scaleb(-self.fraction)
