"""
Render a calculated amount as English words for legal documents.

    1532.3611...  →  "One Thousand Five Hundred Thirty Two Point Three Six One"

Rules:
  - The amount is first rounded to exactly three decimals, half away from
    zero, on the exact binary value of the float. A float that prints as
    "x.xxx5" rounds up or down depending on which side of the tie its stored
    value falls.
  - Integer part: short-scale cardinal words, no "and", no hyphens, no commas.
  - Fraction: always three digit words after "point", even "Zero Zero Zero".
  - Every word is title-cased.
  - Negative amounts have no words form and raise NegativeValueError.

Magnitudes past the named scales repeat the top scale word
("One Thousand Vigintillion"), so every finite float has a rendering.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from .exceptions import NegativeValueError

# ─── Word Tables ─────────────────────────────────────────────────────

ONES: list[str] = [
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
]

TENS: list[str] = [
    "", "", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
]

# Index i names 1000**i
SCALES: list[str] = [
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
]

_TOP_SCALE = 1000 ** (len(SCALES) - 1)

_THOUSANDTH = Decimal("0.001")

# Wide enough for the integer digits of the largest float plus three decimals
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


# ─── Rounding & Display ──────────────────────────────────────────────


def round_to_thousandths(value: float) -> Decimal:
    """Round to exactly three decimal places, half away from zero.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round a non-finite amount: {value!r}")
    rounded = Decimal(value).quantize(_THOUSANDTH, context=_CONTEXT)
    if rounded.is_zero():
        # -0.0 and tiny negatives that round to zero display unsigned
        rounded = rounded.copy_abs()
    return rounded


def format_decimal(value: float) -> str:
    """'1,532.361': thousands separators, exactly three decimals."""
    return f"{round_to_thousandths(value):,.3f}"


def format_currency(value: float) -> str:
    """'$1,532.361': the US-dollar figure shown on the result card."""
    rounded = round_to_thousandths(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.3f}"


# ─── Words ───────────────────────────────────────────────────────────


def to_words(value: float) -> str:
    """Convert an amount to title-cased English words with three decimal digits.

    Args:
        value: A finite, non-negative amount, e.g. 1103.3

    Returns:
        "One Thousand One Hundred Three Point Three Zero Zero"

    Raises:
        NegativeValueError: If the amount is below zero.
        ValueError: If the amount is NaN or infinite.
    """
    if value < 0:
        raise NegativeValueError(
            f"Cannot write a negative amount in words: {value!r}",
            details={"value": repr(value)},
        )

    rounded = round_to_thousandths(value)
    integer_part, fraction = format(rounded, "f").split(".")

    words = integer_words(int(integer_part))
    words.append("point")
    words.extend(ONES[int(digit)] for digit in fraction)

    return " ".join(word.capitalize() for word in words)


def integer_words(number: int) -> list[str]:
    """Lower-case cardinal words for a non-negative integer.

    Splits into groups of three digits and names each group with its scale
    word. Above the top scale, the high part is named recursively and
    followed by the top scale word.
    """
    if number == 0:
        return ["zero"]

    if number >= _TOP_SCALE * 1000:
        high, low = divmod(number, _TOP_SCALE)
        parts = integer_words(high)
        parts.append(SCALES[-1])
        if low:
            parts.extend(integer_words(low))
        return parts

    words: list[str] = []
    for index in reversed(range(len(SCALES))):
        group = (number // 1000**index) % 1000
        if not group:
            continue
        words.extend(_hundreds_words(group))
        if SCALES[index]:
            words.append(SCALES[index])
    return words


def _hundreds_words(number: int) -> list[str]:
    """Words for 1..999, e.g. 532 → ['five', 'hundred', 'thirty', 'two']."""
    hundreds, remainder = divmod(number, 100)
    words: list[str] = []

    if hundreds:
        words.extend([ONES[hundreds], "hundred"])

    if remainder >= 20:
        tens, ones = divmod(remainder, 10)
        words.append(TENS[tens])
        if ones:
            words.append(ONES[ones])
    elif remainder:
        words.append(ONES[remainder])

    return words
