"""
Read a written-out amount back into a Decimal.

This is the inverse of number_to_words.to_words(). The pipeline uses it to
prove every rendering before handing it out: if the words don't read back to
the rounded figure, the text must not be pasted into a contract.

Supported patterns:
    "One Thousand One Hundred Three Point Three Zero Zero" → 1103.300
    "Three Hundred Forty Five"                             → 345
    "Zero Point Zero Zero Zero"                            → 0.000
    "One Thousand Vigintillion"                            → 10**66

Only the exact form to_words() writes is accepted, in any letter case:
no hyphens, commas, "and" or currency words.
"""

from __future__ import annotations

from decimal import Decimal

from .number_to_words import ONES, SCALES, TENS

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: dict[str, int] = {word: value for value, word in enumerate(ONES)}

_TENS: dict[str, int] = {word: value * 10 for value, word in enumerate(TENS) if word}

_SCALES: dict[str, int] = {
    word: 1000**index for index, word in enumerate(SCALES) if word
}

_DIGITS: dict[str, str] = {word: str(value) for value, word in enumerate(ONES[:10])}


# ─── Word Classifier ─────────────────────────────────────────────────


def _classify_and_apply(
    word: str, current: int, result: int, top: int, source: str
) -> tuple[int, int, int]:
    """Classify a single number word and update the running accumulators.

    Returns:
        (new_current, new_result, new_top) after processing the word.

    Raises:
        ValueError: If the word is not a recognised number token.
    """
    if word in _ONES:
        return current + _ONES[word], result, top
    if word in _TENS:
        return current + _TENS[word], result, top
    if word == "hundred":
        return (current or 1) * 100, result, top
    if word in _SCALES:
        scale = _SCALES[word]
        if scale >= top:
            # A scale at or above everything seen so far multiplies it all:
            # "one thousand vigintillion"
            return 0, ((result + current) or 1) * scale, scale
        return 0, result + (current or 1) * scale, top
    raise ValueError(f"Unrecognized number word: {word!r} in {source!r}")


# ─── Main Converter ─────────────────────────────────────────────────


def words_to_amount(text: str) -> Decimal:
    """Convert English amount words to a Decimal value.

    Args:
        text: e.g. "One Thousand Five Hundred Thirty Two Point Three Six One"

    Returns:
        Decimal("1532.361")

    Raises:
        ValueError: If the text is empty or contains unrecognized words.

    Algorithm:
        The integer part keeps three accumulators:
        - `result`: completed scale groups
        - `current`: the group being built
        - `top`: the largest scale applied so far

        ones/teens/tens add to `current`, "hundred" multiplies it, and a scale
        word either flushes `current * scale` into `result` (descending
        scales) or multiplies everything so far (a scale at or above `top`).

        Words after "point" are single digits, appended verbatim so that
        trailing zeros survive ("Point Three Zero Zero" → .300).
    """
    if not text or not text.strip():
        raise ValueError("Empty text cannot be converted to an amount")

    words = text.lower().split()

    if "point" in words:
        split_at = words.index("point")
        whole_words, fraction_words = words[:split_at], words[split_at + 1:]
        if not fraction_words:
            raise ValueError(f"No digits after 'point' in: {text!r}")
    else:
        whole_words, fraction_words = words, []

    if not whole_words:
        raise ValueError(f"No number words found in: {text!r}")

    result = 0
    current = 0
    top = 0
    for word in whole_words:
        current, result, top = _classify_and_apply(word, current, result, top, text)
    result += current

    digits = []
    for word in fraction_words:
        if word not in _DIGITS:
            raise ValueError(f"Expected a single digit after 'point', got {word!r} in {text!r}")
        digits.append(_DIGITS[word])

    if digits:
        return Decimal(f"{result}.{''.join(digits)}")
    return Decimal(result)
