"""Reading Roman numerals and writing them in their shortest form."""

from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_FORMS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def roman_value(numeral: str) -> int:
    """Value of a Roman numeral; a letter before a larger one is subtracted."""
    try:
        values = [_VALUES[letter] for letter in numeral]
    except KeyError as error:
        raise ValueError(f"invalid Roman letter {error.args[0]!r}") from None
    total = 0
    for current, following in zip(values, [*values[1:], 0]):
        total += -current if current < following else current
    return total


def minimal_roman(numeral: str) -> str:
    """The shortest numeral with the same value, using subtractive pairs."""
    value = roman_value(numeral)
    parts = []
    for amount, form in _FORMS:
        count, value = divmod(value, amount)
        parts.append(form * count)
    return "".join(parts)