"""Text canonicalization applied to candidates before dictionary lookup."""

from __future__ import annotations

from colsense.core.types import Predicate
from colsense.models.normalization import NormalizationConfig

ALPHA_PLACEHOLDER = "a"
DIGIT_PLACEHOLDER = "0"


def is_alphabetic(char: str) -> bool:
    return char.isalpha()


def is_decimal_digit(char: str) -> bool:
    # Radix-10 only; other Unicode digits are left alone.
    return "0" <= char <= "9"


def reduce(text: str, predicate: Predicate, replacement: str) -> str:
    """Replace every maximal run of ``predicate`` characters with ``replacement``.

    Characters that do not satisfy ``predicate`` are kept in order.

    >>> reduce("A1b22", is_decimal_digit, "0")
    'A0b0'
    """
    result: list[str] = []
    in_run = False
    for char in text:
        if predicate(char):
            if not in_run:
                result.append(replacement)
                in_run = True
        else:
            result.append(char)
            in_run = False
    return "".join(result)


def fold_digits(text: str) -> str:
    """Replace each digit with '0', one for one."""
    return "".join(DIGIT_PLACEHOLDER if is_decimal_digit(c) else c for c in text)


def normalize(text: str, config: NormalizationConfig) -> str:
    """Return the canonical form of ``text`` under ``config``.

    The alphabetic stage runs first, then the numeric stage.
    """
    if config.alpha_reduced:
        text = reduce(text, is_alphabetic, ALPHA_PLACEHOLDER)
    elif not config.case_sensitive:
        text = text.lower()

    if config.number_reduced:
        text = reduce(text, is_decimal_digit, DIGIT_PLACEHOLDER)
    elif not config.digit_sensitive:
        text = fold_digits(text)

    return text
