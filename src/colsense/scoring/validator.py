"""Dictionary form checks for development and test runs.

Dictionaries are authored directly in canonical form, and nothing checks
them in production. These assertions catch entries that could never match
a normalized candidate exactly (an uppercase letter under case folding, a
digit other than '0' or an un-collapsed digit run under number reduction,
...). They are plain ``assert`` statements: stripped under ``python -O`` and
never meant to be caught.
"""

from __future__ import annotations

from colsense.core.config import get_settings
from colsense.core.types import Dictionary, Predicate
from colsense.models.normalization import NormalizationConfig
from colsense.scoring.normalizer import (
    ALPHA_PLACEHOLDER,
    DIGIT_PLACEHOLDER,
    is_alphabetic,
    is_decimal_digit,
)


def validation_enabled() -> bool:
    """Whether scoring calls should validate dictionary entries.

    Always off in the prod environment.
    """
    settings = get_settings()
    return (
        __debug__
        and settings.environment != "prod"
        and settings.scoring.validate_dictionaries
    )


def assert_reduction(entry: str, predicate: Predicate) -> None:
    """Assert no two adjacent characters of ``entry`` satisfy ``predicate``."""
    in_run = False
    for char in entry:
        if predicate(char):
            assert not in_run, f"reduction not performed for `{entry}`"
            in_run = True
        else:
            in_run = False


def assert_placeholder(entry: str, predicate: Predicate, placeholder: str, kind: str) -> None:
    """Assert every ``predicate`` character of ``entry`` is ``placeholder``."""
    assert all(
        c == placeholder or not predicate(c) for c in entry
    ), f"{kind} not folded for `{entry}`"


def assert_canonical(entry: str, config: NormalizationConfig) -> None:
    """Assert ``entry`` is already in the canonical form ``config`` produces."""
    if config.alpha_reduced:
        assert_reduction(entry, is_alphabetic)
        assert_placeholder(entry, is_alphabetic, ALPHA_PLACEHOLDER, "letters")
    elif not config.case_sensitive:
        assert entry == entry.lower(), f"case not folded for `{entry}`"

    if config.number_reduced:
        assert_reduction(entry, is_decimal_digit)
        assert_placeholder(entry, is_decimal_digit, DIGIT_PLACEHOLDER, "digits")
    elif not config.digit_sensitive:
        assert_placeholder(entry, is_decimal_digit, DIGIT_PLACEHOLDER, "digits")


def validate_dictionary(dictionary: Dictionary, config: NormalizationConfig) -> None:
    """Check every entry of ``dictionary``; for use from test suites."""
    for entry in dictionary:
        assert_canonical(entry, config)
