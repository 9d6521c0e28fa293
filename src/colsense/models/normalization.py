"""Normalization flags shared by scorers and dictionary validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NormalizationConfig(BaseModel):
    """How a string is folded into canonical form before comparison.

    Dictionaries compared under a config must already be written in the
    canonical form it produces.
    """

    model_config = ConfigDict(frozen=True)

    # If true, case is significant. Otherwise everything is lowercased and
    # dictionary entries are expected to be lowercase.
    case_sensitive: bool = False

    # If true, digits are significant. Otherwise each digit becomes '0' and
    # dictionary entries are expected to spell digits as '0'.
    digit_sensitive: bool = False

    # If true, every run of digits becomes a single '0'.
    # Overrides digit_sensitive.
    number_reduced: bool = True

    # If true, every run of alphabetic characters becomes a single 'a'.
    # Overrides case_sensitive.
    alpha_reduced: bool = False
