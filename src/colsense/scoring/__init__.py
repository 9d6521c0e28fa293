"""Text normalization, dictionary validation and similarity scoring."""

from __future__ import annotations

from colsense.scoring.assessor import SimpleAssessor, jaro_similarity
from colsense.scoring.normalizer import normalize, reduce
from colsense.scoring.validator import assert_canonical, validate_dictionary

__all__ = [
    "SimpleAssessor",
    "assert_canonical",
    "jaro_similarity",
    "normalize",
    "reduce",
    "validate_dictionary",
]
