"""Dictionary-based similarity scoring."""

from __future__ import annotations

from rapidfuzz.distance import Jaro

from colsense.core.types import Dictionary
from colsense.models.normalization import NormalizationConfig
from colsense.scoring.normalizer import normalize
from colsense.scoring.validator import assert_canonical, validation_enabled


def jaro_similarity(left: str, right: str) -> float:
    """Jaro similarity in [0, 1]; two empty strings are identical."""
    if not left and not right:
        return 1.0
    return Jaro.similarity(left, right)


class SimpleAssessor(NormalizationConfig):
    """Default scoring strategy: normalize, then best Jaro match in a dictionary.

    Example::

        >>> SimpleAssessor().with_dict("SSN", ["ssn", "social security number"])
        1.0
    """

    def normalize(self, value: str) -> str:
        return normalize(value, self)

    def with_dict(self, value: str, dictionary: Dictionary) -> float:
        """Return the best similarity of ``value`` to any dictionary entry.

        Args:
            value: Raw header or cell text.
            dictionary: Entries in the canonical form of this assessor.

        Returns:
            Maximum Jaro similarity, or 0.0 for an empty dictionary.
        """
        candidate = self.normalize(value)
        validate = validation_enabled()

        best = 0.0
        for variant in dictionary:
            if validate:
                assert_canonical(variant, self)
            similarity = jaro_similarity(candidate, variant)
            if similarity > best:
                best = similarity
        return best
