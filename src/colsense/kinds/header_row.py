"""Find the header row among the first rows of a table.

Spreadsheets exported from billing systems often carry titles, blank lines
or report metadata above the real header. The scan scores rows top-down and
stops at the first row where some cell matches some column kind well enough.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, Sequence

from pydantic import BaseModel

from colsense.assessment.aggregator import header_rows_iter
from colsense.core.config import get_settings
from colsense.core.exceptions import ConfigurationError
from colsense.core.protocols import ColumnKind
from colsense.core.types import ScoreMatrix

logger = logging.getLogger(__name__)


class HeaderRowMatch(BaseModel):
    """The first row that cleared the threshold, with its score matrix."""

    row_index: int
    matrix: ScoreMatrix
    best_similarity: float


def best_similarity(matrix: ScoreMatrix) -> float:
    """Highest similarity in ``matrix``, 0.0 when it is empty."""
    return max((cell.similarity for row in matrix for cell in row), default=0.0)


def locate_header_row(
    column_kinds: Sequence[ColumnKind],
    rows: Iterable[Iterable[str]],
    threshold: float | None = None,
    max_rows: int | None = None,
) -> HeaderRowMatch | None:
    """Return the first candidate row whose best cell reaches ``threshold``.

    Args:
        column_kinds: Kinds to score header cells against.
        rows: Table rows, top first. Only rows up to the match are pulled.
        threshold: Minimum similarity; defaults to the configured header threshold.
        max_rows: Number of rows to inspect; defaults to the configured limit.

    Returns:
        The matching row, or None if no inspected row qualifies.
    """
    scoring = get_settings().scoring
    if threshold is None:
        threshold = scoring.header_threshold
    if max_rows is None:
        max_rows = scoring.max_header_rows
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(f"threshold must be within [0, 1], got {threshold}")
    if max_rows < 0:
        raise ConfigurationError(f"max_rows must not be negative, got {max_rows}")

    matrices = header_rows_iter(column_kinds, islice(rows, max_rows))
    for row_index, matrix in enumerate(matrices):
        score = best_similarity(matrix)
        if score >= threshold:
            logger.info("Header row found at index %d (similarity %.3f)", row_index, score)
            return HeaderRowMatch(row_index=row_index, matrix=matrix, best_similarity=score)

    logger.info("No header row reached similarity %.2f in the first %d rows", threshold, max_rows)
    return None
