"""Score matrices over header rows and column kinds."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from colsense.core.protocols import ColumnKind
from colsense.core.types import ScoreMatrix
from colsense.models.assessment import Assessment

logger = logging.getLogger(__name__)


def for_headers(column_kinds: Sequence[ColumnKind], headers: Iterable[str]) -> ScoreMatrix:
    """Assess every header against every column kind.

    Args:
        column_kinds: Kinds to score against, in output order.
        headers: Header labels of one row, in table order.

    Returns:
        Outer list per header position, inner list per column kind.
    """
    return [
        [
            Assessment(similarity=kind.assess_header(header), position=position)
            for kind in column_kinds
        ]
        for position, header in enumerate(headers)
    ]


def header_rows_iter(
    column_kinds: Sequence[ColumnKind], rows: Iterable[Iterable[str]]
) -> Iterator[ScoreMatrix]:
    """Lazily assess candidate header rows, one score matrix per row.

    Rows are pulled from ``rows`` only as matrices are requested, so a
    caller may stop once a row looks like the header.
    """
    for index, row in enumerate(rows):
        logger.debug("Assessing candidate header row %d", index)
        yield for_headers(column_kinds, row)
