"""Assessment aggregation across header rows."""

from __future__ import annotations

from colsense.assessment.aggregator import for_headers, header_rows_iter

__all__ = ["for_headers", "header_rows_iter"]
