"""Protocol interfaces for ColSense abstractions.

Column kinds are structural: anything with the two scoring methods below is
a column kind, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ColumnKind(Protocol):
    """A semantic category a table column may belong to."""

    def assess_header(self, header: str) -> float:
        """Score how much ``header`` looks like a header of this kind."""
        ...

    def assess_value(self, value: str) -> float:
        """Score how much ``value`` looks like a cell value of this kind."""
        ...
