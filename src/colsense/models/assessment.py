"""Scored comparison results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Assessment(BaseModel):
    """Similarity of one header (or value) to one column kind.

    ``position`` is the zero-based index of the assessed element in its row,
    so results can be mapped back to the source table after sorting or
    filtering.
    """

    model_config = ConfigDict(frozen=True)

    similarity: float
    position: int = Field(ge=0)
