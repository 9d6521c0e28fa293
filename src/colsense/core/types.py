"""Type aliases used across ColSense."""

from __future__ import annotations

from typing import Callable, Sequence

from colsense.models.assessment import Assessment

Dictionary = Sequence[str]
Predicate = Callable[[str], bool]
ScoreMatrix = list[list[Assessment]]
