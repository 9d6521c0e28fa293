"""Shared fixtures and test doubles."""

from __future__ import annotations

import pytest

from colsense.core.config import get_settings


class ConstantColumnKind:
    """ColumnKind returning fixed scores, recording what it was asked."""

    def __init__(self, header_score: float, value_score: float = 0.0) -> None:
        self.header_score = header_score
        self.value_score = value_score
        self.headers_seen: list[str] = []

    def assess_header(self, header: str) -> float:
        self.headers_seen.append(header)
        return self.header_score

    def assess_value(self, value: str) -> float:
        return self.value_score


class CountingRows:
    """Row source that counts how many rows were pulled from it."""

    def __init__(self, rows: list[list[str]]) -> None:
        self._rows = rows
        self.pulled = 0

    def __iter__(self):
        for row in self._rows:
            self.pulled += 1
            yield row


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def constant_kinds():
    return [ConstantColumnKind(0.1), ConstantColumnKind(0.5), ConstantColumnKind(0.9)]


@pytest.fixture
def counting_rows():
    return CountingRows
