"""Tests for dictionary-backed column kinds."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from colsense.core.protocols import ColumnKind
from colsense.kinds.simple import SimpleColumnKind
from colsense.scoring.assessor import SimpleAssessor


@pytest.fixture
def account_number():
    return SimpleColumnKind(
        header_dictionary=("account number", "acct no"),
        value_dictionary=("a0", "0"),
        value_assessor=SimpleAssessor(alpha_reduced=True),
    )


def test_is_a_column_kind(account_number):
    assert isinstance(account_number, ColumnKind)


def test_header_and_value_use_their_own_assessors(account_number):
    assert account_number.assess_header("ACCT NO") == 1.0
    assert account_number.assess_value("ACC-99") < 1.0
    assert account_number.assess_value("ACC99") == 1.0


def test_missing_value_dictionary_scores_zero():
    kind = SimpleColumnKind(header_dictionary=("notes",))
    assert kind.assess_value("anything") == 0.0


def test_is_immutable(account_number):
    with pytest.raises(ValidationError):
        account_number.header_dictionary = ("x",)
