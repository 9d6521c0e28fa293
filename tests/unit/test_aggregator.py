"""Tests for score matrix aggregation."""

from __future__ import annotations

from colsense.assessment.aggregator import for_headers, header_rows_iter
from colsense.kinds.benefits import BenefitsColumnKind
from colsense.models.assessment import Assessment

THRESHOLD = 0.7


class TestForHeaders:
    def test_dimensions_follow_inputs(self, constant_kinds):
        matrix = for_headers(constant_kinds, ["a", "b", "c", "d"])
        assert len(matrix) == 4
        assert all(len(row) == len(constant_kinds) for row in matrix)

    def test_positions_follow_headers(self, constant_kinds):
        matrix = for_headers(constant_kinds, ["x", "y"])
        assert [[cell.position for cell in row] for row in matrix] == [[0, 0, 0], [1, 1, 1]]

    def test_kind_order_preserved(self, constant_kinds):
        matrix = for_headers(constant_kinds, ["x"])
        assert [cell.similarity for cell in matrix[0]] == [0.1, 0.5, 0.9]

    def test_every_cell_recomputed(self, constant_kinds):
        for_headers(constant_kinds, ["x", "y"])
        for_headers(constant_kinds, ["x", "y"])
        assert constant_kinds[0].headers_seen == ["x", "y", "x", "y"]

    def test_no_headers(self, constant_kinds):
        assert for_headers(constant_kinds, []) == []

    def test_no_kinds(self):
        assert for_headers([], ["x", "y"]) == [[], []]

    def test_accepts_generator_of_headers(self, constant_kinds):
        matrix = for_headers(constant_kinds, (h for h in ["x", "y", "z"]))
        assert matrix[2][1] == Assessment(similarity=0.5, position=2)


class TestHeaderRowsIter:
    def test_one_matrix_per_row(self, constant_kinds):
        matrices = list(header_rows_iter(constant_kinds, [["a"], ["b", "c"], []]))
        assert [len(m) for m in matrices] == [1, 2, 0]

    def test_rows_pulled_on_demand(self, constant_kinds, counting_rows):
        rows = counting_rows([["a"], ["b"], ["c"]])
        matrices = header_rows_iter(constant_kinds, rows)
        assert rows.pulled == 0
        next(matrices)
        assert rows.pulled == 1
        next(matrices)
        assert rows.pulled == 2

    def test_member_name_row_clears_threshold(self):
        kinds = list(BenefitsColumnKind)
        name_column = kinds.index(BenefitsColumnKind.SUBSCRIBER_NAME)
        rows = [["", "", "", "", ""], ["", "", "MEMBER NAME", "", "SSN"]]

        blank, header = header_rows_iter(kinds, rows)

        assert all(cell.similarity == 0.0 for row in blank for cell in row)
        assert header[2][name_column].similarity > THRESHOLD
        assert header[2][name_column].position == 2
