"""Column kinds backed by canonical dictionaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from colsense.scoring.assessor import SimpleAssessor


class SimpleColumnKind(BaseModel):
    """ColumnKind scoring headers and values with ``SimpleAssessor``.

    Each dictionary must be written in the canonical form of its assessor.
    """

    model_config = ConfigDict(frozen=True)

    header_dictionary: tuple[str, ...]
    value_dictionary: tuple[str, ...] = ()
    header_assessor: SimpleAssessor = SimpleAssessor()
    value_assessor: SimpleAssessor = SimpleAssessor()

    def assess_header(self, header: str) -> float:
        return self.header_assessor.with_dict(header, self.header_dictionary)

    def assess_value(self, value: str) -> float:
        return self.value_assessor.with_dict(value, self.value_dictionary)
