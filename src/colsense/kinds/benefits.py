"""Reference column kinds for group-benefits billing and census files.

Headers are scored with the default assessor. Values use per-kind settings:
identifiers, names and plan codes collapse letter runs to 'a', SSNs keep
every digit position so that grouping (000-00-0000) stays visible.
"""

from __future__ import annotations

from enum import StrEnum

from colsense.core.exceptions import UnknownColumnKindError
from colsense.kinds.simple import SimpleColumnKind
from colsense.scoring.assessor import SimpleAssessor

MONETARY = ("$0", "0$", "$0.0", "0.0$")

ALPHA_REDUCED = SimpleAssessor(alpha_reduced=True)
DIGITS_FOLDED = SimpleAssessor(number_reduced=False)
ALPHANUM_REDUCED = SimpleAssessor(alpha_reduced=True, number_reduced=True)


class BenefitsColumnKind(StrEnum):
    MEMBER_ID = "member_id"
    SUBSCRIBER_NAME = "subscriber_name"
    SSN = "ssn"
    PLAN = "plan"
    VOLUME = "volume"
    TIER = "tier"
    EMPLOYEE_AMOUNT = "employee_amount"
    DEPENDENT_AMOUNT = "dependent_amount"
    PREMIUM = "premium"

    @classmethod
    def from_label(cls, label: str) -> BenefitsColumnKind:
        """Look a kind up by label, e.g. ``"member_id"`` or ``"Member ID"``."""
        key = label.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(key)
        except ValueError as exc:
            raise UnknownColumnKindError(label) from exc

    @property
    def definition(self) -> SimpleColumnKind:
        return _DEFINITIONS[self]

    @property
    def header_dictionary(self) -> tuple[str, ...]:
        return self.definition.header_dictionary

    @property
    def value_dictionary(self) -> tuple[str, ...]:
        return self.definition.value_dictionary

    @property
    def value_assessor(self) -> SimpleAssessor:
        return self.definition.value_assessor

    def assess_header(self, header: str) -> float:
        return self.definition.assess_header(header)

    def assess_value(self, value: str) -> float:
        return self.definition.assess_value(value)


_DEFINITIONS: dict[BenefitsColumnKind, SimpleColumnKind] = {
    BenefitsColumnKind.MEMBER_ID: SimpleColumnKind(
        header_dictionary=("member id",),
        value_dictionary=("0", "0a", "a0", "0a0", "a0a"),
        value_assessor=ALPHA_REDUCED,
    ),
    BenefitsColumnKind.SUBSCRIBER_NAME: SimpleColumnKind(
        header_dictionary=("subscriber name", "first name", "last name", "member name"),
        value_dictionary=("a", "a a", "a, a", "a a a", "a, a a", "a a, a", "a, a, a"),
        value_assessor=ALPHA_REDUCED,
    ),
    BenefitsColumnKind.SSN: SimpleColumnKind(
        header_dictionary=("ssn", "social security number"),
        value_dictionary=(
            "000000000",
            "000-00-0000",
            "000 00 0000",
            "000-00-aaaa",
            "000 00 aaaa",
        ),
        value_assessor=DIGITS_FOLDED,
    ),
    BenefitsColumnKind.PLAN: SimpleColumnKind(
        header_dictionary=("plan", "product"),
        value_dictionary=("a", "a0", "a 0", "a0a", "0a0", "0a"),
        value_assessor=ALPHANUM_REDUCED,
    ),
    BenefitsColumnKind.VOLUME: SimpleColumnKind(
        header_dictionary=("volume", "total amount"),
        value_dictionary=MONETARY,
    ),
    BenefitsColumnKind.TIER: SimpleColumnKind(
        header_dictionary=("tier", "type", "coverage type", "coverage"),
        value_dictionary=(
            "ee",
            "employee",
            "sp",
            "spouse",
            "dp",
            "dependent",
            "fam",
            "family",
            "ech",
            "employee+child",
            "spouse+child",
            "employee+spouse",
        ),
    ),
    BenefitsColumnKind.EMPLOYEE_AMOUNT: SimpleColumnKind(
        header_dictionary=("employee amount",),
        value_dictionary=MONETARY,
    ),
    BenefitsColumnKind.DEPENDENT_AMOUNT: SimpleColumnKind(
        header_dictionary=("dependent amount",),
        value_dictionary=MONETARY,
    ),
    BenefitsColumnKind.PREMIUM: SimpleColumnKind(
        header_dictionary=("premium", "premium amount"),
        value_dictionary=MONETARY,
    ),
}
