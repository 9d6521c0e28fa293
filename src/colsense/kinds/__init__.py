"""Column kind implementations and header-row detection built on the core."""

from __future__ import annotations

from colsense.kinds.benefits import BenefitsColumnKind
from colsense.kinds.header_row import HeaderRowMatch, locate_header_row
from colsense.kinds.simple import SimpleColumnKind

__all__ = ["BenefitsColumnKind", "HeaderRowMatch", "SimpleColumnKind", "locate_header_row"]
