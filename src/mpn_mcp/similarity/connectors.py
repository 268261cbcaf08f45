"""Connector similarity: connector family (pitch/system) and pin count."""

import re

from ..resolver import extract_series, resolve_manufacturer
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator

# Pin count per vendor numbering; group 1 is the count
_PIN_COUNT_PATTERNS = (
    re.compile(r"0?(?:22|43|53|55|67|87|88)[0-9]{3}-?([0-9]{2})"),  # Molex 53047-0410
    re.compile(r"[BS]M?([0-9]{1,2})B-"),  # JST headers B4B-PH-K-S
    re.compile(r"[A-Z]{2}R-([0-9]{1,2})"),  # JST housings PHR-4
    re.compile(r"(?:DF[0-9]{1,2}|FH[0-9]{2}|HR[0-9]{2})[A-Z]?-([0-9]{1,3})"),  # Hirose DF13-4S-1.25C
    re.compile(r"6[1-5][0-9]{2}([0-9]{2})[0-9]{5,6}"),  # Wurth 61300411121
)


def pin_count(mpn: str) -> int:
    """Number of positions, or 0 when the part number does not encode it."""
    for pattern in _PIN_COUNT_PATTERNS:
        match = pattern.match(mpn)
        if match:
            return int(match.group(1))
    return 0


class ConnectorCalculator(SimilarityCalculator):
    name = "connector"
    FAMILIES = frozenset({ComponentType.CONNECTOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if not self.applies_to_both(mpn1, mpn2):
            return 0.0
        if resolve_manufacturer(mpn1) != resolve_manufacturer(mpn2):
            return LOW_SIMILARITY

        series1 = extract_series(mpn1)
        if not series1 or series1 != extract_series(mpn2):
            return LOW_SIMILARITY

        pins1 = pin_count(mpn1)
        pins2 = pin_count(mpn2)
        if pins1 and pins2:
            return HIGH_SIMILARITY if pins1 == pins2 else LOW_SIMILARITY
        return MEDIUM_SIMILARITY
