"""Bipolar transistor similarity.

Polarity is a hard requirement. Within a polarity, the classic general-purpose
parts and their SMD/second-source versions are grouped as equivalents.
"""

import re

from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, in_same_group

_TRANSISTOR_BASE = re.compile(r"((?:2N|PN|MMBT|PMBT|BC|TIP|MJE|2SC|2SA)[0-9]+)")

NPN_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"2N2222", "PN2222", "MMBT2222", "PMBT2222"}),
    frozenset({"2N3904", "PN3904", "MMBT3904", "PMBT3904"}),
    frozenset({"2N4401", "PN4401", "MMBT4401", "PMBT4401"}),
    frozenset({"BC547", "BC548", "BC337"}),
)

PNP_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"2N2907", "PN2907", "MMBT2907", "PMBT2907"}),
    frozenset({"2N3906", "PN3906", "MMBT3906", "PMBT3906"}),
    frozenset({"2N4403", "PN4403", "MMBT4403", "PMBT4403"}),
    frozenset({"BC557", "BC558", "BC327"}),
)

# Polarity of parts outside the groups
_NPN_EXTRA = frozenset({"BC546", "BC549", "BC550", "BC817", "BC847", "TIP31", "TIP41", "TIP120", "MJE3055"})
_PNP_EXTRA = frozenset({"BC556", "BC559", "BC560", "BC807", "BC857", "TIP32", "TIP42", "TIP125", "MJE2955"})


def transistor_base(mpn: str) -> str:
    """'2N3904BU' -> '2N3904', 'BC547B' -> 'BC547', 'MMBT3904LT1G' -> 'MMBT3904'."""
    match = _TRANSISTOR_BASE.match(mpn)
    return match.group(1) if match else ""


def polarity(base: str) -> str:
    """'NPN', 'PNP' or '' when unknown."""
    if base in _NPN_EXTRA or any(base in group for group in NPN_GROUPS):
        return "NPN"
    if base in _PNP_EXTRA or any(base in group for group in PNP_GROUPS):
        return "PNP"
    if base.startswith("2SC"):
        return "NPN"
    if base.startswith("2SA"):
        return "PNP"
    return ""


class TransistorCalculator(SimilarityCalculator):
    name = "transistor"
    FAMILIES = frozenset({ComponentType.TRANSISTOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        base1 = transistor_base(mpn1)
        base2 = transistor_base(mpn2)
        if not base1 or not base2:
            return 0.0

        polarity1 = polarity(base1)
        polarity2 = polarity(base2)
        if polarity1 and polarity2 and polarity1 != polarity2:
            return 0.0
        if base1 == base2:
            return HIGH_SIMILARITY
        if in_same_group(NPN_GROUPS, base1, base2) or in_same_group(PNP_GROUPS, base1, base2):
            return HIGH_SIMILARITY
        if polarity1 and polarity1 == polarity2:
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
