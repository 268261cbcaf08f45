"""Op-amp similarity.

Classic general-purpose op-amps are second-sourced under many names. Parts in
the same channel-count group share a pinout (dual: 8-pin, quad: 14-pin) and are
treated as drop-in replacements.
"""

import re

from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, SimilarityCalculator, in_same_group

_OPAMP_BASE = re.compile(r"((?:LM|MC|RC|TL|NE|SE|SA|UA|OPA|TLV|TLC|MCP|AD|LT|KA)[0-9]{3,4})")

DUAL_OPAMPS = frozenset({"LM358", "MC1458", "LM1458", "RC4558", "TL072", "TL082", "NE5532", "KA358"})
QUAD_OPAMPS = frozenset({"LM324", "MC3403", "RC4136", "TL074", "TL084", "KA324"})
SINGLE_OPAMPS = frozenset({"LM741", "UA741", "TL071", "TL081", "KA741"})

CHANNEL_GROUPS = (SINGLE_OPAMPS, DUAL_OPAMPS, QUAD_OPAMPS)

# Both recognised as op-amps, nothing else in common
_UNRELATED = 0.5
_DIFFERENT_CHANNELS = 0.3


def opamp_base(mpn: str) -> str:
    """Base part without package/grade suffix: 'LM358DR' -> 'LM358', 'TL072CP' -> 'TL072'."""
    match = _OPAMP_BASE.match(mpn)
    return match.group(1) if match else ""


def channel_count(base: str) -> int:
    for count, group in zip((1, 2, 4), CHANNEL_GROUPS):
        if base in group:
            return count
    return 0


class OpAmpCalculator(SimilarityCalculator):
    name = "opamp"
    FAMILIES = frozenset({ComponentType.OPAMP})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        base1 = opamp_base(mpn1)
        base2 = opamp_base(mpn2)
        if not base1 or not base2:
            return 0.0
        if base1 == base2 or in_same_group(CHANNEL_GROUPS, base1, base2):
            return HIGH_SIMILARITY

        channels1 = channel_count(base1)
        channels2 = channel_count(base2)
        if channels1 and channels2:
            return _DIFFERENT_CHANNELS
        return _UNRELATED
