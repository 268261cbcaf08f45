"""Power MOSFET similarity."""

import re

from ..packages import are_packages_compatible
from ..resolver import extract_package_code
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, in_same_group

_LEAD_FREE = re.compile(r"(?:TR[LR]?)?PBF$")
_MOSFET_BASE = re.compile(r"([0-9]?[A-Z]+[0-9]+(?:N[0-9]+)?N?)")
_P_CHANNEL = re.compile(r"IRF[RU]?9|IRL[RU]?9|FQ[PDN][0-9]+P|ST[FPDBW][0-9]+P|DMP|NTR[0-9]P|AO340[17]")

# Cross-vendor TO-220 equivalents
EQUIVALENT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"IRF530", "IRF530N", "STF530", "STF530N", "FQP30N06"}),
    frozenset({"IRF540", "IRF540N", "STF540", "STF540N", "FQP50N06"}),
    frozenset({"IRF640", "IRF640N", "STF640", "STF640N", "FQP44N10"}),
)


def mosfet_base(mpn: str) -> str:
    """'IRF540NPBF' -> 'IRF540N', 'FQP30N06L' -> 'FQP30N06', '2N7002K-7' -> '2N7002'."""
    match = _MOSFET_BASE.match(_LEAD_FREE.sub("", mpn))
    return match.group(1) if match else ""


def channel(mpn: str) -> str:
    return "P" if _P_CHANNEL.match(mpn) else "N"


class MosfetCalculator(SimilarityCalculator):
    name = "mosfet"
    FAMILIES = frozenset({ComponentType.MOSFET})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        base1 = mosfet_base(mpn1)
        base2 = mosfet_base(mpn2)
        if not base1 or not base2:
            return 0.0
        if channel(mpn1) != channel(mpn2):
            return 0.0
        if base1 == base2 or in_same_group(EQUIVALENT_GROUPS, base1, base2):
            return HIGH_SIMILARITY

        package1 = extract_package_code(mpn1)
        package2 = extract_package_code(mpn2)
        if are_packages_compatible(package1, package2):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
