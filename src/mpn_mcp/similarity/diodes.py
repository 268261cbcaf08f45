"""Diode similarity, by diode family.

Known cross-references (1N4148 = 1N914, 1N4007 = RL207) score high outright.
Zeners must agree on voltage; other families fall back to base part and family.
"""

import re

from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, in_same_group

_BASE_PART = re.compile(
    r"(1N[0-9]{3,4}|RL20[1-7]|BZX[0-9]{2}|BZT52|MMSZ[0-9]{4}|BA[TSV][0-9]{2,3}|SS[0-9]{2,3}|MBR[0-9]{2,5}"
    r"|MUR[0-9]{3,4}|SB[0-9]{3,4}|PMEG[0-9]{4}|SM[ABC]J[0-9]+|P[46]KE[0-9]+|1\.5KE[0-9]+|PESD[0-9A-Z]+)"
)
_ZENER_VOLTAGE = re.compile(r"(?:BZX[0-9]{2}|BZT52)-?[A-Z]?([0-9]+)(?:V([0-9]+))?")

# Diode family by base-part prefix; first hit wins
_FAMILIES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"1N4148|1N914|1N4448|BA[VS][0-9]"), "SIGNAL"),
    (re.compile(r"1N400[1-7]|RL20[1-7]|1N54[0-9]{2}|MUR"), "RECTIFIER"),
    (re.compile(r"1N47[0-9]{2}|1N52[0-9]{2}|BZX|BZT|MMSZ"), "ZENER"),
    (re.compile(r"1N58[0-9]{2}|SS[0-9]|MBR|BAT|SB[0-9]|PMEG"), "SCHOTTKY"),
    (re.compile(r"SM[ABC]J|P[46]KE|1\.5KE|PESD"), "TVS"),
)

EQUIVALENT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"1N4148", "1N914", "1N4448"}),
    frozenset({"1N4001", "RL201"}),
    frozenset({"1N4002", "RL202"}),
    frozenset({"1N4003", "RL203"}),
    frozenset({"1N4004", "RL204"}),
    frozenset({"1N4005", "RL205"}),
    frozenset({"1N4006", "RL206"}),
    frozenset({"1N4007", "RL207"}),
)

# 1 W 1N47xx zeners, nominal voltage
_1N47_VOLTAGES = {
    "1N4728": 3.3, "1N4729": 3.6, "1N4730": 3.9, "1N4731": 4.3, "1N4732": 4.7,
    "1N4733": 5.1, "1N4734": 5.6, "1N4735": 6.2, "1N4736": 6.8, "1N4737": 7.5,
    "1N4738": 8.2, "1N4739": 9.1, "1N4740": 10.0, "1N4741": 11.0, "1N4742": 12.0,
    "1N4743": 13.0, "1N4744": 15.0, "1N4745": 16.0, "1N4746": 18.0, "1N4747": 20.0,
    "1N4748": 22.0, "1N4749": 24.0, "1N4750": 27.0, "1N4751": 30.0, "1N4752": 33.0,
}


def diode_base(mpn: str) -> str:
    """'1N4148W-7-F' -> '1N4148', 'BZX84C5V1' -> 'BZX84', 'RL207' -> 'RL207'."""
    match = _BASE_PART.match(mpn)
    return match.group(1) if match else ""


def diode_family(base: str) -> str:
    for pattern, family in _FAMILIES:
        if pattern.match(base):
            return family
    return ""


def zener_voltage(mpn: str) -> float | None:
    """Nominal zener voltage: 'BZX84C5V1' -> 5.1, 'BZT52C12' -> 12.0, '1N4733A' -> 5.1."""
    match = _ZENER_VOLTAGE.match(mpn)
    if match:
        whole, fraction = match.group(1), match.group(2)
        return float(f"{whole}.{fraction}") if fraction else float(whole)
    return _1N47_VOLTAGES.get(mpn[:6])


class DiodeCalculator(SimilarityCalculator):
    name = "diode"
    FAMILIES = frozenset({ComponentType.DIODE})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        base1 = diode_base(mpn1)
        base2 = diode_base(mpn2)
        if not base1 or not base2:
            return 0.0
        if in_same_group(EQUIVALENT_GROUPS, base1, base2):
            return HIGH_SIMILARITY

        family1 = diode_family(base1)
        family2 = diode_family(base2)
        if family1 != family2:
            return LOW_SIMILARITY

        if family1 == "ZENER":
            voltage1 = zener_voltage(mpn1)
            voltage2 = zener_voltage(mpn2)
            if voltage1 is not None and voltage1 == voltage2:
                return HIGH_SIMILARITY
            return LOW_SIMILARITY

        if base1 == base2:
            return HIGH_SIMILARITY
        return MEDIUM_SIMILARITY
