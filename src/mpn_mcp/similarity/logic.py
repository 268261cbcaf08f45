"""74-series and 4000-series logic similarity.

The function code after the technology letters ("00" in 74HC00, 74LS00, SN74AHCT00)
identifies the logic function regardless of sub-family, so it is what gets
compared. Parts whose codes differ but implement the same boolean function are
grouped in FUNCTION_GROUPS.
"""

import re

from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, SimilarityCalculator, in_same_group

# Optional vendor prefix, 74/54, technology letters, optional single-gate marker, function code
_TTL_PART = re.compile(r"(?:SN|MC|NLV|CD|M)?(?:74|54)([A-Z]*)(?:[123]G)?([0-9]{2,4})")
_CMOS_4000 = re.compile(r"(?:CD|MC1|HEF)?(4[0-9]{3})")

FUNCTION_GROUPS: dict[str, frozenset[str]] = {
    "NAND": frozenset({"00", "03", "10", "20", "30", "132"}),
    "NOR": frozenset({"02", "27", "33"}),
    "NOT": frozenset({"04", "05", "06", "14", "16", "19"}),
    "AND": frozenset({"08", "09", "11", "21"}),
    "OR": frozenset({"32"}),
    "XOR": frozenset({"86", "136"}),
    "FLIP_FLOP": frozenset({"73", "74", "76", "107", "109", "112", "175"}),
    "MUX": frozenset({"151", "153", "157", "158", "257"}),
    "DECODER": frozenset({"138", "139", "154", "155", "238"}),
    "BUFFER": frozenset({"125", "126", "240", "241", "244", "245"}),
    "LATCH": frozenset({"75", "373", "573"}),
    "COUNTER": frozenset({"161", "163", "191", "193", "393"}),
    "SHIFT_REGISTER": frozenset({"164", "165", "595", "597"}),
}


def function_code(mpn: str) -> str:
    """Logic function code, or "" for anything else.

    '74HC00D' -> '00', 'SN74LVC1G08' -> '08', 'CD4011BE' -> '4011', 'MC14011B' -> '4011'
    """
    match = _TTL_PART.match(mpn)
    if match:
        return match.group(2)
    match = _CMOS_4000.match(mpn)
    if match:
        return match.group(1)
    return ""


class LogicICCalculator(SimilarityCalculator):
    name = "logic_ic"
    # 74-series parts deliberately classify as the generic IC type
    FAMILIES = frozenset({ComponentType.LOGIC_IC, ComponentType.IC})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        code1 = function_code(mpn1)
        code2 = function_code(mpn2)
        if not code1 or not code2:
            return 0.0
        if code1 == code2 or in_same_group(FUNCTION_GROUPS.values(), code1, code2):
            return HIGH_SIMILARITY
        # Unrelated functions are still loosely comparable logic parts
        return LOW_SIMILARITY
