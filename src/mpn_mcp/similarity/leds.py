"""LED similarity: curated bin/packaging variants, then series and manufacturer."""

from ..resolver import extract_series, resolve_manufacturer
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, in_same_group

# Parts that differ only in brightness bin, reel or lens option
EQUIVALENT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"TLHR5400", "TLHR5401", "TLHR5402", "TLHR5403"}),
    frozenset({"TLHG5800", "TLHG5801", "TLHG5802", "TLHG5803"}),
    frozenset({"TLHB5800", "TLHB5801", "TLHB5802", "TLHB5803"}),
    frozenset({"LW E67C", "LW E6SF", "LCW E6SF"}),
    frozenset({"LR E67C", "LR E6SF", "LCR E6SF"}),
    frozenset({"LS E67B", "LS E6SF", "LCS E6SF"}),
    frozenset({"LY E67B", "LY E6SF", "LCY E6SF"}),
    frozenset({"LG R971", "LG R971-KN", "LG R971-PK"}),
    frozenset({"XPERED-L1", "XPERED-L1-0000", "XPERED-L1-R250"}),
    frozenset({"XPGDWT-L1", "XPGDWT-L1-0000", "XPGDWT-L1-R250"}),
    frozenset({"L130-5580", "L130-5580CT", "L130-5580XT"}),
    frozenset({"L135-5780", "L135-5780CT", "L135-5780XT"}),
)


class LEDCalculator(SimilarityCalculator):
    name = "led"
    FAMILIES = frozenset({ComponentType.LED})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if in_same_group(EQUIVALENT_GROUPS, mpn1, mpn2):
            return HIGH_SIMILARITY
        if not self.applies_to_both(mpn1, mpn2):
            return 0.0

        manufacturer1 = resolve_manufacturer(mpn1)
        manufacturer2 = resolve_manufacturer(mpn2)
        if manufacturer1 != manufacturer2:
            return LOW_SIMILARITY

        series1 = extract_series(mpn1)
        if series1 and series1 == extract_series(mpn2):
            return HIGH_SIMILARITY
        return MEDIUM_SIMILARITY
