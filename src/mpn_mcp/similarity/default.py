"""Generic similarity for parts no family calculator covers."""

from ..config import SIMILARITY_BASE_TYPE_WEIGHT, SIMILARITY_MANUFACTURER_WEIGHT, SIMILARITY_SERIES_WEIGHT
from ..resolver import extract_series, resolve_manufacturer
from ..taxonomy import ComponentType, base_type


def default_similarity(mpn1: str, mpn2: str, type1: ComponentType, type2: ComponentType) -> float:
    """Weighted sum of same base type, same manufacturer and same series, capped at 1.0.

    Series only counts between parts of the same manufacturer, since series
    strings are vendor-specific.
    """
    score = 0.0
    if type1 != ComponentType.UNCLASSIFIED and base_type(type1) == base_type(type2):
        score += SIMILARITY_BASE_TYPE_WEIGHT

    manufacturer1 = resolve_manufacturer(mpn1)
    if manufacturer1.is_known and manufacturer1 == resolve_manufacturer(mpn2):
        score += SIMILARITY_MANUFACTURER_WEIGHT
        series1 = extract_series(mpn1)
        if series1 and series1 == extract_series(mpn2):
            score += SIMILARITY_SERIES_WEIGHT

    return min(score, 1.0)
