"""Shared pieces of the per-family similarity calculators."""

from ..arbiter import resolve_type
from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from ..packages import are_packages_compatible
from ..taxonomy import ComponentType, base_type, family_of

__all__ = [
    "HIGH_SIMILARITY",
    "MEDIUM_SIMILARITY",
    "LOW_SIMILARITY",
    "SimilarityCalculator",
    "clamp",
    "in_same_group",
    "packages_match",
]


class SimilarityCalculator:
    """Scores two MPNs of one component family.

    Subclasses set FAMILIES and implement calculate(). A calculator applies to a
    type whose family (OPAMP_TI -> OPAMP) or base type (TEMPERATURE_SENSOR -> SENSOR)
    is in FAMILIES. Scores must not depend on argument order.
    """

    name: str = ""
    FAMILIES: frozenset[ComponentType] = frozenset()

    def is_applicable(self, component_type: ComponentType) -> bool:
        return family_of(component_type) in self.FAMILIES or base_type(component_type) in self.FAMILIES

    def calculate(self, mpn1: str, mpn2: str) -> float:
        """Score in [0, 1] for two canonical, non-identical MPNs."""
        raise NotImplementedError

    def applies_to_both(self, mpn1: str, mpn2: str) -> bool:
        return self.is_applicable(resolve_type(mpn1)) and self.is_applicable(resolve_type(mpn2))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def clamp(score: float) -> float:
    return max(0.0, min(1.0, float(score)))


def in_same_group(groups, a: str, b: str) -> bool:
    """True if some group in the iterable of sets contains both a and b."""
    return any(a in group and b in group for group in groups)


def packages_match(package1: str, package2: str) -> bool:
    """Compatible packages, with an unknown package on either side counting as a match."""
    if not package1 or not package2:
        return True
    return are_packages_compatible(package1, package2)
