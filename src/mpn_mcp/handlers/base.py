"""Manufacturer handler base class.

A handler is a stateless strategy owned by one manufacturer. It registers that
manufacturer's component type patterns and knows how to read series and package
codes out of its part numbers. Subclasses mostly just fill in PATTERNS; the few
vendors whose numbering needs more override matches() or the extractors.

All handler methods receive canonical (stripped, upper-cased) MPNs.
"""

from ..mpn import hyphen_suffix, series_prefix, trailing_letters
from ..packages import are_packages_compatible, is_known_package_code, resolve_package_code
from ..patterns import PatternRegistry
from ..taxonomy import ComponentType, ancestors


class ManufacturerHandler:
    """Default match/extract/replace behaviour shared by all handlers."""

    # Owner identity in the pattern registry, also the manufacturer key
    key: str = ""

    # component type -> full-match regexes. A pattern registered for a type is also
    # registered for that type's ancestors, so OPAMP_TI patterns answer OPAMP queries.
    PATTERNS: dict[ComponentType, tuple[str, ...]] = {}

    def __init__(self):
        self.supported_types: tuple[ComponentType, ...] = self._collect_supported_types()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"

    def _collect_supported_types(self) -> tuple[ComponentType, ...]:
        types: list[ComponentType] = []
        for component_type in self.PATTERNS:
            for t in (component_type, *ancestors(component_type)):
                if t not in types:
                    types.append(t)
        return tuple(types)

    def register_patterns(self, registry: PatternRegistry) -> None:
        for component_type, patterns in self.PATTERNS.items():
            for pattern in patterns:
                registry.register(self.key, component_type, pattern)
                for ancestor in ancestors(component_type):
                    registry.register(self.key, ancestor, pattern)

    def matches(self, mpn: str, component_type: ComponentType, registry: PatternRegistry) -> bool:
        """Does this manufacturer's rule set classify the MPN as the given type?"""
        return registry.matches_owner(self.key, mpn, component_type)

    def extract_package_code(self, mpn: str) -> str:
        """Package name from the ordering suffix, or "" if none is recognisable.

        Tries the segment after the last hyphen, then the letters after the last digit.
        """
        if not mpn:
            return ""
        suffix = hyphen_suffix(mpn)
        if suffix and is_known_package_code(suffix):
            return resolve_package_code(suffix)
        letters = trailing_letters(mpn)
        if letters and is_known_package_code(letters):
            return resolve_package_code(letters)
        return ""

    def extract_series(self, mpn: str) -> str:
        """Series: prefix up to and including the first run of digits."""
        if not mpn:
            return ""
        return series_prefix(mpn)

    def is_official_replacement(self, mpn1: str, mpn2: str) -> bool:
        """Same series, and compatible packages whenever both packages are known."""
        if not mpn1 or not mpn2:
            return False
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        package1 = self.extract_package_code(mpn1)
        package2 = self.extract_package_code(mpn2)
        if package1 and package2:
            return are_packages_compatible(package1, package2)
        return True
