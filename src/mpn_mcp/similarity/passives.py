"""Chip resistor and ceramic capacitor similarity.

Both are decoded from the vendor ordering code into (case size, value[, dielectric]).
A different value is never a replacement; the same value in the same case size
is, whatever the vendor.
"""

import re

from ..arbiter import resolve_type
from ..resolver import extract_package_code, extract_series
from ..taxonomy import ComponentType, base_type
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator


# =============================================================================
# VALUE PARSING
# =============================================================================

# Resistance value code per vendor; group 1 is the code
_RESISTANCE_CODES = (
    re.compile(r"R[CTL][0-9]{4}[A-Z]{2}-[0-9]{2}([0-9]*[RKM][0-9]*)"),  # Yageo RC0603FR-0710KL
    re.compile(r"(?:CRCW|TNPW)[0-9]{4}([0-9]*[RKM][0-9]*)"),  # Vishay CRCW060310K0FKEA
    re.compile(r"ERJ-?[0-9A-Z]{1,2}[A-Z]{2}[FDJ]?([0-9]{3,4}|[0-9]*R[0-9]+)"),  # Panasonic ERJ-3EKF1002V
    re.compile(r"CRM?[0-9]{4}-[A-Z]{2}-([0-9]{3,4}|[0-9]*R[0-9]+)"),  # Bourns CR0603-FX-1002ELF
)
_RESISTANCE_MULTIPLIERS = {"R": 1.0, "K": 1e3, "M": 1e6}

# Capacitance code and dielectric per vendor: (pattern, value group, dielectric group, dielectric names)
_CAPACITANCE_CODES: tuple[tuple[re.Pattern[str], int, int, dict[str, str]], ...] = (
    # Murata GRM188R71H104KA93D
    (re.compile(r"G(?:RM|CM|JM|RT)[0-9]{3}([0-9A-Z]{2})[0-9][A-Z]([0-9]{3}|[0-9]R[0-9])"), 2, 1,
     {"R7": "X7R", "R6": "X5R", "5C": "C0G", "C7": "X7S", "F5": "Y5V"}),
    # Samsung CL10B104KB8NNNC
    (re.compile(r"CL[0-9]{2}([A-Z])([0-9]{3}|[0-9]R[0-9])"), 2, 1,
     {"B": "X7R", "A": "X5R", "C": "C0G", "F": "Y5V"}),
    # TDK C1608X7R1H104K080AA
    (re.compile(r"C[0-9]{4}(X7R|X5R|X7S|X6S|C0G|NP0|Y5V)[0-9][A-Z]([0-9]{3}|[0-9]R[0-9])"), 2, 1,
     {"X7R": "X7R", "X5R": "X5R", "X7S": "X7S", "X6S": "X6S", "C0G": "C0G", "NP0": "C0G", "Y5V": "Y5V"}),
    # KEMET C0603C104K5RACTU
    (re.compile(r"C[0-9]{4}C([0-9]{3}|[0-9]R[0-9])[A-Z][0-9]([A-Z])"), 1, 2,
     {"R": "X7R", "P": "X5R", "G": "C0G", "U": "Z5U"}),
    # YAGEO CC0603KRX7R9BB104
    (re.compile(r"CC[0-9]{4}[A-Z]{2}(X7R|X5R|NPO|C0G|Y5V)[0-9][A-Z]{2}([0-9]{3}|[0-9]R[0-9])"), 2, 1,
     {"X7R": "X7R", "X5R": "X5R", "NPO": "C0G", "C0G": "C0G", "Y5V": "Y5V"}),
    # KYOCERA AVX 06035C104KAT2A
    (re.compile(r"[0-9]{4}[0-9A-Z]([A-Z])([0-9]{3}|[0-9]R[0-9])"), 2, 1,
     {"C": "X7R", "A": "C0G", "D": "X5R", "G": "Y5V"}),
)


def _digit_code(code: str, significant: int) -> float:
    """'1002' -> 100 * 10^2, '104' -> 10 * 10^4."""
    return float(int(code[:significant]) * 10 ** int(code[significant]))


def _letter_code(code: str, multipliers: dict[str, float]) -> float | None:
    """'4K7' -> 4700, '10K0' -> 10000, 'R047' -> 0.047, '0R' -> 0."""
    for letter, multiplier in multipliers.items():
        if letter in code:
            whole, _, fraction = code.partition(letter)
            number = f"{whole or '0'}.{fraction or '0'}"
            return float(number) * multiplier
    return None


def parse_resistance(mpn: str) -> float | None:
    """Resistance in ohms from a chip resistor part number, or None."""
    for pattern in _RESISTANCE_CODES:
        match = pattern.match(mpn)
        if not match:
            continue
        code = match.group(1)
        if code.isdigit():
            return _digit_code(code, len(code) - 1)
        return _letter_code(code, _RESISTANCE_MULTIPLIERS)
    return None


def parse_capacitance(mpn: str) -> tuple[float | None, str]:
    """(capacitance in pF, dielectric) from a ceramic capacitor part number.

    'GRM188R71H104KA93D' -> (100000.0, 'X7R'), 'CL10C1R0CB8NNNC' -> (1.0, 'C0G')
    """
    for pattern, value_group, dielectric_group, dielectrics in _CAPACITANCE_CODES:
        match = pattern.match(mpn)
        if not match:
            continue
        code = match.group(value_group)
        if "R" in code:
            value = _letter_code(code, {"R": 1.0})
        else:
            value = _digit_code(code, 2)
        return value, dielectrics.get(match.group(dielectric_group), "")
    return None, ""


# =============================================================================
# CALCULATORS
# =============================================================================

def _same_family(mpn1: str, mpn2: str, family: ComponentType) -> bool:
    return base_type(resolve_type(mpn1)) == family and base_type(resolve_type(mpn2)) == family


def _score_by_size(mpn1: str, mpn2: str) -> float:
    size1 = extract_package_code(mpn1)
    if size1 and size1 == extract_package_code(mpn2):
        return HIGH_SIMILARITY
    return MEDIUM_SIMILARITY


def _score_by_series(mpn1: str, mpn2: str) -> float:
    series1 = extract_series(mpn1)
    if series1 and series1 == extract_series(mpn2):
        return MEDIUM_SIMILARITY
    return LOW_SIMILARITY


class ResistorCalculator(SimilarityCalculator):
    name = "resistor"
    FAMILIES = frozenset({ComponentType.RESISTOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if not _same_family(mpn1, mpn2, ComponentType.RESISTOR):
            return 0.0
        value1 = parse_resistance(mpn1)
        value2 = parse_resistance(mpn2)
        if value1 is None or value2 is None:
            return _score_by_series(mpn1, mpn2)
        if value1 != value2:
            return 0.0
        return _score_by_size(mpn1, mpn2)


class CapacitorCalculator(SimilarityCalculator):
    name = "capacitor"
    FAMILIES = frozenset({ComponentType.CAPACITOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if not _same_family(mpn1, mpn2, ComponentType.CAPACITOR):
            return 0.0
        value1, dielectric1 = parse_capacitance(mpn1)
        value2, dielectric2 = parse_capacitance(mpn2)
        if value1 is None or value2 is None:
            return _score_by_series(mpn1, mpn2)
        if value1 != value2:
            return 0.0
        if dielectric1 and dielectric2 and dielectric1 != dielectric2:
            return LOW_SIMILARITY
        return _score_by_size(mpn1, mpn2)
