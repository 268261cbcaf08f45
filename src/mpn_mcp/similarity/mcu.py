"""Microcontroller similarity.

Microcontrollers are only interchangeable within a part line: the same series in
another package or memory size scores high, the same product line medium. Known
pin-compatible clones of the STM32F103 are the one cross-vendor exception.
"""

import re

from ..resolver import extract_package_code, extract_series, resolve_manufacturer
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, packages_match

_PRODUCT_LINE = re.compile(
    r"STM32[A-Z][0-9]|STM8[A-Z]|DSPIC[0-9]{2}|PIC[0-9]{2}|ATMEGA|ATTINY|ATXMEGA|ATSAM[A-Z0-9]{2}|MSP43[02]"
    r"|ESP32|ESP8266|NRF5[0-9]|LPC[0-9]{2}|GD32[A-Z][0-9]|CH32[A-Z][0-9]|EFM32|EFR32|R7F|RL78"
)

# Vendor part families pin-compatible with the STM32F103
_F103_CLONE = re.compile(r"(?:STM|GD|APM|CH|CKS)32F103")


def product_line(mpn: str) -> str:
    """'STM32F103C8T6' -> 'STM32F1', 'ATMEGA328P-AU' -> 'ATMEGA', 'PIC16F877A' -> 'PIC16'."""
    match = _PRODUCT_LINE.match(mpn)
    return match.group(0) if match else ""


class MCUCalculator(SimilarityCalculator):
    name = "microcontroller"
    FAMILIES = frozenset({ComponentType.MICROCONTROLLER})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if not self.applies_to_both(mpn1, mpn2):
            return 0.0
        clones = bool(_F103_CLONE.match(mpn1) and _F103_CLONE.match(mpn2))
        if not clones and resolve_manufacturer(mpn1) != resolve_manufacturer(mpn2):
            return LOW_SIMILARITY

        series1 = extract_series(mpn1)
        if clones or (series1 and series1 == extract_series(mpn2)):
            if packages_match(extract_package_code(mpn1), extract_package_code(mpn2)):
                return HIGH_SIMILARITY
            return MEDIUM_SIMILARITY

        line1 = product_line(mpn1)
        if line1 and line1 == product_line(mpn2):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
