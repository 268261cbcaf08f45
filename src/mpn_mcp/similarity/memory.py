"""Serial EEPROM and flash similarity.

Technology and bus interface are hard requirements: an I2C EEPROM never replaces
an SPI one, nor a flash part an EEPROM. Past that, capacity, supply voltage
class and package are blended, and curated cross-vendor equivalents are boosted.
"""

import re
from dataclasses import dataclass

from ..resolver import extract_package_code
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, SimilarityCalculator, packages_match

# (pattern, technology, interface); group 1 is the capacity code
_MEMORY_PARTS: tuple[tuple[re.Pattern[str], str, str], ...] = (
    (re.compile(r"(?:24(?:AA|LC|FC|C)|AT24C|M24C?|CAT24C?|BR24[A-Z]?)([0-9]+)"), "EEPROM", "I2C"),
    (re.compile(r"(?:25(?:AA|LC|C)|AT25(?=[0-9])|M95|CAT25)([0-9]+)"), "EEPROM", "SPI"),
    (re.compile(r"(?:93(?:AA|LC|C)|AT93C)([0-9]+)"), "EEPROM", "MICROWIRE"),
    (re.compile(r"(?:W25[QX]|MX25[LUR]|S25FL|IS25[LW]P|AT25(?:SF|DF)|GD25[QLB]|N25Q|MT25Q[LU])([0-9]+)"),
     "FLASH", "SPI"),
)

# 1.8 V-only or wide-range-down-to-1.7 V parts
_LOW_VOLTAGE = re.compile(r"(?:24AA|25AA|93AA|MX25U|W25Q[0-9]+[A-Z]?W|IS25WP|MT25QU|GD25LQ?)")

_SUFFIX_SEPARATOR = re.compile(r"[-/ ]")

# Capacity codes, largest first so "128" is not read as "12"
_CAPACITY_STEPS = (1024, 512, 256, 128, 64, 32, 16, 8, 4, 2, 1)

EQUIVALENT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"24LC256", "24AA256", "24FC256", "AT24C256", "AT24C256B", "AT24C256C", "M24256", "M24C256",
               "CAT24C256"}),
    frozenset({"24LC512", "24AA512", "24FC512", "AT24C512", "AT24C512B", "AT24C512C", "M24512", "CAT24C512"}),
    frozenset({"24LC1025", "24AA1025", "24FC1025", "AT24C1024", "AT24C1024B", "M24M01", "CAT24M01"}),
    frozenset({"25LC256", "25AA256", "AT25256", "AT25256B", "M95256"}),
    frozenset({"25LC512", "25AA512", "AT25512", "M95512"}),
    frozenset({"W25Q32", "W25Q32JV", "W25Q32FV", "MX25L3233F", "MX25L3206E", "S25FL032P", "AT25SF321",
               "IS25LP032", "GD25Q32"}),
    frozenset({"W25Q64", "W25Q64JV", "W25Q64FV", "MX25L6433F", "MX25L6406E", "S25FL064L", "AT25SF641",
               "IS25LP064", "GD25Q64"}),
    frozenset({"W25Q128", "W25Q128JV", "W25Q128FV", "MX25L12835F", "MX25L12833F", "S25FL128S", "IS25LP128",
               "GD25Q128"}),
)

# Blend weights; the blend is scaled so a full match lands on HIGH_SIMILARITY
_WEIGHT_CAPACITY = 0.5
_WEIGHT_VOLTAGE = 0.2
_WEIGHT_PACKAGE = 0.3


@dataclass(frozen=True)
class MemorySpec:
    technology: str
    interface: str
    capacity: int
    low_voltage: bool


def parse_capacity(code: str) -> int:
    """Capacity from the part number digits: '256' -> 256, '3233' -> 32, '032' -> 32, '12835' -> 128."""
    code = code.lstrip("0")
    for size in _CAPACITY_STEPS:
        if code.startswith(str(size)):
            return size
    return 0


def parse_memory(mpn: str) -> MemorySpec | None:
    for pattern, technology, interface in _MEMORY_PARTS:
        match = pattern.match(mpn)
        if match:
            return MemorySpec(
                technology=technology,
                interface=interface,
                capacity=parse_capacity(match.group(1)),
                low_voltage=bool(_LOW_VOLTAGE.match(mpn)),
            )
    return None


def base_part(mpn: str) -> str:
    """Part number without ordering suffix: 'AT24C256C-SSHL-T' -> 'AT24C256C', '24LC256-I/SN' -> '24LC256'."""
    return _SUFFIX_SEPARATOR.split(mpn, maxsplit=1)[0]


def _equivalent(mpn1: str, mpn2: str) -> bool:
    base1 = base_part(mpn1)
    base2 = base_part(mpn2)
    for group in EQUIVALENT_GROUPS:
        if _in_group(group, base1) and _in_group(group, base2):
            return True
    return False


def _in_group(group: frozenset[str], base: str) -> bool:
    # Flash ordering codes carry package/temperature letters after the base
    # ("W25Q32JVSSIQ"), so a group entry matches when it prefixes the part.
    return base in group or any(base.startswith(entry) for entry in group if len(entry) >= 6)


class MemoryCalculator(SimilarityCalculator):
    name = "memory"
    FAMILIES = frozenset({ComponentType.MEMORY})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        if _equivalent(mpn1, mpn2):
            return HIGH_SIMILARITY

        spec1 = parse_memory(mpn1)
        spec2 = parse_memory(mpn2)
        if spec1 is None or spec2 is None:
            return 0.0
        if spec1.technology != spec2.technology or spec1.interface != spec2.interface:
            return 0.0

        same_package = packages_match(extract_package_code(mpn1), extract_package_code(mpn2))
        return HIGH_SIMILARITY * (
            _WEIGHT_CAPACITY * (1.0 if spec1.capacity and spec1.capacity == spec2.capacity else 0.0)
            + _WEIGHT_VOLTAGE * (1.0 if spec1.low_voltage == spec2.low_voltage else 0.0)
            + _WEIGHT_PACKAGE * (1.0 if same_package else 0.0)
        )
