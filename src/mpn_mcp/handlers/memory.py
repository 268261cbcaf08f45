"""Handlers for memory vendors."""

import re

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

# W25Q32JVSSIQ: family, density, two-letter revision, two-letter package
_WINBOND_PART = re.compile(r"(W25[QXN][0-9]+)(?:[A-Z]V|[A-Z]W|JL)?([A-Z]{2})")
_WINBOND_PACKAGES = {
    "SS": "SOIC-208",
    "SN": "SOIC",
    "SF": "SOIC-16",
    "ZP": "WSON",
    "ZE": "WSON",
    "DA": "DIP",
    "TB": "TFBGA",
    "TC": "TFBGA",
    "XG": "XSON",
}

# Flash family + density, shared by the other SPI flash vendors
_FLASH_SERIES = re.compile(r"(?:MT25Q[LU]|N25Q|M25P|IS25[LW]P|MX25[LRUV]|MX66[LU])[0-9]+")


class _FlashHandler(ManufacturerHandler):
    def extract_series(self, mpn: str) -> str:
        match = _FLASH_SERIES.match(mpn) if mpn else None
        if match:
            return match.group(0)
        return super().extract_series(mpn)


class WinbondHandler(ManufacturerHandler):
    key = "winbond"

    PATTERNS = {
        CT.MEMORY_FLASH_WINBOND: (
            r"W25[QXN][0-9]{2,3}[A-Z0-9-]*",
            r"W29[A-Z][0-9]+[A-Z0-9-]*",
        ),
        CT.MEMORY: (
            r"W9[0-9]{3}[A-Z0-9]+",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        match = _WINBOND_PART.match(mpn) if mpn else None
        return _WINBOND_PACKAGES.get(match.group(2), "") if match else ""

    def extract_series(self, mpn: str) -> str:
        match = _WINBOND_PART.match(mpn) if mpn else None
        if match:
            return match.group(1)
        return super().extract_series(mpn)


class MicronHandler(_FlashHandler):
    key = "micron"

    PATTERNS = {
        CT.MEMORY_FLASH_MICRON: (
            r"(?:MT25Q|N25Q|M25P)[A-Z0-9-]+",
            r"MT29F[A-Z0-9:-]+",
        ),
        CT.MEMORY: (
            r"MT4[0-9][A-Z][0-9A-Z:-]+",
        ),
    }


class ISSIHandler(_FlashHandler):
    key = "issi"

    PATTERNS = {
        CT.MEMORY_FLASH_ISSI: (
            r"IS25[LW]P[0-9]+[A-Z0-9-]*",
        ),
        CT.MEMORY: (
            r"IS(?:42|43|45|46|61|62|64|65|66)[A-Z0-9-]+",
        ),
    }


class MacronixHandler(_FlashHandler):
    key = "macronix"

    PATTERNS = {
        CT.MEMORY_FLASH_MACRONIX: (
            r"MX(?:25|29|30|66)[A-Z][0-9]+[A-Z0-9-]*",
        ),
    }
