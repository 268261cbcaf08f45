"""Handlers for vendors whose catalogue is mostly microcontrollers."""

import re

from ..mpn import hyphen_suffix
from ..packages import is_known_package_code, resolve_package_code
from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

_ORDERING_BASE = re.compile(r"^[A-Z0-9]+")


def _base_part(mpn: str) -> str:
    """Part number before the first '-' or '/' ordering separator."""
    match = _ORDERING_BASE.match(mpn)
    return match.group(0) if match else ""


# =============================================================================
# Microchip / Atmel
# =============================================================================

# Microchip "-I/P" style suffixes: package code after the slash
_MICROCHIP_PACKAGES = {
    "P": "DIP",
    "SN": "SOIC",
    "SO": "SOIC-Wide",
    "SM": "SOIC-Wide",
    "ST": "TSSOP",
    "SS": "SSOP",
    "MS": "MSOP",
    "ML": "QFN",
    "MG": "QFN",
    "MF": "DFN",
    "MC": "DFN",
    "MN": "TDFN",
    "PT": "TQFP",
    "OT": "SOT-23",
    "TT": "SOT-23",
}


class MicrochipHandler(ManufacturerHandler):
    key = "microchip"

    PATTERNS = {
        CT.MICROCONTROLLER_MICROCHIP: (
            r"PIC(?:10|12|16|18|24|32)[A-Z0-9/-]*",
            r"DSPIC(?:30|33)[A-Z0-9/-]*",
        ),
        CT.MEMORY_EEPROM_MICROCHIP: (
            r"(?:24|25|93)(?:AA|LC|FC|C)[0-9]+[A-Z0-9/-]*",
        ),
        CT.OPAMP_MICROCHIP: (
            r"MCP6[0-4][0-9]{1,2}[A-Z0-9/-]*",
        ),
        CT.INTERFACE_IC: (
            r"MCP2[0-9]{3,4}[A-Z0-9/-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"MCP17[0-9]{2}[A-Z0-9/.-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        if "/" in mpn:
            return _MICROCHIP_PACKAGES.get(mpn.rsplit("/", 1)[1], "")
        return super().extract_package_code(mpn)

    def extract_series(self, mpn: str) -> str:
        return _base_part(mpn) if mpn else ""


class AtmelHandler(ManufacturerHandler):
    key = "atmel"

    PATTERNS = {
        CT.MICROCONTROLLER_ATMEL: (
            r"AT(?:MEGA|TINY|XMEGA)[0-9A-Z]*(?:-[A-Z0-9]+)*",
            r"AT90[A-Z0-9-]*",
            r"ATSAM[A-Z0-9-]*",
        ),
        CT.MEMORY_EEPROM_ATMEL: (
            r"AT24C[0-9]+[A-Z0-9-]*",
            r"AT93C[0-9]+[A-Z0-9-]*",
        ),
        CT.MEMORY_FLASH: (
            r"AT25(?:SF|DF|F)?[0-9]+[A-Z0-9-]*",
            r"AT45DB[0-9]+[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        # ATTINY85-20PU: speed grade and package share the last segment
        code = hyphen_suffix(mpn).lstrip("0123456789")
        if code and is_known_package_code(code):
            return resolve_package_code(code)
        return super().extract_package_code(mpn)

    def extract_series(self, mpn: str) -> str:
        return _base_part(mpn) if mpn else ""


# =============================================================================
# Other MCU vendors
# =============================================================================

class RenesasHandler(ManufacturerHandler):
    key = "renesas"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"R[57]F[0-9A-Z]+",
            r"RL78[A-Z0-9/-]*",
            r"RA[0-9]M[0-9][A-Z0-9-]*",
            r"UPD78F[0-9A-Z-]+",
        ),
    }


class NXPHandler(ManufacturerHandler):
    key = "nxp"

    PATTERNS = {
        CT.MICROCONTROLLER_NXP: (
            r"LPC[0-9]{3,4}[A-Z0-9/-]*",
            r"MK[0-9]{2}[A-Z0-9-]*",
            r"S32K[0-9][A-Z0-9-]*",
            r"MIMXRT[0-9A-Z-]*",
        ),
        CT.INTERFACE_IC: (
            r"PCA[0-9]{4}[A-Z0-9,/-]*",
            r"PCF[0-9]{4}[A-Z0-9,/-]*",
            r"TJA[0-9]{4}[A-Z0-9/-]*",
        ),
    }


class CypressHandler(ManufacturerHandler):
    key = "cypress"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"CY8C[0-9][A-Z0-9-]*",
        ),
        CT.INTERFACE_IC: (
            r"CY7C6[0-9]{4}[A-Z0-9-]*",
        ),
        CT.MEMORY_FLASH: (
            r"S25FL[0-9]+[A-Z0-9-]*",
        ),
        CT.MEMORY: (
            r"FM25[A-Z]?[0-9]+[A-Z0-9-]*",
        ),
    }


class SiliconLabsHandler(ManufacturerHandler):
    key = "silabs"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"EFM(?:8|32)[A-Z0-9-]+",
            r"EFR32[A-Z0-9-]+",
        ),
        CT.INTERFACE_IC: (
            r"CP21[0-9]{2}[A-Z0-9-]*",
        ),
    }


_ESPRESSIF_SERIES = re.compile(r"ESP(?:32(?:-?[CSH][0-9])?|8266|8285)")


class EspressifHandler(ManufacturerHandler):
    key = "espressif"

    PATTERNS = {
        CT.MICROCONTROLLER_ESPRESSIF: (
            r"ESP32[A-Z0-9-]*",
            r"ESP8266[A-Z0-9-]*",
            r"ESP8285[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if any(tag in mpn for tag in ("WROOM", "WROVER", "MINI", "SOLO")):
            return "MODULE"
        return ""

    def extract_series(self, mpn: str) -> str:
        match = _ESPRESSIF_SERIES.match(mpn) if mpn else None
        return match.group(0) if match else ""


# nRF ordering code after the hyphen: first two letters give the package
_NORDIC_PACKAGES = {
    "QF": "QFN",
    "QD": "QFN",
    "QI": "QFN",
    "CI": "WLCSP",
    "CA": "WLCSP",
}


class NordicHandler(ManufacturerHandler):
    key = "nordic"

    PATTERNS = {
        CT.MICROCONTROLLER_NORDIC: (
            r"NRF5[0-9]{3}[A-Z0-9-]*",
            r"NRF9[0-9]{3}[A-Z0-9-]*",
        ),
        CT.INTERFACE_IC: (
            r"NRF24L01[A-Z0-9+-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        return _NORDIC_PACKAGES.get(hyphen_suffix(mpn)[:2], "") if mpn else ""

    def extract_series(self, mpn: str) -> str:
        return _base_part(mpn) if mpn else ""


class NuvotonHandler(ManufacturerHandler):
    key = "nuvoton"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"NUC[0-9]{3}[A-Z0-9-]*",
            r"N76E[0-9]{3}[A-Z0-9-]*",
            r"MS51[A-Z0-9-]*",
            r"M0[0-9]{2}[A-Z][A-Z0-9-]*",
        ),
    }


class WCHHandler(ManufacturerHandler):
    key = "wch"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"CH32[VF][0-9][A-Z0-9-]*",
            r"CH55[0-9][A-Z0-9-]*",
        ),
        CT.INTERFACE_IC: (
            r"CH34[0-9][A-Z]?[A-Z0-9-]*",
        ),
    }


class GigaDeviceHandler(ManufacturerHandler):
    key = "gigadevice"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"GD32[FEVL][0-9][A-Z0-9-]*",
        ),
        CT.MEMORY_FLASH: (
            r"GD25[QLB][0-9]+[A-Z0-9-]*",
        ),
    }


class ArteryHandler(ManufacturerHandler):
    key = "artery"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"AT32F[0-9]{3}[A-Z0-9-]*",
        ),
    }


class HoltekHandler(ManufacturerHandler):
    key = "holtek"

    PATTERNS = {
        CT.MICROCONTROLLER: (
            r"HT6[678][A-Z0-9]+",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"HT7[0-9]{3}[A-Z0-9-]*",
        ),
    }
