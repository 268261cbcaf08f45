"""Handlers for passive component vendors.

Chip passives report their package as the EIA (inch) case size, "0603", whatever
code the vendor uses for it, so parts from different vendors compare directly.
"""

import re

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

# Metric case code -> EIA inch size
METRIC_TO_INCH = {
    "0402": "01005",
    "0603": "0201",
    "1005": "0402",
    "1608": "0603",
    "2012": "0805",
    "3216": "1206",
    "3225": "1210",
    "4532": "1812",
    "5750": "2220",
}

# Two-digit dimension code used by Murata (GRM18...) and Samsung (CL10...)
_MURATA_SIZES = {
    "02": "01005",
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
    "55": "2220",
}

_SAMSUNG_SIZES = {
    "02": "01005",
    "03": "0201",
    "05": "0402",
    "10": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
    "55": "2220",
}


class _SizeCodeHandler(ManufacturerHandler):
    """Handler whose package and series come from one regex over the MPN.

    SIZE_PATTERN group 1 is the series, group 2 the vendor size code, which
    SIZE_CODES translates (codes missing from it are used as-is).
    """

    SIZE_PATTERN: re.Pattern[str] | None = None
    SIZE_CODES: dict[str, str] = {}

    def extract_package_code(self, mpn: str) -> str:
        match = self.SIZE_PATTERN.match(mpn) if mpn else None
        if not match:
            return super().extract_package_code(mpn)
        code = match.group(2)
        return self.SIZE_CODES.get(code, code)

    def extract_series(self, mpn: str) -> str:
        match = self.SIZE_PATTERN.match(mpn) if mpn else None
        if not match:
            return super().extract_series(mpn)
        return match.group(1)


# =============================================================================
# Resistors
# =============================================================================

class YageoHandler(_SizeCodeHandler):
    key = "yageo"

    PATTERNS = {
        CT.RESISTOR_CHIP_YAGEO: (
            r"R[CTL][0-9]{4}[A-Z0-9-]*",
            r"AC[0-9]{4}[A-Z0-9-]*",
        ),
        CT.CAPACITOR_CERAMIC_YAGEO: (
            r"CC[0-9]{4}[A-Z0-9-]*",
        ),
    }
    SIZE_PATTERN = re.compile(r"((?:R[CTL]|AC|CC)([0-9]{4}))")


_ERJ_SIZE = re.compile(r"(ERJ-?(XG|1G|1T|14|12|2|3|6|8))")


class PanasonicHandler(_SizeCodeHandler):
    key = "panasonic"

    PATTERNS = {
        CT.RESISTOR_CHIP_PANASONIC: (
            r"ER[JA]-?[0-9A-Z]+",
        ),
        CT.CAPACITOR_ELECTROLYTIC_PANASONIC: (
            r"EE[EUF]-?[A-Z0-9]+",
            r"ECA-?[A-Z0-9]+",
        ),
        CT.CAPACITOR: (
            r"ECQ-?[A-Z0-9]+",
        ),
        CT.INDUCTOR: (
            r"EL[LC]-?[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = _ERJ_SIZE
    SIZE_CODES = {
        "XG": "01005",
        "1G": "0201",
        "2": "0402",
        "3": "0603",
        "6": "0805",
        "8": "1206",
        "14": "1210",
        "12": "1812",
        "1T": "2512",
    }


class BournsHandler(_SizeCodeHandler):
    key = "bourns"

    PATTERNS = {
        CT.RESISTOR: (
            r"CR[0-9]{4}-[A-Z0-9-]+",
            r"CRM[0-9]{4}-[A-Z0-9-]+",
            r"329[0-9][A-Z]-[0-9]-[0-9]{3}[A-Z]*",
            r"3362[A-Z]-[0-9]-[0-9]{3}[A-Z]*",
        ),
        CT.INDUCTOR: (
            r"SR[RNU][0-9]{4}-[A-Z0-9]+",
            r"SDR[0-9]{4}-[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = re.compile(r"(CRM?([0-9]{4}))")


# =============================================================================
# Capacitors
# =============================================================================

class KemetHandler(_SizeCodeHandler):
    key = "kemet"

    PATTERNS = {
        CT.CAPACITOR_CERAMIC_KEMET: (
            r"C(?:0201|0402|0603|0805|1206|1210|1812|2220)C[0-9]{3}[A-Z0-9]*",
        ),
        CT.CAPACITOR: (
            r"T4[0-9]{2}[A-Z][0-9]{3}[A-Z0-9]*",
            r"T52[0-9][A-Z][0-9]{3}[A-Z0-9]*",
        ),
    }
    SIZE_PATTERN = re.compile(r"(C([0-9]{4})C)")


class MurataHandler(_SizeCodeHandler):
    key = "murata"

    PATTERNS = {
        CT.CAPACITOR_CERAMIC_MURATA: (
            r"G(?:RM|CM|JM|RT)[0-9]{3}[A-Z0-9]+",
        ),
        CT.INDUCTOR_MURATA: (
            r"LQ[MWGH][0-9]{2}[A-Z0-9]+",
            r"DLW[0-9]{2}[A-Z0-9]+",
        ),
        CT.FERRITE_BEAD_MURATA: (
            r"BLM[0-9]{2}[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = re.compile(r"((?:GRM|GCM|GJM|GRT|LQ[MWGH]|BLM|DLW)([0-9]{2})[0-9]?)")
    SIZE_CODES = _MURATA_SIZES


class TDKHandler(_SizeCodeHandler):
    key = "tdk"

    PATTERNS = {
        CT.CAPACITOR_CERAMIC_TDK: (
            r"C(?:0402|0603|1005|1608|2012|3216|3225|4532|5750)[A-Z0-9]{2}[A-Z0-9]+",
            r"CG[AJ][0-9][A-Z0-9]+",
        ),
        CT.INDUCTOR_TDK: (
            r"(?:VLS|VLF|SPM|NLV|MLZ|TFM)[0-9]{4}[A-Z0-9-]*",
        ),
        CT.FERRITE_BEAD: (
            r"MMZ[0-9]{4}[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = re.compile(r"((?:C|MLZ|MMZ)([0-9]{4}))")
    SIZE_CODES = METRIC_TO_INCH


class SamsungHandler(_SizeCodeHandler):
    key = "samsung"

    PATTERNS = {
        CT.CAPACITOR_CERAMIC_SAMSUNG: (
            r"CL(?:02|03|05|10|21|31|32|43|55)[A-Z][0-9]{3}[A-Z0-9]+",
        ),
        CT.INDUCTOR: (
            r"CIG[0-9]{2}[A-Z0-9]+",
        ),
        CT.FERRITE_BEAD: (
            r"CI[HM][0-9]{2}[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = re.compile(r"((?:CL|CI[GHM])([0-9]{2}))")
    SIZE_CODES = _SAMSUNG_SIZES


class AVXHandler(_SizeCodeHandler):
    key = "avx"

    PATTERNS = {
        CT.CAPACITOR: (
            r"(?:0201|0402|0603|0805|1206|1210|1812)[0-9A-Z]{2}[0-9]{3}[A-Z0-9]+",
            r"T[ACL]J[A-E][0-9]{3}[A-Z0-9]+",
        ),
    }
    SIZE_PATTERN = re.compile(r"(([0-9]{4}))[0-9A-Z]{2}[0-9]")


class NichiconHandler(ManufacturerHandler):
    key = "nichicon"

    PATTERNS = {
        CT.CAPACITOR: (
            r"U[A-Z]{2}[0-9][A-Z][0-9]{3}[A-Z0-9]+",
            r"PCS[0-9][A-Z][0-9]{3}[A-Z0-9]+",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        # Nichicon series are the three leading letters (UVR, UWT, UHE ...)
        return mpn[:3] if mpn else ""


# =============================================================================
# Frequency control
# =============================================================================

class EpsonHandler(ManufacturerHandler):
    key = "epson"

    PATTERNS = {
        CT.CRYSTAL_EPSON: (
            r"(?:FC|FA|MC|TSX)-[0-9]{3}[A-Z0-9 .-]*",
            r"Q13FC[0-9A-Z]+",
            r"X1E[0-9A-Z]+",
        ),
        CT.OSCILLATOR_EPSON: (
            r"SG-?[0-9]{3,4}[A-Z0-9 .-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        # FC-135 32.768KHZ -> FC-135
        return mpn.split(" ", 1)[0] if mpn else ""


class AbraconHandler(ManufacturerHandler):
    key = "abracon"

    PATTERNS = {
        CT.CRYSTAL_ABRACON: (
            r"AB(?:M[0-9]{1,2}[A-Z]?|LS|L|S[0-9]{2}|26T)-?[A-Z0-9.-]*",
        ),
        CT.OSCILLATOR: (
            r"AS(?:E|FL[0-9]|V|CO)-?[A-Z0-9.-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        return mpn.split("-", 1)[0] if mpn else ""


class NDKHandler(ManufacturerHandler):
    key = "ndk"

    PATTERNS = {
        CT.CRYSTAL: (
            r"NX[0-9]{4}[A-Z]{2}[A-Z0-9 .-]*",
        ),
        CT.OSCILLATOR: (
            r"NZ[0-9]{4}[A-Z]{2}[A-Z0-9 .-]*",
        ),
    }
