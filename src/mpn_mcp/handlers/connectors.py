"""Handlers for connector vendors.

Connector part numbers carry no package suffix; the series identifies the
connector family and the remaining digits mostly encode the pin count.
"""

import re

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

_MOLEX_PART = re.compile(r"0?((?:22|43|53|55|67|87|88)[0-9]{3})-?([0-9]{2})[0-9]{1,2}")
_TE_PART = re.compile(r"(?:[0-9]-)?([0-9]{6,7})-[0-9]")
_JST_PART = re.compile(r"(?:[BS]M?([0-9]{1,2})B-([A-Z]{2,4})|([A-Z]{2})R-([0-9]{1,2})|S([A-Z]{2})-)")
_HIROSE_SERIES = re.compile(r"DF[0-9]{1,2}|FH[0-9]{2}|BM[0-9]{2}|HR[0-9]{2}|FX[0-9]{1,2}|U\.FL|ZX62")


class _ConnectorHandler(ManufacturerHandler):
    def extract_package_code(self, mpn: str) -> str:
        return ""


class WurthHandler(_ConnectorHandler):
    key = "wurth"

    PATTERNS = {
        CT.CONNECTOR_WURTH: (
            r"6[1-5][0-9]{9,10}",
        ),
        CT.INDUCTOR: (
            r"74[4-9][0-9]{6,7}",
        ),
        CT.CAPACITOR: (
            r"8[5-8][0-9]{9,10}",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        # 61300211121: family code is the first four digits
        return mpn[:4] if mpn else ""


class MolexHandler(_ConnectorHandler):
    key = "molex"

    PATTERNS = {
        CT.CONNECTOR_MOLEX: (
            r"0?(?:22|43|53|55|67|87|88)[0-9]{3}-?[0-9]{3,4}",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        match = _MOLEX_PART.match(mpn) if mpn else None
        return match.group(1) if match else ""


class TEHandler(_ConnectorHandler):
    key = "te"

    PATTERNS = {
        CT.CONNECTOR_TE: (
            r"[0-9]-[0-9]{6,7}-[0-9]",
            r"[0-9]{6,7}-[0-9]",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        match = _TE_PART.match(mpn) if mpn else None
        return match.group(1) if match else ""


class JSTHandler(_ConnectorHandler):
    key = "jst"

    PATTERNS = {
        CT.CONNECTOR_JST: (
            r"[BS]M?[0-9]{1,2}B-[A-Z]{2,4}(?:-[A-Z0-9]+)*",
            r"(?:PH|XH|EH|ZH|SH|GH|PA|VH)R-[0-9]{1,2}[A-Z0-9-]*",
            r"S(?:PH|XH|EH)-[0-9]{3}[A-Z0-9-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        """Connector family: B4B-PH-K-S and PHR-4 are both 'PH'."""
        match = _JST_PART.match(mpn) if mpn else None
        if not match:
            return ""
        return match.group(2) or match.group(3) or match.group(5)


class HiroseHandler(_ConnectorHandler):
    key = "hirose"

    PATTERNS = {
        CT.CONNECTOR_HIROSE: (
            r"(?:DF|FH|BM|HR|FX)[0-9]{1,2}[A-Z]?-[A-Z0-9().-]+",
            r"U\.FL-[A-Z0-9-]+",
            r"ZX62[A-Z0-9-]+",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        match = _HIROSE_SERIES.match(mpn) if mpn else None
        return match.group(0) if match else ""
