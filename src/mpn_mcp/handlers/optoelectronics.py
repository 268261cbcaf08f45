"""Handlers for LED vendors."""

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler


class _LEDHandler(ManufacturerHandler):
    def extract_series(self, mpn: str) -> str:
        """LED series is everything before the first bin/option separator."""
        return mpn.split("-", 1)[0] if mpn else ""


class CreeHandler(_LEDHandler):
    key = "cree"

    PATTERNS = {
        CT.LED_CREE: (
            r"X[PMHQBL][A-Z][A-Z0-9]{1,4}-[A-Z0-9-]+",
            r"CL[VMX][0-9][A-Z0-9-]+",
            r"C5[0-9]{2}[A-Z]-[A-Z0-9-]+",
            r"MLE[A-Z]{3}-[A-Z0-9-]+",
        ),
    }


class OsramHandler(_LEDHandler):
    key = "osram"

    PATTERNS = {
        CT.LED_OSRAM: (
            r"L[CU]?[RSYWGBTA] [A-Z][0-9A-Z]{2,4}(?:-[A-Z0-9-]+)?",
            r"[KG]W [A-Z0-9]{3,6}(?:\.[A-Z0-9]+)?(?:-[A-Z0-9-]+)?",
        ),
        CT.LED: (
            r"SFH ?[0-9]{3,4}[A-Z0-9-]*",
        ),
    }


class LumiledsHandler(_LEDHandler):
    key = "lumileds"

    PATTERNS = {
        CT.LED: (
            r"L(?:XML|XZ[0-9]|XH[0-9]|1T2|13[05])-[A-Z0-9-]+",
        ),
    }


class KingbrightHandler(ManufacturerHandler):
    key = "kingbright"

    PATTERNS = {
        CT.LED_KINGBRIGHT: (
            r"(?:KP|KA|KM|L)-[0-9]{3,4}[A-Z0-9-]*",
            r"AP(?:T|HB|HD|DA|KF)[0-9]{4}[A-Z0-9-]*",
            r"WP[0-9]{3,4}[A-Z0-9-]*",
            r"AA3528[A-Z0-9-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        # APT2012SGC -> APT2012, KP-2012SGC -> KP-2012
        if not mpn:
            return ""
        head, sep, tail = mpn.partition("-")
        if sep and len(head) <= 2:
            return f"{head}-{super().extract_series(tail)}"
        return super().extract_series(mpn)
