"""Linear voltage regulator similarity.

Parts are reduced to (kind, polarity, output voltage, current class). A mismatch
in any of the first three makes the parts non-interchangeable; the rest is a
weighted blend of current class and package.
"""

import re
from dataclasses import dataclass

from ..mpn import series_prefix
from ..resolver import extract_package_code
from ..taxonomy import ComponentType
from .base import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, SimilarityCalculator, packages_match

# 78xx / 79xx fixed regulators from any second source: L7805, LM7805, MC78L05, KA7912
_FIXED = re.compile(r"(?:LM|L|KA|MC|UA|NCV|AN)?(78|79)(L|M)?([0-9]{2})")
_ADJUSTABLE = re.compile(r"(?:LM|LT)(317|337|338|350)")
# Fixed output either after a hyphen (AMS1117-3.3, AMS1117-33) or inline after the
# package letters (LD1117S33TR, NCP1117ST50T3G)
_LDO_1117 = re.compile(
    r"(?:LM|LD|LDL|AMS|AZ|NCP|TLV)1117"
    r"(?:[A-Z]{1,2}(12|15|18|25|28|33|50|ADJ)|[A-Z]*-([0-9]\.[0-9]|[0-9]{2}|ADJ))?"
)

# 78L = 100 mA, 78M = 500 mA, plain 78 = 1.5 A
_FIXED_CURRENT_MA = {"L": 100, "M": 500, "": 1500}

_ADJUSTABLE_PARTS = {
    "317": (1, 1500),
    "337": (-1, 1500),
    "338": (1, 5000),
    "350": (1, 3000),
}

# Relative weights of the blended comparison
_WEIGHT_CRITICAL = 1.0
_WEIGHT_CURRENT = 0.7
_WEIGHT_PACKAGE = 0.4


@dataclass(frozen=True)
class RegulatorSpec:
    kind: str  # "fixed", "adjustable", "ldo" or "ldo_adjustable"
    polarity: int
    voltage: float | None
    current_ma: int


def parse_regulator(mpn: str) -> RegulatorSpec | None:
    """Regulator characteristics from the part number, or None if not recognised.

    'LM7805CT' -> fixed, +5 V, 1500 mA
    'MC79L12'  -> fixed, -12 V, 100 mA
    'LM317T'   -> adjustable, +, 1500 mA
    'AMS1117-3.3' -> ldo, +3.3 V, 800 mA
    'LD1117S33TR' -> ldo, +3.3 V, 800 mA
    'LD1117-ADJ'  -> ldo_adjustable, +, 800 mA
    """
    match = _FIXED.match(mpn)
    if match:
        polarity = 1 if match.group(1) == "78" else -1
        current = _FIXED_CURRENT_MA[match.group(2) or ""]
        return RegulatorSpec("fixed", polarity, float(int(match.group(3))), current)

    match = _ADJUSTABLE.match(mpn)
    if match:
        polarity, current = _ADJUSTABLE_PARTS[match.group(1)]
        return RegulatorSpec("adjustable", polarity, None, current)

    match = _LDO_1117.match(mpn)
    if match:
        code = match.group(1) or match.group(2)
        if code == "ADJ":
            return RegulatorSpec("ldo_adjustable", 1, None, 800)
        if code is None:
            voltage = None
        elif "." in code:
            voltage = float(code)
        else:
            # "33" / "50" style: tenths of a volt
            voltage = int(code) / 10
        return RegulatorSpec("ldo", 1, voltage, 800)

    return None


class VoltageRegulatorCalculator(SimilarityCalculator):
    name = "voltage_regulator"
    FAMILIES = frozenset({ComponentType.VOLTAGE_REGULATOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        spec1 = parse_regulator(mpn1)
        spec2 = parse_regulator(mpn2)
        if spec1 is None or spec2 is None:
            # Switchers and vendor-specific LDOs: only the series says anything
            if spec1 is None and spec2 is None and series_prefix(mpn1) == series_prefix(mpn2):
                return MEDIUM_SIMILARITY
            return 0.0

        if spec1.kind != spec2.kind or spec1.polarity != spec2.polarity:
            return LOW_SIMILARITY
        if spec1.kind == "ldo" and spec1.voltage is None and spec2.voltage is None:
            # Output voltage not encoded in either part number
            return MEDIUM_SIMILARITY
        if spec1.voltage != spec2.voltage:
            return LOW_SIMILARITY

        same_current = spec1.current_ma == spec2.current_ma
        same_package = packages_match(extract_package_code(mpn1), extract_package_code(mpn2))
        if same_current and same_package:
            return HIGH_SIMILARITY

        score = (
            _WEIGHT_CRITICAL
            + _WEIGHT_CURRENT * (1.0 if same_current else 0.5)
            + _WEIGHT_PACKAGE * (1.0 if same_package else 0.0)
        )
        return HIGH_SIMILARITY * score / (_WEIGHT_CRITICAL + _WEIGHT_CURRENT + _WEIGHT_PACKAGE)
