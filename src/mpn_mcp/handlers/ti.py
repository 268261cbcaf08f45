"""Texas Instruments handler."""

import re

from ..mpn import hyphen_suffix, series_prefix, trailing_letters
from ..packages import PACKAGE_CODES
from ..patterns import PatternRegistry
from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

# 78xx/79xx fixed regulators are never anything else, even though the generic
# LM/UA op-amp numbering also matches them.
_FIXED_REGULATOR = re.compile(r"(?:LM|UA)7[89][LM]?[0-9]{2}.*")
_REGULATOR_FAMILIES = re.compile(r"(?:LM|UA)7[89][LM]?[0-9]{2}|LM3(?:17|37|38|50)|LM1117|LM1085|TLV1117")
_VOLTAGE_OPTION = re.compile(r"-(?:[0-9]+\.[0-9]+|[0-9]+|ADJ)$")
_LOGIC_SERIES = re.compile(r"(?:SN74|SN54|CD74)[A-Z]*[0-9]+|CD4[0-9]{3}")

_REGULATOR_TYPES = frozenset({CT.VOLTAGE_REGULATOR_LINEAR_TI, CT.VOLTAGE_REGULATOR})

# TI's regulator suffixes differ from the op-amp ones ("DT" is SOT-223 here)
_REGULATOR_PACKAGES = {
    "CT": "TO-220",
    "T": "TO-220",
    "DT": "SOT-223",
    "MP": "SOT-223",
    "KC": "TO-252",
    "KV": "TO-252",
    "K": "TO-3",
    "S": "D2PAK",
    "H": "TO-39",
}

_TI_PACKAGES = {
    **PACKAGE_CODES,
    "Z": "TO-92",
    "LP": "TO-92",
    "DBZ": "SOT-23",
    "DCK": "SC-70",
}


class TIHandler(ManufacturerHandler):
    key = "ti"

    PATTERNS = {
        CT.OPAMP_TI: (
            r"(?:LM|TL|NE|SE|SA)[0-9]{3}[A-Z0-9-]*",
            r"(?:OPA|TLV|TLC)[0-9]{3,4}[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR_LINEAR_TI: (
            r"(?:LM|UA)7[89][LM]?[0-9]{2}.*",
            r"LM3(?:17|37|38|50).*",
            r"LM1117.*",
            r"LM1085.*",
            r"TLV1117.*",
            r"TLV7[0-9]{2,4}.*",
            r"TPS7[0-9A-Z]{2,5}.*",
        ),
        CT.VOLTAGE_REGULATOR_SWITCHING_TI: (
            r"LM25[0-9]{2}.*",
            r"LM26[0-9]{2}.*",
            r"TPS5[0-9]{4}.*",
            r"TPS6[0-9]{4,5}.*",
        ),
        CT.VOLTAGE_REFERENCE_TI: (
            r"TL43[12].*",
            r"LM4040.*",
            r"LM385.*",
            r"REF[0-9]{4}.*",
        ),
        CT.TEMPERATURE_SENSOR_TI: (
            r"LM35[A-Z0-9-]*",
            r"TMP[0-9]{2,3}.*",
        ),
        CT.MICROCONTROLLER_TI: (
            r"MSP43[02].*",
            r"TMS320.*",
            r"TM4C.*",
            r"CC[0-9]{4}.*",
        ),
        CT.LOGIC_IC_TI: (
            r"SN74[A-Z]*[0-9]{2,4}.*",
            r"SN54[A-Z]*[0-9]{2,4}.*",
            r"CD4[0-9]{3}.*",
            r"CD74[A-Z]*[0-9]{2,4}.*",
        ),
        CT.ANALOG_IC: (
            r"ADS[0-9]{4}.*",
            r"DAC[0-9]{4}.*",
            r"INA[0-9]{3}.*",
        ),
    }

    def matches(self, mpn: str, component_type: CT, registry: PatternRegistry) -> bool:
        if _FIXED_REGULATOR.fullmatch(mpn):
            return component_type in _REGULATOR_TYPES
        return super().matches(mpn, component_type, registry)

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        value = _VOLTAGE_OPTION.sub("", mpn)
        suffix = hyphen_suffix(value)
        letters = suffix if suffix.isalpha() else trailing_letters(value)
        if not letters:
            return ""

        table = _REGULATOR_PACKAGES if _REGULATOR_FAMILIES.match(value) else _TI_PACKAGES
        # Try the whole suffix, then without a leading grade letter (TL072CP -> P)
        for candidate in (letters, letters[1:]):
            if candidate in table:
                return table[candidate]
        return ""

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        for pattern in (_REGULATOR_FAMILIES, _LOGIC_SERIES):
            match = pattern.match(mpn)
            if match:
                return match.group(0)
        return series_prefix(mpn)
