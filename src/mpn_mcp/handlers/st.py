"""STMicroelectronics handler."""

import re

from ..mpn import series_prefix
from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

_MCU = re.compile(r"STM(?:32|8)")
_MCU_SERIES = re.compile(r"STM32[A-Z][0-9]{3}|STM8[A-Z][0-9]{3}")
_MOSFET_SERIES = re.compile(r"ST[FPDBW][0-9]+[NP][A-Z]*[0-9]+")
_REGULATOR_SERIES = re.compile(r"L7[89][LM]?[0-9]{2}|LD1117|LDL1117|LD39[0-9]{3}")
_EEPROM_SERIES = re.compile(r"M(?:24C?|95)[0-9]{2,3}")
_REGULATOR_SUFFIX = re.compile(r"L7[89][LM]?[0-9]{2}(?:AB|AC|C)?([A-Z0-9]*)")

# STM32/STM8 ordering code: second-to-last character is the package
_MCU_PACKAGES = {
    "T": "LQFP",
    "H": "BGA",
    "U": "VFQFPN",
    "Y": "WLCSP",
    "P": "TSSOP",
}

_MOSFET_PACKAGES = {
    "STF": "TO-220FP",
    "STP": "TO-220",
    "STD": "DPAK",
    "STB": "D2PAK",
    "STW": "TO-247",
}

_REGULATOR_PACKAGES = {
    "V": "TO-220",
    "T": "TO-220",
    "P": "TO-220FP",
    "D2T": "D2PAK",
    "DT": "DPAK",
}


class STHandler(ManufacturerHandler):
    key = "st"

    PATTERNS = {
        CT.MICROCONTROLLER_ST: (
            r"STM32[A-Z][0-9A-Z]*",
            r"STM8[A-Z][0-9A-Z]*",
        ),
        CT.MOSFET_ST: (
            r"ST[FPDBW][0-9]+[NP][A-Z0-9]*",
            r"VN[0-9]{2,4}[A-Z0-9]*",
        ),
        CT.VOLTAGE_REGULATOR_LINEAR_ST: (
            r"L7[89][LM]?[0-9]{2}[A-Z0-9-]*",
            r"LDL?1117[A-Z0-9-]*",
            r"LD39[0-9]{3}[A-Z0-9-]*",
        ),
        CT.MEMORY_EEPROM_ST: (
            r"M24C?[0-9]{2,3}[A-Z0-9-]*",
            r"M95[0-9]{3}[A-Z0-9-]*",
        ),
        CT.ACCELEROMETER_ST: (
            r"LIS[23][A-Z0-9]+",
        ),
        CT.IMU: (
            r"LSM[0-9][A-Z0-9]+",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        if _MCU.match(mpn):
            if len(mpn) < 2:
                return ""
            return _MCU_PACKAGES.get(mpn[-2], "")
        prefix = mpn[:3]
        if prefix in _MOSFET_PACKAGES and _MOSFET_SERIES.match(mpn):
            return _MOSFET_PACKAGES[prefix]
        match = _REGULATOR_SUFFIX.match(mpn)
        if match:
            suffix = match.group(1)
            for code in ("D2T", "DT", "V", "P", "T"):
                if suffix.startswith(code):
                    return _REGULATOR_PACKAGES[code]
            return ""
        return super().extract_package_code(mpn)

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        for pattern in (_MCU_SERIES, _MOSFET_SERIES, _REGULATOR_SERIES, _EEPROM_SERIES):
            match = pattern.match(mpn)
            if match:
                return match.group(0)
        return series_prefix(mpn)
