"""Handlers for analog, mixed-signal and interface IC vendors."""

import re

from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

# =============================================================================
# Analog Devices (including Linear Technology)
# =============================================================================

_ADI_REEL = re.compile(r"-(?:REEL7?|R7|RL7?|TR(?:PBF)?|PBF)$")
_ADI_ORDERING = re.compile(r"[0-9]([A-Z]+)#?$")

# ADI suffix after the part number: grade letter, package letters, optional Z (RoHS)
_ADI_PACKAGES = {
    "R": "SOIC",
    "RM": "MSOP",
    "RU": "TSSOP",
    "RT": "SOT-23",
    "KS": "SC-70",
    "CP": "LFCSP",
    "N": "DIP",
}


class AnalogDevicesHandler(ManufacturerHandler):
    key = "adi"

    PATTERNS = {
        CT.OPAMP_ADI: (
            r"AD8[0-9]{3}[A-Z0-9-]*",
            r"ADA4[0-9]{3}[A-Z0-9-]*",
            r"OP[0-9]{2,4}[A-Z0-9-]*",
            r"LT6[0-9]{3}[A-Z0-9#-]*",
        ),
        CT.ACCELEROMETER_ADI: (
            r"ADXL[0-9]{3,4}[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"ADP[0-9]{3,4}[A-Z0-9.-]*",
            r"LT1[0-9]{3}[A-Z0-9#.-]*",
            r"LTC3[0-9]{3}[A-Z0-9#-]*",
            r"LTM[0-9]{4}[A-Z0-9#-]*",
        ),
        CT.INTERFACE_IC: (
            r"ADM[0-9]{3,4}[A-Z0-9-]*",
            r"ADUM[0-9]{4}[A-Z0-9-]*",
        ),
        CT.ANALOG_IC: (
            r"AD[0-9]{4}[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _ADI_ORDERING.search(_ADI_REEL.sub("", mpn))
        if not match:
            return ""
        letters = match.group(1).removesuffix("Z")
        # Drop the leading temperature grade letter (A/B/J/K/S)
        for candidate in (letters[1:], letters):
            if candidate in _ADI_PACKAGES:
                return _ADI_PACKAGES[candidate]
        return ""


# =============================================================================
# Maxim Integrated
# =============================================================================

# MAX232CPE: temperature grade, package letter, pin count letter
_MAXIM_ORDERING = re.compile(r"[0-9]([CEAM])([A-Z])([A-Z])\+?T?$")
_MAXIM_PACKAGES = {
    "P": "DIP",
    "S": "SOIC",
    "W": "SOIC-Wide",
    "U": "TSSOP",
    "E": "QSOP",
    "T": "TQFN",
    "G": "QFN",
}


class MaximHandler(ManufacturerHandler):
    key = "maxim"

    PATTERNS = {
        CT.TEMPERATURE_SENSOR_MAXIM: (
            r"DS18[BS]20[A-Z0-9+-]*",
            r"DS1621[A-Z0-9+-]*",
            r"MAX3185[0-9][A-Z0-9+-]*",
            r"MAX6675[A-Z0-9+-]*",
        ),
        CT.INTERFACE_IC_MAXIM: (
            r"MAX232[A-Z0-9+-]*",
            r"MAX3232[A-Z0-9+-]*",
            r"MAX3?485[A-Z0-9+-]*",
            r"MAX1487[A-Z0-9+-]*",
        ),
        CT.DIGITAL_IC: (
            r"DS13[0-9]{2}[A-Z0-9+-]*",
            r"DS32[0-9]{2}[A-Z0-9+-]*",
        ),
        CT.ANALOG_IC: (
            r"MAX[0-9]{3,5}[A-Z0-9+/-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        match = _MAXIM_ORDERING.search(mpn) if mpn else None
        return _MAXIM_PACKAGES.get(match.group(2), "") if match else ""


# =============================================================================
# Other analog / power vendors
# =============================================================================

class RohmHandler(ManufacturerHandler):
    key = "rohm"

    PATTERNS = {
        CT.RESISTOR: (
            r"(?:MCR|ESR|KTR|SFR|LTR)[0-9]{2}[A-Z0-9]*",
        ),
        CT.DIODE: (
            r"RB[0-9]{3}[A-Z0-9-]*",
            r"RSX[0-9]{3}[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"BD[0-9]{4,5}[A-Z0-9-]*",
            r"BU[0-9]{2}[A-Z0-9-]*",
        ),
        CT.LED: (
            r"SML-[0-9A-Z]+",
        ),
        CT.MOSFET: (
            r"RQ[0-9][A-Z0-9]+",
        ),
    }


class ToshibaHandler(ManufacturerHandler):
    key = "toshiba"

    PATTERNS = {
        CT.OPTOCOUPLER: (
            r"TLP[0-9]{3,4}[A-Z0-9()-]*",
        ),
        CT.MOTOR_DRIVER: (
            r"TB6[0-9]{3}[A-Z0-9-]*",
            r"TB67[A-Z0-9-]+",
        ),
        CT.TRANSISTOR: (
            r"2S[AC][0-9]{3,4}[A-Z0-9-]*",
        ),
        CT.MOSFET: (
            r"2SK[0-9]{3,4}[A-Z0-9-]*",
            r"SSM[0-9][A-Z0-9-]+",
            r"TK[0-9]{2,3}[A-Z0-9-]+",
        ),
        CT.LOGIC_IC: (
            r"TC74[A-Z0-9-]+",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"TCR[0-9][A-Z0-9-]+",
        ),
    }


# FT232RL: last letter is the package
_FTDI_PACKAGES = {"L": "SSOP", "Q": "QFN"}
_FTDI_PART = re.compile(r"FT[0-9]{3,4}[A-Z]?([LQ])(?:-[A-Z]+)?")


class FTDIHandler(ManufacturerHandler):
    key = "ftdi"

    PATTERNS = {
        CT.INTERFACE_IC: (
            r"FT[0-9]{3,4}[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        match = _FTDI_PART.fullmatch(mpn) if mpn else None
        return _FTDI_PACKAGES[match.group(1)] if match else ""


class TrinamicHandler(ManufacturerHandler):
    key = "trinamic"

    PATTERNS = {
        CT.MOTOR_DRIVER: (
            r"TMC[0-9]{4}[A-Z0-9-]*",
        ),
    }


class BroadcomHandler(ManufacturerHandler):
    key = "broadcom"

    PATTERNS = {
        CT.OPTOCOUPLER: (
            r"(?:HCPL|ACPL)-?[0-9A-Z]+",
        ),
        CT.LED: (
            r"HLMP-?[0-9A-Z]+",
            r"ASMT-?[0-9A-Z-]+",
        ),
        CT.SENSOR: (
            r"APDS-?[0-9]+[A-Z0-9-]*",
        ),
        CT.DIODE: (
            r"HSMS-?[0-9A-Z]+",
        ),
    }
