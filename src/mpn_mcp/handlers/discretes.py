"""Handlers for discrete semiconductor vendors (MOSFETs, diodes, transistors)."""

import re

from ..mpn import series_prefix
from ..taxonomy import ComponentType as CT
from .base import ManufacturerHandler

# =============================================================================
# Infineon (including International Rectifier)
# =============================================================================

_LEAD_FREE = re.compile(r"(?:TR[LR]?)?PBF$")
_IR_PART = re.compile(r"IR[FL]([RUB]?)(Z?[0-9]+)(N?)([A-Z]*)")


class InfineonHandler(ManufacturerHandler):
    key = "infineon"

    PATTERNS = {
        CT.MOSFET_INFINEON: (
            r"IR[FL][A-Z]?[0-9]{2,4}[A-Z0-9]*",
            r"IP[DPB][0-9]{3}N[0-9A-Z]*",
            r"BS[CZSD][0-9]{2,4}[A-Z0-9-]*",
        ),
        CT.MICROCONTROLLER_INFINEON: (
            r"XMC[14][0-9]{3}[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"IFX[0-9]{4,5}[A-Z0-9-]*",
            r"TLE42[0-9]{2}[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _IR_PART.fullmatch(_LEAD_FREE.sub("", mpn))
        if not match:
            return super().extract_package_code(mpn)
        outline, _, _, suffix = match.groups()
        if outline == "R":
            return "DPAK"
        if outline == "U":
            return "TO-251"
        if suffix.startswith("S"):
            return "D2PAK"
        if suffix.startswith("L"):
            return "TO-262"
        return "TO-220"

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _IR_PART.fullmatch(_LEAD_FREE.sub("", mpn))
        if match:
            outline, number, generation, _ = match.groups()
            return f"{mpn[:3]}{outline}{number}{generation}"
        return series_prefix(mpn)


# =============================================================================
# Vishay
# =============================================================================

_CHIP_RESISTOR = re.compile(r"(CRCW|TNPW)([0-9]{4})")


class VishayHandler(ManufacturerHandler):
    key = "vishay"

    PATTERNS = {
        CT.RESISTOR_CHIP_VISHAY: (
            r"CRCW[0-9]{4}[A-Z0-9]*",
            r"TNPW[0-9]{4}[A-Z0-9]*",
        ),
        CT.DIODE_VISHAY: (
            r"1N4[0-9]{3}[A-Z0-9-]*",
            r"1N5[0-9]{3}[A-Z0-9-]*",
            r"1N914[A-Z0-9-]*",
            r"BA[VST][0-9]{2,3}[A-Z0-9-]*",
            r"BZX[0-9]{2}[A-Z0-9-]*",
            r"SS[0-9]{2,3}[A-Z0-9-]*",
        ),
        CT.MOSFET_VISHAY: (
            r"SI[0-9]{4}[A-Z0-9-]*",
            r"SI[RSA][0-9]{3,4}[A-Z0-9-]*",
            r"IRF[0-9]{3}[A-Z0-9]*",
        ),
        CT.OPTOCOUPLER: (
            r"VO[0-9]{3,4}[A-Z0-9-]*",
        ),
    }

    def extract_package_code(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _CHIP_RESISTOR.match(mpn)
        if match:
            return match.group(2)
        return super().extract_package_code(mpn)

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _CHIP_RESISTOR.match(mpn)
        if match:
            return match.group(0)
        return series_prefix(mpn)


# =============================================================================
# onsemi (including Fairchild)
# =============================================================================

class OnsemiHandler(ManufacturerHandler):
    key = "onsemi"

    PATTERNS = {
        CT.VOLTAGE_REGULATOR_LINEAR_ON: (
            r"MC7[89][LM]?[0-9]{2}[A-Z0-9-]*",
            r"KA7[89][0-9]{2}[A-Z0-9-]*",
            r"NCP1117[A-Z0-9-]*",
            r"MC33269[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"MC34063[A-Z0-9-]*",
            r"NCP3[0-9]{3}[A-Z0-9-]*",
        ),
        CT.MOSFET_ON: (
            r"NT[DABRS][0-9]{4}[A-Z0-9-]*",
            r"FQ[PDN][0-9]{1,3}N[0-9]{2}[A-Z0-9]*",
            r"FD[SNV][0-9]{3,4}[A-Z0-9]*",
            r"2N700[02][A-Z0-9]*",
        ),
        CT.TRANSISTOR_ON: (
            r"2N[0-9]{4}[A-Z0-9]*",
            r"MMBT[0-9]{4}[A-Z0-9]*",
            r"PN[0-9]{4}[A-Z0-9]*",
            r"MJE[0-9]{3,5}[A-Z0-9]*",
            r"TIP[0-9]{2,3}[A-Z0-9]*",
        ),
        CT.DIODE_ON: (
            r"1N47[0-9]{2}[A-Z0-9-]*",
            r"1N400[1-7][A-Z0-9-]*",
            r"1N4148[A-Z0-9-]*",
            r"MUR[0-9]{3,4}[A-Z0-9-]*",
            r"MBR[0-9]{2,5}[A-Z0-9-]*",
        ),
        CT.LOGIC_IC_ON: (
            r"MC74[A-Z]*[0-9]{2,4}[A-Z0-9-]*",
            r"MC14[0-9]{3}[A-Z0-9-]*",
        ),
        CT.MEMORY_EEPROM: (
            r"CAT24C[0-9]+[A-Z0-9-]*",
            r"CAT25[0-9]+[A-Z0-9-]*",
        ),
        CT.OPAMP: (
            r"NCS[0-9]{4}[A-Z0-9-]*",
        ),
    }


# =============================================================================
# Smaller discrete vendors
# =============================================================================

class DiodesIncHandler(ManufacturerHandler):
    key = "diodes_inc"

    PATTERNS = {
        CT.DIODE_DIODES_INC: (
            r"BZT52[A-Z0-9-]*",
            r"SBR[0-9][A-Z0-9-]*",
            r"SDM[0-9][A-Z0-9-]*",
            r"1N4148W[A-Z0-9-]*",
        ),
        CT.MOSFET_DIODES_INC: (
            r"DM[NPG][0-9]{4}[A-Z0-9-]*",
            r"ZXM[0-9A-Z]+",
        ),
        CT.TRANSISTOR: (
            r"ZXT[0-9A-Z]+",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"AP2[0-9]{3}[A-Z0-9-]*",
            r"AP7[0-9]{3}[A-Z0-9-]*",
            r"AZ1117[A-Z0-9.-]*",
        ),
    }


_LOGIC_SERIES = re.compile(r"74[A-Z]*[0-9]+")  # 74HC00D -> 74HC00


class NexperiaHandler(ManufacturerHandler):
    key = "nexperia"

    PATTERNS = {
        CT.TRANSISTOR_NEXPERIA: (
            r"BC[0-9]{3}[A-Z0-9-]*",
            r"BC[XP][0-9]{2,3}[A-Z0-9-]*",
            r"PBSS[0-9][A-Z0-9-]*",
            r"PMBT[0-9]{4}[A-Z0-9-]*",
        ),
        CT.MOSFET_NEXPERIA: (
            r"PMV[0-9]{2,3}[A-Z0-9-]*",
            r"PSMN[0-9][A-Z0-9-]*",
            r"BUK[0-9][A-Z0-9-]*",
        ),
        CT.LOGIC_IC_NEXPERIA: (
            r"74(?:HC|HCT|LVC|AHC|AHCT|LV|AUP|ALVC|LVT|LS|ALS|F|AC|ACT)[0-9]{2,4}[A-Z0-9-]*",
            r"74(?:LVC|AHC|AUP)[12]G[0-9]{2,3}[A-Z0-9-]*",
        ),
        CT.DIODE: (
            r"PMEG[0-9][A-Z0-9-]*",
        ),
        CT.TVS_DIODE: (
            r"PESD[0-9][A-Z0-9-]*",
        ),
    }

    def extract_series(self, mpn: str) -> str:
        if not mpn:
            return ""
        match = _LOGIC_SERIES.match(mpn)
        if match:
            return match.group(0)
        return series_prefix(mpn)


class AlphaOmegaHandler(ManufacturerHandler):
    key = "alpha_omega"

    PATTERNS = {
        CT.MOSFET: (
            r"AO[NDI]?[0-9]{3,4}[A-Z0-9-]*",
        ),
        CT.VOLTAGE_REGULATOR: (
            r"AOZ[0-9]{4}[A-Z0-9-]*",
        ),
    }


class LittelfuseHandler(ManufacturerHandler):
    key = "littelfuse"

    PATTERNS = {
        CT.TVS_DIODE: (
            r"SM[ABC]J[0-9]+[A-Z]*",
            r"P[46]KE[0-9]+[A-Z]*",
            r"1\.5KE[0-9]+[A-Z]*",
        ),
        CT.FUSE: (
            r"0[0-9]{6}\.[A-Z]+",
        ),
    }
