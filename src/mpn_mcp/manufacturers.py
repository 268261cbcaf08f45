"""Manufacturer catalog entries.

Each entry pairs a manufacturer with its coarse MPN prefix regex and its handler
class. The order of MANUFACTURER_DEFINITIONS is significant: the resolver walks it
front to back for prefix and full-pattern detection, and earlier entries win.

Prefixes are matched at the start of the canonical (upper-cased) MPN.
"""

import re
from dataclasses import dataclass, field

from . import handlers as h
from .handlers import ManufacturerHandler


@dataclass(frozen=True)
class Manufacturer:
    key: str
    name: str
    prefix: re.Pattern[str] | None = field(default=None, compare=False, repr=False)
    handler: ManufacturerHandler | None = field(default=None, compare=False, repr=False)

    @property
    def is_known(self) -> bool:
        return self.handler is not None

    def to_dict(self) -> dict:
        return {"key": self.key, "name": self.name}


UNKNOWN_MANUFACTURER = Manufacturer(key="unknown", name="Unknown")


# (key, display name, coarse prefix regex, handler class)
MANUFACTURER_DEFINITIONS: tuple[tuple[str, str, str, type[ManufacturerHandler]], ...] = (
    # Microcontrollers and broad-line semiconductor vendors
    ("microchip", "Microchip Technology",
     r"(?:PIC|DSPIC|MCP|24AA|24LC|24FC|25AA|25LC|93AA|93LC|93C)", h.MicrochipHandler),
    ("st", "STMicroelectronics",
     r"(?:STM32|STM8|ST[FPDBW][0-9]|L7[89]|LD1117|LDL1117|LD39|M24|M95|LIS[23]|LSM[0-9]|VN[0-9]|VNH|VIPER)",
     h.STHandler),
    ("atmel", "Atmel",
     r"(?:ATMEGA|ATTINY|ATXMEGA|AT90|ATSAM|AT24|AT25|AT45|AT93)", h.AtmelHandler),
    ("ti", "Texas Instruments",
     r"(?:TPS|TMS|TLV|TLC|TL[0-9]|LM|SN[0-9]|MSP43|CC[0-9]{4}|CD4|CD74|UA7|OPA|INA|TMP[0-9]|REF[0-9]"
     r"|TM4C|NE5|ADS[0-9]|DAC[0-9])",
     h.TIHandler),
    ("renesas", "Renesas Electronics",
     r"(?:R5F|R7F|RL78|UPD|ISL|HD64|RX[0-9]{3}|RA[0-9]M)", h.RenesasHandler),
    ("nxp", "NXP Semiconductors",
     r"(?:NXP|LPC|MK[0-9]{2}|MIMX|IMX|S32K|KE[0-9]{2}|PCA[0-9]|PCF[0-9]|TJA)", h.NXPHandler),
    ("cypress", "Cypress Semiconductor",
     r"(?:CY[0-9]|CY8C|CYW|FM25|S25FL)", h.CypressHandler),
    ("silabs", "Silicon Labs",
     r"(?:EFM|EFR|BGM|EM35|CP21)", h.SiliconLabsHandler),
    ("espressif", "Espressif Systems",
     r"(?:ESP[0-9]|ESP-)", h.EspressifHandler),
    ("nuvoton", "Nuvoton Technology",
     r"(?:NUC[0-9]|N76|MS51|M0[0-9]{2}[A-Z])", h.NuvotonHandler),
    ("wch", "WCH (Jiangsu Qin Heng)",
     r"(?:CH32|CH34|CH55)", h.WCHHandler),
    ("gigadevice", "GigaDevice",
     r"(?:GD32|GD25)", h.GigaDeviceHandler),
    ("artery", "Artery Technology",
     r"AT32", h.ArteryHandler),
    ("holtek", "Holtek Semiconductor",
     r"(?:HT6[678]|HT7[0-9])", h.HoltekHandler),
    # Discretes and power
    ("alpha_omega", "Alpha & Omega Semiconductor",
     r"(?:AO[0-9]|AON|AOD|AOI|AOZ)", h.AlphaOmegaHandler),
    ("infineon", "Infineon Technologies",
     r"(?:IFX|IR[FLGS]|TLE|XMC|ICE|IP[DPB][0-9]|BSC|BSZ|BSS|BSD|BTS|BTT)", h.InfineonHandler),
    ("vishay", "Vishay Intertechnology",
     r"(?:VS|SI[0-9]|SI[RSA][0-9]|CRCW|TNPW|1N[0-9]|BA[VST][0-9]|BZX|BYV|SS[0-9]|TSOP|VEML|VO[0-9])",
     h.VishayHandler),
    ("onsemi", "onsemi",
     r"(?:ON|MC(?!-)|NCP|NCV|NCS|FAN|CAT|MUR|NTD|NTA|NTB|NTR|NTS|FQP|FQD|FQN|FDS|FDN|FDV|MMBT|MBR|KA7"
     r"|NSR|MJE|2N[0-9]|PN[0-9])",
     h.OnsemiHandler),
    ("adi", "Analog Devices",
     r"(?:ADP|ADM|ADG|ADA|ADUM|ADXL|AD[0-9]|LT[0-9]|LTC|LTM|HMC|OP[0-9])", h.AnalogDevicesHandler),
    ("maxim", "Maxim Integrated",
     r"(?:MAX|DS[0-9]|ICL|DG[0-9])", h.MaximHandler),
    ("diodes_inc", "Diodes Incorporated",
     r"(?:AP[0-9]|AZ1|DMN|DMP|DMG|ZXM|ZXT|SBR|SDM|PAM)", h.DiodesIncHandler),
    ("rohm", "ROHM Semiconductor",
     r"(?:BD[0-9]|BU[0-9]|BA[0-9]{4}|RB[0-9]|MCR|ESR|KTR|SML|RSX|RQ[0-9])", h.RohmHandler),
    ("toshiba", "Toshiba",
     r"(?:TC[0-9]|TB[0-9]|TLP|TK[0-9]|SSM|2SC|2SA|2SK|TPH|TCR)", h.ToshibaHandler),
    ("nexperia", "Nexperia",
     r"(?:PMV|PMN|PSMN|BUK|BC[0-9]{3}|BCX|BCP|PBSS|PMBT|PMEG|PESD"
     r"|74(?:HC|HCT|LVC|AHC|AHCT|LV|AUP|ALVC|LVT))",
     h.NexperiaHandler),
    ("broadcom", "Broadcom",
     r"(?:AFBR|HCPL|ACPL|HSMS|HLMP|ASMT|APDS)", h.BroadcomHandler),
    # Passives
    ("yageo", "YAGEO",
     r"(?:RC[0-9]|RT[0-9]|RL(?!20[1-7])[0-9]|CC[0-9]|AC[0-9])", h.YageoHandler),
    ("panasonic", "Panasonic",
     r"(?:ERJ|ERA|ECQ|EEF|ECA|EEE|EEU|EVQ|EXB|ELL)", h.PanasonicHandler),
    ("bourns", "Bourns",
     r"(?:CR[0-9]|CRM|SRR|SRN|SRU|SDR|PEC|PTV|3296|3362)", h.BournsHandler),
    ("kemet", "KEMET",
     r"(?:C(?:0201|0402|0603|0805|1206|1210|1812|2220)C|T4[0-9]{2}|T52[0-9]|ESK|PHE)", h.KemetHandler),
    ("murata", "Murata Electronics",
     r"(?:GRM|GCM|GJM|GRT|KCA|KC[ABMZ]|LLL|NFM|DLW|BLM|LQM|LQW|LQG|LQH)", h.MurataHandler),
    ("tdk", "TDK Corporation",
     r"(?:C(?:0402|0603|1005|1608|2012|3216|3225|4532|5750)[A-Z]|CGA|CGJ|MLZ|MMZ|VLS|VLF|SPM|NLV|ACM|TFM)",
     h.TDKHandler),
    ("samsung", "Samsung Electro-Mechanics",
     r"(?:CL(?:02|03|05|10|21|31|32|43|55)[A-Z]|CIG|CIH|CIM)", h.SamsungHandler),
    ("avx", "KYOCERA AVX",
     r"(?:TAJ|TCJ|TLJ|(?:0201|0402|0603|0805|1206|1210|1812)[A-Z0-9]{2}[0-9])", h.AVXHandler),
    ("nichicon", "Nichicon",
     r"(?:UVR|UVZ|UWT|UWX|UPW|UPM|UHE|UKL|UUD|UCD|PCS)", h.NichiconHandler),
    # Connectors
    ("wurth", "Wurth Elektronik",
     r"(?:6[1-5][0-9]{9,10}|74[4-9][0-9]{6,7}|8[5-8][0-9]{9,10})", h.WurthHandler),
    ("molex", "Molex",
     r"0?(?:22|43|53|55|67|87|88)[0-9]{3}-?[0-9]{3,4}", h.MolexHandler),
    ("te", "TE Connectivity",
     r"(?:[1-9]-[0-9]{6,7}-[0-9]|[0-9]{6,7}-[0-9])", h.TEHandler),
    ("jst", "JST",
     r"(?:[BS]M?[0-9]{1,2}B-|(?:PH|XH|EH|ZH|SH|GH|PA|VH)R-|S(?:PH|XH|EH)-)", h.JSTHandler),
    ("hirose", "Hirose Electric",
     r"(?:DF[0-9]{1,2}|FH[0-9]{2}|BM[0-9]{2}|HR[0-9]{2}|FX[0-9]{1,2}|U\.FL|ZX62)", h.HiroseHandler),
    # LEDs
    ("cree", "Cree LED",
     r"(?:X[PMHQBL][A-Z]{1,2}[0-9A-Z]|CL[VMX][0-9]|C5[0-9]{2}[A-Z]-|MLE[A-Z])", h.CreeHandler),
    ("osram", "ams OSRAM",
     r"(?:L[CU]?[RSYWGBTA] [A-Z]|[KG]W [A-Z]|SFH ?[0-9])", h.OsramHandler),
    ("lumileds", "Lumileds",
     r"(?:LXML|LXZ|LXH|L1T2|L13[05]-|LUXEON)", h.LumiledsHandler),
    ("kingbright", "Kingbright",
     r"(?:KP-|KA-|KM-|L-[0-9]|AP(?:T|HB|HD|DA|KF)[0-9]|WP[0-9]|AA3528)", h.KingbrightHandler),
    # Sensors
    ("allegro", "Allegro MicroSystems",
     r"(?:A[1-5][0-9]{3}|ACS[0-9]|ATS[0-9]|APS[0-9])", h.AllegroHandler),
    ("bosch", "Bosch Sensortec",
     r"(?:BME|BMP|BMA|BMI|BMG|BMM|BNO|BMX|BHI)", h.BoschHandler),
    ("melexis", "Melexis",
     r"MLX", h.MelexisHandler),
    ("invensense", "TDK InvenSense",
     r"(?:MPU|ICM|IAM|ITG|IXZ)", h.InvenSenseHandler),
    # Memory
    ("micron", "Micron Technology",
     r"(?:MT[0-9]{2}|MT25|N25Q|M25P)", h.MicronHandler),
    ("winbond", "Winbond Electronics",
     r"(?:W25[QXN]|W29|W9[0-9]{2}|W[0-9]{2}[A-Z])", h.WinbondHandler),
    ("issi", "ISSI",
     r"IS[0-9]{2}", h.ISSIHandler),
    # Everything else
    ("nordic", "Nordic Semiconductor",
     r"NRF", h.NordicHandler),
    ("epson", "Seiko Epson",
     r"(?:FC-|FA-|TSX-|MC-[0-9]|SG-|SG[0-9]{4}|Q13|X1E)", h.EpsonHandler),
    ("ndk", "NDK",
     r"(?:NX[0-9]{4}|NZ[0-9]{4})", h.NDKHandler),
    ("abracon", "Abracon",
     r"(?:ABM[0-9]|ABLS|ABL-|ABS[0-9]|AB26|ASE-|ASFL|ASV|ASCO)", h.AbraconHandler),
    ("trinamic", "Trinamic",
     r"TMC[0-9]", h.TrinamicHandler),
    ("littelfuse", "Littelfuse",
     r"(?:SM[ABC]J|P[46]KE|1\.5KE|LSIC|0[0-9]{6}\.)", h.LittelfuseHandler),
    ("ftdi", "FTDI",
     r"(?:FT[0-9]|VNC)", h.FTDIHandler),
    ("sensirion", "Sensirion",
     r"(?:SHT|STS|SGP|SCD|SDP|SFM|SPS[0-9])", h.SensirionHandler),
    ("macronix", "Macronix",
     r"MX(?:25|29|30|66)[A-Z]", h.MacronixHandler),
    ("akm", "Asahi Kasei Microdevices",
     r"AK[0-9]{4}", h.AKMHandler),
)
