"""Package code lookup for MPN ordering suffixes.

Vendors append a short code for the package ("N" = DIP, "D" = SOIC, "PW" = TSSOP,
"AU" = TQFP on AVRs ...). This module maps those codes to package names and knows
which packages can stand in for each other on a replacement check.
"""

# Suffix code -> package name. Codes shared by several vendors resolve to the most
# common meaning.
PACKAGE_CODES: dict[str, str] = {
    # Dual in-line
    "N": "DIP",
    "P": "DIP",
    "PU": "PDIP",
    # Small outline
    "D": "SOIC",
    "M": "SOIC",
    "R": "SOIC",
    "DR": "SOIC",
    "SU": "SOIC",
    "SN": "SOIC",
    "DW": "SOIC-Wide",
    "PW": "TSSOP",
    "DT": "TSSOP",
    "PT": "TSSOP",
    "XU": "TSSOP",
    "DGK": "MSOP",
    # Quad flat / chip scale (Atmel/Microchip AVR suffixes)
    "AU": "TQFP",
    "MU": "QFN",
    "CU": "WLCSP",
    # SOT
    "DBV": "SOT-23",
    "MP": "SOT-223",
    "U": "SOT-223",
    "DRL": "SOT-553",
    "DRV": "SON",
    # TO / power
    "T": "TO-220",
    "T3": "TO-220",
    "CT": "TO-220",
    "TA": "TO-220F",
    "FP": "TO-220F",
    "K": "TO-3",
    "H": "TO-39",
    "KC": "TO-252",
    "KV": "TO-252",
    "TU": "TO-251",
    "F": "TO-251",
    "S": "D2PAK",
    "L": "DPAK",
    # Diode outlines
    "RL": "DO-41",
    "G": "DO-35",
    # Generic mounting markers
    "SMD": "SMD",
    "THT": "THT",
}

POWER_PACKAGES = frozenset({
    "TO-220", "TO-220F", "TO-220FP", "TO-252", "TO-247", "TO-263",
    "D2PAK", "DPAK", "SOT-223",
})

THROUGH_HOLE_PACKAGES = frozenset({
    "DIP", "PDIP", "TO-220", "TO-220F", "TO-220FP", "TO-3", "TO-39", "TO-92", "TO-247",
    "DO-41", "DO-35", "THT",
})

SMD_PACKAGES = frozenset({
    "SOIC", "SOIC-WIDE", "TSSOP", "MSOP", "QFP", "TQFP", "LQFP", "QFN", "VFQFPN", "BGA",
    "WLCSP", "SOT-23", "SOT-223", "SOT-553", "SON", "WSON",
    "D2PAK", "DPAK", "TO-252", "TO-263", "SMD",
})

# Pin-compatible small-outline group (same pinout, different body)
_SMALL_OUTLINE_GROUP = frozenset({"DIP", "PDIP", "SOIC", "TSSOP", "MSOP"})


def _clean(value: str | None) -> str:
    return value.strip().upper() if value else ""


def is_known_package_code(code: str | None) -> bool:
    return _clean(code) in PACKAGE_CODES


def resolve_package_code(code: str | None) -> str:
    """Map a suffix code to a package name; unknown codes are returned upper-cased."""
    cleaned = _clean(code)
    if not cleaned:
        return ""
    return PACKAGE_CODES.get(cleaned, cleaned)


def is_power_package(package: str | None) -> bool:
    return _clean(package) in POWER_PACKAGES


def is_through_hole(package: str | None) -> bool:
    return _clean(package) in THROUGH_HOLE_PACKAGES


def is_surface_mount(package: str | None) -> bool:
    return _clean(package) in SMD_PACKAGES


def are_packages_compatible(package1: str | None, package2: str | None) -> bool:
    """Whether two package names are interchangeable for a replacement.

    Identical packages are compatible, as are two power packages and two members
    of the DIP/SOIC/TSSOP/MSOP group.
    """
    p1 = _clean(package1)
    p2 = _clean(package2)
    if not p1 or not p2:
        return False
    if p1 == p2:
        return True
    if p1 in POWER_PACKAGES and p2 in POWER_PACKAGES:
        return True
    return p1 in _SMALL_OUTLINE_GROUP and p2 in _SMALL_OUTLINE_GROUP
