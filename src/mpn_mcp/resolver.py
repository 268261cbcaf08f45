"""Manufacturer resolution for MPNs.

resolve_manufacturer() picks one manufacturer, first hit wins:

1. SPECIAL_CASES - explicit overrides for families a generic rule gets wrong
2. coarse prefix of each manufacturer, in catalog order
3. any full component-type pattern of each manufacturer, in catalog order
4. SUBSTRING_HINTS - vendor abbreviations embedded in the MPN
5. UNKNOWN_MANUFACTURER

resolve_possible_manufacturers() returns every plausible manufacturer instead,
tiered high/medium/low, for callers that want to see the ambiguity.

Nothing here raises on bad input. A handler that raises while matching is logged
and treated as "no match".
"""

import logging
import re
from dataclasses import dataclass
from typing import Literal

from .catalog import get_catalog
from .manufacturers import UNKNOWN_MANUFACTURER, Manufacturer
from .mpn import canonical

logger = logging.getLogger(__name__)

Confidence = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class SpecialCase:
    """Unconditional manufacturer override for MPNs starting with `pattern`."""
    pattern: re.Pattern[str]
    primary: str
    alternates: tuple[str, ...] = ()


def _case(pattern: str, primary: str, *alternates: str) -> SpecialCase:
    return SpecialCase(re.compile(pattern, re.IGNORECASE), primary, alternates)


# Order matters: the first matching entry decides.
SPECIAL_CASES: tuple[SpecialCase, ...] = (
    # Microcontroller families that belong to exactly one vendor
    _case(r"DSPIC|PIC[0-9]", "microchip"),
    _case(r"STM32|STM8", "st"),
    _case(r"ATMEGA|ATTINY|ATXMEGA", "atmel"),
    _case(r"AT32F", "artery"),
    _case(r"MSP43[02]", "ti"),
    _case(r"ESP32|ESP8266|ESP8285", "espressif"),
    # 1N diode ranges, split by who historically owns each sub-range
    _case(r"1N400[1-7]", "vishay", "onsemi", "diodes_inc"),
    _case(r"1N4148|1N914", "vishay", "onsemi", "diodes_inc", "nexperia"),
    _case(r"1N47[0-9]{2}", "onsemi", "vishay", "diodes_inc"),
    _case(r"1N[0-9]", "vishay", "onsemi"),
    # Small-signal BAT/BAS/BAV diodes: an embedded vendor tag wins
    _case(r"BA[TSV][0-9](?=.*NXP)", "nxp", "nexperia", "vishay"),
    _case(r"BA[TSV][0-9](?=.*ON)", "onsemi", "vishay"),
    _case(r"BA[TSV][0-9]", "vishay", "nexperia", "onsemi", "diodes_inc"),
    # Passive and connector series codes
    _case(r"CRCW", "vishay"),
    _case(r"R[CTL][0-9]{4}", "yageo"),
    _case(r"ERJ", "panasonic"),
    _case(r"GRM|LQG|LQW", "murata"),
    _case(r"6[12][0-9]{8}", "wurth"),
    _case(r"0?(?:43|53|55)[0-9]{3}-?[0-9]{4}", "molex"),
    _case(r"[12]-[0-9]{6}", "te"),
    _case(r"(?:PH|EH|XH|ZH)R-[0-9]", "jst"),
    # Linear ICs second-sourced by several vendors; an ST tag in the suffix wins
    _case(r"(?:LM|TL|TPS)[0-9](?=.*ST)", "st", "ti", "onsemi"),
    _case(r"(?:LM|TL|TPS)[0-9]", "ti", "st", "onsemi"),
    # International Rectifier power MOSFETs, now Infineon
    _case(r"IR[FL]", "infineon", "vishay", "st"),
)

# Last-resort vendor tags embedded in the MPN
SUBSTRING_HINTS: tuple[tuple[str, str], ...] = (
    ("-ST", "st"),
    ("-TI", "ti"),
    ("-NXP", "nxp"),
    ("-INF", "infineon"),
    ("-ON", "onsemi"),
    ("-VISHAY", "vishay"),
)


def find_special_case(mpn: str) -> SpecialCase | None:
    for case in SPECIAL_CASES:
        if case.pattern.match(mpn):
            return case
    return None


def _claims(manufacturer: Manufacturer, mpn: str, registry) -> bool:
    """Does any of the manufacturer's component-type rules match the MPN?"""
    handler = manufacturer.handler
    for component_type in handler.supported_types:
        try:
            if handler.matches(mpn, component_type, registry):
                return True
        except Exception as e:
            logger.warning(
                f"{manufacturer.key} match as {component_type.name} failed for {mpn}: {type(e).__name__}: {e}"
            )
    return False


def _hinted(mpn: str) -> list[str]:
    return [key for hint, key in SUBSTRING_HINTS if hint in mpn]


# =============================================================================
# Public API
# =============================================================================

def resolve_manufacturer(mpn: object) -> Manufacturer:
    """Best-guess manufacturer for an MPN, or UNKNOWN_MANUFACTURER."""
    value = canonical(mpn)
    if not value:
        return UNKNOWN_MANUFACTURER
    catalog = get_catalog()

    case = find_special_case(value)
    if case:
        return catalog.get(case.primary)

    for manufacturer in catalog:
        if manufacturer.prefix.match(value):
            return manufacturer

    for manufacturer in catalog:
        if _claims(manufacturer, value, catalog.registry):
            return manufacturer

    hinted = _hinted(value)
    if hinted:
        return catalog.get(hinted[0])

    return UNKNOWN_MANUFACTURER


def resolve_possible_manufacturers(mpn: object) -> list[tuple[Manufacturer, Confidence]]:
    """All plausible manufacturers, best tier first.

    high: the special-case primary, or else the first prefix hit.
    medium: special-case alternates, other prefix hits, substring-hint vendors.
    low: manufacturers whose component patterns match without a prefix hit.

    Each manufacturer appears once, at its best tier. An MPN nothing recognises
    yields an empty list.
    """
    value = canonical(mpn)
    if not value:
        return []
    catalog = get_catalog()

    high: list[str] = []
    medium: list[str] = []
    low: list[str] = []
    seen: set[str] = set()

    def add(tier: list[str], key: str) -> None:
        if key not in seen and catalog.get(key).is_known:
            seen.add(key)
            tier.append(key)

    case = find_special_case(value)
    if case:
        add(high, case.primary)
        for key in case.alternates:
            add(medium, key)

    for manufacturer in catalog:
        if manufacturer.prefix.match(value):
            add(medium if high else high, manufacturer.key)

    for key in _hinted(value):
        add(medium, key)

    for manufacturer in catalog:
        if manufacturer.key not in seen and _claims(manufacturer, value, catalog.registry):
            add(low, manufacturer.key)

    return (
        [(catalog.get(k), "high") for k in high]
        + [(catalog.get(k), "medium") for k in medium]
        + [(catalog.get(k), "low") for k in low]
    )


def _handler_for(mpn: str):
    manufacturer = resolve_manufacturer(mpn)
    return manufacturer, manufacturer.handler


def extract_series(mpn: object) -> str:
    """Series of the MPN per its manufacturer's handler, or ""."""
    value = canonical(mpn)
    if not value:
        return ""
    manufacturer, handler = _handler_for(value)
    if handler is None:
        return ""
    try:
        return handler.extract_series(value) or ""
    except Exception as e:
        logger.warning(f"{manufacturer.key} series extraction failed for {value}: {type(e).__name__}: {e}")
        return ""


def extract_package_code(mpn: object) -> str:
    """Package name from the MPN's ordering suffix, or ""."""
    value = canonical(mpn)
    if not value:
        return ""
    manufacturer, handler = _handler_for(value)
    if handler is None:
        return ""
    try:
        return handler.extract_package_code(value) or ""
    except Exception as e:
        logger.warning(f"{manufacturer.key} package extraction failed for {value}: {type(e).__name__}: {e}")
        return ""


def is_official_replacement(mpn1: object, mpn2: object) -> bool:
    """Whether the manufacturer treats the two MPNs as drop-in replacements.

    Both must resolve to the same known manufacturer; its handler decides.
    """
    value1 = canonical(mpn1)
    value2 = canonical(mpn2)
    if not value1 or not value2:
        return False
    manufacturer = resolve_manufacturer(value1)
    if not manufacturer.is_known or resolve_manufacturer(value2) != manufacturer:
        return False
    try:
        return bool(manufacturer.handler.is_official_replacement(value1, value2))
    except Exception as e:
        logger.warning(
            f"{manufacturer.key} replacement check failed for {value1}/{value2}: {type(e).__name__}: {e}"
        )
        return False
