"""Component type arbitration.

A handler usually has several of its types matching one MPN (OPAMP_TI, OPAMP, IC
for "LM358N"). The arbiter reduces them to the single most specific one:

1. every matched type whose family loses a TYPE_PRECEDENCE_OVERRIDES pair to
   another matched type is dropped
2. among the rest, the highest specificity score wins
   (qualified 4 > functional 3 > category 2 > generic 1)
3. at equal score a type beats its own ancestors
4. remaining ties keep the type the handler lists first

The result depends only on which types match, not on the order they are listed in.

SHAPE_OVERRIDES are applied before any of that and do not look at the handler.
"""

import logging
import re

from .catalog import get_catalog
from .handlers import ManufacturerHandler
from .mpn import canonical
from .patterns import PatternRegistry
from .resolver import resolve_manufacturer
from .taxonomy import ComponentType, ancestors, family_of, specificity

logger = logging.getLogger(__name__)

# (winner, loser) between functional families. Legacy numbering schemes that collide:
# LM317/LM350 are regulators that fit the LM3xx op-amp pattern, LM358 is an op-amp
# that fits the LM35 temperature sensor pattern, TL431 is a reference that fits TL0xx.
TYPE_PRECEDENCE_OVERRIDES: tuple[tuple[ComponentType, ComponentType], ...] = (
    (ComponentType.VOLTAGE_REGULATOR, ComponentType.OPAMP),
    (ComponentType.VOLTAGE_REGULATOR, ComponentType.TEMPERATURE_SENSOR),
    (ComponentType.OPAMP, ComponentType.TEMPERATURE_SENSOR),
    (ComponentType.VOLTAGE_REFERENCE, ComponentType.OPAMP),
    (ComponentType.MOSFET, ComponentType.TRANSISTOR),
)

# MPN shapes that always resolve to one type. 74-series logic is second-sourced
# under so many sub-family letters that the generic IC type is the honest answer.
SHAPE_OVERRIDES: tuple[tuple[re.Pattern[str], ComponentType], ...] = (
    (re.compile(r"(?:74|54)[A-Z]{1,5}[0-9]{2,4}"), ComponentType.IC),
)


def preferred_type(a: ComponentType, b: ComponentType) -> ComponentType | None:
    """Winner between a and b per the override table, or None if it has no opinion."""
    family_a = family_of(a)
    family_b = family_of(b)
    for winner, loser in TYPE_PRECEDENCE_OVERRIDES:
        if family_a == winner and family_b == loser:
            return a
        if family_b == winner and family_a == loser:
            return b
    return None


def is_more_specific(candidate: ComponentType, current: ComponentType) -> bool:
    """Should candidate replace current as the best match so far?"""
    if candidate == current:
        return False
    preferred = preferred_type(candidate, current)
    if preferred is not None:
        return preferred == candidate
    if current in ancestors(candidate):
        return True
    if candidate in ancestors(current):
        return False
    return specificity(candidate) > specificity(current)


def _override_survivors(matched: list[ComponentType]) -> list[ComponentType]:
    """Matched types that lose no override against another matched type."""
    survivors = [
        component_type for component_type in matched
        if not any(
            preferred_type(component_type, other) == other
            for other in matched if other != component_type
        )
    ]
    return survivors or matched


def _most_specific(candidates: list[ComponentType]) -> ComponentType:
    best = candidates[0]
    for component_type in candidates[1:]:
        if is_more_specific(component_type, best):
            best = component_type
    return best


def shape_override(mpn: str) -> ComponentType | None:
    for pattern, component_type in SHAPE_OVERRIDES:
        if pattern.match(mpn):
            return component_type
    return None


def arbitrate(mpn: str, handler: ManufacturerHandler, registry: PatternRegistry) -> ComponentType:
    """Most specific type the handler matches for the MPN, or UNCLASSIFIED."""
    value = canonical(mpn)
    if not value:
        return ComponentType.UNCLASSIFIED
    override = shape_override(value)
    if override is not None:
        return override

    matched_types: list[ComponentType] = []
    for component_type in handler.supported_types:
        try:
            matched = handler.matches(value, component_type, registry)
        except Exception as e:
            logger.warning(
                f"{handler.key} match as {component_type.name} failed for {value}: {type(e).__name__}: {e}"
            )
            continue
        if matched:
            matched_types.append(component_type)
    if not matched_types:
        return ComponentType.UNCLASSIFIED
    return _most_specific(_override_survivors(matched_types))


def resolve_type(mpn: object) -> ComponentType:
    """Component type of an MPN, or UNCLASSIFIED when the manufacturer is unknown."""
    value = canonical(mpn)
    if not value:
        return ComponentType.UNCLASSIFIED
    override = shape_override(value)
    if override is not None:
        return override
    manufacturer = resolve_manufacturer(value)
    if not manufacturer.is_known:
        return ComponentType.UNCLASSIFIED
    return arbitrate(value, manufacturer.handler, get_catalog().registry)
