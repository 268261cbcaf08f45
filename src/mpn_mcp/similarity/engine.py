"""Similarity entry point.

similarity() resolves both MPNs to component types and hands them to the first
calculator in CALCULATORS that applies to either type. That calculator's answer
is final, 0.0 included. When none applies, default_similarity() decides.
"""

import logging

from ..arbiter import resolve_type
from ..mpn import canonical, same_part
from .base import SimilarityCalculator, clamp
from .connectors import ConnectorCalculator
from .default import default_similarity
from .diodes import DiodeCalculator
from .leds import LEDCalculator
from .logic import LogicICCalculator
from .mcu import MCUCalculator
from .memory import MemoryCalculator
from .mosfets import MosfetCalculator
from .opamps import OpAmpCalculator
from .passives import CapacitorCalculator, ResistorCalculator
from .regulators import VoltageRegulatorCalculator
from .sensors import SensorCalculator
from .transistors import TransistorCalculator

logger = logging.getLogger(__name__)

# Priority order: the first applicable calculator wins
CALCULATORS: tuple[SimilarityCalculator, ...] = (
    VoltageRegulatorCalculator(),
    LEDCalculator(),
    OpAmpCalculator(),
    LogicICCalculator(),
    MemoryCalculator(),
    DiodeCalculator(),
    SensorCalculator(),
    MosfetCalculator(),
    TransistorCalculator(),
    MCUCalculator(),
    ResistorCalculator(),
    CapacitorCalculator(),
    ConnectorCalculator(),
)


def find_calculator(type1, type2) -> SimilarityCalculator | None:
    for calculator in CALCULATORS:
        if calculator.is_applicable(type1) or calculator.is_applicable(type2):
            return calculator
    return None


def similarity(mpn1: object, mpn2: object) -> float:
    """Replacement similarity of two MPNs in [0, 1].

    1.0 for the same part (ignoring case and punctuation), 0.0 for None or blank
    input. Never raises: a calculator that fails scores 0.0.
    """
    value1 = canonical(mpn1)
    value2 = canonical(mpn2)
    if not value1 or not value2:
        return 0.0
    if same_part(value1, value2):
        return 1.0

    type1 = resolve_type(value1)
    type2 = resolve_type(value2)
    calculator = find_calculator(type1, type2)
    if calculator is None:
        return clamp(default_similarity(value1, value2, type1, type2))

    try:
        return clamp(calculator.calculate(value1, value2))
    except Exception as e:
        logger.warning(f"{calculator.name} similarity failed for {value1}/{value2}: {type(e).__name__}: {e}")
        return 0.0
