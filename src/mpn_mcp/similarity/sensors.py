"""Sensor similarity.

Sensors are compared within their kind (temperature, humidity, IMU ...). The same
base part in another package or grade scores high; other parts of the same kind
score by manufacturer.
"""

import re

from ..arbiter import resolve_type
from ..resolver import extract_package_code, resolve_manufacturer
from ..taxonomy import ComponentType, family_of
from .base import (
    HIGH_SIMILARITY,
    LOW_SIMILARITY,
    MEDIUM_SIMILARITY,
    SimilarityCalculator,
    in_same_group,
    packages_match,
)

# Letters, optional hyphen, digits, then an optional single variant letter ("DS18B20")
_SENSOR_BASE = re.compile(r"([A-Z]+)-?([0-9]+[A-Z]?[0-9]*)")

# Pin and register compatible across the group
EQUIVALENT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"BMP280", "BME280"}),
    frozenset({"SHT30", "SHT31", "SHT35"}),
    frozenset({"MPU6050", "MPU6000"}),
    frozenset({"DS18B20", "DS18S20"}),
    frozenset({"LM35", "LM35D", "LM35C", "LM35CA"}),
)


def sensor_base(mpn: str) -> str:
    """'MPU-6050' -> 'MPU6050', 'BME280' -> 'BME280', 'LM35DZ' -> 'LM35D'."""
    match = _SENSOR_BASE.match(mpn)
    if not match:
        return ""
    return match.group(1) + match.group(2)


class SensorCalculator(SimilarityCalculator):
    name = "sensor"
    FAMILIES = frozenset({ComponentType.SENSOR})

    def calculate(self, mpn1: str, mpn2: str) -> float:
        type1 = resolve_type(mpn1)
        type2 = resolve_type(mpn2)
        if not self.is_applicable(type1) or not self.is_applicable(type2):
            return 0.0
        if family_of(type1) != family_of(type2):
            return LOW_SIMILARITY

        base1 = sensor_base(mpn1)
        base2 = sensor_base(mpn2)
        if base1 and (base1 == base2 or in_same_group(EQUIVALENT_GROUPS, base1, base2)):
            if packages_match(extract_package_code(mpn1), extract_package_code(mpn2)):
                return HIGH_SIMILARITY
            return MEDIUM_SIMILARITY

        if resolve_manufacturer(mpn1) == resolve_manufacturer(mpn2):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
