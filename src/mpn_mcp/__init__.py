"""MPN resolution: manufacturer, component type and replacement similarity from a part number."""

__version__ = "0.1.0"

from .arbiter import resolve_type
from .catalog import get_catalog
from .manufacturers import UNKNOWN_MANUFACTURER, Manufacturer
from .resolver import (
    extract_package_code,
    extract_series,
    is_official_replacement,
    resolve_manufacturer,
    resolve_possible_manufacturers,
)
from .similarity import similarity
from .taxonomy import ComponentType

__all__ = [
    "ComponentType",
    "Manufacturer",
    "UNKNOWN_MANUFACTURER",
    "__version__",
    "extract_package_code",
    "extract_series",
    "get_catalog",
    "is_official_replacement",
    "resolve_manufacturer",
    "resolve_possible_manufacturers",
    "resolve_type",
    "similarity",
]
