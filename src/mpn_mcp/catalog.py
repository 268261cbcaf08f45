"""Manufacturer catalog: the set of manufacturers plus the pattern registry.

The catalog is built once. Building it instantiates every handler, lets each
register its patterns, validates the result and freezes the registry. Lookups
afterwards are read-only and need no locking.
"""

import logging
import re
import threading

from .manufacturers import MANUFACTURER_DEFINITIONS, UNKNOWN_MANUFACTURER, Manufacturer
from .patterns import PatternRegistry
from .taxonomy import ComponentType

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The manufacturer catalog is inconsistent."""


class Catalog:
    """Ordered manufacturers with their handlers and a frozen pattern registry."""

    def __init__(self, definitions=MANUFACTURER_DEFINITIONS):
        self.registry = PatternRegistry()
        manufacturers: list[Manufacturer] = []
        seen: set[str] = set()

        for key, name, prefix, handler_cls in definitions:
            if key in seen:
                raise CatalogError(f"Duplicate manufacturer key: {key}")
            seen.add(key)
            handler = handler_cls()
            if handler.key != key:
                raise CatalogError(f"Handler {handler_cls.__name__} has key {handler.key!r}, expected {key!r}")
            try:
                compiled = re.compile(prefix, re.IGNORECASE)
                handler.register_patterns(self.registry)
            except re.error as e:
                raise CatalogError(f"Invalid pattern for {key}: {e}") from e
            manufacturers.append(Manufacturer(key=key, name=name, prefix=compiled, handler=handler))

        self._validate(manufacturers)
        self.registry.freeze()
        self.manufacturers: tuple[Manufacturer, ...] = tuple(manufacturers)
        self._by_key = {m.key: m for m in self.manufacturers}
        logger.info(
            f"Catalog ready: {len(self.manufacturers)} manufacturers, "
            f"{self.registry.pattern_count()} patterns"
        )

    def _validate(self, manufacturers: list[Manufacturer]) -> None:
        for m in manufacturers:
            registered = self.registry.supported_types(m.key)
            if ComponentType.UNCLASSIFIED in registered:
                raise CatalogError(f"{m.key} registers patterns for UNCLASSIFIED")
            unsupported = [t.name for t in registered if t not in m.handler.supported_types]
            if unsupported:
                raise CatalogError(f"{m.key} registers unsupported types: {', '.join(unsupported)}")

    def __len__(self) -> int:
        return len(self.manufacturers)

    def __iter__(self):
        return iter(self.manufacturers)

    def get(self, key: str) -> Manufacturer:
        """Manufacturer by key, or UNKNOWN_MANUFACTURER."""
        return self._by_key.get(key, UNKNOWN_MANUFACTURER)

    def keys(self) -> list[str]:
        return [m.key for m in self.manufacturers]


# Global catalog instance
_catalog: Catalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Get or create the global catalog (thread-safe)."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            # Double-check locking pattern
            if _catalog is None:
                _catalog = Catalog()
    return _catalog
