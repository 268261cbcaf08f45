"""Tests for the manufacturer catalog."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from mpn_mcp import catalog as catalog_module
from mpn_mcp.catalog import Catalog, CatalogError, get_catalog
from mpn_mcp.handlers import ManufacturerHandler, STHandler, TIHandler
from mpn_mcp.manufacturers import MANUFACTURER_DEFINITIONS, UNKNOWN_MANUFACTURER, Manufacturer
from mpn_mcp.patterns import RegistryFrozenError
from mpn_mcp.taxonomy import ComponentType


class _UnclassifiedHandler(ManufacturerHandler):
    key = "bogus"

    PATTERNS = {
        ComponentType.UNCLASSIFIED: (r"BOGUS[0-9]+",),
    }


class TestCatalogValidation:
    """Inconsistent definitions are rejected at build time."""

    def test_duplicate_key(self):
        definitions = (
            ("ti", "Texas Instruments", r"LM", TIHandler),
            ("ti", "Texas Instruments", r"TL", TIHandler),
        )
        with pytest.raises(CatalogError, match="Duplicate manufacturer key: ti"):
            Catalog(definitions)

    def test_handler_key_mismatch(self):
        with pytest.raises(CatalogError, match="expected 'texas'"):
            Catalog((("texas", "Texas Instruments", r"LM", TIHandler),))

    def test_invalid_prefix(self):
        with pytest.raises(CatalogError, match="Invalid pattern for ti"):
            Catalog((("ti", "Texas Instruments", r"LM[", TIHandler),))

    def test_unclassified_patterns_rejected(self):
        with pytest.raises(CatalogError, match="UNCLASSIFIED"):
            Catalog((("bogus", "Bogus", r"BOGUS", _UnclassifiedHandler),))


class TestCatalog:
    """Lookups on a built catalog."""

    @pytest.fixture
    def small(self):
        return Catalog((
            ("ti", "Texas Instruments", r"LM|TL", TIHandler),
            ("st", "STMicroelectronics", r"STM32|L78", STHandler),
        ))

    def test_order_and_lookup(self, small):
        assert len(small) == 2
        assert small.keys() == ["ti", "st"]
        assert [m.key for m in small] == ["ti", "st"]
        assert small.get("st").name == "STMicroelectronics"

    def test_unknown_key(self, small):
        assert small.get("nobody") is UNKNOWN_MANUFACTURER

    def test_prefix_is_case_insensitive(self, small):
        assert small.get("ti").prefix.match("lm358")

    def test_registry_frozen(self, small):
        assert small.registry.frozen
        with pytest.raises(RegistryFrozenError):
            small.registry.register("ti", ComponentType.OPAMP, r"XX[0-9]+")

    def test_registry_scoped_to_members(self, small):
        assert small.registry.owners() == ["ti", "st"]


class TestShippedCatalog:
    """The built-in manufacturer table."""

    def test_every_definition_loaded_in_order(self):
        catalog = get_catalog()
        assert len(catalog) == len(MANUFACTURER_DEFINITIONS) == 60
        assert catalog.keys() == [key for key, _, _, _ in MANUFACTURER_DEFINITIONS]

    def test_every_manufacturer_has_patterns(self):
        catalog = get_catalog()
        for manufacturer in catalog:
            assert catalog.registry.supported_types(manufacturer.key), manufacturer.key

    def test_manufacturer_identity(self):
        ti = get_catalog().get("ti")
        assert ti.is_known
        assert ti == Manufacturer(key="ti", name="Texas Instruments")
        assert ti.to_dict() == {"key": "ti", "name": "Texas Instruments"}

    def test_unknown_manufacturer(self):
        assert not UNKNOWN_MANUFACTURER.is_known
        assert UNKNOWN_MANUFACTURER.to_dict() == {"key": "unknown", "name": "Unknown"}


class TestGetCatalog:
    """Process-wide singleton."""

    def test_returns_same_instance(self):
        assert get_catalog() is get_catalog()

    def test_concurrent_first_use_builds_once(self, monkeypatch):
        built = []

        class CountingCatalog(Catalog):
            def __init__(self):
                built.append(self)
                super().__init__()

        monkeypatch.setattr(catalog_module, "_catalog", None)
        monkeypatch.setattr(catalog_module, "Catalog", CountingCatalog)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: get_catalog(), range(32)))

        assert len(built) == 1
        assert all(result is built[0] for result in results)
