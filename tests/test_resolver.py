"""Tests for manufacturer resolution."""

import logging

import pytest
from mpn_mcp.catalog import get_catalog
from mpn_mcp.manufacturers import UNKNOWN_MANUFACTURER
from mpn_mcp.resolver import (
    SPECIAL_CASES,
    extract_package_code,
    extract_series,
    find_special_case,
    is_official_replacement,
    resolve_manufacturer,
    resolve_possible_manufacturers,
)


def _keys(candidates):
    return [(m.key, confidence) for m, confidence in candidates]


class TestResolveManufacturer:
    """Single best guess, first rule hit wins."""

    @pytest.mark.parametrize("mpn,expected", [
        ("STM32F103C8T6", "st"),
        ("LM358N", "ti"),
        ("ATMEGA328P-AU", "atmel"),
        ("PIC16F877A-I/P", "microchip"),
        ("ESP32-WROOM-32E", "espressif"),
        ("IRF530", "infineon"),
        ("GRM188R71H104KA93D", "murata"),
        ("CL10B104KB8NNNC", "samsung"),
        ("W25Q32JVSSIQ", "winbond"),
        ("BME280", "bosch"),
        ("MC7805", "onsemi"),
        ("CC2640R2F", "ti"),  # first prefix hit in catalog order
    ])
    def test_known_parts(self, mpn, expected):
        assert resolve_manufacturer(mpn).key == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("1N4007", "vishay"),
        ("1N4148", "vishay"),
        ("1N4733A", "onsemi"),
        ("1N5819", "vishay"),
        ("LM7805-ST", "st"),  # ST tag in the ordering suffix
        ("LM7805CT", "ti"),
    ])
    def test_special_cases(self, mpn, expected):
        assert resolve_manufacturer(mpn).key == expected

    def test_full_pattern_fallback(self):
        """No special case or prefix, but a Microchip EEPROM pattern matches."""
        assert resolve_manufacturer("25C040").key == "microchip"

    @pytest.mark.parametrize("mpn,expected", [
        ("QQ123-NXP", "nxp"),
        ("QQ123-ON", "onsemi"),
    ])
    def test_substring_hints(self, mpn, expected):
        assert resolve_manufacturer(mpn).key == expected

    @pytest.mark.parametrize("mpn", [None, "", "   ", 12345, "XYZZY1", ["LM358"]])
    def test_unknown(self, mpn):
        manufacturer = resolve_manufacturer(mpn)
        assert manufacturer is UNKNOWN_MANUFACTURER
        assert not manufacturer.is_known

    def test_case_insensitive(self):
        assert resolve_manufacturer("stm32f103c8t6").key == "st"
        assert resolve_manufacturer("  lm358n  ").key == "ti"

    def test_returns_catalog_instance(self):
        assert resolve_manufacturer("LM358N") is get_catalog().get("ti")


class TestSpecialCases:
    """The override table is ordered policy."""

    def test_first_entry_wins(self):
        case = find_special_case("1N4007")
        assert case.primary == "vishay"
        assert case.alternates == ("onsemi", "diodes_inc")

    def test_no_match(self):
        assert find_special_case("XYZZY1") is None

    def test_every_key_is_in_catalog(self):
        keys = set(get_catalog().keys())
        for case in SPECIAL_CASES:
            assert case.primary in keys
            assert set(case.alternates) <= keys


class TestPossibleManufacturers:
    """Confidence-tiered candidates."""

    def test_irf530_infineon_ranked_high(self):
        candidates = _keys(resolve_possible_manufacturers("IRF530"))
        assert candidates[0] == ("infineon", "high")
        assert ("vishay", "medium") in candidates
        assert ("st", "medium") in candidates

    def test_special_case_alternates_in_table_order(self):
        assert _keys(resolve_possible_manufacturers("LM358N")) == [
            ("ti", "high"),
            ("st", "medium"),
            ("onsemi", "medium"),
        ]

    def test_second_prefix_hit_is_medium(self):
        candidates = _keys(resolve_possible_manufacturers("CC2640R2F"))
        assert candidates[0] == ("ti", "high")
        assert ("yageo", "medium") in candidates

    def test_pattern_only_match_is_low(self):
        assert _keys(resolve_possible_manufacturers("25C040")) == [("microchip", "low")]

    def test_each_manufacturer_once(self):
        for mpn in ("IRF530", "LM358N", "1N4148", "CC2640R2F", "BAT54-NXP"):
            keys = [m.key for m, _ in resolve_possible_manufacturers(mpn)]
            assert len(keys) == len(set(keys)), mpn

    def test_tiers_are_ordered(self):
        rank = {"high": 0, "medium": 1, "low": 2}
        for mpn in ("IRF530", "1N4148", "CC2640R2F", "LM358N"):
            tiers = [rank[c] for _, c in resolve_possible_manufacturers(mpn)]
            assert tiers == sorted(tiers), mpn

    def test_best_guess_agrees_with_first_candidate(self):
        for mpn in ("IRF530", "1N4148", "CC2640R2F", "STM32F103C8T6", "25C040"):
            first, _ = resolve_possible_manufacturers(mpn)[0]
            assert first == resolve_manufacturer(mpn), mpn

    def test_deterministic(self):
        assert resolve_possible_manufacturers("1N4148") == resolve_possible_manufacturers("1N4148")

    @pytest.mark.parametrize("mpn", [None, "", "XYZZY1"])
    def test_nothing_plausible(self, mpn):
        assert resolve_possible_manufacturers(mpn) == []


class TestExtraction:
    """Public series and package extraction."""

    def test_stm32_package_from_package_letter(self):
        assert extract_package_code("STM32F103C8T6") == "LQFP"

    @pytest.mark.parametrize("mpn,expected", [
        ("LM7805CT", "LM7805"),
        ("lm358n", "LM358"),
        ("ATMEGA328P-AU", "ATMEGA328P"),
        ("1N4148W", "1N4148"),
        ("2N3904", "2N3904"),
        ("XYZZY1", ""),
        (None, ""),
    ])
    def test_extract_series(self, mpn, expected):
        assert extract_series(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("  atmega328p-au ", "TQFP"),
        ("LM358-N", "DIP"),  # hyphen separates the package suffix
        ("LM358N", "DIP"),
        ("XYZZY1", ""),
        (None, ""),
    ])
    def test_extract_package_code(self, mpn, expected):
        assert extract_package_code(mpn) == expected


class TestOfficialReplacement:
    """Manufacturer-documented replacements."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("LM358N", "LM358DR", True),
        ("STM32F103C8T6", "STM32F103CBT6", True),
        ("IRF540N", "IRF540NPBF", True),
        ("LM358N", "LM324N", False),
        ("LM358N", "MC1458", False),  # different manufacturers
        ("STM32F103C8T6", "GD32F103C8T6", False),
        ("1N4148", "1N4148W", True),
        ("1N4148", "1N5819", False),  # both Vishay, different diodes
        ("2N3904", "2N3906", False),
        ("XYZZY1", "XYZZY1", False),  # unknown manufacturer
        (None, "LM358N", False),
    ])
    def test_is_official_replacement(self, mpn1, mpn2, expected):
        assert is_official_replacement(mpn1, mpn2) is expected


class TestFaultIsolation:
    """A failing handler degrades the answer instead of raising."""

    def test_failing_series_extraction(self, monkeypatch, caplog):
        handler = get_catalog().get("ti").handler

        def boom(mpn):
            raise ValueError("bad rule")

        monkeypatch.setattr(handler, "extract_series", boom)
        with caplog.at_level(logging.WARNING, logger="mpn_mcp.resolver"):
            assert extract_series("LM358N") == ""
        assert "ti series extraction failed for LM358N: ValueError: bad rule" in caplog.text

    def test_failing_match_is_no_match(self, monkeypatch, caplog):
        handler = get_catalog().get("microchip").handler

        def boom(mpn, component_type, registry):
            raise RuntimeError("broken")

        monkeypatch.setattr(handler, "matches", boom)
        with caplog.at_level(logging.WARNING, logger="mpn_mcp.resolver"):
            assert resolve_manufacturer("25C040") is UNKNOWN_MANUFACTURER
            assert resolve_manufacturer("LM358N").key == "ti"
        assert "microchip match as" in caplog.text

    def test_failing_replacement_check(self, monkeypatch):
        handler = get_catalog().get("ti").handler

        def boom(mpn1, mpn2):
            raise KeyError("x")

        monkeypatch.setattr(handler, "is_official_replacement", boom)
        assert is_official_replacement("LM358N", "LM358D") is False
