"""Tests for replacement similarity scoring."""

import logging

import pytest
from mpn_mcp.similarity import CALCULATORS, default_similarity, find_calculator, similarity
from mpn_mcp.similarity import default as default_module
from mpn_mcp.similarity.connectors import pin_count
from mpn_mcp.similarity.diodes import diode_base, zener_voltage
from mpn_mcp.similarity.logic import function_code
from mpn_mcp.similarity.mcu import product_line
from mpn_mcp.similarity.memory import parse_capacity
from mpn_mcp.similarity.mosfets import channel, mosfet_base
from mpn_mcp.similarity.opamps import opamp_base
from mpn_mcp.similarity.passives import parse_capacitance, parse_resistance
from mpn_mcp.similarity.regulators import RegulatorSpec, VoltageRegulatorCalculator, parse_regulator
from mpn_mcp.similarity.sensors import sensor_base
from mpn_mcp.similarity.transistors import polarity, transistor_base
from mpn_mcp.taxonomy import ComponentType as CT

# Pairs used for the order-independence and range checks
CORPUS = [
    ("LM7805", "MC7805"),
    ("LM7805", "LM7812"),
    ("LM7805", "LM358N"),
    ("LM358", "MC1458"),
    ("LM358N", "LM324N"),
    ("74HC00", "74LS00"),
    ("74HC00", "74HC04"),
    ("24LC256", "AT24C256"),
    ("24LC256", "25LC256"),
    ("1N4148", "1N914"),
    ("1N4001", "1N4007"),
    ("BZX84C5V1", "1N4733A"),
    ("IRF530", "STF530"),
    ("IRF540", "IRF9540"),
    ("2N3904", "2N3906"),
    ("2N3904", "2N2222"),
    ("RC0603FR-0710KL", "CRCW060310K0FKEA"),
    ("GRM188R71H104KA93D", "CL10B104KB8NNNC"),
    ("STM32F103C8T6", "GD32F103C8T6"),
    ("ATMEGA328P-AU", "ATMEGA328P-PU"),
    ("BME280", "BMP280"),
    ("B4B-PH-K-S", "B6B-PH-K-S"),
    ("ABM8-16.000MHZ-B2-T", "ABM8-12.000MHZ-B2-T"),
    ("XYZZY1", "LM358N"),
]


class TestEngine:
    """Entry point rules shared by every family."""

    @pytest.mark.parametrize("mpn1,mpn2", CORPUS)
    def test_order_independent(self, mpn1, mpn2):
        assert similarity(mpn1, mpn2) == similarity(mpn2, mpn1)

    @pytest.mark.parametrize("mpn1,mpn2", CORPUS)
    def test_in_range(self, mpn1, mpn2):
        assert 0.0 <= similarity(mpn1, mpn2) <= 1.0

    @pytest.mark.parametrize("mpn1,mpn2", [
        ("LM358N", "LM358N"),
        ("LM358-N", "lm358n"),
        (" XYZZY1 ", "xyzzy1"),
    ])
    def test_same_part(self, mpn1, mpn2):
        assert similarity(mpn1, mpn2) == 1.0

    @pytest.mark.parametrize("mpn1,mpn2", [
        (None, "LM358N"),
        ("LM358N", None),
        ("", ""),
        ("   ", "LM358N"),
        (None, None),
    ])
    def test_missing_input(self, mpn1, mpn2):
        assert similarity(mpn1, mpn2) == 0.0

    def test_first_applicable_calculator_is_final(self):
        """The regulator calculator claims the pair and its 0.0 stands."""
        assert similarity("LM7805", "LM358N") == 0.0

    def test_failing_calculator_scores_zero(self, monkeypatch, caplog):
        calculator = find_calculator(CT.OPAMP_TI, CT.OPAMP_TI)

        def boom(mpn1, mpn2):
            raise RuntimeError("broken table")

        monkeypatch.setattr(calculator, "calculate", boom)
        with caplog.at_level(logging.WARNING, logger="mpn_mcp.similarity.engine"):
            assert similarity("LM358", "MC1458") == 0.0
        assert "opamp similarity failed for LM358/MC1458: RuntimeError: broken table" in caplog.text


class TestFindCalculator:
    """Priority-ordered calculator lookup."""

    @pytest.mark.parametrize("type1,type2,expected", [
        (CT.OPAMP_TI, CT.OPAMP_TI, "opamp"),
        (CT.OPAMP_TI, CT.UNCLASSIFIED, "opamp"),  # one side is enough
        (CT.VOLTAGE_REGULATOR_LINEAR_TI, CT.OPAMP_TI, "voltage_regulator"),  # priority order
        (CT.IC, CT.IC, "logic_ic"),
        (CT.TEMPERATURE_SENSOR_TI, CT.TEMPERATURE_SENSOR_TI, "sensor"),  # via base type
        (CT.MEMORY_FLASH_WINBOND, CT.MEMORY_EEPROM_MICROCHIP, "memory"),
        (CT.CAPACITOR_CERAMIC_MURATA, CT.CAPACITOR_CERAMIC_SAMSUNG, "capacitor"),
        (CT.MICROCONTROLLER_ST, CT.UNCLASSIFIED, "microcontroller"),
    ])
    def test_find_calculator(self, type1, type2, expected):
        assert find_calculator(type1, type2).name == expected

    def test_no_calculator(self):
        assert find_calculator(CT.UNCLASSIFIED, CT.UNCLASSIFIED) is None
        assert find_calculator(CT.CRYSTAL_ABRACON, CT.CRYSTAL) is None

    def test_names_unique(self):
        names = [c.name for c in CALCULATORS]
        assert all(names)
        assert len(names) == len(set(names))


class TestRegulators:
    """78xx/79xx, adjustable and 1117 LDO regulators."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("LM7805", "MC7805", 0.9),  # second source
        ("LM7805CT", "L7805CV", 0.9),
        ("LM7805", "LM7812", 0.3),  # different voltage
        ("LM7805", "LM7905", 0.3),  # different polarity
        ("LM7805", "LM358N", 0.0),
        ("LD1117S33TR", "LD1117S50TR", 0.3),  # inline output voltage
        ("LD1117V33", "LD1117V50", 0.3),
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    def test_unknown_ldo_voltage_is_not_a_match(self):
        calculator = VoltageRegulatorCalculator()
        assert calculator.calculate("LD1117STR", "LD1117DT") == pytest.approx(0.7)
        assert calculator.calculate("LD1117S33TR", "LD1117DT") == pytest.approx(0.3)

    @pytest.mark.parametrize("mpn,expected", [
        ("LM7805CT", RegulatorSpec("fixed", 1, 5.0, 1500)),
        ("MC79L12", RegulatorSpec("fixed", -1, 12.0, 100)),
        ("LM317T", RegulatorSpec("adjustable", 1, None, 1500)),
        ("LM337T", RegulatorSpec("adjustable", -1, None, 1500)),
        ("AMS1117-3.3", RegulatorSpec("ldo", 1, 3.3, 800)),
        ("AMS1117-33", RegulatorSpec("ldo", 1, 3.3, 800)),
        ("LD1117S33TR", RegulatorSpec("ldo", 1, 3.3, 800)),
        ("LD1117V50", RegulatorSpec("ldo", 1, 5.0, 800)),
        ("NCP1117ST18T3G", RegulatorSpec("ldo", 1, 1.8, 800)),
        ("LM1117MPX-3.3", RegulatorSpec("ldo", 1, 3.3, 800)),
        ("LD1117STR", RegulatorSpec("ldo", 1, None, 800)),
        ("LD1117-ADJ", RegulatorSpec("ldo_adjustable", 1, None, 800)),
        ("LM2596S-5.0", None),
    ])
    def test_parse_regulator(self, mpn, expected):
        assert parse_regulator(mpn) == expected


class TestOpAmps:
    """Channel-count groups."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("LM358", "MC1458", 0.9),
        ("LM358N", "LM358DR", 0.9),
        ("TL072CP", "NE5532P", 0.9),
        ("LM358N", "LM324N", 0.3),  # dual vs quad
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    def test_opamp_base(self):
        assert opamp_base("LM358DR") == "LM358"
        assert opamp_base("TL072CP") == "TL072"
        assert opamp_base("XYZ") == ""


class TestLogic:
    """Function codes across logic sub-families."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("74HC00", "74LS00", 0.9),
        ("74HC00", "74HC04", 0.3),
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("74HC00D", "00"),
        ("SN74LVC1G08", "08"),
        ("CD4011BE", "4011"),
        ("MC14011B", "4011"),
        ("LM358", ""),
    ])
    def test_function_code(self, mpn, expected):
        assert function_code(mpn) == expected


class TestMemory:
    """Technology and interface are hard requirements."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("24LC256", "AT24C256", 0.9),
        ("24LC256", "25LC256", 0.0),  # I2C vs SPI
        ("W25Q32JVSSIQ", "MX25L3233FM2I-08G", 0.9),
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("code,expected", [
        ("256", 256),
        ("3233", 32),
        ("032", 32),
        ("12835", 128),
        ("", 0),
    ])
    def test_parse_capacity(self, code, expected):
        assert parse_capacity(code) == expected


class TestDiodes:
    """Cross-references, families and zener voltages."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("1N4148", "1N914", 0.9),
        ("1N4007", "RL207", 0.9),
        ("1N4001", "1N4007", 0.7),  # same family, different rating
        ("BZX84C5V1", "1N4733A", 0.9),  # both 5.1 V zeners
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("1N4148W-7-F", "1N4148"),
        ("BZX84C5V1", "BZX84"),
        ("RL207", "RL207"),
        ("LM358", ""),
    ])
    def test_diode_base(self, mpn, expected):
        assert diode_base(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("BZX84C5V1", 5.1),
        ("BZT52C12", 12.0),
        ("1N4733A", 5.1),
        ("1N4148", None),
    ])
    def test_zener_voltage(self, mpn, expected):
        assert zener_voltage(mpn) == expected


class TestMosfets:
    """Channel type and cross-vendor groups."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("IRF530", "STF530", 0.9),
        ("IRF530", "IRF540", 0.7),
        ("IRF540", "IRF9540", 0.0),  # N vs P channel
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("IRF540NPBF", "IRF540N"),
        ("FQP30N06L", "FQP30N06"),
        ("2N7002K-7", "2N7002"),
    ])
    def test_mosfet_base(self, mpn, expected):
        assert mosfet_base(mpn) == expected

    def test_channel(self):
        assert channel("IRF9540") == "P"
        assert channel("IRF540") == "N"


class TestTransistors:
    """Polarity is a hard requirement."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("2N3904", "PN3904", 0.9),
        ("2N3904", "2N3906", 0.0),
        ("2N3904", "2N2222", 0.7),
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    def test_transistor_base(self):
        assert transistor_base("2N3904BU") == "2N3904"
        assert transistor_base("MMBT3904LT1G") == "MMBT3904"
        assert transistor_base("LM358") == ""

    @pytest.mark.parametrize("base,expected", [
        ("2N3904", "NPN"),
        ("2N3906", "PNP"),
        ("BC547", "NPN"),
        ("2SC1815", "NPN"),
        ("2SA1015", "PNP"),
        ("MJE13005", ""),
    ])
    def test_polarity(self, base, expected):
        assert polarity(base) == expected


class TestPassives:
    """Value decoding from vendor ordering codes."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("RC0603FR-0710KL", "CRCW060310K0FKEA", 0.9),  # 10k 0603 from two vendors
        ("RC0603FR-0710KL", "RC0603FR-071KL", 0.0),  # different value
        ("GRM188R71H104KA93D", "CL10B104KB8NNNC", 0.9),  # 100n X7R 0603
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("RC0603FR-0710KL", 10000.0),
        ("RC0603FR-071KL", 1000.0),
        ("CRCW060310K0FKEA", 10000.0),
        ("ERJ-3EKF1002V", 10000.0),
        ("XYZZY1", None),
    ])
    def test_parse_resistance(self, mpn, expected):
        assert parse_resistance(mpn) == expected

    @pytest.mark.parametrize("mpn,expected", [
        ("GRM188R71H104KA93D", (100000.0, "X7R")),
        ("CL10B104KB8NNNC", (100000.0, "X7R")),
        ("CL10C1R0CB8NNNC", (1.0, "C0G")),
        ("XYZZY1", (None, "")),
    ])
    def test_parse_capacitance(self, mpn, expected):
        assert parse_capacitance(mpn) == expected


class TestMicrocontrollers:
    """Series, product line and STM32F103 clones."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("STM32F103C8T6", "GD32F103C8T6", 0.9),
        ("ATMEGA328P-AU", "ATMEGA328P-PU", 0.7),  # TQFP vs DIP
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("STM32F103C8T6", "STM32F1"),
        ("ATMEGA328P-AU", "ATMEGA"),
        ("PIC16F877A", "PIC16"),
        ("LM358", ""),
    ])
    def test_product_line(self, mpn, expected):
        assert product_line(mpn) == expected


class TestSensors:
    """Sensor kinds and pin-compatible groups."""

    @pytest.mark.parametrize("mpn1,mpn2,expected", [
        ("BME280", "BMP280", 0.9),
        ("LM35DZ", "LM35CAZ", 0.9),
    ])
    def test_similarity(self, mpn1, mpn2, expected):
        assert similarity(mpn1, mpn2) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn,expected", [
        ("MPU-6050", "MPU6050"),
        ("BME280", "BME280"),
        ("LM35DZ", "LM35D"),
        ("1234", ""),
    ])
    def test_sensor_base(self, mpn, expected):
        assert sensor_base(mpn) == expected


class TestConnectors:
    """Pin count decoding."""

    @pytest.mark.parametrize("mpn,expected", [
        ("53047-0410", 4),
        ("B4B-PH-K-S", 4),
        ("PHR-4", 4),
        ("DF13-4S-1.25C", 4),
        ("LM358", 0),
    ])
    def test_pin_count(self, mpn, expected):
        assert pin_count(mpn) == expected


class TestDefaultSimilarity:
    """Weighted fallback when no family calculator applies."""

    def test_same_type_manufacturer_and_series(self):
        assert similarity("ABM8-16.000MHZ-B2-T", "ABM8-12.000MHZ-B2-T") == pytest.approx(0.9)

    def test_nothing_in_common(self):
        assert similarity("XYZZY1", "QWERTY2") == 0.0
        assert default_similarity("XYZZY1", "QWERTY2", CT.UNCLASSIFIED, CT.UNCLASSIFIED) == 0.0

    def test_base_type_only(self):
        assert default_similarity("XYZZY1", "QWERTY2", CT.CRYSTAL, CT.CRYSTAL_ABRACON) == pytest.approx(0.4)

    def test_capped_at_one(self, monkeypatch):
        monkeypatch.setattr(default_module, "SIMILARITY_BASE_TYPE_WEIGHT", 0.9)
        score = default_similarity("ABM8-16.000MHZ-B2-T", "ABM8-12.000MHZ-B2-T", CT.CRYSTAL_ABRACON,
                                   CT.CRYSTAL_ABRACON)
        assert score == 1.0
