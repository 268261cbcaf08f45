"""Component type taxonomy.

Every ComponentType lives in exactly one of four tier tables:

1. GENERIC_TYPES      - the "unclassified" sentinel (specificity 1)
2. CATEGORY_TYPES     - broad categories such as "integrated circuit" (specificity 2)
3. FUNCTIONAL_PARENTS - concrete functional types: resistor, MOSFET, op-amp ... (specificity 3)
4. QUALIFIED_PARENTS  - manufacturer-qualified types: OPAMP_TI, MOSFET_ST ... (specificity 4)

The parent mapping is explicit for every member. validate_taxonomy() runs at import
time and refuses to load a taxonomy with an unmapped member, a member listed in two
tiers, a qualified type that is its own parent, or a parent walk that cycles.
"""

from enum import Enum
from typing import Iterable, Mapping


class TaxonomyError(ValueError):
    """The component type tables are inconsistent."""


class ComponentType(str, Enum):
    UNCLASSIFIED = "unclassified"

    # Broad categories
    IC = "ic"
    ANALOG_IC = "analog_ic"
    DIGITAL_IC = "digital_ic"
    SENSOR = "sensor"

    # Passives
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    FERRITE_BEAD = "ferrite_bead"
    CRYSTAL = "crystal"
    OSCILLATOR = "oscillator"
    FUSE = "fuse"

    # Discretes
    DIODE = "diode"
    TVS_DIODE = "tvs_diode"
    TRANSISTOR = "transistor"
    MOSFET = "mosfet"
    LED = "led"
    OPTOCOUPLER = "optocoupler"

    # Integrated circuits
    MICROCONTROLLER = "microcontroller"
    OPAMP = "opamp"
    VOLTAGE_REGULATOR = "voltage_regulator"
    VOLTAGE_REFERENCE = "voltage_reference"
    MEMORY = "memory"
    MEMORY_FLASH = "memory_flash"
    MEMORY_EEPROM = "memory_eeprom"
    LOGIC_IC = "logic_ic"
    INTERFACE_IC = "interface_ic"
    MOTOR_DRIVER = "motor_driver"

    # Sensors
    TEMPERATURE_SENSOR = "temperature_sensor"
    HUMIDITY_SENSOR = "humidity_sensor"
    PRESSURE_SENSOR = "pressure_sensor"
    ACCELEROMETER = "accelerometer"
    GYROSCOPE = "gyroscope"
    IMU = "imu"
    MAGNETIC_SENSOR = "magnetic_sensor"
    CURRENT_SENSOR = "current_sensor"

    # Electromechanical
    CONNECTOR = "connector"

    # Manufacturer-qualified
    OPAMP_TI = "opamp_ti"
    VOLTAGE_REGULATOR_LINEAR_TI = "voltage_regulator_linear_ti"
    VOLTAGE_REGULATOR_SWITCHING_TI = "voltage_regulator_switching_ti"
    VOLTAGE_REFERENCE_TI = "voltage_reference_ti"
    TEMPERATURE_SENSOR_TI = "temperature_sensor_ti"
    MICROCONTROLLER_TI = "microcontroller_ti"
    LOGIC_IC_TI = "logic_ic_ti"

    MICROCONTROLLER_ST = "microcontroller_st"
    MOSFET_ST = "mosfet_st"
    VOLTAGE_REGULATOR_LINEAR_ST = "voltage_regulator_linear_st"
    MEMORY_EEPROM_ST = "memory_eeprom_st"
    ACCELEROMETER_ST = "accelerometer_st"

    VOLTAGE_REGULATOR_LINEAR_ON = "voltage_regulator_linear_on"
    MOSFET_ON = "mosfet_on"
    DIODE_ON = "diode_on"
    TRANSISTOR_ON = "transistor_on"
    LOGIC_IC_ON = "logic_ic_on"

    MICROCONTROLLER_MICROCHIP = "microcontroller_microchip"
    MEMORY_EEPROM_MICROCHIP = "memory_eeprom_microchip"
    OPAMP_MICROCHIP = "opamp_microchip"

    MICROCONTROLLER_ATMEL = "microcontroller_atmel"
    MEMORY_EEPROM_ATMEL = "memory_eeprom_atmel"

    MICROCONTROLLER_NXP = "microcontroller_nxp"
    MICROCONTROLLER_INFINEON = "microcontroller_infineon"
    MOSFET_INFINEON = "mosfet_infineon"

    RESISTOR_CHIP_VISHAY = "resistor_chip_vishay"
    DIODE_VISHAY = "diode_vishay"
    MOSFET_VISHAY = "mosfet_vishay"

    RESISTOR_CHIP_YAGEO = "resistor_chip_yageo"
    CAPACITOR_CERAMIC_YAGEO = "capacitor_ceramic_yageo"
    RESISTOR_CHIP_PANASONIC = "resistor_chip_panasonic"
    CAPACITOR_ELECTROLYTIC_PANASONIC = "capacitor_electrolytic_panasonic"
    CAPACITOR_CERAMIC_MURATA = "capacitor_ceramic_murata"
    INDUCTOR_MURATA = "inductor_murata"
    FERRITE_BEAD_MURATA = "ferrite_bead_murata"
    CAPACITOR_CERAMIC_TDK = "capacitor_ceramic_tdk"
    INDUCTOR_TDK = "inductor_tdk"
    CAPACITOR_CERAMIC_SAMSUNG = "capacitor_ceramic_samsung"
    CAPACITOR_CERAMIC_KEMET = "capacitor_ceramic_kemet"

    MICROCONTROLLER_ESPRESSIF = "microcontroller_espressif"
    MICROCONTROLLER_NORDIC = "microcontroller_nordic"

    MEMORY_FLASH_WINBOND = "memory_flash_winbond"
    MEMORY_FLASH_MACRONIX = "memory_flash_macronix"
    MEMORY_FLASH_MICRON = "memory_flash_micron"
    MEMORY_FLASH_ISSI = "memory_flash_issi"

    OPAMP_ADI = "opamp_adi"
    ACCELEROMETER_ADI = "accelerometer_adi"
    TEMPERATURE_SENSOR_MAXIM = "temperature_sensor_maxim"
    INTERFACE_IC_MAXIM = "interface_ic_maxim"

    TRANSISTOR_NEXPERIA = "transistor_nexperia"
    MOSFET_NEXPERIA = "mosfet_nexperia"
    LOGIC_IC_NEXPERIA = "logic_ic_nexperia"
    DIODE_DIODES_INC = "diode_diodes_inc"
    MOSFET_DIODES_INC = "mosfet_diodes_inc"

    PRESSURE_SENSOR_BOSCH = "pressure_sensor_bosch"
    HUMIDITY_SENSOR_SENSIRION = "humidity_sensor_sensirion"
    IMU_INVENSENSE = "imu_invensense"
    MAGNETIC_SENSOR_ALLEGRO = "magnetic_sensor_allegro"
    CURRENT_SENSOR_ALLEGRO = "current_sensor_allegro"

    CONNECTOR_MOLEX = "connector_molex"
    CONNECTOR_TE = "connector_te"
    CONNECTOR_JST = "connector_jst"
    CONNECTOR_HIROSE = "connector_hirose"
    CONNECTOR_WURTH = "connector_wurth"

    LED_OSRAM = "led_osram"
    LED_CREE = "led_cree"
    LED_KINGBRIGHT = "led_kingbright"

    CRYSTAL_EPSON = "crystal_epson"
    OSCILLATOR_EPSON = "oscillator_epson"
    CRYSTAL_ABRACON = "crystal_abracon"


CT = ComponentType


# =============================================================================
# TIER TABLES
# =============================================================================

GENERIC_TYPES = frozenset({CT.UNCLASSIFIED})

CATEGORY_TYPES = frozenset({CT.IC, CT.ANALOG_IC, CT.DIGITAL_IC, CT.SENSOR})

# Concrete functional types. Most are roots (their own parent); sub-families point
# at the functional type or category they refine.
FUNCTIONAL_PARENTS: dict[ComponentType, ComponentType] = {
    CT.RESISTOR: CT.RESISTOR,
    CT.CAPACITOR: CT.CAPACITOR,
    CT.INDUCTOR: CT.INDUCTOR,
    CT.FERRITE_BEAD: CT.FERRITE_BEAD,
    CT.CRYSTAL: CT.CRYSTAL,
    CT.OSCILLATOR: CT.OSCILLATOR,
    CT.FUSE: CT.FUSE,
    CT.DIODE: CT.DIODE,
    CT.TVS_DIODE: CT.DIODE,
    CT.TRANSISTOR: CT.TRANSISTOR,
    CT.MOSFET: CT.MOSFET,
    CT.LED: CT.LED,
    CT.OPTOCOUPLER: CT.OPTOCOUPLER,
    CT.MICROCONTROLLER: CT.MICROCONTROLLER,
    CT.OPAMP: CT.OPAMP,
    CT.VOLTAGE_REGULATOR: CT.VOLTAGE_REGULATOR,
    CT.VOLTAGE_REFERENCE: CT.VOLTAGE_REFERENCE,
    CT.MEMORY: CT.MEMORY,
    CT.MEMORY_FLASH: CT.MEMORY,
    CT.MEMORY_EEPROM: CT.MEMORY,
    CT.LOGIC_IC: CT.LOGIC_IC,
    CT.INTERFACE_IC: CT.INTERFACE_IC,
    CT.MOTOR_DRIVER: CT.MOTOR_DRIVER,
    CT.TEMPERATURE_SENSOR: CT.SENSOR,
    CT.HUMIDITY_SENSOR: CT.SENSOR,
    CT.PRESSURE_SENSOR: CT.SENSOR,
    CT.ACCELEROMETER: CT.SENSOR,
    CT.GYROSCOPE: CT.SENSOR,
    CT.IMU: CT.SENSOR,
    CT.MAGNETIC_SENSOR: CT.SENSOR,
    CT.CURRENT_SENSOR: CT.SENSOR,
    CT.CONNECTOR: CT.CONNECTOR,
}

QUALIFIED_PARENTS: dict[ComponentType, ComponentType] = {
    CT.OPAMP_TI: CT.OPAMP,
    CT.VOLTAGE_REGULATOR_LINEAR_TI: CT.VOLTAGE_REGULATOR,
    CT.VOLTAGE_REGULATOR_SWITCHING_TI: CT.VOLTAGE_REGULATOR,
    CT.VOLTAGE_REFERENCE_TI: CT.VOLTAGE_REFERENCE,
    CT.TEMPERATURE_SENSOR_TI: CT.TEMPERATURE_SENSOR,
    CT.MICROCONTROLLER_TI: CT.MICROCONTROLLER,
    CT.LOGIC_IC_TI: CT.LOGIC_IC,
    CT.MICROCONTROLLER_ST: CT.MICROCONTROLLER,
    CT.MOSFET_ST: CT.MOSFET,
    CT.VOLTAGE_REGULATOR_LINEAR_ST: CT.VOLTAGE_REGULATOR,
    CT.MEMORY_EEPROM_ST: CT.MEMORY_EEPROM,
    CT.ACCELEROMETER_ST: CT.ACCELEROMETER,
    CT.VOLTAGE_REGULATOR_LINEAR_ON: CT.VOLTAGE_REGULATOR,
    CT.MOSFET_ON: CT.MOSFET,
    CT.DIODE_ON: CT.DIODE,
    CT.TRANSISTOR_ON: CT.TRANSISTOR,
    CT.LOGIC_IC_ON: CT.LOGIC_IC,
    CT.MICROCONTROLLER_MICROCHIP: CT.MICROCONTROLLER,
    CT.MEMORY_EEPROM_MICROCHIP: CT.MEMORY_EEPROM,
    CT.OPAMP_MICROCHIP: CT.OPAMP,
    CT.MICROCONTROLLER_ATMEL: CT.MICROCONTROLLER,
    CT.MEMORY_EEPROM_ATMEL: CT.MEMORY_EEPROM,
    CT.MICROCONTROLLER_NXP: CT.MICROCONTROLLER,
    CT.MICROCONTROLLER_INFINEON: CT.MICROCONTROLLER,
    CT.MOSFET_INFINEON: CT.MOSFET,
    CT.RESISTOR_CHIP_VISHAY: CT.RESISTOR,
    CT.DIODE_VISHAY: CT.DIODE,
    CT.MOSFET_VISHAY: CT.MOSFET,
    CT.RESISTOR_CHIP_YAGEO: CT.RESISTOR,
    CT.CAPACITOR_CERAMIC_YAGEO: CT.CAPACITOR,
    CT.RESISTOR_CHIP_PANASONIC: CT.RESISTOR,
    CT.CAPACITOR_ELECTROLYTIC_PANASONIC: CT.CAPACITOR,
    CT.CAPACITOR_CERAMIC_MURATA: CT.CAPACITOR,
    CT.INDUCTOR_MURATA: CT.INDUCTOR,
    CT.FERRITE_BEAD_MURATA: CT.FERRITE_BEAD,
    CT.CAPACITOR_CERAMIC_TDK: CT.CAPACITOR,
    CT.INDUCTOR_TDK: CT.INDUCTOR,
    CT.CAPACITOR_CERAMIC_SAMSUNG: CT.CAPACITOR,
    CT.CAPACITOR_CERAMIC_KEMET: CT.CAPACITOR,
    CT.MICROCONTROLLER_ESPRESSIF: CT.MICROCONTROLLER,
    CT.MICROCONTROLLER_NORDIC: CT.MICROCONTROLLER,
    CT.MEMORY_FLASH_WINBOND: CT.MEMORY_FLASH,
    CT.MEMORY_FLASH_MACRONIX: CT.MEMORY_FLASH,
    CT.MEMORY_FLASH_MICRON: CT.MEMORY_FLASH,
    CT.MEMORY_FLASH_ISSI: CT.MEMORY_FLASH,
    CT.OPAMP_ADI: CT.OPAMP,
    CT.ACCELEROMETER_ADI: CT.ACCELEROMETER,
    CT.TEMPERATURE_SENSOR_MAXIM: CT.TEMPERATURE_SENSOR,
    CT.INTERFACE_IC_MAXIM: CT.INTERFACE_IC,
    CT.TRANSISTOR_NEXPERIA: CT.TRANSISTOR,
    CT.MOSFET_NEXPERIA: CT.MOSFET,
    CT.LOGIC_IC_NEXPERIA: CT.LOGIC_IC,
    CT.DIODE_DIODES_INC: CT.DIODE,
    CT.MOSFET_DIODES_INC: CT.MOSFET,
    CT.PRESSURE_SENSOR_BOSCH: CT.PRESSURE_SENSOR,
    CT.HUMIDITY_SENSOR_SENSIRION: CT.HUMIDITY_SENSOR,
    CT.IMU_INVENSENSE: CT.IMU,
    CT.MAGNETIC_SENSOR_ALLEGRO: CT.MAGNETIC_SENSOR,
    CT.CURRENT_SENSOR_ALLEGRO: CT.CURRENT_SENSOR,
    CT.CONNECTOR_MOLEX: CT.CONNECTOR,
    CT.CONNECTOR_TE: CT.CONNECTOR,
    CT.CONNECTOR_JST: CT.CONNECTOR,
    CT.CONNECTOR_HIROSE: CT.CONNECTOR,
    CT.CONNECTOR_WURTH: CT.CONNECTOR,
    CT.LED_OSRAM: CT.LED,
    CT.LED_CREE: CT.LED,
    CT.LED_KINGBRIGHT: CT.LED,
    CT.CRYSTAL_EPSON: CT.CRYSTAL,
    CT.OSCILLATOR_EPSON: CT.OSCILLATOR,
    CT.CRYSTAL_ABRACON: CT.CRYSTAL,
}

PASSIVE_FAMILIES = frozenset({
    CT.RESISTOR, CT.CAPACITOR, CT.INDUCTOR, CT.FERRITE_BEAD,
    CT.CRYSTAL, CT.OSCILLATOR, CT.FUSE,
})

# Roots that are neither passive nor semiconductor
_NON_SEMICONDUCTOR_ROOTS = frozenset({CT.CONNECTOR, CT.UNCLASSIFIED})


# =============================================================================
# VALIDATION
# =============================================================================


def validate_taxonomy(
    members: Iterable[Enum] = ComponentType,
    generic: frozenset = GENERIC_TYPES,
    categories: frozenset = CATEGORY_TYPES,
    functional: Mapping = FUNCTIONAL_PARENTS,
    qualified: Mapping = QUALIFIED_PARENTS,
) -> dict:
    """Check the tier tables and return the complete parent mapping.

    Raises:
        TaxonomyError: if any member is unmapped or mapped twice, a qualified type
            is its own parent, a parent is not a declared member, or a parent walk
            does not reach a fixed point.
    """
    members = list(members)
    declared = set(members)
    parents: dict = {}

    tiers = [
        ("generic", {t: t for t in generic}),
        ("category", {t: t for t in categories}),
        ("functional", dict(functional)),
        ("qualified", dict(qualified)),
    ]
    seen_in: dict = {}
    for tier_name, table in tiers:
        for member, parent in table.items():
            if member in seen_in:
                raise TaxonomyError(f"{member.name} listed as both {seen_in[member]} and {tier_name}")
            if member not in declared:
                raise TaxonomyError(f"{tier_name} table references undeclared type {member!r}")
            if parent not in declared:
                raise TaxonomyError(f"{member.name} has undeclared parent {parent!r}")
            seen_in[member] = tier_name
            parents[member] = parent

    missing = [m.name for m in members if m not in parents]
    if missing:
        raise TaxonomyError(f"Types without a parent mapping: {', '.join(missing)}")

    for member, parent in qualified.items():
        if parent == member:
            raise TaxonomyError(f"Qualified type {member.name} cannot be its own parent")
        if parent in generic or parent in categories:
            raise TaxonomyError(f"Qualified type {member.name} must refine a functional type")

    for member, parent in functional.items():
        if parent in qualified or parent in generic:
            raise TaxonomyError(f"Functional type {member.name} has non-functional parent {parent.name}")

    limit = len(members)
    for member in members:
        current = member
        for _ in range(limit + 1):
            nxt = parents[current]
            if nxt == current:
                break
            current = nxt
        else:
            raise TaxonomyError(f"Parent walk from {member.name} does not reach a fixed point")

    return parents


PARENTS: dict[ComponentType, ComponentType] = validate_taxonomy()

_SPECIFICITY: dict[ComponentType, int] = {
    **{t: 1 for t in GENERIC_TYPES},
    **{t: 2 for t in CATEGORY_TYPES},
    **{t: 3 for t in FUNCTIONAL_PARENTS},
    **{t: 4 for t in QUALIFIED_PARENTS},
}


# =============================================================================
# QUERIES
# =============================================================================


def parent_of(component_type: ComponentType) -> ComponentType:
    """One step up the taxonomy (a root returns itself)."""
    return PARENTS[component_type]


def ancestors(component_type: ComponentType) -> tuple[ComponentType, ...]:
    """Strict ancestors, nearest first. Roots have none."""
    chain = []
    current = component_type
    while PARENTS[current] != current:
        current = PARENTS[current]
        chain.append(current)
    return tuple(chain)


def base_type(component_type: ComponentType) -> ComponentType:
    """Fixed point of the parent walk (the least specific related type)."""
    chain = ancestors(component_type)
    return chain[-1] if chain else component_type


def family_of(component_type: ComponentType) -> ComponentType:
    """First non-qualified type on the walk: OPAMP_TI -> OPAMP, OPAMP -> OPAMP."""
    current = component_type
    while current in QUALIFIED_PARENTS:
        current = QUALIFIED_PARENTS[current]
    return current


def specificity(component_type: ComponentType) -> int:
    """4 = manufacturer-qualified, 3 = functional, 2 = category, 1 = unclassified."""
    return _SPECIFICITY[component_type]


def is_qualified(component_type: ComponentType) -> bool:
    return component_type in QUALIFIED_PARENTS


def is_passive(component_type: ComponentType) -> bool:
    return base_type(component_type) in PASSIVE_FAMILIES


def is_semiconductor(component_type: ComponentType) -> bool:
    root = base_type(component_type)
    return root not in PASSIVE_FAMILIES and root not in _NON_SEMICONDUCTOR_ROOTS
