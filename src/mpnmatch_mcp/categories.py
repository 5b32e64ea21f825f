"""Component category tags and their base-category hierarchy.

Categories are plain lowercase strings. Every tag is either a base category
or a specialization of exactly one base category (hierarchy depth is at most 2).
"""

# =============================================================================
# BASE CATEGORIES
# =============================================================================

RESISTOR = "resistor"
CAPACITOR = "capacitor"
INDUCTOR = "inductor"
DIODE = "diode"
TRANSISTOR = "transistor"
MOSFET = "mosfet"
IGBT = "igbt"
IC = "ic"
MICROCONTROLLER = "microcontroller"
MEMORY = "memory"
VOLTAGE_REGULATOR = "voltage_regulator"
OPAMP = "opamp"
LOGIC_IC = "logic_ic"
GATE_DRIVER = "gate_driver"
INTERFACE_IC = "interface_ic"
SENSOR = "sensor"
LED = "led"
LED_DRIVER = "led_driver"
CONNECTOR = "connector"
CRYSTAL = "crystal"
OSCILLATOR = "oscillator"
RF_MODULE = "rf_module"

BASE_TAGS = frozenset({
    RESISTOR, CAPACITOR, INDUCTOR, DIODE, TRANSISTOR, MOSFET, IGBT,
    IC, MICROCONTROLLER, MEMORY, VOLTAGE_REGULATOR, OPAMP, LOGIC_IC,
    GATE_DRIVER, INTERFACE_IC, SENSOR, LED, LED_DRIVER, CONNECTOR,
    CRYSTAL, OSCILLATOR, RF_MODULE,
})

# =============================================================================
# SPECIALIZATIONS
# =============================================================================

RESISTOR_CHIP = "resistor_chip"
RESISTOR_CURRENT_SENSE = "resistor_current_sense"
CAPACITOR_CERAMIC = "capacitor_ceramic"
CAPACITOR_ELECTROLYTIC = "capacitor_electrolytic"
CAPACITOR_FILM = "capacitor_film"
CAPACITOR_TANTALUM = "capacitor_tantalum"
INDUCTOR_POWER = "inductor_power"
INDUCTOR_RF = "inductor_rf"
DIODE_RECTIFIER = "diode_rectifier"
DIODE_SMALL_SIGNAL = "diode_small_signal"
DIODE_SCHOTTKY = "diode_schottky"
DIODE_ZENER = "diode_zener"
DIODE_TVS = "diode_tvs"
TRANSISTOR_BJT = "transistor_bjt"
MOSFET_POWER = "mosfet_power"
MCU_ARM = "mcu_arm"
MCU_8BIT = "mcu_8bit"
MCU_WIRELESS = "mcu_wireless"
MEMORY_FLASH = "memory_flash"
MEMORY_EEPROM = "memory_eeprom"
MEMORY_DRAM = "memory_dram"
REGULATOR_LINEAR = "regulator_linear"
REGULATOR_SWITCHING = "regulator_switching"
SENSOR_COLOR = "sensor_color"
SENSOR_PROXIMITY = "sensor_proximity"
SENSOR_HUMIDITY = "sensor_humidity"
SENSOR_TEMPERATURE = "sensor_temperature"
SENSOR_PRESSURE = "sensor_pressure"
SENSOR_MOTION = "sensor_motion"
SENSOR_MAGNETIC = "sensor_magnetic"
SENSOR_GAS = "sensor_gas"
LED_HIGH_POWER = "led_high_power"
CONNECTOR_HEADER = "connector_header"
CONNECTOR_WIRE_TO_BOARD = "connector_wire_to_board"
WIFI_MODULE = "wifi_module"

# Specialization -> base category
BASE_CATEGORIES: dict[str, str] = {
    RESISTOR_CHIP: RESISTOR,
    RESISTOR_CURRENT_SENSE: RESISTOR,
    CAPACITOR_CERAMIC: CAPACITOR,
    CAPACITOR_ELECTROLYTIC: CAPACITOR,
    CAPACITOR_FILM: CAPACITOR,
    CAPACITOR_TANTALUM: CAPACITOR,
    INDUCTOR_POWER: INDUCTOR,
    INDUCTOR_RF: INDUCTOR,
    DIODE_RECTIFIER: DIODE,
    DIODE_SMALL_SIGNAL: DIODE,
    DIODE_SCHOTTKY: DIODE,
    DIODE_ZENER: DIODE,
    DIODE_TVS: DIODE,
    TRANSISTOR_BJT: TRANSISTOR,
    MOSFET_POWER: MOSFET,
    MCU_ARM: MICROCONTROLLER,
    MCU_8BIT: MICROCONTROLLER,
    MCU_WIRELESS: MICROCONTROLLER,
    MEMORY_FLASH: MEMORY,
    MEMORY_EEPROM: MEMORY,
    MEMORY_DRAM: MEMORY,
    REGULATOR_LINEAR: VOLTAGE_REGULATOR,
    REGULATOR_SWITCHING: VOLTAGE_REGULATOR,
    SENSOR_COLOR: SENSOR,
    SENSOR_PROXIMITY: SENSOR,
    SENSOR_HUMIDITY: SENSOR,
    SENSOR_TEMPERATURE: SENSOR,
    SENSOR_PRESSURE: SENSOR,
    SENSOR_MOTION: SENSOR,
    SENSOR_MAGNETIC: SENSOR,
    SENSOR_GAS: SENSOR,
    LED_HIGH_POWER: LED,
    CONNECTOR_HEADER: CONNECTOR,
    CONNECTOR_WIRE_TO_BOARD: CONNECTOR,
    WIFI_MODULE: RF_MODULE,
}

CATEGORIES = BASE_TAGS | frozenset(BASE_CATEGORIES)


def base_category(category: str) -> str:
    """Return the base category a tag specializes (a base tag maps to itself).

    Raises:
        ValueError: If the tag is not a known category.
    """
    if category in BASE_TAGS:
        return category
    try:
        return BASE_CATEGORIES[category]
    except KeyError:
        raise ValueError(f"Unknown category: {category!r}") from None


def is_specialization(category: str) -> bool:
    return base_category(category) != category


def validate_category(category: str | None) -> str:
    """Reject None and unknown tags before they reach a registry."""
    if category is None:
        raise ValueError("Category must not be None")
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}")
    return category
