"""Manufacturer aliases and MPN vendor indicators.

Maps abbreviations and alternate names to directory ids. Keys are lowercase
for case-insensitive lookup.

NOTE: Only include TRUE aliases here (abbreviations, alternate names).
Directory ids ("AMS") and display names ("ams-OSRAM") resolve automatically
in get_manufacturer().
"""

MANUFACTURER_ALIASES: dict[str, str] = {
    # Major semiconductor companies
    "ti": "TI",
    "texas": "TI",
    "texas instruments inc": "TI",
    "national semiconductor": "TI",
    "burr-brown": "TI",
    "stm": "ST",
    "stmicro": "ST",
    "st micro": "ST",
    "nxp semicon": "NXP",
    "freescale": "NXP",
    "philips": "NXP",
    "microchip": "MICROCHIP",
    "microchip tech": "MICROCHIP",
    "adi": "ANALOG_DEVICES",
    "analog": "ANALOG_DEVICES",
    "linear technology": "ANALOG_DEVICES",
    "linear tech": "ANALOG_DEVICES",
    "maxim": "MAXIM",
    "onsemi": "ON_SEMI",
    "on semi": "ON_SEMI",
    "on semiconductor": "ON_SEMI",
    "infineon": "INFINEON",
    "international rectifier": "INFINEON",
    "renesas": "RENESAS",
    "intersil": "RENESAS",
    "idt": "RENESAS",
    "rohm": "ROHM",
    "rohm semicon": "ROHM",
    "vishay intertech": "VISHAY",
    "vishay siliconix": "VISHAY",
    "diodes": "DIODES_INC",
    "diodes inc": "DIODES_INC",
    "aos": "ALPHA_OMEGA",
    "alpha & omega semicon": "ALPHA_OMEGA",
    "avago": "BROADCOM",
    "cypress": "CYPRESS",
    "silabs": "SILICON_LABS",
    "silicon laboratories": "SILICON_LABS",
    "toshiba": "TOSHIBA",
    # Chinese manufacturers
    "gigadevice": "GIGADEVICE",
    "gigadevice semicon beijing": "GIGADEVICE",
    "gd": "GIGADEVICE",
    "wch": "WCH",
    "wch(jiangsu qin heng)": "WCH",
    "nanjing qinheng": "WCH",
    "3peak": "THREE_PEAK",
    "sg micro": "SGMICRO",
    "puya": "PUYA",
    "xmc": "XMC",
    "wuhan xinxin": "XMC",
    "yangjie": "YANGJIE",
    "yangzhou yangjie": "YANGJIE",
    "sunlord": "SUNLORD",
    "artery": "ARTERY",
    # Optoelectronics / LEDs
    "ams": "AMS",
    "ams osram": "AMS",
    "ams ag": "AMS",
    "austriamicrosystems": "AMS",
    "osram opto semicon": "OSRAM",
    "osram opto": "OSRAM",
    "cree led": "CREE",
    "everlight": "EVERLIGHT",
    "everlight elec": "EVERLIGHT",
    "seoul": "SEOUL_SEMI",
    # Passives
    "murata": "MURATA",
    "murata electronics": "MURATA",
    "tdk": "TDK",
    "samsung": "SAMSUNG",
    "semco": "SAMSUNG",
    "kemet": "KEMET",
    "avx": "AVX",
    "kyocera avx": "AVX",
    "wurth": "WURTH",
    "wurth elektronik": "WURTH",
    "we": "WURTH",
    "chemi-con": "NIPPON_CHEMICON",
    "ncc": "NIPPON_CHEMICON",
    # Connectors
    "te": "TE",
    "tyco": "TE",
    "tyco electronics": "TE",
    "amp": "TE",
    "hirose": "HIROSE",
    "jae": "JAE",
    "phoenix": "PHOENIX_CONTACT",
    "amphenol icc": "AMPHENOL",
    # Crystals / Oscillators
    "seiko epson": "EPSON",
    "epson toyocom": "EPSON",
    "nihon dempa kogyo": "NDK",
    "daishinku": "KDS",
    # MCU/SoC
    "espressif": "ESPRESSIF",
    "nordic": "NORDIC",
    "nordic semicon": "NORDIC",
    "nuvoton": "NUVOTON",
    "nuvoton tech": "NUVOTON",
    "holtek": "HOLTEK",
    # Memory
    "winbond": "WINBOND",
    "winbond elec": "WINBOND",
    "micron": "MICRON",
    "micron tech": "MICRON",
    "mxic": "MACRONIX",
    "integrated silicon solution": "ISSI",
    # Power
    "mps": "MPS",
    "monolithic power": "MPS",
    "richtek tech": "RICHTEK",
    "torex semicon": "TOREX",
    "seiko instruments": "ABLIC",
    "power integrations inc": "POWER_INTEGRATIONS",
    "pi": "POWER_INTEGRATIONS",
    "mean well": "MEAN_WELL",
    "meanwell": "MEAN_WELL",
    # Sensors
    "bosch": "BOSCH",
    "tdk invensense": "INVSENSE",
    "invensense": "INVSENSE",
    "allegro": "ALLEGRO",
    "allegro microsystems, llc": "ALLEGRO",
    "honeywell": "HONEYWELL",
    "omron electronics": "OMRON",
    # Interface / Audio
    "ftdi chip": "FTDI",
    "future technology devices": "FTDI",
    "cirrus": "CIRRUS_LOGIC",
    "ess tech": "ESS",
    # Circuit Protection
    "littelfuse inc": "LITTELFUSE",
    "protek": "PROTEK_DEVICES",
}

# Vendor tokens some distributors append to MPNs ("LM358-TI", "BAT54-ON")
INDICATOR_TOKENS: dict[str, str] = {
    "ST": "ST",
    "TI": "TI",
    "NXP": "NXP",
    "INF": "INFINEON",
    "ON": "ON_SEMI",
    "VISHAY": "VISHAY",
}
