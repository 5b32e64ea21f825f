"""Declarative rule data for manufacturers without custom extraction logic.

Each entry is passed to RuleSet(**entry) (or a RuleSet subclass) by the
manufacturer directory. Keys:

    patterns: category -> full-match regex strings (case-insensitive)
    series_prefixes: known series identifiers (optional)
    package_codes: manufacturer suffix -> package (optional, checked before the standard map)
    compatible_series: groups of interchangeable series (optional)
"""

from .. import categories as cat

RULE_TABLES: dict[str, dict] = {
    # =========================================================================
    # MICROCONTROLLERS / DIGITAL
    # =========================================================================
    "MICROCHIP": {
        "patterns": {
            cat.MCU_8BIT: (
                r"^PIC1[0268]L?F[0-9].*",
            ),
            cat.MICROCONTROLLER: (
                r"^PIC24(?:EP|FJ|HJ|F[0-9]).*",
                r"^PIC32M[XZK].*",
                r"^DSPIC[0-9]{2}.*",
            ),
            cat.MEMORY_EEPROM: (
                r"^2[45](?:AA|LC|FC)[0-9].*",
                r"^93[AL]C[0-9].*",
            ),
            cat.INTERFACE_IC: (
                r"^MCP2(?:200|221|515|517|518|551|561|562).*",
            ),
            cat.IC: (
                r"^MCP[0-9]{3,4}.*",
            ),
        },
        "package_codes": {
            "P": "PDIP", "SN": "SOIC", "SO": "SOIC", "SL": "SOIC", "ST": "TSSOP",
            "SS": "SSOP", "ML": "QFN", "MF": "DFN", "PT": "TQFP", "OT": "SOT-23",
        },
    },
    "ST": {
        "patterns": {
            cat.MCU_ARM: (
                r"^STM32[FLHGWU][0-9].*",
            ),
            cat.MCU_8BIT: (
                r"^STM8[SLA].*",
            ),
            cat.MOSFET_POWER: (
                r"^ST[FPDBW][0-9].*",
            ),
            cat.REGULATOR_LINEAR: (
                r"^L7[89][0-9]{2}.*",
                r"^LD1117.*",
                r"^LD39[0-9]{3}.*",
            ),
            cat.OPAMP: (
                r"^TS(?:V|X)?[0-9]{3,4}.*",
            ),
            cat.SENSOR_MOTION: (
                r"^LIS[0-9]DH.*",
                r"^LSM[0-9]{1,3}.*",
            ),
        },
        "package_codes": {
            "CV": "TO-220", "V": "TO-220", "CP": "TO-220FP", "P": "TO-220FP",
            "CD2T": "D2PAK", "D2T": "D2PAK", "CDT": "DPAK", "DT": "DPAK",
        },
    },
    "ATMEL": {
        "patterns": {
            cat.MCU_8BIT: (
                r"^ATMEGA[0-9].*",
                r"^ATTINY[0-9].*",
                r"^AT90[A-Z][0-9].*",
                r"^ATXMEGA[0-9].*",
            ),
            cat.MCU_ARM: (
                r"^ATSAM[A-Z0-9].*",
            ),
            cat.MEMORY_EEPROM: (
                r"^AT24C[0-9].*",
                r"^AT25[A-Z]?[0-9].*",
            ),
            cat.IC: (
                r"^AT42QT[0-9].*",
                r"^ATECC[0-9].*",
                r"^ATSHA[0-9].*",
            ),
        },
        "package_codes": {
            "PU": "PDIP", "AU": "TQFP", "MU": "QFN", "CU": "WLCSP",
            "SU": "SOIC", "XU": "TSSOP", "SSU": "SOIC", "SSHR": "SOIC",
        },
    },
    "TI": {
        "patterns": {
            cat.OPAMP: (
                r"^LM(?:358|324|741|2904|2902|833)[A-Z0-9-]*",
                r"^TL0[678][0-9][A-Z0-9-]*",
                r"^OPA[0-9]{3,4}.*",
                r"^TLV[0-9]{3,4}.*",
            ),
            cat.REGULATOR_LINEAR: (
                r"^(?:LM|UA)78[0-9]{2}.*",
                r"^(?:LM|UA)79[0-9]{2}.*",
                r"^LM317.*",
                r"^LM1117.*",
                r"^TPS7[0-9A-Z].*",
            ),
            cat.REGULATOR_SWITCHING: (
                r"^TPS5[0-9]{4}.*",
                r"^TPS6[0-9]{4}.*",
                r"^LM2596.*",
                r"^LMR[0-9]{5}.*",
            ),
            cat.SENSOR_TEMPERATURE: (
                r"^LM35[A-D].*",
                r"^TMP[0-9]{2,3}.*",
            ),
            cat.MICROCONTROLLER: (
                r"^MSP430[A-Z0-9]+.*",
                r"^TMS320.*",
            ),
            cat.MCU_WIRELESS: (
                r"^CC[0-9]{4}.*",
            ),
            cat.LOGIC_IC: (
                r"^SN74[A-Z]*[0-9]+.*",
            ),
        },
    },
    "NXP": {
        "patterns": {
            cat.MCU_ARM: (
                r"^LPC[0-9]+.*",
                r"^MK[0-9]+.*",
                r"^S32K[0-9]+.*",
                r"^MCIMX[0-9]+.*",
            ),
            cat.MOSFET: (
                r"^BUK[0-9]+.*",
                r"^PSMN[0-9]+.*",
                r"^PMV[0-9]+.*",
            ),
            cat.TRANSISTOR_BJT: (
                r"^PN(?:2222|2907|3904|3906|4401).*",
            ),
            cat.SENSOR_PRESSURE: (
                r"^MPX[AV]?[0-9].*",
            ),
            cat.INTERFACE_IC: (
                r"^PCA[0-9]{4}.*",
                r"^TJA[0-9]{4}.*",
            ),
        },
    },
    "CYPRESS": {
        "patterns": {
            cat.MCU_ARM: (
                r"^CY8C[0-9].*",
            ),
            cat.INTERFACE_IC: (
                r"^CY7C6[0-9]{4}.*",
            ),
            cat.MEMORY: (
                r"^FM(?:24|25)[A-Z]?[0-9].*",
                r"^S25FL[0-9].*",
            ),
        },
    },
    "SILICON_LABS": {
        "patterns": {
            cat.MCU_WIRELESS: (
                r"^EFR32[A-Z]{2}[0-9].*",
                r"^BGM[0-9]{3}.*",
            ),
            cat.MCU_ARM: (
                r"^EFM32[A-Z]{2}[0-9].*",
                r"^EFM8[A-Z]{2}[0-9].*",
            ),
            cat.INTERFACE_IC: (
                r"^CP210[0-9].*",
            ),
            cat.SENSOR_HUMIDITY: (
                r"^SI70[0-9]{2}.*",
            ),
        },
    },
    "ESPRESSIF": {
        "patterns": {
            cat.MCU_WIRELESS: (
                r"^ESP8266.*",
                r"^ESP32[^-].*",
                r"^ESP32-[SCH][0-9].*",
            ),
            cat.WIFI_MODULE: (
                r"^ESP(?:32)?-WROOM-.*",
                r"^ESP(?:32)?-WROVER-.*",
                r"^ESP32-(?:MINI|PICO)-.*",
                r"^ESP-[0-9]{2}.*",
            ),
        },
        "series_prefixes": (
            "ESP8266", "ESP32-S2", "ESP32-S3", "ESP32-C3", "ESP32-C6", "ESP32-H2",
            "ESP32-WROOM", "ESP32-WROVER", "ESP-WROOM", "ESP32-MINI", "ESP32-PICO", "ESP32",
        ),
    },
    "NUVOTON": {
        "patterns": {
            cat.MCU_8BIT: (
                r"^N76E[0-9]{3}.*",
            ),
            cat.MCU_ARM: (
                r"^NUC[0-9]{3}.*",
                r"^M0[0-9]{2,3}[A-Z].*",
                r"^M4[0-9]{2,3}[A-Z].*",
            ),
        },
    },
    "WCH": {
        "patterns": {
            cat.INTERFACE_IC: (
                r"^CH3[0-9]{2}[A-Z]?.*",
            ),
            cat.MICROCONTROLLER: (
                r"^CH32[VF][0-9]{3}.*",
                r"^CH5[0-9]{2}.*",
            ),
        },
    },
    "RENESAS": {
        "patterns": {
            cat.MICROCONTROLLER: (
                r"^R5F[0-9A-Z]+.*",
                r"^R7F[0-9A-Z]+.*",
                r"^RA[0-9][A-Z][0-9].*",
                r"^RX[0-9]{3}.*",
            ),
        },
    },
    # =========================================================================
    # POWER / DISCRETES
    # =========================================================================
    "INFINEON": {
        "patterns": {
            cat.MOSFET_POWER: (
                r"^IRF[BPZSR]?[0-9].*",
                r"^IRL[A-Z]?[0-9].*",
                r"^BSC[0-9].*",
                r"^IPP[0-9].*",
                r"^IPD[0-9].*",
                r"^BSS[0-9].*",
            ),
            cat.IGBT: (
                r"^IK[PW][0-9].*",
            ),
            cat.GATE_DRIVER: (
                r"^IR[S2][0-9]{3,4}.*",
            ),
            cat.MCU_ARM: (
                r"^XMC[0-9].*",
            ),
            cat.REGULATOR_LINEAR: (
                r"^IFX[0-9].*",
                r"^TLE4[0-9]{3}.*",
            ),
            cat.LED_DRIVER: (
                r"^ILD[0-9].*",
                r"^BCR[0-9]{3}.*",
            ),
        },
    },
    "VISHAY": {
        "patterns": {
            cat.DIODE_RECTIFIER: (
                r"^1N400[1-7].*",
                r"^1N540[0-8].*",
                r"^UF[0-9].*",
                r"^BYV[0-9].*",
            ),
            cat.DIODE_SMALL_SIGNAL: (
                r"^1N4148.*",
                r"^1N914.*",
                r"^BAV[0-9].*",
                r"^BAS[0-9].*",
            ),
            cat.DIODE_SCHOTTKY: (
                r"^BAT[0-9].*",
                r"^1N58[0-9]{2}.*",
                r"^SS[0-9]{2}.*",
            ),
            cat.DIODE_ZENER: (
                r"^BZX[0-9].*",
                r"^1N47[0-9]{2}.*",
            ),
            cat.MOSFET_POWER: (
                r"^SI[0-9]{4}.*",
                r"^SI[BHRS][0-9A-Z]+.*",
                r"^SUD[0-9].*",
            ),
            cat.RESISTOR_CHIP: (
                r"^CRCW[0-9]{4}.*",
                r"^CRMA[0-9].*",
                r"^CRHV[0-9].*",
            ),
            cat.RESISTOR_CURRENT_SENSE: (
                r"^WSL[0-9].*",
                r"^WSK[0-9].*",
            ),
            cat.LED: (
                r"^VLM[A-Z]{1,3}[0-9].*",
                r"^TLH[A-Z][0-9].*",
            ),
            cat.SENSOR_PROXIMITY: (
                r"^VCNL[0-9]{4}.*",
            ),
        },
        "package_codes": {
            "E3": "DO-41", "TAP": "DO-41", "TR": "SOD-123",
        },
    },
    "ON_SEMI": {
        "patterns": {
            cat.DIODE_RECTIFIER: (
                r"^1N400[1-7].*",
                r"^MUR[0-9]+.*",
                r"^RHRP[0-9]+.*",
            ),
            cat.DIODE_ZENER: (
                r"^1N47[0-9]{2}[A-Z]?.*",
                r"^1N52[0-9]{2}[A-Z]?.*",
                r"^MMSZ[0-9].*",
            ),
            cat.DIODE_SCHOTTKY: (
                r"^MBRS?[0-9]+.*",
            ),
            cat.MOSFET_POWER: (
                r"^NT[DPBA][0-9]+.*",
                r"^FD[PSCD][0-9]+.*",
                r"^FQ[PNSD][0-9]+.*",
            ),
            cat.TRANSISTOR_BJT: (
                r"^MMBT[0-9]+.*",
                r"^2N[0-9]{4}.*",
            ),
            cat.OPAMP: (
                r"^MC(?:1458|324|741|33[0-9]{3}).*",
            ),
            cat.REGULATOR_LINEAR: (
                r"^MC78[0-9A-Z]+.*",
                r"^NCP1117.*",
                r"^NCV[0-9]+.*",
            ),
            cat.REGULATOR_SWITCHING: (
                r"^NCP[0-9]{4}.*",
                r"^FAN[0-9]{4}.*",
            ),
        },
    },
    "DIODES_INC": {
        "patterns": {
            cat.DIODE_RECTIFIER: (
                r"^1N400[1-7].*",
                r"^SBR[0-9].*",
            ),
            cat.DIODE_SMALL_SIGNAL: (
                r"^1N4148.*",
                r"^BAS[0-9].*",
                r"^BAV[0-9].*",
                r"^MMBD[0-9].*",
            ),
            cat.DIODE_ZENER: (
                r"^DDZ[0-9].*",
                r"^MMSZ[0-9].*",
                r"^BZX[0-9].*",
            ),
            cat.MOSFET: (
                r"^DM[NPG][0-9].*",
                r"^ZXM[NP][0-9].*",
            ),
            cat.TRANSISTOR_BJT: (
                r"^FMMT[0-9].*",
                r"^ZXT[0-9A-Z].*",
                r"^DT[AB][0-9].*",
            ),
            cat.VOLTAGE_REGULATOR: (
                r"^AP[0-9]{4}.*",
                r"^AZ[0-9]{4}.*",
                r"^PAM[0-9]{4}.*",
            ),
        },
    },
    "NEXPERIA": {
        "patterns": {
            cat.TRANSISTOR_BJT: (
                r"^PMBT[0-9]+.*",
                r"^PBSS[0-9]+.*",
                r"^BC8[45][0-9].*",
            ),
            cat.DIODE_ZENER: (
                r"^BZ[XV][0-9].*",
            ),
            cat.MOSFET: (
                r"^BSS[0-9]+.*",
                r"^2N7002.*",
            ),
            cat.LOGIC_IC: (
                r"^74(?:HC|HCT|LV|LVC|AHC|AUP)[0-9]+.*",
            ),
        },
    },
    "ROHM": {
        "patterns": {
            cat.VOLTAGE_REGULATOR: (
                r"^BD[0-9]{3,5}.*",
                r"^BA[0-9]{2,5}.*",
            ),
            cat.TRANSISTOR_BJT: (
                r"^2S[A-D][0-9]+.*",
            ),
            cat.RESISTOR_CHIP: (
                r"^MCR[0-9]{2}.*",
                r"^PMR[0-9]{2}.*",
            ),
        },
    },
    "TOSHIBA": {
        "patterns": {
            cat.IC: (
                r"^TLP[0-9]{3,4}.*",  # Photocouplers
                r"^TB[0-9]{4}.*",  # Motor drivers
            ),
            cat.MOSFET_POWER: (
                r"^TPH[0-9A-Z]+.*",
                r"^TPN[0-9A-Z]+.*",
                r"^TK[0-9]+[A-Z].*",
            ),
            cat.LOGIC_IC: (
                r"^TC74[A-Z0-9]+.*",
                r"^TC7S[A-Z0-9]+.*",
            ),
        },
    },
    "ANALOG_DEVICES": {
        "patterns": {
            cat.IC: (
                r"^AD[0-9]{3,4}.*",
                r"^ADG[0-9]{3,4}.*",
            ),
            cat.INTERFACE_IC: (
                r"^ADUM[0-9]{3,4}.*",
                r"^ADM[0-9]{3,4}.*",
            ),
            cat.REGULATOR_LINEAR: (
                r"^ADP[0-9]{3,4}.*",
                r"^LT[0-9]{4}.*",
            ),
            cat.REGULATOR_SWITCHING: (
                r"^LTC[0-9]{4}.*",
                r"^LTM[0-9]{4}.*",
            ),
            cat.OPAMP: (
                r"^ADA[0-9]{4}.*",
                r"^OP[0-9]{2,3}.*",
            ),
        },
    },
    "MAXIM": {
        "patterns": {
            cat.INTERFACE_IC: (
                r"^MAX3[0-9]{2}[A-Z0-9]*",
                r"^MAX48[0-9]{1,2}.*",
            ),
            cat.IC: (
                r"^MAX[0-9]{4,5}.*",
                r"^DS[0-9]{4}.*",
            ),
            cat.SENSOR_TEMPERATURE: (
                r"^DS18B20.*",
                r"^MAX3185[0-9].*",
                r"^MAX6675.*",
            ),
        },
    },
    "LOGIC_IC": {
        "patterns": {
            cat.LOGIC_IC: (
                r"^(?:74|54)[A-Z]{0,4}[0-9]{2,4}.*",
                r"^CD4[0-9]{3}.*",
            ),
        },
    },
    "LITTELFUSE": {
        "patterns": {
            cat.DIODE_TVS: (
                r"^SM[ABCD]J[0-9].*",
                r"^P[46]KE[0-9].*",
                r"^P4SMA[0-9].*",
                r"^P6SMB[0-9].*",
                r"^1\.?5KE[0-9].*",
            ),
            cat.IC: (
                r"^045[1-4][0-9.]+.*",  # Nano fuses
            ),
        },
    },
    # =========================================================================
    # PASSIVES
    # =========================================================================
    "YAGEO": {
        "patterns": {
            cat.RESISTOR_CHIP: (
                r"^RC[0-9]{4}.*",
                r"^RT[0-9]{4}.*",
                r"^RL[0-9]{4}.*",
                r"^AC[0-9]{4}.*",
            ),
            cat.CAPACITOR_CERAMIC: (
                r"^CC[0-9]{4}.*",
            ),
        },
    },
    "PANASONIC": {
        "patterns": {
            cat.RESISTOR_CHIP: (
                r"^ERJ[GP]?-?[0-9].*",
                r"^ERA-?[0-9].*",
            ),
            cat.CAPACITOR_ELECTROLYTIC: (
                r"^EE[EUV]-?[A-Z]{2}[0-9].*",
                r"^ECA-?[0-9].*",
            ),
            cat.CAPACITOR_FILM: (
                r"^ECQ-?[A-Z][0-9].*",
            ),
            cat.INDUCTOR_POWER: (
                r"^EL[CJ][A-Z0-9].*",
                r"^ETQ[A-Z0-9].*",
            ),
        },
    },
    "KEMET": {
        "patterns": {
            cat.CAPACITOR_CERAMIC: (
                r"^C[0-9]{4}C[0-9]{3}.*",
            ),
            cat.CAPACITOR_TANTALUM: (
                r"^T4[0-9]{2}[A-Z][0-9].*",
            ),
            cat.CAPACITOR_FILM: (
                r"^PHE[0-9]{3}.*",
            ),
        },
    },
    "MURATA": {
        "patterns": {
            cat.CAPACITOR_CERAMIC: (
                r"^GRM[0-9]{3}.*",
                r"^GCM[0-9]{3}.*",
                r"^GJM[0-9]{3}.*",
            ),
            cat.INDUCTOR_RF: (
                r"^LQG[0-9]{2}.*",
                r"^LQW[0-9]{2}.*",
            ),
            cat.INDUCTOR_POWER: (
                r"^LQM[0-9]{2}.*",
                r"^LQH[0-9]{2}.*",
                r"^DFE[0-9]{6}.*",
            ),
            cat.INDUCTOR: (
                r"^BLM[0-9]{2}.*",  # Ferrite beads
            ),
            cat.IC: (
                r"^NFM[0-9]{2}.*",  # EMI filters
                r"^DLW[0-9]{2}.*",  # Common mode chokes
            ),
        },
        "series_prefixes": (
            "GRM", "GCM", "GJM", "LQG", "LQW", "LQM", "LQH", "DFE", "BLM", "NFM", "DLW",
        ),
    },
    "TDK": {
        "patterns": {
            cat.CAPACITOR_CERAMIC: (
                r"^C[0-9]{4}X[0-9][A-Z].*",
                r"^CGA[0-9].*",
            ),
            cat.INDUCTOR_POWER: (
                r"^SPM[0-9]{4}.*",
                r"^VLS[0-9]{4}.*",
                r"^MLF[0-9]{4}.*",
            ),
            cat.INDUCTOR: (
                r"^MPZ[0-9]{4}.*",
                r"^MMZ[0-9]{4}.*",
            ),
        },
    },
    "SAMSUNG": {
        "patterns": {
            cat.CAPACITOR_CERAMIC: (
                r"^CL(?:02|03|05|10|21|31|32)[A-Z][0-9].*",
            ),
            cat.RESISTOR_CHIP: (
                r"^RC(?:1005|1608|2012|3216)[A-Z].*",
            ),
        },
    },
    "BOURNS": {
        "patterns": {
            cat.RESISTOR: (
                r"^CR[0-9]{4}-.*",
                r"^3296[A-Z]-.*",  # Trimmer potentiometers
                r"^3386[A-Z]-.*",
            ),
            cat.INDUCTOR_POWER: (
                r"^SRR[0-9]{4}.*",
                r"^SRN[0-9]{4}.*",
            ),
        },
    },
    "COILCRAFT": {
        "patterns": {
            cat.INDUCTOR_POWER: (
                r"^X[AEF]L[0-9]{4}.*",
                r"^LPS[0-9]{4}.*",
                r"^MSS[0-9]{4}.*",
            ),
            cat.INDUCTOR_RF: (
                r"^0[46]0[23]HP.*",
            ),
        },
    },
    # =========================================================================
    # CONNECTORS
    # =========================================================================
    "WURTH": {
        "patterns": {
            cat.CONNECTOR_HEADER: (
                r"^61[0-9]{8,10}",
                r"^62[0-9]{8,10}",
            ),
            cat.INDUCTOR_POWER: (
                r"^744[0-9]{5,6}.*",
            ),
            cat.LED: (
                r"^150[0-9]{9}.*",
            ),
        },
    },
    "MOLEX": {
        "patterns": {
            cat.CONNECTOR_WIRE_TO_BOARD: (
                r"^(?:43|53|55|67|87|88)[0-9]{4}(?:-[0-9]{4})?",
                r"^5055[0-9]{2}-[0-9]{4}",
            ),
        },
    },
    "TE": {
        "patterns": {
            cat.CONNECTOR: (
                r"^[12]-[0-9]{6,7}-[0-9]",
                r"^282[0-9]{3}-[0-9]",
            ),
        },
    },
    "JST": {
        "patterns": {
            cat.CONNECTOR_WIRE_TO_BOARD: (
                r"^[BS][0-9]{1,2}B-(?:PH|EH|XH|ZR|SH|GH)(?:-[A-Z]+)*.*",
                r"^(?:PH|EH|XH|ZH)R-[0-9]{1,2}.*",
                r"^SM[0-9]{2}B-[A-Z]{2,3}SS?-.*",
            ),
        },
    },
    "HIROSE": {
        "patterns": {
            cat.CONNECTOR: (
                r"^DF[0-9]{1,2}[A-Z]?-.*",
                r"^FH[0-9]{2}[A-Z]?-.*",
                r"^BM[0-9]{2}[A-Z]?-.*",
            ),
        },
    },
    # =========================================================================
    # OPTO / LED
    # =========================================================================
    "CREE": {
        "patterns": {
            cat.LED_HIGH_POWER: (
                r"^X[PLRTHQB][A-Z][0-9A-Z]+.*",
                r"^CLV[0-9A-Z]+.*",
            ),
        },
    },
    "OSRAM": {
        "patterns": {
            cat.LED: (
                r"^L[SAWYOB][A-Z][0-9A-Z]+.*",
                r"^LR[A-Z][0-9]+.*",
            ),
            cat.SENSOR: (
                r"^SFH[0-9]{3,4}.*",
            ),
        },
    },
    "KINGBRIGHT": {
        "patterns": {
            cat.LED: (
                r"^(?:WP|KP|AP|AA)[0-9A-Z]+.*",
            ),
        },
    },
    # =========================================================================
    # SENSORS
    # =========================================================================
    "BOSCH": {
        "patterns": {
            cat.SENSOR_MOTION: (
                r"^BM[AGI][0-9].*",
                r"^BNO[0-9]{3}.*",
            ),
            cat.SENSOR_MAGNETIC: (
                r"^BMM[0-9].*",
            ),
            cat.SENSOR_PRESSURE: (
                r"^BMP[0-9].*",
            ),
            cat.SENSOR_HUMIDITY: (
                r"^BME[0-9].*",
            ),
        },
    },
    "SENSIRION": {
        "patterns": {
            cat.SENSOR_HUMIDITY: (
                r"^SHT[0-9]{2}.*",
            ),
            cat.SENSOR_TEMPERATURE: (
                r"^STS[0-9]{2}.*",
            ),
            cat.SENSOR_GAS: (
                r"^SGP[0-9]{2}.*",
                r"^SCD[0-9]{2}.*",
            ),
            cat.SENSOR_PRESSURE: (
                r"^SDP[0-9]{2,3}.*",
            ),
            cat.SENSOR: (
                r"^SPS[0-9]{2}.*",
                r"^SFA[0-9]{2}.*",
                r"^SLF[0-9A-Z]+.*",
            ),
        },
    },
    "MELEXIS": {
        "patterns": {
            cat.SENSOR_TEMPERATURE: (
                r"^MLX906[0-9]{2}.*",
            ),
            cat.SENSOR_MAGNETIC: (
                r"^MLX9[0-9]{4}.*",
            ),
        },
    },
    "INVSENSE": {
        "patterns": {
            cat.SENSOR_MOTION: (
                r"^MPU-?[0-9]{4}.*",
                r"^ICM-?[0-9]{5}.*",
                r"^IAM-?[0-9]{5}.*",
            ),
        },
    },
    "ALLEGRO": {
        "patterns": {
            cat.SENSOR_MAGNETIC: (
                r"^ACS[0-9]{3,4}.*",
                r"^A1[0-9]{3}.*",
                r"^AH[0-9]{3}.*",
            ),
            cat.IC: (
                r"^A49[0-9]{2}.*",  # Motor drivers
            ),
        },
    },
    "HONEYWELL": {
        "patterns": {
            cat.SENSOR_HUMIDITY: (
                r"^HIH[0-9]{4}.*",
            ),
            cat.SENSOR_PRESSURE: (
                r"^(?:HSC|SSC|ABP|MPR)[A-Z0-9]+.*",
            ),
            cat.SENSOR_MAGNETIC: (
                r"^HMC[0-9]{4}.*",
                r"^SS4[0-9]{2}.*",
            ),
        },
    },
    # =========================================================================
    # MEMORY
    # =========================================================================
    "MICRON": {
        "patterns": {
            cat.MEMORY_DRAM: (
                r"^MT4[0-9][A-Z][0-9]+.*",
            ),
            cat.MEMORY_FLASH: (
                r"^MT25Q[A-Z][0-9]+.*",
                r"^MT29F[0-9]+.*",
                r"^N25Q[0-9]+.*",
                r"^M25P[0-9]+.*",
            ),
        },
    },
    "WINBOND": {
        "patterns": {
            cat.MEMORY_FLASH: (
                r"^W25[QNX][0-9]+.*",
                r"^W29[CNE][0-9]+.*",
            ),
            cat.MEMORY_EEPROM: (
                r"^W24[0-9]+.*",
            ),
            cat.MEMORY_DRAM: (
                r"^W9[0-9]{3}.*",
            ),
        },
        "series_prefixes": ("W25Q", "W25N", "W25X", "W29C", "W29N", "W29E", "W24", "W9"),
        "package_codes": {
            "SSIG": "SOIC-8", "SNIG": "SOIC-8", "SVIG": "SOIC-8",
            "ZPIG": "WSON-8", "ZEIG": "WSON-8", "UXIG": "USON-8",
            "SFIG": "SOIC-16", "BYIG": "WLCSP", "TBIG": "TFBGA",
            "IQ": "SOIC-8", "IM": "SOIC-8",
        },
    },
    "ISSI": {
        "patterns": {
            cat.MEMORY_FLASH: (
                r"^IS25[LW]P[0-9]+.*",
            ),
            cat.MEMORY: (
                r"^IS4[0-9][A-Z]+[0-9]+.*",
                r"^IS6[0-9][A-Z]+[0-9]+.*",
            ),
        },
    },
    "MACRONIX": {
        "patterns": {
            cat.MEMORY_FLASH: (
                r"^MX25[LRUV][0-9]+.*",
                r"^MX29(?:GL|LV)[0-9]+.*",
                r"^MX30LF[0-9]+.*",
                r"^MX66L[0-9]+.*",
            ),
        },
    },
    "PUYA": {
        "patterns": {
            cat.MEMORY_FLASH: (
                r"^P25Q[0-9]+.*",
                r"^PY25Q[0-9]+.*",
            ),
            cat.MICROCONTROLLER: (
                r"^PY32F[0-9]{3}.*",
            ),
        },
    },
    "XMC": {
        "patterns": {
            cat.MEMORY_FLASH: (
                r"^XM25Q[A-Z][0-9]+.*",
                r"^XM25E[A-Z][0-9]+.*",
            ),
        },
    },
    # =========================================================================
    # WIRELESS / INTERFACE
    # =========================================================================
    "NORDIC": {
        "patterns": {
            cat.MCU_WIRELESS: (
                r"^NRF5[1-4][0-9]{3}.*",
                r"^NRF91[0-9]{2}.*",
                r"^NRF24L01.*",
            ),
        },
    },
    "SEMTECH": {
        "patterns": {
            cat.RF_MODULE: (
                r"^SX12[0-9]{2}.*",
                r"^SX126[0-9].*",
                r"^LR11[0-9]{2}.*",
            ),
        },
    },
    "FTDI": {
        "patterns": {
            cat.INTERFACE_IC: (
                r"^FT[0-9]{3}[A-Z]+.*",
                r"^FT[0-9]{4}[A-Z]*.*",
            ),
        },
    },
    "REALTEK": {
        "patterns": {
            cat.INTERFACE_IC: (
                r"^RTL8[0-9]{3}[A-Z0-9]*.*",
            ),
            cat.IC: (
                r"^ALC[0-9]{3,4}.*",  # Audio codecs
            ),
        },
    },
    # =========================================================================
    # FREQUENCY CONTROL
    # =========================================================================
    "ABRACON": {
        "patterns": {
            cat.CRYSTAL: (
                r"^ABM[0-9]{1,2}[A-Z]?-.*",
                r"^ABLS[0-9]?-.*",
            ),
            cat.OSCILLATOR: (
                r"^ASDM[A-Z]?-.*",
                r"^ASE[A-Z]?-.*",
            ),
        },
    },
    "EPSON": {
        "patterns": {
            cat.CRYSTAL: (
                r"^FA-[0-9]{2,3}.*",
                r"^TSX-[0-9]{4}.*",
                r"^MC-[0-9]{3}.*",
            ),
            cat.OSCILLATOR: (
                r"^SG-?[0-9]{3,4}.*",
            ),
        },
    },
    "SITIME": {
        "patterns": {
            cat.OSCILLATOR: (
                r"^SIT[0-9]{4}.*",
            ),
        },
    },
    # =========================================================================
    # POWER MANAGEMENT
    # =========================================================================
    "MPS": {
        "patterns": {
            cat.REGULATOR_SWITCHING: (
                r"^MP[0-9]{4}.*",
                r"^MPQ[0-9]{4}.*",
                r"^MPM[0-9]{4}.*",
            ),
        },
    },
    "RICHTEK": {
        "patterns": {
            cat.VOLTAGE_REGULATOR: (
                r"^RT[0-9]{4}[A-Z]?.*",
                r"^RTQ[0-9]{4}.*",
            ),
        },
    },
    "SILERGY": {
        "patterns": {
            cat.REGULATOR_SWITCHING: (
                r"^SY8[0-9]{3}.*",
            ),
        },
    },
    "TOREX": {
        "patterns": {
            cat.VOLTAGE_REGULATOR: (
                r"^XC6[0-9]{3}.*",
                r"^XC9[0-9]{3}.*",
            ),
        },
    },
    "SGMICRO": {
        "patterns": {
            cat.VOLTAGE_REGULATOR: (
                r"^SGM20[0-9]{2}.*",
            ),
            cat.OPAMP: (
                r"^SGM8[0-9]{3}.*",
            ),
        },
    },
    "TRINAMIC": {
        "patterns": {
            cat.IC: (
                r"^TMC[0-9]{4}.*",  # Stepper drivers
            ),
        },
    },
    "MEAN_WELL": {
        "patterns": {
            cat.IC: (
                r"^(?:RS|LRS|HLG|LPV|MDR|HDR|IRM)-[0-9]+.*",  # Power supply modules
            ),
        },
    },
}

# Generic reference-designator style patterns used when no manufacturer claims a part
UNKNOWN_TABLE: dict = {
    "patterns": {
        cat.RESISTOR: (r"^R[0-9].*",),
        cat.CAPACITOR: (r"^C[0-9].*",),
        cat.INDUCTOR: (r"^L[0-9].*",),
        cat.DIODE: (r"^D[0-9].*", r"^1N[0-9].*"),
        cat.TRANSISTOR: (r"^Q[0-9].*", r"^2N[0-9].*", r"^BC[0-9].*", r"^BD[0-9].*"),
        cat.IC: (r"^IC[0-9].*", r"^U[0-9].*"),
        cat.LOGIC_IC: (r"^74[0-9].*", r"^CD[0-9].*"),
        cat.CRYSTAL: (r"^X[0-9].*", r"^Y[0-9].*"),
        cat.OSCILLATOR: (r"^OSC.*",),
        cat.LED: (r"^LED.*", r"^LD[0-9].*"),
    },
}
