"""Manufacturer directory.

MANUFACTURERS is the ordered catalog used for classification. Order is
priority: when several priority patterns match one MPN, the earlier entry wins.
Each entry builds its rule set and pattern registry lazily, once, on first use.
"""

import logging
import re
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from .aliases import MANUFACTURER_ALIASES
from .categories import base_category
from .patterns import PatternRegistry
from .rules.ams import AMSRuleSet
from .rules.base import RuleSet
from .rules.gigadevice import GigaDeviceRuleSet
from .rules.rectifiers import RectifierRuleSet
from .rules.tables import RULE_TABLES, UNKNOWN_TABLE

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Manufacturer:
    """A directory entry: id, display name, priority pattern and a lazily built rule set.

    Rule set construction uses double-checked locking on a per-entry lock, so
    concurrent first callers wait for one construction and never observe a
    partially registered rule set.
    """

    id: str
    name: str
    priority_pattern: str
    factory: Callable[[], RuleSet] = field(repr=False)
    _priority_re: re.Pattern | None = field(init=False, repr=False, default=None)
    _rule_set: RuleSet | None = field(init=False, repr=False, default=None)
    _registry: PatternRegistry | None = field(init=False, repr=False, default=None)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self):
        if self.priority_pattern:
            self._priority_re = re.compile(f"(?:{self.priority_pattern}).*", re.IGNORECASE)

    @property
    def is_unknown(self) -> bool:
        return self.id == UNKNOWN_ID

    @property
    def is_ready(self) -> bool:
        return self._rule_set is not None

    def matches_priority(self, mpn: str) -> bool:
        """True if the priority pattern matches the start of the (cleaned) MPN."""
        return bool(mpn) and self._priority_re is not None and self._priority_re.fullmatch(mpn) is not None

    def _ensure_rule_set(self) -> None:
        """Build the rule set and its registry on first use. Thread-safe."""
        if self._rule_set is not None:
            return

        with self._lock:
            # Double-check after acquiring lock
            if self._rule_set is not None:
                return

            rule_set = self.factory()
            registry = PatternRegistry(owner=self.id)
            rule_set.initialize_patterns(registry)
            self._registry = registry
            # Publish last: readers check _rule_set without the lock
            self._rule_set = rule_set
            logger.debug(f"Initialized {self.id} rule set ({registry.pattern_count()} patterns)")

    @property
    def rule_set(self) -> RuleSet:
        self._ensure_rule_set()
        return self._rule_set

    @property
    def registry(self) -> PatternRegistry:
        self._ensure_rule_set()
        return self._registry

    def supported_categories(self) -> frozenset[str]:
        return self.rule_set.supported_categories()

    def matches(self, mpn: str, category: str | None = None) -> bool:
        """Ask the rule set whether it claims the MPN (for one category, or any)."""
        rule_set = self.rule_set
        if category is not None:
            return rule_set.matches(mpn, category, self._registry)
        return any(
            rule_set.matches(mpn, cat, self._registry)
            for cat in sorted(rule_set.supported_categories())
        )

    def matching_categories(self, mpn: str) -> list[str]:
        """Categories whose patterns match, in registration order (each category before its base)."""
        rule_set = self.rule_set
        ordered = dict.fromkeys(
            tag for category in rule_set.patterns for tag in (category, base_category(category))
        )
        return [tag for tag in ordered if rule_set.matches(mpn, tag, self._registry)]

    def extract_package_code(self, mpn: str | None) -> str:
        return self.rule_set.extract_package_code(mpn)

    def extract_series(self, mpn: str | None) -> str:
        return self.rule_set.extract_series(mpn)

    def __str__(self) -> str:
        return self.name


def _table(manufacturer_id: str, rule_set_class: type[RuleSet] = RuleSet) -> Callable[[], RuleSet]:
    """Factory that builds a rule set from the declarative table for one manufacturer."""
    def build() -> RuleSet:
        return rule_set_class(**RULE_TABLES.get(manufacturer_id, {}))
    return build


# Hand-written rule sets; everything else is built from RULE_TABLES
_CUSTOM_FACTORIES: dict[str, Callable[[], RuleSet]] = {
    "AMS": AMSRuleSet,
    "GIGADEVICE": GigaDeviceRuleSet,
    "VISHAY": _table("VISHAY", RectifierRuleSet),
    "ON_SEMI": _table("ON_SEMI", RectifierRuleSet),
    "DIODES_INC": _table("DIODES_INC", RectifierRuleSet),
    "UNKNOWN": lambda: RuleSet(**UNKNOWN_TABLE),
}

UNKNOWN_ID = "UNKNOWN"

# (id, priority pattern, display name) in priority order
_DIRECTORY: list[tuple[str, str, str]] = [
    # Microcontrollers
    ("MICROCHIP", r"PIC|DSPIC|ATMEGA|ATTINY|AT[0-9]|AT[A-Z]{2}", "Microchip Technology"),
    ("ST", r"STM32|STM8|ST[A-Z][0-9]|STD|STF|STP", "STMicroelectronics"),
    ("ATMEL", r"AT[0-9]|AT[A-Z]{2}|ATXMEGA", "Atmel"),
    ("TI", r"TI|TPS|TMS|TLV|LM|SN|MSP430|CC[0-9]{4}", "Texas Instruments"),
    ("RENESAS", r"RX|RA|RE|RH|RZ|R[48]F|R5F|R7F", "Renesas Electronics"),
    ("NXP", r"NXP|LPC|MK|IMX|S32K|KE[0-9]|PH|P[A-Z][A-Z]?[0-9]", "NXP Semiconductors"),
    ("CYPRESS", r"CY|PSOC|FM[0-9]|CYW", "Cypress Semiconductor"),
    ("SILICON_LABS", r"SI|EFM|EFR|BGM|EM35|CP21", "Silicon Labs"),
    ("ESPRESSIF", r"ESP[0-9]|ESP-|ESP32", "Espressif Systems"),
    ("NUVOTON", r"M[0-9]{3}|N76[ES]|NUC[0-9]|NUA[0-9]|ML5[0-9]", "Nuvoton"),
    ("HOLTEK", r"HT[0-9]{4}|HT66|HT68|BS8", "Holtek"),
    ("WCH", r"CH[0-9]{3}|CH32[VF]", "WCH"),
    ("ARTERY", r"AT32F[0-9]|AT32WB", "Artery Technology"),
    # Power and discretes
    ("ALPHA_OMEGA", r"AO[0-9]{4}|AOD|AON|AOI|AOT|AOB|AOC|AOP", "Alpha and Omega Semiconductor"),
    ("INFINEON", r"INF|IR|IFX|TLE|XMC|ICE|IPD|IRS|BSC|BSD|BSS|BTS|BTT", "Infineon Technologies"),
    ("VISHAY", r"VS|SI|CRCW|IRF|SIR|1N[0-9]|BAV|BAS|BAT|TNR|VOW|VOX|2N", "Vishay"),
    ("ON_SEMI", r"ON|MC|NCP|FAN|CAT|NCV|MUR|1N|NTD|NTA|NTB", "ON Semiconductor"),
    ("ANALOG_DEVICES", r"AD|ADP|ADM|ADG|ADA|ADUM|LT|LTC|LTM", "Analog Devices"),
    ("MAXIM", r"MAX|DS|ICL|DG|UP|LT|LTC|LTM", "Maxim Integrated"),
    ("DIODES_INC", r"DI|AP|AZ|DMG|DMN|DMP|ZXGD|1N|BAV|BAS|BAT", "Diodes Incorporated"),
    ("GOOD_ARK", r"1N4|1N5|ES[0-9]|US[0-9]|SS[0-9]{2}|SK[0-9]{2}|MMBT|BAV|BAT", "Good-Ark Semiconductor"),
    ("YANGJIE", r"YJ|MBR[0-9]{4}|SS[0-9]{2}|SK[0-9]{2}|YJB|YJDB", "Yangjie Technology"),
    ("PANJIT", r"1N4|1N5|ES[0-9]|RS[0-9]|SS[0-9]{2}|SK[0-9]{2}|MMBT|BAV|BAS|BAT|PJ[0-9]{4}", "Panjit International"),
    ("ROHM", r"BD|BA|BR|BSS|BU|2S[A-D]|RGT|PMR", "ROHM Semiconductor"),
    ("TOSHIBA", r"TC|TLP|TPH|TPC|2S[A-D]|TPN|TPR|TPS", "Toshiba"),
    ("NEXPERIA", r"NEX|PMBT|PBSS|BZX|BAT|BSS|2N|BAS|BAV|BZV|PHB", "Nexperia"),
    ("BROADCOM", r"BCM|AFBR|HCPL|ACPL|AVAGO", "Broadcom"),
    ("AKM", r"(?:AK|LC|HM|HA)[0-9]", "Asahi Kasei Microdevices"),
    ("LG", r"LG[A-Z][0-9]", "LG Semiconductor"),
    ("LOGIC_IC", r"(?:74|54)[LSAHCTF]{0,4}[0-9]{2,4}|CD4[0-9]{3}", "Logic IC"),
    # Passives
    ("YAGEO", r"RC[0-9]|RT[0-9]|RL(?!20[1-7])[0-9]|CC[0-9]|AC[0-9]|PE[0-9]", "Yageo"),
    ("PANASONIC", r"ERJ|ERJP|ERJG|ECQ|EEF|ECA|EVJ|EVM", "Panasonic"),
    ("BOURNS", r"CR[^C]|CRM|CRH|3386|3296|91|TC|TH|3310", "Bourns"),
    ("VIKING_TECH", r"CR[0-9]{4}|AR[0-9]{4}|CS[0-9]{4}|PWR[0-9]", "Viking Tech"),
    ("KEMET", r"C[0-9]{4}|T[0-9]{3}|A[0-9]{3}|ESD|PHE|F[0-9]", "KEMET Electronics"),
    ("MURATA", r"GRM|GCM|KCA|KC[ABMZ]|LLL|NFM|DLW|BLM|NCP|LQM|LQW|LQG", "Murata Manufacturing"),
    ("TDK", r"CH[0-9]|MLF[0-9]|MPZ|SDR|ALT|NLV|B8[24]|MLG|MMZ", "TDK Corporation"),
    ("SAMSUNG", r"CL(?:10|21|31)B|CM[0-9]|SPH|RC_", "Samsung Electro-Mechanics"),
    ("AVX", r"TAJ|TPS|TCJ|F[0-9]|CR[0-9]|AR|LD|SD", "AVX Corporation"),
    ("LELON", r"(?:RGA|RGC|RWE|REA|RZC|VYS)[0-9]", "Lelon Electronics"),
    ("RUBYCON", r"(?:YXF|YXG|ZLH|ZLJ|50YXF|63YXF)[0-9]", "Rubycon"),
    ("ELNA", r"(?:RJJ|RJG|RJK|RSH|RAA|RA2|RFS|CE-BP)[0-9]", "Elna"),
    ("NIPPON_CHEMICON", r"(?:KMG|KMH|KMQ|KY|KZH|KZN|KXJ|KZE)[0-9]", "Nippon Chemi-Con"),
    ("WIMA", r"(?:MKS|MKP|FKS|FKP|FKC)[0-9]", "WIMA"),
    ("FAIRCHILD", r"(?:FQ[PNS]|FDS|FDC|FDD)[0-9]", "Fairchild/ON Semi"),
    # Connectors
    ("WURTH", r"(?:61|62|63|64|65)[0-9]{8}", "Wurth Electronics"),
    ("MOLEX", r"(?:43|53|55|67|87|88)[0-9]{4}", "Molex"),
    ("TE", r"(?:(?:1-|2-)[0-9]{6}|282[0-9]{3})-[0-9]+", "TE Connectivity"),
    ("JST", r"(?:B|S|P|X)[HM][0-9]|PA|PH|SM|EH", "JST"),
    ("HIROSE", r"(?:DF|FH|BM|ZX|GT)[0-9]", "Hirose Electric"),
    ("AMPHENOL", r"(?:10|20|54)[0-9]{4}|G5|UE", "Amphenol"),
    ("CUI", r"SJ[0-9]|PJ-|CMI|CMS|CPE|CPT|ACZ|AMT", "CUI Devices"),
    ("JAE", r"FI-|DX[0-9]|MX[0-9]|IL-", "JAE Electronics"),
    ("JINLING", r"(?:1[2367]|2[267]|3[25])[0-9]{4,}", "Shenzhen Jinling Electronics"),
    # Optoelectronics
    ("CREE", r"(?:XL|XH|XP|XQ|XB|CL)[A-Z][0-9]", "Cree"),
    ("OSRAM", r"(?:LS|LA|LW|LY|LO|LB)[A-Z][0-9]", "OSRAM"),
    ("LUMILEDS", r"[LP][XT][HL][0-9]|LUXEON", "Lumileds"),
    ("KINGBRIGHT", r"(?:WP|KP|AP|AA)[0-9]", "Kingbright"),
    # Sensors
    ("ALLEGRO", r"ACS[0-9]|A[0-9]{4}|AH[0-9]{3}|AAS[0-9]", "Allegro MicroSystems"),
    ("BOSCH", r"BM[A-Z][0-9]|BSH|BMP|BME|BNO", "Bosch Sensortec"),
    ("MELEXIS", r"(?:MLX|TMF)[0-9]", "Melexis"),
    ("INVSENSE", r"(?:MPU|ICM|IAM|IIM)-?[0-9]", "InvenSense"),
    ("OMRON", r"G[0-9]|G3[A-Z]|B3[A-Z]|D2F|EE-S|D6F|E2E", "Omron"),
    ("ISOCOM", r"(?:ISP|ISQ|ISD)[0-9]{3}|(?:4N|6N)[0-9]{2}|(?:MOC|TLP)[0-9]{3}", "Isocom Components"),
    ("COSMO", r"KP[CSH]?[0-9]{3,4}|KPTR[0-9]{4}", "Cosmo Electronics"),
    # Memory
    ("MICRON", r"MT[0-9]|N25Q|M25P", "Micron Technology"),
    ("WINBOND", r"W[0-9]{2}[A-Z]|W25Q|W25X", "Winbond"),
    ("ISSI", r"IS[0-9]|IS25LP|IS25WP", "ISSI"),
    # Wireless
    ("NORDIC", r"NRF[0-9]|NRF52", "Nordic Semiconductor"),
    ("QUALCOMM", r"(?:QCA|IPQ|MDM|WCN)[0-9]", "Qualcomm"),
    ("SKYWORKS", r"(?:SKY|SE|SI)[0-9]", "Skyworks Solutions"),
    ("QORVO", r"(?:RF|RFX|TQP)[0-9]", "Qorvo"),
    ("AIROHA", r"AB[0-9]{4}|AU[0-9]{4}|AG[0-9]{4}", "Airoha Technology"),
    ("BEKEN", r"BK[0-9]{4}|BL[0-9]{4}", "Beken"),
    ("TELINK", r"TLSR[0-9]{4}|TC[0-9]{2}", "Telink Semiconductor"),
    ("SEMTECH", r"SX[0-9]{4}|LR[0-9]{4}|SY[0-9]{4}", "Semtech"),
    # Frequency control
    ("EPSON", r"(?:SG|FA|TSX|TC|MA)-?[0-9]", "Epson"),
    ("NDK", r"(?:NX|NT|NZ|NH)[0-9]", "NDK"),
    ("ABRACON", r"ABM|ABLS|ABLM|AB26|ASDM", "Abracon"),
    ("IQD", r"LFXTAL|CFPS|LFTCXO|LFOCA", "IQD Frequency Products"),
    ("TXC", r"(?:7[MVX]|8Y|9C|AX)-", "TXC Corporation"),
    ("KYOCERA", r"(?:CX|KC|CT|CXO|PBRC)[0-9]|(?:5600|5800)-", "Kyocera"),
    ("KDS", r"(?:DSX|DST|DSO|DSB|1N-)[0-9]", "KDS Daishinku"),
    # Motion, protection, power supplies
    ("TRINAMIC", r"TMC[0-9]{4}", "Trinamic Motion Control"),
    ("LITTELFUSE", r"SMAJ|SMBJ|SMCJ|SMDJ|P[46]KE|P4SMA|P6SMB|1\.?5KE|045[1-4]|0448|V[0-9]{2}[EPDM]", "Littelfuse"),
    ("PROTEK_DEVICES", r"TVS[0-9]{5}|GBLC|PSM[0-9]{3}|ULC[0-9]{4}|SMD[0-9]{4}", "ProTek Devices"),
    ("MEAN_WELL", r"(?:RS|LRS|SE|NES|SP|PS|PT|SD|DDR|LPV|HLG|ELG|PLN|PWM|LCM|HDR|EDR|MDR|NDR|DR)-[0-9]", "Mean Well"),
    # Interface
    ("FTDI", r"FT[0-9]{3}", "FTDI"),
    ("GENESYS_LOGIC", r"GL[0-9]{3}|GL3[0-9]{3}", "Genesys Logic"),
    ("ASMEDIA", r"ASM[0-9]{4}|ASM1[0-9]{3}", "ASMedia Technology"),
    ("PROLIFIC", r"PL[0-9]{4}|PL23[0-9]{2}", "Prolific Technology"),
    ("JMICRON", r"JM[0-9]{3}|JMS[0-9]{3}", "JMicron Technology"),
    ("VIALABS", r"VL[0-9]{3}|VL8[0-9]{2}", "VIA Labs"),
    # Audio
    ("CIRRUS_LOGIC", r"(?:CS4|CS5|CS8|WM8)[0-9]", "Cirrus Logic"),
    ("REALTEK", r"(?:ALC|RTL|RTD)[0-9]", "Realtek"),
    ("ESS", r"ES[0-9]{4}|SABRE", "ESS Technology"),
    ("CMEDIA", r"CM[0-9]{3}|CMI[0-9]{4}", "C-Media"),
    # Sensors (continued)
    ("SENSIRION", r"(?:SHT|SGP|SCD|SFA|SPS|STS|SLF|SDP)[0-9]", "Sensirion"),
    ("HONEYWELL", r"(?:HIH|HSC|SSC|ABP|MPR|SS4|SS5|HMC|HOA|HLC)[0-9]", "Honeywell Sensing"),
    ("AMS", r"(?:AS[3-7]|TSL|TMD|TCS|APDS-?|ENS)[0-9]", "ams-OSRAM"),
    # Magnetics
    ("COILCRAFT", r"XAL|XEL|XFL|SER|LPS|MSS|DO[0-9]|MSD|SLC|SLR|0[46]0[23]HP", "Coilcraft"),
    ("SUMIDA", r"(?:CDRH|CDR|CDEP|CDEF|CR[0-9]|RCH|CEP|CDC|CLF)[0-9]", "Sumida"),
    ("PULSE_ELECTRONICS", r"H[0-9]{4}|T[0-9]{4}|P[0-9]{4}|PE-|PA-|JD|JK|JXD", "Pulse Electronics"),
    ("SUNLORD", r"SDCL|SWPA|SDFL|MWSA|SMDRR", "Sunlord Electronics"),
    ("CHILISIN", r"SQC[0-9]{4}|SCDS[0-9]|SCD[0-9]{4}", "Chilisin Electronics"),
    # Power management
    ("CYNTEC", r"(?:PMC|PBSS|PCMN)[0-9]", "Cyntec"),
    ("VICOR", r"(?:DCM|BCM|PRM|VTM|NBM|PI3[35])[0-9]", "Vicor"),
    ("POWER_INTEGRATIONS", r"(?:TOP|TNY|LNK|INN|PFS|LCS|CAP|SEN)[0-9]", "Power Integrations"),
    ("MPS", r"(?:MP[0-9]|MPQ|MPM)[0-9]", "Monolithic Power Systems"),
    ("RICHTEK", r"RT[0-9]{4}|RTQ[0-9]", "Richtek"),
    ("SILERGY", r"SY[0-9]{4}|SY8[0-9]", "Silergy"),
    ("TOREX", r"XC[0-9]{4}|XCL[0-9]", "Torex Semiconductor"),
    ("ABLIC", r"S-[0-9]{5}|S8[0-9]{3}", "ABLIC"),
    ("SGMICRO", r"SGM[0-9]{4}|SG[0-9]{3}", "SG Micro"),
    ("THREE_PEAK", r"TP[0-9]{4}|TPF[0-9]", "3PEAK"),
    # Memory (continued)
    ("MACRONIX", r"(?:MX25|MX29|MX30|MX66)[A-Z]", "Macronix"),
    ("GIGADEVICE", r"(?:GD25|GD32|GD5F)[A-Z0-9]", "GigaDevice"),
    ("ALLIANCE_MEMORY", r"(?:AS6C|AS7C|AS4C|AS29)[0-9]", "Alliance Memory"),
    ("PUYA", r"P25[A-Z]|PY25[A-Z]|PY32", "Puya Semiconductor"),
    ("XMC", r"XM25Q|XM25E", "XMC"),
    ("ESMT", r"M[0-9]{2}S|F[0-9]{2}L", "Elite Semiconductor Memory Technology"),
    ("SITIME", r"SIT[0-9]", "SiTime"),
    # Display and LED drivers
    ("SEOUL_SEMI", r"Z5|STW|STN|SFH|CUD|MJT|WICOP|SUNLIKE|ACRICH", "Seoul Semiconductor"),
    ("EVERLIGHT", r"17-|19-|26-|333|EL8|EL3|IR[0-9]|PT[0-9]|ALS", "Everlight Electronics"),
    ("MACROBLOCK", r"MBI[0-9]{4}|MBI5[0-9]", "Macroblock"),
    ("CHIPONE", r"ICN[0-9]{4}|ICND[0-9]", "Chipone Technology"),
    ("SITRONIX", r"ST[0-9]{4}|SSD[0-9]{4}", "Sitronix Technology"),
    ("RAYDIUM", r"RM[0-9]{5}|RM6[0-9]{4}", "Raydium Semiconductor"),
    ("NOVATEK", r"NT[0-9]{5}|NVT[0-9]", "Novatek Microelectronics"),
    # Interconnect
    ("PHOENIX_CONTACT", r"MC |MCV |MSTB|PT |UK |UT |PTSM|SPT |FK-", "Phoenix Contact"),
    ("HARTING", r"09 |21 0|02 0|14 |15 ", "Harting"),
    ("SAMTEC", r"ESQ|SSQ|TSM|TSW|TLE|SMH|CLT|HSEC|QSH|QTH", "Samtec"),
    ("MILL_MAX", r"[0-9]{3}-[0-9]{2}-[0-9]{3}|[0-9]{4}-[0-9]-[0-9]{2}", "Mill-Max"),
    ("SULLINS", r"PRPC|PPTC|NRPN|SWH|GRPB|NPPC|LPPB", "Sullins Connector Solutions"),
    (UNKNOWN_ID, "", "Unknown Manufacturer"),
]

MANUFACTURERS: tuple[Manufacturer, ...] = tuple(
    Manufacturer(
        id=manufacturer_id,
        name=name,
        priority_pattern=pattern,
        factory=_CUSTOM_FACTORIES.get(manufacturer_id) or _table(manufacturer_id),
    )
    for manufacturer_id, pattern, name in _DIRECTORY
)

_BY_ID: dict[str, Manufacturer] = {m.id: m for m in MANUFACTURERS}
# Lowercase display name -> id, so exact names resolve without an explicit alias
_BY_NAME: dict[str, str] = {m.name.lower(): m.id for m in MANUFACTURERS}

UNKNOWN: Manufacturer = _BY_ID[UNKNOWN_ID]

# Known manufacturers in priority order (the Unknown sentinel excluded)
KNOWN_MANUFACTURERS: tuple[Manufacturer, ...] = tuple(m for m in MANUFACTURERS if not m.is_unknown)


def get_manufacturer(manufacturer: Manufacturer | str) -> Manufacturer:
    """Resolve a Manufacturer, id ("AMS"), display name or alias ("ams-OSRAM", "TI").

    Raises:
        ValueError: If the name does not identify a known manufacturer.
    """
    if isinstance(manufacturer, Manufacturer):
        return manufacturer
    if not manufacturer or not manufacturer.strip():
        raise ValueError("Manufacturer name must not be empty")

    key = manufacturer.strip()
    if key.upper() in _BY_ID:
        return _BY_ID[key.upper()]

    lowered = key.lower()
    manufacturer_id = _BY_NAME.get(lowered) or MANUFACTURER_ALIASES.get(lowered)
    if manufacturer_id:
        return _BY_ID[manufacturer_id]
    raise ValueError(f"Unknown manufacturer: {manufacturer!r}")


def initialize_all() -> int:
    """Build every rule set now instead of on first use. Returns the total pattern count."""
    return sum(m.registry.pattern_count() for m in MANUFACTURERS)


def supported_categories(manufacturer: Manufacturer | str) -> frozenset[str]:
    return get_manufacturer(manufacturer).supported_categories()


def extract_package_code(manufacturer: Manufacturer | str, mpn: str | None) -> str:
    """Normalized package for an MPN under the manufacturer's ordering scheme, or ""."""
    return get_manufacturer(manufacturer).extract_package_code(mpn)


def extract_series(manufacturer: Manufacturer | str, mpn: str | None) -> str:
    """Series identifier for an MPN under the manufacturer's naming scheme, or ""."""
    return get_manufacturer(manufacturer).extract_series(mpn)
