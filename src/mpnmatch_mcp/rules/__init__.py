"""Manufacturer rule sets.

RuleSet is built from declarative tables (RULE_TABLES). Manufacturers whose
ordering codes need structural parsing get their own subclass.
"""

from .base import RuleSet, clean_mpn
from .ams import AMSRuleSet
from .gigadevice import GigaDeviceRuleSet
from .rectifiers import RectifierRuleSet
from .tables import RULE_TABLES, UNKNOWN_TABLE

__all__ = [
    "RuleSet",
    "clean_mpn",
    "AMSRuleSet",
    "GigaDeviceRuleSet",
    "RectifierRuleSet",
    "RULE_TABLES",
    "UNKNOWN_TABLE",
]
