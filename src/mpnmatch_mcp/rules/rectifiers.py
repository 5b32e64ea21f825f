"""Discrete diode rules shared by the 1N-series vendors (Vishay, ON Semi, Diodes Inc).

Standard rectifier families are voltage-graded by their last digit
(1N4001 = 50V ... 1N4007 = 1000V). A higher grade replaces a lower one,
never the reverse.
"""

import re

from .base import RuleSet

# family prefix, grade digit
_GRADED_FAMILY_RE = re.compile(r'^(1N400|1N540)([0-9])')

SMALL_SIGNAL_EQUIVALENTS = (
    ("1N4148", "1N914"),
)


class RectifierRuleSet(RuleSet):
    def __init__(self, patterns, **kwargs):
        kwargs.setdefault("compatible_series", SMALL_SIGNAL_EQUIVALENTS)
        super().__init__(patterns, **kwargs)

    def is_upgrade(self, mpn_a: str, mpn_b: str) -> bool:
        match_a = _GRADED_FAMILY_RE.match(mpn_a)
        match_b = _GRADED_FAMILY_RE.match(mpn_b)
        if not match_a or not match_b or match_a.group(1) != match_b.group(1):
            return False
        if not self._packages_compatible(mpn_a, mpn_b):
            return False
        return int(match_b.group(2)) >= int(match_a.group(2))
