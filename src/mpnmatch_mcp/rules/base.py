"""Rule set base class shared by every manufacturer.

A rule set is built from declarative data (category -> patterns, series
prefixes, package suffix codes, compatible series groups). Manufacturers that
need structural logic the tables cannot express subclass RuleSet and override
the extraction or replacement hooks.
"""

import logging
import re
from collections.abc import Iterable, Mapping

from ..categories import base_category
from ..packages import are_compatible, standard_package_code
from ..patterns import PatternRegistry

logger = logging.getLogger(__name__)

# Default series: prefix plus the first run of digits ("LM358DR" -> "LM358", "1N4148TR" -> "1N4148")
_DEFAULT_SERIES_RE = re.compile(r'^([0-9]*[A-Z]+[0-9]+)')


def clean_mpn(mpn: str | None) -> str:
    """Trim and uppercase an MPN; None becomes ""."""
    if not mpn:
        return ""
    return mpn.strip().upper()


class RuleSet:
    """Manufacturer-specific classification, extraction and equivalence rules.

    Args:
        patterns: Category -> pattern strings. Each pattern is also registered
            under the category's base category.
        series_prefixes: Known series identifiers. extract_series() returns the
            longest one the MPN starts with.
        package_codes: Manufacturer suffix codes checked before the standard map.
        compatible_series: Groups of series documented as interchangeable.
    """

    def __init__(
        self,
        patterns: Mapping[str, Iterable[str]] | None = None,
        series_prefixes: Iterable[str] = (),
        package_codes: Mapping[str, str] | None = None,
        compatible_series: Iterable[Iterable[str]] = (),
    ):
        self.patterns: dict[str, tuple[str, ...]] = {
            category: tuple(items) for category, items in (patterns or {}).items()
        }
        # Longest first so "GD25LQ" wins over "GD25"
        self.series_prefixes: tuple[str, ...] = tuple(
            sorted((p.upper() for p in series_prefixes), key=len, reverse=True)
        )
        self.package_codes: dict[str, str] = {
            code.upper(): package for code, package in (package_codes or {}).items()
        }
        # "CD2T" before "T"
        self._codes_longest_first = sorted(self.package_codes, key=len, reverse=True)
        self.compatible_series: tuple[frozenset[str], ...] = tuple(
            frozenset(s.upper() for s in group) for group in compatible_series
        )
        self._categories = frozenset(
            cat for category in self.patterns for cat in (category, base_category(category))
        )

    # -------------------------------------------------------------------------
    # Patterns
    # -------------------------------------------------------------------------

    def initialize_patterns(self, registry: PatternRegistry) -> None:
        """Register every pattern with the registry. Safe to call more than once."""
        for category, items in self.patterns.items():
            base = base_category(category)
            for pattern in items:
                registry.add_pattern(category, pattern)
                if base != category:
                    registry.add_pattern(base, pattern)

    def supported_categories(self) -> frozenset[str]:
        return self._categories

    def matches(self, mpn: str | None, category: str, registry: PatternRegistry) -> bool:
        """Could this MPN be a part of this category from this manufacturer?"""
        mpn = clean_mpn(mpn)
        if not mpn or category not in self._categories:
            return False
        return registry.matches_for_current_handler(mpn, category)

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def extract_package_code(self, mpn: str | None) -> str:
        """Return a normalized package name, or "" when it cannot be determined."""
        mpn = clean_mpn(mpn)
        if not mpn:
            return ""
        try:
            return self.package_from_mpn(mpn)
        except (IndexError, ValueError) as e:
            logger.debug(f"Package extraction failed for {mpn!r}: {e}")
            return ""

    def extract_series(self, mpn: str | None) -> str:
        """Return the manufacturer's series identifier, or "" when indeterminate."""
        mpn = clean_mpn(mpn)
        if not mpn:
            return ""
        try:
            return self.series_from_mpn(mpn)
        except (IndexError, ValueError) as e:
            logger.debug(f"Series extraction failed for {mpn!r}: {e}")
            return ""

    def package_from_mpn(self, mpn: str) -> str:
        """Package lookup on a cleaned, non-empty MPN. Override for custom schemes."""
        if self.package_codes:
            if "-" in mpn:
                suffix = mpn.rsplit("-", 1)[1]
                if suffix in self.package_codes:
                    return self.package_codes[suffix]
            for code in self._codes_longest_first:
                if mpn.endswith(code):
                    return self.package_codes[code]
        return standard_package_code(mpn)

    def series_from_mpn(self, mpn: str) -> str:
        """Series lookup on a cleaned, non-empty MPN. Override for custom schemes."""
        if self.series_prefixes:
            for prefix in self.series_prefixes:
                if mpn.startswith(prefix):
                    return prefix
            return ""
        match = _DEFAULT_SERIES_RE.match(mpn)
        return match.group(1) if match else ""

    # -------------------------------------------------------------------------
    # Equivalence
    # -------------------------------------------------------------------------

    def is_official_replacement(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        """Can mpn_b be used where mpn_a is specified?

        Same series with the same package (both unknown counts as the same) is
        always accepted, as are footprint-compatible known packages. Documented
        compatible series groups and upgrade rules are checked after that;
        upgrade rules may be one-directional.
        """
        series_a = self.extract_series(mpn_a)
        series_b = self.extract_series(mpn_b)
        if not series_a or not series_b:
            return False

        if series_a == series_b and self._packages_compatible(mpn_a, mpn_b):
            return True

        if self.is_compatible_series(series_a, series_b) and self._packages_compatible(mpn_a, mpn_b):
            return True

        return self.is_upgrade(clean_mpn(mpn_a), clean_mpn(mpn_b))

    def is_compatible_series(self, series_a: str, series_b: str) -> bool:
        return any(series_a in group and series_b in group for group in self.compatible_series)

    def is_upgrade(self, mpn_a: str, mpn_b: str) -> bool:
        """Hook for monotonic upgrade rules (mpn_b is a higher grade of mpn_a)."""
        return False

    def _packages_compatible(self, mpn_a: str | None, mpn_b: str | None) -> bool:
        package_a = self.extract_package_code(mpn_a)
        package_b = self.extract_package_code(mpn_b)
        if package_a == package_b:
            return True
        if not package_a or not package_b:
            return False
        return are_compatible(package_a, package_b)
