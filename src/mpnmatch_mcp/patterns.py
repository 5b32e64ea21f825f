"""Registry of compiled MPN patterns, keyed by category and owning rule set."""

import logging
import re

from .categories import validate_category

logger = logging.getLogger(__name__)


class PatternConfigError(ValueError):
    """A rule set registered a pattern that does not compile."""

    def __init__(self, owner: str | None, category: str, pattern: str, error: re.error):
        self.owner = owner
        self.category = category
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r} for {category} (owner={owner}): {error}")


class PatternRegistry:
    """Category -> owner -> ordered list of compiled patterns.

    Patterns are compiled once, case-insensitive, and always evaluated with
    full-string matching. The "current owner" scopes registration and
    matches_for_current_handler() so one rule set never matches with another
    rule set's patterns.
    """

    def __init__(self, owner: str | None = None):
        self._patterns: dict[str, dict[str, list[re.Pattern]]] = {}
        self._current_owner = owner

    @property
    def current_owner(self) -> str | None:
        return self._current_owner

    def set_current_owner(self, owner: str) -> None:
        self._current_owner = owner

    def add_pattern(self, category: str, pattern: str) -> None:
        """Compile and register a pattern for the current owner.

        Registering the same pattern text twice for one category/owner is a no-op.

        Raises:
            PatternConfigError: If the pattern does not compile.
            ValueError: If the category is None or unknown.
        """
        category = validate_category(category)
        owner = self._current_owner or ""
        bucket = self._patterns.setdefault(category, {}).setdefault(owner, [])
        if any(p.pattern == pattern for p in bucket):
            return
        try:
            compiled = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise PatternConfigError(self._current_owner, category, pattern, e) from e
        bucket.append(compiled)

    def _owned(self, category: str, owner: str | None = None) -> list[re.Pattern]:
        by_owner = self._patterns.get(validate_category(category), {})
        if owner is None:
            return [p for patterns in by_owner.values() for p in patterns]
        return by_owner.get(owner, [])

    def matches(self, mpn: str | None, category: str) -> bool:
        """True if any pattern registered for category fully matches mpn."""
        if not mpn:
            validate_category(category)
            return False
        return any(p.fullmatch(mpn) for p in self._owned(category))

    def matches_for_current_handler(self, mpn: str | None, category: str) -> bool:
        """Like matches(), restricted to patterns registered by the current owner."""
        if not mpn:
            validate_category(category)
            return False
        owner = self._current_owner or ""
        return any(p.fullmatch(mpn) for p in self._owned(category, owner))

    def has_pattern(self, category: str) -> bool:
        return bool(self._owned(category))

    def get_patterns(self, category: str) -> list[re.Pattern]:
        """Return compiled patterns for a category across all owners, in registration order."""
        return list(self._owned(category))

    def supported_categories(self) -> frozenset[str]:
        return frozenset(
            category for category, by_owner in self._patterns.items()
            if any(by_owner.values())
        )

    def pattern_count(self) -> int:
        return sum(
            len(patterns)
            for by_owner in self._patterns.values()
            for patterns in by_owner.values()
        )
