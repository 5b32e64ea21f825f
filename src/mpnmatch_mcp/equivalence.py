"""Substitution checks routed to the owning manufacturer's rule set."""

import logging

from .manufacturers import Manufacturer, get_manufacturer
from .resolver import classify

logger = logging.getLogger(__name__)


def is_official_replacement(
    manufacturer: Manufacturer | str | None,
    mpn_a: str | None,
    mpn_b: str | None,
) -> bool:
    """Can mpn_b be used where mpn_a is specified?

    Both MPNs must classify to the same known manufacturer, and to the given
    manufacturer when one is passed. Cross-manufacturer substitution is never
    accepted here. The decision itself belongs to that manufacturer's rule set
    and is not necessarily symmetric (a higher grade may replace a lower one).

    Args:
        manufacturer: Manufacturer, id or alias, or None to infer it from mpn_a
        mpn_a: The specified part
        mpn_b: The candidate substitute

    Raises:
        ValueError: If manufacturer is a name that does not resolve.
    """
    expected = get_manufacturer(manufacturer) if manufacturer is not None else None

    owner_a = classify(mpn_a)
    owner_b = classify(mpn_b)
    if owner_a.is_unknown or owner_a is not owner_b:
        logger.debug(f"Replacement rejected: {mpn_a!r} -> {owner_a.id}, {mpn_b!r} -> {owner_b.id}")
        return False
    if expected is not None and owner_a is not expected:
        logger.debug(f"Replacement rejected: {mpn_a!r} belongs to {owner_a.id}, not {expected.id}")
        return False

    return owner_a.rule_set.is_official_replacement(mpn_a, mpn_b)
