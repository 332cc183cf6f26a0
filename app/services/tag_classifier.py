"""Match raw vision labels against the ingredient catalog."""

import logging
from typing import Optional

from app.config import settings
from app.services.catalog import Catalog, catalog as default_catalog
from app.services.ingredient_schemas import CatalogEntry


logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Trim and lower-case a raw label."""
    return tag.strip().lower()


def _fuzzy_matches(tag: str, name: str) -> bool:
    """
    Bounded prefix/suffix match between a tag and a catalog name.

    Lengths may differ by at most `fuzzy_length_slack` characters, one string
    must start or end with the other, and the shorter one must be at least
    `fuzzy_min_length` characters long.
    """
    if abs(len(tag) - len(name)) > settings.fuzzy_length_slack:
        return False
    if min(len(tag), len(name)) < settings.fuzzy_min_length:
        return False
    return (
        tag.startswith(name)
        or tag.endswith(name)
        or name.startswith(tag)
        or name.endswith(tag)
    )


def classify_tag(tag: str, catalog: Optional[Catalog] = None) -> Optional[CatalogEntry]:
    """
    Resolve one raw label to a canonical catalog entry.

    Rules, in order: exclusion list, exact name, bounded fuzzy match (first
    entry in catalog scan order wins), alias override table.

    Args:
        tag: Raw label text as returned by the vision service
        catalog: Catalog to match against (defaults to the process catalog)

    Returns:
        Matching CatalogEntry, or None if the label is not a known ingredient
    """
    catalog = catalog or default_catalog
    normalized = normalize_tag(tag)

    if not normalized:
        return None

    if catalog.is_excluded(normalized):
        logger.debug("Excluded non-food label: %r", normalized)
        return None

    entry = catalog.get(normalized)
    if entry is not None:
        return entry

    for entry in catalog.entries:
        if _fuzzy_matches(normalized, entry.canonical_name):
            logger.debug("Fuzzy match: %r -> %s", normalized, entry.canonical_name)
            return entry

    entry = catalog.resolve_override(normalized)
    if entry is not None:
        logger.debug("Override match: %r -> %s", normalized, entry.canonical_name)
        return entry

    logger.debug("No catalog match for label: %r", normalized)
    return None
