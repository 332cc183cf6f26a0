"""Rank-based confidence scoring for matched ingredients."""

from typing import Optional

from app.config import settings
from app.services.catalog import Catalog, catalog as default_catalog
from app.services.ingredient_schemas import CatalogEntry


def base_confidence(rank: int) -> float:
    """Linear decay with label rank, floored at `min_base_confidence`."""
    return max(settings.min_base_confidence, 1 - rank * settings.rank_decay_step)


def score_match(
    entry: CatalogEntry, rank: int, catalog: Optional[Catalog] = None
) -> float:
    """
    Confidence for a catalog match found at position `rank` of the label list.

    Problematic items found past `problematic_rank_threshold` are penalised.
    Result is clamped to [0, 1] and rounded to 4 places so threshold
    comparisons are exact (rank 4 scores 0.6, not 0.6000000000000001).
    """
    catalog = catalog or default_catalog
    score = base_confidence(rank)

    if (
        catalog.is_problematic(entry.canonical_name)
        and rank > settings.problematic_rank_threshold
    ):
        score *= settings.problematic_penalty

    return round(min(max(score, 0.0), 1.0), 4)
