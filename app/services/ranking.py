"""
Deduplication, ranking and the sufficiency gate.

A single detection below the high-confidence bar yields an empty result.
"""

import logging
from typing import List, Sequence, Tuple

from app.config import settings
from app.services.ingredient_schemas import ClassifiedIngredient, EvidenceStatus


logger = logging.getLogger(__name__)


def dedupe_and_rank(
    candidates: Sequence[ClassifiedIngredient],
) -> List[ClassifiedIngredient]:
    """
    Sort candidates by confidence (descending) and keep the best per name.

    The sort is stable, so among equal confidences the earlier candidate wins.
    """
    ranked = sorted(candidates, key=lambda c: c.confidence, reverse=True)

    seen = set()
    unique: List[ClassifiedIngredient] = []
    for candidate in ranked:
        if candidate.name in seen:
            continue
        seen.add(candidate.name)
        unique.append(candidate)

    return unique


def apply_sufficiency_gate(
    ranked: Sequence[ClassifiedIngredient],
) -> Tuple[List[ClassifiedIngredient], EvidenceStatus]:
    """
    Decide whether a ranked list is usable evidence.

    Args:
        ranked: Every deduplicated catalog match, sorted descending by
            confidence, before any threshold is applied

    Returns:
        (ingredients, status) - ingredients is empty unless status is SUFFICIENT.
        NO_EVIDENCE means nothing matched the catalog; INSUFFICIENT_EVIDENCE
        means matches existed but the gate rejected them.
    """
    if not ranked:
        return [], EvidenceStatus.NO_EVIDENCE

    accepted = [c for c in ranked if c.confidence >= settings.min_confidence]
    accepted = accepted[: settings.max_results]

    if not accepted:
        logger.info(
            "Suppressing %d match(es), all below %.2f",
            len(ranked),
            settings.min_confidence,
        )
        return [], EvidenceStatus.INSUFFICIENT_EVIDENCE

    high_count = sum(1 for c in accepted if c.confidence >= settings.high_confidence)
    if len(accepted) < 2 and high_count == 0:
        logger.info(
            "Suppressing weak evidence: %d item(s), none above %.2f",
            len(accepted),
            settings.high_confidence,
        )
        return [], EvidenceStatus.INSUFFICIENT_EVIDENCE

    return accepted, EvidenceStatus.SUFFICIENT
