"""
Ingredient recognition pipeline.

image path -> vision labels -> catalog match -> confidence score
           -> dedupe/rank -> sufficiency gate -> ingredient list

Upstream failures resolve to the fixed fallback list; weak or missing
evidence resolves to an empty list. Neither path raises.
"""

import logging
from typing import List, Optional, Sequence

from app.services.catalog import Catalog, catalog as default_catalog
from app.services.fallback import fallback_ingredients
from app.services.ingredient_schemas import (
    ClassifiedIngredient,
    EvidenceStatus,
    ExtractFailure,
    FailureKind,
    RecognitionOutcome,
    RecognitionStatus,
)
from app.services.ranking import apply_sufficiency_gate, dedupe_and_rank
from app.services.scoring import score_match
from app.services.tag_classifier import classify_tag
from app.services.vision_client import VisionClient


logger = logging.getLogger(__name__)

_STATUS_BY_EVIDENCE = {
    EvidenceStatus.SUFFICIENT: RecognitionStatus.DETECTED,
    EvidenceStatus.NO_EVIDENCE: RecognitionStatus.NO_EVIDENCE,
    EvidenceStatus.INSUFFICIENT_EVIDENCE: RecognitionStatus.INSUFFICIENT_EVIDENCE,
}


class IngredientRecognitionService:
    """Turns a food photo into a ranked list of catalog ingredients."""

    def __init__(
        self,
        vision_client: Optional[VisionClient] = None,
        catalog: Optional[Catalog] = None,
    ):
        self.vision_client = vision_client or VisionClient()
        self.catalog = catalog or default_catalog

    async def classify(self, image_path: str) -> List[ClassifiedIngredient]:
        """
        Recognize ingredients in an image.

        Returns the fallback list if the vision service is unusable, and an
        empty list if the image holds no convincing food evidence. Callers
        that need to tell those cases apart should use `recognize`.
        """
        outcome = await self.recognize(image_path)
        return outcome.ingredients

    async def recognize(self, image_path: str) -> RecognitionOutcome:
        """
        Run the full pipeline and report how the result was reached.

        Args:
            image_path: Path to an image already saved on local storage

        Returns:
            RecognitionOutcome with status detected, fallback, no_evidence or
            insufficient_evidence
        """
        try:
            extracted = await self.vision_client.extract_labels(image_path)

            if isinstance(extracted, ExtractFailure):
                return self._fallback(extracted.kind)

            candidates = self.score_labels(extracted.labels)
            ranked = dedupe_and_rank(candidates)
            ingredients, evidence = apply_sufficiency_gate(ranked)
        except Exception:
            logger.exception("Ingredient recognition failed for %s", image_path)
            return self._fallback(FailureKind.UPSTREAM_ERROR)

        status = _STATUS_BY_EVIDENCE[evidence]
        logger.info(
            "Recognized %d ingredient(s) from %d label(s): %s",
            len(ingredients),
            len(extracted.labels),
            status.value,
        )
        return RecognitionOutcome(status=status, ingredients=ingredients)

    def score_labels(self, labels: Sequence[str]) -> List[ClassifiedIngredient]:
        """Classify and score each label by rank, dropping non-matches."""
        candidates = []
        for rank, label in enumerate(labels):
            entry = classify_tag(label, self.catalog)
            if entry is None:
                continue
            confidence = score_match(entry, rank, self.catalog)
            candidates.append(ClassifiedIngredient.from_entry(entry, confidence))
        return candidates

    async def health(self) -> bool:
        """Return True when the vision service answers the availability probe."""
        return await self.vision_client.probe()

    def _fallback(self, kind: FailureKind) -> RecognitionOutcome:
        logger.warning("Using fallback ingredients (%s)", kind.value)
        return RecognitionOutcome(
            status=RecognitionStatus.FALLBACK,
            ingredients=fallback_ingredients(),
            failure=kind,
        )


# Singleton instance
recognition_service = IngredientRecognitionService()
