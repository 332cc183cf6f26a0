"""
Pydantic models for the ingredient recognition pipeline.

Covers the static catalog types, the decoded vision service payload,
per-stage outcomes threaded through the orchestrator, and the final
ranked result.
"""

import enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FoodCategory(str, enum.Enum):
    """Enum for catalog food categories."""
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    MEAT = "meat"
    DAIRY = "dairy"
    GRAINS = "grains"
    LEGUMES = "legumes"
    HERBS = "herbs"
    SPICES = "spices"


# --- Catalog ---


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    canonical_name: str
    category: FoodCategory
    localized_name: Optional[str] = None


# --- Pipeline output ---


class ClassifiedIngredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    localized_name: Optional[str] = None
    category: FoodCategory
    confidence: float = Field(ge=0, le=1)

    @classmethod
    def from_entry(cls, entry: CatalogEntry, confidence: float) -> "ClassifiedIngredient":
        return cls(
            name=entry.canonical_name,
            localized_name=entry.localized_name,
            category=entry.category,
            confidence=confidence,
        )


# --- Vision service payload (extract_labels) ---


class RecognitionPayload(BaseModel):
    """Decoded label list; `source` records which upstream field supplied it."""
    model_config = ConfigDict(frozen=True)

    source: Literal["tags", "english"]
    labels: tuple[str, ...]


# --- Stage outcomes ---


class FailureKind(str, enum.Enum):
    """Why the vision service produced no usable labels."""
    SERVICE_UNAVAILABLE = "service_unavailable"
    UPSTREAM_ERROR = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"


class ExtractOk(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    labels: tuple[str, ...]


class ExtractFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: FailureKind
    detail: str = ""


ExtractOutcome = Union[ExtractOk, ExtractFailure]


class EvidenceStatus(str, enum.Enum):
    """Verdict of the sufficiency gate."""
    SUFFICIENT = "sufficient"
    NO_EVIDENCE = "no_evidence"
    INSUFFICIENT_EVIDENCE = "insufficient_evidence"


class RecognitionStatus(str, enum.Enum):
    DETECTED = "detected"
    FALLBACK = "fallback"
    NO_EVIDENCE = "no_evidence"
    INSUFFICIENT_EVIDENCE = "insufficient_evidence"


class RecognitionOutcome(BaseModel):
    status: RecognitionStatus
    ingredients: list[ClassifiedIngredient] = []
    failure: Optional[FailureKind] = None
