"""Fixed ingredient set returned when the vision service cannot be used."""

from typing import List, Tuple

from app.services.catalog import catalog
from app.services.ingredient_schemas import ClassifiedIngredient


FALLBACK_ITEMS: Tuple[Tuple[str, float], ...] = (
    ("tomato", 0.9),
    ("onion", 0.85),
    ("garlic", 0.8),
    ("cheese", 0.75),
    ("basil", 0.7),
)

_FALLBACK: Tuple[ClassifiedIngredient, ...] = tuple(
    ClassifiedIngredient.from_entry(catalog.get(name), confidence)
    for name, confidence in FALLBACK_ITEMS
)


def fallback_ingredients() -> List[ClassifiedIngredient]:
    """Return a fresh copy of the fallback list (descending confidence)."""
    return list(_FALLBACK)
