"""
Static ingredient catalog used by the tag classifier.

All tables are built once at import time and exposed read-only, so
concurrent recognition requests can share them without locking.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from app.services.ingredient_schemas import CatalogEntry, FoodCategory


# Category catalogs, in the order the fuzzy matcher scans them.
CATEGORY_ITEMS: Dict[FoodCategory, Tuple[str, ...]] = {
    FoodCategory.VEGETABLES: (
        "tomato", "potato", "onion", "garlic", "carrot", "celery", "pepper",
        "broccoli", "spinach", "lettuce", "cucumber", "zucchini", "eggplant",
        "mushroom",
    ),
    FoodCategory.FRUITS: (
        "apple", "banana", "orange", "lemon", "lime", "strawberry", "blueberry",
        "grape", "peach", "pear", "cherry", "watermelon", "pineapple", "mango",
    ),
    FoodCategory.MEAT: (
        "chicken", "beef", "pork", "lamb", "fish", "salmon", "tuna", "shrimp",
        "bacon", "sausage", "turkey", "ham",
    ),
    FoodCategory.DAIRY: (
        "milk", "cheese", "yogurt", "butter", "cream", "mozzarella", "parmesan",
        "ricotta", "eggs",
    ),
    FoodCategory.GRAINS: (
        "rice", "pasta", "bread", "flour", "quinoa", "oats", "barley", "wheat",
        "noodles", "spaghetti",
    ),
    FoodCategory.LEGUMES: (
        "beans", "lentils", "chickpeas", "peas", "soybeans", "kidney beans",
        "black beans", "white beans",
    ),
    FoodCategory.HERBS: (
        "basil", "oregano", "thyme", "rosemary", "parsley", "cilantro", "mint",
        "sage", "dill",
    ),
    # "pepper" lives under vegetables; canonical names are unique
    FoodCategory.SPICES: (
        "salt", "paprika", "cumin", "coriander", "cinnamon", "nutmeg", "ginger",
        "turmeric",
    ),
}

LOCALIZED_NAMES: Dict[str, str] = {
    # Vegetables
    "tomato": "pomodoro",
    "potato": "patata",
    "onion": "cipolla",
    "garlic": "aglio",
    "carrot": "carota",
    "celery": "sedano",
    "pepper": "peperone",
    "broccoli": "broccoli",
    "spinach": "spinaci",
    "lettuce": "lattuga",
    "cucumber": "cetriolo",
    "zucchini": "zucchina",
    "eggplant": "melanzana",
    "mushroom": "fungo",
    # Fruits
    "apple": "mela",
    "banana": "banana",
    "orange": "arancia",
    "lemon": "limone",
    "lime": "lime",
    "strawberry": "fragola",
    "blueberry": "mirtillo",
    "grape": "uva",
    "peach": "pesca",
    "pear": "pera",
    "cherry": "ciliegia",
    "watermelon": "anguria",
    "pineapple": "ananas",
    "mango": "mango",
    # Meat
    "chicken": "pollo",
    "beef": "manzo",
    "pork": "maiale",
    "lamb": "agnello",
    "fish": "pesce",
    "salmon": "salmone",
    "tuna": "tonno",
    "shrimp": "gamberetto",
    "turkey": "tacchino",
    # Dairy
    "milk": "latte",
    "cheese": "formaggio",
    "butter": "burro",
    "eggs": "uova",
    # Grains
    "rice": "riso",
    "pasta": "pasta",
    "bread": "pane",
    "flour": "farina",
    "quinoa": "quinoa",
    "oats": "avena",
    "barley": "orzo",
    # Legumes
    "beans": "fagioli",
    "lentils": "lenticchie",
    "chickpeas": "ceci",
    "soybeans": "soia",
    # Herbs
    "basil": "basilico",
    "oregano": "origano",
    "thyme": "timo",
    "rosemary": "rosmarino",
    "parsley": "prezzemolo",
    "cilantro": "coriandolo",
    "mint": "menta",
    "sage": "salvia",
    "dill": "aneto",
    # Spices
    "salt": "sale",
    "paprika": "paprika",
    "cumin": "cumino",
    "cinnamon": "cannella",
    "nutmeg": "noce moscata",
    "ginger": "zenzero",
    "turmeric": "curcuma",
}

# Items that often come back from colour or scene labels rather than food
PROBLEMATIC_ITEMS: Tuple[str, ...] = (
    "orange", "lime", "pepper", "mint", "sage", "cream", "ham", "fish",
)

# Upstream labels the exact and fuzzy rules cannot reach
ALIAS_OVERRIDES: Dict[str, str] = {
    "aubergine": "eggplant",
    "courgette": "zucchini",
    "capsicum": "pepper",
    "bell pepper": "pepper",
    "red pepper": "pepper",
    "green pepper": "pepper",
    "cherry tomato": "tomato",
    "scallion": "onion",
    "shallot": "onion",
    "portobello": "mushroom",
    "strawberries": "strawberry",
    "blueberries": "blueberry",
    "cherries": "cherry",
    "prawn": "shrimp",
    "prawns": "shrimp",
    "chicken breast": "chicken",
    "steak": "beef",
    "ground beef": "beef",
    "cheddar": "cheese",
    "egg": "eggs",
    "macaroni": "pasta",
    "penne": "pasta",
    "garbanzo": "chickpeas",
    "garbanzo beans": "chickpeas",
    "coriander leaf": "cilantro",
    # Italian labels
    "pomodori": "tomato",
    "patate": "potato",
    "cipolle": "onion",
    "carote": "carrot",
    "peperoni": "pepper",
    "zucchine": "zucchini",
    "melanzane": "eggplant",
    "funghi": "mushroom",
    "formaggio": "cheese",
    "uovo": "eggs",
    "pollo": "chicken",
    "manzo": "beef",
}

# Generic or non-food labels rejected before any matching
NON_FOOD_TERMS: Tuple[str, ...] = (
    # Containers and utensils
    "plate", "bowl", "dish", "spoon", "fork", "knife", "pan", "pot",
    "container", "box", "bag", "wrapper", "package", "packaging", "bottle",
    "jar", "can", "tin", "carton", "cup", "glass", "tray", "basket",
    "cutting board", "chopping board",
    # Appliances and furniture
    "refrigerator", "fridge", "freezer", "kitchen", "counter", "countertop",
    "table", "surface", "cabinet", "drawer", "shelf", "appliance",
    "home appliance", "door", "handle",
    # Materials
    "plastic", "metal", "wood", "wooden", "paper", "cardboard", "aluminum",
    "steel", "ceramic", "fabric", "cloth", "rubber", "ice",
    # Colours (orange and lime stay matchable, see PROBLEMATIC_ITEMS)
    "color", "red", "green", "blue", "yellow", "white", "black", "brown",
    "purple", "pink", "gray", "grey", "silver", "gold",
    # People
    "person", "people", "man", "woman", "child", "hand", "finger", "face",
    # Scene
    "indoor", "outdoor", "home", "room", "wall", "floor", "window",
    "background", "foreground", "scene", "view", "sky", "light", "shadow",
    "close-up", "still life",
    # Too generic to be an ingredient
    "food", "ingredient", "meal", "dinner", "lunch", "breakfast", "snack",
    "vegetable", "fruit", "meat", "dairy", "grain", "produce", "grocery",
    "cuisine", "recipe", "fresh", "organic", "healthy", "item", "object",
    # Shopping
    "market", "store", "shop", "price",
)


class Catalog:
    """Read-only lookup tables for canonical ingredients."""

    def __init__(
        self,
        category_items: Mapping[FoodCategory, Iterable[str]],
        localized_names: Mapping[str, str],
        problematic_items: Iterable[str],
        alias_overrides: Mapping[str, str],
        non_food_terms: Iterable[str],
    ):
        entries = []
        by_name: Dict[str, CatalogEntry] = {}
        for category in FoodCategory:
            for name in category_items.get(category, ()):
                if name in by_name:
                    raise ValueError(f"Duplicate catalog entry: {name}")
                entry = CatalogEntry(
                    canonical_name=name,
                    category=category,
                    localized_name=localized_names.get(name),
                )
                by_name[name] = entry
                entries.append(entry)

        for alias, target in alias_overrides.items():
            if target not in by_name:
                raise ValueError(f"Override '{alias}' points to unknown item '{target}'")

        self.entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._by_name = MappingProxyType(by_name)
        self._problematic = frozenset(problematic_items)
        self._overrides = MappingProxyType(dict(alias_overrides))
        self._non_food = frozenset(non_food_terms)

    @classmethod
    def default(cls) -> "Catalog":
        return cls(
            CATEGORY_ITEMS,
            LOCALIZED_NAMES,
            PROBLEMATIC_ITEMS,
            ALIAS_OVERRIDES,
            NON_FOOD_TERMS,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[CatalogEntry]:
        return self._by_name.get(name)

    def is_problematic(self, name: str) -> bool:
        return name in self._problematic

    def is_excluded(self, normalized_tag: str) -> bool:
        return normalized_tag in self._non_food

    def resolve_override(self, normalized_tag: str) -> Optional[CatalogEntry]:
        target = self._overrides.get(normalized_tag)
        return self._by_name[target] if target else None


# Singleton instance
catalog = Catalog.default()
