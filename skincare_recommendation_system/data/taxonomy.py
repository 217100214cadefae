"""
Matching taxonomy - category synonyms, ingredient allowlist and copy tables.
Kept as plain data so the matcher stays table-driven.
"""

from skincare_recommendation_system.models import RoutineStep, SkinType

# Case-insensitive substrings of "<category> <subcategory>" identifying each step
STEP_SYNONYMS = {
    RoutineStep.CLEANSER: ("cleanser", "cleansers", "nettoyant", "gel", "mousse"),
    RoutineStep.SERUM: ("serum", "serums", "sérum"),
    RoutineStep.MOISTURIZER: ("moisturizer", "moisturizers", "cream", "crème", "hydratant"),
    RoutineStep.SUNSCREEN: ("sunscreen", "spf", "sun", "solaire"),
}

# Categories worth sending to the LLM (English + French)
ALLOWED_PROMPT_CATEGORIES = tuple(
    dict.fromkeys(
        [syn for synonyms in STEP_SYNONYMS.values() for syn in synonyms]
        + ["nettoyants", "crèmes", "hydratants", "protection solaire"]
    )
)

PROVEN_INGREDIENTS = (
    "hyaluronic",
    "niacinamide",
    "vitamin c",
    "aloe",
    "ceramide",
    "salicylic",
    "retinol",
)

UNIVERSAL_SKIN_TYPES = ("all", "tout")

# Scoring weights
SKIN_TYPE_MATCH_SCORE = 10
CONCERN_MATCH_SCORE = 5
INGREDIENT_BONUS = 2

SKIN_TYPE_REASONS = {
    SkinType.DRY: "hydrating ingredients to nourish and moisturize your dry skin",
    SkinType.OILY: "lightweight formulas that control oil without over-drying",
    SkinType.COMBINATION: "balanced formulas that address both oily and dry areas",
    SkinType.SENSITIVE: "gentle, soothing ingredients that won't irritate your skin",
    SkinType.NORMAL: "maintaining your skin's natural balance and protection",
}

GENERIC_REASON = "supporting your skin's health"

SKIN_TYPE_FR = {
    SkinType.DRY: "Sèche",
    SkinType.OILY: "Grasse",
    SkinType.COMBINATION: "Mixte",
    SkinType.SENSITIVE: "Sensible",
    SkinType.NORMAL: "Normale",
}

CONCERNS_FR = {
    "acne": "Acné",
    "breakouts": "Imperfections",
    "redness": "Rougeurs",
    "irritation": "Irritation",
    "dryness": "Sécheresse",
    "dehydration": "Déshydratation",
    "sensitivity": "Sensibilité",
    "reactivity": "Réactivité",
    "tightness": "Tiraillements",
    "excess oil": "Excès de sébum",
}
