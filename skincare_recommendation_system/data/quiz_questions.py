"""
Skin Quiz Data - the five storefront quiz questions and their scoring tables.
Option order is significant: answers are option indices.
"""

from skincare_recommendation_system.models import SkinType

QUIZ_QUESTIONS = [
    {
        "id": 1,
        "key": "skin_feeling",
        "question": "How does your skin feel after washing?",
        "options": [
            "Tight and dry",
            "Comfortable and balanced",
            "Slightly oily in T-zone",
            "Very oily and shiny all over",
        ],
    },
    {
        "id": 2,
        "key": "skin_concerns",
        "question": "Do you experience any of these skin concerns?",
        "options": [
            "Acne and breakouts",
            "Redness and irritation",
            "Dryness and flakiness",
            "Sensitivity to products",
            "None of the above",
        ],
    },
    {
        "id": 3,
        "key": "oiliness_level",
        "question": "How oily does your skin get during the day?",
        "options": [
            "Not oily at all",
            "Slightly oily in T-zone only",
            "Moderately oily all over",
            "Very oily, need to blot often",
        ],
    },
    {
        "id": 4,
        "key": "sensitivity",
        "question": "Are you sensitive to fragrances or active ingredients?",
        "options": [
            "Yes, my skin reacts easily",
            "Sometimes, with certain products",
            "Rarely",
            "No, never had issues",
        ],
    },
    {
        "id": 5,
        "key": "age_range",
        "question": "What is your age range?",
        "options": [
            "Under 18",
            "18 – 25",
            "26 – 35",
            "36 – 45",
            "46+",
        ],
    },
]

# question index -> option index -> {skin type: weight}
SKIN_TYPE_WEIGHTS = {
    0: {
        0: {SkinType.DRY: 2},
        1: {SkinType.NORMAL: 2},
        2: {SkinType.COMBINATION: 2},
        3: {SkinType.OILY: 2},
    },
    1: {
        0: {SkinType.OILY: 1},
        1: {SkinType.SENSITIVE: 2},
        2: {SkinType.DRY: 2},
        3: {SkinType.SENSITIVE: 2},
        4: {SkinType.NORMAL: 1},
    },
    2: {
        0: {SkinType.DRY: 1},
        1: {SkinType.COMBINATION: 2},
        2: {SkinType.OILY: 1},
        3: {SkinType.OILY: 2},
    },
    3: {
        0: {SkinType.SENSITIVE: 2},
        1: {SkinType.SENSITIVE: 1},
    },
}

SKIN_TYPE_PRIORITY = [
    SkinType.DRY,
    SkinType.OILY,
    SkinType.COMBINATION,
    SkinType.SENSITIVE,
    SkinType.NORMAL,
]

BASE_CONCERNS = {
    0: ["acne", "breakouts"],
    1: ["redness", "irritation"],
    2: ["dryness", "dehydration"],
    3: ["sensitivity", "reactivity"],
    4: [],
}

AGE_RANGES = ["under-18", "18-25", "26-35", "36-45", "46+"]

SKIN_TYPE_INFO = {
    SkinType.DRY: {"title": "Dry Skin"},
    SkinType.OILY: {"title": "Oily Skin"},
    SkinType.COMBINATION: {"title": "Combination Skin"},
    SkinType.SENSITIVE: {"title": "Sensitive Skin"},
    SkinType.NORMAL: {"title": "Normal Skin"},
}
