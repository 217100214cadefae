"""
Sample catalogue - a small snapshot shaped like the storefront backend records.
Used by the runner's default config and by the test suite.
"""

SAMPLE_CATALOGUE = [
    {
        "id": "1",
        "name": "Gentle Foaming Cleanser",
        "category": "Skincare",
        "subcategory": "Cleansers",
        "skinType": "All skin types",
        "concerns": "dryness, sensitivity",
        "ingredients": ["Ceramide", "Glycerin", "Aloe"],
        "description": "A soft foaming cleanser that removes impurities without stripping.",
        "price": 14.5,
    },
    {
        "id": "2",
        "name": "Purifying Gel Nettoyant",
        "category": "Soins",
        "subcategory": "Nettoyant",
        "skinType": "Grasse, oily, combination",
        "concerns": "acne, breakouts, excess oil",
        "ingredients": "Salicylic Acid, Zinc, Niacinamide",
        "description": "Clarifying gel cleanser for blemish-prone skin.",
        "price": 16.0,
    },
    {
        "id": "3",
        "name": "Niacinamide 10% Serum",
        "category": "Skincare",
        "subcategory": "Serums",
        "skinType": "oily, combination",
        "concerns": "acne, breakouts, excess oil",
        "ingredients": ["Niacinamide", "Zinc PCA"],
        "description": "Balancing serum that refines pores and controls shine.",
        "price": 22.0,
    },
    {
        "id": "4",
        "name": "Hydra Boost Sérum",
        "category": "Soins",
        "subcategory": "Sérum",
        "skinType": "dry, normal",
        "concerns": "dryness, dehydration, tightness",
        "ingredients": ["Hyaluronic Acid", "Vitamin C"],
        "description": "Plumping serum for thirsty skin.",
        "price": 28.0,
    },
    {
        "id": "5",
        "name": "Barrier Repair Cream",
        "category": "Skincare",
        "subcategory": "Moisturizers",
        "skinType": "dry, sensitive",
        "concerns": "dryness, redness, irritation, sensitivity",
        "ingredients": "Ceramide, Aloe, Shea Butter",
        "description": "Rich cream restoring the skin barrier overnight.",
        "price": 26.0,
    },
    {
        "id": "6",
        "name": "Oil-Free Hydratant Léger",
        "category": "Soins",
        "subcategory": "Hydratant",
        "skinType": "oily, combination",
        "concerns": "excess oil, acne",
        "ingredients": ["Niacinamide", "Hyaluronic Acid"],
        "description": "Weightless moisturizer with a matte finish.",
        "price": 19.0,
    },
    {
        "id": "7",
        "name": "Daily Shield SPF 50",
        "category": "Skincare",
        "subcategory": "Sunscreen",
        "skinType": "tout type de peau",
        "concerns": "sensitivity, redness",
        "ingredients": ["Zinc Oxide", "Aloe"],
        "description": "Mineral broad-spectrum protection with no white cast.",
        "price": 24.0,
    },
    {
        "id": "8",
        "name": "Rose Lip Balm",
        "category": "Makeup",
        "subcategory": "Lips",
        "skinType": "all",
        "concerns": "",
        "ingredients": "Shea Butter",
        "description": "Tinted nourishing balm.",
        "price": 9.0,
    },
]
