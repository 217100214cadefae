"""
Prompt Builder - instructions sent to the LLM recommendation path.
"""

from typing import List, Sequence

from skincare_recommendation_system.data.taxonomy import ALLOWED_PROMPT_CATEGORIES
from skincare_recommendation_system.logic_blocks.product_matcher import matches_synonyms
from skincare_recommendation_system.logic_blocks.quiz_analyzer import (
    map_concerns_to_french,
    map_skin_type_to_french,
)
from skincare_recommendation_system.models import Product, SkinProfile

SYSTEM_MESSAGE = """You are an expert skincare consultant with deep knowledge of ingredients,
skin types, and skincare routines. You provide personalized recommendations
based on scientific understanding of how ingredients work for different skin concerns.
Always be friendly, professional, and explain your recommendations clearly.
You MUST only recommend products from the provided product list - never invent products."""

RESPONSE_FORMAT = """{
  "routine": {
    "cleanser": {
      "productId": "product ID from list",
      "name": "product name",
      "reason": "1-2 sentences explaining why this product is perfect for the user"
    },
    "serum": {
      "productId": "product ID from list",
      "name": "product name",
      "reason": "1-2 sentences explaining why this product is perfect for the user"
    },
    "moisturizer": {
      "productId": "product ID from list",
      "name": "product name",
      "reason": "1-2 sentences explaining why this product is perfect for the user"
    },
    "sunscreen": {
      "productId": "product ID from list",
      "name": "product name",
      "reason": "1-2 sentences explaining why this product is perfect for the user"
    }
  },
  "summary": "A friendly 2-3 sentence summary of the routine and why it's perfect for this user's skin"
}"""


def filter_prompt_catalogue(catalogue: Sequence[Product]) -> List[Product]:
    """Keep only products belonging to a routine category."""
    return [p for p in catalogue if matches_synonyms(p, ALLOWED_PROMPT_CATEGORIES)]


def format_product_block(product: Product) -> str:
    return f"""
    - ID: {product.id}
    - Name: {product.name}
    - Category: {product.category} / {product.subcategory}
    - Skin Type: {product.skin_type}
    - Concerns: {product.concerns}
    - Ingredients: {', '.join(product.ingredients)}
    - Description: {product.description}
    - Price: ${product.price:.2f}
  """


def build_recommendation_prompt(profile: SkinProfile, catalogue: Sequence[Product]) -> str:
    """
    Build the full instruction: profile, relevant products, task and JSON shape.

    Args:
        profile: Quiz-derived skin profile
        catalogue: Product snapshot; filtered to routine categories here

    Returns:
        Prompt string for the LLM user message
    """
    relevant = filter_prompt_catalogue(catalogue)
    products_text = "\n".join(format_product_block(p) for p in relevant)
    if not products_text:
        products_text = "(no products available)"

    skin_type = profile.skin_type_value
    concerns = ", ".join(profile.concerns) or "none"
    concerns_fr = ", ".join(map_concerns_to_french(profile.concerns)) or "aucune"

    return f"""
You are an expert skincare consultant. Based on the user's skin analysis and the available products,
create a personalized skincare routine.

=== USER SKIN PROFILE ===
- Skin Type: {skin_type} ({map_skin_type_to_french(profile.skin_type)})
- Main Concerns: {concerns} ({concerns_fr})
- Age Range: {profile.age_range}

=== AVAILABLE PRODUCTS ===
{products_text}

=== YOUR TASK ===
Select the BEST products from the list above to create a complete skincare routine.
You MUST only recommend products from the provided list - do NOT invent products.

Create a routine with:
1. CLEANSER - A gentle cleanser suitable for the skin type
2. SERUM - A treatment serum addressing the main concerns
3. MOISTURIZER - A hydrating cream suitable for the skin type
4. SUNSCREEN - A protective SPF product

For each product, explain WHY you chose it based on:
- How the ingredients address the user's concerns
- Skin type compatibility
- Product description relevance

=== RESPONSE FORMAT (JSON ONLY) ===
Respond ONLY with valid JSON in this exact format:
{RESPONSE_FORMAT}

If a category has no suitable product, use null for that slot and explain in summary.
"""


def build_simple_prompt(profile: SkinProfile, catalogue: Sequence[Product]) -> str:
    """Shorter prompt for models with small context windows."""
    product_list = "\n".join(
        f"{p.id}: {p.name} ({p.subcategory}, for {p.skin_type} skin)"
        for p in filter_prompt_catalogue(catalogue)
    )

    return f"""
Skin type: {profile.skin_type_value}
Concerns: {', '.join(profile.concerns)}

Products available:
{product_list}

Select best: cleanser, serum, moisturizer, sunscreen.
Return JSON: {{"routine": {{"cleanser": {{"productId": "", "name": "", "reason": ""}}, ...}}, "summary": ""}}
"""
