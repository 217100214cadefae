"""
Product Matcher - deterministic routine selection without an LLM.
Table-driven: step synonyms and scoring weights live in data.taxonomy.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from skincare_recommendation_system.data.taxonomy import (
    CONCERN_MATCH_SCORE,
    INGREDIENT_BONUS,
    PROVEN_INGREDIENTS,
    SKIN_TYPE_MATCH_SCORE,
    STEP_SYNONYMS,
    UNIVERSAL_SKIN_TYPES,
)
from skincare_recommendation_system.logic_blocks.routine_copy import (
    NO_PRODUCTS_SUMMARY,
    build_reason,
    build_summary,
    empty_recommendation,
)
from skincare_recommendation_system.models import (
    Product,
    Routine,
    RoutineItem,
    RoutineRecommendation,
    RoutineStep,
    SkinProfile,
)

logger = logging.getLogger("ProductMatcher")


def matches_synonyms(product: Product, synonyms: Iterable[str]) -> bool:
    text = product.category_text
    return any(synonym.lower() in text for synonym in synonyms)


def qualifies_for_step(product: Product, step: RoutineStep) -> bool:
    return matches_synonyms(product, STEP_SYNONYMS[step])


def score_product(product: Product, profile: SkinProfile) -> int:
    """
    Additive relevance score:
    - skin type fit (or universal product)
    - each profile concern named in the product concerns
    - each proven ingredient present
    """
    score = 0

    product_skin_type = product.skin_type.lower()
    if profile.skin_type_value in product_skin_type or any(
        marker in product_skin_type for marker in UNIVERSAL_SKIN_TYPES
    ):
        score += SKIN_TYPE_MATCH_SCORE

    product_concerns = product.concerns.lower()
    for concern in profile.concerns:
        if concern.lower() in product_concerns:
            score += CONCERN_MATCH_SCORE

    ingredients = product.ingredient_text
    for ingredient in PROVEN_INGREDIENTS:
        if ingredient in ingredients:
            score += INGREDIENT_BONUS

    return score


def rank_products(
    catalogue: Sequence[Product], step: RoutineStep, profile: SkinProfile
) -> List[Product]:
    """Qualifying products, best first. sorted() is stable, so ties keep catalogue order."""
    matching = [p for p in catalogue if qualifies_for_step(p, step)]
    return sorted(matching, key=lambda p: score_product(p, profile), reverse=True)


def find_best_product(
    catalogue: Sequence[Product], step: RoutineStep, profile: SkinProfile
) -> Optional[Product]:
    ranked = rank_products(catalogue, step, profile)
    if not ranked:
        logger.debug(f"No product qualifies for {step.value}")
        return None
    return ranked[0]


def match_routine(profile: SkinProfile, catalogue: Sequence[Product]) -> RoutineRecommendation:
    """
    Pick one product per routine step and explain each choice.

    Args:
        profile: Quiz-derived skin profile
        catalogue: Point-in-time product snapshot

    Returns:
        RoutineRecommendation; steps without a qualifying product are None
    """
    slots = {}
    for step in RoutineStep:
        best = find_best_product(catalogue, step, profile)
        slots[step.value] = (
            RoutineItem(
                product_id=best.id,
                name=best.name,
                reason=build_reason(step, profile.skin_type),
            )
            if best
            else None
        )

    routine = Routine(**slots)
    if not routine.filled_steps():
        logger.info(f"No products matched any step ({len(catalogue)} in catalogue)")
        return empty_recommendation(NO_PRODUCTS_SUMMARY)

    logger.info(
        f"Matched {len(routine.filled_steps())}/{len(RoutineStep)} steps "
        f"for {profile.skin_type_value} skin"
    )
    return RoutineRecommendation(routine=routine, summary=build_summary(profile))
