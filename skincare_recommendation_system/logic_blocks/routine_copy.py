"""
Routine Copy - human-readable reasons and summaries for a recommended routine.
"""

from typing import Union

from skincare_recommendation_system.data.taxonomy import GENERIC_REASON, SKIN_TYPE_REASONS
from skincare_recommendation_system.models import (
    Routine,
    RoutineRecommendation,
    RoutineStep,
    SkinProfile,
    SkinType,
)

REASON_TEMPLATES = {
    RoutineStep.CLEANSER: "This gentle cleanser is perfect for {skin_type} skin, featuring {description}.",
    RoutineStep.SERUM: "This serum targets your concerns with active ingredients chosen for {skin_type} skin, focusing on {description}.",
    RoutineStep.MOISTURIZER: "This moisturizer provides the perfect level of hydration for {skin_type} skin, with {description}.",
    RoutineStep.SUNSCREEN: "Daily sun protection is essential, and this formula is perfect for {skin_type} skin, offering {description}.",
}

NO_PRODUCTS_SUMMARY = (
    "We couldn't find any products in our catalogue to build your routine right now. "
    "Please check back soon as new products are added regularly."
)

FAILURE_SUMMARY = (
    "We're sorry, we couldn't generate your personalized routine at the moment. "
    "Please try again shortly."
)


def _skin_type_value(skin_type: Union[SkinType, str]) -> str:
    return skin_type.value if isinstance(skin_type, SkinType) else str(skin_type)


def describe_skin_type(skin_type: Union[SkinType, str]) -> str:
    """Descriptive clause for a skin type, generic for unknown types."""
    try:
        return SKIN_TYPE_REASONS[SkinType(_skin_type_value(skin_type))]
    except ValueError:
        return GENERIC_REASON


def build_reason(step: RoutineStep, skin_type: Union[SkinType, str]) -> str:
    return REASON_TEMPLATES[step].format(
        skin_type=_skin_type_value(skin_type),
        description=describe_skin_type(skin_type),
    )


def build_summary(profile: SkinProfile) -> str:
    skin_type = profile.skin_type_value
    opening = f"Based on your {skin_type} skin type"
    if profile.concerns:
        opening += f" and concerns about {' and '.join(profile.concerns)}"

    return (
        f"{opening}, we've selected products that focus on {describe_skin_type(skin_type)}. "
        "This routine will help address your specific needs while keeping your skin "
        "healthy and balanced."
    )


def empty_recommendation(summary: str = FAILURE_SUMMARY) -> RoutineRecommendation:
    """All four slots empty; used for terminal failure and empty catalogues."""
    return RoutineRecommendation(routine=Routine(), summary=summary)
