"""
Skincare Recommendation System - quiz analysis and routine recommendations.
"""

__version__ = "1.0.0"

from .config import RecommenderConfig
from .engine import RecommendationEngine, recommend
from .logic_blocks.quiz_analyzer import analyze, analyze_answers
from .models import (
    Product,
    Routine,
    RoutineItem,
    RoutineRecommendation,
    RoutineStep,
    SkinProfile,
    SkinType,
)

__all__ = [
    "RecommenderConfig",
    "RecommendationEngine",
    "recommend",
    "analyze",
    "analyze_answers",
    "Product",
    "Routine",
    "RoutineItem",
    "RoutineRecommendation",
    "RoutineStep",
    "SkinProfile",
    "SkinType",
]
