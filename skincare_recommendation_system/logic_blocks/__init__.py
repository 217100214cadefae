"""Logic blocks package - pure quiz, matching, prompt and parsing functions."""
from .quiz_analyzer import analyze_answers, format_quiz_result
from .product_matcher import find_best_product, match_routine, score_product
from .routine_copy import build_reason, build_summary, describe_skin_type
from .prompt_builder import build_recommendation_prompt, build_simple_prompt
from .response_parser import RecommendationParseError, extract_json_object, parse_recommendation

__all__ = [
    "analyze_answers",
    "format_quiz_result",
    "find_best_product",
    "match_routine",
    "score_product",
    "build_reason",
    "build_summary",
    "describe_skin_type",
    "build_recommendation_prompt",
    "build_simple_prompt",
    "RecommendationParseError",
    "extract_json_object",
    "parse_recommendation",
]
