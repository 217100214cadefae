"""
Quiz Analyzer - turns the five skin quiz answers into a SkinProfile.
Pure additive scoring over a fixed weight table; never raises for 5-slot input.
"""

import logging
from typing import Dict, List, Optional, Sequence

from skincare_recommendation_system.data.quiz_questions import (
    AGE_RANGES,
    BASE_CONCERNS,
    QUIZ_QUESTIONS,
    SKIN_TYPE_PRIORITY,
    SKIN_TYPE_WEIGHTS,
)
from skincare_recommendation_system.data.taxonomy import CONCERNS_FR, SKIN_TYPE_FR
from skincare_recommendation_system.models import (
    UNKNOWN_AGE_RANGE,
    QuizResult,
    SkinProfile,
    SkinType,
)

logger = logging.getLogger("QuizAnalyzer")

Answer = Optional[int]

SCORING_QUESTIONS = 4
AGE_QUESTION = 4


def _answer_at(answers: Sequence[Answer], index: int) -> Answer:
    """Return the option index for a question, or None when unanswered."""
    if index >= len(answers):
        return None
    value = answers[index]
    # bool is an int subclass but never a valid option
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def score_skin_types(answers: Sequence[Answer]) -> Dict[SkinType, int]:
    """Accumulate the per-type counters for questions 1-4."""
    scores = {skin_type: 0 for skin_type in SKIN_TYPE_PRIORITY}

    for question in range(SCORING_QUESTIONS):
        answer = _answer_at(answers, question)
        if answer is None:
            continue
        for skin_type, weight in SKIN_TYPE_WEIGHTS[question].get(answer, {}).items():
            scores[skin_type] += weight

    return scores


def determine_skin_type(scores: Dict[SkinType, int]) -> SkinType:
    """
    Highest counter wins. Equal counters resolve by SKIN_TYPE_PRIORITY
    (dry > oily > combination > sensitive > normal) via a stable sort.
    """
    ranked = sorted(SKIN_TYPE_PRIORITY, key=lambda t: scores.get(t, 0), reverse=True)
    return ranked[0]


def derive_concerns(answers: Sequence[Answer]) -> List[str]:
    """Base concerns from question 2, plus extras keyed off questions 1, 3 and 4."""
    concerns = list(BASE_CONCERNS.get(_answer_at(answers, 1), []))

    feeling = _answer_at(answers, 0)
    oiliness = _answer_at(answers, 2)
    reactivity = _answer_at(answers, 3)

    if feeling == 0:
        concerns.append("tightness")
    if oiliness is not None and oiliness >= 2:
        concerns.append("excess oil")
    if reactivity is not None and reactivity <= 1:
        concerns.append("sensitivity")

    return list(dict.fromkeys(concerns))


def determine_age_range(answers: Sequence[Answer]) -> str:
    answer = _answer_at(answers, AGE_QUESTION)
    if answer is None or not 0 <= answer < len(AGE_RANGES):
        return UNKNOWN_AGE_RANGE
    return AGE_RANGES[answer]


def analyze_answers(answers: Sequence[Answer]) -> SkinProfile:
    """
    Analyze quiz answers to determine skin type, concerns and age range.

    Args:
        answers: Five option indices; None marks an unanswered question

    Returns:
        SkinProfile with the per-type scores kept for debugging
    """
    scores = score_skin_types(answers)
    skin_type = determine_skin_type(scores)
    profile = SkinProfile(
        skin_type=skin_type,
        concerns=derive_concerns(answers),
        age_range=determine_age_range(answers),
        scores={t.value: s for t, s in scores.items()},
    )
    logger.info(
        f"Quiz analyzed: {profile.skin_type_value} skin, "
        f"{len(profile.concerns)} concerns, age {profile.age_range}"
    )
    return profile


analyze = analyze_answers


def format_quiz_result(answers: Sequence[Answer]) -> QuizResult:
    """Map answer indices to the option text shown in the quiz."""
    texts = {}
    for index, question in enumerate(QUIZ_QUESTIONS):
        answer = _answer_at(answers, index)
        options = question["options"]
        texts[question["key"]] = (
            options[answer] if answer is not None and 0 <= answer < len(options) else None
        )
    return QuizResult(**texts)


def map_skin_type_to_french(skin_type) -> str:
    """French label used for product matching; unknown types pass through."""
    value = skin_type.value if isinstance(skin_type, SkinType) else str(skin_type)
    try:
        return SKIN_TYPE_FR[SkinType(value)]
    except ValueError:
        return value


def map_concerns_to_french(concerns: Sequence[str]) -> List[str]:
    return [CONCERNS_FR.get(c, c) for c in concerns]
