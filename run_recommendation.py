"""
Main entry point for the Skincare Recommendation System.
Loads quiz answers and a catalogue from config, runs the quiz analyzer and
the recommendation engine, writes the routine as JSON.
"""

import json
import os
import sys

from skincare_recommendation_system.config import (
    ConfigError,
    RecommenderConfig,
    load_run_config,
)
from skincare_recommendation_system.data.quiz_questions import SKIN_TYPE_INFO
from skincare_recommendation_system.engine import RecommendationEngine
from skincare_recommendation_system.logic_blocks.quiz_analyzer import (
    analyze_answers,
    format_quiz_result,
)
from skincare_recommendation_system.models import RoutineStep


def main() -> int:
    print("=" * 60)
    print("🧴 Skincare Routine Recommender")
    print("=" * 60)

    print("\n📂 Loading config...")
    try:
        run_config = load_run_config()
        engine_config = RecommenderConfig.from_env()
    except ConfigError as e:
        print(f"   ✗ Failed to load config: {e}")
        return 1
    print(f"   ✓ Catalogue: {len(run_config.catalogue)} products")

    quiz = format_quiz_result(run_config.answers)
    print("\n📝 Quiz answers:")
    for question, answer in quiz.model_dump().items():
        print(f"   {question}: {answer or '(unanswered)'}")

    profile = analyze_answers(run_config.answers)
    print(f"\n🔍 Skin type: {SKIN_TYPE_INFO[profile.skin_type]['title']}")
    print(f"   Concerns: {', '.join(profile.concerns) or 'none'}")
    print(f"   Age range: {profile.age_range}")

    engine = RecommendationEngine(engine_config)
    print(f"\n🤖 Using: {engine.provider_name}")
    recommendation = engine.recommend(profile, run_config.catalogue)

    print("\n📊 Routine:")
    for step in RoutineStep:
        item = recommendation.routine.get(step)
        print(f"   {step.value:<12} {item.name if item else '—'}")
    print(f"\n{recommendation.summary}")

    output_dir = os.path.dirname(run_config.output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(run_config.output_path, "w", encoding="utf-8") as f:
        json.dump(
            {"profile": profile.to_dict(), "recommendation": recommendation.to_dict()},
            f,
            indent=2,
            ensure_ascii=False,
        )
    print(f"\n💾 {run_config.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
