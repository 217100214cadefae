"""
Unit tests for deterministic Smart Matching and routine copy.
Run with: pytest tests/test_product_matcher.py
"""

import pytest

from skincare_recommendation_system.data.products import SAMPLE_CATALOGUE
from skincare_recommendation_system.logic_blocks.product_matcher import (
    find_best_product,
    match_routine,
    qualifies_for_step,
    rank_products,
    score_product,
)
from skincare_recommendation_system.logic_blocks.routine_copy import (
    FAILURE_SUMMARY,
    NO_PRODUCTS_SUMMARY,
    build_reason,
    build_summary,
    describe_skin_type,
)
from skincare_recommendation_system.models import Product, RoutineStep, SkinProfile, SkinType


@pytest.fixture
def oily_profile():
    return SkinProfile(skinType="oily", concerns=["acne"], ageRange="18-25")


@pytest.fixture
def catalogue():
    return [Product.model_validate(p) for p in SAMPLE_CATALOGUE]


def serum(product_id, **fields):
    return Product(id=product_id, name=f"Serum {product_id}", subcategory="Serum", **fields)


class TestCategoryMatching:
    """Test step classification through the synonym table."""

    @pytest.mark.parametrize(
        "category, subcategory, step",
        [
            ("Skincare", "Cleansers", RoutineStep.CLEANSER),
            ("Soins", "Nettoyant", RoutineStep.CLEANSER),
            ("Face", "Mousse", RoutineStep.CLEANSER),
            ("Soins", "Sérum", RoutineStep.SERUM),
            ("SERUMS", "", RoutineStep.SERUM),
            ("Soins", "Crème de nuit", RoutineStep.MOISTURIZER),
            ("Skincare", "Hydratant", RoutineStep.MOISTURIZER),
            ("Protection", "Solaire", RoutineStep.SUNSCREEN),
            ("Face", "SPF 30", RoutineStep.SUNSCREEN),
        ],
    )
    def test_synonyms_qualify_product(self, category, subcategory, step):
        product = Product(id="p", category=category, subcategory=subcategory)
        assert qualifies_for_step(product, step)

    def test_unrelated_category_does_not_qualify(self):
        product = Product(id="p", category="Makeup", subcategory="Lips")
        assert not any(qualifies_for_step(product, step) for step in RoutineStep)

    def test_product_without_category_does_not_qualify(self):
        assert not qualifies_for_step(Product(id="p"), RoutineStep.SERUM)


class TestScoring:
    """Test the additive relevance score."""

    def test_oily_acne_serum_scores_17(self, oily_profile):
        product = serum(
            "s1",
            skinType="oily",
            concerns="acne, breakouts",
            ingredients=["Niacinamide"],
        )
        assert score_product(product, oily_profile) == 17

    @pytest.mark.parametrize("skin_type", ["All skin types", "Tout type de peau", "OILY"])
    def test_skin_type_fit(self, oily_profile, skin_type):
        assert score_product(serum("s", skinType=skin_type), oily_profile) == 10

    def test_each_concern_adds_five(self):
        profile = SkinProfile(skinType="dry", concerns=["dryness", "tightness", "acne"])
        product = serum("s", concerns="Dryness, Tightness")
        assert score_product(product, profile) == 10

    def test_ingredient_normalization_equivalence(self, oily_profile):
        as_string = serum("a", ingredients="Niacinamide, Aloe")
        as_list = serum("b", ingredients=["Niacinamide", "Aloe"])
        assert as_string.ingredients == as_list.ingredients == ("niacinamide", "aloe")
        assert score_product(as_string, oily_profile) == score_product(as_list, oily_profile) == 4

    def test_all_proven_ingredients(self, oily_profile):
        product = serum(
            "s",
            ingredients="Hyaluronic Acid, Niacinamide, Vitamin C, Aloe Vera, Ceramide NP, "
            "Salicylic Acid, Retinol",
        )
        assert score_product(product, oily_profile) == 14

    def test_missing_optional_fields_score_zero(self, oily_profile):
        assert score_product(Product(id="bare"), oily_profile) == 0


class TestSelection:
    """Test best-product selection and tie-breaking."""

    def test_scenario_serum_selected(self, oily_profile):
        best = serum(
            "s1",
            skinType="oily",
            concerns="acne, breakouts",
            ingredients=["Niacinamide"],
        )
        other = Product(id="c1", name="Cleanser", subcategory="Cleanser", skinType="oily")
        result = match_routine(oily_profile, [other, best])

        assert result.routine.serum.product_id == "s1"
        assert "oily skin" in result.routine.serum.reason

    def test_equal_scores_keep_catalogue_order(self, oily_profile):
        first = serum("first", skinType="oily")
        second = serum("second", skinType="oily")
        assert find_best_product([first, second], RoutineStep.SERUM, oily_profile).id == "first"
        assert find_best_product([second, first], RoutineStep.SERUM, oily_profile).id == "second"

    def test_higher_score_beats_catalogue_order(self, oily_profile):
        weak = serum("weak")
        strong = serum("strong", skinType="oily")
        ranked = rank_products([weak, strong], RoutineStep.SERUM, oily_profile)
        assert [p.id for p in ranked] == ["strong", "weak"]

    def test_no_qualifying_product_returns_none(self, oily_profile):
        cleanser = Product(id="c", subcategory="Cleanser")
        assert find_best_product([cleanser], RoutineStep.SUNSCREEN, oily_profile) is None

    def test_sample_catalogue_oily_routine(self, catalogue):
        profile = SkinProfile(
            skinType="oily", concerns=["acne", "breakouts", "excess oil"], ageRange="18-25"
        )
        routine = match_routine(profile, catalogue).routine
        assert routine.cleanser.product_id == "2"
        assert routine.serum.product_id == "3"
        assert routine.moisturizer.product_id == "6"
        assert routine.sunscreen.product_id == "7"

    def test_sample_catalogue_dry_routine(self, catalogue):
        profile = SkinProfile(skinType="dry", concerns=["tightness"], ageRange="18-25")
        routine = match_routine(profile, catalogue).routine
        assert routine.cleanser.product_id == "1"
        assert routine.serum.product_id == "4"
        assert routine.moisturizer.product_id == "5"
        assert routine.sunscreen.product_id == "7"

    def test_matching_is_deterministic(self, oily_profile, catalogue):
        first = match_routine(oily_profile, catalogue)
        second = match_routine(oily_profile, catalogue)
        assert first.to_dict() == second.to_dict()

    def test_partial_catalogue_leaves_null_slots(self, oily_profile):
        result = match_routine(oily_profile, [serum("only")])
        data = result.to_dict()
        assert set(data["routine"]) == {"cleanser", "serum", "moisturizer", "sunscreen"}
        assert data["routine"]["serum"]["productId"] == "only"
        assert data["routine"]["cleanser"] is None
        assert result.summary == build_summary(oily_profile)

    def test_empty_catalogue(self, oily_profile):
        result = match_routine(oily_profile, [])
        assert result.routine.filled_steps() == []
        assert result.summary == NO_PRODUCTS_SUMMARY
        assert result.summary != FAILURE_SUMMARY


class TestRoutineCopy:
    """Test reason and summary generation."""

    def test_reason_mentions_skin_type_for_every_step(self):
        for step in RoutineStep:
            reason = build_reason(step, SkinType.SENSITIVE)
            assert "sensitive skin" in reason
            assert "soothing" in reason

    def test_unknown_skin_type_uses_generic_clause(self):
        assert describe_skin_type("alien") == "supporting your skin's health"
        assert "supporting your skin's health" in build_reason(RoutineStep.SERUM, "alien")

    def test_profile_normalizes_skin_type(self):
        assert SkinProfile(skinType=" OILY ").skin_type is SkinType.OILY
        mature = SkinProfile(skinType="Mature")
        assert mature.skin_type == "mature"
        assert mature.skin_type_value == "mature"
        summary = build_summary(mature)
        assert summary.startswith("Based on your mature skin type, ")
        assert "supporting your skin's health" in summary

    def test_summary_joins_concerns_with_and(self):
        profile = SkinProfile(skinType="dry", concerns=["dryness", "tightness"])
        summary = build_summary(profile)
        assert "concerns about dryness and tightness" in summary
        assert "dry skin type" in summary

    def test_summary_without_concerns_omits_clause(self):
        summary = build_summary(SkinProfile(skinType="normal", concerns=[]))
        assert "concerns" not in summary
        assert "about" not in summary
        assert summary.startswith("Based on your normal skin type, ")
