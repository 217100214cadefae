"""
Tests for LLM prompt construction and response parsing.
Run with: pytest tests/test_prompt_and_parser.py
"""

import json

import pytest

from skincare_recommendation_system.data.products import SAMPLE_CATALOGUE
from skincare_recommendation_system.logic_blocks.prompt_builder import (
    SYSTEM_MESSAGE,
    build_recommendation_prompt,
    build_simple_prompt,
    filter_prompt_catalogue,
    format_product_block,
)
from skincare_recommendation_system.logic_blocks.response_parser import (
    RecommendationParseError,
    extract_json_object,
    parse_recommendation,
)
from skincare_recommendation_system.models import Product, SkinProfile

VALID_PAYLOAD = {
    "routine": {
        "cleanser": {"productId": "2", "name": "Purifying Gel Nettoyant", "reason": "Clears pores."},
        "serum": {"productId": "3", "name": "Niacinamide 10% Serum", "reason": "Targets acne."},
        "moisturizer": None,
        "sunscreen": {"productId": 7, "name": "Daily Shield SPF 50", "reason": "Protects."},
    },
    "summary": "A balancing routine for oily skin.",
}


@pytest.fixture
def profile():
    return SkinProfile(skinType="oily", concerns=["acne", "excess oil"], ageRange="26-35")


@pytest.fixture
def catalogue():
    return [Product.model_validate(p) for p in SAMPLE_CATALOGUE]


class TestPromptBuilder:
    def test_filter_drops_non_routine_categories(self, catalogue):
        ids = [p.id for p in filter_prompt_catalogue(catalogue)]
        assert "8" not in ids
        assert ids == ["1", "2", "3", "4", "5", "6", "7"]

    def test_product_block_fields(self, catalogue):
        block = format_product_block(catalogue[2])
        assert "- ID: 3" in block
        assert "- Name: Niacinamide 10% Serum" in block
        assert "- Category: Skincare / Serums" in block
        assert "- Skin Type: oily, combination" in block
        assert "- Ingredients: niacinamide, zinc pca" in block
        assert "- Price: $22.00" in block

    def test_prompt_embeds_profile(self, profile, catalogue):
        prompt = build_recommendation_prompt(profile, catalogue)
        assert "- Skin Type: oily (Grasse)" in prompt
        assert "- Main Concerns: acne, excess oil (Acné, Excès de sébum)" in prompt
        assert "- Age Range: 26-35" in prompt

    def test_prompt_lists_only_relevant_products(self, profile, catalogue):
        prompt = build_recommendation_prompt(profile, catalogue)
        assert "Daily Shield SPF 50" in prompt
        assert "Rose Lip Balm" not in prompt

    def test_prompt_requests_exact_json_shape(self, profile, catalogue):
        prompt = build_recommendation_prompt(profile, catalogue)
        shape = json.loads(extract_json_object(prompt[prompt.index("=== RESPONSE FORMAT"):]))
        assert set(shape["routine"]) == {"cleanser", "serum", "moisturizer", "sunscreen"}
        assert set(shape["routine"]["serum"]) == {"productId", "name", "reason"}
        assert "summary" in shape

    def test_prompt_with_empty_catalogue(self, profile):
        prompt = build_recommendation_prompt(profile, [])
        assert "(no products available)" in prompt

    def test_simple_prompt(self, profile, catalogue):
        prompt = build_simple_prompt(profile, catalogue)
        assert "3: Niacinamide 10% Serum (Serums, for oily, combination skin)" in prompt
        assert "Concerns: acne, excess oil" in prompt

    def test_system_message_forbids_invented_products(self):
        assert "never invent products" in SYSTEM_MESSAGE


class TestExtractJsonObject:
    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_prose_around_object(self):
        text = 'Sure! Here is your routine:\n{"a": {"b": 2}}\nEnjoy {your} skin.'
        assert extract_json_object(text) == '{"a": {"b": 2}}'

    def test_braces_inside_strings_are_ignored(self):
        text = 'x {"reason": "use {daily} \\"now\\" }", "n": 1} y'
        assert json.loads(extract_json_object(text)) == {"reason": 'use {daily} "now" }', "n": 1}

    def test_markdown_fence(self):
        text = '```json\n{"summary": "ok"}\n```'
        assert extract_json_object(text) == '{"summary": "ok"}'

    def test_no_object(self):
        assert extract_json_object("no json here") is None

    def test_unbalanced_object(self):
        assert extract_json_object('{"a": {"b": 1}') is None


class TestParseRecommendation:
    def test_valid_payload_with_prose(self):
        text = f"Here you go:\n{json.dumps(VALID_PAYLOAD)}\nHope this helps!"
        result = parse_recommendation(text)
        assert result.routine.cleanser.product_id == "2"
        assert result.routine.sunscreen.product_id == "7"
        assert result.routine.moisturizer is None
        assert result.summary == "A balancing routine for oily skin."

    def test_missing_steps_become_null(self):
        payload = {"routine": {"serum": VALID_PAYLOAD["routine"]["serum"]}, "summary": "Short."}
        data = parse_recommendation(json.dumps(payload)).to_dict()
        assert data["routine"]["cleanser"] is None
        assert data["routine"]["sunscreen"] is None
        assert data["routine"]["serum"]["productId"] == "3"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            None,
            "I cannot help with that.",
            '{"routine": {"cleanser": null,}, "summary": "x"}',
            '{"summary": "no routine"}',
            '{"routine": {}}',
            '{"routine": {}, "summary": "   "}',
            '{"routine": {"serum": {"name": "No id"}}, "summary": "x"}',
            '{"routine": {"serum": {"productId": null, "name": "X", "reason": "r"}}, "summary": "s"}',
            '{"routine": [], "summary": "x"}',
            'Note {this} first {"routine": {}, "summary": "x"}',
        ],
    )
    def test_invalid_responses_raise_parse_error(self, text):
        with pytest.raises(RecommendationParseError):
            parse_recommendation(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_recommendation("nothing")
