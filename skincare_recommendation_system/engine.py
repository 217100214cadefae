"""
Recommendation Engine - builds a skincare routine from a skin profile.

Two paths:
- LLM path, used only when a provider credential is configured
- Smart Matching (deterministic), used otherwise and as the fallback for
  every LLM failure
The public methods never raise for ordinary input.
"""

import asyncio
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from skincare_recommendation_system.config import RecommenderConfig
from skincare_recommendation_system.infrastructure.llm_provider import (
    BaseLLMProvider,
    create_provider,
)
from skincare_recommendation_system.infrastructure.logger import get_logger
from skincare_recommendation_system.logic_blocks.product_matcher import match_routine
from skincare_recommendation_system.logic_blocks.prompt_builder import (
    SYSTEM_MESSAGE,
    build_recommendation_prompt,
)
from skincare_recommendation_system.logic_blocks.response_parser import parse_recommendation
from skincare_recommendation_system.logic_blocks.routine_copy import (
    FAILURE_SUMMARY,
    empty_recommendation,
)
from skincare_recommendation_system.models import Product, RoutineRecommendation, SkinProfile

logger = logging.getLogger("RecommendationEngine")

SMART_MATCHING = "Smart Matching"

ProfileInput = Union[SkinProfile, Mapping[str, Any]]
CatalogueInput = Optional[Iterable[Union[Product, Mapping[str, Any]]]]


class RecommendationEngine:
    """
    Stateless between calls; safe to share across concurrent requests.

    Args:
        config: Engine settings; its API keys decide whether the LLM path exists
        provider: Explicit provider, overriding the one built from config
    """

    def __init__(
        self,
        config: Optional[RecommenderConfig] = None,
        provider: Optional[BaseLLMProvider] = None,
    ):
        self.config = config or RecommenderConfig()
        self._provider = provider if provider is not None else create_provider(self.config)
        self._events = get_logger("RecommendationEvents")

    @property
    def provider_name(self) -> str:
        """Which path a recommendation would take, for display."""
        return self._provider.provider_name if self._provider else SMART_MATCHING

    def is_ai_available(self) -> bool:
        return self._provider is not None

    # --- Public API ---

    def recommend(self, profile: ProfileInput, catalogue: CatalogueInput) -> RoutineRecommendation:
        """Synchronous recommendation; the provider enforces its own timeout."""
        inputs = self._prepare(profile, catalogue)
        if inputs is None:
            return empty_recommendation(FAILURE_SUMMARY)
        skin_profile, products = inputs

        if self._provider:
            self._events.path_selected(self.provider_name, len(products))
            try:
                prompt = build_recommendation_prompt(skin_profile, products)
                response = self._provider.generate(prompt, system=SYSTEM_MESSAGE)
                return self._accept(parse_recommendation(response.content))
            except Exception as e:
                self._events.fallback_triggered(self.provider_name, str(e))

        return self._match(skin_profile, products)

    async def recommend_async(
        self, profile: ProfileInput, catalogue: CatalogueInput
    ) -> RoutineRecommendation:
        """
        Async recommendation. The LLM call runs in a worker thread bounded
        by config.timeout_seconds; a timeout falls back to Smart Matching.
        """
        inputs = self._prepare(profile, catalogue)
        if inputs is None:
            return empty_recommendation(FAILURE_SUMMARY)
        skin_profile, products = inputs

        if self._provider:
            self._events.path_selected(self.provider_name, len(products))
            try:
                prompt = build_recommendation_prompt(skin_profile, products)
                response = await asyncio.wait_for(
                    asyncio.to_thread(self._provider.generate, prompt, SYSTEM_MESSAGE),
                    timeout=self.config.timeout_seconds,
                )
                return self._accept(parse_recommendation(response.content))
            except asyncio.TimeoutError:
                self._events.fallback_triggered(
                    self.provider_name, f"timed out after {self.config.timeout_seconds}s"
                )
            except Exception as e:
                self._events.fallback_triggered(self.provider_name, str(e))

        return self._match(skin_profile, products)

    # --- Internals ---

    def _prepare(
        self, profile: ProfileInput, catalogue: CatalogueInput
    ) -> Optional[Tuple[SkinProfile, List[Product]]]:
        try:
            skin_profile = (
                profile if isinstance(profile, SkinProfile) else SkinProfile.model_validate(profile)
            )
        except (ValidationError, TypeError) as e:
            self._events.recommendation_failed("profile validation", str(e))
            return None

        try:
            entries = list(catalogue or [])
        except TypeError as e:
            logger.error(f"Catalogue is not iterable, treating as empty: {e}")
            entries = []

        products = []
        for index, entry in enumerate(entries):
            if isinstance(entry, Product):
                products.append(entry)
                continue
            try:
                products.append(Product.model_validate(entry))
            except (ValidationError, TypeError) as e:
                logger.warning(f"Skipping catalogue entry {index}: {e}")

        return skin_profile, products

    def _accept(self, recommendation: RoutineRecommendation) -> RoutineRecommendation:
        self._events.recommendation_complete(
            self.provider_name, len(recommendation.routine.filled_steps())
        )
        return recommendation

    def _match(self, profile: SkinProfile, products: List[Product]) -> RoutineRecommendation:
        try:
            recommendation = match_routine(profile, products)
        except Exception as e:
            logger.debug("Smart Matching traceback", exc_info=True)
            self._events.recommendation_failed(SMART_MATCHING, str(e))
            return empty_recommendation(FAILURE_SUMMARY)

        self._events.recommendation_complete(
            SMART_MATCHING, len(recommendation.routine.filled_steps())
        )
        return recommendation


def recommend(
    profile: ProfileInput,
    catalogue: CatalogueInput,
    config: Optional[RecommenderConfig] = None,
) -> RoutineRecommendation:
    """Convenience wrapper around RecommendationEngine(config).recommend."""
    return RecommendationEngine(config).recommend(profile, catalogue)
