"""
Configuration for the recommendation engine and the runner.

The engine never reads the environment itself: credentials arrive through
RecommenderConfig, built explicitly or via RecommenderConfig.from_env().
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from skincare_recommendation_system.models import Product

DEFAULT_RUN_CONFIG = "config/run_config.json"


class ConfigError(ValueError):
    """Run configuration missing or malformed."""


class RecommenderConfig(BaseModel):
    """Engine settings. No API key means deterministic matching only."""

    mistral_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    mistral_model: str = "open-mistral-7b"
    openai_model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: int = Field(default=1000, gt=0)
    timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def has_credential(self) -> bool:
        return bool(self.mistral_api_key or self.openai_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "RecommenderConfig":
        """Build config from MISTRAL_API_KEY / OPENAI_API_KEY / RECOMMENDER_TIMEOUT."""
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {
            "mistral_api_key": env.get("MISTRAL_API_KEY") or None,
            "openai_api_key": env.get("OPENAI_API_KEY") or None,
        }
        if env.get("RECOMMENDER_TIMEOUT"):
            values["timeout_seconds"] = env["RECOMMENDER_TIMEOUT"]
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid recommender environment: {e}") from e


class RunConfig(BaseModel):
    """Runner input: quiz answers plus a catalogue snapshot."""

    answers: List[Optional[int]] = Field(min_length=5, max_length=5)
    catalogue: List[Product] = Field(default_factory=list)
    output_path: str = "output/recommendation.json"


def load_run_config(path: Optional[str] = None) -> RunConfig:
    """
    Load runner input from a JSON file.
    Path can be overridden via RUN_CONFIG env variable.

    The "catalogue" key holds either a list of products or a path (relative to
    the config file) to a JSON list of products.
    """
    config_path = Path(path or os.getenv("RUN_CONFIG", DEFAULT_RUN_CONFIG))

    if not config_path.exists():
        raise ConfigError(
            f"Config file not found: {config_path}. "
            f"Create {DEFAULT_RUN_CONFIG} or set RUN_CONFIG env variable."
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        catalogue = data.get("catalogue", [])
        if isinstance(catalogue, str):
            with open(config_path.parent / catalogue, "r", encoding="utf-8") as f:
                data["catalogue"] = json.load(f)

        return RunConfig(**data)
    except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as e:
        raise ConfigError(f"Invalid run config {config_path}: {e}") from e
