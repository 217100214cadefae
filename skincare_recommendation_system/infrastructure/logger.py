"""
Structured Logging for the Skincare Recommendation System.
Provides JSON-formatted logs for production monitoring.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict


class StructuredLogger:
    """Structured logger; each event is one JSON object tagged with an event type."""

    def __init__(
        self,
        name: str,
        log_dir: str = "logs",
        log_file: str = "recommendations.log",
        level: int = logging.INFO,
    ):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        if self.logger.handlers:
            return

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        self.logger.addHandler(console_handler)

        # JSON lines go to a file only when the deployment provides a logs dir
        if os.path.isdir(log_dir):
            self.logger.addHandler(logging.FileHandler(os.path.join(log_dir, log_file)))

    def _emit(self, level: int, event: str, message: str, fields: Dict[str, Any]):
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "logger": self.name,
            "type": event,
            "message": message,
            **fields,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False))

    # --- Recommendation Events ---

    def path_selected(self, provider: str, catalogue_size: int):
        self._emit(
            logging.INFO, "path_selected", f"Recommendation path: {provider}",
            {"provider": provider, "catalogue_size": catalogue_size},
        )

    def fallback_triggered(self, provider: str, reason: str):
        self._emit(
            logging.WARNING, "fallback",
            f"Falling back to Smart Matching after {provider} failure",
            {"provider": provider, "reason": reason},
        )

    def recommendation_complete(self, source: str, filled_steps: int):
        self._emit(
            logging.INFO, "recommendation", f"Recommendation ready from {source}",
            {"source": source, "filled_steps": filled_steps},
        )

    def recommendation_failed(self, stage: str, reason: str):
        self._emit(
            logging.ERROR, "failure", f"Recommendation failed during {stage}",
            {"stage": stage, "reason": reason},
        )


def get_logger(name: str = "SkincareRecommender") -> StructuredLogger:
    """Get or create a structured logger."""
    return StructuredLogger(name)
