from __future__ import annotations

import logging
from typing import Optional

from .classifier import classify
from .config import FootprintConfig
from .interpretation import interpret
from .models import ClassificationResult, FootprintReport, SurveyResponse
from .recommendations import recommend
from .scorer import score

logger = logging.getLogger(__name__)


class FootprintCalculator:
    """
    Water footprint of a wine producer, computed from one survey submission.

    The calculation considers:
      1. direct water consumption (monthly water usage question)
      2. wine production volume (monthly production question)
      3. water reuse practices
      4. waste water discharge method

    Answers are matched by content since question ids vary between surveys.
    calculate_water_footprint never raises: missing data and internal faults
    both come back as None.
    """

    def __init__(self, config: Optional[FootprintConfig] = None) -> None:
        self.config = config or FootprintConfig()

    def calculate_water_footprint(self, answers: SurveyResponse) -> Optional[float]:
        """Footprint in cubic meters (4 decimals), or None if insufficient data."""
        try:
            return self._score(classify(answers, self.config))
        except Exception:
            logger.exception("Error calculating footprint answers=%r", answers)
            return None

    def get_footprint_interpretation(self, footprint: float) -> str:
        return interpret(footprint, self.config).label

    def get_recommendations(self, footprint: float, answers: SurveyResponse) -> list[str]:
        return recommend(footprint, answers, self.config)

    def evaluate(self, answers: SurveyResponse) -> FootprintReport:
        """
        Full report for one submission: score, tier and recommendations.

        Like calculate_water_footprint, this degrades to an empty report
        instead of raising.
        """
        try:
            classification = classify(answers, self.config)
            footprint = self._score(classification)
            if footprint is None:
                return FootprintReport(classification=classification)

            tier = interpret(footprint, self.config)
            return FootprintReport(
                footprint=footprint,
                tier=tier.level,
                interpretation=tier.label,
                recommendations=recommend(footprint, answers, self.config),
                classification=classification,
            )
        except Exception:
            logger.exception("Error calculating footprint answers=%r", answers)
            return FootprintReport()

    def _score(self, classification: ClassificationResult) -> Optional[float]:
        if not classification.has_numeric_signal:
            logger.info("Insufficient data for footprint calculation")
            return None

        footprint = score(classification, self.config)
        logger.info(
            "Calculated footprint water_consumption=%s wine_production=%s water_reuse=%s "
            "discharge_method=%s footprint=%s",
            classification.water_consumption_liters,
            classification.wine_production_liters,
            classification.water_reuse_level.value,
            classification.discharge_method.value if classification.discharge_method else None,
            footprint,
        )
        return footprint
