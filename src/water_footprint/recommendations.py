from __future__ import annotations

from typing import Optional

from .config import FootprintConfig
from .models import SurveyResponse
from .utils import contains_any, contains_any_word

REUSE_SYSTEMS = "Implement water reuse systems to reduce fresh water consumption"
EFFICIENT_EQUIPMENT = "Consider installing water-efficient cleaning equipment"
PROCESS_MONITORING = "Monitor and reduce water usage in bottling and cleaning processes"
WATER_AUDIT = "Conduct a comprehensive water audit to identify major consumption points"
CLOSED_LOOP = "Invest in closed-loop water systems for temperature control"
KEEP_MONITORING = "Continue monitoring water usage to track improvements over time"


def _mentions_reuse(text: str, config: FootprintConfig) -> bool:
    return contains_any_word(text, config.affirmative_markers) or contains_any(
        text, config.full_reuse_markers + config.partial_reuse_markers
    )


def has_reuse_evidence(answers: SurveyResponse, config: FootprintConfig) -> bool:
    """
    Looser than classification: any affirmative answer counts, since the
    reuse question is a yes/no one. Affirmatives must be whole words so that
    "yesterday" or "así" do not count.
    """
    return any(isinstance(v, str) and _mentions_reuse(v, config) for v in answers.values())


def recommend(
    footprint: float,
    answers: SurveyResponse,
    config: Optional[FootprintConfig] = None,
) -> list[str]:
    """Ordered, never-empty list of recommendations for a footprint."""
    cfg = config or FootprintConfig()
    recs: list[str] = []

    if not has_reuse_evidence(answers, cfg):
        recs.append(REUSE_SYSTEMS)

    if footprint > cfg.efficiency_threshold:
        recs.append(EFFICIENT_EQUIPMENT)
        recs.append(PROCESS_MONITORING)

    if footprint > cfg.intervention_threshold:
        recs.append(WATER_AUDIT)
        recs.append(CLOSED_LOOP)

    recs.append(KEEP_MONITORING)
    return recs
