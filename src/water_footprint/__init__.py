"""Water footprint calculation for wine producer surveys.

The core is pure: classify -> score -> interpret/recommend, each taking the
raw survey answers (question key -> number or text) and an optional
FootprintConfig. FootprintCalculator wraps them with logging and the
never-raise contract expected by the surrounding application.
"""

from .calculator import FootprintCalculator
from .classifier import classify
from .config import DEFAULT_TIERS, FootprintConfig, TierSpec, load_config
from .errors import AnswersFormatError, ConfigError, FootprintError
from .interpretation import interpret
from .models import (
    ClassificationResult,
    DischargeMethod,
    FootprintReport,
    Interpretation,
    ReuseLevel,
)
from .recommendations import recommend
from .scorer import score

__all__ = [
    "AnswersFormatError",
    "ClassificationResult",
    "ConfigError",
    "DEFAULT_TIERS",
    "DischargeMethod",
    "FootprintCalculator",
    "FootprintConfig",
    "FootprintError",
    "FootprintReport",
    "Interpretation",
    "ReuseLevel",
    "TierSpec",
    "classify",
    "interpret",
    "load_config",
    "recommend",
    "score",
]
