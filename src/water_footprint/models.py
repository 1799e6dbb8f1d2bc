from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, Field

# Raw survey answers as handed over by the surrounding application:
# question key -> number or text. Anything else is skipped.
SurveyResponse = Mapping[object, object]


class ReuseLevel(str, Enum):
    """
    Whether process water is recycled.

    - NONE: no evidence of reuse
    - PARTIAL: part of the water is reused
    - FULL: all water is reused (never downgraded once detected)
    """
    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"


class DischargeMethod(str, Enum):
    """Destination of waste water after use."""
    SURFACE_WATER = "surface_water"
    OTHER = "other"


@dataclass(frozen=True)
class ClassificationResult:
    """
    What the classifier could extract from one survey response.

    At most one value per numeric bucket is kept; both may be None when the
    response carries no usable quantity.
    """
    water_consumption_liters: Optional[float] = None   # liters per month
    wine_production_liters: Optional[float] = None     # liters per month
    water_reuse_level: ReuseLevel = ReuseLevel.NONE
    discharge_method: Optional[DischargeMethod] = None

    @property
    def has_numeric_signal(self) -> bool:
        return self.water_consumption_liters is not None or self.wine_production_liters is not None


@dataclass(frozen=True)
class Interpretation:
    """A tier the footprint falls into, with its display label."""
    level: str      # e.g. "low", "very_high"
    label: str
    lower_bound: float


class FootprintReport(BaseModel):
    """
    Everything derived from one survey response.

    footprint is None when the answers carry no numeric signal; interpretation,
    tier and recommendations are then left empty as well.
    """
    footprint: Optional[float] = None
    tier: Optional[str] = None
    interpretation: Optional[str] = None
    recommendations: list[str] = Field(default_factory=list)
    classification: ClassificationResult = Field(default_factory=ClassificationResult)
