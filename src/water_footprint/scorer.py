from __future__ import annotations

from typing import Optional

from .config import FootprintConfig
from .models import ClassificationResult, DischargeMethod, ReuseLevel

LITERS_PER_CUBIC_METER = 1000.0
SCORE_DECIMALS = 4


def base_footprint(classification: ClassificationResult, config: FootprintConfig) -> Optional[float]:
    """
    Monthly water volume in cubic meters before adjustments.

    Measured consumption wins over the estimate derived from wine production.
    """
    if classification.water_consumption_liters is not None:
        return classification.water_consumption_liters / LITERS_PER_CUBIC_METER
    if classification.wine_production_liters is not None:
        return classification.wine_production_liters * config.wine_water_ratio / LITERS_PER_CUBIC_METER
    return None


def reuse_multiplier(level: ReuseLevel, config: FootprintConfig) -> float:
    if level == ReuseLevel.FULL:
        return 1 - config.full_reuse_reduction
    if level == ReuseLevel.PARTIAL:
        return 1 - config.partial_reuse_reduction
    return 1.0


def discharge_multiplier(method: Optional[DischargeMethod], config: FootprintConfig) -> float:
    if method == DischargeMethod.SURFACE_WATER:
        return config.surface_discharge_factor
    return 1.0


def score(classification: ClassificationResult, config: Optional[FootprintConfig] = None) -> Optional[float]:
    """
    Water footprint in cubic meters, rounded to 4 decimals.

    Returns None (not 0) when neither consumption nor production is known.
    """
    cfg = config or FootprintConfig()
    base = base_footprint(classification, cfg)
    if base is None:
        return None

    footprint = base
    footprint *= reuse_multiplier(classification.water_reuse_level, cfg)
    footprint *= discharge_multiplier(classification.discharge_method, cfg)
    return round(footprint, SCORE_DECIMALS)
