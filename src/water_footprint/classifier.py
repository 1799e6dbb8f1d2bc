from __future__ import annotations

from typing import Optional

from .config import FootprintConfig
from .models import ClassificationResult, DischargeMethod, ReuseLevel, SurveyResponse
from .utils import contains_any, question_sort_key, to_number


def classify(answers: SurveyResponse, config: Optional[FootprintConfig] = None) -> ClassificationResult:
    """
    Extract the footprint inputs from one survey response.

    Questions are matched by the shape of their answers, not their ids:
      - a number >= threshold is taken as monthly water consumption
      - a positive number below threshold is taken as monthly wine production
      - text is scanned for reuse and discharge marker phrases

    The first qualifying number per bucket wins, in question-key order (ties
    broken on the answer itself), so the result does not depend on how the
    mapping happens to be ordered. Reuse and
    discharge detection look at every answer; full reuse beats partial reuse
    and surface water beats any other discharge destination.

    Unrecognized answers contribute nothing; this never raises.
    """
    cfg = config or FootprintConfig()

    consumption: Optional[float] = None
    production: Optional[float] = None
    full_reuse = False
    partial_reuse = False
    surface_discharge = False
    other_discharge = False

    for _key, raw in sorted(answers.items(), key=lambda kv: (question_sort_key(kv[0]), repr(kv[1]))):
        num = to_number(raw)
        if num is not None:
            if consumption is None and num >= cfg.water_consumption_threshold:
                consumption = num
            elif production is None and 0 < num < cfg.water_consumption_threshold:
                production = num
            continue

        if not isinstance(raw, str):
            continue

        if contains_any(raw, cfg.full_reuse_markers):
            full_reuse = True
        elif contains_any(raw, cfg.partial_reuse_markers):
            partial_reuse = True

        if contains_any(raw, cfg.surface_discharge_markers):
            surface_discharge = True
        elif contains_any(raw, cfg.other_discharge_markers):
            other_discharge = True

    if full_reuse:
        reuse = ReuseLevel.FULL
    elif partial_reuse:
        reuse = ReuseLevel.PARTIAL
    else:
        reuse = ReuseLevel.NONE

    discharge: Optional[DischargeMethod] = None
    if surface_discharge:
        discharge = DischargeMethod.SURFACE_WATER
    elif other_discharge:
        discharge = DischargeMethod.OTHER

    return ClassificationResult(
        water_consumption_liters=consumption,
        wine_production_liters=production,
        water_reuse_level=reuse,
        discharge_method=discharge,
    )
