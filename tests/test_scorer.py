from __future__ import annotations

import pytest

from water_footprint.config import FootprintConfig
from water_footprint.models import ClassificationResult, DischargeMethod, ReuseLevel
from water_footprint.scorer import score


def test_no_numeric_signal_scores_none() -> None:
    c = ClassificationResult(water_reuse_level=ReuseLevel.FULL, discharge_method=DischargeMethod.SURFACE_WATER)
    assert score(c) is None


def test_consumption_converted_to_cubic_meters() -> None:
    assert score(ClassificationResult(water_consumption_liters=10000)) == 10.0


def test_production_estimate_uses_wine_water_ratio() -> None:
    # 500 L wine * 1.5 = 750 L water = 0.75 m3
    assert score(ClassificationResult(wine_production_liters=500)) == 0.75


def test_consumption_takes_precedence_over_production() -> None:
    c = ClassificationResult(water_consumption_liters=10000, wine_production_liters=500)
    assert score(c) == 10.0


@pytest.mark.parametrize(
    "reuse, discharge, expected",
    [
        (ReuseLevel.FULL, None, 6.0),
        (ReuseLevel.PARTIAL, None, 8.0),
        (ReuseLevel.NONE, DischargeMethod.SURFACE_WATER, 11.0),
        (ReuseLevel.NONE, DischargeMethod.OTHER, 10.0),
        (ReuseLevel.FULL, DischargeMethod.SURFACE_WATER, 6.6),
        (ReuseLevel.PARTIAL, DischargeMethod.SURFACE_WATER, 8.8),
    ],
)
def test_adjustments_multiply(reuse: ReuseLevel, discharge: DischargeMethod | None, expected: float) -> None:
    c = ClassificationResult(water_consumption_liters=10000, water_reuse_level=reuse, discharge_method=discharge)
    assert score(c) == pytest.approx(expected)
    assert score(c) == round(expected, 4)


def test_result_is_rounded_to_four_decimals() -> None:
    c = ClassificationResult(wine_production_liters=1.23456789)
    assert score(c) == 0.0019
    c = ClassificationResult(water_consumption_liters=12345.678912)
    assert score(c) == 12.3457


def test_custom_factors() -> None:
    cfg = FootprintConfig(wine_water_ratio=4.0, partial_reuse_reduction=0.5, surface_discharge_factor=1.25)
    c = ClassificationResult(
        wine_production_liters=800,
        water_reuse_level=ReuseLevel.PARTIAL,
        discharge_method=DischargeMethod.SURFACE_WATER,
    )
    # 800 * 4 / 1000 = 3.2; * 0.5 = 1.6; * 1.25 = 2.0
    assert score(c, cfg) == 2.0


def test_score_is_idempotent() -> None:
    c = ClassificationResult(water_consumption_liters=4321, water_reuse_level=ReuseLevel.PARTIAL)
    assert score(c) == score(c)
