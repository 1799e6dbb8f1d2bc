from __future__ import annotations

import pytest

from water_footprint.config import FootprintConfig, TierSpec
from water_footprint.interpretation import interpret


@pytest.mark.parametrize(
    "footprint, level",
    [
        (0.0, "low"),
        (3.0, "low"),
        (4.9999, "low"),
        (5.0, "moderate"),
        (10.0, "moderate"),
        (15.0, "average"),
        (29.99, "average"),
        (30.0, "high"),
        (40.0, "high"),
        (50.0, "very_high"),
        (60.0, "very_high"),
    ],
)
def test_tier_boundaries_are_lower_inclusive(footprint: float, level: str) -> None:
    assert interpret(footprint).level == level


def test_labels_match_benchmarks() -> None:
    low = interpret(3.0).label
    assert "Low" in low and "Excellent" in low

    moderate = interpret(10.0).label
    assert "Moderate" in moderate and "Good" in moderate

    high = interpret(40.0).label
    assert "High" in high and "improvement" in high

    very_high = interpret(60.0).label
    assert "Very high" in very_high and "Urgent" in very_high


def test_values_below_first_bound_fall_in_first_tier() -> None:
    cfg = FootprintConfig(
        tiers=(
            TierSpec(lower_bound=1.0, level="small", label="Small"),
            TierSpec(lower_bound=2.0, level="big", label="Big"),
        )
    )
    assert interpret(0.5, cfg).level == "small"
    assert interpret(2.0, cfg).label == "Big"
