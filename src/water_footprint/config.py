from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError
from .utils import read_json


class TierSpec(BaseModel):
    """
    One interpretation tier. A score belongs to the last tier whose
    lower_bound it reaches; the first tier also catches anything below it.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    lower_bound: float
    level: str
    label: str


DEFAULT_TIERS: tuple[TierSpec, ...] = (
    TierSpec(lower_bound=0.0, level="low", label="Low water footprint - Excellent water management"),
    TierSpec(lower_bound=5.0, level="moderate", label="Moderate water footprint - Good water management"),
    TierSpec(lower_bound=15.0, level="average", label="Average water footprint - Room for improvement"),
    TierSpec(lower_bound=30.0, level="high", label="High water footprint - Significant improvement needed"),
    TierSpec(lower_bound=50.0, level="very_high", label="Very high water footprint - Urgent action required"),
)


class FootprintConfig(BaseModel):
    """
    Tunables for the footprint calculation.

    Every field has a default matching the questionnaire used in production
    (Spanish answers, with English equivalents). Marker phrases are matched
    case-insensitively as substrings of text answers; adding a locale is a
    matter of extending the marker lists.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Numbers at or above this are read as water consumption (liters/month),
    # positive numbers below it as wine production (liters/month).
    water_consumption_threshold: float = 1000.0
    # Liters of water per liter of wine (industry average).
    wine_water_ratio: float = 1.5
    full_reuse_reduction: float = 0.4
    partial_reuse_reduction: float = 0.2
    surface_discharge_factor: float = 1.1

    full_reuse_markers: tuple[str, ...] = ("totalmente", "completely")
    partial_reuse_markers: tuple[str, ...] = ("parcialmente", "partially")
    affirmative_markers: tuple[str, ...] = ("sí", "yes")
    surface_discharge_markers: tuple[str, ...] = ("superficial", "surface water")
    other_discharge_markers: tuple[str, ...] = (
        "alcantarillado",
        "drenaje",
        "fosa séptica",
        "sewer",
        "septic",
    )

    # Recommendation cut-offs (cubic meters, strictly greater than).
    efficiency_threshold: float = 15.0
    intervention_threshold: float = 30.0

    tiers: tuple[TierSpec, ...] = Field(default=DEFAULT_TIERS)

    @field_validator(
        "full_reuse_markers",
        "partial_reuse_markers",
        "affirmative_markers",
        "surface_discharge_markers",
        "other_discharge_markers",
    )
    @classmethod
    def normalize_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        out: list[str] = []
        for marker in value:
            m = marker.strip().casefold()
            if m and m not in out:
                out.append(m)
        return tuple(out)

    @model_validator(mode="after")
    def check_ranges(self) -> "FootprintConfig":
        if self.water_consumption_threshold <= 0:
            raise ValueError("water_consumption_threshold must be > 0")
        if self.wine_water_ratio <= 0:
            raise ValueError("wine_water_ratio must be > 0")
        for name in ("full_reuse_reduction", "partial_reuse_reduction"):
            factor = getattr(self, name)
            if not 0 <= factor < 1:
                raise ValueError(f"{name} must be in [0, 1), got {factor}")
        if self.surface_discharge_factor <= 0:
            raise ValueError("surface_discharge_factor must be > 0")
        if not self.tiers:
            raise ValueError("tiers must not be empty")
        bounds = [t.lower_bound for t in self.tiers]
        if any(b >= nxt for b, nxt in zip(bounds, bounds[1:])):
            raise ValueError(f"tier lower bounds must be strictly ascending, got {bounds}")
        return self


def load_config(path: Optional[Path] = None) -> FootprintConfig:
    """
    Load a FootprintConfig from a JSON object file, merged over the defaults.

    Only the keys present in the file are overridden. No path means defaults.
    Raises FileNotFoundError for a missing file and ConfigError for anything
    that does not validate.
    """
    if path is None:
        return FootprintConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = read_json(path)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object.")

    try:
        return FootprintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid footprint config in {path}: {e}") from e
