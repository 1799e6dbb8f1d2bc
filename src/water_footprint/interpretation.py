from __future__ import annotations

from typing import Optional

from .config import FootprintConfig
from .models import Interpretation


def interpret(footprint: float, config: Optional[FootprintConfig] = None) -> Interpretation:
    """
    Map a footprint (cubic meters per month) onto its benchmark tier.

    Benchmarks are approximate values for small to medium wine producers.
    Lower bounds are inclusive: 5.0 is already "moderate".
    """
    cfg = config or FootprintConfig()
    chosen = cfg.tiers[0]
    for tier in cfg.tiers:
        if footprint >= tier.lower_bound:
            chosen = tier
        else:
            break
    return Interpretation(level=chosen.level, label=chosen.label, lower_bound=chosen.lower_bound)
