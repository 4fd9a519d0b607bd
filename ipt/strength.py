# ipt/strength.py
"""
Dosage strength (NBR 12655:2022, item 6.4).

fcj = fck + 1.65 * Sd

1.65 is the one-sided 5 % quantile of the standard normal distribution, so
only 5 % of the production falls below fck when strength is normally
distributed with standard deviation Sd.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from .config import (
    CONDITION_DESCRIPTIONS,
    DECIMALS_STRENGTH,
    SD_BY_CONDITION,
    SD_CONDITION_BOUNDS,
    Z_SCORE_5PCT,
)
from .errors import InvalidInput
from .utils import round_half_away


def dosage_strength(fck: float, sd: float) -> float:
    if fck <= 0:
        raise InvalidInput(f"Dosage strength: fck must be positive, got {fck} MPa")
    if sd <= 0:
        raise InvalidInput(f"Dosage strength: Sd must be positive, got {sd} MPa")
    return round_half_away(fck + Z_SCORE_5PCT * sd, DECIMALS_STRENGTH)


def standard_deviation(condition: str) -> float:
    """Sd for preparation condition A, B or C."""
    key = condition.strip().upper()
    if key not in SD_BY_CONDITION:
        raise InvalidInput(f"Unknown preparation condition {condition!r} (expected A, B or C)")
    return SD_BY_CONDITION[key]


def dosage_strength_from_condition(fck: float, condition: str) -> float:
    return dosage_strength(fck, standard_deviation(condition))


def infer_condition(sd: float) -> Optional[str]:
    """Closest preparation condition for a declared Sd, None when Sd is beyond C."""
    for condition, upper in SD_CONDITION_BOUNDS:
        if sd <= upper:
            return condition
    return None


def all_conditions() -> List[Dict[str, object]]:
    return [
        {"condition": c, "sd": SD_BY_CONDITION[c], "description": CONDITION_DESCRIPTIONS[c]}
        for c in SD_BY_CONDITION
    ]
