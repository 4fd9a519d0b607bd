# ipt/durability.py
"""
Durability limits of NBR 6118:2023 Tab. 7.1.

fck is a declared target, so it is only flagged. a/c and cement content are
derived by the method, so they are clamped to the table and the adjusted value
flows into the rest of the dosage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .config import CAA_DESCRIPTIONS, DURABILITY_LIMITS
from .dataset import ElementType
from .errors import InvalidInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormativeLimits:
    max_ac: float
    min_fck: float
    min_cement: float


@dataclass(frozen=True)
class Validation:
    valid: bool
    original: float
    adjusted: float
    warning: Optional[str] = None


def _element(element_type: Union[ElementType, str]) -> ElementType:
    try:
        return ElementType(element_type)
    except ValueError:
        raise InvalidInput(
            f"Unknown element type {element_type!r} (expected 'CA' or 'CP')"
        ) from None


def get_limits(aggressiveness_class: int, element_type: Union[ElementType, str]) -> NormativeLimits:
    table = DURABILITY_LIMITS[_element(element_type).value]
    if aggressiveness_class not in table:
        raise InvalidInput(
            f"Unknown aggressiveness class {aggressiveness_class!r} (expected 1 to 4)"
        )
    max_ac, min_fck, min_cement = table[aggressiveness_class]
    return NormativeLimits(max_ac=max_ac, min_fck=min_fck, min_cement=min_cement)


def class_description(aggressiveness_class: int) -> str:
    if aggressiveness_class not in CAA_DESCRIPTIONS:
        raise InvalidInput(
            f"Unknown aggressiveness class {aggressiveness_class!r} (expected 1 to 4)"
        )
    return CAA_DESCRIPTIONS[aggressiveness_class]


def validate_fck(fck: float, aggressiveness_class: int, element_type) -> Validation:
    limits = get_limits(aggressiveness_class, element_type)
    elem = _element(element_type).value
    if fck < limits.min_fck:
        return Validation(
            valid=False,
            original=fck,
            adjusted=limits.min_fck,
            warning=(
                f"Minimum fck for CAA {aggressiveness_class} ({elem}) is "
                f"{limits.min_fck:g} MPa. Value given: {fck:g} MPa"
            ),
        )
    return Validation(valid=True, original=fck, adjusted=fck)


def validate_ac(ac: float, aggressiveness_class: int, element_type) -> Validation:
    limits = get_limits(aggressiveness_class, element_type)
    elem = _element(element_type).value
    if ac > limits.max_ac:
        logger.info("a/c %.4f clamped to %.2f (CAA %d, %s)", ac, limits.max_ac, aggressiveness_class, elem)
        return Validation(
            valid=False,
            original=ac,
            adjusted=limits.max_ac,
            warning=(
                f"w/c ratio limited from {ac:.3f} to {limits.max_ac:g} per NBR 6118:2023 "
                f"Tab. 7.1 (CAA {aggressiveness_class} - "
                f"{CAA_DESCRIPTIONS[aggressiveness_class]}, {elem})"
            ),
        )
    return Validation(valid=True, original=ac, adjusted=ac)


def validate_cement(cement: float, aggressiveness_class: int, element_type) -> Validation:
    limits = get_limits(aggressiveness_class, element_type)
    elem = _element(element_type).value
    if cement < limits.min_cement:
        logger.info(
            "cement %.1f kg/m³ raised to %.0f (CAA %d, %s)",
            cement, limits.min_cement, aggressiveness_class, elem,
        )
        return Validation(
            valid=False,
            original=cement,
            adjusted=limits.min_cement,
            warning=(
                f"Cement content raised from {cement:.0f} to {limits.min_cement:g} kg/m³ "
                f"per NBR 6118:2023 (CAA {aggressiveness_class}, {elem})"
            ),
        )
    return Validation(valid=True, original=cement, adjusted=cement)
