# ipt/water.py
"""
Slump water correction.

Trial mixes are cast at a reference slump (usually 100 mm). Rule of thumb:
±3 L/m³ of water per ±10 mm of slump. The dosage never applies it on its
own; it is reported as an advisory.
"""
from __future__ import annotations

from typing import Optional

from .config import SLUMP_CORRECTION_L_PER_MM, SLUMP_REFERENCE_MM, SLUMP_WARNING_MM


def slump_correction(target_slump: float, reference_slump: float = SLUMP_REFERENCE_MM) -> float:
    """Water correction in L/m³ (positive = more water)."""
    return (target_slump - reference_slump) * SLUMP_CORRECTION_L_PER_MM


def apply_slump_correction(
    base_water: float,
    target_slump: float,
    reference_slump: float = SLUMP_REFERENCE_MM,
) -> float:
    return base_water + slump_correction(target_slump, reference_slump)


def slump_warning(target_slump: float, reference_slump: float = SLUMP_REFERENCE_MM) -> Optional[str]:
    delta = abs(target_slump - reference_slump)
    if delta <= SLUMP_WARNING_MM:
        return None
    correction = slump_correction(target_slump, reference_slump)
    direction = "increase" if correction > 0 else "reduction"
    return (
        f"Slump water correction: {abs(correction):.1f} L/m³ ({direction} for a "
        f"{delta:g} mm slump difference). Consider verifying experimentally."
    )
