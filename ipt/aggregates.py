# ipt/aggregates.py
from __future__ import annotations

from typing import List, Tuple


def split_dry_ratio(m: float, mortar_content: float) -> Tuple[float, float]:
    """
    Split the dry ratio m into sand and gravel (unit trace, cement = 1).

    Mortar content alpha = (1 + sand) / (1 + m) * 100, so
    sand = alpha * (1 + m) / 100 - 1 and gravel = m - sand.
    Non-physical (<= 0) shares are returned as-is.
    """
    sand = mortar_content * (1.0 + m) / 100.0 - 1.0
    gravel = m - sand
    return sand, gravel


def mortar_content_of(sand: float, m: float) -> float:
    return (1.0 + sand) / (1.0 + m) * 100.0


def split_warnings(sand: float, gravel: float, mortar_content: float) -> List[str]:
    warnings = []
    if sand <= 0:
        warnings.append(
            f"Mortar content ({mortar_content:g}%) gives a non-positive sand share. "
            f"Adjust the mortar content."
        )
    if gravel <= 0:
        warnings.append(
            f"Mortar content ({mortar_content:g}%) gives a non-positive gravel share. "
            f"Adjust the mortar content."
        )
    return warnings
