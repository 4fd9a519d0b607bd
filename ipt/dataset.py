# ipt/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Union

import pandas as pd

from .config import (
    CAA_DESCRIPTIONS,
    DEFAULT_TARGET,
    ELEMENT_PRESTRESSED,
    ELEMENT_REINFORCED,
    MAX_POINTS_INPUT,
    MIN_POINTS_DOSAGE,
    POINT_RANGES,
    REFERENCE_MIXES,
    TARGET_RANGES,
)

POINT_COLUMNS = ["m", "ac", "fcj", "density"]


class ElementType(str, Enum):
    REINFORCED = ELEMENT_REINFORCED
    PRESTRESSED = ELEMENT_PRESTRESSED


@dataclass(frozen=True)
class ExperimentalPoint:
    """One trial mix: dry ratio m, a/c, 28-day fcj (MPa), fresh density (kg/m³)."""
    m: float
    ac: float
    fcj: float
    density: float


@dataclass(frozen=True)
class DosageTarget:
    fck: float
    sd: float
    aggressiveness_class: int
    element_type: Union[ElementType, str]
    slump: float
    mortar_content: float


def is_valid_point(point: ExperimentalPoint) -> bool:
    return (
        point.m > 0
        and 0 < point.ac < 1
        and point.fcj > 0
        and 1500 < point.density < 3000
    )


def reference_points() -> List[ExperimentalPoint]:
    """The rich / pilot / lean trial mixes used as defaults by the front-ends."""
    return [ExperimentalPoint(m, ac, fcj, rho) for _, m, ac, fcj, rho in REFERENCE_MIXES]


def default_target() -> DosageTarget:
    return DosageTarget(**DEFAULT_TARGET)


def points_frame(points: Iterable[ExperimentalPoint]) -> pd.DataFrame:
    """Tabular view of the trial mixes (one row per point)."""
    rows = [(p.m, p.ac, p.fcj, p.density) for p in points]
    return pd.DataFrame(rows, columns=POINT_COLUMNS)


def points_from_frame(df: pd.DataFrame) -> List[ExperimentalPoint]:
    """Inverse of points_frame; rows with any missing value are dropped."""
    clean = df[POINT_COLUMNS].dropna()
    return [
        ExperimentalPoint(float(r.m), float(r.ac), float(r.fcj), float(r.density))
        for r in clean.itertuples(index=False)
    ]


def validate_points(points: Sequence[ExperimentalPoint]) -> List[str]:
    """
    Schema-level checks a front-end runs before calling the core.
    Returns a list of problems (empty when the points are acceptable).
    """
    problems: List[str] = []
    if len(points) < MIN_POINTS_DOSAGE:
        problems.append(
            f"At least {MIN_POINTS_DOSAGE} experimental points are required (rich, pilot, lean)"
        )
    if len(points) > MAX_POINTS_INPUT:
        problems.append(f"At most {MAX_POINTS_INPUT} experimental points are accepted")

    for i, p in enumerate(points, start=1):
        for name in POINT_COLUMNS:
            lo, hi = POINT_RANGES[name]
            value = getattr(p, name)
            if name == "density":
                if not (lo <= value <= hi):
                    problems.append(f"Point {i}: density = {value} outside [{lo}, {hi}] kg/m³")
            # m, a/c and fcj must be strictly positive
            elif not (lo < value <= hi):
                problems.append(f"Point {i}: {name} = {value} outside ({lo}, {hi}]")
    return problems


def validate_target(target: DosageTarget) -> List[str]:
    problems: List[str] = []
    for name, (lo, hi) in TARGET_RANGES.items():
        value = getattr(target, name)
        if not (lo <= value <= hi):
            problems.append(f"{name} = {value} outside [{lo}, {hi}]")
    if target.aggressiveness_class not in CAA_DESCRIPTIONS:
        problems.append(
            f"aggressiveness_class = {target.aggressiveness_class} must be one of 1, 2, 3, 4"
        )
    try:
        ElementType(target.element_type)
    except ValueError:
        problems.append(f"element_type = {target.element_type!r} must be 'CA' or 'CP'")
    return problems
