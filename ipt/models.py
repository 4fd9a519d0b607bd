# ipt/models.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from .config import (
    DECIMALS_ABRAMS_K,
    DECIMALS_AC,
    DECIMALS_CONSUMPTION_EXP,
    DECIMALS_LYSE_K,
    DECIMALS_M,
    DECIMALS_MOLINARI_K,
    DECIMALS_STRENGTH,
    MIN_POINTS_DOSAGE,
)
from .dataset import ExperimentalPoint
from .errors import DegenerateModel, InsufficientData, InvalidInput, InvalidTarget
from .regression import fit as fit_line
from .utils import round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AbramsCoefficients:
    k1: float   # strength ceiling as a/c -> 0 (MPa)
    k2: float
    r2: float


@dataclass(frozen=True)
class LyseCoefficients:
    k3: float
    k4: float
    r2: float


@dataclass(frozen=True)
class MolinariCoefficients:
    k5: float
    k6: float
    r2: float


@dataclass(frozen=True)
class LawsBundle:
    abrams: AbramsCoefficients
    lyse: LyseCoefficients
    molinari: MolinariCoefficients


def _require_points(law: str, points: Sequence[ExperimentalPoint]) -> None:
    if len(points) < MIN_POINTS_DOSAGE:
        raise InsufficientData(f"{law} law", len(points), MIN_POINTS_DOSAGE)


# -------------------------------------------------------------------------
# Abrams: fcj = k1 / k2^(a/c)
# linearised as log10(fcj) = log10(k1) - (a/c) * log10(k2)
# -------------------------------------------------------------------------
def fit_abrams(points: Sequence[ExperimentalPoint]) -> AbramsCoefficients:
    _require_points("Abrams", points)
    for p in points:
        if p.fcj <= 0:
            raise InvalidInput(f"Abrams law: fcj must be positive, got {p.fcj} MPa")

    reg = fit_line([p.ac for p in points], [math.log10(p.fcj) for p in points])
    k1 = 10.0 ** reg.intercept
    k2 = 10.0 ** (-reg.slope)
    coeffs = AbramsCoefficients(
        k1=round_half_away(k1, DECIMALS_ABRAMS_K),
        k2=round_half_away(k2, DECIMALS_ABRAMS_K),
        r2=reg.r2,
    )
    logger.debug("Abrams fit: %s", coeffs)
    return coeffs


def invert_abrams(fcj_target: float, coeffs: AbramsCoefficients) -> float:
    """a/c needed to reach fcj_target: (log k1 - log fcj) / log k2."""
    if fcj_target <= 0 or fcj_target >= coeffs.k1:
        raise InvalidTarget(fcj_target, coeffs.k1)
    log_k2 = math.log10(coeffs.k2)
    if log_k2 == 0:
        raise DegenerateModel("Abrams law: k2 = 1, strength does not depend on a/c")

    ac = (math.log10(coeffs.k1) - math.log10(fcj_target)) / log_k2
    return round_half_away(ac, DECIMALS_AC)


def evaluate_abrams(ac: float, coeffs: AbramsCoefficients) -> float:
    if ac <= 0:
        raise InvalidInput(f"Abrams law: a/c must be positive, got {ac}")
    return round_half_away(coeffs.k1 / coeffs.k2 ** ac, DECIMALS_STRENGTH)


# -------------------------------------------------------------------------
# Lyse: m = k3 + k4 * (a/c)
# -------------------------------------------------------------------------
def fit_lyse(points: Sequence[ExperimentalPoint]) -> LyseCoefficients:
    _require_points("Lyse", points)
    reg = fit_line([p.ac for p in points], [p.m for p in points])
    coeffs = LyseCoefficients(
        k3=round_half_away(reg.intercept, DECIMALS_LYSE_K),
        k4=round_half_away(reg.slope, DECIMALS_LYSE_K),
        r2=reg.r2,
    )
    logger.debug("Lyse fit: %s", coeffs)
    return coeffs


def evaluate_lyse(ac: float, coeffs: LyseCoefficients) -> float:
    if ac <= 0:
        raise InvalidInput(f"Lyse law: a/c must be positive, got {ac}")
    return round_half_away(coeffs.k3 + coeffs.k4 * ac, DECIMALS_M)


def invert_lyse(m: float, coeffs: LyseCoefficients) -> float:
    if coeffs.k4 == 0:
        raise DegenerateModel("Lyse law: k4 = 0, a/c cannot be recovered from m")
    return round_half_away((m - coeffs.k3) / coeffs.k4, DECIMALS_AC)


# -------------------------------------------------------------------------
# Molinari: C = 1000 / (k5 + k6 * m)
# linearised as 1000 / C = k5 + k6 * m
# -------------------------------------------------------------------------
def experimental_consumption(point: ExperimentalPoint) -> float:
    """Cement content (kg/m³) back-calculated from the trial's fresh density."""
    density_kg_dm3 = point.density / 1000.0
    return round_half_away(
        1000.0 * density_kg_dm3 / (1.0 + point.m + point.ac),
        DECIMALS_CONSUMPTION_EXP,
    )


def fit_molinari(points: Sequence[ExperimentalPoint]) -> MolinariCoefficients:
    _require_points("Molinari", points)
    consumptions = [experimental_consumption(p) for p in points]
    reg = fit_line([p.m for p in points], [1000.0 / c for c in consumptions])
    coeffs = MolinariCoefficients(
        k5=round_half_away(reg.intercept, DECIMALS_MOLINARI_K),
        k6=round_half_away(reg.slope, DECIMALS_MOLINARI_K),
        r2=reg.r2,
    )
    logger.debug("Molinari fit: %s (C_exp=%s)", coeffs, consumptions)
    return coeffs


def evaluate_molinari(m: float, coeffs: MolinariCoefficients) -> float:
    if m <= 0:
        raise InvalidInput(f"Molinari law: dry ratio m must be positive, got {m}")
    denominator = coeffs.k5 + coeffs.k6 * m
    if denominator <= 0:
        raise DegenerateModel(
            f"Molinari law: k5 + k6*m = {denominator:.6f} <= 0 at m = {m}, "
            f"cement consumption is not physical"
        )
    return round_half_away(1000.0 / denominator, DECIMALS_CONSUMPTION_EXP)


def build_laws(points: Sequence[ExperimentalPoint]) -> LawsBundle:
    return LawsBundle(
        abrams=fit_abrams(points),
        lyse=fit_lyse(points),
        molinari=fit_molinari(points),
    )
