# ipt/design.py
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .aggregates import split_dry_ratio, split_warnings
from .batch import BatchResult, ContainerConfig, calculate_batches
from .config import (
    DECIMALS_AC,
    DECIMALS_CONSUMPTION,
    DECIMALS_M,
    DECIMALS_RANGE,
    DECIMALS_STRENGTH,
    DECIMALS_TRACE,
    DENSITY_ADVISORY_KG_M3,
    MIN_POINTS_DOSAGE,
)
from .dataset import DosageTarget, ExperimentalPoint
from .durability import validate_ac, validate_cement, validate_fck
from .errors import InsufficientData
from .field import Consumption, FieldConsumption, RoundingConfig, round_consumption
from .models import LawsBundle, build_laws, evaluate_lyse, evaluate_molinari, invert_abrams
from .strength import dosage_strength
from .utils import round_half_away
from .water import slump_warning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinalTrace:
    """Unit trace, cement = 1 (water is the a/c ratio)."""
    sand: float
    gravel: float
    water: float
    cement: float = 1.0


@dataclass(frozen=True)
class Parameters:
    fcj_target: float
    target_ac: float
    target_m: float


@dataclass(frozen=True)
class ExperimentalRange:
    min_fcj: float
    max_fcj: float
    is_extrapolating: bool
    extrapolation_percent: Optional[float] = None


@dataclass(frozen=True)
class TraceResult:
    final_trace: FinalTrace
    consumption: Consumption
    parameters: Parameters
    coefficients: LawsBundle
    warnings: Tuple[str, ...]
    experimental_range: Optional[ExperimentalRange] = None
    field_consumption: Optional[FieldConsumption] = None
    batch_result: Optional[BatchResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready document; absent optional sections are left out."""
        out = {
            "final_trace": asdict(self.final_trace),
            "consumption": asdict(self.consumption),
            "parameters": asdict(self.parameters),
            "coefficients": asdict(self.coefficients),
            "warnings": list(self.warnings),
        }
        if self.experimental_range is not None:
            rng = asdict(self.experimental_range)
            if rng["extrapolation_percent"] is None:
                del rng["extrapolation_percent"]
            out["experimental_range"] = rng
        if self.field_consumption is not None:
            fc = asdict(self.field_consumption)
            if fc["cement_bags"] is None:
                del fc["cement_bags"]
            out["field_consumption"] = fc
        if self.batch_result is not None:
            out["batch_result"] = {
                k: v for k, v in asdict(self.batch_result).items() if v is not None
            }
        return out


def _density_advisory(points: Sequence[ExperimentalPoint]) -> Optional[str]:
    avg = sum(p.density for p in points) / len(points)
    if avg > DENSITY_ADVISORY_KG_M3:
        return (
            f"Average density ({avg:.0f} kg/m³) is high. Check whether the densities "
            f"are measured (with entrapped air) or theoretical."
        )
    return None


def experimental_range(points: Sequence[ExperimentalPoint], fcj_target: float) -> ExperimentalRange:
    fcj_values = [p.fcj for p in points]
    lo, hi = min(fcj_values), max(fcj_values)
    extrapolating = fcj_target < lo or fcj_target > hi
    percent = None
    if extrapolating:
        distance = (lo - fcj_target) / lo if fcj_target < lo else (fcj_target - hi) / hi
        percent = round_half_away(distance * 100.0, 1)
    return ExperimentalRange(
        min_fcj=round_half_away(lo, DECIMALS_RANGE),
        max_fcj=round_half_away(hi, DECIMALS_RANGE),
        is_extrapolating=extrapolating,
        extrapolation_percent=percent,
    )


def calculate_dosage(
    points: Sequence[ExperimentalPoint],
    target: DosageTarget,
    rounding: Optional[RoundingConfig] = None,
    container: Optional[ContainerConfig] = None,
    reference_slump: Optional[float] = None,
) -> TraceResult:
    """
    IPT/EPUSP dosage for one target.

    fcj target -> a/c (Abrams) -> durability clamp -> m (Lyse) -> sand/gravel
    split by mortar content -> cement (Molinari) -> durability clamp ->
    consumption per m³. Any fatal error aborts the whole computation;
    code-compliance adjustments and advisories are collected in `warnings`
    in the order they were raised.
    """
    if len(points) < MIN_POINTS_DOSAGE:
        raise InsufficientData(
            "Dosage (rich, pilot and lean trial mixes)", len(points), MIN_POINTS_DOSAGE
        )

    warnings: List[str] = []
    caa, elem = target.aggressiveness_class, target.element_type

    # 1) Advisory: theoretical-looking densities
    msg = _density_advisory(points)
    if msg:
        warnings.append(msg)

    # 2) fck against the durability minimum (warning only)
    fck_check = validate_fck(target.fck, caa, elem)
    if not fck_check.valid and fck_check.warning:
        warnings.append(fck_check.warning)

    # 3) Dosage strength
    fcj_target = dosage_strength(target.fck, target.sd)

    # 4) Behaviour laws
    laws = build_laws(points)

    # 5) Advisory: target outside the calibrated strength range
    rng = experimental_range(points, fcj_target)
    if rng.is_extrapolating:
        warnings.append(
            f"EXTRAPOLATION: target fcj ({fcj_target:.1f} MPa) is "
            f"{rng.extrapolation_percent:.1f}% outside the experimental range "
            f"[{rng.min_fcj:.1f}-{rng.max_fcj:.1f} MPa]. Result may be inaccurate."
        )

    # 6) a/c from Abrams, clamped to the durability maximum
    target_ac = invert_abrams(fcj_target, laws.abrams)
    ac_check = validate_ac(target_ac, caa, elem)
    if not ac_check.valid and ac_check.warning:
        warnings.append(ac_check.warning)
        target_ac = ac_check.adjusted

    # 7) Dry ratio from Lyse and its sand / gravel split
    target_m = evaluate_lyse(target_ac, laws.lyse)
    sand, gravel = split_dry_ratio(target_m, target.mortar_content)
    warnings.extend(split_warnings(sand, gravel, target.mortar_content))

    # 8) Cement from Molinari, raised to the durability minimum
    cement = evaluate_molinari(target_m, laws.molinari)
    cement_check = validate_cement(cement, caa, elem)
    if not cement_check.valid and cement_check.warning:
        warnings.append(cement_check.warning)
        cement = cement_check.adjusted

    # 9) Absolute consumption (water uses the final cement content)
    raw = Consumption(
        cement=cement,
        sand=sand * cement,
        gravel=gravel * cement,
        water=target_ac * cement,
    )

    # 10) Optional advisory / site outputs
    if reference_slump is not None:
        msg = slump_warning(target.slump, reference_slump)
        if msg:
            warnings.append(msg)

    field_consumption = round_consumption(raw, rounding) if rounding is not None else None
    batch_result = (
        calculate_batches(raw, container.container, container.total_volume)
        if container is not None
        else None
    )

    logger.debug(
        "dosage fcj=%.2f a/c=%.4f m=%.4f C=%.1f warnings=%d",
        fcj_target, target_ac, target_m, cement, len(warnings),
    )

    return TraceResult(
        final_trace=FinalTrace(
            sand=round_half_away(sand, DECIMALS_TRACE),
            gravel=round_half_away(gravel, DECIMALS_TRACE),
            water=round_half_away(target_ac, DECIMALS_TRACE),
        ),
        consumption=Consumption(
            cement=round_half_away(raw.cement, DECIMALS_CONSUMPTION),
            sand=round_half_away(raw.sand, DECIMALS_CONSUMPTION),
            gravel=round_half_away(raw.gravel, DECIMALS_CONSUMPTION),
            water=round_half_away(raw.water, DECIMALS_CONSUMPTION),
        ),
        parameters=Parameters(
            fcj_target=round_half_away(fcj_target, DECIMALS_STRENGTH),
            target_ac=round_half_away(target_ac, DECIMALS_AC),
            target_m=round_half_away(target_m, DECIMALS_M),
        ),
        coefficients=laws,
        warnings=tuple(warnings),
        experimental_range=rng,
        field_consumption=field_consumption,
        batch_result=batch_result,
    )
