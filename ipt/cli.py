# ipt/cli.py
from __future__ import annotations

import logging
from typing import List

from .config import CAA_DESCRIPTIONS, DEFAULT_TARGET, ELEMENT_DESCRIPTIONS, REFERENCE_MIXES
from .dataset import (
    DosageTarget,
    ElementType,
    ExperimentalPoint,
    reference_points,
    validate_points,
    validate_target,
)
from .design import TraceResult, calculate_dosage
from .durability import class_description, get_limits
from .errors import DosageError
from .report import coefficients_frame
from .strength import all_conditions, standard_deviation


def ask_float(prompt, default=None):
    s = input(f"{prompt}" + (f" [{default}]" if default is not None else "") + ": ").strip()
    if not s and default is not None:
        return float(default)
    return float(s)


def show_class_options(element_type="CA"):
    print(f"\n=== Environmental Aggressiveness Classes (NBR 6118, {element_type}) ===")
    print(f"{'#':<2} {'max a/c':>8} {'min fck':>8} {'min C':>7}  Description")
    for caa in CAA_DESCRIPTIONS:
        lim = get_limits(caa, element_type)
        print(f"{caa:<2} {lim.max_ac:>8.2f} {lim.min_fck:>8.0f} {lim.min_cement:>7.0f}  {class_description(caa)}")
    return list(CAA_DESCRIPTIONS)


def ask_sd(default=DEFAULT_TARGET["sd"]) -> float:
    """Sd from a preparation condition letter or typed directly in MPa."""
    print("\n=== Preparation Conditions (NBR 12655) ===")
    for row in all_conditions():
        print(f"  {row['condition']}  Sd = {row['sd']:.1f} MPa  {row['description']}")
    s = input(f"Condition (A, B or C) or Sd in MPa [{default}]: ").strip()
    if not s:
        return float(default)
    if s.isalpha():
        return standard_deviation(s)
    return float(s)


def choose_element_type(default_key="CA") -> str:
    print("\n=== Element Type ===")
    for key, desc in ELEMENT_DESCRIPTIONS.items():
        print(f"  {key}  {desc}")
    s = input(f"Element type (CA or CP) [{default_key}]: ").strip().upper()
    if not s:
        return default_key
    if s in ELEMENT_DESCRIPTIONS:
        return s
    raise ValueError("Please enter CA or CP.")


def choose_aggressiveness_class(element_type="CA", default_class=2) -> int:
    options = show_class_options(element_type)
    s = input(f"\nChoose aggressiveness class (1-{len(options)}) [{default_class}]: ").strip()
    if not s:
        return default_class
    i = int(float(s))
    if i in options:
        return i
    raise ValueError(f"Please enter 1–{len(options)}.")


def ask_points() -> List[ExperimentalPoint]:
    s = input("\nUse the reference rich/pilot/lean trial mixes? (Y/n): ").strip().lower()
    if s in ("", "y", "yes"):
        return reference_points()

    n = int(ask_float("Number of trial mixes", len(REFERENCE_MIXES)))
    points = []
    for i in range(1, n + 1):
        print(f"\nTrial mix {i}:")
        points.append(ExperimentalPoint(
            m=ask_float("  Dry ratio m"),
            ac=ask_float("  Water/cement ratio"),
            fcj=ask_float("  28-day strength fcj (MPa)"),
            density=ask_float("  Fresh density (kg/m³)"),
        ))
    return points


def ask_target() -> DosageTarget:
    fck = ask_float("\nCharacteristic strength fck (MPa)", DEFAULT_TARGET["fck"])
    sd = ask_sd(DEFAULT_TARGET["sd"])
    elem = choose_element_type(DEFAULT_TARGET["element_type"])
    caa = choose_aggressiveness_class(elem, DEFAULT_TARGET["aggressiveness_class"])
    slump = ask_float("Slump (mm)", DEFAULT_TARGET["slump"])
    mortar = ask_float("Mortar content (%)", DEFAULT_TARGET["mortar_content"])
    return DosageTarget(
        fck=fck,
        sd=sd,
        aggressiveness_class=caa,
        element_type=ElementType(elem),
        slump=slump,
        mortar_content=mortar,
    )


def render_trace_table(out: TraceResult):
    t = out.final_trace
    c = out.consumption
    p = out.parameters

    print("\n=== Dosage Results (IPT/EPUSP) ===")
    print(f"fcj target = {p.fcj_target:.2f} MPa | a/c = {p.target_ac:.4f} | m = {p.target_m:.4f}")
    print(f"Unit trace  1 : {t.sand:.3f} : {t.gravel:.3f} : {t.water:.3f}  (cement : sand : gravel : water)")

    W_MAT, W_TRACE, W_CONS = 10, 12, 16
    print(
        f"\n{'Material':<{W_MAT}}"
        f"{'Unit trace':>{W_TRACE}}"
        f"{'Per m³':>{W_CONS}}"
    )
    rows = [
        ("Cement", t.cement, f"{c.cement:.1f} kg"),
        ("Sand", t.sand, f"{c.sand:.1f} kg"),
        ("Gravel", t.gravel, f"{c.gravel:.1f} kg"),
        ("Water", t.water, f"{c.water:.1f} L"),
    ]
    for name, ratio, qty in rows:
        print(f"{name:<{W_MAT}}{ratio:>{W_TRACE}.3f}{qty:>{W_CONS}}")

    print("\nBehaviour laws:")
    print(coefficients_frame(out.coefficients).to_string(index=False))

    rng = out.experimental_range
    if rng is not None:
        status = "EXTRAPOLATING" if rng.is_extrapolating else "inside range"
        print(f"\nExperimental fcj range: {rng.min_fcj:.1f}-{rng.max_fcj:.1f} MPa ({status})")

    if out.warnings:
        print("\nWarnings:")
        for w in out.warnings:
            print(f"  - {w}")


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    print("\n=== Concrete Dosage — IPT/EPUSP Method (NBR 6118 / NBR 12655) ===")

    points = ask_points()
    target = ask_target()

    problems = validate_points(points) + validate_target(target)
    if problems:
        print("\nInvalid input:")
        for msg in problems:
            print(f"  - {msg}")
        return 2

    try:
        out = calculate_dosage(points, target)
    except DosageError as exc:
        print(f"\nError: {exc}")
        return 1

    render_trace_table(out)
    return 0
