# ipt/report.py
from __future__ import annotations

import numpy as np
import pandas as pd

from .config import DECIMALS_CONSUMPTION
from .dataset import DosageTarget
from .design import TraceResult
from .durability import get_limits
from .models import LawsBundle, evaluate_abrams, evaluate_lyse, evaluate_molinari
from .utils import round_half_away


def materials_frame(out: TraceResult) -> pd.DataFrame:
    """Unit trace and consumption per m³, one row per material, plus a total row."""
    t = out.final_trace
    c = out.consumption
    rows = [
        ("Cement", t.cement, c.cement, "kg/m³"),
        ("Sand", t.sand, c.sand, "kg/m³"),
        ("Gravel", t.gravel, c.gravel, "kg/m³"),
        ("Water", t.water, c.water, "L/m³"),
    ]
    total_mass = sum(qty for _, _, qty, _ in rows)
    rows.append(("Total", np.nan, round_half_away(total_mass, DECIMALS_CONSUMPTION), "kg/m³"))

    df = pd.DataFrame(rows, columns=["Material", "Unit trace", "Consumption", "Unit"])
    share = 100.0 * df["Consumption"] / total_mass if total_mass > 0 else 0.0 * df["Consumption"]
    df["Mass share (%)"] = share.round(1)
    return df


def coefficients_frame(laws: LawsBundle) -> pd.DataFrame:
    return pd.DataFrame(
        [
            ("Abrams", "fcj = k1 / k2^(a/c)", "k1", laws.abrams.k1, "k2", laws.abrams.k2, laws.abrams.r2),
            ("Lyse", "m = k3 + k4 * a/c", "k3", laws.lyse.k3, "k4", laws.lyse.k4, laws.lyse.r2),
            ("Molinari", "C = 1000 / (k5 + k6 * m)", "k5", laws.molinari.k5, "k6", laws.molinari.k6, laws.molinari.r2),
        ],
        columns=["Law", "Model", "A", "A value", "B", "B value", "R²"],
    )


def law_curves(laws: LawsBundle, ac_min: float = 0.30, ac_max: float = 0.90, n: int = 61) -> pd.DataFrame:
    """
    Fitted curves sampled on an a/c grid for plotting.
    Molinari is evaluated at the Lyse m; non-physical points are left as NaN.
    """
    grid = np.linspace(ac_min, ac_max, n)
    fcj, m, cement = [], [], []
    for ac in grid:
        fcj.append(evaluate_abrams(float(ac), laws.abrams))
        m_ac = evaluate_lyse(float(ac), laws.lyse)
        m.append(m_ac)
        denominator = laws.molinari.k5 + laws.molinari.k6 * m_ac
        cement.append(evaluate_molinari(m_ac, laws.molinari) if m_ac > 0 and denominator > 0 else np.nan)
    return pd.DataFrame({"a/c": grid, "fcj (MPa)": fcj, "m": m, "C (kg/m³)": cement})


def results_download_payload(out: TraceResult, target: DosageTarget) -> pd.DataFrame:
    """One-row CSV-friendly summary for record keeping."""
    limits = get_limits(target.aggressiveness_class, target.element_type)
    p = out.parameters
    c = out.consumption
    t = out.final_trace
    laws = out.coefficients
    row = {
        "fck_MPa": target.fck,
        "sd_MPa": target.sd,
        "aggressiveness_class": target.aggressiveness_class,
        "element_type": getattr(target.element_type, "value", target.element_type),
        "mortar_content_pct": target.mortar_content,
        "max_ac": limits.max_ac,
        "min_cement_kg_m3": limits.min_cement,
        "fcj_target_MPa": p.fcj_target,
        "target_ac": p.target_ac,
        "target_m": p.target_m,
        "trace": f"1 : {t.sand:.3f} : {t.gravel:.3f} : {t.water:.3f}",
        "cement_kg_m3": c.cement,
        "sand_kg_m3": c.sand,
        "gravel_kg_m3": c.gravel,
        "water_L_m3": c.water,
        "abrams_k1": laws.abrams.k1,
        "abrams_k2": laws.abrams.k2,
        "lyse_k3": laws.lyse.k3,
        "lyse_k4": laws.lyse.k4,
        "molinari_k5": laws.molinari.k5,
        "molinari_k6": laws.molinari.k6,
        "warnings": " | ".join(out.warnings),
    }
    return pd.DataFrame([row])
