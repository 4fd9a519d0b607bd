# app.py
# Concrete Dosage Tool (IPT/EPUSP) — Streamlit UI
# Run:
#   pip install -e .
#   streamlit run app.py

from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from ipt.aggregates import mortar_content_of
from ipt.batch import ContainerConfig, MixerContainer, calculate_batches_with_rounding
from ipt.config import CAA_DESCRIPTIONS, DEFAULT_TARGET, ELEMENT_DESCRIPTIONS, SD_BY_CONDITION
from ipt.dataset import (
    DosageTarget,
    ElementType,
    points_frame,
    points_from_frame,
    reference_points,
    validate_points,
    validate_target,
)
from ipt.design import calculate_dosage
from ipt.durability import get_limits
from ipt.errors import DosageError
from ipt.field import RoundingConfig, scale_to_volume
from ipt.report import coefficients_frame, law_curves, materials_frame, results_download_payload
from ipt.strength import all_conditions, dosage_strength_from_condition, infer_condition
from ipt.water import apply_slump_correction

# =============================================================================
# Page configuration
# =============================================================================
st.set_page_config(
    page_title="Concrete Dosage Tool — IPT/EPUSP",
    page_icon="🏗️",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title("Concrete Dosage Tool — IPT/EPUSP Method")
st.write(
    "This tool fits the Abrams, Lyse and Molinari laws to your trial mixes and derives the "
    "mix proportions for a target characteristic strength, checked against NBR 6118 durability limits."
)

with st.expander("Method and limitations (read first)", expanded=False):
    st.markdown(
        """
**Method summary**
- Dosage strength: **fcj = fck + 1.65 × Sd** (NBR 12655).
- Abrams: **fcj = k1 / k2^(a/c)** → water/cement ratio for the target.
- Lyse: **m = k3 + k4 × a/c** → dry aggregate ratio.
- Molinari: **C = 1000 / (k5 + k6 × m)** → cement content per m³.
- Sand and gravel are split from m using the mortar content.
- a/c and cement content are clamped to NBR 6118 Tab. 7.1 when needed.

**Limitations**
- At least three trial mixes (rich, pilot, lean) are required.
- Targets outside the experimental strength range are extrapolated and flagged.
- Results do not replace confirmation batches in the laboratory.
"""
    )

st.divider()

# =============================================================================
# Sidebar
# =============================================================================
with st.sidebar:
    st.header("Target")

    colA, colB = st.columns(2)
    with colA:
        fck = st.number_input("fck (MPa)", 10.0, 100.0, float(DEFAULT_TARGET["fck"]), 1.0)
    conditions = {row["condition"]: row for row in all_conditions()}
    with colB:
        cond_key = st.selectbox(
            "Preparation (NBR 12655)", list(conditions) + ["Custom"],
            index=list(conditions).index(infer_condition(DEFAULT_TARGET["sd"])),
            format_func=lambda k: f"{k} (Sd {conditions[k]['sd']:.1f})" if k in conditions else "Custom Sd",
        )
    if cond_key in conditions:
        sd = conditions[cond_key]["sd"]
        st.caption(
            f"{conditions[cond_key]['description']}. "
            f"fcj = {dosage_strength_from_condition(fck, cond_key):.2f} MPa"
        )
    else:
        sd = st.number_input("Sd (MPa)", 2.0, 10.0, float(DEFAULT_TARGET["sd"]), 0.5)
        cond = infer_condition(sd)
        st.caption(
            f"Closest preparation condition: **{cond}** (Sd = {SD_BY_CONDITION[cond]:.1f} MPa)"
            if cond else "Sd is above condition C."
        )

    elem_keys = list(ELEMENT_DESCRIPTIONS)
    elem = st.selectbox(
        "Element type", elem_keys,
        index=elem_keys.index(DEFAULT_TARGET["element_type"]),
        format_func=lambda k: f"{k} — {ELEMENT_DESCRIPTIONS[k]}",
    )
    caa_keys = list(CAA_DESCRIPTIONS)
    caa = st.selectbox(
        "Aggressiveness class", caa_keys,
        index=caa_keys.index(DEFAULT_TARGET["aggressiveness_class"]),
        format_func=lambda k: f"{k} — {CAA_DESCRIPTIONS[k]}",
    )
    lim = get_limits(caa, elem)
    st.caption(f"max a/c {lim.max_ac:.2f} · min fck {lim.min_fck:.0f} MPa · min C {lim.min_cement:.0f} kg/m³")

    colC, colD = st.columns(2)
    with colC:
        slump = st.number_input("Slump (mm)", 0.0, 250.0, float(DEFAULT_TARGET["slump"]), 10.0)
    with colD:
        mortar = st.number_input("Mortar (%)", 40.0, 65.0, float(DEFAULT_TARGET["mortar_content"]), 0.5)

    st.divider()
    st.subheader("Site outputs (optional)")

    use_rounding = st.checkbox("Round quantities for the site")
    colE, colF, colG = st.columns(3)
    with colE:
        water_inc = st.selectbox("Water (L)", [1, 5, 10], disabled=not use_rounding)
    with colF:
        cement_inc = st.selectbox("Cement (kg)", [1, 5, 50], disabled=not use_rounding)
    with colG:
        agg_inc = st.selectbox("Aggregates (kg)", [1, 5], disabled=not use_rounding)

    use_batches = st.checkbox("Mixer batches")
    shape = st.selectbox("Container shape", ["rectangular", "circular"], disabled=not use_batches)
    length = st.number_input(
        "Length / diameter (m)", 0.05, 5.0, 0.60, 0.05, disabled=not use_batches
    )
    width = st.number_input(
        "Width (m)", 0.05, 5.0, 0.60, 0.05, disabled=(not use_batches) or shape != "rectangular"
    )
    height = st.number_input("Height (m)", 0.05, 5.0, 0.40, 0.05, disabled=not use_batches)
    total_volume = st.number_input("Concrete volume (m³)", 0.01, 1000.0, 1.0, 0.5, disabled=not use_batches)
    whole_bags = st.checkbox("Whole kg / L and cement bags per batch", disabled=not use_batches)

    ref_slump = st.number_input("Trial-mix reference slump (mm)", 0.0, 250.0, 100.0, 10.0)

    st.divider()
    run_btn = st.button("Run dosage", type="primary", use_container_width=True)

# =============================================================================
# Trial mixes
# =============================================================================
st.subheader("Trial mixes")
st.caption("Rich, pilot and lean mixes (add rows for more). m = aggregates/cement, a/c by mass.")
points_df = st.data_editor(
    points_frame(reference_points()),
    num_rows="dynamic",
    use_container_width=True,
    column_config={
        "m": st.column_config.NumberColumn("m", min_value=0.0, max_value=15.0, step=0.1),
        "ac": st.column_config.NumberColumn("a/c", min_value=0.0, max_value=1.0, step=0.01),
        "fcj": st.column_config.NumberColumn("fcj (MPa)", min_value=0.0, max_value=200.0, step=0.5),
        "density": st.column_config.NumberColumn("Density (kg/m³)", min_value=1500.0, max_value=3000.0, step=10.0),
    },
)

st.divider()

# =============================================================================
# Run + render results
# =============================================================================
if run_btn:
    points = points_from_frame(points_df)
    target = DosageTarget(
        fck=float(fck),
        sd=float(sd),
        aggressiveness_class=int(caa),
        element_type=ElementType(elem),
        slump=float(slump),
        mortar_content=float(mortar),
    )

    problems = validate_points(points) + validate_target(target)
    if problems:
        st.error("Invalid input:\n\n" + "\n".join(f"- {p}" for p in problems))
        st.stop()

    rounding = RoundingConfig(water_inc, cement_inc, agg_inc) if use_rounding else None
    container = (
        ContainerConfig(
            MixerContainer(shape, float(length), float(height), float(width) if shape == "rectangular" else None),
            float(total_volume),
        )
        if use_batches
        else None
    )

    try:
        out = calculate_dosage(points, target, rounding=rounding, container=container, reference_slump=float(ref_slump))
    except DosageError as exc:
        st.error(f"Calculation error: {exc}")
        st.stop()

    p = out.parameters
    t = out.final_trace
    c = out.consumption

    # ---- Summary cards ----
    st.subheader("Results summary")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Dosage strength fcj (MPa)", f"{p.fcj_target:.2f}")
    c2.metric("Water/cement ratio", f"{p.target_ac:.3f}")
    c3.metric("Dry ratio m", f"{p.target_m:.3f}")
    c4.metric("Cement (kg/m³)", f"{c.cement:.1f}")

    st.markdown(f"**Unit trace (cement : sand : gravel : water)** — 1 : {t.sand:.3f} : {t.gravel:.3f} : {t.water:.3f}")

    for w in out.warnings:
        st.warning(w)

    st.divider()

    tab1, tab2, tab3, tab4 = st.tabs(["Materials", "Behaviour laws", "Site & batches", "Experimental range"])

    with tab1:
        st.write("Quantities per **1 m³** of concrete.")
        st.dataframe(materials_frame(out), use_container_width=True, hide_index=True)
        st.caption(
            f"Mortar content of the final trace: {mortar_content_of(t.sand, t.sand + t.gravel):.1f}% "
            f"(requested {target.mortar_content:g}%)"
        )

    with tab2:
        st.dataframe(coefficients_frame(out.coefficients), use_container_width=True, hide_index=True)
        curves = law_curves(out.coefficients)
        colL, colR = st.columns(2)
        with colL:
            st.markdown("**Abrams** — fcj vs a/c")
            st.line_chart(curves, x="a/c", y="fcj (MPa)")
        with colR:
            st.markdown("**Lyse** — m vs a/c")
            st.line_chart(curves, x="a/c", y="m")
        st.markdown("**Molinari** — C vs m")
        st.line_chart(curves.dropna(), x="m", y="C (kg/m³)")

    with tab3:
        corrected = apply_slump_correction(c.water, target.slump, float(ref_slump))
        st.caption(
            f"Water after slump correction ({target.slump:.0f} vs {float(ref_slump):.0f} mm): "
            f"{corrected:.1f} L/m³ (advisory, not applied)."
        )
        if out.field_consumption is not None:
            st.markdown("**Site-rounded consumption (per m³)**")
            st.dataframe(pd.DataFrame([vars(out.field_consumption)]), hide_index=True)
        if use_batches:
            st.markdown(f"**Quantities for {float(total_volume):g} m³**")
            st.dataframe(
                pd.DataFrame([vars(scale_to_volume(c, float(total_volume), rounding))]),
                hide_index=True,
            )
        if out.batch_result is not None:
            b = out.batch_result
            if whole_bags:
                b = calculate_batches_with_rounding(c, container.container, container.total_volume)
                st.caption(
                    f"Cement bags: {b.cement_bags_per_batch} per batch, {b.total_cement_bags} in total"
                )
            st.markdown(
                f"**Batches** — container {b.container_volume:.4f} m³, "
                f"{b.number_of_batches} batches for {b.total_volume:g} m³"
            )
            st.dataframe(
                pd.DataFrame([vars(b.per_batch), vars(b.total)], index=["Per batch", "Total"]),
                use_container_width=True,
            )
        if out.field_consumption is None and out.batch_result is None:
            st.info("Enable site rounding or mixer batches in the sidebar.")

    with tab4:
        rng = out.experimental_range
        st.write(f"Experimental fcj range: **{rng.min_fcj:.1f} – {rng.max_fcj:.1f} MPa**")
        if rng.is_extrapolating:
            st.warning(f"Target is {rng.extrapolation_percent:.1f}% outside the range.")
        else:
            st.success("Target is inside the experimental range.")

    st.divider()

    # ---- Downloads ----
    st.subheader("Download")
    payload = results_download_payload(out, target)
    st.download_button(
        label="Download results (CSV)",
        data=payload.to_csv(index=False).encode("utf-8"),
        file_name="dosage_results.csv",
        mime="text/csv",
    )

    with st.expander("Export JSON (technical)", expanded=False):
        st.download_button(
            label="Download results (JSON)",
            data=json.dumps(out.to_dict(), indent=2, ensure_ascii=False),
            file_name="dosage_results.json",
            mime="application/json",
        )

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
st.caption(
    "Prototype tool for dosage studies. Confirm the proportions with laboratory batches "
    "before use on site."
)
