# ipt/config.py
from __future__ import annotations

from types import MappingProxyType

# ============================================================
# -------- Method constants (IPT/EPUSP) --------
# ============================================================
MIN_POINTS_DOSAGE = 3      # rich, pilot, lean
MIN_POINTS_REGRESSION = 2
MAX_POINTS_INPUT = 10      # front-end limit, the core accepts more

# Decimal places each stage rounds to (half away from zero)
DECIMALS_REGRESSION = 6
DECIMALS_ABRAMS_K = 4
DECIMALS_LYSE_K = 4
DECIMALS_MOLINARI_K = 6
DECIMALS_AC = 4
DECIMALS_M = 4
DECIMALS_STRENGTH = 2
DECIMALS_CONSUMPTION_EXP = 2
DECIMALS_TRACE = 3
DECIMALS_CONSUMPTION = 1
DECIMALS_RANGE = 1

# ============================================================
# NBR 12655:2022: dosage strength fcj = fck + 1.65 * Sd
# ============================================================
Z_SCORE_5PCT = 1.65

SD_BY_CONDITION = MappingProxyType({
    "A": 4.0,   # cement, aggregates and water by mass, moisture corrected
    "B": 5.5,   # cement by mass, aggregates by volume, estimated correction
    "C": 7.0,   # cement by mass, aggregates by volume, no correction
})

CONDITION_DESCRIPTIONS = MappingProxyType({
    "A": "Strict control: all materials by mass, moisture correction",
    "B": "Reasonable control: cement by mass, aggregates by volume, estimated correction",
    "C": "Regular control: cement by mass, aggregates by volume, no correction",
})

# upper Sd bound for each condition when inferring it from a declared Sd
SD_CONDITION_BOUNDS = (("A", 4.75), ("B", 6.25), ("C", 7.5))

# ============================================================
# NBR 6118:2023 Tab. 7.1: durability limits
# (max a/c, min fck MPa, min cement kg/m³)
# ============================================================
ELEMENT_REINFORCED = "CA"
ELEMENT_PRESTRESSED = "CP"

DURABILITY_LIMITS = MappingProxyType({
    ELEMENT_REINFORCED: MappingProxyType({
        1: (0.65, 20.0, 260.0),
        2: (0.60, 25.0, 280.0),
        3: (0.55, 30.0, 320.0),
        4: (0.45, 40.0, 360.0),
    }),
    ELEMENT_PRESTRESSED: MappingProxyType({
        1: (0.60, 25.0, 280.0),
        2: (0.55, 30.0, 320.0),
        3: (0.50, 35.0, 360.0),
        4: (0.45, 40.0, 400.0),
    }),
})

CAA_DESCRIPTIONS = MappingProxyType({
    1: "Weak (rural, submerged)",
    2: "Moderate (urban)",
    3: "Strong (marine, industrial)",
    4: "Very strong (tidal splash, aggressive industrial)",
})

ELEMENT_DESCRIPTIONS = MappingProxyType({
    ELEMENT_REINFORCED: "Reinforced concrete",
    ELEMENT_PRESTRESSED: "Prestressed concrete",
})

# ============================================================
# Advisory diagnostics
# ============================================================
DENSITY_ADVISORY_KG_M3 = 2450.0   # above this the densities look theoretical (no entrapped air)

SLUMP_REFERENCE_MM = 100.0
SLUMP_CORRECTION_L_PER_MM = 0.3   # ±3 L/m³ per ±10 mm
SLUMP_WARNING_MM = 50.0

# ============================================================
# Field rounding / batches
# ============================================================
WATER_INCREMENTS = (1, 5, 10)       # L
CEMENT_INCREMENTS = (1, 5, 50)      # kg, 50 = whole bag
AGGREGATE_INCREMENTS = (1, 5)       # kg
CEMENT_BAG_KG = 50.0

CONTAINER_SHAPES = ("rectangular", "circular")

# ============================================================
# Input ranges checked by the front-ends before calling the core
# ============================================================
POINT_RANGES = MappingProxyType({
    "m": (0.0, 15.0),
    "ac": (0.0, 1.0),
    "fcj": (0.0, 200.0),
    "density": (1500.0, 3000.0),
})

TARGET_RANGES = MappingProxyType({
    "fck": (10.0, 100.0),
    "sd": (2.0, 10.0),
    "slump": (0.0, 250.0),
    "mortar_content": (40.0, 65.0),
})

# ============================================================
# Reference trial mixes (rich, pilot, lean)
# (m, a/c, fcj MPa, fresh density kg/m³)
# ============================================================
REFERENCE_MIXES = (
    ("Rich", 3.5, 0.45, 42.0, 2350.0),
    ("Pilot", 5.0, 0.58, 32.0, 2300.0),
    ("Lean", 6.5, 0.72, 22.0, 2250.0),
)

DEFAULT_TARGET = MappingProxyType({
    "fck": 30.0,
    "sd": 5.5,
    "aggressiveness_class": 2,
    "element_type": ELEMENT_REINFORCED,
    "slump": 100.0,
    "mortar_content": 52.0,
})
