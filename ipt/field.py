# ipt/field.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .config import (
    AGGREGATE_INCREMENTS,
    CEMENT_BAG_KG,
    CEMENT_INCREMENTS,
    DECIMALS_CONSUMPTION,
    WATER_INCREMENTS,
)
from .errors import InvalidInput
from .utils import round_half_away, round_to_increment


@dataclass(frozen=True)
class Consumption:
    """Material per m³: cement, sand, gravel in kg; water in L."""
    cement: float
    sand: float
    gravel: float
    water: float

    def scaled(self, factor: float) -> "Consumption":
        return Consumption(
            cement=self.cement * factor,
            sand=self.sand * factor,
            gravel=self.gravel * factor,
            water=self.water * factor,
        )


@dataclass(frozen=True)
class RoundingConfig:
    water_increment: int = 1
    cement_increment: int = 1
    aggregate_increment: int = 1

    def __post_init__(self):
        for name, value, allowed in (
            ("water_increment", self.water_increment, WATER_INCREMENTS),
            ("cement_increment", self.cement_increment, CEMENT_INCREMENTS),
            ("aggregate_increment", self.aggregate_increment, AGGREGATE_INCREMENTS),
        ):
            if value not in allowed:
                raise InvalidInput(f"{name} must be one of {allowed}, got {value}")


@dataclass(frozen=True)
class FieldConsumption:
    cement: float
    sand: float
    gravel: float
    water: float
    cement_bags: Optional[int] = None   # only when cement is rounded to whole bags


def round_consumption(consumption: Consumption, config: RoundingConfig = RoundingConfig()) -> FieldConsumption:
    """Round each quantity to the nearest practical site increment."""
    bags = None
    if config.cement_increment == CEMENT_BAG_KG:
        bags = int(math.ceil(consumption.cement / CEMENT_BAG_KG))
    return FieldConsumption(
        cement=round_to_increment(consumption.cement, config.cement_increment),
        sand=round_to_increment(consumption.sand, config.aggregate_increment),
        gravel=round_to_increment(consumption.gravel, config.aggregate_increment),
        water=round_to_increment(consumption.water, config.water_increment),
        cement_bags=bags,
    )


def scale_to_volume(
    consumption: Consumption,
    volume: float,
    config: Optional[RoundingConfig] = None,
) -> FieldConsumption:
    scaled = consumption.scaled(volume)
    if config is not None:
        return round_consumption(scaled, config)
    return FieldConsumption(
        cement=round_half_away(scaled.cement, DECIMALS_CONSUMPTION),
        sand=round_half_away(scaled.sand, DECIMALS_CONSUMPTION),
        gravel=round_half_away(scaled.gravel, DECIMALS_CONSUMPTION),
        water=round_half_away(scaled.water, DECIMALS_CONSUMPTION),
    )
