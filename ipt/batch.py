# ipt/batch.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .config import CEMENT_BAG_KG, CONTAINER_SHAPES, DECIMALS_CONSUMPTION
from .errors import InvalidInput
from .field import Consumption
from .utils import round_half_away


@dataclass(frozen=True)
class MixerContainer:
    """Mixing container; length is the diameter for circular containers (m)."""
    shape: str
    length: float
    height: float
    width: Optional[float] = None


@dataclass(frozen=True)
class ContainerConfig:
    container: MixerContainer
    total_volume: float   # m³ of concrete wanted


@dataclass(frozen=True)
class BatchResult:
    container_volume: float
    total_volume: float
    number_of_batches: int
    per_batch: Consumption
    total: Consumption
    cement_bags_per_batch: Optional[int] = None
    total_cement_bags: Optional[int] = None


def container_volume(container: MixerContainer) -> float:
    if container.shape == "rectangular":
        width = container.width if container.width is not None else container.length
        return container.length * width * container.height
    radius = container.length / 2.0
    return math.pi * radius * radius * container.height


def is_valid_container(container: MixerContainer) -> bool:
    if container.shape not in CONTAINER_SHAPES:
        return False
    if container.length <= 0 or container.height <= 0:
        return False
    if container.shape == "rectangular" and container.width is not None:
        return container.width > 0
    return True


def _rounded(c: Consumption, decimals: int) -> Consumption:
    return Consumption(
        cement=round_half_away(c.cement, decimals),
        sand=round_half_away(c.sand, decimals),
        gravel=round_half_away(c.gravel, decimals),
        water=round_half_away(c.water, decimals),
    )


def calculate_batches(consumption: Consumption, container: MixerContainer, total_volume: float) -> BatchResult:
    if not is_valid_container(container):
        raise InvalidInput(f"Invalid mixer container: {container}")
    if total_volume <= 0:
        raise InvalidInput(f"Total concrete volume must be positive, got {total_volume} m³")

    vol = container_volume(container)
    return BatchResult(
        container_volume=round_half_away(vol, 4),
        total_volume=total_volume,
        number_of_batches=int(math.ceil(total_volume / vol)),
        per_batch=_rounded(consumption.scaled(vol), DECIMALS_CONSUMPTION),
        total=_rounded(consumption.scaled(total_volume), DECIMALS_CONSUMPTION),
    )


def calculate_batches_with_rounding(
    consumption: Consumption,
    container: MixerContainer,
    total_volume: float,
    cement_bag_size: float = CEMENT_BAG_KG,
) -> BatchResult:
    """Same as calculate_batches with whole kg / L and cement bag counts."""
    res = calculate_batches(consumption, container, total_volume)
    return BatchResult(
        container_volume=res.container_volume,
        total_volume=res.total_volume,
        number_of_batches=res.number_of_batches,
        per_batch=_rounded(res.per_batch, 0),
        total=_rounded(res.total, 0),
        cement_bags_per_batch=int(math.ceil(res.per_batch.cement / cement_bag_size)),
        total_cement_bags=int(math.ceil(res.total.cement / cement_bag_size)),
    )
