import pytest

from ipt.dataset import DosageTarget, ElementType, ExperimentalPoint


# Common test fixtures
@pytest.fixture
def canonical_points():
    """Rich / pilot / lean trial mixes used across the suite."""
    return [
        ExperimentalPoint(m=3.5, ac=0.45, fcj=42.0, density=2350.0),
        ExperimentalPoint(m=5.0, ac=0.58, fcj=32.0, density=2300.0),
        ExperimentalPoint(m=6.5, ac=0.72, fcj=22.0, density=2250.0),
    ]


@pytest.fixture
def canonical_target():
    """fck 30 MPa, condition B, urban reinforced concrete."""
    return DosageTarget(
        fck=30.0,
        sd=5.5,
        aggressiveness_class=2,
        element_type=ElementType.REINFORCED,
        slump=100.0,
        mortar_content=52.0,
    )


@pytest.fixture
def lean_points():
    """Lean trials whose Molinari cement falls below the class 3 minimum."""
    return [
        ExperimentalPoint(m=5.0, ac=0.50, fcj=36.0, density=2300.0),
        ExperimentalPoint(m=6.5, ac=0.60, fcj=28.0, density=2280.0),
        ExperimentalPoint(m=8.0, ac=0.70, fcj=21.0, density=2260.0),
    ]
