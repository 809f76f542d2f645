"""Shared fixtures: a small single-stage model rocket and its C6-5 motor."""

import pytest

from rocketlab.components import Component, ComponentType
from rocketlab.motors import Motor, default_catalog
from rocketlab.vehicle import RocketPhysics, compute_rocket_physics


@pytest.fixture
def nose() -> Component:
    return Component(
        id="nose", type=ComponentType.NOSECONE, axial_position=0.0,
        width=40.0, length=60.0, mass=0.05, drag_coefficient=0.15,
    )


@pytest.fixture
def body() -> Component:
    return Component(
        id="body", type=ComponentType.BODYTUBE, axial_position=60.0,
        width=40.0, length=300.0, mass=0.15, drag_coefficient=0.45,
    )


@pytest.fixture
def fins() -> Component:
    return Component(
        id="fins", type=ComponentType.FINS, axial_position=360.0,
        width=60.0, length=40.0, mass=0.08, drag_coefficient=0.02, fin_count=4,
    )


@pytest.fixture
def parachute() -> Component:
    return Component(
        id="chute", type=ComponentType.PARACHUTE, axial_position=20.0,
        width=30.0, length=25.0, mass=0.04, drag_coefficient=1.3,
    )


@pytest.fixture
def components(nose, body, fins, parachute) -> list[Component]:
    """Nose cone, 300 mm body tube, four fins at the aft end and a parachute."""
    return [nose, body, fins, parachute]


@pytest.fixture
def motor() -> Motor:
    return default_catalog()["C6-5"]


@pytest.fixture
def physics(components, motor) -> RocketPhysics:
    return compute_rocket_physics(components, motor)
