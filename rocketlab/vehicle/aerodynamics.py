"""Aerodynamic center and drag models for model rockets.

The center of pressure uses a reduced form of the Barrowman method: each
component contributes a normal-force-derivative weight acting at a
characteristic axial position, and the center of pressure is the weighted
mean of those positions.

| component  | position                | weight                                |
|------------|-------------------------|---------------------------------------|
| nosecone   | x + 2/3 L (conical)     | 2 * pi * (d/2)^2                      |
| bodytube   | x + L/2                 | 0.1 * d * L                           |
| fins       | x + L/3 (root loading)  | (1 + 1/AR) * S * n, AR = L^2 / S      |
| transition | x + L/2                 | 0.5 * pi * d * L                      |

This is deliberately approximate. It ignores Mach effects, fin planform
shape, body lift at angle of attack and fin-body interference, so it
should be read as a design-time estimate rather than a potential-flow
result.

Example:
    >>> from rocketlab.vehicle import center_of_pressure, drag_force
    >>>
    >>> cp = center_of_pressure(components)  # mm from nose tip
    >>> drag = drag_force(velocity=40.0, density=1.2, drag_coefficient=0.6,
    ...                   reference_area=0.0013)
"""

import math
from collections.abc import Sequence

import numpy as np

from rocketlab._typecheck import beartype
from rocketlab.components import Component, ComponentType
from rocketlab.vehicle.mass import geometric_midpoint

# Body tubes carry almost no normal force at small angles of attack
BODY_TUBE_WEIGHT_FACTOR = 0.1
TRANSITION_WEIGHT_FACTOR = 0.5

MM_TO_M = 1e-3


# =============================================================================
# Center of Pressure
# =============================================================================


@beartype
def pressure_center(component: Component) -> float:
    """Characteristic axial position of a component's normal force [mm]."""
    x, length = component.axial_position, component.length

    if component.type is ComponentType.NOSECONE:
        return x + (2 / 3) * length
    if component.type is ComponentType.FINS:
        return x + length / 3
    return x + length / 2


@beartype
def normal_force_weight(component: Component) -> float:
    """Normal-force-derivative weight of a component.

    Returns zero for components that carry no normal force (engine mounts,
    recovery devices) and for non-physical geometry.
    """
    width, length = component.width, component.length

    if component.type is ComponentType.NOSECONE:
        weight = 2 * math.pi * (width / 2) ** 2 if width > 0 else 0.0
    elif component.type is ComponentType.BODYTUBE:
        weight = BODY_TUBE_WEIGHT_FACTOR * width * length
    elif component.type is ComponentType.FINS:
        fin_area = width * length
        if fin_area <= 0 or component.fin_count <= 0:
            return 0.0
        aspect_ratio = length ** 2 / fin_area
        weight = (1 + 1 / aspect_ratio) * fin_area * component.fin_count
    elif component.type is ComponentType.TRANSITION:
        weight = TRANSITION_WEIGHT_FACTOR * math.pi * width * length
    else:
        return 0.0

    return float(max(0.0, weight))


@beartype
def center_of_pressure(components: Sequence[Component]) -> float:
    """Center of pressure of the design [mm from nose tip].

    Falls back to the geometric midpoint when no component carries normal
    force, and to 0 for an empty design.
    """
    numerator = 0.0
    denominator = 0.0
    for c in components:
        weight = normal_force_weight(c)
        if weight <= 0:
            continue
        numerator += weight * pressure_center(c)
        denominator += weight

    if denominator <= 0:
        return geometric_midpoint(components)
    return numerator / denominator


# =============================================================================
# Drag
# =============================================================================


@beartype
def aggregate_drag_coefficient(components: Sequence[Component]) -> float:
    """Sum of component drag coefficients during powered and coasting flight.

    Recovery devices are stowed until deployment and do not contribute.
    """
    return sum(
        (
            max(0.0, float(c.drag_coefficient))
            for c in components
            if c.type is not ComponentType.PARACHUTE
        ),
        0.0,
    )


@beartype
def reference_area(diameter: float) -> float:
    """Frontal reference area from a diameter in millimetres [m^2]."""
    if diameter <= 0:
        return 0.0
    return math.pi * (diameter * MM_TO_M / 2) ** 2


@beartype
def drag_force(
    velocity: float,
    density: float,
    drag_coefficient: float,
    reference_area: float,
) -> float:
    """Signed drag force along the flight axis [N].

    The magnitude is 0.5 * rho * v^2 * Cd * A and the sign always opposes
    the velocity, so drag never assists the motion.
    """
    magnitude = 0.5 * density * velocity ** 2 * drag_coefficient * reference_area
    return float(-np.sign(velocity) * magnitude)
