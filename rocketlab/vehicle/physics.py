"""Derived rocket physics for a component design and motor."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rocketlab._typecheck import beartype
from rocketlab.components import Component
from rocketlab.motors import Motor
from rocketlab.vehicle.aerodynamics import (
    aggregate_drag_coefficient,
    center_of_pressure,
    reference_area,
)
from rocketlab.vehicle.mass import (
    mass_properties,
    overall_diameter,
    overall_length,
    total_mass,
)

logger = logging.getLogger(__name__)


@beartype
def static_margin(center_of_pressure: float, center_of_gravity: float, reference_diameter: float) -> float:
    """Static margin (CP - CG) / d in calibers; 0 for a non-positive diameter."""
    if reference_diameter <= 0:
        return 0.0
    return (center_of_pressure - center_of_gravity) / reference_diameter


@beartype
@dataclass(frozen=True)
class RocketPhysics:
    """Physical summary consumed by the stability display and the integrator.

    Derived entirely from the components and motor; recompute it whenever
    either changes.

    Attributes:
        total_mass: Liftoff mass at the requested burn fraction [kg]
        dry_mass: Mass with all propellant burned [kg]
        propellant_mass: Motor propellant mass [kg]
        center_of_gravity: CG from nose tip [mm]
        center_of_pressure: CP from nose tip [mm]
        stability_margin: Static margin [calibers]
        drag_coefficient: Aggregate drag coefficient
        reference_area: Frontal reference area [m^2]
        length: Overall length [mm]
        diameter: Overall diameter [mm]
    """
    total_mass: float
    dry_mass: float
    propellant_mass: float
    center_of_gravity: float
    center_of_pressure: float
    stability_margin: float
    drag_coefficient: float
    reference_area: float
    length: float
    diameter: float


@beartype
def compute_rocket_physics(
    components: Sequence[Component],
    motor: Motor | None = None,
    burn_fraction: float = 0.0,
    motor_axial_position: float | None = None,
) -> RocketPhysics:
    """Derive RocketPhysics from a component snapshot.

    Args:
        components: Component snapshot
        motor: Selected motor, if any
        burn_fraction: Propellant consumed for the mass/CG figures (0-1)
        motor_axial_position: Override for where the motor mass acts [mm]

    Returns:
        RocketPhysics value
    """
    props = mass_properties(components, motor, burn_fraction, motor_axial_position)
    cp = center_of_pressure(components)
    diameter = overall_diameter(components)

    if components and diameter <= 0:
        logger.warning("Design has no positive width; stability margin defaults to 0")

    return RocketPhysics(
        total_mass=props.mass,
        dry_mass=total_mass(components, motor, burn_fraction=1.0),
        propellant_mass=motor.propellant_mass if motor is not None else 0.0,
        center_of_gravity=props.cg,
        center_of_pressure=cp,
        stability_margin=static_margin(cp, props.cg, diameter),
        drag_coefficient=aggregate_drag_coefficient(components),
        reference_area=reference_area(diameter),
        length=overall_length(components),
        diameter=diameter,
    )
