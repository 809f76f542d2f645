"""Vehicle modeling for model-rocket design.

Provides mass aggregation, center of pressure estimation, drag, and the
derived RocketPhysics summary for a component design.

Example:
    >>> from rocketlab.vehicle import compute_rocket_physics
    >>>
    >>> physics = compute_rocket_physics(components, motor)
    >>> print(f"CG {physics.center_of_gravity:.0f} mm, CP {physics.center_of_pressure:.0f} mm")
    >>> print(f"Margin: {physics.stability_margin:.2f} cal")
"""

from rocketlab.vehicle.aerodynamics import (
    aggregate_drag_coefficient,
    center_of_pressure,
    drag_force,
    normal_force_weight,
    pressure_center,
    reference_area,
)
from rocketlab.vehicle.mass import (
    AnalysisPhase,
    MassProperties,
    burn_fraction_for_phase,
    burned_propellant,
    center_of_gravity,
    geometric_midpoint,
    mass_properties,
    motor_position,
    overall_diameter,
    overall_length,
    total_mass,
)
from rocketlab.vehicle.physics import (
    RocketPhysics,
    compute_rocket_physics,
    static_margin,
)

__all__ = [
    # Mass properties
    "MassProperties",
    "AnalysisPhase",
    "burn_fraction_for_phase",
    "burned_propellant",
    "mass_properties",
    "total_mass",
    "center_of_gravity",
    "motor_position",
    "overall_length",
    "overall_diameter",
    "geometric_midpoint",
    # Aerodynamics
    "normal_force_weight",
    "pressure_center",
    "center_of_pressure",
    "aggregate_drag_coefficient",
    "reference_area",
    "drag_force",
    # Derived physics
    "RocketPhysics",
    "compute_rocket_physics",
    "static_margin",
]
