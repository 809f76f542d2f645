"""Mass and geometry aggregation for a component design.

Computes total mass, center of gravity and overall dimensions from the
component list, optionally with a motor whose propellant is partly burned.
Every function is a pure O(n) pass and degrades to a neutral value (0 or
the geometric midpoint) instead of dividing by zero.

Example:
    >>> from rocketlab.vehicle import center_of_gravity, total_mass
    >>>
    >>> m = total_mass(components, motor, burn_fraction=0.5)
    >>> cg = center_of_gravity(components, motor, burn_fraction=0.5)
    >>> print(f"Mass: {m * 1000:.0f} g, CG: {cg:.1f} mm from nose")
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from rocketlab._typecheck import beartype
from rocketlab.components import Component, ComponentType, components_of_type
from rocketlab.motors import Motor

logger = logging.getLogger(__name__)


# =============================================================================
# Mass Properties
# =============================================================================


@beartype
@dataclass(frozen=True)
class MassProperties:
    """Point-mass properties along the rocket axis.

    Attributes:
        mass: Total mass [kg]
        cg: Axial center of gravity from the nose tip [mm]
    """
    mass: float
    cg: float

    def __add__(self, other: "MassProperties") -> "MassProperties":
        """Combine two point masses."""
        total = self.mass + other.mass
        if total <= 0:
            return MassProperties(mass=0.0, cg=0.0)
        return MassProperties(
            mass=total,
            cg=(self.mass * self.cg + other.mass * other.cg) / total,
        )


# =============================================================================
# Propellant Burn
# =============================================================================


class AnalysisPhase(Enum):
    """Flight phase used to pick a propellant state for static analysis."""

    POWERED = "powered"
    COAST = "coast"
    RECOVERY = "recovery"


_PHASE_BURN_FRACTION = {
    AnalysisPhase.POWERED: 0.5,
    AnalysisPhase.COAST: 1.0,
    AnalysisPhase.RECOVERY: 1.0,
}


@beartype
def burn_fraction_for_phase(phase: AnalysisPhase | str) -> float:
    """Propellant burn fraction representative of an analysis phase."""
    return _PHASE_BURN_FRACTION[AnalysisPhase(phase)]


@beartype
def burned_propellant(motor: Motor, burn_fraction: float) -> float:
    """Propellant consumed at a burn fraction (0 = ignition, 1 = burnout) [kg]."""
    fraction = min(1.0, max(0.0, burn_fraction))
    return motor.propellant_mass * fraction


@beartype
def motor_mass(motor: Motor, burn_fraction: float = 0.0) -> float:
    """Current motor mass at a burn fraction [kg]."""
    return motor.total_mass - burned_propellant(motor, burn_fraction)


# =============================================================================
# Geometry
# =============================================================================


@beartype
def overall_length(components: Sequence[Component]) -> float:
    """Axial extent from the foremost to the aftmost component [mm]."""
    if not components:
        return 0.0
    front = min(c.axial_position for c in components)
    back = max(c.aft_position for c in components)
    return float(back - front)


@beartype
def overall_diameter(components: Sequence[Component]) -> float:
    """Largest component width [mm]."""
    if not components:
        return 0.0
    return float(max(c.width for c in components))


@beartype
def geometric_midpoint(components: Sequence[Component]) -> float:
    """Axial midpoint of the rocket's overall extent [mm]."""
    if not components:
        return 0.0
    front = min(c.axial_position for c in components)
    back = max(c.aft_position for c in components)
    return float(front + back) / 2


@beartype
def motor_position(
    components: Sequence[Component],
    motor_axial_position: float | None = None,
) -> float:
    """Axial position where the motor's mass acts [mm].

    An explicit position wins. Otherwise the motor sits at the midpoint of
    the first engine mount, or at the aft end of the rocket without one.
    """
    if motor_axial_position is not None:
        return motor_axial_position
    engines = components_of_type(components, ComponentType.ENGINE)
    if engines:
        return engines[0].midpoint
    if not components:
        return 0.0
    return float(max(c.aft_position for c in components))


# =============================================================================
# Mass Aggregation
# =============================================================================


@beartype
def mass_properties(
    components: Sequence[Component],
    motor: Motor | None = None,
    burn_fraction: float = 0.0,
    motor_axial_position: float | None = None,
) -> MassProperties:
    """Total mass and center of gravity of the design.

    Negative component masses are treated as zero.

    Args:
        components: Component snapshot
        motor: Attached motor, if any
        burn_fraction: Fraction of propellant consumed (0-1)
        motor_axial_position: Override for where the motor mass acts [mm]

    Returns:
        MassProperties for the whole rocket
    """
    props = MassProperties(mass=0.0, cg=0.0)
    for c in components:
        props = props + MassProperties(mass=max(0.0, float(c.mass)), cg=c.midpoint)

    if motor is not None:
        position = motor_position(components, motor_axial_position)
        props = props + MassProperties(mass=max(0.0, motor_mass(motor, burn_fraction)), cg=position)

    if props.mass <= 0 and components:
        logger.warning("Design with %d components has no mass; CG defaults to 0", len(components))
    return props


@beartype
def total_mass(
    components: Sequence[Component],
    motor: Motor | None = None,
    burn_fraction: float = 0.0,
) -> float:
    """Total rocket mass [kg]; 0 for an empty, motorless design."""
    mass = sum((max(0.0, float(c.mass)) for c in components), 0.0)
    if motor is not None:
        mass += motor_mass(motor, burn_fraction)
    return mass


@beartype
def center_of_gravity(
    components: Sequence[Component],
    motor: Motor | None = None,
    burn_fraction: float = 0.0,
    motor_axial_position: float | None = None,
) -> float:
    """Mass-weighted axial center of gravity [mm]; 0 when massless."""
    return mass_properties(components, motor, burn_fraction, motor_axial_position).cg
