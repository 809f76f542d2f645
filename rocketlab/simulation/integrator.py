"""One-dimensional vertical flight integrator.

Advances a point-mass rocket along the vertical axis in fixed time steps
under motor thrust, aerodynamic drag and altitude-dependent gravity:

    a = T/m + D/m - g(h)
    v' = v + a * dt
    h' = max(0, h + v * dt + a * dt^2 / 2)

Thrust and drag are evaluated at the start of the step and recorded on the
sample they produce. Propellant burns at a constant rate while the motor is
lit, and the mass never drops below the rocket's dry mass.

The flight phase is not stored. It is recomputed from time, burn time,
velocity and altitude whenever it is needed.

Example:
    >>> from rocketlab.simulation.integrator import FlightState, step
    >>>
    >>> state = FlightState.at_rest(mass=physics.total_mass)
    >>> state = step(state, physics, motor, launch, dt=0.01)
    >>> print(state.phase_for(motor.burn_time))
"""

from dataclasses import dataclass
from enum import Enum

from numba import njit

from rocketlab._typecheck import beartype
from rocketlab.environment.atmosphere import Atmosphere
from rocketlab.environment.gravity import G0, R_EARTH, gravity_magnitude_at_altitude
from rocketlab.environment.launch import LaunchConditions
from rocketlab.motors import Motor
from rocketlab.vehicle.aerodynamics import drag_force
from rocketlab.vehicle.physics import RocketPhysics

# =============================================================================
# Flight Phase
# =============================================================================


class FlightPhase(Enum):
    """Phase of a vertical flight."""

    POWERED_ASCENT = "powered_ascent"
    COAST = "coast"
    DESCENT = "descent"
    LANDED = "landed"


@beartype
def flight_phase(time: float, burn_time: float, velocity: float, altitude: float) -> FlightPhase:
    """Derive the flight phase of a sample.

    Args:
        time: Time since ignition [s]
        burn_time: Motor burn time [s] (0 without a motor)
        velocity: Vertical velocity [m/s]
        altitude: Altitude above the pad [m]

    Returns:
        FlightPhase
    """
    if altitude <= 0.0 and velocity <= 0.0 and time >= burn_time:
        return FlightPhase.LANDED
    if time < burn_time:
        return FlightPhase.POWERED_ASCENT
    if velocity >= 0.0:
        return FlightPhase.COAST
    return FlightPhase.DESCENT


# =============================================================================
# Flight State
# =============================================================================


@beartype
@dataclass(frozen=True)
class FlightState:
    """One sample of a trajectory.

    Attributes:
        time: Time since ignition [s]
        altitude: Altitude above the pad [m]
        velocity: Vertical velocity, positive up [m/s]
        acceleration: Net vertical acceleration [m/s^2]
        mass: Current rocket mass [kg]
        thrust: Motor thrust over the step [N]
        drag: Signed drag force over the step, opposing velocity [N]
        mach_number: Mach number at the sample
        stability_margin: Static margin of the design [calibers]
    """
    time: float
    altitude: float
    velocity: float
    acceleration: float
    mass: float
    thrust: float = 0.0
    drag: float = 0.0
    mach_number: float = 0.0
    stability_margin: float = 0.0

    @classmethod
    def at_rest(cls, mass: float, stability_margin: float = 0.0) -> "FlightState":
        """Rocket sitting on the pad at ignition."""
        return cls(
            time=0.0,
            altitude=0.0,
            velocity=0.0,
            acceleration=0.0,
            mass=mass,
            stability_margin=stability_margin,
        )

    @property
    def position(self) -> tuple[float, float, float]:
        """Position (x, y, z) with z up; the flight is purely vertical [m]."""
        return (0.0, 0.0, self.altitude)

    def phase_for(self, burn_time: float) -> FlightPhase:
        """Flight phase of this sample for a motor burn time."""
        return flight_phase(self.time, burn_time, self.velocity, self.altitude)


# =============================================================================
# Numba-Optimized Integration
# =============================================================================


@njit(cache=True, fastmath=True)
def _net_acceleration(thrust: float, drag: float, mass: float, gravity: float) -> float:
    """Net vertical acceleration; forces contribute nothing without mass."""
    if mass <= 0.0:
        return -gravity
    return (thrust + drag) / mass - gravity


@njit(cache=True, fastmath=True)
def _vertical_step_core(
    altitude: float,
    velocity: float,
    acceleration: float,
    dt: float,
    on_pad: bool,
) -> tuple[float, float, float]:
    """Constant-acceleration update with pad reaction and ground clamp."""
    if on_pad and acceleration <= 0.0:
        return altitude, 0.0, 0.0

    new_velocity = velocity + acceleration * dt
    new_altitude = altitude + velocity * dt + 0.5 * acceleration * dt * dt
    if new_altitude < 0.0:
        new_altitude = 0.0

    return new_altitude, new_velocity, acceleration


@njit(cache=True)
def _deplete_mass(
    mass: float,
    time: float,
    burn_time: float,
    propellant_mass: float,
    dry_mass: float,
    dt: float,
) -> float:
    """Linear propellant burn while lit, floored at the dry mass."""
    if burn_time <= 0.0 or time > burn_time:
        return mass
    new_mass = mass - propellant_mass / burn_time * dt
    if new_mass < dry_mass:
        new_mass = min(mass, dry_mass)
    return new_mass


# =============================================================================
# Step
# =============================================================================


@beartype
def step(
    state: FlightState,
    physics: RocketPhysics,
    motor: Motor | None,
    launch: LaunchConditions,
    dt: float,
    atmosphere: Atmosphere | None = None,
    has_left_pad: bool = False,
) -> FlightState:
    """Advance the flight by one time step.

    Until the rocket has left the pad, the pad reaction holds it at rest
    whenever the net force is not upward.

    Args:
        state: Current sample
        physics: Rocket physics (drag coefficient, reference area, dry mass)
        motor: Motor providing thrust, or None for an unpowered rocket
        launch: Pad conditions
        dt: Time step [s]
        atmosphere: Atmosphere to use; built from ``launch`` if None
        has_left_pad: Whether the rocket has already left the ground

    Returns:
        Sample at ``state.time + dt``
    """
    atm = atmosphere if atmosphere is not None else launch.atmosphere()

    thrust = motor.thrust_at(state.time) if motor is not None else 0.0
    drag = drag_force(
        state.velocity,
        atm.density(state.altitude),
        physics.drag_coefficient,
        physics.reference_area,
    )
    gravity = float(gravity_magnitude_at_altitude(float(launch.pad_altitude + state.altitude), G0, R_EARTH))

    acceleration = float(_net_acceleration(float(thrust), float(drag), float(state.mass), gravity))
    on_pad = not has_left_pad and state.altitude <= 0.0
    altitude, velocity, acceleration = _vertical_step_core(
        float(state.altitude), float(state.velocity), acceleration, float(dt), on_pad,
    )

    if motor is not None:
        mass = float(_deplete_mass(
            float(state.mass), float(state.time), float(motor.burn_time),
            float(motor.propellant_mass), float(physics.dry_mass), float(dt),
        ))
    else:
        mass = state.mass

    speed_of_sound = atm.speed_of_sound(float(altitude))
    mach = abs(velocity) / speed_of_sound if speed_of_sound > 0 else 0.0

    return FlightState(
        time=state.time + dt,
        altitude=float(altitude),
        velocity=float(velocity),
        acceleration=float(acceleration),
        mass=mass,
        thrust=thrust,
        drag=drag,
        mach_number=float(mach),
        stability_margin=physics.stability_margin,
    )
