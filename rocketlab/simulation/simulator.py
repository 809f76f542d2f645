"""Full-flight simulation driver.

Runs the vertical integrator from ignition on the pad to touchdown and
returns the trajectory as an immutable tuple of samples.

Termination:
    - Touchdown: altitude returns to 0 after the rocket has left the pad.
      The ground absorbs the impact, so the impact sample is followed by a
      final sample at rest (altitude 0, velocity 0).
    - Rest: the rocket is still on the pad and no thrust remains (no motor,
      or the motor burned out without lifting it).
    - Time limit: ``ceil(max_time / time_step)`` steps at most. A run cut
      off this way ends wherever the rocket happens to be.

Example:
    >>> from rocketlab.simulation import run_full_simulation
    >>> from rocketlab.vehicle import compute_rocket_physics
    >>>
    >>> physics = compute_rocket_physics(components, motor)
    >>> samples = run_full_simulation(physics, motor)
    >>> print(f"Apogee: {max(s.altitude for s in samples):.1f} m")
"""

import logging
import math
from dataclasses import dataclass, field, replace

import numpy as np
import polars as pl
from numpy.typing import NDArray

from rocketlab._typecheck import beartype
from rocketlab.environment.launch import LaunchConditions
from rocketlab.motors import Motor
from rocketlab.simulation.integrator import FlightPhase, FlightState, step
from rocketlab.vehicle.physics import RocketPhysics

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        max_time: Simulation horizon [s]
        time_step: Fixed integration step [s]
        landing_speed: Largest final speed counted as a clean landing [m/s]
    """
    max_time: float = 60.0
    time_step: float = 0.01
    landing_speed: float = 1.0

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.max_time < 0:
            raise ValueError(f"max_time must be non-negative, got {self.max_time}")

    @property
    def max_steps(self) -> int:
        """Upper bound on integration steps."""
        return math.ceil(self.max_time / self.time_step)


# =============================================================================
# Driver
# =============================================================================


@beartype
def run_full_simulation(
    physics: RocketPhysics,
    motor: Motor | None,
    launch: LaunchConditions | None = None,
    max_time: float = 60.0,
    time_step: float = 0.01,
) -> tuple[FlightState, ...]:
    """Simulate a flight from ignition to touchdown.

    Args:
        physics: Rocket physics for the design and motor
        motor: Motor to fly, or None for an unpowered rocket
        launch: Pad conditions (defaults to standard conditions at sea level)
        max_time: Simulation horizon [s]
        time_step: Fixed integration step [s]

    Returns:
        Samples starting at t=0 on the pad, in time order
    """
    config = SimConfig(max_time=max_time, time_step=time_step)
    launch = launch if launch is not None else LaunchConditions()
    atmosphere = launch.atmosphere()
    burn_time = motor.burn_time if motor is not None else 0.0

    logger.debug(
        "Simulating %s: mass=%.4f kg, Cd=%.3f, A=%.6f m^2, dt=%g s, max_time=%g s",
        motor.designation if motor is not None else "unpowered rocket",
        physics.total_mass, physics.drag_coefficient, physics.reference_area,
        time_step, max_time,
    )

    state = FlightState.at_rest(mass=physics.total_mass, stability_margin=physics.stability_margin)
    samples = [state]
    left_pad = False
    touched_down = False

    for _ in range(config.max_steps):
        if not left_pad and state.altitude <= 0.0 and state.time >= burn_time:
            break

        state = step(
            state, physics, motor, launch, time_step,
            atmosphere=atmosphere, has_left_pad=left_pad,
        )
        samples.append(state)

        if state.altitude > 0.0:
            left_pad = True
        elif left_pad:
            samples.append(replace(state, altitude=0.0, velocity=0.0, acceleration=0.0, mach_number=0.0))
            touched_down = True
            break

    apogee = max(s.altitude for s in samples)
    if touched_down:
        logger.info("Flight complete: apogee %.1f m, touchdown at %.2f s", apogee, samples[-1].time)
    elif left_pad:
        logger.info("Flight cut off at %.2f s: apogee %.1f m, still airborne", samples[-1].time, apogee)
    else:
        logger.info("Rocket never left the pad (%d samples)", len(samples))

    return tuple(samples)


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass(frozen=True)
class FlightSummary:
    """Headline figures of a flight.

    Attributes:
        max_altitude: Apogee [m]
        apogee_time: Time of apogee [s]
        max_velocity: Largest speed [m/s]
        max_acceleration: Largest acceleration magnitude [m/s^2]
        max_mach: Largest Mach number
        burnout_time: Motor burn time [s]
        flight_time: Time of the last sample [s]
        landing_velocity: Velocity at ground impact [m/s]
        landed: Whether the run ended at rest on the ground after leaving it
    """
    max_altitude: float
    apogee_time: float
    max_velocity: float
    max_acceleration: float
    max_mach: float
    burnout_time: float
    flight_time: float
    landing_velocity: float
    landed: bool


@beartype
@dataclass(frozen=True)
class SimulationResult:
    """Results from a completed simulation.

    Provides convenient access to trajectory data and analysis.
    """
    states: tuple[FlightState, ...]
    burn_time: float = 0.0
    landing_speed: float = 1.0

    def __len__(self) -> int:
        return len(self.states)

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.time for s in self.states])

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.altitude for s in self.states])

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s]."""
        return np.array([s.velocity for s in self.states])

    @property
    def acceleration(self) -> NDArray[np.float64]:
        """Acceleration history [m/s^2]."""
        return np.array([s.acceleration for s in self.states])

    @property
    def mass(self) -> NDArray[np.float64]:
        """Mass history [kg]."""
        return np.array([s.mass for s in self.states])

    @property
    def thrust(self) -> NDArray[np.float64]:
        """Thrust history [N]."""
        return np.array([s.thrust for s in self.states])

    @property
    def drag(self) -> NDArray[np.float64]:
        """Drag history [N]."""
        return np.array([s.drag for s in self.states])

    @property
    def mach(self) -> NDArray[np.float64]:
        """Mach number history."""
        return np.array([s.mach_number for s in self.states])

    @property
    def phases(self) -> list[FlightPhase]:
        """Flight phase of every sample."""
        return [s.phase_for(self.burn_time) for s in self.states]

    @property
    def landed(self) -> bool:
        """Whether the flight ended at rest on the ground after leaving it."""
        last = self.states[-1]
        return (
            len(self.states) > 1
            and bool(np.any(self.altitude > 0.0))
            and last.altitude <= 0.0
            and abs(last.velocity) < self.landing_speed
        )

    def summary(self) -> FlightSummary:
        """Compute headline figures of the flight."""
        altitude = self.altitude
        apogee_idx = int(np.argmax(altitude))
        landed = self.landed
        # The impact sample precedes the final at-rest sample
        impact = self.states[-2] if landed else self.states[-1]

        return FlightSummary(
            max_altitude=float(altitude[apogee_idx]),
            apogee_time=float(self.time[apogee_idx]),
            max_velocity=float(np.max(np.abs(self.velocity))),
            max_acceleration=float(np.max(np.abs(self.acceleration))),
            max_mach=float(np.max(self.mach)),
            burnout_time=self.burn_time,
            flight_time=float(self.states[-1].time),
            landing_velocity=impact.velocity,
            landed=landed,
        )

    def to_dataframe(self) -> pl.DataFrame:
        """Convert to Polars DataFrame."""
        return pl.DataFrame({
            "time": self.time,
            "altitude": self.altitude,
            "velocity": self.velocity,
            "acceleration": self.acceleration,
            "mass": self.mass,
            "thrust": self.thrust,
            "drag": self.drag,
            "mach": self.mach,
            "phase": [p.value for p in self.phases],
        })


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class Simulator:
    """Simulation driver bound to a rocket, motor and launch site.

    Example:
        >>> sim = Simulator(physics, motor, config=SimConfig(time_step=0.005))
        >>> result = sim.run()
        >>> print(result.summary().max_altitude)
    """
    physics: RocketPhysics
    motor: Motor | None = None
    launch: LaunchConditions = field(default_factory=LaunchConditions)
    config: SimConfig = field(default_factory=SimConfig)

    def run(self) -> SimulationResult:
        """Run the flight to completion."""
        samples = run_full_simulation(
            self.physics,
            self.motor,
            self.launch,
            max_time=self.config.max_time,
            time_step=self.config.time_step,
        )
        return SimulationResult(
            states=samples,
            burn_time=self.motor.burn_time if self.motor is not None else 0.0,
            landing_speed=self.config.landing_speed,
        )
