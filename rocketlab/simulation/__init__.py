"""Flight simulation for model rockets.

Provides the vertical flight integrator and the driver that runs it from
ignition to touchdown.

Example:
    >>> from rocketlab.simulation import Simulator, SimConfig
    >>>
    >>> sim = Simulator(physics, motor, config=SimConfig(max_time=30.0))
    >>> result = sim.run()
    >>> summary = result.summary()
    >>> print(f"Apogee {summary.max_altitude:.1f} m at {summary.apogee_time:.2f} s")
"""

from rocketlab.simulation.integrator import (
    FlightPhase,
    FlightState,
    flight_phase,
    step,
)
from rocketlab.simulation.simulator import (
    FlightSummary,
    SimConfig,
    SimulationResult,
    Simulator,
    run_full_simulation,
)

__all__ = [
    # Integrator
    "FlightPhase",
    "FlightState",
    "flight_phase",
    "step",
    # Driver
    "FlightSummary",
    "SimConfig",
    "SimulationResult",
    "Simulator",
    "run_full_simulation",
]
