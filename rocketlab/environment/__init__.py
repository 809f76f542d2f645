"""Environment models for model-rocket flight simulation.

Provides the launch site atmosphere, gravity, and launch conditions.

Example:
    >>> from rocketlab.environment import Atmosphere, LaunchConditions, gravity_at_altitude
    >>>
    >>> launch = LaunchConditions(ground_temperature=25.0)
    >>> atm = launch.atmosphere()
    >>> rho = atm.density(altitude=150.0)  # kg/m^3
    >>> g = gravity_at_altitude(150.0)  # m/s^2
"""

from rocketlab.environment.atmosphere import (
    Atmosphere,
    AtmosphereResult,
    air_density,
    pressure_at_elevation,
    speed_of_sound,
)
from rocketlab.environment.gravity import (
    R_EARTH,
    gravity_at_altitude,
)
from rocketlab.environment.launch import LaunchConditions

__all__ = [
    "Atmosphere",
    "AtmosphereResult",
    "air_density",
    "speed_of_sound",
    "pressure_at_elevation",
    "R_EARTH",
    "gravity_at_altitude",
    "LaunchConditions",
]
