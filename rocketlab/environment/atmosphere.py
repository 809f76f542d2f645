"""Tropospheric atmosphere model anchored at the launch site.

Temperature falls linearly with altitude above the pad from the measured
ground temperature, pressure follows the barometric power law for that
lapse rate, and density comes from the ideal gas law.

    T(h)   = T_ground - L * h
    p(h)   = p_ground * (T(h) / T_ground) ** (g0 / (R * L))
    rho(h) = p(h) / (R * T(h))
    a(h)   = sqrt(gamma * R * T(h))

The model is only meaningful in the troposphere (h well below 11 km). Inputs
outside that range are not guarded; the compiled kernels evaluate the
formulas as written and return nan rather than raising.

Example:
    >>> from rocketlab.environment import Atmosphere
    >>>
    >>> atm = Atmosphere(ground_temperature_c=20.0)
    >>> result = atm.at_altitude(300.0, velocity=80.0)
    >>> print(f"Density: {result.density:.4f} kg/m^3")
    >>> print(f"Mach: {result.mach_number:.3f}")
"""

from dataclasses import dataclass

import numpy as np
from numba import njit
from numpy.typing import NDArray

from rocketlab._typecheck import beartype

# =============================================================================
# Constants
# =============================================================================

# Sea level conditions
T0 = 288.15  # Standard temperature [K]
P0 = 101325.0  # Standard pressure [Pa]

# Physical constants
R_AIR = 287.0  # Specific gas constant for dry air [J/(kg·K)]
GAMMA_AIR = 1.4  # Ratio of specific heats for air
G0 = 9.81  # Surface gravity [m/s^2]
LAPSE_RATE = 0.0065  # Tropospheric temperature lapse rate [K/m]
KELVIN_OFFSET = 273.15

# Barometric exponent g0 / (R * L), ~5.257
BAROMETRIC_EXPONENT = G0 / (R_AIR * LAPSE_RATE)

TROPOPAUSE_ALTITUDE = 11000.0  # Upper validity limit [m]


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True)
def _local_temperature(altitude: float, ground_temperature_k: float) -> float:
    """Temperature at altitude above the pad [K]."""
    return ground_temperature_k - LAPSE_RATE * altitude


@njit(cache=True)
def _local_pressure(altitude: float, ground_temperature_k: float, ground_pressure: float) -> float:
    """Barometric pressure at altitude above the pad [Pa]."""
    ratio = (ground_temperature_k - LAPSE_RATE * altitude) / ground_temperature_k
    return ground_pressure * ratio ** BAROMETRIC_EXPONENT


@njit(cache=True)
def _local_density(altitude: float, ground_temperature_k: float, ground_pressure: float) -> float:
    """Ideal-gas density at altitude above the pad [kg/m^3]."""
    T = ground_temperature_k - LAPSE_RATE * altitude
    ratio = T / ground_temperature_k
    p = ground_pressure * ratio ** BAROMETRIC_EXPONENT
    return p / (R_AIR * T)


@njit(cache=True)
def _local_speed_of_sound(altitude: float, ground_temperature_k: float) -> float:
    """Speed of sound at altitude above the pad [m/s]."""
    return np.sqrt(GAMMA_AIR * R_AIR * (ground_temperature_k - LAPSE_RATE * altitude))


# =============================================================================
# Result Classes
# =============================================================================


@beartype
@dataclass(frozen=True)
class AtmosphereResult:
    """Atmospheric conditions at a given altitude.

    Attributes:
        altitude: Altitude above the launch pad [m]
        temperature: Static temperature [K]
        pressure: Static pressure [Pa]
        density: Air density [kg/m^3]
        speed_of_sound: Speed of sound [m/s]
        mach_number: Mach number if velocity provided
    """
    altitude: float
    temperature: float
    pressure: float
    density: float
    speed_of_sound: float
    mach_number: float | None = None

    @property
    def is_tropospheric(self) -> bool:
        """Check whether the altitude is inside the model's valid range."""
        return 0.0 <= self.altitude < TROPOPAUSE_ALTITUDE


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
class Atmosphere:
    """Lapse-rate atmosphere anchored at measured ground conditions.

    Example:
        >>> atm = Atmosphere(ground_temperature_c=30.0, ground_pressure=95000.0)
        >>> rho = atm.density(500.0)
        >>> a = atm.speed_of_sound(500.0)
    """

    def __init__(
        self,
        ground_temperature_c: float = 20.0,
        ground_pressure: float = P0,
    ) -> None:
        """Initialize atmosphere model.

        Args:
            ground_temperature_c: Temperature at the pad [deg C]
            ground_pressure: Station pressure at the pad [Pa]
        """
        self.ground_temperature_c = ground_temperature_c
        self.ground_pressure = ground_pressure
        self._ground_temperature_k = ground_temperature_c + KELVIN_OFFSET

    def __repr__(self) -> str:
        return (
            f"Atmosphere(ground_temperature_c={self.ground_temperature_c}, "
            f"ground_pressure={self.ground_pressure})"
        )

    @beartype
    def temperature(self, altitude: float) -> float:
        """Get temperature at altitude.

        Args:
            altitude: Altitude above the pad [m]

        Returns:
            Temperature [K]
        """
        return float(_local_temperature(altitude, self._ground_temperature_k))

    @beartype
    def pressure(self, altitude: float) -> float:
        """Get pressure at altitude.

        Args:
            altitude: Altitude above the pad [m]

        Returns:
            Pressure [Pa]
        """
        return float(_local_pressure(altitude, self._ground_temperature_k, self.ground_pressure))

    @beartype
    def density(self, altitude: float) -> float:
        """Get density at altitude.

        Args:
            altitude: Altitude above the pad [m]

        Returns:
            Density [kg/m^3]
        """
        return float(_local_density(altitude, self._ground_temperature_k, self.ground_pressure))

    @beartype
    def speed_of_sound(self, altitude: float) -> float:
        """Get speed of sound at altitude.

        Args:
            altitude: Altitude above the pad [m]

        Returns:
            Speed of sound [m/s]
        """
        return float(_local_speed_of_sound(altitude, self._ground_temperature_k))

    @beartype
    def at_altitude(
        self,
        altitude: float,
        velocity: float | None = None,
    ) -> AtmosphereResult:
        """Get all atmospheric properties at altitude.

        Args:
            altitude: Altitude above the pad [m]
            velocity: Optional velocity for Mach number calculation [m/s]

        Returns:
            AtmosphereResult with all properties
        """
        a = self.speed_of_sound(altitude)
        mach = abs(velocity) / a if velocity is not None and a > 0 else None

        return AtmosphereResult(
            altitude=altitude,
            temperature=self.temperature(altitude),
            pressure=self.pressure(altitude),
            density=self.density(altitude),
            speed_of_sound=a,
            mach_number=mach,
        )

    @beartype
    def dynamic_pressure(self, altitude: float, velocity: float) -> float:
        """Get dynamic pressure (q = 0.5 * rho * v^2) [Pa]."""
        return 0.5 * self.density(altitude) * velocity ** 2

    @beartype
    def profile(
        self,
        altitudes: NDArray[np.float64] | list[float],
    ) -> dict[str, NDArray[np.float64]]:
        """Get atmospheric properties over a range of altitudes.

        Args:
            altitudes: Array of altitudes above the pad [m]

        Returns:
            Dictionary with arrays of temperature, pressure, density, speed_of_sound
        """
        altitudes = np.asarray(altitudes, dtype=np.float64)

        return {
            "altitude": altitudes,
            "temperature": np.array([self.temperature(float(h)) for h in altitudes]),
            "pressure": np.array([self.pressure(float(h)) for h in altitudes]),
            "density": np.array([self.density(float(h)) for h in altitudes]),
            "speed_of_sound": np.array([self.speed_of_sound(float(h)) for h in altitudes]),
        }


# =============================================================================
# Convenience Functions
# =============================================================================


@beartype
def air_density(
    altitude: float,
    ground_temperature_c: float,
    ground_pressure: float = P0,
) -> float:
    """Air density at altitude above ground [kg/m^3]."""
    return float(_local_density(altitude, ground_temperature_c + KELVIN_OFFSET, ground_pressure))


@beartype
def speed_of_sound(altitude: float, ground_temperature_c: float) -> float:
    """Speed of sound at altitude above ground [m/s]."""
    return float(_local_speed_of_sound(altitude, ground_temperature_c + KELVIN_OFFSET))


@beartype
def pressure_at_elevation(elevation: float) -> float:
    """Standard-atmosphere station pressure at a site elevation [Pa]."""
    return float(_local_pressure(elevation, T0, P0))
