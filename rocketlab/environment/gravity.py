"""Gravity model for model-rocket flight simulation.

Point-mass Earth with inverse-square falloff from the mean radius. At the
altitudes a hobby rocket reaches the correction is tiny, but it is nonzero
and keeps the integrator honest for higher-impulse motors.

    g(h) = g0 * (R / (R + h))^2

Example:
    >>> from rocketlab.environment import gravity_at_altitude
    >>>
    >>> g = gravity_at_altitude(500.0)  # m/s^2
"""

from numba import njit

from rocketlab._typecheck import beartype

# =============================================================================
# Constants
# =============================================================================

R_EARTH: float = 6371000.0  # Mean Earth radius [m]
G0: float = 9.81  # Surface gravity [m/s^2]


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def gravity_magnitude_at_altitude(altitude: float, g0: float = G0, r_earth: float = R_EARTH) -> float:
    """Get gravity magnitude at altitude above surface."""
    ratio = r_earth / (r_earth + altitude)
    return g0 * ratio * ratio


# =============================================================================
# Convenience Functions
# =============================================================================


@beartype
def gravity_at_altitude(altitude: float) -> float:
    """Get gravity magnitude at altitude above Earth's surface.

    Args:
        altitude: Altitude above the surface [m]

    Returns:
        Gravity magnitude [m/s^2]
    """
    return float(gravity_magnitude_at_altitude(altitude, G0, R_EARTH))
