"""Launch site conditions for a simulation run."""

from dataclasses import dataclass

from rocketlab._typecheck import beartype
from rocketlab.environment.atmosphere import Atmosphere, pressure_at_elevation

# Ranges offered by the launch setup surface
WIND_SPEED_RANGE = (0.0, 20.0)  # [m/s]
LAUNCH_ANGLE_RANGE = (45.0, 90.0)  # [deg from horizontal]


@beartype
@dataclass(frozen=True)
class LaunchConditions:
    """Conditions at the pad, fixed for the duration of a run.

    The flight model is vertical and one-dimensional: wind, launch angle,
    azimuth and rail length are carried for the caller's records and range
    checks but do not enter the integration.

    Attributes:
        pad_altitude: Site elevation above sea level [m]
        ground_temperature: Air temperature at the pad [deg C]
        ground_pressure: Station pressure [Pa]; derived from pad_altitude if None
        humidity: Relative humidity (0-1)
        wind_speed: Ground wind speed [m/s]
        wind_direction: Direction the wind blows from [deg]
        launch_angle: Rail angle from horizontal [deg]
        launch_azimuth: Rail heading [deg]
        guide_rail_length: Launch rail length [m]
    """
    pad_altitude: float = 0.0
    ground_temperature: float = 20.0
    ground_pressure: float | None = None
    humidity: float = 0.5
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    launch_angle: float = 90.0
    launch_azimuth: float = 0.0
    guide_rail_length: float = 1.0

    @property
    def station_pressure(self) -> float:
        """Pressure at the pad [Pa]."""
        if self.ground_pressure is not None:
            return self.ground_pressure
        return pressure_at_elevation(self.pad_altitude)

    def atmosphere(self) -> Atmosphere:
        """Atmosphere model anchored at these ground conditions."""
        return Atmosphere(
            ground_temperature_c=self.ground_temperature,
            ground_pressure=self.station_pressure,
        )

    def check_ranges(self) -> list[str]:
        """Describe values outside the launch setup ranges.

        The core never rejects these; the notes are for the caller to show.
        """
        notes = []
        low, high = WIND_SPEED_RANGE
        if not low <= self.wind_speed <= high:
            notes.append(f"Wind speed {self.wind_speed:.1f} m/s outside {low:.0f}-{high:.0f} m/s")
        low, high = LAUNCH_ANGLE_RANGE
        if not low <= self.launch_angle <= high:
            notes.append(f"Launch angle {self.launch_angle:.0f} deg outside {low:.0f}-{high:.0f} deg")
        return notes
