"""Solid motor data and catalogs.

Motors are immutable catalog records describing a commercial hobby motor:
impulse, burn time, masses and a sampled thrust curve. Catalogs are read-only
mappings from designation to record and are passed explicitly to whoever
needs them, so tests and external catalogs can substitute their own tables.

Sources:
- NAR certified motor data sheets (manufacturer published values)

Example:
    >>> from rocketlab.motors import default_catalog
    >>>
    >>> catalog = default_catalog()
    >>> motor = catalog["C6-5"]
    >>> print(f"{motor.designation}: {motor.thrust_at(0.5):.2f} N at 0.5 s")
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

import numpy as np

from rocketlab._typecheck import beartype


class MotorDataError(ValueError):
    """Raised for a motor record whose shape is not a valid motor."""


# =============================================================================
# Motor Record
# =============================================================================


class ThrustSample(NamedTuple):
    """One point of a thrust curve."""
    time: float  # [s]
    thrust: float  # [N]


@beartype
@dataclass(frozen=True)
class Motor:
    """Published data for a solid rocket motor.

    Attributes:
        designation: Catalog key, e.g. "C6-5"
        total_impulse: Total impulse [N*s]
        burn_time: Burn duration [s]
        average_thrust: Average thrust [N]
        max_thrust: Peak thrust [N]
        propellant_mass: Propellant mass [kg]
        total_mass: Loaded motor mass [kg]
        thrust_curve: Samples from ignition (t=0, T=0) to burnout (t=burn_time, T=0)
        ejection_delay: Delay from burnout to ejection charge [s]
    """
    designation: str
    total_impulse: float
    burn_time: float
    average_thrust: float
    max_thrust: float
    propellant_mass: float
    total_mass: float
    thrust_curve: tuple[ThrustSample, ...]
    ejection_delay: float = 0.0

    def __post_init__(self) -> None:
        """Validate the record shape."""
        name = self.designation
        if self.burn_time <= 0:
            raise MotorDataError(f"{name}: burn time must be positive, got {self.burn_time}")
        if self.propellant_mass < 0:
            raise MotorDataError(f"{name}: propellant mass must be non-negative")
        if self.propellant_mass > self.total_mass:
            raise MotorDataError(
                f"{name}: propellant mass {self.propellant_mass} exceeds total mass {self.total_mass}"
            )
        if len(self.thrust_curve) < 2:
            raise MotorDataError(f"{name}: thrust curve must have at least 2 samples")

        times = [s.time for s in self.thrust_curve]
        if times[0] != 0.0:
            raise MotorDataError(f"{name}: thrust curve must start at t=0")
        if any(t1 <= t0 for t0, t1 in zip(times, times[1:])):
            raise MotorDataError(f"{name}: thrust curve times must be strictly increasing")
        if any(s.thrust < 0 for s in self.thrust_curve):
            raise MotorDataError(f"{name}: thrust curve values must be non-negative")

        last = self.thrust_curve[-1]
        if not np.isclose(last.time, self.burn_time) or last.thrust != 0.0:
            raise MotorDataError(
                f"{name}: thrust curve must end at burn time {self.burn_time} s with zero thrust"
            )

    @classmethod
    def from_curve(
        cls,
        designation: str,
        curve: Iterable[tuple[float, float]],
        total_impulse: float,
        average_thrust: float,
        propellant_mass: float,
        total_mass: float,
        ejection_delay: float = 0.0,
        max_thrust: float | None = None,
    ) -> "Motor":
        """Build a motor from plain (time, thrust) pairs.

        Burn time is taken from the last sample and peak thrust from the
        curve unless given explicitly.
        """
        samples = tuple(ThrustSample(float(t), float(f)) for t, f in curve)
        if not samples:
            raise MotorDataError(f"{designation}: thrust curve is empty")
        peak = max(s.thrust for s in samples) if max_thrust is None else max_thrust
        return cls(
            designation=designation,
            total_impulse=total_impulse,
            burn_time=samples[-1].time,
            average_thrust=average_thrust,
            max_thrust=peak,
            propellant_mass=propellant_mass,
            total_mass=total_mass,
            thrust_curve=samples,
            ejection_delay=ejection_delay,
        )

    @property
    def dry_mass(self) -> float:
        """Motor casing mass after burnout [kg]."""
        return self.total_mass - self.propellant_mass

    @property
    def motor_class(self) -> str:
        """Impulse class letter (A, B, C, ...)."""
        return self.designation[:1].upper()

    @property
    def mass_flow_rate(self) -> float:
        """Average propellant consumption rate [kg/s]."""
        return self.propellant_mass / self.burn_time

    def thrust_at(self, time: float) -> float:
        """Thrust at a time since ignition.

        Linearly interpolates between the bracketing curve samples. Returns
        exactly zero before ignition and from burnout onward.

        Args:
            time: Time since ignition [s]

        Returns:
            Thrust [N]
        """
        if time < 0.0 or time >= self.burn_time:
            return 0.0
        times = [s.time for s in self.thrust_curve]
        thrusts = [s.thrust for s in self.thrust_curve]
        return float(np.interp(time, times, thrusts, left=0.0, right=0.0))

    def curve_impulse(self) -> float:
        """Total impulse integrated from the thrust curve [N*s]."""
        times = np.array([s.time for s in self.thrust_curve])
        thrusts = np.array([s.thrust for s in self.thrust_curve])
        return float(np.sum(0.5 * (thrusts[1:] + thrusts[:-1]) * np.diff(times)))


# =============================================================================
# Catalog
# =============================================================================


class MotorCatalog(Mapping[str, Motor]):
    """Read-only lookup table of motors keyed by designation."""

    def __init__(self, motors: Mapping[str, Motor]) -> None:
        for key, motor in motors.items():
            if key != motor.designation:
                raise MotorDataError(f"Catalog key {key!r} does not match {motor.designation!r}")
        self._motors = MappingProxyType(dict(motors))

    @classmethod
    def from_motors(cls, motors: Iterable[Motor]) -> "MotorCatalog":
        """Build a catalog, rejecting duplicate designations."""
        table: dict[str, Motor] = {}
        for motor in motors:
            if motor.designation in table:
                raise MotorDataError(f"Duplicate motor designation: {motor.designation}")
            table[motor.designation] = motor
        return cls(table)

    def __getitem__(self, designation: str) -> Motor:
        return self._motors[designation]

    def __iter__(self) -> Iterator[str]:
        return iter(self._motors)

    def __len__(self) -> int:
        return len(self._motors)

    def __repr__(self) -> str:
        return f"MotorCatalog({list(self._motors)})"


def _motor(
    designation: str,
    total_impulse: float,
    burn_time: float,
    average_thrust: float,
    max_thrust: float,
    propellant_mass: float,
    total_mass: float,
    delay: float,
    curve: list[tuple[float, float]],
) -> Motor:
    return Motor(
        designation=designation,
        total_impulse=total_impulse,
        burn_time=burn_time,
        average_thrust=average_thrust,
        max_thrust=max_thrust,
        propellant_mass=propellant_mass,
        total_mass=total_mass,
        thrust_curve=tuple(ThrustSample(t, f) for t, f in curve),
        ejection_delay=delay,
    )


# NAR certified hobby motors, A through F class
_DEFAULT_MOTORS: tuple[Motor, ...] = (
    _motor("A8-3", 2.5, 0.5, 5.0, 12.15, 0.0018, 0.0087, 3.0, [
        (0.0, 0.0), (0.02, 12.15), (0.1, 8.5), (0.3, 5.2), (0.45, 3.1), (0.5, 0.0),
    ]),
    _motor("A10-3T", 2.5, 0.25, 10.0, 18.6, 0.0016, 0.0083, 3.0, [
        (0.0, 0.0), (0.01, 18.6), (0.05, 15.2), (0.15, 8.4), (0.22, 4.2), (0.25, 0.0),
    ]),
    _motor("B6-4", 5.0, 0.8, 6.25, 12.8, 0.0032, 0.0117, 4.0, [
        (0.0, 0.0), (0.02, 12.8), (0.1, 10.1), (0.4, 6.8), (0.7, 4.2), (0.8, 0.0),
    ]),
    _motor("B4-2", 5.0, 1.2, 4.17, 8.4, 0.0035, 0.0121, 2.0, [
        (0.0, 0.0), (0.03, 8.4), (0.2, 6.2), (0.8, 3.8), (1.1, 2.1), (1.2, 0.0),
    ]),
    _motor("C6-5", 10.0, 1.6, 6.25, 14.2, 0.0065, 0.0186, 5.0, [
        (0.0, 0.0), (0.04, 14.2), (0.2, 11.8), (0.8, 7.2), (1.4, 3.8), (1.6, 0.0),
    ]),
    _motor("C11-3", 10.0, 0.9, 11.1, 24.5, 0.0058, 0.0179, 3.0, [
        (0.0, 0.0), (0.02, 24.5), (0.1, 18.2), (0.5, 10.8), (0.8, 5.4), (0.9, 0.0),
    ]),
    _motor("D12-5", 20.0, 1.7, 11.8, 25.8, 0.0127, 0.0378, 5.0, [
        (0.0, 0.0), (0.05, 25.8), (0.3, 20.4), (0.9, 12.6), (1.5, 6.8), (1.7, 0.0),
    ]),
    _motor("D15-4", 20.0, 1.3, 15.4, 32.1, 0.0118, 0.0369, 4.0, [
        (0.0, 0.0), (0.03, 32.1), (0.2, 26.8), (0.7, 15.2), (1.1, 8.4), (1.3, 0.0),
    ]),
    _motor("E9-6", 40.0, 4.5, 8.9, 18.6, 0.0254, 0.0756, 6.0, [
        (0.0, 0.0), (0.1, 18.6), (0.8, 15.2), (2.5, 9.8), (4.0, 4.2), (4.5, 0.0),
    ]),
    _motor("E12-4", 40.0, 3.2, 12.5, 28.4, 0.0241, 0.0743, 4.0, [
        (0.0, 0.0), (0.08, 28.4), (0.5, 22.1), (1.8, 12.8), (2.8, 6.4), (3.2, 0.0),
    ]),
    _motor("F15-4", 80.0, 5.3, 15.1, 32.8, 0.0485, 0.1458, 4.0, [
        (0.0, 0.0), (0.12, 32.8), (0.8, 28.4), (3.0, 15.8), (4.8, 7.2), (5.3, 0.0),
    ]),
)


def default_catalog() -> MotorCatalog:
    """Get the built-in catalog of certified hobby motors."""
    return MotorCatalog.from_motors(_DEFAULT_MOTORS)
