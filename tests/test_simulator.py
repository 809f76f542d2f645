"""Tests for the full-flight simulation driver.

Checks trajectory shape, termination and mass bookkeeping for the reference
rocket on a C6-5.
"""

import math

import numpy as np
import polars as pl
import pytest
from numpy.testing import assert_allclose

from rocketlab.components import Component
from rocketlab.environment import LaunchConditions
from rocketlab.simulation import (
    FlightPhase,
    SimConfig,
    SimulationResult,
    Simulator,
    run_full_simulation,
)
from rocketlab.vehicle import compute_rocket_physics

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def samples(physics, motor):
    return run_full_simulation(physics, motor)


@pytest.fixture
def result(physics, motor) -> SimulationResult:
    return Simulator(physics, motor).run()


# =============================================================================
# Trajectory Shape Tests
# =============================================================================


class TestTrajectory:
    """Test the reference flight."""

    def test_starts_at_rest_on_pad(self, samples, physics):
        """Test the first sample is at rest on the pad."""
        first = samples[0]
        assert first.time == 0.0
        assert first.altitude == 0.0
        assert first.velocity == 0.0
        assert first.mass == physics.total_mass

    def test_returns_immutable_sequence(self, samples):
        """Test the samples are returned as a tuple."""
        assert isinstance(samples, tuple)

    def test_rises_during_burn(self, samples, motor):
        """Test altitude rises while the motor burns."""
        burning = [s.altitude for s in samples if s.time <= motor.burn_time]
        assert all(b >= a for a, b in zip(burning, burning[1:]))
        assert burning[-1] > 0.0

    def test_apogee_after_burnout(self, samples, motor):
        """Test apogee comes after burnout."""
        apogee = max(samples, key=lambda s: s.altitude)
        assert apogee.time > motor.burn_time
        assert apogee.altitude > 10.0

    def test_lands_within_horizon(self, samples):
        """Test the reference flight lands before the time limit."""
        assert samples[-1].time < 60.0
        assert samples[-1].altitude == 0.0

    def test_ends_at_rest(self, samples):
        """Test the run ends at rest on the ground."""
        last = samples[-1]
        assert last.altitude == 0.0
        assert abs(last.velocity) < 1.0

    def test_impact_precedes_final_sample(self, samples):
        """Test the impact sample precedes the rest sample."""
        impact, final = samples[-2], samples[-1]
        assert impact.altitude == 0.0
        assert impact.velocity < 0.0
        assert final.time == impact.time

    def test_time_is_ordered(self, samples):
        """Test samples are evenly spaced in time."""
        times = np.array([s.time for s in samples])
        assert np.all(np.diff(times) >= 0.0)
        assert_allclose(np.diff(times)[:-1], 0.01, rtol=1e-6)

    def test_deterministic(self, physics, motor):
        """Test identical inputs give identical flights."""
        assert run_full_simulation(physics, motor) == run_full_simulation(physics, motor)

    def test_phases_in_order(self, result):
        """Test flight phases progress in order."""
        order = {
            FlightPhase.POWERED_ASCENT: 0,
            FlightPhase.COAST: 1,
            FlightPhase.DESCENT: 2,
            FlightPhase.LANDED: 3,
        }
        ranks = [order[p] for p in result.phases]
        assert all(b >= a for a, b in zip(ranks, ranks[1:]))
        assert set(result.phases) == set(FlightPhase)

    def test_higher_site_flies_higher(self, physics, motor):
        """Test thinner air at a high site gives a higher apogee."""
        low = run_full_simulation(physics, motor)
        high = run_full_simulation(physics, motor, LaunchConditions(pad_altitude=1500.0))
        assert max(s.altitude for s in high) > max(s.altitude for s in low)


# =============================================================================
# Mass Bookkeeping Tests
# =============================================================================


class TestMass:
    """Test propellant depletion over a run."""

    def test_monotone_non_increasing(self, samples):
        """Test mass never increases."""
        masses = [s.mass for s in samples]
        assert all(b <= a for a, b in zip(masses, masses[1:]))

    def test_constant_after_burnout(self, samples, motor):
        """Test mass is constant after burnout."""
        after = {s.mass for s in samples if s.time > motor.burn_time + 0.01}
        assert len(after) == 1

    def test_never_below_dry_mass(self, samples, physics):
        """Test mass stays above dry mass."""
        assert min(s.mass for s in samples) >= physics.dry_mass

    def test_burns_all_propellant(self, samples, physics):
        """Test the flight ends at dry mass."""
        assert samples[-1].mass == pytest.approx(physics.dry_mass)


# =============================================================================
# Termination Tests
# =============================================================================


class TestTermination:
    """Test the ways a run can end."""

    def test_no_motor_single_sample(self, components):
        """Test a motorless rocket yields a single sample."""
        physics = compute_rocket_physics(components)
        samples = run_full_simulation(physics, None)
        assert len(samples) == 1
        assert samples[0].altitude == 0.0

    def test_motor_too_weak_never_leaves_pad(self, components, motor):
        """Test an underpowered rocket stays on the pad."""
        heavy = [c.with_changes(mass=c.mass * 10.0) for c in components]
        physics = compute_rocket_physics(heavy, motor)
        samples = run_full_simulation(physics, motor)
        assert all(s.altitude == 0.0 for s in samples)
        assert samples[-1].time >= motor.burn_time
        assert samples[-1].velocity == 0.0

    def test_time_limit_bounds_steps(self, physics, motor):
        """Test the time limit bounds the number of steps."""
        samples = run_full_simulation(physics, motor, max_time=1.0)
        assert len(samples) <= math.ceil(1.0 / 0.01) + 1
        assert samples[-1].altitude > 0.0

    def test_invalid_time_step(self, physics, motor):
        """Test a zero time step is rejected."""
        with pytest.raises(ValueError, match="time_step"):
            run_full_simulation(physics, motor, time_step=0.0)


# =============================================================================
# Result Tests
# =============================================================================


class TestSimulationResult:
    """Test result arrays, summary and table export."""

    def test_arrays(self, result):
        """Test array views have one entry per sample."""
        n = len(result)
        for name in ("time", "altitude", "velocity", "acceleration", "mass", "thrust", "drag", "mach"):
            assert getattr(result, name).shape == (n,)

    def test_summary(self, result, motor):
        """Test the flight summary statistics."""
        summary = result.summary()
        assert summary.max_altitude == pytest.approx(float(np.max(result.altitude)))
        assert summary.apogee_time > motor.burn_time
        assert summary.burnout_time == motor.burn_time
        assert summary.landed
        assert summary.landing_velocity < -1.0
        assert summary.flight_time == result.states[-1].time
        assert summary.max_velocity >= abs(summary.landing_velocity)
        assert 0.0 < summary.max_mach < 0.3

    def test_cut_off_flight_not_landed(self, physics, motor):
        """Test a run cut off in the air is not landed."""
        result = Simulator(physics, motor, config=SimConfig(max_time=1.0)).run()
        assert not result.landed
        assert not result.summary().landed

    def test_to_dataframe(self, result):
        """Test DataFrame export with phase labels."""
        df = result.to_dataframe()
        assert isinstance(df, pl.DataFrame)
        assert df.height == len(result)
        assert df.columns == [
            "time", "altitude", "velocity", "acceleration", "mass", "thrust", "drag", "mach", "phase",
        ]
        assert df["phase"][0] == "powered_ascent"
        assert df["phase"][-1] == "landed"

    def test_config_defaults(self):
        """Test default simulation config."""
        config = SimConfig()
        assert config.max_time == 60.0
        assert config.time_step == 0.01
        assert config.max_steps == 6000


# =============================================================================
# Integer Input Tests
# =============================================================================


class TestIntegerInputs:
    """Test that whole-number literals are accepted wherever floats are."""

    @pytest.fixture
    def integer_components(self):
        return [
            Component(id="nose", type="nosecone", axial_position=0, width=40, length=60,
                      mass=0.05, drag_coefficient=0.15),
            Component(id="body", type="bodytube", axial_position=60, width=40, length=300,
                      mass=0.15, drag_coefficient=0.45),
            Component(id="fins", type="fins", axial_position=360, width=60, length=40,
                      mass=0.08, drag_coefficient=0.02, fin_count=4),
            Component(id="chute", type="parachute", axial_position=20, width=30, length=25,
                      mass=0.04, drag_coefficient=1.3),
        ]

    def test_integer_geometry_matches_float_geometry(self, integer_components, physics, motor):
        """Test whole-number geometry gives the same physics."""
        result = compute_rocket_physics(integer_components, motor)
        assert result.center_of_gravity == pytest.approx(physics.center_of_gravity)
        assert result.center_of_pressure == pytest.approx(physics.center_of_pressure)
        assert result.stability_margin == pytest.approx(physics.stability_margin)

    def test_integer_time_limit(self, physics, motor):
        """Test a whole-number time limit."""
        samples = run_full_simulation(physics, motor, max_time=60)
        assert samples == run_full_simulation(physics, motor, max_time=60.0)
        assert samples[-1].altitude == 0.0

    def test_integer_scenario_flies(self, integer_components, motor):
        """Test the reference rocket written with whole numbers flies."""
        physics = compute_rocket_physics(integer_components, motor)
        result = Simulator(physics, motor, LaunchConditions(pad_altitude=0, ground_temperature=15),
                           SimConfig(max_time=60, time_step=1 / 100)).run()
        assert result.landed
        assert result.summary().max_altitude > 10.0
