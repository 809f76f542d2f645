"""Tests for the stability evaluator."""

import pytest
from numpy.testing import assert_allclose

from rocketlab.components import Component, ComponentType
from rocketlab.stability import (
    AdvisorySeverity,
    StabilityClass,
    calculate_stability_metrics,
    classify_margin,
    dynamic_stability,
    fin_effectiveness,
    overall_rating,
    recovery_stability,
)

# =============================================================================
# Score Tests
# =============================================================================


class TestClassification:
    """Test margin bands."""

    @pytest.mark.parametrize(
        "margin, expected",
        [
            (-1.0, StabilityClass.UNSTABLE),
            (0.999, StabilityClass.UNSTABLE),
            (1.0, StabilityClass.STABLE),
            (2.0, StabilityClass.STABLE),
            (3.0, StabilityClass.STABLE),
            (3.001, StabilityClass.OVERSTABLE),
        ],
    )
    def test_bands(self, margin, expected):
        """Test margin classification bands."""
        assert classify_margin(margin) is expected


class TestScores:
    """Test the individual scores."""

    def test_fin_effectiveness(self, components):
        """Test fin effectiveness from count and span."""
        # 4 fins, 60 mm span on a 400 mm rocket
        assert fin_effectiveness(components) == pytest.approx(80.0 + 50.0 * 60.0 / 400.0)

    def test_fin_effectiveness_saturates(self, components, fins):
        """Test fin effectiveness caps at 100."""
        many = [c if c.id != "fins" else fins.with_changes(fin_count=6) for c in components]
        assert fin_effectiveness(many) == 100.0

    def test_fin_effectiveness_without_fins(self, nose, body):
        """Test fin effectiveness without fins."""
        assert fin_effectiveness([nose, body]) == 0.0

    def test_dynamic_stability_clamped(self):
        """Test dynamic stability stays within 0-100."""
        assert dynamic_stability(2.0, 50.0) == pytest.approx(55.0)
        assert dynamic_stability(-10.0, 0.0) == 0.0
        assert dynamic_stability(10.0, 100.0) == 100.0

    def test_recovery_stability(self, components, nose):
        """Test recovery stability with and without a parachute."""
        assert recovery_stability(components) == 90.0
        assert recovery_stability([nose]) == 20.0

    @pytest.mark.parametrize(
        "margin, fin_score, recovery, expected",
        [
            (1.0, 0.0, False, 30.0),
            (2.0, 20.0, False, 70.0),
            (2.0, 50.0, True, 100.0),
            (0.5, 80.0, True, 12.5),
            (3.4, 80.0, True, 15.0),
            (5.0, 80.0, True, 0.0),
            (-2.0, 80.0, True, 0.0),
        ],
    )
    def test_overall_rating(self, margin, fin_score, recovery, expected):
        """Test overall rating inside and outside the stable band."""
        assert overall_rating(margin, fin_score, recovery) == pytest.approx(expected)


# =============================================================================
# Evaluation Tests
# =============================================================================


class TestStabilityMetrics:
    """Test the full evaluation."""

    def test_scenario_is_stable(self, components, motor):
        """Test the reference rocket is stable."""
        metrics = calculate_stability_metrics(components, motor)
        assert_allclose(metrics.center_of_gravity, 213.05, atol=0.01)
        assert_allclose(metrics.center_of_pressure, 336.03, atol=0.01)
        assert metrics.reference_diameter == 60.0
        assert_allclose(metrics.static_margin, 2.05, atol=0.01)
        assert metrics.stability_class is StabilityClass.STABLE
        assert metrics.is_stable

    def test_scenario_acknowledged(self, components, motor):
        """Test the reference rocket gets only an acknowledgement."""
        metrics = calculate_stability_metrics(components, motor)
        assert metrics.warnings == []
        assert metrics.advisory_codes == ["configuration_ok"]
        assert metrics.advisories[0].severity is AdvisorySeverity.ACKNOWLEDGEMENT
        assert metrics.acknowledgements == ["Excellent stability configuration!"]
        assert metrics.overall_rating == 100.0

    def test_scenario_without_motor(self, components):
        """Test the reference rocket without a motor."""
        metrics = calculate_stability_metrics(components)
        assert_allclose(metrics.center_of_gravity, 202.1875)
        assert metrics.is_stable
        assert metrics.advisory_codes == ["no_propulsion", "no_propulsion"]
        assert len(metrics.warnings) == 1
        assert len(metrics.recommendations) == 1
        assert metrics.acknowledgements == []

    def test_idempotent(self, components, motor):
        """Test repeated evaluation gives the same result."""
        first = calculate_stability_metrics(components, motor)
        second = calculate_stability_metrics(components, motor)
        assert first == second

    def test_order_independent(self, components, motor):
        """Test component order does not matter."""
        forward = calculate_stability_metrics(components, motor)
        backward = calculate_stability_metrics(list(reversed(components)), motor)
        assert_allclose(backward.static_margin, forward.static_margin)

    def test_empty_design(self):
        """Test an empty design."""
        metrics = calculate_stability_metrics([])
        assert metrics.static_margin == 0.0
        assert metrics.center_of_gravity == 0.0
        assert metrics.center_of_pressure == 0.0
        assert metrics.advisory_codes == ["no_components"]
        assert metrics.warnings == ["No components in design"]

    def test_engine_only(self):
        """Test a design holding only an engine mount."""
        mount = Component.from_preset(ComponentType.ENGINE, "mount")
        metrics = calculate_stability_metrics([mount])
        # CG and CP both fall on the mount midpoint
        assert metrics.static_margin == 0.0
        assert metrics.stability_class is StabilityClass.UNSTABLE
        assert metrics.fin_effectiveness == 0.0
        codes = set(metrics.advisory_codes)
        assert codes == {"unstable_margin", "no_fins", "no_recovery", "no_nosecone"}
        assert "no_propulsion" not in codes

    def test_moving_fins_aft_increases_margin(self, components, motor, fins):
        """Test moving fins aft raises the margin."""
        margins = []
        for position in (200.0, 280.0, 360.0):
            moved = [c if c.id != "fins" else fins.with_changes(axial_position=position) for c in components]
            margins.append(calculate_stability_metrics(moved, motor).static_margin)
        assert margins[0] < margins[1] < margins[2]

    def test_heavy_nose_is_overstable(self, components, nose):
        """Test a heavy nose makes the rocket overstable."""
        heavy = [c if c.id != "nose" else nose.with_changes(mass=1.0) for c in components]
        metrics = calculate_stability_metrics(heavy)
        assert metrics.stability_class is StabilityClass.OVERSTABLE
        assert "overstable_margin" in metrics.advisory_codes
        assert metrics.overall_rating < 25.0

    def test_few_fins(self, components, motor, fins):
        """Test the few-fins advisory."""
        two = [c if c.id != "fins" else fins.with_changes(fin_count=2) for c in components]
        metrics = calculate_stability_metrics(two, motor)
        assert "few_fins" in metrics.advisory_codes
        assert "configuration_ok" not in metrics.advisory_codes

    def test_no_fins(self, nose, body, parachute, motor):
        """Test the no-fins advisory."""
        metrics = calculate_stability_metrics([nose, body, parachute], motor)
        assert "no_fins" in metrics.advisory_codes
        assert metrics.fin_effectiveness == 0.0

    def test_no_recovery(self, nose, body, fins, motor):
        """Test the no-recovery advisory."""
        metrics = calculate_stability_metrics([nose, body, fins], motor)
        assert "no_recovery" in metrics.advisory_codes
        assert metrics.recovery_stability == 20.0

    def test_no_nosecone_is_reported(self, body, fins, parachute, motor):
        """Test a missing nose cone is reported."""
        metrics = calculate_stability_metrics([body, fins, parachute], motor)
        assert "no_nosecone" in metrics.advisory_codes

    def test_invalid_geometry_reported_per_component(self, components, motor, body):
        """Test one advisory per invalid component."""
        broken = [c if c.id != "body" else body.with_changes(width=0.0) for c in components]
        metrics = calculate_stability_metrics(broken, motor)
        assert metrics.advisory_codes.count("invalid_geometry") == 2
        assert any("'body'" in w for w in metrics.warnings)

    def test_warnings_pair_with_recommendations(self, nose):
        """Test every warning has a recommendation."""
        metrics = calculate_stability_metrics([nose])
        assert len(metrics.warnings) == len(metrics.recommendations)

    def test_burn_fraction_moves_cg_forward(self, components, motor):
        """Test burning propellant moves the CG forward."""
        full = calculate_stability_metrics(components, motor, burn_fraction=0.0)
        burned = calculate_stability_metrics(components, motor, burn_fraction=1.0)
        assert burned.center_of_gravity < full.center_of_gravity
        assert burned.static_margin > full.static_margin
