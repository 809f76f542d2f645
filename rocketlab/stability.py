"""Static stability evaluation for a component design.

Combines the center of gravity and center of pressure into a static margin
in calibers, classifies it, scores the fin set and the overall design, and
produces structured advisories for the stability display.

Margin bands (fixed design constants):
- margin < 1 cal: unstable
- 1 <= margin <= 3 cal: stable
- margin > 3 cal: overstable (prone to weathercocking)

The evaluation is deterministic: the same components and motor always give
the same metrics and the same advisories in the same order.

Example:
    >>> from rocketlab.stability import calculate_stability_metrics
    >>>
    >>> metrics = calculate_stability_metrics(components, motor)
    >>> print(f"Margin: {metrics.static_margin:.2f} cal ({metrics.stability_class.value})")
    >>> for warning in metrics.warnings:
    ...     print(f"! {warning}")
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from rocketlab._typecheck import beartype
from rocketlab.components import (
    Component,
    ComponentType,
    components_of_type,
    has_component,
    total_fin_count,
)
from rocketlab.motors import Motor
from rocketlab.vehicle.aerodynamics import center_of_pressure
from rocketlab.vehicle.mass import mass_properties, overall_diameter, overall_length
from rocketlab.vehicle.physics import static_margin

# =============================================================================
# Constants
# =============================================================================

MIN_STABLE_MARGIN = 1.0  # [cal]
MAX_STABLE_MARGIN = 3.0  # [cal]
MIN_FIN_COUNT = 3

# Fin effectiveness: points per fin plus points for span relative to length
FIN_COUNT_SCORE = 20.0
FIN_SPAN_SCORE = 50.0

RECOVERY_STABILITY_WITH = 90.0
RECOVERY_STABILITY_WITHOUT = 20.0


# =============================================================================
# Result Classes
# =============================================================================


class StabilityClass(Enum):
    """Qualitative static stability."""

    UNSTABLE = "unstable"
    STABLE = "stable"
    OVERSTABLE = "overstable"


class AdvisorySeverity(Enum):
    """Kind of advisory."""

    WARNING = "warning"
    RECOMMENDATION = "recommendation"
    ACKNOWLEDGEMENT = "acknowledgement"


@dataclass(frozen=True)
class Advisory:
    """One message for the stability display.

    Attributes:
        severity: Warning, recommendation or acknowledgement
        code: Stable machine-readable identifier
        message: Human-readable text
    """
    severity: AdvisorySeverity
    code: str
    message: str


@beartype
@dataclass(frozen=True)
class StabilityMetrics:
    """Stability summary of a design.

    Attributes:
        static_margin: (CP - CG) / diameter [cal]
        center_of_gravity: CG from nose tip [mm]
        center_of_pressure: CP from nose tip [mm]
        reference_diameter: Diameter used for the margin [mm]
        stability_class: Margin classification
        fin_effectiveness: Fin set score (0-100)
        dynamic_stability: Damping score (0-100)
        recovery_stability: Recovery score (0-100)
        overall_rating: Composite design score (0-100)
        advisories: Warnings, recommendations and acknowledgements in order
    """
    static_margin: float
    center_of_gravity: float
    center_of_pressure: float
    reference_diameter: float
    stability_class: StabilityClass
    fin_effectiveness: float
    dynamic_stability: float
    recovery_stability: float
    overall_rating: float
    advisories: tuple[Advisory, ...]

    @property
    def warnings(self) -> list[str]:
        """Warning messages."""
        return [a.message for a in self.advisories if a.severity is AdvisorySeverity.WARNING]

    @property
    def recommendations(self) -> list[str]:
        """Recommendation messages."""
        return [a.message for a in self.advisories if a.severity is AdvisorySeverity.RECOMMENDATION]

    @property
    def acknowledgements(self) -> list[str]:
        """Positive acknowledgement messages."""
        return [a.message for a in self.advisories if a.severity is AdvisorySeverity.ACKNOWLEDGEMENT]

    @property
    def advisory_codes(self) -> list[str]:
        """Codes of all advisories, in order."""
        return [a.code for a in self.advisories]

    @property
    def is_stable(self) -> bool:
        """Whether the margin lies in the stable band."""
        return self.stability_class is StabilityClass.STABLE


# =============================================================================
# Scores
# =============================================================================


@beartype
def classify_margin(margin: float) -> StabilityClass:
    """Classify a static margin into the fixed stability bands."""
    if margin < MIN_STABLE_MARGIN:
        return StabilityClass.UNSTABLE
    if margin > MAX_STABLE_MARGIN:
        return StabilityClass.OVERSTABLE
    return StabilityClass.STABLE


@beartype
def fin_effectiveness(components: Sequence[Component]) -> float:
    """Fin set score in [0, 100].

    Grows with the total fin count and with the widest fin span relative to
    the rocket's length, saturating at 100.
    """
    fins = components_of_type(components, ComponentType.FINS)
    count = total_fin_count(components)
    if not fins or count <= 0:
        return 0.0

    length = overall_length(components)
    span = max(max(0.0, float(f.width)) for f in fins)
    span_score = FIN_SPAN_SCORE * span / length if length > 0 else 0.0

    return float(min(100.0, FIN_COUNT_SCORE * count + span_score))


@beartype
def dynamic_stability(margin: float, fin_score: float) -> float:
    """Damping score in [0, 100] from margin and fin effectiveness."""
    return float(min(100.0, max(0.0, 20.0 * margin + 0.3 * fin_score)))


@beartype
def recovery_stability(components: Sequence[Component]) -> float:
    """Recovery score: high with a recovery device, low without."""
    if has_component(components, ComponentType.PARACHUTE):
        return RECOVERY_STABILITY_WITH
    return RECOVERY_STABILITY_WITHOUT


@beartype
def overall_rating(margin: float, fin_score: float, has_recovery: bool) -> float:
    """Composite design score in [0, 100].

    Inside the stable band the score rewards margin, fin effectiveness and a
    recovery device. Outside it the score falls linearly with the distance
    from the band, reaching 0 one caliber away.
    """
    if MIN_STABLE_MARGIN <= margin <= MAX_STABLE_MARGIN:
        score = 30.0 * margin + 0.5 * fin_score + (20.0 if has_recovery else 0.0)
        return float(min(100.0, score))

    if margin < MIN_STABLE_MARGIN:
        distance = MIN_STABLE_MARGIN - margin
    else:
        distance = margin - MAX_STABLE_MARGIN
    return float(max(0.0, 25.0 - 25.0 * distance))


# =============================================================================
# Advisories
# =============================================================================


def _warn(code: str, warning: str, recommendation: str) -> list[Advisory]:
    return [
        Advisory(AdvisorySeverity.WARNING, code, warning),
        Advisory(AdvisorySeverity.RECOMMENDATION, code, recommendation),
    ]


def _advisories(
    components: Sequence[Component],
    motor: Motor | None,
    margin: float,
    stability_class: StabilityClass,
) -> tuple[Advisory, ...]:
    advisories: list[Advisory] = []

    for c in components:
        if not c.has_valid_geometry:
            advisories += _warn(
                "invalid_geometry",
                f"Component '{c.id}' has invalid geometry (width, length and mass must be positive)",
                f"Check the dimensions and mass of '{c.id}'",
            )

    if stability_class is StabilityClass.UNSTABLE:
        advisories += _warn(
            "unstable_margin",
            f"Static margin too low ({margin:.2f} cal) - rocket may be unstable",
            "Move center of gravity forward or add more fin area",
        )
    elif stability_class is StabilityClass.OVERSTABLE:
        advisories += _warn(
            "overstable_margin",
            f"Static margin too high ({margin:.2f} cal) - rocket may be overstable and weathercock",
            "Reduce fin size or move weight aft",
        )

    fin_count = total_fin_count(components)
    if fin_count == 0:
        advisories += _warn(
            "no_fins",
            "No fins detected - rocket will be unstable",
            "Add fin set for stability",
        )
    elif fin_count < MIN_FIN_COUNT:
        advisories += _warn(
            "few_fins",
            "Insufficient fin count for optimal stability",
            f"Use at least {MIN_FIN_COUNT} fins for best stability",
        )

    if not has_component(components, ComponentType.PARACHUTE):
        advisories += _warn(
            "no_recovery",
            "No recovery system detected",
            "Add parachute or streamer for safe recovery",
        )

    if motor is None and not has_component(components, ComponentType.ENGINE):
        advisories += _warn(
            "no_propulsion",
            "No propulsion system detected",
            "Add a motor for powered flight",
        )

    if not has_component(components, ComponentType.NOSECONE):
        advisories += _warn(
            "no_nosecone",
            "No nose cone detected - blunt front adds drag",
            "Add a nose cone to reduce drag",
        )

    if not advisories:
        advisories.append(
            Advisory(
                AdvisorySeverity.ACKNOWLEDGEMENT,
                "configuration_ok",
                "Excellent stability configuration!",
            )
        )

    return tuple(advisories)


# =============================================================================
# Evaluation
# =============================================================================


@beartype
def calculate_stability_metrics(
    components: Sequence[Component],
    motor: Motor | None = None,
    burn_fraction: float = 0.0,
    motor_axial_position: float | None = None,
) -> StabilityMetrics:
    """Evaluate the static stability of a design.

    Cheap enough to call on every edit: one pass over the components per
    quantity. An empty design yields neutral metrics and a single
    "no_components" warning.

    Args:
        components: Component snapshot
        motor: Selected motor, if any
        burn_fraction: Propellant consumed for the CG figure (0-1)
        motor_axial_position: Override for where the motor mass acts [mm]

    Returns:
        StabilityMetrics
    """
    if not components:
        return StabilityMetrics(
            static_margin=0.0,
            center_of_gravity=0.0,
            center_of_pressure=0.0,
            reference_diameter=0.0,
            stability_class=classify_margin(0.0),
            fin_effectiveness=0.0,
            dynamic_stability=0.0,
            recovery_stability=0.0,
            overall_rating=0.0,
            advisories=(
                Advisory(AdvisorySeverity.WARNING, "no_components", "No components in design"),
            ),
        )

    cg = mass_properties(components, motor, burn_fraction, motor_axial_position).cg
    cp = center_of_pressure(components)
    diameter = overall_diameter(components)
    margin = static_margin(cp, cg, diameter)
    stability_class = classify_margin(margin)

    fin_score = fin_effectiveness(components)
    has_recovery = has_component(components, ComponentType.PARACHUTE)

    return StabilityMetrics(
        static_margin=margin,
        center_of_gravity=cg,
        center_of_pressure=cp,
        reference_diameter=diameter,
        stability_class=stability_class,
        fin_effectiveness=fin_score,
        dynamic_stability=dynamic_stability(margin, fin_score),
        recovery_stability=recovery_stability(components),
        overall_rating=overall_rating(margin, fin_score, has_recovery),
        advisories=_advisories(components, motor, margin, stability_class),
    )
