"""Rocketlab - Flight physics and stability for model rocket design.

This package turns a rocket's component geometry and a chosen motor's
thrust curve into static stability metrics and a simulated vertical flight.

Example:
    >>> from rocketlab import (
    ...     Component, calculate_stability_metrics, compute_rocket_physics,
    ...     default_catalog, run_full_simulation,
    ... )
    >>>
    >>> components = [
    ...     Component.from_preset("nosecone", "nose", axial_position=0.0),
    ...     Component.from_preset("bodytube", "body", axial_position=60.0, length=300.0),
    ...     Component.from_preset("fins", "fins", axial_position=360.0),
    ... ]
    >>> motor = default_catalog()["C6-5"]
    >>> metrics = calculate_stability_metrics(components, motor)
    >>> print(f"Margin: {metrics.static_margin:.2f} cal")
    >>> samples = run_full_simulation(compute_rocket_physics(components, motor), motor)
"""

__version__ = "0.1.0"

# Components and motors
from rocketlab.components import (
    COMPONENT_LIBRARY,
    Component,
    ComponentPreset,
    ComponentType,
    components_of_type,
    get_preset,
    has_component,
    total_fin_count,
)

# Environment
from rocketlab.environment import (
    Atmosphere,
    AtmosphereResult,
    LaunchConditions,
    air_density,
    gravity_at_altitude,
    pressure_at_elevation,
    speed_of_sound,
)

# Export
from rocketlab.export import flight_to_csv, flight_to_dataframe
from rocketlab.motors import (
    Motor,
    MotorCatalog,
    MotorDataError,
    ThrustSample,
    default_catalog,
)

# Simulation
from rocketlab.simulation import (
    FlightPhase,
    FlightState,
    FlightSummary,
    SimConfig,
    SimulationResult,
    Simulator,
    flight_phase,
    run_full_simulation,
)

# Stability
from rocketlab.stability import (
    Advisory,
    AdvisorySeverity,
    StabilityClass,
    StabilityMetrics,
    calculate_stability_metrics,
    classify_margin,
)

# Vehicle
from rocketlab.vehicle import (
    AnalysisPhase,
    MassProperties,
    RocketPhysics,
    burn_fraction_for_phase,
    center_of_gravity,
    center_of_pressure,
    compute_rocket_physics,
    mass_properties,
    static_margin,
    total_mass,
)

__all__ = [
    "__version__",
    # Components
    "COMPONENT_LIBRARY",
    "Component",
    "ComponentPreset",
    "ComponentType",
    "components_of_type",
    "get_preset",
    "has_component",
    "total_fin_count",
    # Motors
    "Motor",
    "MotorCatalog",
    "MotorDataError",
    "ThrustSample",
    "default_catalog",
    # Environment
    "Atmosphere",
    "AtmosphereResult",
    "LaunchConditions",
    "air_density",
    "gravity_at_altitude",
    "pressure_at_elevation",
    "speed_of_sound",
    # Vehicle
    "AnalysisPhase",
    "MassProperties",
    "RocketPhysics",
    "burn_fraction_for_phase",
    "center_of_gravity",
    "center_of_pressure",
    "compute_rocket_physics",
    "mass_properties",
    "static_margin",
    "total_mass",
    # Stability
    "Advisory",
    "AdvisorySeverity",
    "StabilityClass",
    "StabilityMetrics",
    "calculate_stability_metrics",
    "classify_margin",
    # Simulation
    "FlightPhase",
    "FlightState",
    "FlightSummary",
    "SimConfig",
    "SimulationResult",
    "Simulator",
    "flight_phase",
    "run_full_simulation",
    # Export
    "flight_to_csv",
    "flight_to_dataframe",
]
