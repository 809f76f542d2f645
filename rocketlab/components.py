"""Parametric rocket components.

A design is an unordered collection of components laid out along the rocket's
long axis. Positions are measured from the nose tip in millimetres, masses are
in kilograms. Components are plain values: the design surface edits them by
replacement and hands snapshots to the mass, aerodynamics and stability code.

Example:
    >>> from rocketlab.components import Component, ComponentType
    >>>
    >>> nose = Component.from_preset(ComponentType.NOSECONE, "nose", axial_position=0.0)
    >>> body = Component.from_preset("bodytube", "body", axial_position=60.0, length=300.0)
    >>> print(f"Body tube ends at {body.aft_position:.0f} mm")
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from rocketlab._typecheck import beartype

# =============================================================================
# Component Types
# =============================================================================


class ComponentType(Enum):
    """Kinds of part that can be placed on the rocket."""

    NOSECONE = "nosecone"
    BODYTUBE = "bodytube"
    FINS = "fins"
    ENGINE = "engine"
    TRANSITION = "transition"
    PARACHUTE = "parachute"


# =============================================================================
# Component
# =============================================================================


@beartype
@dataclass(frozen=True)
class Component:
    """A single physical part of the rocket.

    Negative or zero sizes are accepted; the aggregators treat them as
    contributing nothing and the stability evaluator reports them.

    Attributes:
        id: Unique identifier within a design
        type: Component kind (enum member or its string value)
        axial_position: Distance of the forward end from the nose tip [mm]
        width: Diameter, or total span for fin sets [mm]
        length: Extent along the rocket axis [mm]
        mass: Component mass [kg]
        drag_coefficient: Contribution to the aggregate drag coefficient
        fin_count: Number of fins in a fin set (fins only)
        deployment_altitude: Deployment altitude [m] (parachutes only)
    """
    id: str
    type: ComponentType | str
    axial_position: float = 0.0
    width: float = 0.0
    length: float = 0.0
    mass: float = 0.0
    drag_coefficient: float = 0.0
    fin_count: int = 0
    deployment_altitude: float | None = None

    def __post_init__(self) -> None:
        """Normalize string component types."""
        if not isinstance(self.type, ComponentType):
            object.__setattr__(self, "type", ComponentType(self.type))

    @property
    def aft_position(self) -> float:
        """Position of the aft end [mm]."""
        return self.axial_position + self.length

    @property
    def midpoint(self) -> float:
        """Axial midpoint, where the component's mass is taken to act [mm]."""
        return self.axial_position + self.length / 2

    @property
    def has_valid_geometry(self) -> bool:
        """Whether width, length and mass are all strictly positive."""
        return self.width > 0 and self.length > 0 and self.mass > 0

    def with_changes(self, **changes: object) -> "Component":
        """Return an edited copy of this component."""
        return replace(self, **changes)

    @classmethod
    def from_preset(
        cls,
        component_type: ComponentType | str,
        id: str,
        axial_position: float = 0.0,
        **overrides: object,
    ) -> "Component":
        """Create a component from the default parts library.

        Args:
            component_type: Kind of component
            id: Identifier for the new component
            axial_position: Forward end position [mm]
            **overrides: Any field to override from the preset

        Returns:
            New Component
        """
        preset = get_preset(component_type)
        fields = {
            "width": preset.width,
            "length": preset.length,
            "mass": preset.mass,
            "drag_coefficient": preset.drag_coefficient,
            "fin_count": preset.fin_count,
        }
        fields.update(overrides)
        return cls(id=id, type=preset.type, axial_position=axial_position, **fields)


# =============================================================================
# Parts Library
# =============================================================================


@dataclass(frozen=True)
class ComponentPreset:
    """Default dimensions for a library part."""
    type: ComponentType
    name: str
    description: str
    width: float  # [mm]
    length: float  # [mm]
    mass: float  # [kg]
    drag_coefficient: float
    fin_count: int = 0


COMPONENT_LIBRARY: dict[ComponentType, ComponentPreset] = {
    ComponentType.NOSECONE: ComponentPreset(
        type=ComponentType.NOSECONE,
        name="Conical Nose Cone",
        description="Reduces drag, guides airflow",
        width=40.0,
        length=60.0,
        mass=0.05,
        drag_coefficient=0.15,
    ),
    ComponentType.BODYTUBE: ComponentPreset(
        type=ComponentType.BODYTUBE,
        name="Body Tube",
        description="Main structural component",
        width=40.0,
        length=100.0,
        mass=0.15,
        drag_coefficient=0.45,
    ),
    ComponentType.FINS: ComponentPreset(
        type=ComponentType.FINS,
        name="Fin Set",
        description="Provides stability and control",
        width=60.0,
        length=40.0,
        mass=0.08,
        drag_coefficient=0.02,
        fin_count=4,
    ),
    ComponentType.ENGINE: ComponentPreset(
        type=ComponentType.ENGINE,
        name="Solid Motor Mount",
        description="Propulsion system",
        width=35.0,
        length=80.0,
        mass=0.25,
        drag_coefficient=0.0,
    ),
    ComponentType.TRANSITION: ComponentPreset(
        type=ComponentType.TRANSITION,
        name="Transition",
        description="Connects different diameters",
        width=40.0,
        length=30.0,
        mass=0.03,
        drag_coefficient=0.25,
    ),
    ComponentType.PARACHUTE: ComponentPreset(
        type=ComponentType.PARACHUTE,
        name="Recovery System",
        description="Safe landing system",
        width=30.0,
        length=25.0,
        mass=0.04,
        drag_coefficient=1.3,
    ),
}


@beartype
def get_preset(component_type: ComponentType | str) -> ComponentPreset:
    """Get the library preset for a component type."""
    return COMPONENT_LIBRARY[ComponentType(component_type)]


# =============================================================================
# Collection Helpers
# =============================================================================


@beartype
def components_of_type(
    components: Iterable[Component],
    component_type: ComponentType | str,
) -> list[Component]:
    """Select the components of one kind, preserving order."""
    wanted = ComponentType(component_type)
    return [c for c in components if c.type is wanted]


@beartype
def has_component(components: Iterable[Component], component_type: ComponentType | str) -> bool:
    """Check whether any component of a kind is present."""
    return len(components_of_type(components, component_type)) > 0


@beartype
def total_fin_count(components: Iterable[Component]) -> int:
    """Total number of fins across all fin sets (negative counts ignored)."""
    return sum(max(0, c.fin_count) for c in components_of_type(components, ComponentType.FINS))
