"""Data export utilities for flight simulation."""

from collections.abc import Sequence
from pathlib import Path

import polars as pl

from rocketlab._typecheck import beartype
from rocketlab.simulation.integrator import FlightState

# (header, sample attribute, decimals)
FLIGHT_COLUMNS: tuple[tuple[str, str, int], ...] = (
    ("Time(s)", "time", 3),
    ("Altitude(m)", "altitude", 2),
    ("Velocity(m/s)", "velocity", 2),
    ("Acceleration(m/s²)", "acceleration", 2),
    ("Thrust(N)", "thrust", 2),
    ("Drag(N)", "drag", 2),
    ("Mach", "mach_number", 3),
    ("Mass(kg)", "mass", 4),
)


@beartype
def flight_to_dataframe(samples: Sequence[FlightState]) -> pl.DataFrame:
    """Tabulate samples with the export headers, values formatted to fixed precision."""
    return pl.DataFrame({
        header: [f"{getattr(s, attr):.{decimals}f}" for s in samples]
        for header, attr, decimals in FLIGHT_COLUMNS
    }, schema={header: pl.String for header, _, _ in FLIGHT_COLUMNS})


@beartype
def flight_to_csv(samples: Sequence[FlightState], path: str | Path | None = None) -> str:
    """Export a flight as comma-separated text.

    Args:
        samples: Trajectory samples in time order
        path: File to write; parent directories are created. Not written if None.

    Returns:
        The CSV text, header line first
    """
    text = flight_to_dataframe(samples).write_csv()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    return text
