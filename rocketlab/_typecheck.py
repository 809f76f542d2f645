"""Package-wide runtime type checking.

Scalar parameters are annotated ``float`` throughout. The PEP 484 numeric
tower lets callers pass ``int`` wherever ``float`` is expected, as in
``run_full_simulation(physics, motor, max_time=60)``.
"""

from beartype import BeartypeConf
from beartype import beartype as _beartype

beartype = _beartype(conf=BeartypeConf(is_pep484_tower=True))

__all__ = ["beartype"]
