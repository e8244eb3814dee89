# -----------------------------------------------------------------------------
# DRAGONFLEET
# -----------------------------------------------------------------------------
# In-memory registry of reusable rockets ("Dragons") and the missions they
# fly, with all-or-nothing bulk assignment and automatic mission status.
# -----------------------------------------------------------------------------

__version__ = "1.0.0"

from dragonfleet.core import FleetRegistry, StatusPolicy
from dragonfleet.domain import (
    AlreadyExistsError,
    FleetError,
    InvalidArgumentError,
    InvalidStateError,
    Mission,
    MissionStatus,
    NotFoundError,
    Rocket,
    RocketStatus,
)

__all__ = [
    "__version__",
    "FleetRegistry", "StatusPolicy",
    "AlreadyExistsError", "FleetError", "InvalidArgumentError",
    "InvalidStateError", "NotFoundError",
    "Mission", "MissionStatus", "Rocket", "RocketStatus",
]
