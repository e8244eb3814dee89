# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# Contains the fleet entities (Pydantic models with guard methods), their
# status enums and display labels, and the error hierarchy.
# -----------------------------------------------------------------------------

from .errors import (
    AlreadyExistsError,
    FleetError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from .models import (
    STATUS_LABELS,
    Mission,
    MissionStatus,
    Rocket,
    RocketStatus,
    coerce_status,
    status_label,
)

__all__ = [
    "AlreadyExistsError", "FleetError", "InvalidArgumentError",
    "InvalidStateError", "NotFoundError",
    "STATUS_LABELS", "Mission", "MissionStatus", "Rocket", "RocketStatus",
    "coerce_status", "status_label",
]
