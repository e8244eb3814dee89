# -----------------------------------------------------------------------------
# THE STATUS POLICY - MISSION STATUS RULES
# -----------------------------------------------------------------------------
# Responsibility: Decide what status a mission should have.
#
# Two separate paths:
# - derive_status: automatic reconciliation after assignments and rocket
#   status changes. Never fails.
# - validate_transition: guard for an explicit status change requested by a
#   caller. Rejects the change with InvalidStateError when the rockets do
#   not back it up.
#
# ENDED is not handled here. Ending a mission is a registry operation that
# releases every rocket and bypasses these rules.
# -----------------------------------------------------------------------------

from collections.abc import Callable

from dragonfleet.domain.errors import InvalidArgumentError, InvalidStateError
from dragonfleet.domain.models import Mission, MissionStatus, RocketStatus


def _any_in_repair(mission: Mission) -> bool:
    return any(r.status is RocketStatus.IN_REPAIR for r in mission.assigned_rockets)


class StatusPolicy:
    """
    Mission status rules for the FleetRegistry.

    Stateless; a single instance can be shared between registries.
    """

    def __init__(self) -> None:
        self._checks: dict[MissionStatus, Callable[[Mission], None]] = {
            MissionStatus.SCHEDULED: self._check_scheduled,
            MissionStatus.PENDING: self._check_pending,
            MissionStatus.IN_PROGRESS: self._check_in_progress,
        }

    def derive_status(self, mission: Mission) -> MissionStatus | None:
        """
        Compute the automatic status for a mission.

        Returns:
            None for an ENDED mission (left untouched), otherwise SCHEDULED
            when no rockets are assigned, PENDING when any assigned rocket
            is IN_REPAIR, else IN_PROGRESS.
        """
        if mission.is_ended:
            return None

        if mission.rocket_count == 0:
            return MissionStatus.SCHEDULED

        if _any_in_repair(mission):
            return MissionStatus.PENDING

        return MissionStatus.IN_PROGRESS

    def validate_transition(self, mission: Mission, target: MissionStatus) -> None:
        """
        Validate an explicit status change against the mission's rockets.

        Args:
            mission: The mission being changed.
            target: The requested status (ENDED is not accepted here).

        Raises:
            InvalidStateError: If the rockets do not support the target.
            InvalidArgumentError: If the target is not a manual target.
        """
        check = self._checks.get(target)
        if check is None:
            raise InvalidArgumentError(f"Unsupported status: {target}", entity=mission.name)

        check(mission)

    def _check_scheduled(self, mission: Mission) -> None:
        """SCHEDULED requires an empty mission."""
        if mission.rocket_count:
            raise InvalidStateError(
                "Cannot revert to SCHEDULED. Rockets are assigned.", entity=mission.name
            )

    def _check_pending(self, mission: Mission) -> None:
        """PENDING requires rockets, at least one of them IN_REPAIR."""
        if mission.rocket_count == 0 or not _any_in_repair(mission):
            raise InvalidStateError(
                "Cannot set to PENDING. Requires at least one assigned rocket to be IN_REPAIR.",
                entity=mission.name,
            )

    def _check_in_progress(self, mission: Mission) -> None:
        """IN_PROGRESS requires rockets, none of them IN_REPAIR."""
        if mission.rocket_count == 0:
            raise InvalidStateError(
                "Cannot set to IN_PROGRESS. No rockets assigned.", entity=mission.name
            )
        if _any_in_repair(mission):
            raise InvalidStateError(
                "Cannot set to IN_PROGRESS. One or more rockets are IN_REPAIR.",
                entity=mission.name,
            )
