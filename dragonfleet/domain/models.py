# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# DOMAIN MODELS - ROCKETS AND MISSIONS
# -----------------------------------------------------------------------------
# These Pydantic models are the two entities the FleetRegistry owns.
# Names are validated at construction; everything else mutates only through
# the guard methods below, which enforce the per-entity rules. Cross-entity
# rules (status derivation, manual transitions) live in core/policy.py.
#
# Rocket -> Mission is a name (weak reference).
# Mission -> Rocket is an ordered set of the Rocket objects themselves.
# -----------------------------------------------------------------------------

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .errors import InvalidArgumentError, InvalidStateError


class RocketStatus(str, Enum):
    """
    Where a rocket currently is.

    ON_GROUND is reserved for unassigned rockets: a rocket linked to a
    mission can never be put back on the ground except by unassignment.
    """

    ON_GROUND = "ON_GROUND"
    IN_SPACE = "IN_SPACE"
    IN_REPAIR = "IN_REPAIR"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


class MissionStatus(str, Enum):
    """
    Lifecycle of a mission.

    ENDED is terminal: an ended mission accepts no further changes.
    """

    SCHEDULED = "SCHEDULED"
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    ENDED = "ENDED"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


# Human-readable labels used by the summary report
STATUS_LABELS: dict[Enum, str] = {
    RocketStatus.ON_GROUND: "On ground",
    RocketStatus.IN_SPACE: "In space",
    RocketStatus.IN_REPAIR: "In repair",
    MissionStatus.SCHEDULED: "Scheduled",
    MissionStatus.PENDING: "Pending",
    MissionStatus.IN_PROGRESS: "In progress",
    MissionStatus.ENDED: "Ended",
}


def status_label(status: RocketStatus | MissionStatus) -> str:
    """Return the display label for a rocket or mission status."""
    return STATUS_LABELS[status]


def coerce_status(enum_cls: type[Enum], value) -> Enum:
    """
    Turn a status argument into a member of `enum_cls`.

    Accepts the member itself or its string value ("IN_REPAIR").

    Raises:
        InvalidArgumentError: If the value is None or not a member.
    """
    if value is None:
        raise InvalidArgumentError("Status cannot be null")
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        raise InvalidArgumentError(f"Unsupported status: {value}") from e


class Rocket(BaseModel):
    """
    A reusable vehicle ("Dragon").

    Created ON_GROUND and unassigned. `mission_name` links it to at most
    one mission; the link is only ever set or cleared by the registry.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ..., min_length=1, frozen=True, description="Unique, non-blank rocket name"
    )

    _status: RocketStatus = PrivateAttr(default=RocketStatus.ON_GROUND)
    _mission_name: str | None = PrivateAttr(default=None)

    @property
    def status(self) -> RocketStatus:
        return self._status

    @property
    def mission_name(self) -> str | None:
        return self._mission_name

    def assign_to_mission(self, mission_name: str) -> None:
        """
        Link this rocket to a mission and send it to space.

        Raises:
            InvalidArgumentError: If the mission name is blank.
            InvalidStateError: If the rocket is already linked to a mission.
        """
        if mission_name is None or not mission_name.strip():
            raise InvalidArgumentError("Mission name cannot be null or blank", entity=self.name)
        if self._mission_name is not None:
            raise InvalidStateError(
                f"Rocket is already assigned to mission: {self._mission_name}",
                entity=self.name,
            )
        self._mission_name = mission_name
        self._status = RocketStatus.IN_SPACE

    def unassign(self) -> None:
        """Clear the mission link and put the rocket back on the ground."""
        self._mission_name = None
        self._status = RocketStatus.ON_GROUND

    def set_status(self, new_status: RocketStatus | str) -> None:
        """
        Overwrite the rocket status.

        Raises:
            InvalidArgumentError: If the status is None or unknown.
            InvalidStateError: If ON_GROUND is requested while linked to a mission.
        """
        new_status = coerce_status(RocketStatus, new_status)
        if new_status is RocketStatus.ON_GROUND and self._mission_name is not None:
            raise InvalidStateError(
                "Cannot set to ON_GROUND while assigned to a mission.", entity=self.name
            )
        self._status = new_status

    # Identity semantics: the registry guarantees name uniqueness
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return (
            f"Rocket(name='{self.name}', status={self._status.value}, "
            f"mission={self._mission_name!r})"
        )


class Mission(BaseModel):
    """
    A campaign that rockets are assigned to.

    Created SCHEDULED with no rockets. Once ENDED the mission is frozen:
    no assignment and no status change is accepted.

    This class performs raw mutation only. Whether a status change makes
    sense for the current rockets is decided by StatusPolicy.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ..., min_length=1, frozen=True, description="Unique, non-blank mission name"
    )

    _status: MissionStatus = PrivateAttr(default=MissionStatus.SCHEDULED)
    # dict keys as an insertion-ordered set
    _rockets: dict[Rocket, None] = PrivateAttr(default_factory=dict)

    @property
    def status(self) -> MissionStatus:
        return self._status

    @property
    def assigned_rockets(self) -> tuple[Rocket, ...]:
        return tuple(self._rockets)

    @property
    def rocket_count(self) -> int:
        return len(self._rockets)

    @property
    def is_ended(self) -> bool:
        return self._status is MissionStatus.ENDED

    def assign_rocket(self, rocket: Rocket) -> None:
        """
        Add a rocket to the mission. Adding the same rocket twice is a no-op.

        Raises:
            InvalidArgumentError: If rocket is None.
            InvalidStateError: If the mission has ENDED.
        """
        if rocket is None:
            raise InvalidArgumentError("Cannot assign null rocket", entity=self.name)
        if self.is_ended:
            raise InvalidStateError(
                "Cannot assign rockets to an ENDED mission.", entity=self.name
            )
        self._rockets[rocket] = None

    def unassign_all_rockets(self) -> None:
        self._rockets.clear()

    def set_status(self, new_status: MissionStatus | str) -> None:
        """
        Overwrite the mission status.

        Raises:
            InvalidArgumentError: If the status is None or unknown.
            InvalidStateError: If the mission has already ENDED.
        """
        new_status = coerce_status(MissionStatus, new_status)
        if self.is_ended:
            raise InvalidStateError(
                "Cannot change status of an ENDED mission.", entity=self.name
            )
        self._status = new_status

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return (
            f"Mission(name='{self.name}', status={self._status.value}, "
            f"rockets={len(self._rockets)})"
        )
