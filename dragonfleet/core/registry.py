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
# THE FLEET REGISTRY
# -----------------------------------------------------------------------------
# Responsibility: Own every Rocket and Mission by name, run assignments and
# status changes, and keep both sides of each Rocket <-> Mission link in
# sync.
#
# Concurrency: one lock per registry. Every public operation (reads
# included) runs inside it, so no caller ever sees a rocket linked to a
# mission that does not list it, or half of a bulk assignment.
#
# Atomicity: operations validate everything first and mutate afterwards.
# Log lines are written after the lock is released.
# A rejected call leaves the registry exactly as it was.

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from pydantic import BaseModel, Field, ValidationError
from rich.markup import escape
from rich.tree import Tree

from dragonfleet.core.console import log
from dragonfleet.core.policy import StatusPolicy
from dragonfleet.core.summary import build_summary_tree, format_summary
from dragonfleet.domain.errors import (
    AlreadyExistsError,
    FleetError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from dragonfleet.domain.models import (
    Mission,
    MissionStatus,
    Rocket,
    RocketStatus,
    coerce_status,
    status_label,
)


class RocketRecord(BaseModel):
    """Point-in-time copy of a rocket."""

    name: str
    status: RocketStatus
    mission_name: str | None = None


class MissionRecord(BaseModel):
    """Point-in-time copy of a mission; rocket names sorted."""

    name: str
    status: MissionStatus
    rocket_names: list[str] = Field(default_factory=list)


class FleetSnapshot(BaseModel):
    """
    Consistent view of the whole registry, taken under the lock.

    Both lists are sorted by name. Serialise with model_dump_json().
    """

    rockets: list[RocketRecord] = Field(default_factory=list)
    missions: list[MissionRecord] = Field(default_factory=list)


class FleetRegistry:
    """
    In-memory registry of rockets and missions.

    Rocket and mission names are unique within their own namespace.
    Independent instances share nothing, so tests can build as many as
    they need.
    """

    def __init__(self, policy: StatusPolicy | None = None) -> None:
        self._rockets: dict[str, Rocket] = {}
        self._missions: dict[str, Mission] = {}
        self._policy = policy or StatusPolicy()
        self._lock = threading.Lock()

    @contextmanager
    def _critical_section(self, action: str) -> Iterator[None]:
        """
        Hold the registry lock for one operation.

        Rejections are logged once here, after the lock is released, and
        re-raised unchanged.
        """
        try:
            with self._lock:
                yield
        except FleetError as e:
            log(f"[yellow][REGISTRY] {action} rejected: {escape(str(e))}[/yellow]")
            raise

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_rocket(self, rocket: Rocket | str) -> Rocket:
        """
        Register a rocket, given either an entity or a name.

        Returns:
            The stored Rocket.

        Raises:
            InvalidArgumentError: If the name is None or blank.
            AlreadyExistsError: If a rocket with that name is registered.
            InvalidStateError: If the rocket is already linked to a mission.
        """
        with self._critical_section("Add rocket"):
            rocket = _as_entity(Rocket, rocket, "rocket")
            if rocket.name in self._rockets:
                raise AlreadyExistsError("rocket", rocket.name)
            if rocket.mission_name is not None:
                raise InvalidStateError(
                    f"Rocket is already assigned to mission: {rocket.mission_name}",
                    entity=rocket.name,
                )
            self._rockets[rocket.name] = rocket

        log(f"[green][REGISTRY] Rocket registered: {escape(rocket.name)}[/green]")
        return rocket

    def add_mission(self, mission: Mission | str) -> Mission:
        """
        Register a mission, given either an entity or a name.

        Returns:
            The stored Mission.

        Raises:
            InvalidArgumentError: If the name is None or blank.
            AlreadyExistsError: If a mission with that name is registered.
            InvalidStateError: If the mission already carries rockets.
        """
        with self._critical_section("Add mission"):
            mission = _as_entity(Mission, mission, "mission")
            if mission.name in self._missions:
                raise AlreadyExistsError("mission", mission.name)
            if mission.rocket_count:
                raise InvalidStateError(
                    "Cannot register a mission that already has rockets.", entity=mission.name
                )
            self._missions[mission.name] = mission

        log(f"[green][REGISTRY] Mission registered: {escape(mission.name)}[/green]")
        return mission

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def find_rocket(self, name: str) -> Rocket | None:
        with self._lock:
            return self._rockets.get(name)

    def find_mission(self, name: str) -> Mission | None:
        with self._lock:
            return self._missions.get(name)

    def rockets(self) -> list[Rocket]:
        """All registered rockets, sorted by name."""
        with self._lock:
            return sorted(self._rockets.values(), key=lambda r: r.name)

    def missions(self) -> list[Mission]:
        """All registered missions, sorted by name."""
        with self._lock:
            return sorted(self._missions.values(), key=lambda m: m.name)

    # =========================================================================
    # ASSIGNMENT
    # =========================================================================

    def assign_rocket_to_mission(self, rocket_name: str, mission_name: str) -> None:
        """
        Link one rocket to one mission, then reconcile the mission status.

        Raises:
            NotFoundError: If either name is not registered.
            InvalidStateError: If the mission has ENDED or the rocket is
                already linked to a mission.
        """
        with self._critical_section("Assign rocket"):
            rocket = self._get_rocket(rocket_name)
            mission = self._get_mission(mission_name)
            _ensure_not_ended(mission)

            rocket.assign_to_mission(mission.name)
            mission.assign_rocket(rocket)
            change = self._reconcile(mission)

        log(f"[green][REGISTRY] {escape(rocket.name)} assigned to {escape(mission.name)}[/green]")
        _log_status_change(mission, change)

    def assign_rockets_to_mission(
        self, mission_name: str, rocket_names: Iterable[str] | None
    ) -> None:
        """
        Assign several rockets to a mission, all or nothing.

        Every name is checked (registered and unassigned) before any rocket
        is touched; the mission status is reconciled once at the end.
        An empty or None collection is a no-op.

        Raises:
            InvalidArgumentError: If rocket_names is a bare string.
            NotFoundError: If the mission or any rocket is not registered.
            InvalidStateError: If the mission has ENDED or any rocket is
                already linked to a mission.
        """
        with self._critical_section("Bulk assignment"):
            if isinstance(rocket_names, str):
                raise InvalidArgumentError(
                    "rocket_names must be a collection of names, not a string",
                    entity=mission_name,
                )
            names = list(dict.fromkeys(rocket_names)) if rocket_names is not None else []
            if not names:
                return

            # Phase 1: validate everything
            mission = self._get_mission(mission_name)
            _ensure_not_ended(mission)

            to_assign: list[Rocket] = []
            for name in names:
                rocket = self._get_rocket(name)
                if rocket.mission_name is not None:
                    raise InvalidStateError(
                        f"Transaction failed: Rocket '{rocket.name}' is already assigned "
                        f"to mission '{rocket.mission_name}'.",
                        entity=rocket.name,
                    )
                to_assign.append(rocket)

            # Phase 2: mutate
            for rocket in to_assign:
                rocket.assign_to_mission(mission.name)
                mission.assign_rocket(rocket)
            change = self._reconcile(mission)

        log(
            f"[green][REGISTRY] {len(to_assign)} rocket(s) assigned to "
            f"{escape(mission.name)}[/green]"
        )
        _log_status_change(mission, change)

    # =========================================================================
    # STATUS CHANGES
    # =========================================================================

    def change_rocket_status(self, rocket_name: str, status: RocketStatus | str) -> None:
        """
        Change a rocket's status and reconcile its mission, if any.

        Raises:
            NotFoundError: If the rocket is not registered.
            InvalidArgumentError: If the status is unknown.
            InvalidStateError: If ON_GROUND is requested while assigned.
        """
        mission = None
        change = None
        with self._critical_section("Rocket status change"):
            rocket = self._get_rocket(rocket_name)
            rocket.set_status(status)
            new_status = rocket.status

            if rocket.mission_name is not None:
                mission = self._missions.get(rocket.mission_name)
                if mission is not None:
                    change = self._reconcile(mission)

        log(f"[green][REGISTRY] {escape(rocket.name)} is now {status_label(new_status)}[/green]")
        if mission is not None:
            _log_status_change(mission, change)

    def change_mission_status(self, mission_name: str, status: MissionStatus | str) -> None:
        """
        Change a mission's status on request.

        ENDED releases every assigned rocket (back ON_GROUND, unlinked) and
        freezes the mission; it always succeeds unless the mission has
        already ENDED. Any other target must pass StatusPolicy.

        Raises:
            NotFoundError: If the mission is not registered.
            InvalidArgumentError: If the status is not supported.
            InvalidStateError: If the mission has ENDED or the rockets do
                not support the target.
        """
        with self._critical_section("Mission status change"):
            mission = self._get_mission(mission_name)
            target = coerce_status(MissionStatus, status)

            if target is MissionStatus.ENDED:
                released = self._end_mission(mission)
            else:
                self._policy.validate_transition(mission, target)
                mission.set_status(target)

        if target is MissionStatus.ENDED:
            log(
                f"[green][REGISTRY] Mission {escape(mission.name)} ended, "
                f"{released} rocket(s) released[/green]"
            )
        else:
            log(
                f"[green][REGISTRY] Mission {escape(mission.name)} set to "
                f"{status_label(target)}[/green]"
            )

    def _end_mission(self, mission: Mission) -> int:
        """Release every rocket and freeze the mission. Returns the release count."""
        _ensure_not_ended(mission)

        released = mission.assigned_rockets
        for rocket in released:
            rocket.unassign()
        mission.unassign_all_rockets()
        mission.set_status(MissionStatus.ENDED)
        return len(released)

    # =========================================================================
    # REPORTING
    # =========================================================================

    def get_summary(self) -> str:
        """Text report of every mission and its rockets (see core/summary.py)."""
        with self._lock:
            return format_summary(self._missions.values())

    def summary_tree(self, title: str = "Fleet") -> Tree:
        with self._lock:
            return build_summary_tree(self._missions.values(), title=title)

    def snapshot(self) -> FleetSnapshot:
        with self._lock:
            return FleetSnapshot(
                rockets=[
                    RocketRecord(name=r.name, status=r.status, mission_name=r.mission_name)
                    for r in sorted(self._rockets.values(), key=lambda r: r.name)
                ],
                missions=[
                    MissionRecord(
                        name=m.name,
                        status=m.status,
                        rocket_names=sorted(r.name for r in m.assigned_rockets),
                    )
                    for m in sorted(self._missions.values(), key=lambda m: m.name)
                ],
            )

    # =========================================================================
    # INTERNALS (caller holds the lock)
    # =========================================================================

    def _get_rocket(self, name: str) -> Rocket:
        rocket = self._rockets.get(name)
        if rocket is None:
            raise NotFoundError("rocket", name)
        return rocket

    def _get_mission(self, name: str) -> Mission:
        mission = self._missions.get(name)
        if mission is None:
            raise NotFoundError("mission", name)
        return mission

    def _reconcile(
        self, mission: Mission
    ) -> tuple[MissionStatus, MissionStatus] | None:
        """
        Apply the automatically derived status to a mission.

        Returns:
            (previous, derived) when the status changed, else None.
        """
        derived = self._policy.derive_status(mission)
        if derived is None or derived is mission.status:
            return None

        previous = mission.status
        mission.set_status(derived)
        return previous, derived


def _log_status_change(
    mission: Mission, change: tuple[MissionStatus, MissionStatus] | None
) -> None:
    if change is None:
        return
    previous, derived = change
    log(
        f"[cyan][REGISTRY] Mission {escape(mission.name)}: "
        f"{status_label(previous)} -> {status_label(derived)}[/cyan]"
    )


def _ensure_not_ended(mission: Mission) -> None:
    if mission.is_ended:
        raise InvalidStateError("Cannot change an ENDED mission.", entity=mission.name)


def _as_entity(model: type[Rocket] | type[Mission], value, kind: str):
    """Accept an entity as-is or build one from a name."""
    if isinstance(value, model):
        return value
    if value is None:
        raise InvalidArgumentError(f"{kind.capitalize()} cannot be null")
    try:
        return model(name=value)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"{kind.capitalize()} name cannot be null or blank", entity=str(value)
        ) from e
