# -----------------------------------------------------------------------------
# FLEET MANIFEST - YAML SEEDING
# -----------------------------------------------------------------------------
# Responsibility: Describe an initial fleet in YAML and replay it into a
# FleetRegistry through the public operations, so every registry rule
# applies to seeded data exactly as it does to live calls.
#
# Example (fleet.yaml):
#
#   rockets: [Dragon 1, Dragon 2]
#   missions: [Mars]
#   assignments:
#     Mars: [Dragon 1, Dragon 2]
#   rocket_status:
#     Dragon 2: IN_REPAIR
# -----------------------------------------------------------------------------

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from dragonfleet.core.console import log
from dragonfleet.core.registry import FleetRegistry
from dragonfleet.domain.models import MissionStatus, RocketStatus


def default_manifest_path() -> Path:
    """Manifest used when no path is given: $DRAGONFLEET_MANIFEST or fleet.yaml."""
    return Path(os.getenv("DRAGONFLEET_MANIFEST", "fleet.yaml"))


class FleetManifest(BaseModel):
    """
    Pydantic model for a fleet manifest.

    Loaded from YAML; every section is optional.
    """

    rockets: list[str] = Field(default_factory=list)
    missions: list[str] = Field(default_factory=list)
    assignments: dict[str, list[str]] = Field(default_factory=dict)
    rocket_status: dict[str, RocketStatus] = Field(default_factory=dict)
    mission_status: dict[str, MissionStatus] = Field(default_factory=dict)


def load_manifest(path: Path | None = None) -> FleetManifest:
    """
    Load and validate a manifest file.

    With no path, the file named by default_manifest_path() is used.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the content does not match FleetManifest.
    """
    path = Path(path) if path is not None else default_manifest_path()
    if not path.exists():
        log(f"[red][MANIFEST] File not found: {path}[/red]")
        raise FileNotFoundError(f"Manifest not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    manifest = FleetManifest.model_validate(data or {})
    log(
        f"[green][MANIFEST] Loaded {path.name}: {len(manifest.rockets)} rockets, "
        f"{len(manifest.missions)} missions[/green]"
    )
    return manifest


def apply_manifest(registry: FleetRegistry, manifest: FleetManifest) -> FleetRegistry:
    """
    Replay a manifest into a registry.

    Order: rockets, missions, bulk assignments, rocket statuses, mission
    statuses. The first rejected operation propagates.

    Returns:
        The same registry, for chaining.
    """
    for name in manifest.rockets:
        registry.add_rocket(name)

    for name in manifest.missions:
        registry.add_mission(name)

    for mission_name, rocket_names in manifest.assignments.items():
        registry.assign_rockets_to_mission(mission_name, rocket_names)

    for rocket_name, status in manifest.rocket_status.items():
        registry.change_rocket_status(rocket_name, status)

    for mission_name, status in manifest.mission_status.items():
        registry.change_mission_status(mission_name, status)

    return registry


def registry_from_manifest(path: Path | None = None) -> FleetRegistry:
    """Build a fresh registry seeded from a manifest file."""
    return apply_manifest(FleetRegistry(), load_manifest(path))
