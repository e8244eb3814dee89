# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The business logic of the fleet:
# - FleetRegistry: owns rockets and missions, runs every operation
# - StatusPolicy: automatic and manual mission status rules
# - Summary: deterministic text report and rich tree
# - Manifest: YAML seeding of a registry
# - Console: stderr logging shared by the registry and manifest
# -----------------------------------------------------------------------------

from .policy import StatusPolicy
from .registry import FleetRegistry, FleetSnapshot, MissionRecord, RocketRecord
from .summary import build_summary_tree, format_summary, sort_missions
from .manifest import (
    FleetManifest,
    apply_manifest,
    default_manifest_path,
    load_manifest,
    registry_from_manifest,
)

__all__ = [
    "StatusPolicy",
    "FleetRegistry", "FleetSnapshot", "MissionRecord", "RocketRecord",
    "build_summary_tree", "format_summary", "sort_missions",
    "FleetManifest", "apply_manifest", "default_manifest_path", "load_manifest",
    "registry_from_manifest",
]
