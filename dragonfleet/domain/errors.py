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
# FLEET ERRORS
# -----------------------------------------------------------------------------
# Two kinds of failure exist in the registry:
# - InvalidArgumentError: the request itself is malformed (blank name,
#   unknown status, a name that is not registered, a duplicate name).
# - InvalidStateError: the request is well-formed but breaks an entity or
#   transition rule (double assignment, touching an ENDED mission, ...).
# -----------------------------------------------------------------------------


class FleetError(Exception):
    """
    Base class for every registry failure.

    Carries the name of the rocket or mission involved (when there is one)
    so callers can report it without parsing the message.
    """

    def __init__(self, message: str, entity: str | None = None) -> None:
        super().__init__(message)
        self.entity = entity


class InvalidArgumentError(FleetError, ValueError):
    """Raised for malformed input or unsupported status targets."""


class NotFoundError(InvalidArgumentError):
    """
    Raised when a rocket or mission name is not registered.

    `kind` is "rocket" or "mission".
    """

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} not found: {name}", entity=name)
        self.kind = kind


class AlreadyExistsError(InvalidArgumentError):
    """Raised when registering a name that is already taken."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind.capitalize()} {name} already exists.", entity=name)
        self.kind = kind


class InvalidStateError(FleetError):
    """Raised when an operation would break an entity or transition invariant."""
