#
# Copyright 2026 ABSA Group Limited
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
#

"""Governance result models."""

from __future__ import annotations

from dataclasses import dataclass, field

STATUS_PENDING = "pending"
STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


@dataclass(frozen=True)
class StatusPayload:
    context: str
    state: str
    target_url: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"context": self.context, "state": self.state}
        if self.target_url:
            data["target_url"] = self.target_url
        if self.description:
            data["description"] = self.description
        return data


@dataclass
class LabelPlan:
    """Side effects computed for one label prefix."""
    prefix: str
    add: list[str] = field(default_factory=list)
    remove: list[str] = field(default_factory=list)
    comment: str | None = None
    status: StatusPayload | None = None
    has_governed: bool = False

    @property
    def is_noop(self) -> bool:
        return not (self.add or self.remove or self.comment or self.status)

    def resulting_labels(self, current: set[str]) -> set[str]:
        """Return *current* with this plan's additions and removals applied."""
        return (set(current) - set(self.remove)) | set(self.add)
