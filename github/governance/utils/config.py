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

"""Governance configuration – the per-prefix label rules for issues and pull
requests, parsed from the YAML document referenced by the ``config-path``
action input.

Example document::

    issue:
      - prefix: triage
        list: [accepted, rejected]
        multiple: false
        needs:
          comment: "@maintainers please triage with `/triage accepted`."
    pull_request:
      - prefix: kind
        list: [feature, fix, chore]
        needs:
          status:
            context: Kind
            url: https://example.com/contributing
            description:
              success: Kind label present
              failure: Comment `/kind <value>` to set one
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


class GovernanceConfigError(ValueError):
    """The governance document cannot be turned into rules."""


@dataclass(frozen=True)
class StatusConfig:
    context: str
    url: str | None = None
    # None means no ``description`` mapping configured; an empty dict is still "configured".
    description: dict[str, str] | None = None


@dataclass(frozen=True)
class NeedsConfig:
    comment: str | None = None
    status: StatusConfig | None = None


@dataclass(frozen=True)
class GovernanceRule:
    prefix: str
    values: tuple[str, ...]
    multiple: bool = True
    needs: NeedsConfig | None = None

    @property
    def needs_label(self) -> str:
        return f"needs/{self.prefix}"

    def governed_label(self, value: str) -> str:
        return f"{self.prefix}/{value}"

    def governed_labels(self) -> tuple[str, ...]:
        return tuple(self.governed_label(v) for v in self.values)


@dataclass(frozen=True)
class Governance:
    issue: tuple[GovernanceRule, ...] = field(default_factory=tuple)
    pull_request: tuple[GovernanceRule, ...] = field(default_factory=tuple)


def _parse_status(raw: Any, prefix: str) -> StatusConfig | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise GovernanceConfigError(f"needs.status for prefix {prefix!r} must be a mapping")

    context = str(raw.get("context") or "").strip()
    if not context:
        raise GovernanceConfigError(f"needs.status.context is required for prefix {prefix!r}")

    url = raw.get("url")
    description: dict[str, str] | None = None
    raw_desc = raw.get("description")
    if isinstance(raw_desc, dict):
        description = {str(k): str(v) for k, v in raw_desc.items() if v is not None}

    return StatusConfig(context=context, url=str(url) if url else None, description=description)


def _parse_needs(raw: Any, prefix: str) -> NeedsConfig | None:
    if raw is None or raw is False:
        return None
    if raw is True:
        return NeedsConfig()
    if not isinstance(raw, dict):
        raise GovernanceConfigError(f"needs for prefix {prefix!r} must be true or a mapping")

    comment = raw.get("comment")
    return NeedsConfig(
        comment=str(comment) if comment else None,
        status=_parse_status(raw.get("status"), prefix),
    )


def parse_rule(raw: Any) -> GovernanceRule:
    if not isinstance(raw, dict):
        raise GovernanceConfigError(f"Label rule must be a mapping, got {type(raw).__name__}")

    prefix = str(raw.get("prefix") or "").strip()
    if not prefix:
        raise GovernanceConfigError("Label rule is missing 'prefix'")

    raw_list = raw.get("list")
    if not isinstance(raw_list, list):
        raise GovernanceConfigError(f"Label rule {prefix!r} is missing 'list'")

    # YAML 1.1 reads unquoted yes/no/on/off as booleans; those never name a label value.
    if any(isinstance(v, bool) for v in raw_list):
        raise GovernanceConfigError(
            f"Label rule {prefix!r} has a boolean in 'list'; quote values like 'yes' or 'no'"
        )

    # Duplicates collapse onto the first occurrence.
    values = tuple(dict.fromkeys(str(v) for v in raw_list if v is not None))

    multiple = raw.get("multiple")
    if multiple is not None and not isinstance(multiple, bool):
        raise GovernanceConfigError(f"Label rule {prefix!r} has non-boolean 'multiple': {multiple!r}")

    return GovernanceRule(
        prefix=prefix,
        values=values,
        multiple=True if multiple is None else multiple,
        needs=_parse_needs(raw.get("needs"), prefix),
    )


def _parse_rules(raw: Any, key: str) -> tuple[GovernanceRule, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise GovernanceConfigError(f"'{key}' must be a list of label rules")
    return tuple(parse_rule(item) for item in raw)


def parse_governance(data: Any) -> Governance:
    if data is None:
        return Governance()
    if not isinstance(data, dict):
        raise GovernanceConfigError("Governance config must be a mapping with 'issue' / 'pull_request' keys")
    return Governance(
        issue=_parse_rules(data.get("issue"), "issue"),
        pull_request=_parse_rules(data.get("pull_request"), "pull_request"),
    )


def load_governance(text: str) -> Governance:
    """Parse the YAML governance document *text*."""
    try:
        data = yaml.safe_load(text or "")
    except yaml.YAMLError as exc:
        raise GovernanceConfigError(f"Failed to parse governance YAML: {exc}") from exc
    return parse_governance(data)
