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

"""Governance orchestration – picks the rule set for the event, reconciles
each configured prefix against one label snapshot and applies the plans.
"""

from __future__ import annotations

from typing import Any, Protocol

from .commands import Commands, extract_commands
from .common import vprint
from .config import Governance, GovernanceRule
from .event_context import CommentEvent, EventContext, IssueEvent, is_opened, is_pull_request
from .label_reconciler import reconcile
from .models import LabelPlan


class GovernanceClient(Protocol):
    def list_labels(self, number: int) -> set[str]: ...
    def add_labels(self, number: int, names: list[str]) -> None: ...
    def delete_label(self, number: int, name: str) -> None: ...
    def create_comment(self, number: int, body: str) -> None: ...
    def create_status(self, sha: str, **payload: Any) -> None: ...
    def get_pull_head_sha(self, number: int) -> str: ...


def select_rules(governance: Governance, event: EventContext) -> tuple[GovernanceRule, ...]:
    if is_pull_request(event):
        return governance.pull_request
    return governance.issue


class _HeadShaResolver:
    """Looks up the pull request head commit at most once per run."""

    def __init__(self, client: GovernanceClient, event: EventContext) -> None:
        self._client = client
        self._event = event
        self._resolved = False
        self._sha: str | None = None

    def get(self) -> str | None:
        if not self._resolved:
            self._sha = self._lookup()
            self._resolved = True
        return self._sha

    def _lookup(self) -> str | None:
        event = self._event
        if isinstance(event, IssueEvent):
            return None
        if isinstance(event, CommentEvent) and not event.on_pull_request:
            return None
        if event.head_sha:
            return event.head_sha
        # issue_comment payloads on pull requests carry no head commit.
        return self._client.get_pull_head_sha(event.number)


def apply_plan(
    client: GovernanceClient,
    number: int,
    plan: LabelPlan,
    *,
    head_sha: _HeadShaResolver | None = None,
    dry_run: bool = False,
) -> None:
    if plan.is_noop:
        vprint(f"[{plan.prefix}] nothing to do for #{number}")
        return

    if plan.add:
        if dry_run:
            print(f"DRY-RUN: would add labels {plan.add} to #{number}")
        else:
            print(f"Adding labels {plan.add} to #{number}")
            client.add_labels(number, plan.add)

    for label in plan.remove:
        if dry_run:
            print(f"DRY-RUN: would remove label {label!r} from #{number}")
        else:
            print(f"Removing label {label!r} from #{number}")
            client.delete_label(number, label)

    if plan.comment:
        if dry_run:
            print(f"DRY-RUN: would comment on #{number} ({len(plan.comment)} chars)")
        else:
            print(f"Commenting on #{number} for missing {plan.prefix!r} label")
            client.create_comment(number, plan.comment)

    if plan.status is None:
        return

    sha = head_sha.get() if head_sha is not None else None
    if not sha:
        vprint(f"[{plan.prefix}] no commit for #{number} – skipping status {plan.status.context!r}")
        return

    if dry_run:
        print(f"DRY-RUN: would set status {plan.status.to_dict()} on {sha[:12]}")
        return
    print(f"Setting status {plan.status.context!r}={plan.status.state} on {sha[:12]}")
    client.create_status(sha, **plan.status.to_dict())


def run_governance(
    client: GovernanceClient,
    event: EventContext,
    governance: Governance,
    *,
    commands: Commands | None = None,
    dry_run: bool = False,
) -> list[LabelPlan]:
    """Reconcile every rule configured for *event* and apply the plans in order.

    The label snapshot is taken once; one prefix's changes do not feed into
    the next prefix's decisions.
    """
    rules = select_rules(governance, event)
    kind = "pull_request" if is_pull_request(event) else "issue"
    if not rules:
        print(f"No {kind} label rules configured – nothing to do")
        return []

    if commands is None:
        commands = extract_commands(event.body)
    vprint(f"Parsed {len(commands)} command(s): {[c.text for c in commands]}")

    labels = client.list_labels(event.number)
    vprint(f"Labels on #{event.number}: {sorted(labels)}")

    opened = is_opened(event)
    head_sha = _HeadShaResolver(client, event)
    plans: list[LabelPlan] = []
    for rule in rules:
        plan = reconcile(rule, commands, labels, opened=opened)
        apply_plan(client, event.number, plan, head_sha=head_sha, dry_run=dry_run)
        plans.append(plan)

    print(f"Processed {len(plans)} {kind} label rule(s) for #{event.number}")
    return plans
