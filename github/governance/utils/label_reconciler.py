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

"""Label reconciliation – computes, for one governed label prefix, which
labels to add and remove, whether the ``needs/<prefix>`` marker belongs on
the issue, and which comment / commit status to post.

The computation is pure: it only looks at the rule, the parsed commands,
the current label snapshot and whether the event is an "opened" event.
Applying the resulting ``LabelPlan`` is the runner's job.
"""

from __future__ import annotations

from collections.abc import Iterable

from .commands import Commands
from .common import vprint
from .config import GovernanceRule, StatusConfig
from .models import STATUS_FAILURE, STATUS_PENDING, STATUS_SUCCESS, LabelPlan, StatusPayload


def _directive_values(commands: Commands, start: str, allowed: set[str]) -> list[str]:
    """Return the allowed argument values of every ``start <values...>`` command, in order."""
    values: list[str] = []
    for command in commands.prefix(start):
        values.extend(arg for arg in command.args if arg in allowed)
    return values


def _append_once(target: list[str], label: str) -> None:
    if label not in target:
        target.append(label)


def _resolve_status(status: StatusConfig, has_governed: bool) -> StatusPayload:
    if has_governed:
        state = STATUS_SUCCESS
    elif status.description is not None:
        state = STATUS_FAILURE
    else:
        state = STATUS_PENDING

    description = (status.description or {}).get(state) or None
    return StatusPayload(
        context=status.context,
        state=state,
        target_url=status.url,
        description=description,
    )


def reconcile(
    rule: GovernanceRule,
    commands: Commands,
    labels: Iterable[str],
    *,
    opened: bool = False,
) -> LabelPlan:
    """Compute the label plan for *rule* given the current *labels*.

    Removal directives (``/<prefix>-remove v``) win over apply directives
    (``/<prefix> v``) for the same value.  With ``multiple: false`` the last
    valid value of all apply directives is kept and every other governed
    label is dropped.
    """
    current = set(labels)
    allowed = set(rule.values)
    plan = LabelPlan(prefix=rule.prefix)

    current_governed = [label for label in rule.governed_labels() if label in current]
    current_needs = rule.needs_label in current

    withdrawn: set[str] = set()
    for value in _directive_values(commands, f"/{rule.prefix}-remove", allowed):
        label = rule.governed_label(value)
        withdrawn.add(label)
        if label in current:
            _append_once(plan.remove, label)

    # A value named by a removal directive is never added back in the same pass.
    requested = [
        rule.governed_label(value)
        for value in _directive_values(commands, f"/{rule.prefix}", allowed)
        if rule.governed_label(value) not in withdrawn
    ]

    if rule.multiple:
        for label in requested:
            if label not in current:
                _append_once(plan.add, label)
    elif requested:
        target = requested[-1]
        if target not in current:
            plan.add.append(target)
        for label in current_governed:
            if label != target:
                _append_once(plan.remove, label)

    governed_added = bool(plan.add)
    plan.has_governed = governed_added or any(label not in plan.remove for label in current_governed)

    # `/needs <prefix>` asks for the marker even when the rule does not configure `needs`.
    needs_requested = any(rule.prefix in command.args for command in commands.prefix("/needs"))

    needs_added = False
    if plan.has_governed:
        if current_needs:
            _append_once(plan.remove, rule.needs_label)
    elif not current_needs and (rule.needs is not None or needs_requested) and not governed_added:
        plan.add.append(rule.needs_label)
        needs_added = True

    if rule.needs is not None and rule.needs.comment and needs_added and opened:
        plan.comment = rule.needs.comment

    if rule.needs is not None and rule.needs.status is not None:
        plan.status = _resolve_status(rule.needs.status, plan.has_governed)

    vprint(
        f"reconcile[{rule.prefix}]: current={sorted(current_governed)} needs={current_needs} "
        f"add={plan.add} remove={plan.remove} governed={plan.has_governed}"
    )
    return plan
