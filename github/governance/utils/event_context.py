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

"""Triggering event context – resolves the webhook payload once into an
explicit ``IssueEvent | PullRequestEvent | CommentEvent`` value.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

ACTION_OPENED = "opened"


class EventContextError(ValueError):
    """The payload carries neither an issue nor a pull request."""


@dataclass(frozen=True)
class IssueEvent:
    number: int
    action: str
    body: str


@dataclass(frozen=True)
class PullRequestEvent:
    number: int
    action: str
    body: str
    head_sha: str | None


@dataclass(frozen=True)
class CommentEvent:
    """A comment on an issue or pull request (``issue_comment`` / review comment)."""
    number: int
    action: str
    body: str
    on_pull_request: bool
    head_sha: str | None = None


EventContext = Union[IssueEvent, PullRequestEvent, CommentEvent]


def is_opened(event: EventContext) -> bool:
    return event.action == ACTION_OPENED


def is_pull_request(event: EventContext) -> bool:
    if isinstance(event, CommentEvent):
        return event.on_pull_request
    return isinstance(event, PullRequestEvent)


def _as_dict(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) and value else None


def select_body(payload: dict[str, Any]) -> str:
    """Return the command source text: comment, then pull request, then issue body."""
    content = (
        _as_dict(payload.get("comment"))
        or _as_dict(payload.get("pull_request"))
        or _as_dict(payload.get("issue"))
    )
    if content is None:
        return ""
    return str(content.get("body") or "")


def _number(obj: dict[str, Any]) -> int:
    try:
        return int(obj.get("number"))
    except (TypeError, ValueError) as exc:
        raise EventContextError(f"Event payload has no usable number: {obj.get('number')!r}") from exc


def _head_sha(pull_request: dict[str, Any]) -> str | None:
    head = pull_request.get("head")
    if isinstance(head, dict) and head.get("sha"):
        return str(head["sha"])
    return None


def parse_event(payload: dict[str, Any]) -> EventContext:
    """Resolve *payload* into an event context.

    Raises EventContextError when neither an issue nor a pull request is present.
    """
    action = str(payload.get("action") or "")
    body = select_body(payload)
    issue = _as_dict(payload.get("issue"))
    pull_request = _as_dict(payload.get("pull_request"))

    if _as_dict(payload.get("comment")):
        if issue is not None:
            return CommentEvent(
                number=_number(issue),
                action=action,
                body=body,
                on_pull_request=bool(issue.get("pull_request")),
            )
        if pull_request is not None:
            return CommentEvent(
                number=_number(pull_request),
                action=action,
                body=body,
                on_pull_request=True,
                head_sha=_head_sha(pull_request),
            )

    if issue is not None:
        return IssueEvent(number=_number(issue), action=action, body=body)

    if pull_request is not None:
        return PullRequestEvent(
            number=_number(pull_request),
            action=action,
            body=body,
            head_sha=_head_sha(pull_request),
        )

    raise EventContextError("Could not get pull_request or issue from context")


def load_event(path: str) -> EventContext:
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, dict):
        raise EventContextError(f"Event payload in {path} is not a JSON object")
    return parse_event(payload)
