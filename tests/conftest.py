from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1] / "github"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from governance.utils import common


class FakeClient:
    """Records every collaborator call instead of talking to GitHub."""

    def __init__(self, labels: tuple[str, ...] = (), head_sha: str = "abc123") -> None:
        self.labels = set(labels)
        self.head_sha = head_sha
        self.calls: list[tuple[Any, ...]] = []

    def list_labels(self, number: int) -> set[str]:
        self.calls.append(("list_labels", number))
        return set(self.labels)

    def add_labels(self, number: int, names: list[str]) -> None:
        self.calls.append(("add_labels", number, list(names)))

    def delete_label(self, number: int, name: str) -> None:
        self.calls.append(("delete_label", number, name))

    def create_comment(self, number: int, body: str) -> None:
        self.calls.append(("create_comment", number, body))

    def create_status(self, sha: str, **payload: Any) -> None:
        self.calls.append(("create_status", sha, payload))

    def get_pull_head_sha(self, number: int) -> str:
        self.calls.append(("get_pull_head_sha", number))
        return self.head_sha

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture(autouse=True)
def _quiet_verbose():
    common.set_verbose_enabled(False)
    yield
    common.set_verbose_enabled(False)
