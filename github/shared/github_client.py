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

"""GitHub REST operations used by label governance – label list/add/remove,
issue comments, commit statuses and repository file retrieval via PyGithub.

Errors raised by PyGithub (``GithubException``) are not caught here; a failed
call fails the run.
"""

from __future__ import annotations

from typing import Any

from github import Auth, Github
from github.GithubObject import NotSet


class GitHubClient:
    """Thin façade over one repository's issue, status and contents endpoints."""

    def __init__(self, repo_full_name: str, token: str | None = None, *, gh: Github | None = None) -> None:
        if gh is None:
            gh = Github(auth=Auth.Token(token)) if token else Github()
        self._gh = gh
        self.repo_full_name = repo_full_name
        self._repo: Any = None
        self._issues: dict[int, Any] = {}

    @property
    def repo(self) -> Any:
        if self._repo is None:
            self._repo = self._gh.get_repo(self.repo_full_name)
        return self._repo

    def _issue(self, number: int) -> Any:
        if number not in self._issues:
            self._issues[number] = self.repo.get_issue(number)
        return self._issues[number]

    def list_labels(self, number: int) -> set[str]:
        return {label.name for label in self._issue(number).get_labels()}

    def add_labels(self, number: int, names: list[str]) -> None:
        if not names:
            return
        self._issue(number).add_to_labels(*names)

    def delete_label(self, number: int, name: str) -> None:
        self._issue(number).remove_from_labels(name)

    def create_comment(self, number: int, body: str) -> None:
        self._issue(number).create_comment(body)

    def create_status(
        self,
        sha: str,
        *,
        context: str,
        state: str,
        target_url: str | None = None,
        description: str | None = None,
    ) -> None:
        self.repo.get_commit(sha).create_status(
            state=state,
            target_url=target_url if target_url else NotSet,
            description=description if description else NotSet,
            context=context,
        )

    def get_pull_head_sha(self, number: int) -> str:
        return str(self.repo.get_pull(number).head.sha)

    def get_file_content(self, path: str, ref: str | None = None) -> str:
        if ref:
            contents = self.repo.get_contents(path, ref=ref)
        else:
            contents = self.repo.get_contents(path)
        if isinstance(contents, list):
            raise ValueError(f"Expected a file at {path!r}, got a directory")
        return contents.decoded_content.decode("utf-8")
