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

"""Slash-command extraction – text normalisation, HTML-comment stripping,
line lexing and prefix lookup of ``/command arg arg`` lines.

Extraction runs as independent stages::

    normalize_line_endings -> strip_html_comments -> CandidateLines -> match_command

so each stage can be tested on its own.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Exactly one leading slash followed by at least one character ("//" is not a command).
COMMAND_RE = re.compile(r"^/(?!/).+")

# Authors hide commands from re-triggering by wrapping them in HTML comments.
HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.S)


def normalize_line_endings(text: str) -> str:
    return (text or "").replace("\r\n", "\n").replace("\r", "\n")


def strip_html_comments(text: str) -> str:
    return HTML_COMMENT_RE.sub("", text or "")


class CandidateLines:
    """Lazy, re-iterable view over the lines of a text block."""

    def __init__(self, text: str) -> None:
        self._text = text or ""

    def __iter__(self) -> Iterator[str]:
        if not self._text:
            return
        start = 0
        while True:
            end = self._text.find("\n", start)
            if end == -1:
                yield self._text[start:]
                return
            yield self._text[start:end]
            start = end + 1


def _split_args(remainder: str) -> tuple[str, ...]:
    stripped = remainder.strip()
    if not stripped:
        return ()
    return tuple(stripped.split(" "))


@dataclass(frozen=True)
class Command:
    text: str
    args: tuple[str, ...] = ()

    def with_prefix(self, prefix: str) -> "Command":
        """Return this command with ``args`` computed relative to ``prefix + " "``."""
        head = prefix + " "
        remainder = self.text[len(head):] if self.text.startswith(head) else ""
        return Command(text=self.text, args=_split_args(remainder))


def match_command(line: str) -> Command | None:
    match = COMMAND_RE.match(line or "")
    if match is None:
        return None
    return Command(text=match.group(0))


class Commands:
    """Ordered collection of commands in their order of appearance."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self.commands: tuple[Command, ...] = tuple(commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return bool(self.commands)

    def __repr__(self) -> str:
        return f"Commands({[c.text for c in self.commands]!r})"

    def prefix(self, start: str) -> tuple[Command, ...]:
        """Return every command starting with *start*, args relative to ``start + " "``.

        Matching is case-sensitive and on the raw text, so ``/triage`` also
        selects ``/triage-remove x``; such a command has no args here because
        its text does not continue with ``"/triage "``.
        """
        return tuple(c.with_prefix(start) for c in self.commands if c.text.startswith(start))


def extract_commands(text: str) -> Commands:
    """Parse *text* into the ordered commands it contains."""
    cleaned = strip_html_comments(normalize_line_endings(text))
    found: list[Command] = []
    for line in CandidateLines(cleaned):
        command = match_command(line)
        if command is not None:
            found.append(command)
    return Commands(found)
