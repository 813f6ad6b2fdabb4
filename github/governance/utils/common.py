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

"""Shared low-level utilities – logging control and GitHub Actions
environment helpers.
"""

from __future__ import annotations

import os
import sys

_verbose_enabled = False


def parse_runner_debug() -> bool:
    raw = os.getenv("RUNNER_DEBUG")
    if raw is None or raw == "":
        return False
    if raw not in {"0", "1"}:
        raise SystemExit("ERROR: RUNNER_DEBUG must be '0' or '1' when set")
    return raw == "1"


def set_verbose_enabled(value: bool) -> None:
    global _verbose_enabled
    _verbose_enabled = bool(value)


def vprint(msg: str) -> None:
    if _verbose_enabled:
        print(msg)


def warn(msg: str) -> None:
    print(f"WARN: {msg}", file=sys.stderr)


def get_action_input(name: str, default: str | None = None) -> str | None:
    """Return the value of action input *name* from the runner environment.

    The runner exports inputs as ``INPUT_<NAME>`` with the name upper-cased and
    spaces replaced by underscores; hyphens are kept as-is.  The underscore
    spelling is accepted too so the script can be driven from a plain shell.
    """
    key = name.strip().upper().replace(" ", "_")
    for candidate in (f"INPUT_{key}", f"INPUT_{key.replace('-', '_')}"):
        raw = os.getenv(candidate)
        if raw is not None and raw.strip() != "":
            return raw.strip()
    return default


def parse_bool_flag(raw: str | None) -> bool:
    value = (raw or "").strip().lower()
    if value in {"", "0", "false", "no", "off"}:
        return False
    if value in {"1", "true", "yes", "on"}:
        return True
    raise ValueError(f"Unsupported boolean value: {raw!r}")
