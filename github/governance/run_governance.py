#!/usr/bin/env python3
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

"""Apply label governance to the issue or pull request of a GitHub event.

Reads the triggering event payload, extracts ``/prefix value`` commands from
the comment (or pull request / issue body), and reconciles the configured
``prefix/value`` and ``needs/prefix`` labels. Optionally posts a comment and a
commit status as configured in the governance YAML.

Environment variables
---------------------
GITHUB_TOKEN        (required unless --dry-run)  Token used for the REST API.
GITHUB_REPOSITORY   Default for --repo.
GITHUB_EVENT_PATH   Default for --event-path.
GITHUB_SHA          Default for --ref (revision the config file is read from).
INPUT_CONFIG-PATH   Default for --config-path (``config-path`` action input).
RUNNER_DEBUG        '1' enables verbose output.

Usage
-----
    python3 -m governance.run_governance --config-path .github/governance.yml

Dry-run (reads from GitHub, performs no writes):
    python3 -m governance.run_governance --config-path .github/governance.yml --dry-run
"""

from __future__ import annotations

import argparse
import os
import sys

from github import GithubException

from governance.utils.commands import extract_commands
from governance.utils.common import (
    get_action_input,
    parse_bool_flag,
    parse_runner_debug,
    set_verbose_enabled,
    warn,
)
from governance.utils.config import Governance, load_governance
from governance.utils.event_context import load_event
from governance.utils.runner import run_governance
from shared.github_client import GitHubClient


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile prefixed labels on an issue / pull request from slash commands",
    )
    parser.add_argument(
        "--config-path",
        default=get_action_input("config-path"),
        help="Path of the governance YAML inside the repository (default: $INPUT_CONFIG-PATH).",
    )
    parser.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to the webhook event JSON (default: $GITHUB_EVENT_PATH).",
    )
    parser.add_argument(
        "--repo",
        default=os.environ.get("GITHUB_REPOSITORY"),
        help="GitHub repository in owner/repo format (default: $GITHUB_REPOSITORY).",
    )
    parser.add_argument(
        "--ref",
        default=os.environ.get("GITHUB_SHA"),
        help="Git ref to read the governance config from (default: $GITHUB_SHA).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print intended label / comment / status changes without applying them "
        "(also enabled by the dry-run action input).",
    )
    args = parser.parse_args(argv)

    missing = [
        flag
        for flag, value in (("--config-path", args.config_path), ("--event-path", args.event_path), ("--repo", args.repo))
        if not value
    ]
    if missing:
        parser.error(f"missing required option(s): {', '.join(missing)}")
    return args


def _resolve_token() -> str | None:
    return get_action_input("github-token") or os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")


def fetch_governance(client: GitHubClient, config_path: str, ref: str | None) -> Governance:
    text = client.get_file_content(config_path, ref=ref)
    print(f"Fetched governance config {config_path} from {client.repo_full_name}")
    return load_governance(text)


def main(argv: list[str] | None = None) -> None:
    set_verbose_enabled(parse_runner_debug())
    args = parse_args(argv)

    try:
        args.dry_run = args.dry_run or parse_bool_flag(get_action_input("dry-run"))
    except ValueError as exc:
        print(f"ERROR: invalid dry-run input: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    token = _resolve_token()
    if not token and not args.dry_run:
        raise SystemExit("ERROR: No token provided. Set GITHUB_TOKEN or the github-token input.")
    if not token:
        warn("No token provided – dry run uses unauthenticated API access")

    try:
        event = load_event(args.event_path)
        client = GitHubClient(args.repo, token)
        governance = fetch_governance(client, args.config_path, args.ref)

        commands = extract_commands(event.body)
        print(f"Parsed {len(commands)} command(s) from #{event.number}")
        run_governance(client, event, governance, commands=commands, dry_run=args.dry_run)
    except (ValueError, OSError, GithubException) as exc:
        print(f"ERROR: label governance failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("Label governance completed")


if __name__ == "__main__":
    main()
