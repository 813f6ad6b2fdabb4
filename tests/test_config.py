from __future__ import annotations

import pytest

from governance.utils.config import (
    Governance,
    GovernanceConfigError,
    NeedsConfig,
    StatusConfig,
    load_governance,
    parse_rule,
)

DOCUMENT = """
issue:
  - prefix: triage
    list: [accepted, rejected, accepted]
    multiple: false
    needs:
      comment: Please triage
pull_request:
  - prefix: kind
    list: [feature, fix]
    needs: true
  - prefix: review
    list: [approved]
    needs:
      status:
        context: Review
        url: https://example.com
        description:
          success: Reviewed
"""


def test_load_governance_parses_both_contexts() -> None:
    governance = load_governance(DOCUMENT)

    triage = governance.issue[0]
    assert triage.prefix == "triage"
    assert triage.values == ("accepted", "rejected")
    assert triage.multiple is False
    assert triage.needs == NeedsConfig(comment="Please triage")

    kind, review = governance.pull_request
    assert kind.multiple is True
    assert kind.needs == NeedsConfig()
    assert review.needs is not None
    assert review.needs.status == StatusConfig(
        context="Review", url="https://example.com", description={"success": "Reviewed"}
    )


def test_rule_labels() -> None:
    rule = parse_rule({"prefix": "kind", "list": ["fix", "docs"]})
    assert rule.needs_label == "needs/kind"
    assert rule.governed_labels() == ("kind/fix", "kind/docs")


@pytest.mark.parametrize("needs", [None, False])
def test_disabled_needs(needs) -> None:
    assert parse_rule({"prefix": "kind", "list": ["fix"], "needs": needs}).needs is None


def test_empty_needs_mapping_is_enabled() -> None:
    assert parse_rule({"prefix": "kind", "list": ["fix"], "needs": {}}).needs == NeedsConfig()


def test_empty_description_mapping_counts_as_configured() -> None:
    rule = parse_rule({"prefix": "kind", "list": ["fix"], "needs": {"status": {"context": "Kind", "description": {}}}})
    assert rule.needs is not None and rule.needs.status is not None
    assert rule.needs.status.description == {}


def test_missing_keys_give_empty_governance() -> None:
    assert load_governance("") == Governance()
    assert load_governance("issue:\n  - prefix: a\n    list: [x]\n").pull_request == ()


@pytest.mark.parametrize(
    "document",
    [
        "- just a list",
        "issue: nope",
        "issue:\n  - list: [a]",
        "issue:\n  - prefix: a",
        "issue:\n  - prefix: a\n    list: [x]\n    needs:\n      status:\n        url: https://x",
        "issue: [unclosed",
    ],
)
def test_invalid_documents_raise(document: str) -> None:
    with pytest.raises(GovernanceConfigError):
        load_governance(document)


@pytest.mark.parametrize("multiple", ['"false"', '"no"', "0", "[false]"])
def test_non_boolean_multiple_is_rejected(multiple: str) -> None:
    with pytest.raises(GovernanceConfigError, match="non-boolean 'multiple'"):
        load_governance(f"issue:\n  - prefix: triage\n    list: [a]\n    multiple: {multiple}\n")


def test_unquoted_yes_no_values_are_rejected() -> None:
    with pytest.raises(GovernanceConfigError, match="boolean in 'list'"):
        load_governance("issue:\n  - prefix: approved\n    list: [yes, no]\n")


def test_quoted_yes_no_and_numbers_are_kept_as_text() -> None:
    rule = load_governance("issue:\n  - prefix: approved\n    list: ['yes', 'no', 2]\n    multiple: false\n").issue[0]
    assert rule.values == ("yes", "no", "2")
    assert rule.multiple is False
