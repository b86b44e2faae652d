# ===============================================
# Prompt builder: base directive + audience clause
# ===============================================

import pytest

from ietf_assistant.generate.prompts import AUDIENCE_CLAUSES, BASE_DIRECTIVE, build_system_prompt


@pytest.mark.parametrize("audience", ["policymaker", "technical", "newcomer"])
def test_known_audience_appends_clause(audience):
    out = build_system_prompt(audience)
    assert out.startswith(BASE_DIRECTIVE)
    assert out.endswith(AUDIENCE_CLAUSES[audience])
    assert f"\nAudience: {audience}. " in out


@pytest.mark.parametrize("audience", [None, ""])
def test_absent_audience_is_base_only(audience):
    assert build_system_prompt(audience) == BASE_DIRECTIVE


def test_unknown_audience_keeps_label_without_clause():
    out = build_system_prompt("lawyer")
    assert out == f"{BASE_DIRECTIVE}\nAudience: lawyer. "


def test_base_mentions_sources():
    assert "datatracker.ietf.org" in BASE_DIRECTIVE
    assert "rfc-editor.org" in BASE_DIRECTIVE
