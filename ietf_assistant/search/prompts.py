# Audience-specific blurbs for the RFC search and working-group panels.

from __future__ import annotations
from typing import Optional

from .types import RFC, WorkingGroup


def explain_working_group(wg: WorkingGroup, audience: Optional[str]) -> Optional[str]:
    """Paragraph telling the selected persona why this group matters.

    Returns None without an audience; anything other than policymaker or
    technical gets the newcomer text.
    """
    if not audience:
        return None
    topics = ", ".join(wg.hot_topics)
    if audience == "policymaker":
        return (
            f"Policy Relevance: The {wg.name} working group influences {wg.area.lower()} standards "
            f"that affect internet governance, security policies, and regulatory compliance. "
            f"Their work on {topics} has direct implications for policy frameworks."
        )
    if audience == "technical":
        return (
            f"Technical Focus: This working group maintains {wg.rfcs_published} published RFCs and "
            f"{wg.active_drafts} active drafts. Key technical areas include {topics}. "
            f"Monitor their GitHub repository and mailing list for implementation details."
        )
    first_topic = wg.hot_topics[0] if wg.hot_topics else "new standards"
    return (
        f"What They Do: The {wg.name} working group is like a committee of experts who create the "
        f"rules for {wg.area.lower()} on the internet. They're currently working on {first_topic} "
        f"and other important technologies that help keep the internet running smoothly."
    )


def explain_rfc(rfc: RFC, audience: Optional[str]) -> Optional[str]:
    """Persona-specific reading of one RFC; None without an audience."""
    if not audience:
        return None
    if audience == "policymaker":
        return (
            f"Policy Impact: This {rfc.status} document affects internet governance and may have "
            f"regulatory implications. Key areas include data privacy, security standards, and "
            f"interoperability requirements."
        )
    if audience == "technical":
        return (
            f"Technical Details: This specification defines implementation requirements for "
            f"{', '.join(rfc.keywords)}. Review the normative references and security considerations "
            f"sections for implementation guidance."
        )
    topic = rfc.keywords[0] if rfc.keywords else "internet technologies"
    adoption = "widely adopted" if rfc.category == "Internet Standard" else "being developed"
    return (
        f"Beginner Summary: This document is a {rfc.status.lower()} that helps define how {topic} "
        f"work. It's {adoption} by the internet community."
    )
