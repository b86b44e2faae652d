# System instruction for the assistant, conditioned on the audience persona.

from typing import Optional

BASE_DIRECTIVE = (
    "You are the IETF AI Assistant. Answer questions about IETF, RFCs, drafts, and Working Groups. "
    "When discussing RFCs, cite RFC numbers explicitly and be precise. "
    "If unsure, say so and suggest where to look (datatracker.ietf.org, rfc-editor.org). "
    "Be concise and accurate."
)

AUDIENCE_CLAUSES = {
    "policymaker": (
        "Use plain language, emphasize governance, policy implications, and high-level outcomes."
    ),
    "technical": (
        "Use technical language, include protocol details, status "
        "(Proposed/Internet Standard/BCP/etc.), and relevant obsoletes/updates."
    ),
    "newcomer": (
        "Explain concepts simply, avoid jargon, provide helpful examples and learning paths."
    ),
}

AUDIENCES = tuple(AUDIENCE_CLAUSES)


def build_system_prompt(audience: Optional[str] = None) -> str:
    """Base directive, plus an ``Audience:`` line when a persona is given.

    Unknown audiences keep the label but get an empty clause.
    """
    if not audience:
        return BASE_DIRECTIVE
    return f"{BASE_DIRECTIVE}\nAudience: {audience}. {AUDIENCE_CLAUSES.get(audience, '')}"
