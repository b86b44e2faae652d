# Stateless filter helpers for the catalog panels.
# "all" (or an empty value) on any facet matches everything.

from __future__ import annotations
from typing import Iterable, List, Optional

from .types import RFC, DashboardSummary, Notification, WorkingGroup

NOTIFICATION_FILTERS = ("all", "unread", "high", "relevant")


def _facet(value: Optional[str], wanted: Optional[str]) -> bool:
    return not wanted or wanted == "all" or value == wanted


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def match_rfc(rfc: RFC, query: str = "", status: Optional[str] = None, category: Optional[str] = None) -> bool:
    # number match is case-sensitive, text fields are not
    q = query.lower()
    matches_search = (
        query in rfc.number
        or _contains(rfc.title, q)
        or any(_contains(a, q) for a in rfc.authors)
        or any(_contains(k, q) for k in rfc.keywords)
    )
    return matches_search and _facet(rfc.status, status) and _facet(rfc.category, category)


def match_working_group(
    wg: WorkingGroup, query: str = "", area: Optional[str] = None, status: Optional[str] = None
) -> bool:
    q = query.lower()
    matches_search = (
        _contains(wg.acronym, q)
        or _contains(wg.name, q)
        or _contains(wg.description, q)
        or any(_contains(t, q) for t in wg.hot_topics)
    )
    return matches_search and _facet(wg.area, area) and _facet(wg.status, status)


def filter_notifications(
    notifications: Iterable[Notification], mode: str = "all", audience: Optional[str] = None
) -> List[Notification]:
    if mode not in NOTIFICATION_FILTERS:
        raise ValueError(f"Unknown notification filter: {mode}")
    out = []
    for n in notifications:
        if mode == "unread" and n.read:
            continue
        if mode == "high" and n.priority != "high":
            continue
        if mode == "relevant" and audience not in n.audience_relevance:
            continue
        out.append(n)
    return out


def summarize_working_groups(groups: Iterable[WorkingGroup]) -> DashboardSummary:
    groups = list(groups)
    return DashboardSummary(
        active_groups=sum(1 for wg in groups if wg.status == "Active"),
        active_drafts=sum(wg.active_drafts for wg in groups),
        rfcs_published=sum(wg.rfcs_published for wg in groups),
        upcoming_meetings=sum(1 for wg in groups if wg.next_meeting),
    )
