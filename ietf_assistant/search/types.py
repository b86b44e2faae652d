# Data models for the catalog panels (RFCs, working groups, notifications).
# Records are loaded from the YAML fixtures in data/ and never mutated.

from __future__ import annotations
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RFC(BaseModel):
    number: str
    title: str
    status: str
    category: str
    date: str
    authors: List[str] = Field(default_factory=list)
    abstract: str = ""
    obsoletes: List[str] = Field(default_factory=list)
    obsoleted_by: List[str] = Field(default_factory=list)
    updates: List[str] = Field(default_factory=list)
    updated_by: List[str] = Field(default_factory=list)
    working_group: Optional[str] = None
    area: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class ActivityItem(BaseModel):
    type: str
    title: str
    date: str
    description: str = ""


class Milestone(BaseModel):
    title: str
    status: str
    due_date: str
    progress: int = 0


class WorkingGroup(BaseModel):
    acronym: str
    name: str
    area: str
    status: str
    chairs: List[str] = Field(default_factory=list)
    description: str = ""
    charter: str = ""
    active_drafts: int = 0
    rfcs_published: int = 0
    last_meeting: Optional[str] = None
    next_meeting: Optional[str] = None
    mailing_list: Optional[str] = None
    github_repo: Optional[str] = None
    recent_activity: List[ActivityItem] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)
    hot_topics: List[str] = Field(default_factory=list)


class Notification(BaseModel):
    id: str
    type: str
    title: str
    description: str = ""
    age_hours: float = 0
    read: bool = False
    priority: str = "low"
    metadata: Dict[str, str] = Field(default_factory=dict)
    audience_relevance: List[str] = Field(default_factory=list)


class NotificationPreference(BaseModel):
    id: str
    category: str
    title: str
    description: str = ""
    enabled: bool = False
    frequency: str = "weekly"
    channels: List[str] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    """Counters shown above the working-group list."""
    active_groups: int
    active_drafts: int
    rfcs_published: int
    upcoming_meetings: int


class Digest(BaseModel):
    """Weekly digest tailored to one audience."""
    audience: str
    title: str
    content: List[str] = Field(default_factory=list)
