# Read-only catalog behind the RFC search, working-group dashboard and
# notifications panels. Fixtures live in data/*.yaml next to this file.

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

import yaml

from .rank import filter_notifications, match_rfc, match_working_group
from .types import RFC, Digest, Notification, NotificationPreference, WorkingGroup

FALLBACK_DIGEST = "newcomer"

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def _load_yaml(data_dir: str, name: str) -> Dict[str, Any]:
    path = os.path.join(data_dir, name)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Catalog fixture not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Catalog fixture {path} must be a mapping")
    return data


class Catalog:
    def __init__(
        self,
        rfcs: List[RFC],
        working_groups: List[WorkingGroup],
        notifications: List[Notification],
        preferences: List[NotificationPreference],
        digests: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.rfcs = rfcs
        self.working_groups = working_groups
        self.notifications = notifications
        self.preferences = preferences
        self.digests = digests or {}

    @classmethod
    def from_dir(cls, data_dir: str = DATA_DIR) -> "Catalog":
        rfc_data = _load_yaml(data_dir, "rfcs.yaml")
        wg_data = _load_yaml(data_dir, "working_groups.yaml")
        notif_data = _load_yaml(data_dir, "notifications.yaml")
        return cls(
            rfcs=[RFC(**r) for r in rfc_data.get("rfcs", [])],
            working_groups=[WorkingGroup(**w) for w in wg_data.get("working_groups", [])],
            notifications=[Notification(**n) for n in notif_data.get("notifications", [])],
            preferences=[NotificationPreference(**p) for p in notif_data.get("preferences", [])],
            digests=notif_data.get("digests", {}),
        )

    # -------------------------
    # RFCs
    # -------------------------
    def search_rfcs(self, query: str = "", status: Optional[str] = None, category: Optional[str] = None) -> List[RFC]:
        return [r for r in self.rfcs if match_rfc(r, query, status, category)]

    def get_rfc(self, number: str) -> Optional[RFC]:
        number = number.strip()
        if number.upper().startswith("RFC"):
            number = number[3:].strip()
        return next((r for r in self.rfcs if r.number == number), None)

    # -------------------------
    # Working groups
    # -------------------------
    def search_working_groups(
        self, query: str = "", area: Optional[str] = None, status: Optional[str] = None
    ) -> List[WorkingGroup]:
        return [wg for wg in self.working_groups if match_working_group(wg, query, area, status)]

    def get_working_group(self, acronym: str) -> Optional[WorkingGroup]:
        key = acronym.strip().upper()
        return next((wg for wg in self.working_groups if wg.acronym.upper() == key), None)

    def areas(self) -> List[str]:
        """Distinct areas, in catalog order."""
        return list(dict.fromkeys(wg.area for wg in self.working_groups))

    # -------------------------
    # Notifications
    # -------------------------
    def list_notifications(self, mode: str = "all", audience: Optional[str] = None) -> List[Notification]:
        return filter_notifications(self.notifications, mode, audience)

    def unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.read)

    def digest_for(self, audience: str) -> Digest:
        """Weekly digest for an audience; unrecognized audiences get the newcomer one."""
        entry = self.digests.get(audience) or self.digests.get(FALLBACK_DIGEST)
        if entry is None:
            raise KeyError(f"No digest configured for '{audience}'")
        return Digest(audience=audience, title=entry.get("title", ""), content=entry.get("content", []))


@lru_cache(maxsize=1)
def load_catalog() -> Catalog:
    return Catalog.from_dir(DATA_DIR)
