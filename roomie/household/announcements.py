"""Soft expiry and group scoping for announcements.

Expired announcements stay in the store; they are filtered out when read.
"""

import datetime as dt
from typing import Iterable, List, Optional

from roomie.household.types import Announcement, as_utc


def is_announcement_active(announcement: Announcement, now: dt.datetime) -> bool:
    if announcement.due_date is None:
        return True
    return announcement.due_date >= as_utc(now)


def active_announcements(announcements: Iterable[Announcement], now: dt.datetime) -> List[Announcement]:
    return [a for a in announcements if is_announcement_active(a, now)]


def is_visible_to(announcement: Announcement, group_ids: Iterable[str]) -> bool:
    """Unscoped announcements reach everyone; scoped ones only their group."""
    return announcement.group_id is None or announcement.group_id in set(group_ids)


def expiry_label(announcement: Announcement, now: dt.datetime) -> Optional[str]:
    if announcement.due_date is None:
        return None
    remaining = announcement.due_date - as_utc(now)
    hours = int(remaining.total_seconds() // 3600)
    if hours < 24:
        return f"Expires in {hours}h"
    return f"Expires in {hours // 24}d"
