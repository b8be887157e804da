"""Id -> display value lookups. A miss returns a fallback string, never raises."""

from typing import Iterable, Optional

from roomie.household.types import Group, Roommate

UNKNOWN_ROOMMATE = "Unknown"
UNKNOWN_GROUP = "Unknown Group"
UNKNOWN_USER = "Unknown User"
ALL_ROOMMATES = "All Roommates"
DEFAULT_COLOR = "bg-gray-500"


def find_roommate(roommates: Iterable[Roommate], roommate_id: Optional[str]) -> Optional[Roommate]:
    for roommate in roommates:
        if roommate.id == roommate_id:
            return roommate
    return None


def resolve_name(roommates: Iterable[Roommate], roommate_id: Optional[str]) -> str:
    roommate = find_roommate(roommates, roommate_id)
    return roommate.name if roommate else UNKNOWN_ROOMMATE


def resolve_color(roommates: Iterable[Roommate], roommate_id: Optional[str]) -> str:
    roommate = find_roommate(roommates, roommate_id)
    return roommate.color if roommate and roommate.color else DEFAULT_COLOR


def resolve_group_name(groups: Iterable[Group], group_id: Optional[str]) -> str:
    """None means the whole household."""
    if not group_id:
        return ALL_ROOMMATES
    for group in groups:
        if group.id == group_id:
            return group.name
    return UNKNOWN_GROUP


def resolve_user_name(roommates: Iterable[Roommate], user_id: Optional[str]) -> str:
    """Name of the roommate linked to an auth account (announcement authors)."""
    if user_id:
        for roommate in roommates:
            if roommate.user_id == user_id:
                return roommate.name
    return UNKNOWN_USER
