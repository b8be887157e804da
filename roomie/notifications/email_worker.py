"""
Email notification workers.

Run as FastAPI background tasks after a roommate or announcement has been
stored. Delivery itself happens in Supabase Edge Functions; these workers only
invoke them. A failed invocation is logged with the warning shown to the user
and never touches the record that triggered it.
"""

import logging
from typing import Any, Dict, Optional

from supabase import Client

from roomie.config.settings import settings

logger = logging.getLogger(__name__)

INVITATION_FAILED = "Roommate added but failed to send email notification"
ANNOUNCEMENT_FAILED = "Announcement created but failed to send email notifications"


def _invoke_function(supabase: Client, function_name: str, body: Dict[str, Any], failure_warning: str) -> bool:
    try:
        supabase.functions.invoke(function_name, invoke_options={"body": body})
    except Exception as e:
        logger.warning(f"{failure_warning} ({function_name}: {e})")
        return False
    logger.info(f"Edge function {function_name} invoked")
    return True


def send_roommate_invitation_async(
    invited_by: str,
    roommate_name: str,
    roommate_email: str,
    is_new_user: bool,
    supabase: Client
) -> bool:
    """Ask the invitation function to email a new roommate. New users get a sign-up link."""
    return _invoke_function(
        supabase,
        settings.invitation_function,
        {
            "invitedBy": invited_by,
            "roommateEmail": roommate_email,
            "roommateName": roommate_name,
            "isNewUser": is_new_user,
        },
        INVITATION_FAILED,
    )


def send_announcement_email_async(
    title: str,
    content: str,
    group_id: Optional[str],
    created_by: str,
    supabase: Client
) -> bool:
    """Email an announcement to every roommate in its group (all roommates when unscoped)."""
    return _invoke_function(
        supabase,
        settings.announcement_function,
        {
            "title": title,
            "content": content,
            "groupId": group_id or "all",
            "createdBy": created_by,
        },
        ANNOUNCEMENT_FAILED,
    )
