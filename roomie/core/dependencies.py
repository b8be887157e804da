"""
Core dependencies for route protection and current-roommate resolution
"""

import hashlib
import time
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from roomie.database.supabase_client import get_supabase
from supabase import Client
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. many parallel requests with same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def resolve_user(token: str, supabase: Client) -> Dict[str, Any]:
    """Get current user details from a Supabase Auth token. Uses short TTL cache to reduce auth API calls."""
    cache_key = hashlib.sha256(token.encode()).hexdigest()
    now = time.monotonic()
    if cache_key in _AUTH_USER_CACHE:
        user_data, expiry = _AUTH_USER_CACHE[cache_key]
        if now < expiry:
            return user_data
        del _AUTH_USER_CACHE[cache_key]
    try:
        user_response = supabase.auth.get_user(jwt=token)
    except Exception as e:
        logger.warning(f"Token validation failed: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    if not user_response or not user_response.user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    user = user_response.user
    user_metadata = user.user_metadata or {}
    user_data = {
        "id": user.id,
        "email": user.email,
        "display_name": display_name_for(user.email, user_metadata),
        "user_metadata": user_metadata,
    }
    if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
        _AUTH_USER_CACHE[cache_key] = (user_data, now + _AUTH_CACHE_TTL_SEC)
    return user_data


def display_name_for(email: Optional[str], user_metadata: Dict[str, Any], fallback: str = "Your roommate") -> str:
    """full_name from the auth profile, else the local part of the email."""
    if user_metadata.get("full_name"):
        return user_metadata["full_name"]
    if email:
        return email.split("@")[0]
    return fallback


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Security(security),
    supabase: Client = Depends(get_supabase)
) -> dict:
    """Extract current user info from JWT token"""
    return resolve_user(credentials.credentials, supabase)


def get_current_roommate(
    user_data: dict = Depends(get_current_user),
    supabase: Client = Depends(get_supabase)
) -> Optional[Dict[str, Any]]:
    """Roommate row linked to the caller's auth account, or None"""
    try:
        result = supabase.table("roommates")\
            .select("*")\
            .eq("user_id", user_data["id"])\
            .execute()
    except Exception as e:
        logger.error(f"Error resolving roommate for user {user_data['id']}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return result.data[0] if result.data else None


def get_acting_roommate_id(
    roommate: Optional[Dict[str, Any]] = Depends(get_current_roommate),
    supabase: Client = Depends(get_supabase)
) -> str:
    """Roommate acting for the caller: their own record, else the household's first roommate"""
    if roommate:
        return roommate["id"]
    try:
        result = supabase.table("roommates")\
            .select("id")\
            .order("created_at")\
            .limit(1)\
            .execute()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not result.data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Add a roommate first")
    return result.data[0]["id"]


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()
