"""Tests for roomie.core.dependencies"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from roomie.core.dependencies import (
    clear_auth_cache,
    display_name_for,
    get_acting_roommate_id,
    get_current_roommate,
    resolve_user,
)


@pytest.fixture(autouse=True)
def empty_auth_cache():
    clear_auth_cache()
    yield
    clear_auth_cache()


def auth_client(user):
    supabase = MagicMock()
    supabase.auth.get_user.return_value = SimpleNamespace(user=user)
    return supabase


class TestResolveUser:
    def test_valid_token(self):
        user = SimpleNamespace(id="user-1", email="sam@example.com", user_metadata={"full_name": "Sam Lee"})
        supabase = auth_client(user)

        user_data = resolve_user("token-1", supabase)

        assert user_data["id"] == "user-1"
        assert user_data["display_name"] == "Sam Lee"
        supabase.auth.get_user.assert_called_once_with(jwt="token-1")

    def test_cached_per_token(self):
        user = SimpleNamespace(id="user-1", email="sam@example.com", user_metadata={})
        supabase = auth_client(user)

        resolve_user("token-1", supabase)
        resolve_user("token-1", supabase)

        assert supabase.auth.get_user.call_count == 1

    def test_invalid_token(self):
        supabase = MagicMock()
        supabase.auth.get_user.side_effect = Exception("JWT expired")
        with pytest.raises(HTTPException) as exc:
            resolve_user("bad", supabase)
        assert exc.value.status_code == 401

    def test_no_user(self):
        with pytest.raises(HTTPException) as exc:
            resolve_user("token-2", auth_client(None))
        assert exc.value.status_code == 401


class TestDisplayName:
    def test_full_name_wins(self):
        assert display_name_for("sam@example.com", {"full_name": "Sam Lee"}) == "Sam Lee"

    def test_email_local_part(self):
        assert display_name_for("sam@example.com", {}) == "sam"

    def test_fallback(self):
        assert display_name_for(None, {}) == "Your roommate"


class TestActingRoommate:
    def test_linked_roommate(self, fake_supabase, household):
        roommate = get_current_roommate({"id": "user-alex"}, fake_supabase)
        assert roommate["id"] == "r1"
        assert get_acting_roommate_id(roommate, fake_supabase) == "r1"

    def test_falls_back_to_first_roommate(self, fake_supabase, household):
        roommate = get_current_roommate({"id": "user-nobody"}, fake_supabase)
        assert roommate is None
        assert get_acting_roommate_id(None, fake_supabase) == "r1"

    def test_empty_household(self, fake_supabase):
        with pytest.raises(HTTPException) as exc:
            get_acting_roommate_id(None, fake_supabase)
        assert exc.value.status_code == 400
