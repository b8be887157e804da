"""API tests for /api/v1/roommates and /api/v1/groups"""

from types import SimpleNamespace


class TestAddRoommate:
    def test_invited_when_no_account(self, client, fake_supabase):
        response = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "invited"
        assert body["user_id"] is None
        assert body["invited_by"] == "user-alex"
        assert body["color"] == "bg-blue-500"

    def test_registered_when_account_exists(self, client, fake_supabase):
        fake_supabase.auth.admin.list_users.return_value = [
            SimpleNamespace(id="user-blair", email="Blair@Example.com"),
        ]
        response = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"})

        body = response.json()
        assert body["status"] == "registered"
        assert body["user_id"] == "user-blair"

    def test_color_rotates_with_household_size(self, client, household):
        response = client.post("/api/v1/roommates", json={"name": "Dana", "email": "dana@example.com"})
        assert response.json()["color"] == "bg-red-500"

    def test_duplicate_email_conflicts(self, client, household):
        response = client.post("/api/v1/roommates", json={"name": "Blair again", "email": "blair@example.com"})
        assert response.status_code == 409
        assert response.json()["detail"] == "This person is already a roommate"

    def test_invalid_email_rejected(self, client):
        response = client.post("/api/v1/roommates", json={"name": "Blair", "email": "not-an-email"})
        assert response.status_code == 422

    def test_invitation_sent_in_background(self, client, fake_supabase):
        client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"})

        fake_supabase.functions.invoke.assert_called_once()
        name, = fake_supabase.functions.invoke.call_args.args
        body = fake_supabase.functions.invoke.call_args.kwargs["invoke_options"]["body"]
        assert name == "send-roommate-invitation"
        assert body["invitedBy"] == "Alex"
        assert body["isNewUser"] is True

    def test_failed_invitation_keeps_roommate(self, client, fake_supabase):
        fake_supabase.functions.invoke.side_effect = RuntimeError("edge function down")

        response = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"})

        assert response.status_code == 201
        assert len(fake_supabase.tables["roommates"]) == 1


class TestListAndRemove:
    def test_list_in_creation_order(self, client, household):
        response = client.get("/api/v1/roommates")
        assert [r["name"] for r in response.json()] == ["Alex", "Blair", "Casey"]

    def test_remove_cascades_to_bills_and_chores(self, client, fake_supabase, household):
        fake_supabase.seed("bills", [
            {"id": "b1", "title": "Rent", "amount": "900", "category": "Rent", "paid_by": "r1",
             "split_between": ["r1", "r2", "r3"], "date": "2024-06-01", "settled": False},
            {"id": "b2", "title": "Pizza", "amount": "30", "category": "Food", "paid_by": "r2",
             "split_between": ["r1", "r2"], "date": "2024-06-01", "settled": False},
            {"id": "b3", "title": "Snacks", "amount": "10", "category": "Food", "paid_by": "r3",
             "split_between": ["r2", "r3"], "date": "2024-06-01", "settled": False},
        ])
        fake_supabase.seed("chores", [
            {"id": "c1", "title": "Dishes", "assigned_to": "r1", "due_date": "2024-06-02",
             "completed": False, "completed_date": None, "priority": "low"},
            {"id": "c2", "title": "Vacuum", "assigned_to": "r2", "due_date": "2024-06-02",
             "completed": False, "completed_date": None, "priority": "low"},
        ])

        response = client.delete("/api/v1/roommates/r1")

        assert response.status_code == 204
        assert [r["id"] for r in fake_supabase.tables["roommates"]] == ["r2", "r3"]
        assert [b["id"] for b in fake_supabase.tables["bills"]] == ["b3"]
        assert [c["id"] for c in fake_supabase.tables["chores"]] == ["c2"]

    def test_remove_unknown(self, client, household):
        assert client.delete("/api/v1/roommates/nope").status_code == 404


class TestGroups:
    def test_create_and_assign(self, client, household):
        group = client.post("/api/v1/groups", json={"name": "Upstairs"}).json()
        assert group["created_by"] == "user-alex"

        response = client.put("/api/v1/roommates/r2/group", json={"group_id": group["id"]})
        assert response.status_code == 200
        assert response.json()["group_id"] == group["id"]

        members = client.get(f"/api/v1/groups/{group['id']}").json()["members"]
        assert [m["id"] for m in members] == ["r2"]

    def test_assign_unknown_group(self, client, household):
        response = client.put("/api/v1/roommates/r2/group", json={"group_id": "missing"})
        assert response.status_code == 404

    def test_delete_group_clears_membership(self, client, fake_supabase, household):
        group = client.post("/api/v1/groups", json={"name": "Upstairs"}).json()
        client.put("/api/v1/roommates/r2/group", json={"group_id": group["id"]})

        response = client.delete(f"/api/v1/groups/{group['id']}")

        assert response.status_code == 204
        assert fake_supabase.tables["groups"] == []
        assert all(r["group_id"] is None for r in fake_supabase.tables["roommates"])
        assert len(fake_supabase.tables["roommates"]) == 3


class TestAccountLookup:
    def test_match_on_a_later_page(self, client, fake_supabase):
        others = [SimpleNamespace(id=f"user-{n}", email=f"someone{n}@example.com") for n in range(100)]
        pages = {1: others, 2: [SimpleNamespace(id="user-blair", email="blair@example.com")]}
        fake_supabase.auth.admin.list_users.side_effect = lambda page, per_page: pages.get(page, [])

        body = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"}).json()

        assert body["status"] == "registered"
        assert body["user_id"] == "user-blair"
        assert fake_supabase.auth.admin.list_users.call_count == 2

    def test_stops_after_a_short_page(self, client, fake_supabase):
        fake_supabase.auth.admin.list_users.return_value = [
            SimpleNamespace(id="user-zed", email="zed@example.com"),
        ]

        body = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"}).json()

        assert body["status"] == "invited"
        fake_supabase.auth.admin.list_users.assert_called_once_with(page=1, per_page=100)


class TestColors:
    def test_empty_palette_uses_default_color(self, client, monkeypatch):
        from roomie.config.settings import settings
        monkeypatch.setattr(settings, "roommate_colors", "")

        response = client.post("/api/v1/roommates", json={"name": "Blair", "email": "blair@example.com"})

        assert response.status_code == 201
        assert response.json()["color"] == "bg-gray-500"
