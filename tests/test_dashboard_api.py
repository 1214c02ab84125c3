"""
Tests for the user dashboard.
"""


class TestDashboard:

    def test_requires_login(self, client):
        assert client.get("/api/v1/dashboard/").status_code == 401

    def test_free_plan_overview(self, client, make_user, add_song):
        user, headers = make_user("alice@mjplayer.io")
        add_song(headers, title="Mine", is_public=False)

        body = client.get("/api/v1/dashboard/", headers=headers).json()
        assert body["subscription"] == {"plan": "free", "is_active": False, "expires_at": None}
        assert [song["title"] for song in body["songs"]] == ["Mine"]
        assert body["songs"][0]["plays"] == 0
        assert body["referrals"]["total_referrals"] == 0
        assert body["referral_link"].endswith(f"?ref={user['id']}")

    def test_only_own_uploads_are_listed(self, client, make_user, add_song):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        add_song(alice, title="Alice's")
        assert client.get("/api/v1/dashboard/", headers=bob).json()["songs"] == []

    def test_upload_needs_premium(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        response = client.post(
            "/api/v1/dashboard/songs",
            json={"title": "Tune", "url": "https://cdn.mjplayer.io/tune.mp3"},
            headers=headers,
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Premium required"

    def test_payments_not_connected(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        assert client.post("/api/v1/dashboard/upgrade", headers=headers).status_code == 501
        assert client.post("/api/v1/dashboard/referrals/withdraw", headers=headers).status_code == 501
