"""
Tests for the song catalogue and its row-level policies over HTTP.
"""


class TestSongVisibility:

    def test_anonymous_sees_public_songs_only(self, client, make_user, add_song):
        _, headers = make_user("alice@mjplayer.io")
        add_song(headers, title="Open")
        add_song(headers, title="Hidden", is_public=False)

        titles = [song["title"] for song in client.get("/api/v1/songs/").json()]
        assert titles == ["Open"]

    def test_owner_sees_own_private_songs(self, client, make_user, add_song):
        _, headers = make_user("alice@mjplayer.io")
        add_song(headers, title="Open")
        add_song(headers, title="Hidden", is_public=False)

        titles = {song["title"] for song in client.get("/api/v1/songs/", headers=headers).json()}
        assert titles == {"Open", "Hidden"}
        mine = client.get("/api/v1/songs/mine", headers=headers).json()
        assert len(mine) == 2

    def test_private_song_is_not_found_for_others(self, client, make_user, add_song):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        song = add_song(alice, title="Hidden", is_public=False)

        assert client.get(f"/api/v1/songs/{song['id']}", headers=bob).status_code == 404
        assert client.get(f"/api/v1/songs/{song['id']}", headers=alice).status_code == 200

    def test_admin_sees_everything(self, client, make_user, make_admin, add_song):
        _, alice = make_user("alice@mjplayer.io")
        _, admin = make_admin()
        add_song(alice, title="Hidden", is_public=False)

        titles = [song["title"] for song in client.get("/api/v1/songs/", headers=admin).json()]
        assert titles == ["Hidden"]


class TestSongWrites:

    def test_add_requires_login(self, client):
        response = client.post("/api/v1/songs/", json={"title": "x", "url": "https://x.io/x.mp3"})
        assert response.status_code == 401

    def test_uploader_defaults_to_caller(self, client, make_user, add_song):
        user, headers = make_user("alice@mjplayer.io")
        song = add_song(headers, title="Tune", artist="Band", duration=215)
        assert song["uploaded_by"] == user["id"]
        assert song["artist"] == "Band"
        assert song["duration"] == 215
        assert song["is_public"] is True

    def test_uploading_for_someone_else_is_refused(self, client, make_user):
        _, alice = make_user("alice@mjplayer.io")
        bob, _ = make_user("bob@mjplayer.io")
        response = client.post(
            "/api/v1/songs/",
            json={"title": "Forged", "url": "https://x.io/f.mp3", "uploaded_by": bob["id"]},
            headers=alice,
        )
        assert response.status_code == 403
        assert response.json()["detail"] == 'new row violates row-level security policy for table "songs"'

    def test_blank_title_fails_validation(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        response = client.post("/api/v1/songs/", json={"title": "  ", "url": "https://x.io/x.mp3"}, headers=headers)
        assert response.status_code == 422

    def test_unknown_category(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        response = client.post(
            "/api/v1/songs/",
            json={"title": "Tune", "url": "https://x.io/x.mp3", "category_id": "missing"},
            headers=headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Unknown category"

    def test_owner_updates_and_deletes(self, client, make_user, add_song):
        _, headers = make_user("alice@mjplayer.io")
        song = add_song(headers, title="Tune")

        response = client.put(f"/api/v1/songs/{song['id']}", json={"title": "Tune (Live)"}, headers=headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Tune (Live)"

        assert client.delete(f"/api/v1/songs/{song['id']}", headers=headers).status_code == 200
        assert client.get(f"/api/v1/songs/{song['id']}", headers=headers).status_code == 404

    def test_others_cannot_change_a_public_song(self, client, make_user, add_song):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        song = add_song(alice, title="Tune")

        response = client.put(f"/api/v1/songs/{song['id']}", json={"title": "Mine now"}, headers=bob)
        assert response.status_code == 403
        assert response.json()["detail"] == 'update violates row-level security policy for table "songs"'

        response = client.delete(f"/api/v1/songs/{song['id']}", headers=bob)
        assert response.status_code == 403

    def test_admin_can_delete_any_song(self, client, make_user, make_admin, add_song):
        _, alice = make_user("alice@mjplayer.io")
        _, admin = make_admin()
        song = add_song(alice, title="Tune", is_public=False)
        assert client.delete(f"/api/v1/songs/{song['id']}", headers=admin).status_code == 200


class TestCategories:

    def test_filter_songs_by_category(self, client, make_user, make_admin, add_song):
        _, admin = make_admin()
        pop = client.post("/api/v1/admin/categories", json={"name": "Pop"}, headers=admin).json()
        _, alice = make_user("alice@mjplayer.io")
        add_song(alice, title="Hit", category_id=pop["id"])
        add_song(alice, title="Other")

        songs = client.get("/api/v1/songs/", params={"category_id": pop["id"]}).json()
        assert [song["title"] for song in songs] == ["Hit"]
        assert songs[0]["category_name"] == "Pop"

    def test_categories_are_public(self, client, make_admin):
        _, admin = make_admin()
        client.post("/api/v1/admin/categories", json={"name": "Rock"}, headers=admin)
        client.post("/api/v1/admin/categories", json={"name": "Jazz"}, headers=admin)
        names = [category["name"] for category in client.get("/api/v1/categories/").json()]
        assert names == ["Jazz", "Rock"]

    def test_missing_category(self, client):
        assert client.get("/api/v1/categories/nope").status_code == 404
