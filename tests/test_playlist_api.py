"""
Tests for playlist endpoints.
"""
import pytest


@pytest.fixture
def create_playlist(client):
    def _create(headers, name="Road Trip", is_public=False):
        response = client.post(
            "/api/v1/playlist/create",
            json={"name": name, "description": "for the car", "is_public": is_public},
            headers=headers,
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _create


class TestPlaylistCrud:

    def test_create_and_list(self, client, make_user, create_playlist):
        user, headers = make_user("alice@mjplayer.io")
        playlist = create_playlist(headers)
        assert playlist["user_id"] == user["id"]
        assert playlist["is_public"] is False
        assert playlist["songs"] == []

        mine = client.get("/api/v1/playlist/my-playlists", headers=headers).json()
        assert [p["id"] for p in mine] == [playlist["id"]]

    def test_create_requires_login(self, client):
        assert client.post("/api/v1/playlist/create", json={"name": "x"}).status_code == 401

    def test_update_and_delete(self, client, make_user, create_playlist):
        _, headers = make_user("alice@mjplayer.io")
        playlist = create_playlist(headers)

        response = client.put(
            f"/api/v1/playlist/{playlist['id']}",
            json={"name": "Renamed", "is_public": True},
            headers=headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["is_public"] is True

        assert client.delete(f"/api/v1/playlist/{playlist['id']}", headers=headers).status_code == 200
        assert client.get(f"/api/v1/playlist/{playlist['id']}", headers=headers).status_code == 404


class TestPlaylistVisibility:

    def test_private_playlist_is_hidden_from_others(self, client, make_user, create_playlist):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        playlist = create_playlist(alice)

        assert client.get(f"/api/v1/playlist/{playlist['id']}", headers=bob).status_code == 404
        assert client.get(f"/api/v1/playlist/{playlist['id']}").status_code == 404
        assert client.delete(f"/api/v1/playlist/{playlist['id']}", headers=bob).status_code == 404

    def test_public_playlist_is_read_only_for_others(self, client, make_user, create_playlist):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        playlist = create_playlist(alice, is_public=True)

        assert client.get(f"/api/v1/playlist/{playlist['id']}").status_code == 200
        public = client.get("/api/v1/playlist/public").json()
        assert [p["id"] for p in public] == [playlist["id"]]

        response = client.put(f"/api/v1/playlist/{playlist['id']}", json={"name": "Bob's"}, headers=bob)
        assert response.status_code == 403
        assert response.json()["detail"] == 'update violates row-level security policy for table "playlists"'


class TestPlaylistSongs:

    def test_add_reorder_remove(self, client, make_user, add_song, create_playlist):
        _, headers = make_user("alice@mjplayer.io")
        a = add_song(headers, title="A")
        b = add_song(headers, title="B")
        c = add_song(headers, title="C")
        playlist = create_playlist(headers)
        url = f"/api/v1/playlist/{playlist['id']}"

        for song in (a, b, c):
            response = client.post(f"{url}/add-song", json={"song_id": song["id"]}, headers=headers)
            assert response.status_code == 200

        # adding twice is a no-op
        client.post(f"{url}/add-song", json={"song_id": a["id"]}, headers=headers)
        titles = [s["title"] for s in client.get(url, headers=headers).json()["songs"]]
        assert titles == ["A", "B", "C"]

        response = client.put(f"{url}/order", json={"song_ids": [c["id"], a["id"]]}, headers=headers)
        assert response.status_code == 200
        assert [s["title"] for s in response.json()["songs"]] == ["C", "A", "B"]

        assert client.delete(f"{url}/remove-song/{a['id']}", headers=headers).status_code == 200
        titles = [s["title"] for s in client.get(url, headers=headers).json()["songs"]]
        assert titles == ["C", "B"]

        assert client.delete(f"{url}/remove-song/{a['id']}", headers=headers).status_code == 404

    def test_reorder_with_unknown_song(self, client, make_user, add_song, create_playlist):
        _, headers = make_user("alice@mjplayer.io")
        song = add_song(headers, title="A")
        playlist = create_playlist(headers)
        url = f"/api/v1/playlist/{playlist['id']}"
        client.post(f"{url}/add-song", json={"song_id": song["id"]}, headers=headers)

        response = client.put(f"{url}/order", json={"song_ids": ["nope"]}, headers=headers)
        assert response.status_code == 400

    def test_add_invisible_song(self, client, make_user, add_song, create_playlist):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        hidden = add_song(alice, title="Hidden", is_public=False)
        playlist = create_playlist(bob)

        response = client.post(
            f"/api/v1/playlist/{playlist['id']}/add-song",
            json={"song_id": hidden["id"]},
            headers=bob,
        )
        assert response.status_code == 404

    def test_cannot_add_to_someone_elses_playlist(self, client, make_user, add_song, create_playlist):
        _, alice = make_user("alice@mjplayer.io")
        _, bob = make_user("bob@mjplayer.io")
        song = add_song(bob, title="Tune")
        playlist = create_playlist(alice, is_public=True)

        response = client.post(
            f"/api/v1/playlist/{playlist['id']}/add-song",
            json={"song_id": song["id"]},
            headers=bob,
        )
        assert response.status_code == 403

    def test_deleted_song_leaves_playlist(self, client, make_user, add_song, create_playlist):
        _, headers = make_user("alice@mjplayer.io")
        song = add_song(headers, title="Tune")
        playlist = create_playlist(headers)
        url = f"/api/v1/playlist/{playlist['id']}"
        client.post(f"{url}/add-song", json={"song_id": song["id"]}, headers=headers)

        client.delete(f"/api/v1/songs/{song['id']}", headers=headers)
        assert client.get(url, headers=headers).json()["songs"] == []
