"""
Tests for the player routes: intents in, state and audio commands out.
"""
import pytest


@pytest.fixture
def listener(make_user, add_song):
    """A logged-in user with three public songs uploaded"""
    _, headers = make_user("alice@mjplayer.io")
    songs = [add_song(headers, title=title, duration=180) for title in ("A", "B", "C")]
    return headers, songs


def actions(response):
    return [command["action"] for command in response.json()["commands"]]


class TestPlayerState:

    def test_requires_login(self, client):
        assert client.get("/api/v1/player/").status_code == 401
        assert client.post("/api/v1/player/next").status_code == 401

    def test_new_player_is_idle(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        body = client.get("/api/v1/player/", headers=headers).json()
        assert body["state"] == "idle"
        assert body["current_song"] is None
        assert body["playlist"] == []
        assert body["current_time_display"] == "0:00"
        assert body["commands"] == []

    def test_intents_on_empty_player_are_noops(self, client, make_user):
        _, headers = make_user("alice@mjplayer.io")
        for route in ("toggle", "next", "prev"):
            body = client.post(f"/api/v1/player/{route}", headers=headers).json()
            assert body["state"] == "idle"
            assert body["commands"] == []

    def test_players_are_per_user(self, client, listener, make_user):
        alice, _ = listener
        _, bob = make_user("bob@mjplayer.io")
        client.post("/api/v1/player/load/songs", json={}, headers=alice)
        assert client.get("/api/v1/player/", headers=bob).json()["state"] == "idle"


class TestLoading:

    def test_load_songs_pauses_on_first(self, client, listener):
        headers, songs = listener
        response = client.post("/api/v1/player/load/songs", json={}, headers=headers)
        body = response.json()
        assert response.status_code == 200
        assert body["state"] == "paused"
        assert len(body["playlist"]) == 3
        assert body["duration_display"] == "3:00"
        assert actions(response) == ["load"]
        assert body["commands"][0]["url"] == body["current_song"]["url"]

    def test_start_index_out_of_range(self, client, listener):
        headers, _ = listener
        response = client.post("/api/v1/player/load/songs", json={"start_index": 3}, headers=headers)
        assert response.status_code == 400

    def test_load_empty_category(self, client, listener, make_admin):
        headers, _ = listener
        _, admin = make_admin()
        empty = client.post("/api/v1/admin/categories", json={"name": "Empty"}, headers=admin).json()
        body = client.post(
            "/api/v1/player/load/songs", json={"category_id": empty["id"]}, headers=headers
        ).json()
        assert body["state"] == "idle"

    def test_load_playlist(self, client, listener):
        headers, songs = listener
        playlist = client.post("/api/v1/playlist/create", json={"name": "Mix"}, headers=headers).json()
        for song in reversed(songs):
            client.post(f"/api/v1/playlist/{playlist['id']}/add-song", json={"song_id": song["id"]}, headers=headers)

        body = client.post(
            f"/api/v1/player/load/playlist/{playlist['id']}", json={"start_index": 1}, headers=headers
        ).json()
        assert [track["title"] for track in body["playlist"]] == ["C", "B", "A"]
        assert body["current_song"]["title"] == "B"

    def test_load_missing_playlist(self, client, listener):
        headers, _ = listener
        assert client.post("/api/v1/player/load/playlist/nope", headers=headers).status_code == 404


class TestTransport:

    def test_toggle_play_pause(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)

        response = client.post("/api/v1/player/toggle", headers=headers)
        assert response.json()["state"] == "playing"
        assert response.json()["is_playing"] is True
        assert actions(response) == ["play"]

        response = client.post("/api/v1/player/toggle", headers=headers)
        assert response.json()["state"] == "paused"
        assert actions(response) == ["pause"]

    def test_next_wraps_and_keeps_playing(self, client, listener):
        headers, _ = listener
        first = client.post("/api/v1/player/load/songs", json={}, headers=headers).json()["current_index"]
        client.post("/api/v1/player/toggle", headers=headers)

        for _ in range(3):
            response = client.post("/api/v1/player/next", headers=headers)
            assert actions(response) == ["load", "play"]
        assert response.json()["current_index"] == first
        assert response.json()["state"] == "playing"

    def test_prev_from_first_goes_to_last(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        body = client.post("/api/v1/player/prev", headers=headers).json()
        assert body["current_index"] == 2
        assert body["state"] == "paused"

    def test_select(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        assert client.post("/api/v1/player/select/2", headers=headers).json()["current_index"] == 2
        assert client.post("/api/v1/player/select/3", headers=headers).status_code == 400

    def test_seek_and_volume(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)

        response = client.post("/api/v1/player/seek", json={"time": 61}, headers=headers)
        assert response.json()["current_time_display"] == "1:01"
        assert response.json()["commands"] == [{"action": "seek", "time": 61}]

        response = client.post("/api/v1/player/volume", json={"volume": 3}, headers=headers)
        assert response.json()["volume"] == 1.0

    @pytest.mark.parametrize("route, payload", [
        ("seek", {"time": "inf"}),
        ("seek", {"time": "-inf"}),
        ("seek", {"time": "nan"}),
        ("volume", {"volume": "nan"}),
    ])
    def test_non_finite_values_are_rejected(self, client, listener, route, payload):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)

        assert client.post(f"/api/v1/player/{route}", json=payload, headers=headers).status_code == 422
        body = client.get("/api/v1/player/", headers=headers).json()
        assert body["current_time"] == 0
        assert body["volume"] == 1.0
        assert client.post("/api/v1/player/next", headers=headers).status_code == 200

    def test_shuffle_and_repeat_flags(self, client, listener):
        headers, _ = listener
        assert client.post("/api/v1/player/shuffle", headers=headers).json()["shuffle"] is True
        assert client.post("/api/v1/player/repeat", headers=headers).json()["repeat"] is True
        assert client.post("/api/v1/player/repeat", headers=headers).json()["repeat"] is False


class TestMediaEvents:

    def test_time_update_and_ready(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)

        body = client.post("/api/v1/player/events/ready", json={"duration": None}, headers=headers).json()
        assert body["duration"] == 0

        body = client.post(
            "/api/v1/player/events/timeupdate",
            json={"current_time": 12.5, "duration": 200},
            headers=headers,
        ).json()
        assert body["current_time"] == 12.5
        assert body["duration_display"] == "3:20"
        assert body["commands"] == []

    def test_ended_with_repeat_restarts(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        client.post("/api/v1/player/repeat", headers=headers)

        response = client.post("/api/v1/player/events/ended", headers=headers)
        assert response.json()["current_index"] == 0
        assert response.json()["state"] == "playing"
        assert actions(response) == ["seek", "play"]

    def test_pause_then_ended_keeps_playing(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        client.post("/api/v1/player/toggle", headers=headers)
        client.post("/api/v1/player/events/timeupdate", json={"current_time": 180, "duration": 180}, headers=headers)
        client.post("/api/v1/player/events/pause", headers=headers)

        response = client.post("/api/v1/player/events/ended", headers=headers)
        assert response.json()["current_index"] == 1
        assert response.json()["state"] == "playing"
        assert actions(response) == ["load", "play"]

    def test_ended_advances(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        client.post("/api/v1/player/events/play", headers=headers)

        response = client.post("/api/v1/player/events/ended", headers=headers)
        assert response.json()["current_index"] == 1
        assert actions(response) == ["load", "play"]

    def test_pause_event(self, client, listener):
        headers, _ = listener
        client.post("/api/v1/player/load/songs", json={}, headers=headers)
        client.post("/api/v1/player/events/play", headers=headers)
        assert client.post("/api/v1/player/events/pause", headers=headers).json()["state"] == "paused"
