"""Tests for likes, subscriptions, comments, tweets and playlists endpoints."""

from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from mediashare.db.models import TweetModel
from mediashare.services.videos import publish_video


def auth(user) -> dict[str, str]:
    return {"X-User-Id": str(user.id)}


def _video(session, owner, title: str = "Clip"):
    return publish_video(
        session,
        owner_id=owner.id,
        title=title,
        description="",
        media_ref="https://cdn.example.com/clip.mp4",
    )


class TestLikeEndpoints:
    """Tests for /api/v1/likes."""

    def test_toggle_video_like(self, test_client: TestClient, session, alice, bob) -> None:
        video = _video(session, alice)
        url = f"/api/v1/likes/toggle/v/{video.id}"

        first = test_client.post(url, headers=auth(bob))
        second = test_client.post(url, headers=auth(bob))
        third = test_client.post(url, headers=auth(bob))

        assert first.status_code == 200
        assert first.json() == {"active": True, "object_id": str(video.id), "object_kind": "video"}
        assert second.json()["active"] is False
        assert third.json()["active"] is True

    def test_liked_videos(self, test_client: TestClient, session, alice, bob) -> None:
        older = _video(session, alice, "Older")
        newer = _video(session, alice, "Newer")
        test_client.post(f"/api/v1/likes/toggle/v/{older.id}", headers=auth(bob))
        test_client.post(f"/api/v1/likes/toggle/v/{newer.id}", headers=auth(bob))

        response = test_client.get("/api/v1/likes/videos", headers=auth(bob))

        assert [item["id"] for item in response.json()] == [str(newer.id), str(older.id)]

    def test_comment_and_tweet_likes_are_separate(
        self, test_client: TestClient, alice
    ) -> None:
        target = uuid4()

        comment_like = test_client.post(f"/api/v1/likes/toggle/c/{target}", headers=auth(alice))
        tweet_like = test_client.post(f"/api/v1/likes/toggle/t/{target}", headers=auth(alice))

        assert comment_like.json()["active"] is True
        assert comment_like.json()["object_kind"] == "comment"
        assert tweet_like.json()["active"] is True

    def test_malformed_target(self, test_client: TestClient, alice) -> None:
        response = test_client.post("/api/v1/likes/toggle/v/12345", headers=auth(alice))

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "video_id"

    def test_requires_identity(self, test_client: TestClient) -> None:
        response = test_client.post(f"/api/v1/likes/toggle/v/{uuid4()}")

        assert response.status_code == 401

    def test_unknown_subject_is_not_found(self, foreign_keys, test_client: TestClient) -> None:
        response = test_client.post(
            f"/api/v1/likes/toggle/v/{uuid4()}", headers={"X-User-Id": str(uuid4())}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["field"] == "subject_id"

    def test_unknown_subject_without_foreign_keys(self, test_client: TestClient) -> None:
        response = test_client.post(
            f"/api/v1/likes/toggle/t/{uuid4()}", headers={"X-User-Id": str(uuid4())}
        )

        assert response.status_code == 404


class TestSubscriptionEndpoints:
    """Tests for /api/v1/subscriptions."""

    def test_toggle_subscription(self, test_client: TestClient, alice, bob) -> None:
        url = f"/api/v1/subscriptions/c/{alice.id}"

        subscribed = test_client.post(url, headers=auth(bob))

        assert subscribed.status_code == 200
        assert subscribed.json()["active"] is True
        assert subscribed.json()["object_kind"] == "channel"

        subscribers = test_client.get(url).json()
        assert [user["username"] for user in subscribers] == ["bob"]

        channels = test_client.get(f"/api/v1/subscriptions/u/{bob.id}").json()
        assert [user["username"] for user in channels] == ["alice"]

        unsubscribed = test_client.post(url, headers=auth(bob))
        assert unsubscribed.json()["active"] is False
        assert test_client.get(url).json() == []

    def test_unknown_channel(self, test_client: TestClient, bob) -> None:
        response = test_client.post(f"/api/v1/subscriptions/c/{uuid4()}", headers=auth(bob))

        assert response.status_code == 404

    def test_malformed_channel(self, test_client: TestClient, bob) -> None:
        response = test_client.post("/api/v1/subscriptions/c/abc", headers=auth(bob))

        assert response.status_code == 400


class TestCommentEndpoints:
    """Tests for /api/v1/comments."""

    def test_add_and_list(self, test_client: TestClient, session, alice, bob) -> None:
        video = _video(session, alice)
        for i in range(3):
            response = test_client.post(
                f"/api/v1/comments/{video.id}", json={"text": f"comment {i}"}, headers=auth(bob)
            )
            assert response.status_code == 201

        response = test_client.get(f"/api/v1/comments/{video.id}", params={"limit": "2"})

        data = response.json()
        assert [item["text"] for item in data["items"]] == ["comment 2", "comment 1"]
        assert data["total_pages"] == 2
        assert data["total_items"] == 3

    def test_comment_on_missing_video(self, test_client: TestClient, alice) -> None:
        response = test_client.post(
            f"/api/v1/comments/{uuid4()}", json={"text": "hello"}, headers=auth(alice)
        )

        assert response.status_code == 404

    def test_edit_by_author_only(self, test_client: TestClient, session, alice, bob) -> None:
        video = _video(session, alice)
        comment = test_client.post(
            f"/api/v1/comments/{video.id}", json={"text": "first!"}, headers=auth(bob)
        ).json()

        forbidden = test_client.patch(
            f"/api/v1/comments/c/{comment['id']}", json={"text": "edited"}, headers=auth(alice)
        )
        allowed = test_client.patch(
            f"/api/v1/comments/c/{comment['id']}", json={"text": "edited"}, headers=auth(bob)
        )

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["text"] == "edited"

    def test_delete_by_author(self, test_client: TestClient, session, alice, bob) -> None:
        video = _video(session, alice)
        comment = test_client.post(
            f"/api/v1/comments/{video.id}", json={"text": "bye"}, headers=auth(bob)
        ).json()

        assert test_client.delete(f"/api/v1/comments/c/{comment['id']}", headers=auth(alice)).status_code == 403
        assert test_client.delete(f"/api/v1/comments/c/{comment['id']}", headers=auth(bob)).status_code == 200
        assert test_client.get(f"/api/v1/comments/{video.id}").json()["items"] == []


class TestTweetEndpoints:
    """Tests for /api/v1/tweets."""

    def test_create_and_list(self, test_client: TestClient, alice) -> None:
        created = test_client.post("/api/v1/tweets", json={"text": "hello world"}, headers=auth(alice))

        assert created.status_code == 201
        tweets = test_client.get(f"/api/v1/tweets/user/{alice.id}").json()
        assert [tweet["text"] for tweet in tweets] == ["hello world"]

    def test_update_by_other_user_forbidden(
        self, test_client: TestClient, session, alice, bob
    ) -> None:
        tweet = test_client.post("/api/v1/tweets", json={"text": "original"}, headers=auth(alice)).json()

        response = test_client.patch(
            f"/api/v1/tweets/{tweet['id']}", json={"text": "hijacked"}, headers=auth(bob)
        )

        assert response.status_code == 403
        assert response.json()["detail"]["error"] == "forbidden"
        session.expire_all()
        assert session.get(TweetModel, UUID(tweet["id"])).text == "original"

    def test_update_and_delete_by_author(self, test_client: TestClient, alice) -> None:
        tweet = test_client.post("/api/v1/tweets", json={"text": "v1"}, headers=auth(alice)).json()

        updated = test_client.patch(
            f"/api/v1/tweets/{tweet['id']}", json={"text": "v2"}, headers=auth(alice)
        )
        deleted = test_client.delete(f"/api/v1/tweets/{tweet['id']}", headers=auth(alice))

        assert updated.json()["text"] == "v2"
        assert deleted.status_code == 200
        assert test_client.get(f"/api/v1/tweets/user/{alice.id}").json() == []

    def test_delete_by_other_user_forbidden(self, test_client: TestClient, alice, bob) -> None:
        tweet = test_client.post("/api/v1/tweets", json={"text": "mine"}, headers=auth(alice)).json()

        response = test_client.delete(f"/api/v1/tweets/{tweet['id']}", headers=auth(bob))

        assert response.status_code == 403
        assert len(test_client.get(f"/api/v1/tweets/user/{alice.id}").json()) == 1


class TestPlaylistEndpoints:
    """Tests for /api/v1/playlists."""

    def _create(self, client: TestClient, user, name: str = "Favourites") -> dict:
        response = client.post("/api/v1/playlists", json={"name": name}, headers=auth(user))
        assert response.status_code == 201
        return response.json()

    def test_create_and_list(self, test_client: TestClient, alice) -> None:
        playlist = self._create(test_client, alice)

        assert playlist["videos"] == []
        listed = test_client.get(f"/api/v1/playlists/user/{alice.id}").json()
        assert [p["id"] for p in listed] == [playlist["id"]]

    def test_add_and_remove_videos(self, test_client: TestClient, session, alice) -> None:
        video = _video(session, alice)
        other = _video(session, alice, "Other")
        playlist = self._create(test_client, alice)
        base = "/api/v1/playlists"

        test_client.patch(f"{base}/add/{video.id}/{playlist['id']}", headers=auth(alice))
        test_client.patch(f"{base}/add/{other.id}/{playlist['id']}", headers=auth(alice))
        duplicated = test_client.patch(f"{base}/add/{video.id}/{playlist['id']}", headers=auth(alice))

        assert duplicated.json()["videos"] == [str(video.id), str(other.id), str(video.id)]

        removed = test_client.patch(f"{base}/remove/{video.id}/{playlist['id']}", headers=auth(alice))

        assert removed.json()["videos"] == [str(other.id)]

    def test_add_missing_video(self, test_client: TestClient, alice) -> None:
        playlist = self._create(test_client, alice)

        response = test_client.patch(
            f"/api/v1/playlists/add/{uuid4()}/{playlist['id']}", headers=auth(alice)
        )

        assert response.status_code == 404

    def test_mutations_are_owner_only(self, test_client: TestClient, session, alice, bob) -> None:
        video = _video(session, bob)
        playlist = self._create(test_client, alice)

        add = test_client.patch(f"/api/v1/playlists/add/{video.id}/{playlist['id']}", headers=auth(bob))
        rename = test_client.patch(
            f"/api/v1/playlists/{playlist['id']}", json={"name": "Mine now"}, headers=auth(bob)
        )
        delete = test_client.delete(f"/api/v1/playlists/{playlist['id']}", headers=auth(bob))

        assert add.status_code == 403
        assert rename.status_code == 403
        assert delete.status_code == 403
        current = test_client.get(f"/api/v1/playlists/{playlist['id']}").json()
        assert current["name"] == "Favourites"
        assert current["videos"] == []

    def test_update_and_delete(self, test_client: TestClient, alice) -> None:
        playlist = self._create(test_client, alice)

        updated = test_client.patch(
            f"/api/v1/playlists/{playlist['id']}",
            json={"description": "the good ones"},
            headers=auth(alice),
        )
        deleted = test_client.delete(f"/api/v1/playlists/{playlist['id']}", headers=auth(alice))

        assert updated.json()["name"] == "Favourites"
        assert updated.json()["description"] == "the good ones"
        assert deleted.status_code == 200
        assert test_client.get(f"/api/v1/playlists/{playlist['id']}").status_code == 404
