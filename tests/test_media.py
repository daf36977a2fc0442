"""Tests for media storage."""

import hashlib
from pathlib import Path

import httpx
import pytest

from mediashare.services.media import MediaStorage, MediaStorageError


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestMediaStorage:
    """Tests for MediaStorage."""

    def test_url_reference_is_stored_as_is(self, tmp_path: Path) -> None:
        storage = MediaStorage(base_path=tmp_path, download=False)

        stored = storage.store("https://cdn.example.com/clip.mp4", "video")

        assert stored.reference == "https://cdn.example.com/clip.mp4"
        assert stored.storage_type == "url"
        assert stored.kind == "video"
        assert list(tmp_path.iterdir()) == []

    def test_download_writes_file(self, tmp_path: Path) -> None:
        payload = b"fake mp4 bytes"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=payload, headers={"content-type": "video/mp4"})

        storage = MediaStorage(base_path=tmp_path, client=_client(handler), download=True)

        stored = storage.store("https://cdn.example.com/clip.MP4?sig=abc", "video")

        assert stored.storage_type == "local"
        assert stored.reference.startswith("file://")
        assert stored.file_size_bytes == len(payload)
        assert stored.checksum == hashlib.sha256(payload).hexdigest()
        assert stored.metadata["content_type"] == "video/mp4"

        written = Path(stored.reference.removeprefix("file://"))
        assert written.parent == (tmp_path / "videos").absolute()
        assert written.suffix == ".mp4"
        assert written.read_bytes() == payload

    def test_thumbnail_without_extension(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"jpeg")

        storage = MediaStorage(base_path=tmp_path, client=_client(handler), download=True)

        stored = storage.store("https://cdn.example.com/thumbs/42", "thumbnail")

        assert stored.reference.endswith(".jpg")
        assert "/thumbnails/" in stored.reference

    def test_download_failure_raises(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        storage = MediaStorage(base_path=tmp_path, client=_client(handler), download=True)

        with pytest.raises(MediaStorageError):
            storage.store("https://cdn.example.com/missing.mp4", "video")

    def test_unknown_kind_rejected(self, tmp_path: Path) -> None:
        storage = MediaStorage(base_path=tmp_path, download=False)

        with pytest.raises(ValueError):
            storage.store("https://cdn.example.com/a.gif", "avatar")
