"""Media storage for uploaded videos and thumbnails."""

import hashlib
from pathlib import Path
from uuid import uuid4

import httpx

from mediashare.config import settings
from mediashare.domain.models import StoredMedia
from mediashare.logging import get_logger

logger = get_logger(__name__)

MEDIA_KINDS = ("video", "thumbnail")


class MediaStorageError(Exception):
    """Raised when media cannot be fetched or stored."""

    pass


class MediaStorage:
    """Turns a media source URL into an opaque stored reference.

    Supports:
    - URL references (default, nothing is copied)
    - Downloading into local storage
    """

    def __init__(
        self,
        base_path: Path | None = None,
        client: httpx.Client | None = None,
        download: bool | None = None,
    ) -> None:
        """Initialize media storage.

        Args:
            base_path: Base directory for local storage. Defaults to settings.media_storage_path
            client: HTTP client used for downloads (a new one per download if omitted)
            download: Download media instead of storing references. Defaults to settings
        """
        self.base_path = base_path or Path(settings.media_storage_path)
        self.client = client
        self.download = settings.media_download_enabled if download is None else download

    def store(self, url: str, kind: str) -> StoredMedia:
        """Store media according to the configured mode."""
        if self.download:
            return self.store_from_url(url, kind)
        return self.store_url_reference(url, kind)

    def store_url_reference(self, url: str, kind: str) -> StoredMedia:
        """Store a URL reference without downloading."""
        self._check_kind(kind)
        return StoredMedia(reference=url, storage_type="url", kind=kind)

    def store_from_url(self, url: str, kind: str) -> StoredMedia:
        """Download media from a URL into local storage.

        Raises:
            MediaStorageError: If the download fails.
        """
        self._check_kind(kind)
        subdir = self.base_path / f"{kind}s"
        subdir.mkdir(parents=True, exist_ok=True)
        file_path = subdir / f"{uuid4().hex}{self._guess_extension(url, kind)}"

        logger.info("media_download_started", url=url[:100], kind=kind)

        try:
            if self.client is not None:
                response = self.client.get(url)
            else:
                with httpx.Client(
                    timeout=settings.media_download_timeout, follow_redirects=True
                ) as client:
                    response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("media_download_failed", url=url[:100], error=str(e))
            raise MediaStorageError(f"Could not fetch {kind} from {url}") from e

        content = response.content
        file_path.write_bytes(content)

        logger.info("media_download_completed", file_path=str(file_path), file_size=len(content))

        return StoredMedia(
            reference=f"file://{file_path.absolute()}",
            storage_type="local",
            kind=kind,
            file_size_bytes=len(content),
            checksum=hashlib.sha256(content).hexdigest(),
            metadata={
                "source_url": url,
                "content_type": response.headers.get("content-type"),
            },
        )

    def _check_kind(self, kind: str) -> None:
        if kind not in MEDIA_KINDS:
            raise ValueError(f"Unknown media kind: {kind}")

    def _guess_extension(self, url: str, kind: str) -> str:
        """Guess file extension from URL or media kind."""
        path = url.split("?")[0]
        name = path.split("/")[-1]
        if "." in name:
            return "." + name.split(".")[-1].lower()
        return ".mp4" if kind == "video" else ".jpg"
