import shutil
import time
from collections.abc import Callable
from pathlib import Path, PurePosixPath, PureWindowsPath

from starlette.datastructures import UploadFile

from sinvoz.logging.logger import Log
from sinvoz.media.exceptions import MissingUploadError, UnsupportedMediaTypeError
from sinvoz.media.models import MediaKind, StoredMedia

IMAGES_URL_PREFIX = "/imagenes"
VIDEOS_URL_PREFIX = "/videos"

_COPY_CHUNK_SIZE = 1024 * 1024


def media_kind(content_type: str | None) -> MediaKind:
    """Classify an upload by its MIME type.

    Raises:
        UnsupportedMediaTypeError: for anything other than image/* or video/*.
    """
    content_type = (content_type or "").lower()
    if content_type.startswith("image/"):
        return MediaKind.IMAGE
    if content_type.startswith("video/"):
        return MediaKind.VIDEO
    raise UnsupportedMediaTypeError(f"Unsupported media type '{content_type}'")


def stored_filename(original_name: str, millis: int) -> str:
    """Build the on-disk name: {epoch_millis}-{original basename}."""
    # Clients may send full paths with either separator
    basename = PureWindowsPath(PurePosixPath(original_name).name).name
    return f"{millis}-{basename}"


class MediaStore:
    """Writes uploaded images and videos under the media root."""

    def __init__(
        self,
        images_dir: Path,
        videos_dir: Path,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._dirs = {MediaKind.IMAGE: images_dir, MediaKind.VIDEO: videos_dir}
        self._clock = clock

    def ensure_directories(self) -> None:
        for directory in self._dirs.values():
            directory.mkdir(parents=True, exist_ok=True)

    def directory(self, kind: MediaKind) -> Path:
        return self._dirs[kind]

    def save(self, upload: UploadFile) -> StoredMedia:
        """Persist *upload* in the directory matching its MIME type.

        A name already taken in the same millisecond moves on to the next
        millisecond, so earlier uploads are never overwritten.

        Raises:
            MissingUploadError: if the upload has no file name.
            UnsupportedMediaTypeError: if it is neither an image nor a video.
        """
        if not upload.filename:
            raise MissingUploadError("Uploaded file has no name")
        kind = media_kind(upload.content_type)
        millis = int(self._clock() * 1000)

        upload.file.seek(0)
        while True:
            filename = stored_filename(upload.filename, millis)
            target = self._dirs[kind] / filename
            try:
                with target.open("xb") as buffer:
                    shutil.copyfileobj(upload.file, buffer, length=_COPY_CHUNK_SIZE)
                break
            except FileExistsError:
                millis += 1

        prefix = IMAGES_URL_PREFIX if kind is MediaKind.IMAGE else VIDEOS_URL_PREFIX
        Log.info(f"Stored {kind.value} upload as {target}")
        return StoredMedia(kind=kind, filename=filename, url=f"{prefix}/{filename}")

    def delete(self, stored: StoredMedia) -> None:
        """Remove a previously stored file; missing files are ignored."""
        self._dirs[stored.kind].joinpath(stored.filename).unlink(missing_ok=True)

    def save_image(self, upload: UploadFile) -> StoredMedia:
        return self._save_expecting(upload, MediaKind.IMAGE)

    def save_video(self, upload: UploadFile) -> StoredMedia:
        return self._save_expecting(upload, MediaKind.VIDEO)

    def _save_expecting(self, upload: UploadFile, kind: MediaKind) -> StoredMedia:
        actual = media_kind(upload.content_type)
        if actual is not kind:
            raise UnsupportedMediaTypeError(
                f"Expected {kind.value} upload, got '{upload.content_type}'"
            )
        return self.save(upload)
