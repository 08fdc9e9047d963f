import io
from collections.abc import Callable

import pytest
from starlette.datastructures import Headers, UploadFile


@pytest.fixture()
def make_upload() -> Callable[..., UploadFile]:
    """Build an in-memory multipart upload with the given MIME type."""

    def _make(
        filename: str | None,
        content_type: str,
        content: bytes = b"media-bytes",
    ) -> UploadFile:
        return UploadFile(
            file=io.BytesIO(content),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    return _make
