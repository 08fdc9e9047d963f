from dataclasses import dataclass
from enum import Enum


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class StoredMedia:
    """A file written to the media directories."""

    kind: MediaKind
    filename: str
    url: str  # path served by the static mounts
