"""Multipart presentation submissions: parsing, validation and persistence."""

from dataclasses import dataclass

from starlette.datastructures import FormData, UploadFile

from sinvoz.database.models import Presentation, TitledVideo
from sinvoz.database.repositories.presentation_repository import PresentationRepository
from sinvoz.media.exceptions import MissingUploadError, UnsupportedMediaTypeError
from sinvoz.media.media_store import MediaStore, media_kind
from sinvoz.media.models import MediaKind, StoredMedia

TITLE_COUNT = 3


def title_field(index: int) -> str:
    return f"titulos[{index}][titulo]"


def video_field(index: int) -> str:
    return f"titulos[{index}][video]"


@dataclass(frozen=True)
class TitleSubmission:
    titulo: str
    video: UploadFile


@dataclass(frozen=True)
class PresentationSubmission:
    """A validated POST /presentar body, files not yet written."""

    nombre: str
    imagen: UploadFile
    titulos: list[TitleSubmission]


def _text(form: FormData, name: str) -> str:
    value = form.get(name)
    if not isinstance(value, str) or not value:
        raise MissingUploadError(f"Missing form field '{name}'")
    return value


def _file(form: FormData, name: str, kind: MediaKind) -> UploadFile:
    value = form.get(name)
    if not isinstance(value, UploadFile) or not value.filename:
        raise MissingUploadError(f"Missing file field '{name}'")
    if media_kind(value.content_type) is not kind:
        raise UnsupportedMediaTypeError(
            f"Field '{name}' expects {kind.value}, got '{value.content_type}'"
        )
    return value


def parse_submission(form: FormData) -> PresentationSubmission:
    """Check every field before anything touches the disk.

    Raises:
        MissingUploadError: if a text or file field is absent.
        UnsupportedMediaTypeError: if a file has the wrong MIME type.
    """
    return PresentationSubmission(
        nombre=_text(form, "nombre"),
        imagen=_file(form, "imagen", MediaKind.IMAGE),
        titulos=[
            TitleSubmission(
                titulo=_text(form, title_field(i)),
                video=_file(form, video_field(i), MediaKind.VIDEO),
            )
            for i in range(TITLE_COUNT)
        ],
    )


def save_submission(
    submission: PresentationSubmission,
    media_store: MediaStore,
    repository: PresentationRepository,
) -> Presentation:
    """Write the uploaded files, then insert the presentation row.

    Files written before a failure are deleted before the error propagates.
    """
    stored: list[StoredMedia] = []
    try:
        stored.append(media_store.save_image(submission.imagen))
        for titulo in submission.titulos:
            stored.append(media_store.save_video(titulo.video))
        titulos = [
            TitledVideo(titulo=t.titulo, video=media.url)
            for t, media in zip(submission.titulos, stored[1:])
        ]
        return repository.create(submission.nombre, stored[0].url, titulos)
    except Exception:
        for media in stored:
            media_store.delete(media)
        raise
