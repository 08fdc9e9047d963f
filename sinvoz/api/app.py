from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from sinvoz.api.serializers import completion_to_dict, presentation_to_dict
from sinvoz.api.submission import parse_submission, save_submission
from sinvoz.config.settings import Settings
from sinvoz.database.exceptions import PresentationNotFoundError
from sinvoz.database.repositories.presentation_repository import PresentationRepository
from sinvoz.game.exceptions import IncorrectMissingLetterError, InvalidModeError
from sinvoz.game.service import CompletionGame
from sinvoz.logging.logger import Log
from sinvoz.media.exceptions import MissingUploadError, UnsupportedMediaTypeError
from sinvoz.media.media_store import IMAGES_URL_PREFIX, VIDEOS_URL_PREFIX, MediaStore
from sinvoz.media.models import MediaKind

# Response texts are part of the client contract.
SAVED_MESSAGE = "Datos de presentación guardados exitosamente"
SAVE_FAILED_MESSAGE = "Error al guardar los datos de presentación"
LIST_FAILED_MESSAGE = "Error al obtener los datos de presentación"
UNSUPPORTED_FORMAT_MESSAGE = "Este formato de archivo no es soportado"
MISSING_FIELDS_MESSAGE = "Faltan datos de la presentación"
NOT_FOUND_MESSAGE = "No se encontró la presentación con ese nombre"
LOOKUP_FAILED_MESSAGE = "Error al obtener la presentación"
INVALID_MODE_MESSAGE = "Tipo no válido"
INCORRECT_LETTER_MESSAGE = "Letra faltante incorrecta"


def _error(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": text})


def _message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": text})


def create_app(
    settings: Settings,
    repository: PresentationRepository | None = None,
    media_store: MediaStore | None = None,
    game: CompletionGame | None = None,
) -> FastAPI:
    """Wire routes, static media mounts and CORS around the given collaborators."""
    repository = repository or PresentationRepository()
    media_store = media_store or MediaStore(settings.images_dir, settings.videos_dir)
    game = game or CompletionGame(repository)
    media_store.ensure_directories()

    app = FastAPI(title="Sinvoz presentations")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount(
        IMAGES_URL_PREFIX,
        StaticFiles(directory=media_store.directory(MediaKind.IMAGE), check_dir=False),
        name="imagenes",
    )
    app.mount(
        VIDEOS_URL_PREFIX,
        StaticFiles(directory=media_store.directory(MediaKind.VIDEO), check_dir=False),
        name="videos",
    )

    @app.post("/presentar", response_model=None)
    async def create_presentation(request: Request) -> dict[str, Any] | JSONResponse:
        async with request.form() as form:
            try:
                submission = parse_submission(form)
            except UnsupportedMediaTypeError as exc:
                Log.warning(f"Rejected presentation upload: {exc}")
                return _error(400, UNSUPPORTED_FORMAT_MESSAGE)
            except MissingUploadError as exc:
                Log.warning(f"Rejected presentation upload: {exc}")
                return _error(400, MISSING_FIELDS_MESSAGE)

            try:
                presentation = await run_in_threadpool(
                    save_submission, submission, media_store, repository
                )
            except Exception as exc:
                Log.error(f"Failed to save presentation '{submission.nombre}'", exc)
                return _error(500, SAVE_FAILED_MESSAGE)

        Log.info(f"Saved presentation {presentation.id} ('{presentation.nombre}')")
        return {"message": SAVED_MESSAGE}

    @app.get("/presentar", response_model=None)
    def list_presentations() -> list[dict[str, Any]] | JSONResponse:
        try:
            presentations = repository.list_all()
        except Exception as exc:
            Log.error("Failed to list presentations", exc)
            return _error(500, LIST_FAILED_MESSAGE)
        return [presentation_to_dict(p) for p in presentations]

    @app.get("/completar/{nombre}", response_model=None)
    def get_presentation(nombre: str) -> dict[str, Any] | JSONResponse:
        try:
            presentation = game.presentation(nombre)
        except PresentationNotFoundError:
            return _message(404, NOT_FOUND_MESSAGE)
        except Exception as exc:
            Log.error(f"Failed to fetch presentation '{nombre}'", exc)
            return _message(500, LOOKUP_FAILED_MESSAGE)
        return presentation_to_dict(presentation)

    @app.get("/completar/{nombre}/{tipo}", response_model=None)
    def play_round(nombre: str, tipo: str) -> dict[str, Any] | JSONResponse:
        try:
            result = game.play(nombre, tipo)
        except PresentationNotFoundError:
            return _message(404, NOT_FOUND_MESSAGE)
        except InvalidModeError:
            return _message(400, INVALID_MODE_MESSAGE)
        except Exception as exc:
            Log.error(f"Failed to build '{tipo}' round for '{nombre}'", exc)
            return _message(500, LOOKUP_FAILED_MESSAGE)
        return completion_to_dict(result)

    @app.get("/completar/{nombre}/{tipo}/{letra_faltante}", response_model=None)
    def guess_letter(
        nombre: str, tipo: str, letra_faltante: str
    ) -> dict[str, Any] | JSONResponse:
        try:
            result = game.guess(nombre, tipo, letra_faltante)
        except PresentationNotFoundError:
            return _message(404, NOT_FOUND_MESSAGE)
        except InvalidModeError:
            return _message(400, INVALID_MODE_MESSAGE)
        except IncorrectMissingLetterError:
            return _message(400, INCORRECT_LETTER_MESSAGE)
        except Exception as exc:
            Log.error(f"Failed to check guess for '{nombre}'", exc)
            return _message(500, LOOKUP_FAILED_MESSAGE)
        return completion_to_dict(result)

    return app
