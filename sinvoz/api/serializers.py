from dataclasses import asdict
from typing import Any

from sinvoz.database.models import Presentation
from sinvoz.game.models import CompletionResult


def presentation_to_dict(presentation: Presentation) -> dict[str, Any]:
    return {
        "id": presentation.id,
        "nombre": presentation.nombre,
        "imagen": presentation.imagen,
        "titulos": [asdict(titulo) for titulo in presentation.titulos],
        "createdAt": (
            presentation.created_at.isoformat() if presentation.created_at else None
        ),
    }


def completion_to_dict(result: CompletionResult) -> dict[str, Any]:
    return {
        "nombreOriginal": result.nombre_original,
        "nombreManipulado": result.nombre_manipulado,
        "letrasEliminadas": result.letras_eliminadas,
    }
