from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TitledVideo:
    """One titled video of a presentation."""

    titulo: str
    video: str  # public URL path, e.g. "/videos/1712345678901-clip.mp4"


@dataclass
class Presentation:
    """Represents a row from the presentations table."""

    id: int
    nombre: str
    imagen: str  # public URL path, e.g. "/imagenes/1712345678901-face.png"
    titulos: list[TitledVideo] = field(default_factory=list)
    created_at: datetime | None = None
