from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from sinvoz.database.connection import get_connection
from sinvoz.database.exceptions import PresentationNotFoundError
from sinvoz.database.models import Presentation, TitledVideo


def _to_presentation(row: dict[str, Any]) -> Presentation:
    return Presentation(
        id=row["id"],
        nombre=row["nombre"],
        imagen=row["imagen"],
        titulos=[
            TitledVideo(titulo=item["titulo"], video=item["video"])
            for item in row["titulos"] or []
        ],
        created_at=row.get("created_at"),
    )


class PresentationRepository:
    """Database operations for the presentations table."""

    def create(
        self,
        nombre: str,
        imagen: str,
        titulos: list[TitledVideo],
    ) -> Presentation:
        """Insert a presentation and return it with its generated id."""
        payload = [{"titulo": t.titulo, "video": t.video} for t in titulos]
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO presentations (nombre, imagen, titulos)
                    VALUES (%s, %s, %s)
                    RETURNING id, nombre, imagen, titulos, created_at
                    """,
                    (nombre, imagen, Jsonb(payload)),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT into presentations returned no row")
        return _to_presentation(row)

    def list_all(self) -> list[Presentation]:
        """Return every stored presentation, oldest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, nombre, imagen, titulos, created_at
                    FROM presentations
                    ORDER BY id
                    """
                )
                rows = cur.fetchall()

        return [_to_presentation(row) for row in rows]

    def find_by_name(self, nombre: str) -> Presentation:
        """Find the first presentation stored under *nombre* (exact match).

        Raises:
            PresentationNotFoundError: if no presentation has this name.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, nombre, imagen, titulos, created_at
                    FROM presentations
                    WHERE nombre = %s
                    ORDER BY id
                    LIMIT 1
                    """,
                    (nombre,),
                )
                row = cur.fetchone()

        if row is None:
            raise PresentationNotFoundError(f"Presentation '{nombre}' not found")
        return _to_presentation(row)
