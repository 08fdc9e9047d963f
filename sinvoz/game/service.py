import random

from sinvoz.database.models import Presentation
from sinvoz.database.repositories.presentation_repository import PresentationRepository
from sinvoz.game.exceptions import IncorrectMissingLetterError
from sinvoz.game.models import CompletionResult, RemovalMode
from sinvoz.game.obfuscator import transform, validate_missing_letter
from sinvoz.logging.logger import Log


class CompletionGame:
    """Serve completion-game rounds built from stored presentation names."""

    def __init__(
        self,
        repository: PresentationRepository,
        rng: random.Random | None = None,
    ) -> None:
        self._repository = repository
        self._rng = rng

    def presentation(self, nombre: str) -> Presentation:
        """Look up a presentation by exact name.

        Raises:
            PresentationNotFoundError: if nothing is stored under *nombre*.
        """
        return self._repository.find_by_name(nombre)

    def play(self, nombre: str, tipo: str) -> CompletionResult:
        """Build one round for *nombre* using the mode selector *tipo*.

        The name is resolved before the mode, so an unknown name wins over
        an unknown mode.

        Raises:
            PresentationNotFoundError: if nothing is stored under *nombre*.
            InvalidModeError: if *tipo* is not a known removal mode.
        """
        presentation = self._repository.find_by_name(nombre)
        mode = RemovalMode.parse(tipo)
        result = transform(presentation.nombre, mode, self._rng)
        Log.debug(f"Built '{mode.value}' round for presentation {presentation.id}")
        return CompletionResult(
            nombre_original=presentation.nombre,
            nombre_manipulado=result.manipulated,
            letras_eliminadas=result.removed,
        )

    def guess(self, nombre: str, tipo: str, letra_faltante: str) -> CompletionResult:
        """Build a round and accept it only if *letra_faltante* was removed.

        Raises:
            PresentationNotFoundError: if nothing is stored under *nombre*.
            InvalidModeError: if *tipo* is not a known removal mode.
            IncorrectMissingLetterError: if the guess is not a removed letter.
        """
        result = self.play(nombre, tipo)
        if validate_missing_letter(result.letras_eliminadas, letra_faltante):
            raise IncorrectMissingLetterError(
                f"'{letra_faltante}' is not a missing letter of '{nombre}'"
            )
        return result
