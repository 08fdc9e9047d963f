from dataclasses import dataclass, field
from enum import Enum

from sinvoz.game.exceptions import InvalidModeError

PLACEHOLDER = "_"


class RemovalMode(str, Enum):
    """Which transform the completion game applies to a name."""

    FIRST_LETTER = "incompleto1"
    TWO_RANDOM_LETTERS = "incompleto2"
    ALL_HIDDEN = "incompletoTotal"
    LETTER_SPLIT = "letrasSeparadas"

    @classmethod
    def parse(cls, value: str) -> "RemovalMode":
        """Resolve a URL selector to a mode.

        Raises:
            InvalidModeError: if *value* is not one of the known selectors.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(f"Unknown removal mode '{value}'") from None


@dataclass(frozen=True)
class ObfuscationResult:
    """A transformed name plus the letters that were hidden, in removal order."""

    manipulated: str | list[str]
    removed: str | list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CompletionResult:
    """Payload of one round of the completion game."""

    nombre_original: str
    nombre_manipulado: str | list[str]
    letras_eliminadas: str | list[str] = field(default_factory=list)
