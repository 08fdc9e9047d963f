"""Name transforms for the completion game.

Every function takes the stored display name and returns a new value; the
input is never modified. Only the two-letter remover draws randomness.
"""

import random
from collections.abc import Sequence

from sinvoz.game.exceptions import InvalidModeError
from sinvoz.game.models import PLACEHOLDER, ObfuscationResult, RemovalMode


def remove_first_letter(name: str) -> ObfuscationResult:
    """Replace the first character with a placeholder.

    The removed letter is reported as a string. Names of one character or
    less come back as a lone placeholder, with the whole name reported as
    removed.
    """
    if len(name) <= 1:
        return ObfuscationResult(PLACEHOLDER, name)
    return ObfuscationResult(PLACEHOLDER + name[1:], name[0])


def remove_two_random_letters_with_underscore(
    name: str,
    rng: random.Random | None = None,
) -> ObfuscationResult:
    """Hide two distinct characters, never the first one.

    Names of two characters or less lose their first character and report
    nothing removed.
    """
    if len(name) <= 2:
        return ObfuscationResult(name[1:], [])

    rng = rng or random.Random()
    indexes = sorted(rng.sample(range(1, len(name)), 2), reverse=True)

    chars = list(name)
    removed: list[str] = []
    for index in indexes:
        removed.append(chars[index])
        chars[index] = PLACEHOLDER
    return ObfuscationResult("".join(chars), removed)


def all_hidden(name: str) -> str:
    return ""


def letter_split(name: str) -> list[str]:
    return list(name)


def validate_missing_letter(removed: Sequence[str], candidate: str) -> bool:
    """Return True when *candidate* is NOT one of the removed letters.

    *removed* may be a string, in which case each character counts as one
    removed letter. Callers accept a guess when this returns False.
    """
    return candidate not in list(removed)


def transform(
    name: str,
    mode: RemovalMode | str,
    rng: random.Random | None = None,
) -> ObfuscationResult:
    """Apply the transform selected by *mode*.

    Raises:
        InvalidModeError: if *mode* is not a known removal mode.
    """
    mode = RemovalMode.parse(mode)
    if mode is RemovalMode.FIRST_LETTER:
        return remove_first_letter(name)
    if mode is RemovalMode.TWO_RANDOM_LETTERS:
        return remove_two_random_letters_with_underscore(name, rng)
    if mode is RemovalMode.ALL_HIDDEN:
        return ObfuscationResult(all_hidden(name))
    if mode is RemovalMode.LETTER_SPLIT:
        return ObfuscationResult(letter_split(name))
    raise InvalidModeError(f"Unknown removal mode '{mode}'")
