import random

import pytest

from sinvoz.game.exceptions import InvalidModeError
from sinvoz.game.models import ObfuscationResult, RemovalMode
from sinvoz.game.obfuscator import (
    all_hidden,
    letter_split,
    remove_first_letter,
    remove_two_random_letters_with_underscore,
    transform,
    validate_missing_letter,
)


class TestRemoveFirstLetter:
    def test_replaces_first_letter_with_placeholder(self) -> None:
        result = remove_first_letter("Maria")
        assert result.manipulated == "_aria"
        assert result.removed == "M"

    def test_keeps_length_and_tail(self) -> None:
        name = "Guillermo"
        result = remove_first_letter(name)
        assert len(result.manipulated) == len(name)
        assert result.manipulated[1:] == name[1:]

    def test_single_character_reports_whole_name(self) -> None:
        assert remove_first_letter("A") == ObfuscationResult("_", "A")

    def test_empty_name_returns_lone_placeholder(self) -> None:
        assert remove_first_letter("") == ObfuscationResult("_", "")


class TestRemoveTwoRandomLetters:
    @pytest.mark.parametrize("name", ["", "A", "Al"])
    def test_short_name_drops_first_letter_without_reporting(self, name: str) -> None:
        result = remove_two_random_letters_with_underscore(name)
        assert result.manipulated == name[1:]
        assert result.removed == []

    def test_three_letter_name_hides_both_tail_letters_highest_first(self) -> None:
        result = remove_two_random_letters_with_underscore("Ana")
        assert result.manipulated == "A__"
        assert result.removed == ["a", "n"]

    @pytest.mark.parametrize("seed", range(50))
    def test_hides_two_distinct_non_first_positions(self, seed: int) -> None:
        name = "Alejandro"
        result = remove_two_random_letters_with_underscore(name, random.Random(seed))

        hidden = [i for i, ch in enumerate(result.manipulated) if ch == "_"]
        assert len(result.manipulated) == len(name)
        assert result.manipulated[0] == "A"
        assert len(hidden) == 2
        assert all(i >= 1 for i in hidden)
        assert result.removed == [name[i] for i in sorted(hidden, reverse=True)]
        for i, ch in enumerate(result.manipulated):
            if i not in hidden:
                assert ch == name[i]

    def test_every_eligible_position_can_be_chosen(self) -> None:
        rng = random.Random(1234)
        seen: set[int] = set()
        for _ in range(200):
            result = remove_two_random_letters_with_underscore("Roberto", rng)
            seen.update(i for i, ch in enumerate(result.manipulated) if ch == "_")
        assert seen == {1, 2, 3, 4, 5, 6}


class TestAllHiddenAndLetterSplit:
    @pytest.mark.parametrize("name", ["", "Maria", "José Luis"])
    def test_all_hidden_is_always_empty(self, name: str) -> None:
        assert all_hidden(name) == ""

    def test_letter_split_preserves_order(self) -> None:
        assert letter_split("abc") == ["a", "b", "c"]

    def test_letter_split_of_empty_name(self) -> None:
        assert letter_split("") == []


class TestValidateMissingLetter:
    def test_returns_false_when_letter_was_removed(self) -> None:
        assert validate_missing_letter(["M"], "M") is False

    def test_returns_true_when_letter_was_not_removed(self) -> None:
        assert validate_missing_letter(["M"], "Z") is True

    def test_is_case_sensitive(self) -> None:
        assert validate_missing_letter(["M"], "m") is True

    def test_nothing_removed_rejects_every_guess(self) -> None:
        assert validate_missing_letter([], "a") is True

    def test_string_of_removed_letters_counts_each_character(self) -> None:
        assert validate_missing_letter("M", "M") is False
        assert validate_missing_letter("M", "") is True
        assert validate_missing_letter("M", "Ma") is True


class TestTransform:
    def test_accepts_selector_strings(self) -> None:
        assert transform("Maria", "incompleto1") == ObfuscationResult("_aria", "M")
        assert transform("Maria", "incompletoTotal") == ObfuscationResult("", [])

    @pytest.mark.parametrize("mode", ["bogus", "", "INCOMPLETO1"])
    def test_rejects_unknown_mode(self, mode: str) -> None:
        with pytest.raises(InvalidModeError):
            transform("Maria", mode)

    def test_first_letter_mode(self) -> None:
        assert transform("Maria", RemovalMode.FIRST_LETTER) == ObfuscationResult("_aria", "M")

    def test_two_random_letters_mode_uses_given_rng(self) -> None:
        first = transform("Valentina", RemovalMode.TWO_RANDOM_LETTERS, random.Random(7))
        second = transform("Valentina", RemovalMode.TWO_RANDOM_LETTERS, random.Random(7))
        assert first == second
        assert first.manipulated.count("_") == 2

    def test_all_hidden_mode_tracks_nothing(self) -> None:
        assert transform("Maria", RemovalMode.ALL_HIDDEN) == ObfuscationResult("", [])

    def test_letter_split_mode_tracks_nothing(self) -> None:
        assert transform("Ana", RemovalMode.LETTER_SPLIT) == ObfuscationResult(
            ["A", "n", "a"], []
        )


class TestRemovalModeParse:
    @pytest.mark.parametrize(
        ("selector", "mode"),
        [
            ("incompleto1", RemovalMode.FIRST_LETTER),
            ("incompleto2", RemovalMode.TWO_RANDOM_LETTERS),
            ("incompletoTotal", RemovalMode.ALL_HIDDEN),
            ("letrasSeparadas", RemovalMode.LETTER_SPLIT),
        ],
    )
    def test_parses_known_selectors(self, selector: str, mode: RemovalMode) -> None:
        assert RemovalMode.parse(selector) is mode

    @pytest.mark.parametrize("selector", ["", "incompleto3", "INCOMPLETO1", "total"])
    def test_rejects_unknown_selectors(self, selector: str) -> None:
        with pytest.raises(InvalidModeError, match="Unknown removal mode"):
            RemovalMode.parse(selector)
