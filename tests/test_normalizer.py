import pytest

from voxlist.languages import resolve_language_pack
from voxlist.text import normalize_utterance

EN = resolve_language_pack("en")
HE = resolve_language_pack("he")


def test_english_normalization_rules() -> None:
    result = normalize_utterance("  Please add TWO cucumbers,  tomatoes, and eggs!!  ", EN)

    assert result == "add two cucumbers, tomatoes, and eggs"


def test_comma_words_and_line_breaks_become_commas() -> None:
    assert normalize_utterance("milk comma eggs", EN) == "milk, eggs"
    assert normalize_utterance("milk\neggs\r\nbread", EN) == "milk, eggs, bread"


def test_fillers_removed_only_as_standalone_words() -> None:
    assert normalize_utterance("thanks milk please", EN) == "milk"
    assert normalize_utterance("pleased cheese", EN) == "pleased cheese"


def test_filler_removal_reaches_a_fixed_point() -> None:
    assert normalize_utterance("thank please you milk", EN) == "milk"


def test_stray_commas_and_marks_are_dropped() -> None:
    assert normalize_utterance(", , milk ,, - eggs ,", EN) == "milk, eggs"
    assert normalize_utterance("don't forget", EN) == "don't forget"


def test_hebrew_normalization() -> None:
    assert normalize_utterance("בבקשה חמש עגבניות.", HE) == "חמש עגבניות"
    assert normalize_utterance("חלב פסיק ביצים", HE) == "חלב, ביצים"


def test_empty_input() -> None:
    assert normalize_utterance("", EN) == ""
    assert normalize_utterance(" ?! ", EN) == ""
    assert normalize_utterance("please thank you", EN) == ""


@pytest.mark.parametrize(
    "text",
    [
        "Two cucumbers, tomatoes, and eggs!",
        "milk comma comma eggs",
        "thank please you  -- milk",
        "  ,,Delete the MILK from my list?? ",
        "בבקשה תמחק את החלב, תודה",
        "rock 'n' roll",
    ],
)
def test_normalization_is_idempotent(text: str) -> None:
    pack = HE if any("֐" <= char <= "׿" for char in text) else EN
    once = normalize_utterance(text, pack)

    assert normalize_utterance(once, pack) == once
