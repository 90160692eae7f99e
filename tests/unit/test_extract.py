from __future__ import annotations

import pytest

from text_splitter.errors import PatternError
from text_splitter.extract import DEFAULT_EXTRACT_PATTERN, regex_extract


def test_regex_extract_vowels():
    assert regex_extract("hola mundo", "[aeiou]") == ["o", "a", "u", "o"]


def test_regex_extract_default_pattern_handles_accents():
    assert regex_extract("Árbol ÚNICO", DEFAULT_EXTRACT_PATTERN) == ["Á", "o", "Ú", "I", "O"]


def test_regex_extract_ignores_case_by_default():
    assert regex_extract("HOLA", "[aeiou]") == ["O", "A"]


def test_regex_extract_case_sensitive():
    assert regex_extract("HOLA", "[aeiou]", ignore_case=False) == []


def test_regex_extract_no_matches():
    assert regex_extract("xyz", r"\d") == []


def test_regex_extract_groups_return_full_match():
    assert regex_extract("Code: python", r"code: (\w+)") == ["Code: python"]


def test_regex_extract_first_match_only():
    assert regex_extract("a1b2", r"\d", global_match=False) == ["1"]


def test_regex_extract_first_match_only_without_match():
    assert regex_extract("ab", r"\d", global_match=False) == []


def test_regex_extract_keeps_empty_matches():
    assert regex_extract("ab", "x*") == ["", "", ""]


def test_regex_extract_matches_are_literals_in_order():
    text = "cat dog cat bird"
    matches = regex_extract(text, r"\w+")
    assert matches == ["cat", "dog", "cat", "bird"]

    offsets = []
    position = 0
    for match in matches:
        position = text.index(match, position)
        offsets.append(position)
        position += len(match)
    assert offsets == sorted(set(offsets))


def test_regex_extract_is_idempotent():
    text = "Error 1, error 2, ERROR 3"
    assert regex_extract(text, r"error \d") == regex_extract(text, r"error \d")


def test_regex_extract_invalid_pattern():
    with pytest.raises(PatternError):
        regex_extract("abc", "[a-")
