import pytest

from placelens.services.place_extraction import (
    clean_venue_candidate,
    make_key,
    normalize_whitespace,
    strip_code_fences,
    strip_list_prefix,
    strip_trailing_punctuation,
)


def test_normalize_whitespace_collapses_runs():
    assert normalize_whitespace("  Blue \t Bottle\n\nCoffee  ") == "Blue Bottle Coffee"


def test_normalize_whitespace_is_idempotent():
    once = normalize_whitespace(" a  b   c ")
    assert normalize_whitespace(once) == once


def test_normalize_whitespace_empty():
    assert normalize_whitespace("") == ""
    assert normalize_whitespace(None) == ""


@pytest.mark.parametrize("text,expected", [
    ("15. Salagdoong Beach", "Salagdoong Beach"),
    ("14Place", "Place"),
    ("2) Cesar's Cafe", "Cesar's Cafe"),
    ("3 - Pier 39", "Pier 39"),
    ("7: Nubeluz", "Nubeluz"),
    ("[3] Blue Bottle Coffee", "Blue Bottle Coffee"),
    ("[12]. Tokyo Ramen Shop", "Tokyo Ramen Shop"),
    ("4 DAYS & 3 NIGHTS", "DAYS & 3 NIGHTS"),
])
def test_strip_list_prefix(text, expected):
    assert strip_list_prefix(text) == expected


def test_strip_list_prefix_applies_once():
    assert strip_list_prefix("1. 2. Salagdoong Beach") == "2. Salagdoong Beach"


@pytest.mark.parametrize("text", ["Pier 39", "2024 Food Tour", "Salagdoong Beach"])
def test_strip_list_prefix_leaves_unnumbered_text(text):
    assert strip_list_prefix(text) == text


def test_strip_trailing_punctuation():
    assert strip_trailing_punctuation("Salagdoong Beach!!! -") == "Salagdoong Beach"
    assert strip_trailing_punctuation("Nubeluz, ;:?") == "Nubeluz"
    assert strip_trailing_punctuation("Pier 39") == "Pier 39"


def test_make_key_is_case_and_punctuation_insensitive():
    assert make_key("Blue-Bottle  COFFEE!") == make_key("blue bottle coffee")
    assert make_key("Blue-Bottle  COFFEE!") == "blue bottle coffee"


def test_make_key_unifies_apostrophes():
    assert make_key("Cesar’s Cafe") == make_key("Cesar's Cafe") == "cesar s cafe"


def test_make_key_distinguishes_accented_letters():
    assert make_key("Café Luna!") != make_key("cafe luna")


@pytest.mark.parametrize("text", ["Café Luna!", "15. Salagdoong Beach", "  Cesar’s  Cafe ", ""])
def test_make_key_is_idempotent(text):
    assert make_key(make_key(text)) == make_key(text)


def test_clean_venue_candidate_composes_steps():
    assert clean_venue_candidate("  15.  Salagdoong   Beach!! ") == "Salagdoong Beach"


def test_clean_venue_candidate_empty():
    assert clean_venue_candidate("") == ""


def test_strip_code_fences():
    assert strip_code_fences('```json\n[{"title": "Pier 39"}]\n```') == '[{"title": "Pier 39"}]'
    assert strip_code_fences("```\n[]\n```") == "[]"
    assert strip_code_fences("[]") == "[]"
