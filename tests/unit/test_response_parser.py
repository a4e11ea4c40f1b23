import json

import pytest

from placelens.services.place_extraction import (
    PlaceCategory,
    PlaceResponseError,
    parse_category,
    parse_place_items,
)


def test_parses_valid_array():
    response = json.dumps([
        {"title": "Nubeluz", "description": "A rooftop bar.", "category": "Restaurant"},
        {"title": "Pier 39", "description": "A busy pier.", "category": "Landmark"},
    ])

    items = parse_place_items(response)

    assert [i.title for i in items] == ["Nubeluz", "Pier 39"]
    assert items[0].category == PlaceCategory.RESTAURANT
    assert items[1].description == "A busy pier."


def test_parses_markdown_fenced_array():
    response = """```json
[{"title": "Salagdoong Beach", "description": "A cliff-diving beach.", "category": "Activity"}]
```"""

    items = parse_place_items(response)

    assert len(items) == 1
    assert items[0].title == "Salagdoong Beach"


@pytest.mark.parametrize("response", [
    "",
    "Here are the places: Nubeluz and Pier 39",
    '{"title": "Nubeluz", "description": "", "category": "Other"}',
    '[{"title": "Nubeluz"',
])
def test_malformed_payloads_raise(response):
    with pytest.raises(PlaceResponseError):
        parse_place_items(response)


def test_drops_elements_that_do_not_fit_shape():
    response = json.dumps([
        "Nubeluz",
        {"description": "No title", "category": "Other"},
        {"title": "   ", "description": "Blank title", "category": "Other"},
        {"title": "Pier 39", "description": "A pier.", "category": "Cafe"},
        {"title": "Tokyo Ramen Shop", "description": "Ramen.", "category": "Restaurant"},
    ])

    items = parse_place_items(response)

    assert [i.title for i in items] == ["Tokyo Ramen Shop"]


def test_missing_description_becomes_empty():
    items = parse_place_items('[{"title": "Pier 39", "category": "Landmark"}]')

    assert items[0].description == ""


def test_titles_are_whitespace_normalized():
    items = parse_place_items('[{"title": "  Blue   Bottle Coffee ", "description": "Coffee.", "category": "Shop"}]')

    assert items[0].title == "Blue Bottle Coffee"


@pytest.mark.parametrize("value,expected", [
    ("Restaurant", PlaceCategory.RESTAURANT),
    ("restaurant", PlaceCategory.RESTAURANT),
    (" LANDMARK ", PlaceCategory.LANDMARK),
    ("Accommodation", PlaceCategory.ACCOMMODATION),
    ("Accomodation", PlaceCategory.ACCOMMODATION),
    ("Cafe", None),
    (None, None),
    (3, None),
])
def test_parse_category(value, expected):
    assert parse_category(value) == expected
