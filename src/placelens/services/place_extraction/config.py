"""
Configuration and constants for place extraction.

This module contains the fixed term lists, thresholds and templates used
throughout the place extraction pipeline.
"""

# Shouting detection: slogans in all caps, not short acronyms or venue names
SHOUTING_MIN_LETTERS = 10
SHOUTING_UPPER_RATIO = 0.85
SHOUTING_MIN_WORDS = 3

MIN_PLACE_NAME_LENGTH = 3

# Trip-duration headers such as "4 DAYS & 3 NIGHTS"
TRIP_DURATION_KEY_PREFIX = "days"
TRIP_DURATION_KEY_MARKERS = ("days &", "nights")

# Short on-screen UI chrome and calls to action, matched on the full key
UI_CHROME_KEYS = frozenset({
    "welcome",
    "welcome to",
    "follow",
    "follow me",
    "follow for more",
    "like and follow",
    "like and subscribe",
    "subscribe",
    "share",
    "comment",
    "save",
    "save this",
    "save for later",
    "link in bio",
    "swipe",
    "swipe up",
    "tap to see more",
    "part 1",
    "part 2",
    "part 3",
    "the end",
})

# Fixed set. Terms outside it (e.g. "Overlook", "Spot") are not treated as generic.
GENERIC_PLACE_TERMS = ("View", "Experience", "Scene", "Location", "City", "Area")

INJECTED_DESCRIPTION_TEMPLATE = "A place mentioned in the video: {title}."
ADDRESS_SENTENCE_TEMPLATE = "Located at {address}."
