from placelens.services.place_extraction import CandidateKind, generate_candidates


def test_deduplicates_numbered_venue_and_separates_address():
    candidates = generate_candidates(
        ["Salagdoong Beach", "15. Salagdoong Beach", "WELCOME", "25 W 28TH ST"]
    )

    assert candidates.venue_names == ["Salagdoong Beach"]
    assert candidates.address_texts == ["25 W 28TH ST"]


def test_first_seen_cleaned_form_wins():
    candidates = generate_candidates(["2. Blue-Bottle Coffee!", "Blue Bottle Coffee", "blue bottle coffee"])

    assert candidates.venue_names == ["Blue-Bottle Coffee"]


def test_preserves_first_seen_order():
    candidates = generate_candidates(["Pier 39", "Tokyo Ramen Shop", "Pier 39", "Cesar's Cafe"])

    assert candidates.venue_names == ["Pier 39", "Tokyo Ramen Shop", "Cesar's Cafe"]


def test_addresses_dedupe_only_exact_matches():
    candidates = generate_candidates(["25 W 28TH ST", "25 W 28TH ST", "25 W 28th St"])

    assert candidates.address_texts == ["25 W 28TH ST", "25 W 28th St"]
    assert candidates.venue_names == []


def test_addresses_are_never_venues():
    candidates = generate_candidates(["25 W 28TH ST", "Nubeluz"])

    assert [c.kind for c in candidates.venues] == [CandidateKind.VENUE]
    assert [c.kind for c in candidates.addresses] == [CandidateKind.ADDRESS]
    assert candidates.venue_names == ["Nubeluz"]


def test_noise_is_discarded():
    candidates = generate_candidates(["6806", "DAY 2 & 3 NIGHTS", "BEST FOOD IN TOWN EVER", "ok"])

    assert candidates.is_empty()


def test_numbered_trip_header_matches_address_pattern_only():
    candidates = generate_candidates(["4 DAYS & 3 NIGHTS"])

    assert candidates.venue_names == []
    assert candidates.address_texts == ["4 DAYS & 3 NIGHTS"]


def test_candidate_keys_are_normalized():
    candidates = generate_candidates(["Cesar’s Cafe!"])

    venue = candidates.venues[0]
    assert venue.raw == "Cesar’s Cafe!"
    assert venue.cleaned == "Cesar’s Cafe"
    assert venue.key == "cesar s cafe"


def test_empty_input():
    candidates = generate_candidates([])

    assert candidates.venue_names == []
    assert candidates.address_texts == []
    assert generate_candidates(None).is_empty()
