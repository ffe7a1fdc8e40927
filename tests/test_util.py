from keyid.util import contains_any_of, parse_energy


def test_parse_energy_reads_number():
    assert parse_energy("Energy 7") == 7
    assert parse_energy("Great tune / Energy 10 / peak") == 10


def test_parse_energy_uses_first_match():
    assert parse_energy("Energy 3 Energy 9") == 3


def test_parse_energy_missing_is_zero():
    assert parse_energy("") == 0
    assert parse_energy("no rating here") == 0
    assert parse_energy("energy 5") == 0


def test_contains_any_of_matches_first_entry():
    assert contains_any_of(["a", "b"], ["b", "c"]) is True
    assert contains_any_of(["house"], ["house"]) is True


def test_contains_any_of_only_checks_first_entry():
    assert contains_any_of(["a"], ["c", "a"]) is False


def test_contains_any_of_empty_inputs():
    assert contains_any_of([], []) is False
    assert contains_any_of(["x"], []) is False
    assert contains_any_of(["x"], [""]) is False
    assert contains_any_of(["", "x"], [""]) is True