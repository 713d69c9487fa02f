import pytest

from app.services.muscle_ids import parse_muscle_id_field, parse_muscle_ids, serialize_muscle_ids


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("[12] [13]", [12, 13]),
        ("[12]", [12]),
        ("12", [12]),
        ("12, 13, 40", [12, 13, 40]),
        ("[12, 13]", [12, 13]),
        ("[12],[13]", [12, 13]),
        ("[1][2]", [1, 2]),
        (" [7]   [8] ", [7, 8]),
        ("[13] [12] [13]", [13, 12, 13]),
    ],
)
def test_parses_both_encodings(raw, expected):
    assert parse_muscle_ids(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "[]", "[ ]", None, ",,"])
def test_empty_fields_yield_no_ids(raw):
    assert parse_muscle_ids(raw) == []


def test_non_integer_tokens_are_dropped_and_reported():
    parsed = parse_muscle_id_field("[12] [abc] [13] [1_000]")
    assert parsed.ids == [12, 13]
    assert parsed.rejected == ["abc", "1_000"]


def test_comma_field_with_junk():
    parsed = parse_muscle_id_field("4, x, 5")
    assert parsed.ids == [4, 5]
    assert parsed.rejected == ["x"]


@pytest.mark.parametrize("raw", ["[12] [13] [40]", "3, 1, 2", "[7]", "", "[5] [oops] [6]"])
@pytest.mark.parametrize("delimiter", ["bracket", "comma"])
def test_parse_is_stable_after_reserializing(raw, delimiter):
    ids = parse_muscle_ids(raw)
    assert parse_muscle_ids(serialize_muscle_ids(ids, delimiter)) == ids


def test_serialize_formats():
    assert serialize_muscle_ids([1, 2]) == "[1] [2]"
    assert serialize_muscle_ids([1, 2], "comma") == "1, 2"
