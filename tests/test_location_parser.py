"""
Tests for parse_location: postal vs. city classification and country inference.
"""
import pytest

from mainapp import EmptyInputError, infer_country, parse_location


@pytest.mark.parametrize("text,expected", [
    ("75001,FR", {"zip": "75001,FR"}),
    ("London,UK", {"q": "London,UK"}),
    ("814146", {"zip": "814146,IN"}),
    ("10001", {"zip": "10001,US"}),
    ("Shimla", {"q": "Shimla"}),
    ("  Shimla  ", {"q": "Shimla"}),
    ("new delhi, in", {"q": "new delhi,IN"}),
    ("110001, in", {"zip": "110001,IN"}),
])
def test_request_params(text, expected):
    assert parse_location(text).to_params() == expected


@pytest.mark.parametrize("text", ["123", "90210", "814146", "0123456789", "000000"])
def test_bare_digits_always_take_postal_path(text):
    params = parse_location(text)
    assert params.is_postal
    assert params.name == text


@pytest.mark.parametrize("text", ["12", "12345678901", "12a45", "Paris", "1 2 3", "-12345"])
def test_everything_else_takes_name_path(text):
    assert not parse_location(text).is_postal


def test_country_inference():
    assert infer_country("814146") == "IN"
    assert infer_country("110001") == "IN"
    # leading zero is not an Indian PIN
    assert infer_country("012345") == "US"
    assert infer_country("90210") == "US"
    assert infer_country("1234567") == "US"


def test_explicit_country_is_not_overridden():
    assert parse_location("814146,us").to_params() == {"zip": "814146,US"}


def test_empty_country_part_is_ignored():
    params = parse_location("London,")
    assert params.to_params() == {"q": "London"}
    assert params.country is None


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_input_raises(text):
    with pytest.raises(EmptyInputError) as exc:
        parse_location(text)
    assert exc.value.message == "Please enter a city name"


def test_blank_input_message_is_localized():
    with pytest.raises(EmptyInputError) as exc:
        parse_location("", lang="hi")
    assert exc.value.message == "कृपया शहर का नाम दर्ज करें"
