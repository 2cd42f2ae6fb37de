from __future__ import annotations

import pytest

from gplaces.common import Component, Language, Location, RestrictPlaceType, format_number


def test_format_number_is_locale_invariant():
    assert format_number(50000) == "50000"
    assert format_number(50000.0) == "50000"
    assert format_number(-122.0) == "-122"
    assert format_number(37.369) == "37.369"
    assert format_number(0.00001) == "0.00001"
    assert format_number(1.5e-10) == "0.00000000015"


def test_location_str():
    assert str(Location(37.369, -122.0)) == "37.369,-122"
    assert str(Location(-33.8670522, 151.1957362)) == "-33.8670522,151.1957362"
    assert str(Location(0.00001, 1)) == "0.00001,1"


def test_location_parse():
    assert Location.parse(" 37.369 , -122.0 ") == Location(37.369, -122.0)


@pytest.mark.parametrize("text", ["", "37.3", "a,b", "1,2,3", ",5"])
def test_location_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Location.parse(text)


def test_language_codes():
    assert Language.ENGLISH.code == "en"
    assert Language.from_code("ZH-cn") is Language.CHINESE_SIMPLIFIED
    with pytest.raises(ValueError):
        Language.from_code("xx")


def test_restrict_type_params():
    assert RestrictPlaceType.CITIES.to_param() == "(cities)"
    assert RestrictPlaceType.REGIONS.to_param() == "(regions)"
    assert RestrictPlaceType.GEOCODE.to_param() == "geocode"
    assert RestrictPlaceType.TRAIN_STATION.to_param() == "train_station"


def test_component_kinds_are_lowercase():
    assert [c.value for c in Component] == [
        "route", "locality", "administrative_area", "postal_code", "country",
    ]
