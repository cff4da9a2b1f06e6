import json

import pytest

from geoip_service.mapper import build_unresolved_record, get_or_default, map_geo_record
from tests.common import RESOLVED_KEYS, StaticLocalizer, milan_record

IP = "81.2.69.160"


def _map(record: dict, language: str = "en", localized: str = "") -> dict:
    result = map_geo_record(record, IP, language, StaticLocalizer(localized))
    return result.model_dump(by_alias=True)


def test_full_record_is_flattened() -> None:
    body = _map(milan_record(), language="it")

    assert body == {
        "ipAddress": IP,
        "latitude": 45.4722,
        "longitude": 9.1922,
        "postalCode": "20121",
        "continentCode": "EU",
        "continentName": "Europe",
        "countryCode": "IT",
        "countryLabel": "Italia",
        "countryName": "Italy",
        "regionCode": "25",
        "regionName": "Lombardy",
        "provinceCode": "MI",
        "provinceName": "Milan",
        "cityName": "Milan",
        "timeZone": "Europe/Rome",
    }


def test_empty_record_is_fully_defaulted() -> None:
    body = _map({})

    assert set(body) == RESOLVED_KEYS
    assert body["ipAddress"] == IP
    assert body["latitude"] == 0.0
    assert body["longitude"] == 0.0
    assert all(body[key] == "" for key in RESOLVED_KEYS - {"ipAddress", "latitude", "longitude"})


def test_no_subdivisions_leaves_region_and_province_empty() -> None:
    body = _map(milan_record(subdivisions=None))

    assert body["regionCode"] == body["regionName"] == ""
    assert body["provinceCode"] == body["provinceName"] == ""


def test_single_subdivision_is_the_region() -> None:
    body = _map(milan_record(subdivisions=[{"iso_code": "25", "names": {"en": "Lombardy"}}]))

    assert body["regionCode"] == "25"
    assert body["regionName"] == "Lombardy"
    assert body["provinceCode"] == body["provinceName"] == ""


def test_subdivisions_are_taken_positionally() -> None:
    subdivisions = [
        {"iso_code": "ZZ", "names": {"en": "Second alphabetically"}},
        {"iso_code": "AA", "names": {"en": "First alphabetically"}},
    ]
    body = _map(milan_record(subdivisions=subdivisions))

    assert body["regionCode"] == "ZZ"
    assert body["provinceCode"] == "AA"


def test_country_name_falls_back_to_english_label_to_localized() -> None:
    record = milan_record(country={"iso_code": "FR", "names": {"en": "France"}})

    body = _map(record, language="it", localized="")

    assert body["countryName"] == "France"
    assert body["countryLabel"] == ""


def test_localized_name_fills_missing_label() -> None:
    record = milan_record(country={"iso_code": "FR", "names": {"en": "France"}})
    localizer = StaticLocalizer("Francia")

    body = map_geo_record(record, IP, "it", localizer).model_dump(by_alias=True)

    assert body["countryLabel"] == "Francia"
    assert body["countryName"] == "France"
    assert localizer.calls == [("it", "FR")]


def test_localized_name_fills_both_when_country_has_no_names() -> None:
    body = _map(milan_record(country={"iso_code": "FR"}), language="it", localized="Francia")

    assert body["countryLabel"] == "Francia"
    assert body["countryName"] == "Francia"


def test_localizer_not_consulted_when_names_present() -> None:
    localizer = StaticLocalizer("unused")

    map_geo_record(milan_record(), IP, "it", localizer)

    assert localizer.calls == []


def test_other_names_are_english_regardless_of_language() -> None:
    body = _map(milan_record(), language="de")

    assert body["cityName"] == "Milan"
    assert body["continentName"] == "Europe"
    assert body["regionName"] == "Lombardy"


@pytest.mark.parametrize(
    "overrides",
    [
        {"location": {"latitude": None, "longitude": "9.1"}},
        {"location": "not-a-mapping"},
        {"subdivisions": {"iso_code": "25"}},
        {"city": {"names": None}},
        {"country": {"iso_code": 380, "names": ["Italy"]}},
    ],
)
def test_malformed_groups_short_circuit_to_defaults(overrides: dict) -> None:
    body = _map(milan_record(**overrides))

    assert set(body) == RESOLVED_KEYS


def test_integer_coordinates_are_numbers() -> None:
    body = _map(milan_record(location={"latitude": 45, "longitude": 9}))

    assert body["latitude"] == 45.0
    assert isinstance(body["latitude"], float)


def test_serialized_record_keeps_every_key() -> None:
    payload = map_geo_record({"country": {"iso_code": "IT"}}, IP, "en", StaticLocalizer()).model_dump_json(
        by_alias=True
    )

    assert set(json.loads(payload)) == RESOLVED_KEYS


def test_get_or_default() -> None:
    record = {"a": {"b": [{"c": "x"}]}}

    assert get_or_default(record, ("a", "b", 0, "c"), "") == "x"
    assert get_or_default(record, ("a", "b", 1, "c"), "") == ""
    assert get_or_default(record, ("a", "missing", 0), "") == ""
    assert get_or_default(None, ("a",), 0.0) == 0.0
    assert get_or_default(record, ("a", "b", 0, "c"), 0.0) == 0.0


def test_unresolved_record_uses_snake_case_key() -> None:
    assert build_unresolved_record("999.999.999.999").model_dump_json() == '{"ip_address":"999.999.999.999"}'
