import copy
from typing import Any

from geoip_service.readers.base import BaseGeoReader

RESOLVED_KEYS = {
    "ipAddress",
    "latitude",
    "longitude",
    "postalCode",
    "continentCode",
    "continentName",
    "countryCode",
    "countryLabel",
    "countryName",
    "regionCode",
    "regionName",
    "provinceCode",
    "provinceName",
    "cityName",
    "timeZone",
}

MILAN_RECORD: dict[str, Any] = {
    "city": {"geoname_id": 3173435, "names": {"en": "Milan", "it": "Milano", "de": "Mailand"}},
    "continent": {"code": "EU", "geoname_id": 6255148, "names": {"en": "Europe", "it": "Europa"}},
    "country": {"geoname_id": 3175395, "iso_code": "IT", "names": {"en": "Italy", "it": "Italia"}},
    "location": {"accuracy_radius": 20, "latitude": 45.4722, "longitude": 9.1922, "time_zone": "Europe/Rome"},
    "postal": {"code": "20121"},
    "subdivisions": [
        {"geoname_id": 3174618, "iso_code": "25", "names": {"en": "Lombardy", "it": "Lombardia"}},
        {"geoname_id": 3173434, "iso_code": "MI", "names": {"en": "Milan", "it": "Milano"}},
    ],
}


def milan_record(**overrides: Any) -> dict[str, Any]:
    """Deep copy of MILAN_RECORD with top-level groups replaced; None drops a group."""
    record = copy.deepcopy(MILAN_RECORD)
    for key, value in overrides.items():
        if value is None:
            record.pop(key, None)
        else:
            record[key] = value
    return record


class FakeGeoReader(BaseGeoReader):
    """In-memory reader keyed by exact address string."""

    def __init__(self, records: dict[str, dict[str, Any]] | None = None) -> None:
        self._records = records or {}
        self.looked_up: list[str] = []

    def lookup(self, ip: str) -> dict[str, Any] | None:
        self.looked_up.append(ip)
        return self._records.get(ip)


class StaticLocalizer:
    """Localizer double returning a fixed name and recording its calls."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self.calls: list[tuple[str, str]] = []

    def localize(self, lang: str, country_code: str) -> str:
        self.calls.append((lang, country_code))
        return self._name
