from collections.abc import Mapping, Sequence
from typing import Any

from geoip_service.localizer import CountryNameLocalizer
from geoip_service.models.response_models import ResolvedIPResponse, UnresolvedIPResponse

RawGeoRecord = Mapping[str, Any]
RecordPath = tuple[str | int, ...]

REGION = 0
PROVINCE = 1
ENGLISH = "en"

# (response field, path into the raw record, default)
RESPONSE_FIELDS: tuple[tuple[str, RecordPath, str | float], ...] = (
    ("latitude", ("location", "latitude"), 0.0),
    ("longitude", ("location", "longitude"), 0.0),
    ("postal_code", ("postal", "code"), ""),
    ("continent_code", ("continent", "code"), ""),
    ("continent_name", ("continent", "names", ENGLISH), ""),
    ("country_code", ("country", "iso_code"), ""),
    ("region_code", ("subdivisions", REGION, "iso_code"), ""),
    ("region_name", ("subdivisions", REGION, "names", ENGLISH), ""),
    ("province_code", ("subdivisions", PROVINCE, "iso_code"), ""),
    ("province_name", ("subdivisions", PROVINCE, "names", ENGLISH), ""),
    ("city_name", ("city", "names", ENGLISH), ""),
    ("time_zone", ("location", "time_zone"), ""),
)


def _step(node: Any, key: str | int) -> Any:
    if isinstance(key, int):
        if isinstance(node, Sequence) and not isinstance(node, str | bytes) and 0 <= key < len(node):
            return node[key]
        return None
    if isinstance(node, Mapping):
        return node.get(key)
    return None


def _matches_default_type(value: Any, default: str | float) -> bool:
    if isinstance(default, float):
        return isinstance(value, int | float) and not isinstance(value, bool)
    return isinstance(value, str)


def get_or_default(record: RawGeoRecord | None, path: RecordPath, default: Any) -> Any:
    """Follow `path` through nested mappings and lists.

    Short-circuits to `default` as soon as a step is missing, has the wrong
    container type, or the leaf is not of the default's type.
    """
    node: Any = record
    for key in path:
        node = _step(node, key)
        if node is None:
            return default
    if default is not None and not _matches_default_type(node, default):
        return default
    return node


def _country_name(record: RawGeoRecord, lang: str) -> str | None:
    name = get_or_default(record, ("country", "names", lang), None)
    return name if isinstance(name, str) else None


def map_geo_record(
    record: RawGeoRecord,
    ip_address: str,
    language: str,
    localizer: CountryNameLocalizer,
) -> ResolvedIPResponse:
    """Flatten a raw database record into a fully populated response."""
    values: dict[str, Any] = {field: get_or_default(record, path, default) for field, path, default in RESPONSE_FIELDS}

    label = _country_name(record, language)
    name = _country_name(record, ENGLISH)
    if label is None or name is None:
        localized = localizer.localize(language, values["country_code"])
        label = localized if label is None else label
        name = localized if name is None else name

    return ResolvedIPResponse(
        ip_address=ip_address,
        country_label=label,
        country_name=name,
        **values,
    )


def build_unresolved_record(ip_address: str) -> UnresolvedIPResponse:
    return UnresolvedIPResponse(ip_address=ip_address)
