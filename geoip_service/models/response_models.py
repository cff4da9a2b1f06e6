from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResolvedIPResponse(BaseModel):
    """Geolocation of a resolved address.

    Serialized with camelCase keys (``ipAddress``, ``timeZone``, ...). Every
    field always has a value; missing database data becomes ``""`` or ``0.0``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    ip_address: str
    latitude: float = 0.0
    longitude: float = 0.0
    postal_code: str = ""
    continent_code: str = ""
    continent_name: str = ""
    country_code: str = ""
    country_label: str = ""
    country_name: str = ""
    region_code: str = ""
    region_name: str = ""
    province_code: str = ""
    province_name: str = ""
    city_name: str = ""
    time_zone: str = ""


class UnresolvedIPResponse(BaseModel):
    """Returned when the lookup fails; keeps the snake_case ``ip_address`` key."""

    model_config = ConfigDict(frozen=True)

    ip_address: str
