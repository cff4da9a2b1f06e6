from pydantic import BaseModel, Field


class GeoIPQuery(BaseModel):
    """Query parameters accepted by the lookup endpoint.

    All parameters are optional. `ip` is not validated here: an invalid value
    is simply ignored in favour of the proxy header or the peer address.
    """

    ip: str | None = Field(
        default=None,
        description="IPv4 or IPv6 address to look up. Ignored unless it is a valid IP literal.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )
    lang: str | None = Field(
        default=None,
        description="Language used for the country label. Defaults to en.",
        examples=["en", "it", "de"],
    )
    callback: str | None = Field(
        default=None,
        description="When set, the JSON body is wrapped as a JSONP call to this function.",
        examples=["handleGeoIP"],
    )
