from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from geoip_service.config import get_settings
from geoip_service.errors import AddressUnresolvableError, ConfigurationError
from geoip_service.exception_handlers import (
    address_unresolvable_exception_handler,
    unhandled_exception_handler,
)
from geoip_service.formatter import format_response
from geoip_service.localizer import CountryNameLocalizer
from geoip_service.logger import logger
from geoip_service.mapper import build_unresolved_record, map_geo_record
from geoip_service.models.request_models import GeoIPQuery
from geoip_service.readers.base import BaseGeoReader
from geoip_service.readers.maxmind_reader import MaxMindGeoReader
from geoip_service.resolvers import resolve_ip_address, resolve_language

LOOKUP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared, read-only database and localization table for the whole process."""
    settings = get_settings()
    if not settings.db_path:
        raise ConfigurationError(
            "You must specify the db path, either as a command line argument or as GEOIP_RS_DB_PATH env var"
        )

    app.state.geo_reader = MaxMindGeoReader.open(settings.db_path)
    app.state.localizer = CountryNameLocalizer.from_path(settings.country_names)
    logger.info("Started GeoIP Service")
    try:
        yield
    finally:
        app.state.geo_reader.close()
        logger.info("Stopped GeoIP Service")


app = FastAPI(
    title="GeoIP Service",
    version="0.1.0",
    description="Resolves an IP address to its geolocation, as JSON or JSONP.",
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.add_exception_handler(AddressUnresolvableError, address_unresolvable_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


def get_geo_reader(request: Request) -> BaseGeoReader:
    """Dependency returning the process-wide geolocation reader."""
    return request.app.state.geo_reader


def get_country_name_localizer(request: Request) -> CountryNameLocalizer:
    """Dependency returning the process-wide country-name localizer."""
    return request.app.state.localizer


def peer_address(request: Request) -> str | None:
    """Connection peer as ``host:port`` (``[host]:port`` for IPv6)."""
    if request.client is None or not request.client.host:
        return None
    host, port = request.client.host, request.client.port
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@app.api_route(
    "/{path:path}",
    methods=LOOKUP_METHODS,
    tags=["ip"],
    summary="Look up geolocation information for an IP address.",
    response_class=Response,
)
def resolve_ip(
    request: Request,
    query: Annotated[GeoIPQuery, Depends()],
    geo_reader: Annotated[BaseGeoReader, Depends(get_geo_reader)],
    localizer: Annotated[CountryNameLocalizer, Depends(get_country_name_localizer)],
) -> Response:
    """Resolve the requested or calling address on any path.

    - The address is `query.ip` when it is a valid IP literal, else the
      `X-Real-IP` header, else the connection peer.
    - `query.lang` selects the country label language (default `en`).
    - `query.callback` turns the response into JSONP.

    A failed lookup still answers 200 with ``{"ip_address": ...}``.
    """
    language = resolve_language(query.lang)
    ip_address = resolve_ip_address(query.ip, request.headers, peer_address(request))

    record = geo_reader.lookup(ip_address)
    if record is None:
        logger.info(f"No geolocation found path={request.url.path} method={request.method} ip={ip_address}")
        result = build_unresolved_record(ip_address)
    else:
        logger.debug(f"Resolved path={request.url.path} method={request.method} ip={ip_address} lang={language}")
        result = map_geo_record(record, ip_address, language, localizer)

    formatted = format_response(result, query.callback)
    return Response(content=formatted.body, media_type=formatted.media_type)
