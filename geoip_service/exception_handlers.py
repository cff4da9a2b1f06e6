from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from geoip_service.errors import AddressUnresolvableError
from geoip_service.logger import logger


def _client_repr(request: Request) -> str | None:
    """Peer address as ``host:port`` for log lines, if the transport exposes one."""
    if request.client is None:
        return None
    return f"{request.client.host}:{request.client.port}"


async def address_unresolvable_exception_handler(request: Request, exc: AddressUnresolvableError) -> JSONResponse:
    """No `ip` parameter, proxy header or peer address was available for this request."""
    logger.warning(
        "Unable to determine an address to resolve "
        f"path={request.url.path} method={request.method} client={_client_repr(request)} error={exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "code": "unresolvable_address",
            "message": str(exc),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        "Unhandled exception while processing request: "
        f"{repr(exc)} path={request.url.path} method={request.method} client={_client_repr(request)}"
    )
    content: dict[str, Any] = {
        "code": "internal_error",
        "message": "An unexpected error occurred while processing the request.",
    }
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
