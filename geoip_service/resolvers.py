from collections.abc import Mapping
from ipaddress import ip_address

from geoip_service.errors import AddressUnresolvableError

DEFAULT_LANGUAGE = "en"
REAL_IP_HEADER = "X-Real-IP"


def is_ip_literal(value: str) -> bool:
    """Return True when `value` parses as an IPv4 or IPv6 address."""
    try:
        ip_address(value)
    except ValueError:
        return False
    return True


def _host_from_peer(peer: str) -> str:
    """Strip the port from a ``host:port`` peer string.

    Bare IP literals (including IPv6) are returned whole and ``[v6]:port``
    yields the bracketed host. Anything else keeps the first ``:`` segment.
    """
    if is_ip_literal(peer):
        return peer
    if peer.startswith("["):
        host, _, _ = peer[1:].partition("]")
        return host
    return peer.split(":", 1)[0]


def resolve_ip_address(
    ip: str | None,
    headers: Mapping[str, str],
    peer: str | None,
) -> str:
    """Pick the address to resolve for a request.

    Priority, first match wins:
    1. the explicit `ip` parameter, only when it is a valid IP literal;
    2. the `X-Real-IP` header, used verbatim;
    3. the host part of the peer address.
    """
    if ip is not None and is_ip_literal(ip):
        return ip

    real_ip = headers.get(REAL_IP_HEADER)
    if real_ip is not None:
        return real_ip

    if peer:
        host = _host_from_peer(peer)
        if host:
            return host

    raise AddressUnresolvableError("Unable to find an IP address to resolve.")


def resolve_language(lang: str | None) -> str:
    return DEFAULT_LANGUAGE if lang is None else lang
