import maxminddb

from geoip_service.errors import DatabaseOpenError
from geoip_service.logger import logger
from geoip_service.readers.base import BaseGeoReader, RawGeoRecord


class MaxMindGeoReader(BaseGeoReader):
    """Reader for MaxMind DB (.mmdb) City databases, memory-mapped."""

    def __init__(self, reader: maxminddb.Reader) -> None:
        self._reader = reader

    @classmethod
    def open(cls, path: str) -> "MaxMindGeoReader":
        try:
            reader = maxminddb.open_database(path, maxminddb.MODE_MMAP)
        except (OSError, maxminddb.InvalidDatabaseError) as exc:
            raise DatabaseOpenError(f"Unable to open geolocation database at {path}: {exc}") from exc
        logger.info(f"Opened geolocation database path={path} type={reader.metadata().database_type}")
        return cls(reader)

    def lookup(self, ip: str) -> RawGeoRecord | None:
        try:
            record = self._reader.get(ip)
        except ValueError as exc:
            # Malformed address, or IPv6 against an IPv4-only database.
            logger.debug(f"Lookup rejected ip={ip} error={exc}")
            return None
        if not isinstance(record, dict):
            return None
        return record

    def close(self) -> None:
        self._reader.close()
