from abc import ABC, abstractmethod
from typing import Any

RawGeoRecord = dict[str, Any]


class BaseGeoReader(ABC):
    """Abstract base for geolocation database readers.

    Implementations are opened once per process and must be safe for
    concurrent read-only use by every request.
    """

    @abstractmethod
    def lookup(self, ip: str) -> RawGeoRecord | None:
        """Return the raw record for `ip`, or None when the address is invalid or unknown."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying database handle."""
