from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from geoip_service.logger import logger

CountryNamesTable = dict[str, dict[str, str | None]]

_table_adapter: TypeAdapter[CountryNamesTable] = TypeAdapter(CountryNamesTable)


def load_country_names(path: str | None) -> CountryNamesTable:
    """Read a ``{"<lang>": {"<code>": "<name>"}}`` file.

    Returns an empty table when no path is configured or the file cannot be
    used; localization only ever provides fallback values.
    """
    if not path:
        return {}

    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        logger.warning(f"Country names file could not be read path={path} error={exc!r}")
        return {}

    try:
        return _table_adapter.validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            f"Country names file is not a valid language/code/name table path={path} errors={exc.error_count()}"
        )
        return {}


class CountryNameLocalizer:
    """Localized country display names, used when the database has no name for a language."""

    def __init__(self, table: CountryNamesTable | None = None) -> None:
        self._table: CountryNamesTable = table or {}

    @classmethod
    def from_path(cls, path: str | None) -> "CountryNameLocalizer":
        table = load_country_names(path)
        if path:
            logger.info(f"Loaded localized country names path={path} languages={len(table)}")
        return cls(table)

    def localize(self, lang: str, country_code: str) -> str:
        """Return the name for `country_code` in `lang`, or an empty string."""
        return self._table.get(lang, {}).get(country_code) or ""
