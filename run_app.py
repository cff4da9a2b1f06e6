import argparse
import os

import uvicorn

from geoip_service.config import get_settings
from geoip_service.logger import log_config


def main() -> None:
    """Run the FastAPI application with uvicorn."""
    parser = argparse.ArgumentParser(description="Serve IP geolocation lookups as JSON or JSONP.")
    parser.add_argument("db_path", nargs="?", help="MaxMind City database, used when GEOIP_RS_DB_PATH is not set.")
    args = parser.parse_args()

    if args.db_path:
        os.environ.setdefault("GEOIP_RS_DB_PATH", args.db_path)

    settings = get_settings()
    print(f"Listening on http://{settings.host}:{settings.port}")  # noqa: T201
    uvicorn.run(
        "geoip_service.main:app",
        host=settings.host,
        port=settings.port,
        log_config=log_config,
    )


if __name__ == "__main__":
    main()
