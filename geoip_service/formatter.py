from typing import NamedTuple

from pydantic import BaseModel

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
JAVASCRIPT_MEDIA_TYPE = "application/javascript; charset=utf-8"


class FormattedResponse(NamedTuple):
    body: str
    media_type: str


def format_response(record: BaseModel, callback: str | None = None) -> FormattedResponse:
    """Serialize `record` as compact JSON, or as a JSONP call when `callback` is given.

    The callback name is interpolated verbatim: ``;<callback>(<json>);``.
    """
    payload = record.model_dump_json(by_alias=True)
    if callback is None:
        return FormattedResponse(body=payload, media_type=JSON_MEDIA_TYPE)
    return FormattedResponse(body=f";{callback}({payload});", media_type=JAVASCRIPT_MEDIA_TYPE)
