from typing import Any

from wolfram_query.query_api.entities.base import WolframModel


class QueryError(WolframModel):
    """Represents the <error> sub-element reported with ``error: true``."""

    code: str = ""
    msg: str = ""


def split_error(data: Any) -> Any:
    """Turn an ``"error": {"code": .., "msg": ..}`` object into a flag plus detail.

    The API sends ``"error": false`` on success and the error object itself on
    failure; the models keep ``error`` a bool and move the object to
    ``error_detail``.
    """
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        data = {**data, "error": True, "error_detail": data["error"]}
    return data
