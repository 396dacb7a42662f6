# wolfram_query/query_api/decoder/query_decoder.py

import json
import logging

from pydantic import ValidationError

from wolfram_query.query_api.entities.fast_query import FastQueryResult
from wolfram_query.query_api.entities.query_result import Query, QueryResult
from wolfram_query.query_api.errors import DecodeError

logger = logging.getLogger(__name__)


def decode_query_result(raw: bytes | str, query: str) -> QueryResult:
    """Entrypoint: decode a full query response into a QueryResult.

    Args:
      raw    response body of the ``/v2/query`` endpoint (``output=JSON``)
      query  the text the caller asked; the server's echo is not trusted

    Returns:
      QueryResult with ``query`` set to the caller's text

    Raises:
      DecodeError wrapping the JSON or validation failure. Any failure in a
      nested field fails the whole document; there are no partial results.

    """
    try:
        envelope = Query.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError("unable to interpret wolfram alpha json result", e) from e

    result = envelope.result
    logger.debug("Decoded %d pods and %d assumptions for %r", len(result.pods), result.assumptions.count, query)
    return result.model_copy(update={"query": query})


def decode_fast_query_result(raw: bytes | str) -> FastQueryResult:
    """Decode a fast query recognizer response."""
    try:
        return FastQueryResult.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError("unable to interpret fast query recognizer json result", e) from e


def pretty_json(raw: bytes | str) -> str:
    """Return raw JSON re-indented with four spaces, for diagnostics."""
    try:
        return json.dumps(json.loads(raw), indent=4)
    except json.JSONDecodeError as e:
        raise DecodeError("unable to format json", e) from e
