"""HTTP transport for the Wolfram|Alpha APIs.

Each public method issues exactly one GET request, attempted once, and hands
the body to the decoders. Request failures and non-2xx statuses surface as
TransportError; nothing is retried or cached.

See https://products.wolframalpha.com/api/documentation for parameters.
"""

import logging
from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

import requests

from wolfram_query.query_api.config import ClientConfig
from wolfram_query.query_api.decoder.query_decoder import decode_fast_query_result, decode_query_result
from wolfram_query.query_api.defs import Mode, Unit
from wolfram_query.query_api.entities.fast_query import FastQueryResult
from wolfram_query.query_api.entities.query_result import QueryResult
from wolfram_query.query_api.errors import TransportError

logger = logging.getLogger(__name__)

Params = Mapping[str, str | Sequence[str]]


def build_url(base: str, fixed: list[tuple[str, str]], params: Params | None = None) -> str:
    """Append url-encoded fixed parameters, then any caller extras, to ``base``."""
    url = f"{base}?{urlencode(fixed)}"
    if params:
        url += "&" + urlencode(params, doseq=True)
    return url


class WolframClient:
    """Client for the Wolfram|Alpha web APIs.

    Example extra parameters for ``get_query_result``::

        client.get_query_result("pi", {"format": "image", "podstate": ["Step-by-step"]})
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def _get(self, endpoint: str, url: str, query: str, stream: bool = False) -> requests.Response:
        logger.debug("GET %s for %r", endpoint, query)
        try:
            response = requests.get(url, stream=stream, timeout=self.config.http_timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"error in wolfram alpha {endpoint} request: {e}") from e

        if not response.ok:
            message = f"wolfram alpha {endpoint} request failed with status {response.status_code}"
            body = "" if stream else response.text.strip()
            response.close()
            if body:
                message += f": {body}"
            raise TransportError(message, status_code=response.status_code)
        return response

    def get_query_result_raw(self, query: str, params: Params | None = None) -> bytes:
        """Return the undecoded JSON body of a full results query."""
        url = build_url(
            self.config.query_url,
            [("input", query), ("appid", self.config.app_id), ("output", "JSON")],
            params,
        )
        return self._get("query", url, query).content

    def get_query_result(self, query: str, params: Params | None = None) -> QueryResult:
        """Query the full results API and decode the response."""
        return decode_query_result(self.get_query_result_raw(query, params), query)

    def get_simple_query(self, query: str, params: Params | None = None) -> tuple[requests.Response, str]:
        """Request the single-image rendering of a query.

        Returns the open streaming response and the request URL. The caller owns
        the response and must close it, e.g. ``with response: ...``.
        Extra parameters such as ``{"background": "F5F5F5"}`` are passed through.
        """
        url = build_url(
            self.config.simple_url,
            [("appid", self.config.app_id), ("input", query), ("output", "json")],
            params,
        )
        return self._get("simple", url, query, stream=True), url

    def _answer_url(self, base: str, query: str, units: Unit, timeout: int) -> str:
        if timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")
        fixed = [("appid", self.config.app_id), ("i", query), ("units", Unit(units).value)]
        if timeout:
            fixed.append(("timeout", str(timeout)))
        fixed.append(("output", "json"))
        return build_url(base, fixed)

    def get_short_answer(self, query: str, units: Unit = Unit.METRIC, timeout: int = 0) -> str:
        """Return the short textual answer to a query."""
        url = self._answer_url(self.config.short_answer_url, query, units, timeout)
        with self._get("short answer", url, query) as response:
            return response.text

    def get_spoken_answer(self, query: str, units: Unit = Unit.METRIC, timeout: int = 0) -> str:
        """Return the answer to a query phrased as a full sentence for speech."""
        url = self._answer_url(self.config.spoken_answer_url, query, units, timeout)
        with self._get("spoken answer", url, query) as response:
            return response.text

    def get_fast_query_recognizer(self, query: str, mode: Mode = Mode.DEFAULT) -> FastQueryResult:
        """Ask the fast query recognizer whether Wolfram|Alpha can answer a query."""
        url = build_url(
            self.config.fast_query_url,
            [("appid", self.config.app_id), ("i", query), ("mode", Mode(mode).value), ("output", "json")],
        )
        with self._get("fast query recognizer", url, query) as response:
            return decode_fast_query_result(response.content)
