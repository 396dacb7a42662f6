"""Shared fixtures: recorded-style API payloads and fake HTTP responses."""

from __future__ import annotations

import io
import json

import pytest
import requests

from wolfram_query.query_api.client import WolframClient
from wolfram_query.query_api.config import ClientConfig

DOW_TEMPLATE = 'Assuming "${word}" is ${desc1}. Use as ${desc2} instead'

SINGLE_ASSUMPTION_DOC = (
    '{"queryresult":{"success":true,"numpods":1,"pods":[{"title":"Result","scanner":"Numeric",'
    '"subpods":[{"plaintext":"42","img":{}}] ,"numsubpods":1}],"assumptions":{"type":"Clash",'
    '"word":"dow chemical","count":2,"values":[{"name":"Financial","desc":"a financial entity"},'
    '{"name":"Company","desc":"a company","input":"X"}]}}}'
)


@pytest.fixture
def dow_assumption() -> dict:
    return {
        "type": "Clash",
        "word": "dow chemical",
        "template": DOW_TEMPLATE,
        "count": 2,
        "values": [
            {"name": "Financial", "desc": "a financial entity", "input": "*C.dow+chemical-_*Financial-"},
            {"name": "Company", "desc": "a company", "input": "*C.dow+chemical-_*Company-"},
        ],
    }


@pytest.fixture
def full_document(dow_assumption: dict) -> dict:
    """A query result with several pods, two assumptions and singleton warnings."""
    unit_assumption = {
        "type": "Unit",
        "word": "m",
        "template": "Assuming ${desc1} for \"${word}\". Use ${desc2} instead",
        "count": 3,
        "values": [
            {"name": "Meters", "desc": "meters", "input": "UnitClash_*m.*Meters--"},
            {"name": "Minutes", "desc": "minutes", "input": "UnitClash_*m.*Minutes--"},
            {"name": "Miles", "desc": "miles", "input": "UnitClash_*m.*Miles--"},
        ],
    }
    return {
        "queryresult": {
            "success": True,
            "error": False,
            "numpods": 2,
            "datatypes": "Financial",
            "timedout": "",
            "timedoutpods": "",
            "timing": 1.532,
            "parsetiming": 0.25,
            "parsetimedout": False,
            "recalculate": "",
            "id": "MSP1234",
            "host": "https://www3.wolframalpha.com",
            "server": 13,
            "related": "https://www3.wolframalpha.com/api/v1/relatedQueries.jsp?id=MSPa",
            "version": 2.6,
            "pods": [
                {
                    "title": "Input interpretation",
                    "scanner": "Identity",
                    "id": "Input",
                    "position": 100,
                    "error": False,
                    "numsubpods": 1,
                    "subpods": [
                        {
                            "title": "",
                            "plaintext": "Dow Chemical",
                            "img": {
                                "src": "https://www3.wolframalpha.com/Calculate/MSP/MSP1?MSPStoreType=image/gif",
                                "alt": "Dow Chemical",
                                "title": "Dow Chemical",
                                "width": 98,
                                "height": 19,
                                "contenttype": "image/gif",
                            },
                        }
                    ],
                },
                {
                    "title": "Latest trade",
                    "scanner": "FinancialData",
                    "id": "Quote",
                    "position": 200,
                    "error": False,
                    "numsubpods": 3,
                    "states": [{"name": "More", "input": "Quote__More"}],
                    "subpods": [{"title": "", "plaintext": "$54.21"}],
                },
            ],
            "assumptions": [dow_assumption, unit_assumption],
            "warnings": {
                "count": 1,
                "spellcheck": {"word": "dow", "suggestion": "dow", "text": "Interpreting \"dow\" as \"dow\""},
            },
            "sources": {"url": "https://www.wolframalpha.com/sources/FinancialDataSourceInformationNotes.html",
                        "text": "Financial data"},
            "generalization": {"topic": "Dow Chemical", "desc": "General results for:", "url": "https://example.test/g"},
        }
    }


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        app_id="TEST-APPID",
        query_url="https://api.test/v2/query",
        simple_url="https://api.test/v1/simple",
        short_answer_url="https://api.test/v1/result",
        spoken_answer_url="https://api.test/v1/spoken",
        fast_query_url="https://www.test/queryrecognizer/query.jsp",
        http_timeout=5,
    )


@pytest.fixture
def client(config: ClientConfig) -> WolframClient:
    return WolframClient(config)


def make_response(body: bytes | str | dict, status: int = 200, url: str = "") -> requests.Response:
    """Build a real requests.Response around an in-memory body."""
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = requests.Response()
    response.status_code = status
    response.raw = io.BytesIO(body)
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeGet:
    """Stand-in for requests.get recording every call."""

    def __init__(self, response: requests.Response | Exception):
        self.response = response
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def url(self) -> str:
        return self.calls[-1]["url"]
