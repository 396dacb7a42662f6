"""Tests for whole-document decoding of query results."""

from __future__ import annotations

import json
import logging

import pytest

from conftest import SINGLE_ASSUMPTION_DOC
from wolfram_query.query_api.decoder.query_decoder import (
    decode_fast_query_result,
    decode_query_result,
    pretty_json,
)
from wolfram_query.query_api.entities.image import Img
from wolfram_query.query_api.errors import DecodeError


def test_end_to_end_single_assumption() -> None:
    """A bare assumptions object decodes to one actionable assumption."""
    result = decode_query_result(SINGLE_ASSUMPTION_DOC.encode(), "dow chemical")

    assert result.success is True
    assert result.query == "dow chemical"
    assert len(result.pods) == 1
    assert result.pods[0].title == "Result"
    assert result.pods[0].subpods[0].plaintext == "42"
    assert result.pods[0].subpods[0].img == Img()

    assert result.assumptions.count == 1
    assert len(result.assumptions.assumption) == 1
    actions = result.assumptions.assumption[0].for_action_display()
    assert len(actions) == 1
    assert actions[0].button_label == "Company"
    assert actions[0].action == "X"


def test_full_document(full_document) -> None:
    """Arrays, singleton warnings, sources and generalizations all normalize."""
    result = decode_query_result(json.dumps(full_document), "dow chemical")

    assert [pod.title for pod in result.pods] == ["Input interpretation", "Latest trade"]
    assert [pod.position for pod in result.pods] == [100, 200]
    img = result.pods[0].subpods[0].img
    assert (img.width, img.height, img.contenttype) == (98, 19, "image/gif")
    assert result.pods[1].states[0].input == "Quote__More"

    assert result.assumptions.count == 2
    assert [a.type for a in result.assumptions.assumption] == ["Clash", "Unit"]
    assert [a.button_label for a in result.assumptions.for_action_display()] == ["Company", "Minutes", "Miles"]

    assert result.warnings.count == 1
    assert result.warnings.spellchecks[0].word == "dow"
    assert result.warnings.translations == []
    assert len(result.sources) == 1
    assert result.sources[0].text == "Financial data"
    assert result.generalizations[0].description == "General results for:"

    assert result.timing == pytest.approx(1.532)
    assert result.server == "13"
    assert result.version == "2.6"


def test_subpod_count_is_informational(full_document, caplog) -> None:
    """A numsubpods mismatch decodes and is only logged."""
    with caplog.at_level(logging.DEBUG, logger="wolfram_query.query_api.entities.pod"):
        result = decode_query_result(json.dumps(full_document), "q")
    pod = result.pods[1]
    assert pod.numsubpods == 3
    assert len(pod.subpods) == 1
    assert "reports 3 subpods but carries 1" in caplog.text


def test_caller_query_wins_over_server_echo() -> None:
    """The server's own query field is replaced by what the caller asked."""
    doc = {"queryresult": {"success": True, "query": "server%20text", "pods": []}}
    result = decode_query_result(json.dumps(doc), "what I asked")
    assert result.query == "what I asked"


def test_idempotent(full_document) -> None:
    """Decoding the same bytes twice gives equal results."""
    raw = json.dumps(full_document).encode()
    assert decode_query_result(raw, "q") == decode_query_result(raw, "q")


def test_missing_optional_sections_default() -> None:
    """Absent collections decode empty."""
    result = decode_query_result(b'{"queryresult": {"success": false, "numpods": 0}}', "gibberish")
    assert result.success is False
    assert result.pods == []
    assert result.assumptions.count == 0
    assert result.assumptions.assumption == []
    assert result.sources == []


def test_error_object_becomes_flag_and_detail() -> None:
    """An error object sets the flag and keeps the code and message."""
    doc = {"queryresult": {"success": False, "error": {"code": "1", "msg": "Invalid appid"}}}
    result = decode_query_result(json.dumps(doc), "pi")
    assert result.error is True
    assert result.error_detail.code == "1"
    assert result.error_detail.msg == "Invalid appid"


def test_pods_on_unsuccessful_result_fail() -> None:
    """Pods on an unsuccessful result break the model invariant."""
    doc = {"queryresult": {"success": False, "pods": [{"title": "Result"}]}}
    with pytest.raises(DecodeError, match="unsuccessful query result"):
        decode_query_result(json.dumps(doc), "q")


def test_pods_on_errored_result_fail() -> None:
    """Pods alongside an error break the model invariant."""
    doc = {"queryresult": {"success": True, "error": True, "pods": [{"title": "Result"}]}}
    with pytest.raises(DecodeError, match="errored query result"):
        decode_query_result(json.dumps(doc), "q")


@pytest.mark.parametrize("assumptions", ["null", '"Clash"', "7"])
def test_bad_assumptions_shape_fails_whole_document(assumptions) -> None:
    """A shape violation deep in the tree fails the whole decode."""
    raw = '{"queryresult": {"success": true, "assumptions": %s}}' % assumptions
    with pytest.raises(DecodeError, match="unable to interpret wolfram alpha json result") as excinfo:
        decode_query_result(raw, "q")
    assert "assumptions" in str(excinfo.value)
    assert excinfo.value.cause is not None


@pytest.mark.parametrize("raw", [b"", b"not json", b"[]", b'{"other": {}}'])
def test_malformed_documents(raw) -> None:
    """Broken or foreign documents never produce a partial result."""
    with pytest.raises(DecodeError, match="unable to interpret wolfram alpha json result"):
        decode_query_result(raw, "q")


def test_fast_query_result() -> None:
    """Recognizer output decodes, including a single bare query object."""
    raw = json.dumps(
        {
            "version": "0.2",
            "spellingCorrection": "false",
            "buildnumber": "5935",
            "query": {
                "i": "gold price",
                "accepted": "true",
                "timing": "1.67",
                "domain": "money",
                "resultsignificancescore": "100",
                "summarybox": {"path": "/summary/gold"},
            },
        }
    )
    result = decode_fast_query_result(raw)
    assert result.build_number == "5935"
    assert result.spelling_correction is False
    assert len(result.query) == 1
    match = result.query[0]
    assert match.accepted is True
    assert match.domain == "money"
    assert match.result_significance_score == "100"
    assert match.summary_box.path == "/summary/gold"


def test_fast_query_accepts_misspelled_key() -> None:
    """The historical spellingCorretion key is still read."""
    result = decode_fast_query_result(b'{"spellingCorretion": "true", "query": []}')
    assert result.spelling_correction is True
    assert result.query == []


def test_fast_query_malformed() -> None:
    """Recognizer decode failures are DecodeErrors with their own context."""
    with pytest.raises(DecodeError, match="fast query recognizer"):
        decode_fast_query_result(b"{")


def test_pretty_json() -> None:
    """Raw JSON is re-indented for display; invalid JSON is a DecodeError."""
    assert pretty_json(b'{"a":[1]}') == '{\n    "a": [\n        1\n    ]\n}'
    with pytest.raises(DecodeError):
        pretty_json(b"{")
