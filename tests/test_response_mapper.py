from __future__ import annotations

import json
import logging

import pytest

from watson_sdk_lib.data_models.language_translator import (
    TranslationModel,
    TranslationResult,
)
from watson_sdk_lib.exceptions import (
    AuthenticationError,
    DecodingError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from watson_sdk_lib.utils.response_mapper import (
    Failure,
    Success,
    default_error_parser,
    map_response,
)


def _json(doc) -> bytes:
    return json.dumps(doc).encode("utf-8")


def test_success_decodes_expected_model():
    outcome = map_response(
        200,
        _json(
            {
                "word_count": 1,
                "character_count": 5,
                "translations": [{"translation": "Hola"}],
            }
        ),
        TranslationResult,
    )
    assert isinstance(outcome, Success)
    assert outcome.ok
    assert outcome.unwrap().translations[0].translation == "Hola"


def test_not_found_with_error_document():
    outcome = map_response(
        404,
        _json({"error_code": 404, "error_message": "model not found"}),
        TranslationModel,
        domain="watson.language_translator.v2",
    )
    assert isinstance(outcome, Failure)
    assert not outcome.ok
    assert outcome.status_code == 404
    assert outcome.message == "model not found"
    assert outcome.error.code == 404
    assert outcome.error.domain == "watson.language_translator.v2"
    with pytest.raises(ServerError, match="model not found"):
        outcome.unwrap()


def test_error_without_body_carries_only_status():
    outcome = map_response(500, b"", TranslationModel)
    assert isinstance(outcome, Failure)
    assert outcome.status_code == 500
    assert outcome.message is None
    assert outcome.error.code is None


def test_error_with_unparseable_body_keeps_raw_body():
    outcome = map_response(502, b"<html>Bad Gateway</html>", TranslationModel)
    assert outcome.status_code == 502
    assert outcome.message is None
    assert outcome.error.body == b"<html>Bad Gateway</html>"


@pytest.mark.parametrize(
    "status, error_cls",
    [
        (400, ValidationError),
        (401, AuthenticationError),
        (403, AuthenticationError),
        (429, RateLimitError),
        (503, ServerError),
        (302, ServerError),
    ],
)
def test_status_maps_to_error_class(status, error_cls):
    outcome = map_response(status, _json({"code": status, "error": "boom"}))
    assert type(outcome.error) is error_cls
    assert outcome.error.message == "boom"


def test_delete_style_no_content_is_unit_success():
    outcome = map_response(204, b"", None)
    assert outcome == Success(None)


def test_void_operation_ignores_body():
    outcome = map_response(200, b"not json at all", None)
    assert outcome.unwrap() is None


def test_decoding_failure_is_not_a_server_error(caplog):
    body = _json({"word_count": 1})
    with caplog.at_level(logging.ERROR):
        outcome = map_response(200, body, TranslationResult, domain="lt")

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, DecodingError)
    assert not isinstance(outcome.error, ServerError)
    assert outcome.error.body == body
    assert outcome.status_code is None
    assert "could not decode TranslationResult" in caplog.text


def test_empty_success_body_fails_decoding_when_model_expected():
    outcome = map_response(200, b"", TranslationModel)
    assert isinstance(outcome.error, DecodingError)


@pytest.mark.parametrize(
    "document, expected",
    [
        ({"error_code": 404, "error_message": "model not found"}, (404, "model not found")),
        ({"code": 400, "error": "Missing version"}, (400, "Missing version")),
        ({"code": 409, "message": "conflict"}, (409, "conflict")),
        (
            {"error": {"code": "input_error", "description": "bad image"}},
            ("input_error", "bad image"),
        ),
        ({"unrelated": True}, None),
        (["not", "a", "dict"], None),
    ],
)
def test_default_error_parser(document, expected):
    assert default_error_parser(document) == expected
