from __future__ import annotations

import io
import json

import pytest

from watson_sdk_lib.data_models.language_translator import TranslateRequest
from watson_sdk_lib.exceptions import EncodingError
from watson_sdk_lib.utils.request_builder import (
    MultipartForm,
    build_request,
    encode_path_segment,
    format_path,
    json_body,
    query_value,
    text_body,
)


# ----------------------------------------------------------------------
# Path segments
# ----------------------------------------------------------------------
def test_encode_path_segment_keeps_unreserved_characters():
    assert encode_path_segment("en-es_conversational.v1~") == "en-es_conversational.v1~"


def test_encode_path_segment_encodes_space_and_non_ascii():
    assert encode_path_segment("my model") == "my%20model"
    assert encode_path_segment("café") == "caf%C3%A9"


def test_encode_path_segment_encodes_slash():
    assert encode_path_segment("a/../b") == "a%2F..%2Fb"


def test_format_path_keeps_slashed_identifier_in_one_segment():
    path = format_path("/v3/classifiers/{classifier_id}", classifier_id="dogs/cats")
    assert path == "/v3/classifiers/dogs%2Fcats"


@pytest.mark.parametrize("value", ["\ud800", "bad\udfffid"])
def test_encode_path_segment_rejects_lone_surrogates(value):
    with pytest.raises(EncodingError):
        encode_path_segment(value)


@pytest.mark.parametrize("value", ["", None, 42])
def test_encode_path_segment_rejects_empty_and_non_strings(value):
    with pytest.raises(EncodingError):
        encode_path_segment(value)


def test_format_path_fills_encoded_segments():
    path = format_path(
        "/v1/environments/{environment_id}/collections/{collection_id}",
        environment_id="env 1",
        collection_id="ü",
    )
    assert path == "/v1/environments/env%201/collections/%C3%BC"


# ----------------------------------------------------------------------
# build_request
# ----------------------------------------------------------------------
def test_build_request_joins_url_and_keeps_query_order():
    spec = build_request(
        "get",
        "https://example.test/api/",
        "/v2/models",
        query=[("source", "en"), ("target", None), ("default", True)],
    )
    assert spec.method == "GET"
    assert spec.url == "https://example.test/api/v2/models"
    assert spec.query == (("source", "en"), ("default", "true"))
    assert spec.body is None
    assert spec.content_type is None


def test_build_request_accepts_mapping_query_and_path_without_slash():
    spec = build_request("GET", "https://h", "v1/x", query={"count": 3})
    assert spec.url == "https://h/v1/x"
    assert spec.query == (("count", "3"),)


def test_build_request_headers_are_read_only():
    headers = {"X-Test": "1"}
    spec = build_request("GET", "https://h", "/x", headers=headers)
    headers["X-Test"] = "2"
    assert spec.headers["X-Test"] == "1"
    with pytest.raises(TypeError):
        spec.headers["X-Other"] = "3"


def test_all_headers_adds_accept_and_content_type():
    spec = build_request(
        "POST",
        "https://h",
        "/x",
        headers={"Authorization": "Basic abc"},
        content_type="application/json",
        body=b"{}",
    )
    assert spec.all_headers() == {
        "Authorization": "Basic abc",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def test_query_value_renders_booleans_lowercase():
    assert query_value(False) == "false"
    assert query_value(True) == "true"
    assert query_value(10) == "10"


# ----------------------------------------------------------------------
# Bodies
# ----------------------------------------------------------------------
def test_json_body_omits_absent_optional_fields():
    body, content_type = json_body(
        TranslateRequest(text=["Hello"], model_id="en-es-conversational")
    )
    assert content_type == "application/json"
    assert json.loads(body) == {"text": ["Hello"], "model_id": "en-es-conversational"}


def test_json_body_accepts_plain_dict():
    body, _ = json_body({"synonym": "ünï"})
    assert json.loads(body.decode("utf-8")) == {"synonym": "ünï"}


def test_json_body_wraps_serialisation_errors():
    with pytest.raises(EncodingError):
        json_body({"bad": object()})


def test_text_body_encodes_utf8():
    assert text_body("Hola ñ") == ("Hola ñ".encode("utf-8"), "text/plain")


def test_text_body_rejects_unencodable_text():
    with pytest.raises(EncodingError):
        text_body("\ud800")


# ----------------------------------------------------------------------
# Multipart
# ----------------------------------------------------------------------
def test_multipart_form_with_file_path_and_text(tmp_path):
    glossary = tmp_path / "glossary.tmx"
    glossary.write_bytes(b"<tmx/>")

    body, content_type = (
        MultipartForm()
        .add_file("forced_glossary", glossary)
        .add_text("parameters", '{"threshold": 0.5}')
        .encode()
    )

    assert content_type.startswith("multipart/form-data; boundary=")
    assert b'name="forced_glossary"; filename="glossary.tmx"' in body
    assert b"<tmx/>" in body
    assert b'name="parameters"' in body
    assert b'{"threshold": 0.5}' in body


def test_multipart_form_with_bytes_and_file_object():
    stream = io.BytesIO(b"corpus text")
    stream.name = "/tmp/corpus.txt"
    form = MultipartForm().add_file("raw", b"\x00\x01").add_file("corpus_file", stream)

    body, _ = form.encode()

    assert len(form) == 2
    assert b'filename="corpus.txt"' in body
    assert b"corpus text" in body
    assert b"\x00\x01" in body


def test_multipart_form_missing_file_is_encoding_error(tmp_path):
    with pytest.raises(EncodingError):
        MultipartForm().add_file("forced_glossary", tmp_path / "missing.tmx")


def test_multipart_form_rejects_text_mode_file():
    with pytest.raises(EncodingError):
        MultipartForm().add_file("corpus_file", io.StringIO("text"))


def test_multipart_form_rejects_unknown_source():
    with pytest.raises(EncodingError):
        MultipartForm().add_file("images_file", 3.14)
