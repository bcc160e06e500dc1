from __future__ import annotations

import json

import pytest

from watson_sdk_lib.data_models.conversation import (
    Synonym,
    SynonymCollection,
    UpdateSynonym,
)
from watson_sdk_lib.data_models.discovery import (
    Calculation,
    CollectionLanguage,
    CreateCollectionRequest,
    MemoryUsage,
    QueryResponse,
)
from watson_sdk_lib.data_models.language_translator import (
    IdentifiedLanguages,
    TranslateRequest,
    TranslationModel,
    TranslationModelStatus,
    TranslationResult,
)
from watson_sdk_lib.data_models.speech_to_text import (
    AudioResource,
    AudioResourceStatus,
    CreateLanguageModel,
)
from watson_sdk_lib.data_models.visual_recognition import (
    ClassResult,
    Classifier,
    ClassifierStatus,
)
from watson_sdk_lib.exceptions import DecodingError

TRANSLATION_MODEL = {
    "model_id": "en-es-custom",
    "name": "custom-english-to-spanish-model",
    "source": "en",
    "target": "es",
    "base_model_id": "en-es",
    "domain": "news",
    "customizable": False,
    "default_model": False,
    "owner": "abc",
    "status": "training",
}


# ----------------------------------------------------------------------
# Wire mapping and round trips
# ----------------------------------------------------------------------
@pytest.mark.parametrize(
    "model_cls, document",
    [
        (TranslationModel, TRANSLATION_MODEL),
        (
            CreateLanguageModel,
            {
                "name": "Medical custom model",
                "base_model_name": "en-US_BroadbandModel",
                "dialect": "en-US",
            },
        ),
        (
            MemoryUsage,
            {"used_bytes": 10, "total_bytes": 100, "percent_used": 10.0},
        ),
        (
            CreateCollectionRequest,
            {"name": "docs", "configuration_id": "cfg", "language": "pt-br"},
        ),
        (ClassResult, {"class": "apple", "score": 0.9}),
    ],
)
def test_decode_then_encode_reproduces_document(model_cls, document):
    model = model_cls.from_dict(document)
    assert model.to_dict() == document
    assert model_cls.from_dict(model.to_dict()) == model


def test_translation_model_fields_and_enum():
    model = TranslationModel.from_dict(TRANSLATION_MODEL)
    assert model.base_model_id == "en-es"
    assert model.default_model is False
    assert model.status is TranslationModelStatus.TRAINING


def test_absent_optional_fields_are_omitted_not_null():
    request = TranslateRequest(text=["Hello"], model_id="en-es-conversational")
    assert request.to_dict() == {"text": ["Hello"], "model_id": "en-es-conversational"}
    assert UpdateSynonym().to_dict() == {}


def test_null_optional_field_decodes_as_absent():
    model = TranslationModel.from_dict({"model_id": "en-es", "name": None})
    assert model.name is None
    assert model.to_dict() == {"model_id": "en-es"}


def test_single_text_is_normalised_to_list():
    assert TranslateRequest(text="Hello").text == ["Hello"]


def test_unknown_keys_are_dropped():
    model = TranslationModel.from_dict({"model_id": "en-es", "future_field": 1})
    assert "future_field" not in model.to_dict()


def test_alias_is_used_on_the_wire_and_name_in_python():
    result = ClassResult(class_name="banana")
    assert result.to_dict() == {"class": "banana"}
    assert ClassResult.from_dict({"class": "pear"}).class_name == "pear"


# ----------------------------------------------------------------------
# Decode failures
# ----------------------------------------------------------------------
def test_missing_required_field_fails():
    with pytest.raises(DecodingError):
        TranslationModel.from_dict({"name": "no id"})


def test_null_required_field_fails():
    with pytest.raises(DecodingError):
        TranslationModel.from_dict({"model_id": None})


def test_unknown_enum_value_fails():
    with pytest.raises(DecodingError):
        TranslationModel.from_dict({"model_id": "en-es", "status": "sleeping"})


@pytest.mark.parametrize(
    "model_cls, document",
    [
        (
            AudioResource,
            {"duration": 1.0, "name": "a", "details": {}, "status": "lost"},
        ),
        (Classifier, {"classifier_id": "c", "name": "n", "status": "paused"}),
        (CreateCollectionRequest, {"name": "docs", "language": "xx"}),
    ],
)
def test_closed_enums_across_services(model_cls, document):
    with pytest.raises(DecodingError):
        model_cls.from_dict(document)


def test_wrong_type_in_optional_field_fails():
    with pytest.raises(DecodingError):
        TranslationModel.from_dict({"model_id": "en-es", "name": {"not": "a string"}})


@pytest.mark.parametrize(
    "model_cls, document",
    [
        (
            TranslationResult,
            {"word_count": "12", "character_count": 5, "translations": []},
        ),
        (TranslationModel, {"model_id": "en-es", "customizable": "yes"}),
        (TranslationModel, {"model_id": "en-es", "default_model": 1}),
        (TranslationModel, {"model_id": 42}),
        (MemoryUsage, {"percent_used": "10.5"}),
    ],
)
def test_wire_values_are_not_coerced(model_cls, document):
    with pytest.raises(DecodingError):
        model_cls.from_dict(document)
    with pytest.raises(DecodingError):
        model_cls.from_json(json.dumps(document))


def test_integer_is_accepted_for_float_field():
    assert MemoryUsage.from_dict({"percent_used": 10}).percent_used == 10.0


def test_from_dict_rejects_non_json_values():
    with pytest.raises(DecodingError):
        TranslationModel.from_dict({"model_id": {"x"}})


def test_from_json_keeps_raw_body_on_failure():
    with pytest.raises(DecodingError) as info:
        IdentifiedLanguages.from_json(b'{"languages": [{"language": "es"}]}')
    assert info.value.body == b'{"languages": [{"language": "es"}]}'


def test_from_json_rejects_invalid_json():
    with pytest.raises(DecodingError):
        IdentifiedLanguages.from_json(b"{not json")


# ----------------------------------------------------------------------
# Nested and recursive models
# ----------------------------------------------------------------------
def test_audio_resource_with_details():
    audio = AudioResource.from_dict(
        {
            "duration": 131.0,
            "name": "audio1",
            "details": {"type": "audio", "codec": "pcm", "frequency": 16000},
            "status": "ok",
        }
    )
    assert audio.status is AudioResourceStatus.OK
    assert audio.details.frequency == 16000


def test_recursive_aggregations():
    response = QueryResponse.from_dict(
        {
            "matching_results": 2,
            "aggregations": [
                {
                    "type": "term",
                    "field": "enriched_text.entities.type",
                    "results": [
                        {
                            "key": "Company",
                            "matching_results": 2,
                            "aggregations": [{"type": "max", "value": 3.5}],
                        }
                    ],
                }
            ],
        }
    )
    outer = response.aggregations[0]
    assert isinstance(outer, Calculation)
    assert outer.results[0].aggregations[0].value == 3.5
    assert QueryResponse.from_dict(response.to_dict()) == response


def test_classifier_timestamps_are_kept_verbatim():
    document = {
        "classifier_id": "fruits_1",
        "name": "fruits",
        "status": "ready",
        "created": "2016-09-20T21:47:22.612Z",
        "retrained": "2016-09-21T08:00:00.001Z",
        "classes": [{"class": "apple"}],
    }
    classifier = Classifier.from_dict(document)
    assert classifier.status is ClassifierStatus.READY
    assert classifier.created == "2016-09-20T21:47:22.612Z"
    assert classifier.to_dict() == document


def test_synonym_timestamps_are_kept_verbatim():
    document = {
        "synonym": "auto",
        "created": "2018-03-05T10:00:00.000Z",
        "updated": "2018-03-05T10:00:00.5Z",
    }
    assert Synonym.from_dict(document).to_dict() == document


def test_synonym_collection_pagination():
    collection = SynonymCollection.from_dict(
        {
            "synonyms": [{"synonym": "car"}],
            "pagination": {"refresh_url": "/v1/x?page_limit=1", "next_url": "/v1/y"},
        }
    )
    assert collection.synonyms[0].synonym == "car"
    assert collection.pagination.next_url == "/v1/y"


def test_collection_language_values():
    assert CollectionLanguage("pt-br") is CollectionLanguage.PT_BR
