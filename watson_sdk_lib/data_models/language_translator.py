"""
Request and response models of the Language Translator V2 service.

Each class mirrors one JSON document of the ``/v2`` API.  Python attribute
names equal the wire keys (``model_id``, ``word_count`` ...), so no aliases
are needed here.
"""

from enum import Enum
from typing import List, Optional

from pydantic import field_validator

from watson_sdk_lib.data_models.base_model import WatsonModel


# -------------------------------------------------------------------
# Language identification
# -------------------------------------------------------------------
class IdentifiableLanguage(WatsonModel):
    """
    A language the service is able to identify.

    Attributes
    ----------
    language : str
        Two letter code of the language (e.g. ``"en"``).
    name : str
        Display name of the language.
    """

    language: str
    name: str


class IdentifiableLanguages(WatsonModel):
    languages: List[IdentifiableLanguage]


class IdentifiedLanguage(WatsonModel):
    """
    One candidate returned by language identification.

    Attributes
    ----------
    language : str
        Code of the identified language.
    confidence : float
        Confidence score in ``[0, 1]``.
    """

    language: str
    confidence: float


class IdentifiedLanguages(WatsonModel):
    """Ranking of identified languages, best candidate first."""

    languages: List[IdentifiedLanguage]


# -------------------------------------------------------------------
# Translation
# -------------------------------------------------------------------
class TranslateRequest(WatsonModel):
    """
    Payload of the ``/v2/translate`` endpoint.

    Attributes
    ----------
    text : List[str]
        Input texts.  A single string is accepted and treated as a one item
        list.
    model_id : Optional[str]
        Model to use.  When set, ``source`` and ``target`` are ignored by the
        service.
    source : Optional[str]
        Source language, used together with ``target`` to pick a default
        model.
    target : Optional[str]
        Target language.
    """

    text: List[str]
    model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def _single_text_as_list(cls, value):
        if isinstance(value, str):
            return [value]
        return value


class Translation(WatsonModel):
    translation: str


class TranslationResult(WatsonModel):
    """
    Result of a translation call.

    Attributes
    ----------
    word_count : int
        Number of words of the complete input.
    character_count : int
        Number of characters of the complete input.
    translations : List[Translation]
        One translation per input text, in input order.
    """

    word_count: int
    character_count: int
    translations: List[Translation]


# -------------------------------------------------------------------
# Translation models
# -------------------------------------------------------------------
class TranslationModelStatus(str, Enum):
    """Availability of a translation model."""

    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    DISPATCHING = "dispatching"
    QUEUED = "queued"
    TRAINING = "training"
    TRAINED = "trained"
    PUBLISHING = "publishing"
    AVAILABLE = "available"
    DELETED = "deleted"
    ERROR = "error"


class TranslationModel(WatsonModel):
    """
    A base or custom translation model.

    Attributes
    ----------
    model_id : str
        Globally unique identifier of the model.
    name : Optional[str]
        Name given to a custom model at training time.
    source : Optional[str]
        Source language code.
    target : Optional[str]
        Target language code.
    base_model_id : Optional[str]
        For custom models, the model it was trained on; empty for base models.
    domain : Optional[str]
        Domain of the model (e.g. ``"news"``, ``"conversational"``).
    customizable : Optional[bool]
        Whether the model can be used as a base for customization.
    default_model : Optional[bool]
        Whether the model is picked when only source and target are given.
    owner : Optional[str]
        Instance that created the model; empty for IBM trained models.
    status : Optional[TranslationModelStatus]
        Availability of the model.
    """

    model_id: str
    name: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    base_model_id: Optional[str] = None
    domain: Optional[str] = None
    customizable: Optional[bool] = None
    default_model: Optional[bool] = None
    owner: Optional[str] = None
    status: Optional[TranslationModelStatus] = None


class TranslationModels(WatsonModel):
    models: List[TranslationModel]
