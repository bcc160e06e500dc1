"""
Customization models of the Speech to Text V1 service.

Covers custom language models, their corpora and the audio resources of
custom acoustic models.
"""

from enum import Enum
from typing import List, Optional

from watson_sdk_lib.data_models.base_model import WatsonModel


# -------------------------------------------------------------------
# Custom language models
# -------------------------------------------------------------------
class CreateLanguageModel(WatsonModel):
    """
    Payload of ``POST /v1/customizations``.

    Attributes
    ----------
    name : str
        User defined name, unique among the custom models of the owner.
    base_model_name : str
        Base language model to customize (e.g. ``"en-US_BroadbandModel"``).
    dialect : Optional[str]
        Dialect of the language; meaningful only for Spanish models
        (``es-ES``, ``es-LA``, ``es-US``).
    description : Optional[str]
        Free text description.
    """

    name: str
    base_model_name: str
    dialect: Optional[str] = None
    description: Optional[str] = None


class LanguageModelStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    TRAINING = "training"
    AVAILABLE = "available"
    UPGRADING = "upgrading"
    FAILED = "failed"


class LanguageModel(WatsonModel):
    customization_id: str
    created: Optional[str] = None
    language: Optional[str] = None
    dialect: Optional[str] = None
    versions: Optional[List[str]] = None
    owner: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    base_model_name: Optional[str] = None
    status: Optional[LanguageModelStatus] = None
    progress: Optional[int] = None
    warnings: Optional[str] = None


class LanguageModels(WatsonModel):
    customizations: List[LanguageModel]


# -------------------------------------------------------------------
# Corpora
# -------------------------------------------------------------------
class CorpusStatus(str, Enum):
    ANALYZED = "analyzed"
    BEING_PROCESSED = "being_processed"
    UNDETERMINED = "undetermined"


class Corpus(WatsonModel):
    """
    A corpus added to a custom language model.

    Attributes
    ----------
    name : str
        Name of the corpus.
    total_words : int
        Number of words read from the corpus.
    out_of_vocabulary_words : int
        Number of words not found in the base vocabulary.
    status : CorpusStatus
        Analysis status.
    error : Optional[str]
        Reason of an ``undetermined`` status.
    """

    name: str
    total_words: int
    out_of_vocabulary_words: int
    status: CorpusStatus
    error: Optional[str] = None


class Corpora(WatsonModel):
    """Corpora of a custom model; empty when none were added."""

    corpora: List[Corpus]


# -------------------------------------------------------------------
# Audio resources
# -------------------------------------------------------------------
class AudioDetails(WatsonModel):
    """Details of an audio resource, empty until the service analysed it."""

    type: Optional[str] = None
    codec: Optional[str] = None
    frequency: Optional[int] = None
    compression: Optional[str] = None


class AudioResourceStatus(str, Enum):
    OK = "ok"
    BEING_PROCESSED = "being_processed"
    INVALID = "invalid"


class AudioResource(WatsonModel):
    """
    An audio resource of a custom acoustic model.

    Attributes
    ----------
    duration : float
        Total seconds of audio.
    name : str
        Name of the resource.
    details : AudioDetails
        Format information.
    status : AudioResourceStatus
        ``ok`` when usable for training, ``being_processed`` while analysed,
        ``invalid`` when the audio cannot be used.
    """

    duration: float
    name: str
    details: AudioDetails
    status: AudioResourceStatus
