"""
Façade of the Speech to Text V1 customization API.
"""

from typing import Optional

from watson_sdk_lib.constants import SPEECH_TO_TEXT_URL
from watson_sdk_lib.data_models.speech_to_text import (
    AudioResource,
    Corpora,
    CreateLanguageModel,
    LanguageModel,
    LanguageModels,
)
from watson_sdk_lib.services.service_interface import BaseWatsonService
from watson_sdk_lib.utils.request_builder import (
    FileSource,
    MultipartForm,
    format_path,
    json_body,
)

_CUSTOMIZATION = "/v1/customizations/{customization_id}"


class SpeechToText(BaseWatsonService):
    """Client of the Speech to Text custom language and acoustic models."""

    default_service_url = SPEECH_TO_TEXT_URL
    domain = "watson.speech_to_text.v1"

    def __init__(self, username: str, password: str, **kwargs) -> None:
        super().__init__(username, password, **kwargs)

    # ------------------------------------------------------------------ #
    def create_language_model(
        self,
        name: str,
        base_model_name: str,
        dialect: Optional[str] = None,
        description: Optional[str] = None,
    ) -> LanguageModel:
        """
        Create a custom language model for a base model.

        Parameters
        ----------
        name : str
            Name of the new custom model.
        base_model_name : str
            Base model to customize.
        dialect : Optional[str]
            Dialect of Spanish base models.
        description : Optional[str]
            Description of the custom model.
        """
        payload = self._payload(
            CreateLanguageModel,
            name=name,
            base_model_name=base_model_name,
            dialect=dialect,
            description=description,
        )
        body, content_type = json_body(payload)
        return self._call(
            "POST",
            "/v1/customizations",
            LanguageModel,
            content_type=content_type,
            body=body,
        )

    def list_language_models(self, language: Optional[str] = None) -> LanguageModels:
        return self._call(
            "GET",
            "/v1/customizations",
            LanguageModels,
            query=[("language", language)],
        )

    def get_language_model(self, customization_id: str) -> LanguageModel:
        return self._call(
            "GET",
            format_path(_CUSTOMIZATION, customization_id=customization_id),
            LanguageModel,
        )

    def delete_language_model(self, customization_id: str) -> None:
        self._call(
            "DELETE", format_path(_CUSTOMIZATION, customization_id=customization_id)
        )

    # ------------------------------------------------------------------ #
    def list_corpora(self, customization_id: str) -> Corpora:
        return self._call(
            "GET",
            format_path(_CUSTOMIZATION + "/corpora", customization_id=customization_id),
            Corpora,
        )

    def add_corpus(
        self,
        customization_id: str,
        corpus_name: str,
        corpus_file: FileSource,
        allow_overwrite: Optional[bool] = None,
    ) -> None:
        """
        Add a plain text corpus to a custom language model.

        The service analyses the corpus asynchronously; poll
        :meth:`list_corpora` until its status is ``analyzed``.
        """
        body, content_type = (
            MultipartForm()
            .add_file("corpus_file", corpus_file, content_type="text/plain")
            .encode()
        )
        self._call(
            "POST",
            format_path(
                _CUSTOMIZATION + "/corpora/{corpus_name}",
                customization_id=customization_id,
                corpus_name=corpus_name,
            ),
            query=[("allow_overwrite", allow_overwrite)],
            content_type=content_type,
            body=body,
        )

    def get_audio(self, customization_id: str, audio_name: str) -> AudioResource:
        """Return an audio resource of a custom acoustic model."""
        return self._call(
            "GET",
            format_path(
                "/v1/acoustic_customizations/{customization_id}/audio/{audio_name}",
                customization_id=customization_id,
                audio_name=audio_name,
            ),
            AudioResource,
        )
