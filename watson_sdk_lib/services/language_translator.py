"""
Façade of the Language Translator V2 service.

Language Translator translates text from one language to another.  The
service offers multiple domain specific models that can be customized with
glossaries and corpora.
"""

from typing import List, Optional, Union

from watson_sdk_lib.constants import LANGUAGE_TRANSLATOR_URL
from watson_sdk_lib.data_models.language_translator import (
    IdentifiableLanguages,
    IdentifiedLanguages,
    TranslateRequest,
    TranslationModel,
    TranslationModels,
    TranslationResult,
)
from watson_sdk_lib.services.service_interface import BaseWatsonService
from watson_sdk_lib.utils.request_builder import (
    FileSource,
    MultipartForm,
    format_path,
    json_body,
    text_body,
)


class LanguageTranslator(BaseWatsonService):
    """
    Client of the ``/v2`` Language Translator API.

    Errors reported by the service have the shape
    ``{"error_code": 404, "error_message": "..."}``.
    """

    default_service_url = LANGUAGE_TRANSLATOR_URL
    domain = "watson.language_translator.v2"

    def __init__(self, username: str, password: str, **kwargs) -> None:
        super().__init__(username, password, **kwargs)

    # ------------------------------------------------------------------ #
    def identify(self, text: str) -> IdentifiedLanguages:
        """
        Identify the language of *text*.

        Returns
        -------
        IdentifiedLanguages
            Candidate languages ranked by confidence.
        """
        body, content_type = text_body(text)
        return self._call(
            "POST",
            "/v2/identify",
            IdentifiedLanguages,
            content_type=content_type,
            body=body,
        )

    def list_identifiable_languages(self) -> IdentifiableLanguages:
        """List all languages the service can identify."""
        return self._call("GET", "/v2/identifiable_languages", IdentifiableLanguages)

    # ------------------------------------------------------------------ #
    def create_model(
        self,
        base_model_id: str,
        name: Optional[str] = None,
        forced_glossary: Optional[FileSource] = None,
        parallel_corpus: Optional[FileSource] = None,
        monolingual_corpus: Optional[FileSource] = None,
    ) -> TranslationModel:
        """
        Train a custom model on top of a base model.

        Parameters
        ----------
        base_model_id : str
            Domain model used as the base for training.
        name : Optional[str]
            Model name; letters, numbers, ``-`` and ``_`` only.
        forced_glossary : file, optional
            TMX file whose entries overwrite the domain translations.
        parallel_corpus : file, optional
            TMX file treated as a parallel corpus.
        monolingual_corpus : file, optional
            UTF-8 plain text used to customize the target language model.

        Raises
        ------
        EncodingError
            If one of the files cannot be read.
        """
        form = MultipartForm()
        if forced_glossary is not None:
            form.add_file("forced_glossary", forced_glossary)
        if parallel_corpus is not None:
            form.add_file("parallel_corpus", parallel_corpus)
        if monolingual_corpus is not None:
            form.add_file("monolingual_corpus", monolingual_corpus)
        body, content_type = form.encode()

        return self._call(
            "POST",
            "/v2/models",
            TranslationModel,
            query=[("base_model_id", base_model_id), ("name", name)],
            content_type=content_type,
            body=body,
        )

    def delete_model(self, model_id: str) -> None:
        """Delete a custom translation model."""
        self._call("DELETE", format_path("/v2/models/{model_id}", model_id=model_id))

    def get_model(self, model_id: str) -> TranslationModel:
        """Return a model, including its training status."""
        return self._call(
            "GET",
            format_path("/v2/models/{model_id}", model_id=model_id),
            TranslationModel,
        )

    def list_models(
        self,
        source: Optional[str] = None,
        target: Optional[str] = None,
        default_models: Optional[bool] = None,
    ) -> TranslationModels:
        """
        List base and custom models, optionally filtered.

        Parameters
        ----------
        source : Optional[str]
            Keep models with this source language.
        target : Optional[str]
            Keep models with this target language.
        default_models : Optional[bool]
            ``True`` returns only default models, ``False`` only non-default
            ones, ``None`` returns both.
        """
        return self._call(
            "GET",
            "/v2/models",
            TranslationModels,
            query=[("source", source), ("target", target), ("default", default_models)],
        )

    # ------------------------------------------------------------------ #
    def translate(
        self,
        text: Union[List[str], str],
        model_id: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ) -> TranslationResult:
        """
        Translate *text*.

        Either ``model_id`` or the ``source``/``target`` pair selects the
        model; when ``model_id`` is set the service ignores the pair.
        """
        payload = self._payload(
            TranslateRequest,
            text=text,
            model_id=model_id,
            source=source,
            target=target,
        )
        body, content_type = json_body(payload)
        return self._call(
            "POST",
            "/v2/translate",
            TranslationResult,
            content_type=content_type,
            body=body,
        )
