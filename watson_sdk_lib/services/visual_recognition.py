"""
Façade of the Visual Recognition V3 service.

The service identifies scenes, objects and faces in uploaded images and lets
users train custom classifiers from example archives.
"""

import json
from typing import Any, Dict, Mapping, Optional, Union

from watson_sdk_lib.constants import VISUAL_RECOGNITION_URL
from watson_sdk_lib.data_models.visual_recognition import (
    ClassifiedImages,
    Classifier,
    Classifiers,
    DetectedFaces,
)
from watson_sdk_lib.exceptions import EncodingError
from watson_sdk_lib.services.service_interface import BaseWatsonService
from watson_sdk_lib.utils.request_builder import (
    FileSource,
    MultipartForm,
    format_path,
)


class VisualRecognition(BaseWatsonService):
    """
    Client of the ``/v3`` Visual Recognition API.

    ``version`` is the API version date (``YYYY-MM-DD``) and is sent with
    every call.
    """

    default_service_url = VISUAL_RECOGNITION_URL
    domain = "watson.visual_recognition.v3"

    def __init__(self, username: str, password: str, version: str, **kwargs) -> None:
        super().__init__(username, password, version=version, **kwargs)

    @staticmethod
    def _image_form(
        images_file: Optional[FileSource],
        parameters: Optional[Union[str, Dict[str, Any]]],
        images_file_content_type: Optional[str] = None,
    ) -> MultipartForm:
        form = MultipartForm()
        if images_file is not None:
            form.add_file(
                "images_file", images_file, content_type=images_file_content_type
            )
        if parameters is not None:
            if not isinstance(parameters, str):
                parameters = json.dumps(parameters)
            form.add_text("parameters", parameters)
        return form

    # ------------------------------------------------------------------ #
    def classify(
        self,
        images_file: Optional[FileSource] = None,
        parameters: Optional[Union[str, Dict[str, Any]]] = None,
        accept_language: Optional[str] = None,
        images_file_content_type: Optional[str] = None,
    ) -> ClassifiedImages:
        """
        Classify images with built-in or custom classifiers.

        Parameters
        ----------
        images_file : file, optional
            An image or a ``.zip`` archive of images.
        parameters : str | dict, optional
            JSON options (``url``, ``classifier_ids``, ``owners``,
            ``threshold``); a dict is serialised for you.
        accept_language : Optional[str]
            Language of the returned class names.
        images_file_content_type : Optional[str]
            Content type of ``images_file``.
        """
        body, content_type = self._image_form(
            images_file, parameters, images_file_content_type
        ).encode()
        headers = {"Accept-Language": accept_language} if accept_language else None
        return self._call(
            "POST",
            "/v3/classify",
            ClassifiedImages,
            headers=headers,
            content_type=content_type,
            body=body,
        )

    def detect_faces(
        self,
        images_file: Optional[FileSource] = None,
        parameters: Optional[Union[str, Dict[str, Any]]] = None,
        images_file_content_type: Optional[str] = None,
    ) -> DetectedFaces:
        """Detect faces and estimate age and gender."""
        body, content_type = self._image_form(
            images_file, parameters, images_file_content_type
        ).encode()
        return self._call(
            "POST",
            "/v3/detect_faces",
            DetectedFaces,
            content_type=content_type,
            body=body,
        )

    # ------------------------------------------------------------------ #
    def create_classifier(
        self,
        name: str,
        positive_examples: Mapping[str, FileSource],
        negative_examples: Optional[FileSource] = None,
    ) -> Classifier:
        """
        Train a new custom classifier.

        Parameters
        ----------
        name : str
            Name of the classifier.
        positive_examples : Mapping[str, file]
            Class name to ``.zip`` archive of positive examples; each entry is
            sent as a ``<classname>_positive_examples`` part.
        negative_examples : file, optional
            ``.zip`` archive of images that match none of the classes.

        Raises
        ------
        EncodingError
            If no positive examples are given or a file cannot be read.
        """
        if not positive_examples:
            raise EncodingError("At least one set of positive examples is required")
        form = MultipartForm().add_text("name", name)
        for class_name, examples in positive_examples.items():
            form.add_file(f"{class_name}_positive_examples", examples)
        if negative_examples is not None:
            form.add_file("negative_examples", negative_examples)
        body, content_type = form.encode()

        return self._call(
            "POST",
            "/v3/classifiers",
            Classifier,
            content_type=content_type,
            body=body,
        )

    def delete_classifier(self, classifier_id: str) -> None:
        self._call(
            "DELETE",
            format_path("/v3/classifiers/{classifier_id}", classifier_id=classifier_id),
        )

    def get_classifier(self, classifier_id: str) -> Classifier:
        """Retrieve information about a custom classifier."""
        return self._call(
            "GET",
            format_path("/v3/classifiers/{classifier_id}", classifier_id=classifier_id),
            Classifier,
        )

    def list_classifiers(self, verbose: Optional[bool] = None) -> Classifiers:
        """List custom classifiers; ``verbose`` adds the full details."""
        return self._call(
            "GET", "/v3/classifiers", Classifiers, query=[("verbose", verbose)]
        )

    def update_classifier(
        self,
        classifier_id: str,
        positive_examples: Optional[Mapping[str, FileSource]] = None,
        negative_examples: Optional[FileSource] = None,
    ) -> Classifier:
        """
        Add classes or example images to an existing classifier.

        Retraining requests sent in parallel overwrite each other; wait for
        the classifier to be ``ready`` before the next update.
        """
        form = MultipartForm()
        for class_name, examples in (positive_examples or {}).items():
            form.add_file(f"{class_name}_positive_examples", examples)
        if negative_examples is not None:
            form.add_file("negative_examples", negative_examples)
        if not len(form):
            raise EncodingError("Positive or negative examples are required")
        body, content_type = form.encode()

        return self._call(
            "POST",
            format_path("/v3/classifiers/{classifier_id}", classifier_id=classifier_id),
            Classifier,
            content_type=content_type,
            body=body,
        )
