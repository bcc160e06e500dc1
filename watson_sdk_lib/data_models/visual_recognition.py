"""
Response models of the Visual Recognition V3 service.

The service uses the reserved word ``class`` as a JSON key; the models expose
it as ``class_name`` and keep ``class`` on the wire through an alias.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from watson_sdk_lib.data_models.base_model import WatsonModel


class ErrorInfo(WatsonModel):
    """Error attached to a single image that could not be processed."""

    code: int
    description: str
    error_id: str


class WarningInfo(WatsonModel):
    warning_id: str
    description: str


# -------------------------------------------------------------------
# Classification
# -------------------------------------------------------------------
class ClassResult(WatsonModel):
    """
    Score of one class for one image.

    Attributes
    ----------
    class_name : str
        Name of the class (wire key ``class``).
    score : Optional[float]
        Confidence score in ``[0, 1]``.
    type_hierarchy : Optional[str]
        Hierarchy path such as ``/fruit/pome/apple``.
    """

    class_name: str = Field(alias="class")
    score: Optional[float] = None
    type_hierarchy: Optional[str] = None


class ClassifierResult(WatsonModel):
    name: str
    classifier_id: str
    classes: List[ClassResult]


class ClassifiedImage(WatsonModel):
    """
    Classification result of one image.

    Attributes
    ----------
    source_url : Optional[str]
        URL of the image as given in the request.
    resolved_url : Optional[str]
        URL after redirects.
    image : Optional[str]
        File name of the image inside an uploaded archive.
    error : Optional[ErrorInfo]
        Set when this image could not be classified.
    classifiers : List[ClassifierResult]
        Results per classifier.
    """

    source_url: Optional[str] = None
    resolved_url: Optional[str] = None
    image: Optional[str] = None
    error: Optional[ErrorInfo] = None
    classifiers: List[ClassifierResult]


class ClassifiedImages(WatsonModel):
    custom_classes: Optional[int] = None
    images_processed: Optional[int] = None
    images: List[ClassifiedImage]
    warnings: Optional[List[WarningInfo]] = None


# -------------------------------------------------------------------
# Face detection
# -------------------------------------------------------------------
class FaceAge(WatsonModel):
    min: Optional[int] = None
    max: Optional[int] = None
    score: Optional[float] = None


class FaceGender(WatsonModel):
    gender: str
    score: Optional[float] = None


class FaceLocation(WatsonModel):
    """Bounding box of a face, in pixels."""

    width: float
    height: float
    left: float
    top: float


class FaceIdentity(WatsonModel):
    name: str
    score: Optional[float] = None
    type_hierarchy: Optional[str] = None


class Face(WatsonModel):
    age: Optional[FaceAge] = None
    gender: Optional[FaceGender] = None
    face_location: Optional[FaceLocation] = None
    identity: Optional[FaceIdentity] = None


class ImageWithFaces(WatsonModel):
    faces: List[Face]
    image: Optional[str] = None
    source_url: Optional[str] = None
    resolved_url: Optional[str] = None
    error: Optional[ErrorInfo] = None


class DetectedFaces(WatsonModel):
    images_processed: Optional[int] = None
    images: List[ImageWithFaces]
    warnings: Optional[List[WarningInfo]] = None


# -------------------------------------------------------------------
# Custom classifiers
# -------------------------------------------------------------------
class ClassifierStatus(str, Enum):
    READY = "ready"
    TRAINING = "training"
    RETRAINING = "retraining"
    FAILED = "failed"


class Class(WatsonModel):
    class_name: str = Field(alias="class")


class Classifier(WatsonModel):
    """
    Information about a custom classifier.

    Attributes
    ----------
    classifier_id : str
        Identifier of the classifier.
    name : str
        Name given at creation time.
    owner : Optional[str]
        Owner of the classifier.
    status : Optional[ClassifierStatus]
        Training status.
    explanation : Optional[str]
        Reason for a ``failed`` status.
    created : Optional[str]
        Creation time.
    classes : Optional[List[Class]]
        Classes that define the classifier.
    retrained : Optional[str]
        Time the last retraining finished.
    updated : Optional[str]
        Time of the last update.
    """

    classifier_id: str
    name: str
    owner: Optional[str] = None
    status: Optional[ClassifierStatus] = None
    explanation: Optional[str] = None
    created: Optional[str] = None
    classes: Optional[List[Class]] = None
    retrained: Optional[str] = None
    updated: Optional[str] = None


class Classifiers(WatsonModel):
    classifiers: List[Classifier]
