from watson_sdk_lib.auth import BasicAuthentication, Credentials
from watson_sdk_lib.services import (
    Conversation,
    Discovery,
    LanguageTranslator,
    SpeechToText,
    VisualRecognition,
)
from watson_sdk_lib.utils.response_mapper import Failure, Success
from watson_sdk_lib.exceptions import (
    WatsonSDKError,
    EncodingError,
    TransportError,
    DecodingError,
    ServerError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "BasicAuthentication",
    "Credentials",
    "Conversation",
    "Discovery",
    "LanguageTranslator",
    "SpeechToText",
    "VisualRecognition",
    "Success",
    "Failure",
    "WatsonSDKError",
    "EncodingError",
    "TransportError",
    "DecodingError",
    "ServerError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
]
