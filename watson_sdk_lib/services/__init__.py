from watson_sdk_lib.services.conversation import Conversation
from watson_sdk_lib.services.discovery import Discovery
from watson_sdk_lib.services.language_translator import LanguageTranslator
from watson_sdk_lib.services.speech_to_text import SpeechToText
from watson_sdk_lib.services.visual_recognition import VisualRecognition

__all__ = [
    "Conversation",
    "Discovery",
    "LanguageTranslator",
    "SpeechToText",
    "VisualRecognition",
]
