"""
Constants and configuration for the Watson SDK.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Explicit arguments
passed to a service constructor always take precedence over these values.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "WATSON_SDK_"


# Timeout (seconds) of a single request to a service
DEFAULT_TIMEOUT = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 60)
)

# Default logging level
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO")
    .upper()
    .strip()
)

# Credentials used by the command line tool
ENV_USERNAME = f"{_DontChangeMe.MAIN_ENV_PREFIX}USERNAME"
ENV_PASSWORD = f"{_DontChangeMe.MAIN_ENV_PREFIX}PASSWORD"

# =============================================================================
# SERVICE URLS
# =============================================================================
LANGUAGE_TRANSLATOR_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LANGUAGE_TRANSLATOR_URL",
    "https://gateway.watsonplatform.net/language-translator/api",
).strip()

VISUAL_RECOGNITION_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}VISUAL_RECOGNITION_URL",
    "https://gateway-a.watsonplatform.net/visual-recognition/api",
).strip()

SPEECH_TO_TEXT_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SPEECH_TO_TEXT_URL",
    "https://stream.watsonplatform.net/speech-to-text/api",
).strip()

DISCOVERY_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}DISCOVERY_URL",
    "https://gateway.watsonplatform.net/discovery/api",
).strip()

CONVERSATION_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}CONVERSATION_URL",
    "https://gateway.watsonplatform.net/conversation/api",
).strip()

# =============================================================================
# CONTENT TYPES
# =============================================================================
CONTENT_JSON = "application/json"
CONTENT_TEXT = "text/plain"
