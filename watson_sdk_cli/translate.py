"""
Language Translator command‑line interface.

A small utility around :class:`~watson_sdk_lib.LanguageTranslator` that
translates text, identifies its language or lists the available models, and
prints the service response as JSON.

Credentials are read from ``--username``/``--password`` or, when omitted,
from the ``WATSON_SDK_USERNAME`` / ``WATSON_SDK_PASSWORD`` environment
variables.

---

# Quick ways to run the script

1. Translate with an explicit model

>>> watson-translate translate --model-id en-es "Hello" "Good morning"

2. Translate by language pair, reading text from STDIN

>>> echo "Hello" | watson-translate translate --source en --target es

3. Identify a language

>>> watson-translate identify "Hola, ¿qué tal?"

4. List default models translating into Spanish

>>> watson-translate list-models --target es --default

5. List custom models only

>>> watson-translate list-models --no-default
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from watson_sdk_lib import LanguageTranslator, WatsonSDKError
from watson_sdk_lib.constants import ENV_PASSWORD, ENV_USERNAME, LOG_LEVEL
from watson_sdk_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate text and inspect Language Translator models."
    )
    parser.add_argument(
        "--username",
        default=os.environ.get(ENV_USERNAME, ""),
        help=f"Service username (defaults to ${ENV_USERNAME}).",
    )
    parser.add_argument(
        "--password",
        default=os.environ.get(ENV_PASSWORD, ""),
        help=f"Service password (defaults to ${ENV_PASSWORD}).",
    )
    parser.add_argument(
        "--url", default=None, help="Service URL (defaults to the public endpoint)."
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log every HTTP request."
    )

    sub = parser.add_subparsers(dest="command", required=True)

    translate = sub.add_parser("translate", help="Translate text.")
    translate.add_argument(
        "text", nargs="*", help="Texts to translate (defaults to STDIN)."
    )
    translate.add_argument("--model-id", default=None, help="Translation model.")
    translate.add_argument("--source", default=None, help="Source language.")
    translate.add_argument("--target", default=None, help="Target language.")

    identify = sub.add_parser("identify", help="Identify the language of a text.")
    identify.add_argument("text", nargs="?", help="Text (defaults to STDIN).")

    list_models = sub.add_parser("list-models", help="List translation models.")
    list_models.add_argument("--source", default=None, help="Filter by source.")
    list_models.add_argument("--target", default=None, help="Filter by target.")
    list_models.add_argument(
        "--default",
        dest="default_models",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only default models (--no-default: only custom models).",
    )
    return parser


def run(client: LanguageTranslator, args: argparse.Namespace, stdin=None):
    stdin = stdin or sys.stdin
    if args.command == "translate":
        texts = args.text or [line for line in stdin.read().splitlines() if line]
        return client.translate(
            texts, model_id=args.model_id, source=args.source, target=args.target
        )
    if args.command == "identify":
        return client.identify(args.text if args.text else stdin.read())
    return client.list_models(
        source=args.source, target=args.target, default_models=args.default_models
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger(
        "watson_sdk_cli", level="DEBUG" if args.debug else LOG_LEVEL
    )
    try:
        client = LanguageTranslator(
            args.username, args.password, service_url=args.url, logger=logger
        )
        result = run(client, args)
    except WatsonSDKError as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
