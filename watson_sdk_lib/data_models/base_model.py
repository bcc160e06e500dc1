"""
Base model definitions for the Watson SDK data-transfer objects.

Every request and response document of the platform services is mirrored by
a subclass of :class:`WatsonModel`.  The base class fixes one decode/encode
policy for all of them:

* required fields that are missing (or ``null``) fail decoding,
* optional fields that are missing or ``null`` decode as absent (``None``)
  and are omitted again when encoding,
* a present field of the wrong type fails decoding, optional or not,
* enum fields are closed – an unknown wire value fails decoding,
* keys the model does not declare are dropped on decode, so a
  decode-then-encode round trip loses fields unknown to the client.

Decoding runs pydantic in strict JSON mode, so wire values are never
coerced: ``"12"`` is not an ``int`` and ``"yes"`` is not a ``bool``.  Models
built in code keep the lax mode, which lets callers pass enum values as
plain strings.  Decoding failures are reported as
:class:`~watson_sdk_lib.exceptions.DecodingError` with the raw document
attached.
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from watson_sdk_lib.exceptions import DecodingError


class WatsonModel(BaseModel):
    """
    Common base of all DTOs.

    Wire keys are the field names, except where a field declares an
    ``alias`` (e.g. the ``class`` key, exposed as ``class_name``).  Both the
    attribute name and the alias are accepted when constructing a model.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Encode to a JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> bytes:
        """Encode to a UTF-8 JSON document keyed by wire names."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    @classmethod
    def from_dict(cls, data: Any):
        """
        Decode an already parsed JSON document.

        Raises
        ------
        DecodingError
            If the document does not match the model.
        """
        try:
            raw = json.dumps(data).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise DecodingError(
                f"{cls.__name__} document is not JSON compatible: {exc}",
                body=json.dumps(data, default=str).encode("utf-8"),
            ) from exc
        return cls.from_json(raw)

    @classmethod
    def from_json(cls, body: bytes | str):
        """
        Decode a raw JSON body.

        Raises
        ------
        DecodingError
            If the body is not JSON or does not match the model.
        """
        raw = body.encode("utf-8") if isinstance(body, str) else body
        try:
            return cls.model_validate_json(raw, strict=True)
        except PydanticValidationError as exc:
            raise DecodingError(
                f"Invalid {cls.__name__} document: {exc}", body=raw
            ) from exc
