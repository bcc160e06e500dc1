"""
Façade of the Conversation V1 workspace API (entity value synonyms).
"""

from typing import Optional

from watson_sdk_lib.constants import CONVERSATION_URL
from watson_sdk_lib.data_models.conversation import (
    CreateSynonym,
    Synonym,
    SynonymCollection,
    UpdateSynonym,
)
from watson_sdk_lib.services.service_interface import BaseWatsonService
from watson_sdk_lib.utils.request_builder import format_path, json_body

_SYNONYMS = "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms"
_SYNONYM = _SYNONYMS + "/{synonym}"


class Conversation(BaseWatsonService):
    """
    Client of the ``/v1`` Conversation API.

    ``version`` is the API version date (``YYYY-MM-DD``) and is sent with
    every call.
    """

    default_service_url = CONVERSATION_URL
    domain = "watson.conversation.v1"

    def __init__(self, username: str, password: str, version: str, **kwargs) -> None:
        super().__init__(username, password, version=version, **kwargs)

    def list_synonyms(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        page_limit: Optional[int] = None,
        include_count: Optional[bool] = None,
        sort: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> SynonymCollection:
        """
        List the synonyms of an entity value.

        Parameters
        ----------
        workspace_id, entity, value : str
            Location of the entity value.
        page_limit : Optional[int]
            Number of synonyms per page.
        include_count : Optional[bool]
            Include ``total``/``matched`` in the pagination block.
        sort : Optional[str]
            Attribute to sort by, ``-`` prefix for descending order.
        cursor : Optional[str]
            Cursor of the page to return.
        """
        return self._call(
            "GET",
            format_path(
                _SYNONYMS, workspace_id=workspace_id, entity=entity, value=value
            ),
            SynonymCollection,
            query=[
                ("page_limit", page_limit),
                ("include_count", include_count),
                ("sort", sort),
                ("cursor", cursor),
            ],
        )

    def create_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> Synonym:
        body, content_type = json_body(self._payload(CreateSynonym, synonym=synonym))
        return self._call(
            "POST",
            format_path(
                _SYNONYMS, workspace_id=workspace_id, entity=entity, value=value
            ),
            Synonym,
            content_type=content_type,
            body=body,
        )

    def get_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> Synonym:
        return self._call(
            "GET",
            format_path(
                _SYNONYM,
                workspace_id=workspace_id,
                entity=entity,
                value=value,
                synonym=synonym,
            ),
            Synonym,
        )

    def update_synonym(
        self,
        workspace_id: str,
        entity: str,
        value: str,
        synonym: str,
        new_synonym: Optional[str] = None,
    ) -> Synonym:
        """Rename *synonym* to ``new_synonym``; an absent value leaves it as is."""
        body, content_type = json_body(
            self._payload(UpdateSynonym, synonym=new_synonym)
        )
        return self._call(
            "POST",
            format_path(
                _SYNONYM,
                workspace_id=workspace_id,
                entity=entity,
                value=value,
                synonym=synonym,
            ),
            Synonym,
            content_type=content_type,
            body=body,
        )

    def delete_synonym(
        self, workspace_id: str, entity: str, value: str, synonym: str
    ) -> None:
        self._call(
            "DELETE",
            format_path(
                _SYNONYM,
                workspace_id=workspace_id,
                entity=entity,
                value=value,
                synonym=synonym,
            ),
        )
