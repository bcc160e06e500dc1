"""
Façade of the Discovery V1 service (environments, collections, query).
"""

from typing import List, Optional, Union

from watson_sdk_lib.constants import DISCOVERY_URL
from watson_sdk_lib.data_models.discovery import (
    Collection,
    CollectionLanguage,
    CreateCollectionRequest,
    DeleteCollectionResponse,
    Environment,
    ListCollectionsResponse,
    QueryResponse,
)
from watson_sdk_lib.services.service_interface import BaseWatsonService
from watson_sdk_lib.utils.request_builder import format_path, json_body

_ENVIRONMENT = "/v1/environments/{environment_id}"
_COLLECTIONS = _ENVIRONMENT + "/collections"
_COLLECTION = _COLLECTIONS + "/{collection_id}"


class Discovery(BaseWatsonService):
    """
    Client of the ``/v1`` Discovery API.

    ``version`` is the API version date (``YYYY-MM-DD``) and is sent with
    every call.
    """

    default_service_url = DISCOVERY_URL
    domain = "watson.discovery.v1"

    def __init__(self, username: str, password: str, version: str, **kwargs) -> None:
        super().__init__(username, password, version=version, **kwargs)

    # ------------------------------------------------------------------ #
    def get_environment(self, environment_id: str) -> Environment:
        return self._call(
            "GET",
            format_path(_ENVIRONMENT, environment_id=environment_id),
            Environment,
        )

    # ------------------------------------------------------------------ #
    def create_collection(
        self,
        environment_id: str,
        name: str,
        description: Optional[str] = None,
        configuration_id: Optional[str] = None,
        language: Optional[Union[CollectionLanguage, str]] = None,
    ) -> Collection:
        """
        Create a collection in an environment.

        Raises
        ------
        EncodingError
            If ``language`` is not one of :class:`CollectionLanguage`.
        """
        payload = self._payload(
            CreateCollectionRequest,
            name=name,
            description=description,
            configuration_id=configuration_id,
            language=language,
        )
        body, content_type = json_body(payload)
        return self._call(
            "POST",
            format_path(_COLLECTIONS, environment_id=environment_id),
            Collection,
            content_type=content_type,
            body=body,
        )

    def get_collection(self, environment_id: str, collection_id: str) -> Collection:
        return self._call(
            "GET",
            format_path(
                _COLLECTION, environment_id=environment_id, collection_id=collection_id
            ),
            Collection,
        )

    def list_collections(
        self, environment_id: str, name: Optional[str] = None
    ) -> ListCollectionsResponse:
        """List collections of an environment, optionally by exact ``name``."""
        return self._call(
            "GET",
            format_path(_COLLECTIONS, environment_id=environment_id),
            ListCollectionsResponse,
            query=[("name", name)],
        )

    def delete_collection(
        self, environment_id: str, collection_id: str
    ) -> DeleteCollectionResponse:
        return self._call(
            "DELETE",
            format_path(
                _COLLECTION, environment_id=environment_id, collection_id=collection_id
            ),
            DeleteCollectionResponse,
        )

    # ------------------------------------------------------------------ #
    def query(
        self,
        environment_id: str,
        collection_id: str,
        filter: Optional[str] = None,
        query: Optional[str] = None,
        aggregation: Optional[str] = None,
        count: Optional[int] = None,
        return_fields: Optional[List[str]] = None,
    ) -> QueryResponse:
        """
        Query the documents of a collection.

        Parameters
        ----------
        environment_id : str
            Environment of the collection.
        collection_id : str
            Collection to query.
        filter : Optional[str]
            Query language filter, applied before ranking.
        query : Optional[str]
            Query language search, results are ranked by relevance.
        aggregation : Optional[str]
            Aggregation expression (e.g. ``term(enriched_text.entities.type)``).
        count : Optional[int]
            Number of documents to return.
        return_fields : Optional[List[str]]
            Fields to include in each document (sent as ``return``).
        """
        return self._call(
            "GET",
            format_path(
                _COLLECTION + "/query",
                environment_id=environment_id,
                collection_id=collection_id,
            ),
            QueryResponse,
            query=[
                ("filter", filter),
                ("query", query),
                ("aggregation", aggregation),
                ("count", count),
                ("return", ",".join(return_fields) if return_fields else None),
            ],
        )
