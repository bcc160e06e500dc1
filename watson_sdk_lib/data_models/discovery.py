"""
Models of the Discovery V1 service: environments, collections and query
results with their (recursive) aggregations.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from watson_sdk_lib.data_models.base_model import WatsonModel


# -------------------------------------------------------------------
# Environments
# -------------------------------------------------------------------
class MemoryUsage(WatsonModel):
    """
    Memory capacity of an environment.

    Deprecated by the service, still returned by older environments.

    Attributes
    ----------
    used_bytes : Optional[int]
        Bytes used of the memory capacity.
    total_bytes : Optional[int]
        Total bytes available.
    used : Optional[str]
        Used capacity in KB or GB format.
    total : Optional[str]
        Total capacity in KB or GB format.
    percent_used : Optional[float]
        Percentage of the capacity in use.
    """

    used_bytes: Optional[int] = None
    total_bytes: Optional[int] = None
    used: Optional[str] = None
    total: Optional[str] = None
    percent_used: Optional[float] = None


class DiskUsage(WatsonModel):
    used_bytes: Optional[int] = None
    maximum_allowed_bytes: Optional[int] = None


class EnvironmentDocuments(WatsonModel):
    indexed: Optional[int] = None
    maximum_allowed: Optional[int] = None


class IndexCapacity(WatsonModel):
    documents: Optional[EnvironmentDocuments] = None
    disk_usage: Optional[DiskUsage] = None
    memory_usage: Optional[MemoryUsage] = None


class Environment(WatsonModel):
    environment_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    status: Optional[str] = None
    read_only: Optional[bool] = None
    size: Optional[str] = None
    index_capacity: Optional[IndexCapacity] = None


# -------------------------------------------------------------------
# Collections
# -------------------------------------------------------------------
class CollectionLanguage(str, Enum):
    """ISO 639-1 language of the documents stored in a collection."""

    EN = "en"
    ES = "es"
    DE = "de"
    AR = "ar"
    FR = "fr"
    IT = "it"
    JA = "ja"
    KO = "ko"
    PT_BR = "pt-br"


class CreateCollectionRequest(WatsonModel):
    """
    Payload of ``POST /v1/environments/{environment_id}/collections``.

    Attributes
    ----------
    name : str
        Name of the collection.
    description : Optional[str]
        Description of the collection.
    configuration_id : Optional[str]
        Configuration in which the collection is created.
    language : Optional[CollectionLanguage]
        Language of the documents.
    """

    name: str
    description: Optional[str] = None
    configuration_id: Optional[str] = None
    language: Optional[CollectionLanguage] = None


class Collection(WatsonModel):
    collection_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    status: Optional[str] = None
    configuration_id: Optional[str] = None
    language: Optional[str] = None


class ListCollectionsResponse(WatsonModel):
    collections: Optional[List[Collection]] = None


class DeleteCollectionResponse(WatsonModel):
    collection_id: str
    status: str


# -------------------------------------------------------------------
# Query
# -------------------------------------------------------------------
class AggregationResult(WatsonModel):
    key: Optional[str] = None
    matching_results: Optional[int] = None
    aggregations: Optional[List["Calculation"]] = None


class Calculation(WatsonModel):
    """
    One aggregation of a query response.

    Attributes
    ----------
    type : Optional[str]
        Aggregation command (``term``, ``filter``, ``max``, ``min`` ...).
    field : Optional[str]
        Document field the aggregation runs on.
    results : Optional[List[AggregationResult]]
        Buckets of the aggregation.
    match : Optional[str]
        Match the aggregated results queried for.
    matching_results : Optional[int]
        Number of matching results.
    aggregations : Optional[List[Calculation]]
        Nested aggregations.
    value : Optional[float]
        Value of ``max``/``min``/``sum``/``average`` aggregations.
    """

    type: Optional[str] = None
    field: Optional[str] = None
    results: Optional[List[AggregationResult]] = None
    match: Optional[str] = None
    matching_results: Optional[int] = None
    aggregations: Optional[List["Calculation"]] = None
    value: Optional[float] = None


class QueryResponse(WatsonModel):
    matching_results: Optional[int] = None
    results: Optional[List[Dict[str, Any]]] = None
    aggregations: Optional[List[Calculation]] = None


AggregationResult.model_rebuild()
Calculation.model_rebuild()
