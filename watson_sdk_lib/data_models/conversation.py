"""
Synonym models of the Conversation V1 workspace API.
"""

from typing import List, Optional

from watson_sdk_lib.data_models.base_model import WatsonModel


class CreateSynonym(WatsonModel):
    synonym: str


class UpdateSynonym(WatsonModel):
    """
    Payload of a synonym update.

    Attributes
    ----------
    synonym : Optional[str]
        New text of the synonym; the synonym is left unchanged when absent.
    """

    synonym: Optional[str] = None


class Synonym(WatsonModel):
    synonym: str
    created: Optional[str] = None
    updated: Optional[str] = None


class Pagination(WatsonModel):
    """
    Paging information of a list response.

    Attributes
    ----------
    refresh_url : str
        URL that re-issues the current page.
    next_url : Optional[str]
        URL of the next page, absent on the last page.
    total : Optional[int]
        Number of items on this page (only with ``include_count``).
    matched : Optional[int]
        Number of matching items (only with ``include_count``).
    refresh_cursor : Optional[str]
        Cursor of the current page.
    next_cursor : Optional[str]
        Cursor of the next page.
    """

    refresh_url: str
    next_url: Optional[str] = None
    total: Optional[int] = None
    matched: Optional[int] = None
    refresh_cursor: Optional[str] = None
    next_cursor: Optional[str] = None


class SynonymCollection(WatsonModel):
    synonyms: List[Synonym]
    pagination: Pagination
