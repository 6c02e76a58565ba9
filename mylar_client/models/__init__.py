"""
Data models for the Mylar API client

Immutable Pydantic records decoded from API responses.
"""

from mylar_client.models.base import MylarBaseModel
from mylar_client.models.comic import Comic, ComicDetail, Issue
from mylar_client.models.wanted import WantedIssue
from mylar_client.models.history import History
from mylar_client.models.envelope import Envelope, ErrorDetail

__all__ = [
    'MylarBaseModel',
    'Comic',
    'ComicDetail',
    'Issue',
    'WantedIssue',
    'History',
    'Envelope',
    'ErrorDetail',
]
