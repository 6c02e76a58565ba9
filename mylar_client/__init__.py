"""
Async client for the Mylar comic-collection server API.
"""
from mylar_client.api import Command, MylarClient, get_mylar_client
from mylar_client.config import MylarConfig, get_config
from mylar_client.exceptions import APIError, ConfigError, DecodeError, MylarException, TransportError
from mylar_client.models import Comic, ComicDetail, Envelope, ErrorDetail, History, Issue, WantedIssue

__version__ = "1.0.0"

__all__ = [
    'MylarClient',
    'get_mylar_client',
    'Command',
    'MylarConfig',
    'get_config',
    'MylarException',
    'ConfigError',
    'TransportError',
    'DecodeError',
    'APIError',
    'Comic',
    'ComicDetail',
    'Issue',
    'WantedIssue',
    'History',
    'Envelope',
    'ErrorDetail',
]
