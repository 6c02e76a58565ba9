"""
API client layer for the Mylar comic server

HTTP client for the read-only Mylar /api endpoint.
"""
from .client import MylarClient, get_mylar_client
from .commands import Command

__all__ = ['MylarClient', 'get_mylar_client', 'Command']
