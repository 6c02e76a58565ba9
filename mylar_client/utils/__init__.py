"""
Utility helpers for the Mylar API client
"""
