"""
Server-side actions selectable through the cmd query parameter
"""
from enum import Enum


class Command(Enum):
    """Commands understood by the Mylar /api endpoint."""
    INDEX = "getIndex"
    COMIC_DETAIL = "getComic"
    WANTED = "getWanted"
    HISTORY = "getHistory"

    def __str__(self) -> str:
        return self.value
