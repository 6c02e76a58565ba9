"""
Structured response envelope

Not every command uses this format: getWanted returns a bare JSON array.
"""
from typing import Any

from pydantic import Field

from mylar_client.models.base import MylarBaseModel


class ErrorDetail(MylarBaseModel):
    """Error object carried by an unsuccessful envelope."""

    code: int = Field(0, strict=True)
    message: str = ""


class Envelope(MylarBaseModel):
    """
    Structured response shared by getIndex, getComic and getHistory.

    When success is False, error is populated and data must be ignored.
    """

    success: bool = Field(strict=True)
    error: ErrorDetail = Field(default_factory=ErrorDetail)
    data: Any = None
