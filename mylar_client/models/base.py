"""
Base model for all Mylar records

Provides common functionality for decoding API payloads and re-encoding them
with the server's field names.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator


class MylarBaseModel(BaseModel):
    """Base model for all Mylar records with common functionality."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # The server sends null for unset columns; fall back to field defaults
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump().items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary keyed by Python attribute names."""
        return self.model_dump()

    def to_api_data(self) -> Dict[str, Any]:
        """Convert model to dictionary keyed by the server's JSON field names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if not isinstance(data, dict):
            raise ValueError(f"Cannot create {cls.__name__} from {type(data).__name__}")
        return cls.model_validate(data)
