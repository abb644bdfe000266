"""Data models for property listings."""

from typing import Any

from pydantic import BaseModel, ConfigDict

PROPERTY_COLLECTION = "properties"


class Property(BaseModel):
    """A property document. Fields are whatever the caller posted."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    timestamp: Any = None
    updatedAt: Any = None  # noqa: N815
