"""
Shared envelopes: operations, locations, status and inline content.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from ..utils.transforms import Base64Bytes


class Status(DialogflowModel):
    """Error status returned inside operations and webhook results."""

    code: Optional[int] = Field(default=None, description="google.rpc.Code value")
    message: Optional[str] = Field(default=None)
    details: Optional[List[Dict[str, Any]]] = Field(default=None)


class Operation(DialogflowModel):
    """
    Handle of a long-running operation.

    ``response`` holds the raw result once ``done`` is true; pass it to
    ``deserialize`` with the documented response type to get a typed record.
    """

    name: Optional[str] = Field(default=None, description="Operation resource name")
    metadata: Optional[Dict[str, Any]] = Field(default=None)
    done: Optional[bool] = Field(default=None)
    error: Optional[Status] = Field(default=None)
    response: Optional[Dict[str, Any]] = Field(default=None)


class ListOperationsResponse(DialogflowModel):
    operations: Optional[List[Operation]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class Location(DialogflowModel):
    """A Google Cloud location."""

    name: Optional[str] = Field(default=None)
    location_id: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)
    labels: Optional[Dict[str, str]] = Field(default=None)
    metadata: Optional[Dict[str, Any]] = Field(default=None)


class ListLocationsResponse(DialogflowModel):
    locations: Optional[List[Location]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class InlineSource(DialogflowModel):
    """Uploaded content for import requests."""

    content: Optional[Base64Bytes] = Field(default=None, description="Uploaded content")


class InlineDestination(DialogflowModel):
    """Exported content returned inline."""

    content: Optional[Base64Bytes] = Field(default=None, description="Exported content")
