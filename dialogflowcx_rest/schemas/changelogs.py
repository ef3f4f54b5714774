"""
Changelog records.
"""

from typing import Optional, List
from pydantic import Field

from .base import DialogflowModel
from ..utils.transforms import Timestamp


class Changelog(DialogflowModel):
    """One change made to an agent resource."""

    name: Optional[str] = Field(default=None)
    user_email: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)
    action: Optional[str] = Field(default=None)
    type: Optional[str] = Field(default=None, description="Type of the changed resource")
    resource: Optional[str] = Field(default=None)
    create_time: Optional[Timestamp] = Field(default=None)
    language_code: Optional[str] = Field(default=None)


class ListChangelogsResponse(DialogflowModel):
    changelogs: Optional[List[Changelog]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)
