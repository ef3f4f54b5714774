"""
Flow version records.
"""

from typing import Optional, List
from pydantic import Field

from .base import DialogflowModel
from .flows import NluSettings
from ..utils.transforms import Timestamp


class Version(DialogflowModel):
    """A snapshot of a flow."""

    name: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    nlu_settings: Optional[NluSettings] = Field(default=None)
    create_time: Optional[Timestamp] = Field(default=None)
    state: Optional[str] = Field(default=None, description="RUNNING, SUCCEEDED or FAILED")


class ListVersionsResponse(DialogflowModel):
    versions: Optional[List[Version]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class LoadVersionRequest(DialogflowModel):
    allow_override_agent_resources: Optional[bool] = Field(default=None)


class CompareVersionsRequest(DialogflowModel):
    target_version: Optional[str] = Field(default=None)
    language_code: Optional[str] = Field(default=None)


class CompareVersionsResponse(DialogflowModel):
    base_version_content_json: Optional[str] = Field(default=None)
    target_version_content_json: Optional[str] = Field(default=None)
    compare_time: Optional[Timestamp] = Field(default=None)
