"""
Intent records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .common import InlineDestination, InlineSource


class TrainingPhrasePart(DialogflowModel):
    text: Optional[str] = Field(default=None)
    parameter_id: Optional[str] = Field(default=None, description="Parameter annotated on this part")


class TrainingPhrase(DialogflowModel):
    id: Optional[str] = Field(default=None)
    parts: Optional[List[TrainingPhrasePart]] = Field(default=None)
    repeat_count: Optional[int] = Field(default=None)


class IntentParameter(DialogflowModel):
    id: Optional[str] = Field(default=None)
    entity_type: Optional[str] = Field(default=None)
    is_list: Optional[bool] = Field(default=None)
    redact: Optional[bool] = Field(default=None)


class Intent(DialogflowModel):
    """An end-user intention."""

    name: Optional[str] = Field(default=None, description="Intent resource name")
    display_name: Optional[str] = Field(default=None)
    training_phrases: Optional[List[TrainingPhrase]] = Field(default=None)
    parameters: Optional[List[IntentParameter]] = Field(default=None)
    priority: Optional[int] = Field(default=None)
    is_fallback: Optional[bool] = Field(default=None)
    labels: Optional[Dict[str, str]] = Field(default=None)
    description: Optional[str] = Field(default=None)
    dtmf_pattern: Optional[str] = Field(default=None)


class ListIntentsResponse(DialogflowModel):
    intents: Optional[List[Intent]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ImportIntentsRequest(DialogflowModel):
    intents_uri: Optional[str] = Field(default=None)
    intents_content: Optional[InlineSource] = Field(default=None)
    merge_option: Optional[str] = Field(default=None)


class ImportIntentsResponse(DialogflowModel):
    intents: Optional[List[str]] = Field(default=None)
    conflicting_resources: Optional[Dict[str, Any]] = Field(default=None)


class ExportIntentsRequest(DialogflowModel):
    intents: Optional[List[str]] = Field(default=None, description="Names of the intents to export")
    intents_uri: Optional[str] = Field(default=None)
    intents_content_inline: Optional[bool] = Field(default=None)
    data_format: Optional[str] = Field(default=None)


class ExportIntentsResponse(DialogflowModel):
    intents_uri: Optional[str] = Field(default=None)
    intents_content: Optional[InlineDestination] = Field(default=None)
