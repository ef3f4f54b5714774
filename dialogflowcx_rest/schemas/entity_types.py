"""
Entity type records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .common import InlineDestination, InlineSource


class Entity(DialogflowModel):
    value: Optional[str] = Field(default=None, description="Primary value associated with this entity entry")
    synonyms: Optional[List[str]] = Field(default=None)


class ExcludedPhrase(DialogflowModel):
    value: Optional[str] = Field(default=None)


class EntityType(DialogflowModel):
    """Maps extracted values to parameters."""

    name: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)
    kind: Optional[str] = Field(default=None, description="KIND_MAP, KIND_LIST or KIND_REGEXP")
    auto_expansion_mode: Optional[str] = Field(default=None)
    entities: Optional[List[Entity]] = Field(default=None)
    excluded_phrases: Optional[List[ExcludedPhrase]] = Field(default=None)
    enable_fuzzy_extraction: Optional[bool] = Field(default=None)
    redact: Optional[bool] = Field(default=None)


class ListEntityTypesResponse(DialogflowModel):
    entity_types: Optional[List[EntityType]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ExportEntityTypesRequest(DialogflowModel):
    entity_types: Optional[List[str]] = Field(default=None)
    entity_types_uri: Optional[str] = Field(default=None)
    entity_types_content_inline: Optional[bool] = Field(default=None)
    data_format: Optional[str] = Field(default=None)
    language_code: Optional[str] = Field(default=None)


class ExportEntityTypesResponse(DialogflowModel):
    entity_types_uri: Optional[str] = Field(default=None)
    entity_types_content: Optional[InlineDestination] = Field(default=None)


class ImportEntityTypesRequest(DialogflowModel):
    entity_types_uri: Optional[str] = Field(default=None)
    entity_types_content: Optional[InlineSource] = Field(default=None)
    merge_option: Optional[str] = Field(default=None)
    target_entity_type: Optional[str] = Field(default=None)


class ImportEntityTypesResponse(DialogflowModel):
    entity_types: Optional[List[str]] = Field(default=None)
    conflicting_resources: Optional[Dict[str, Any]] = Field(default=None)
