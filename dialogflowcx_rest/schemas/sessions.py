"""
Session records: detect, match and fulfill intent envelopes.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .common import Status
from .entity_types import Entity
from .flows import Flow, Page, ResponseMessage
from .intents import Intent
from .settings import AdvancedSettings
from ..utils.transforms import Base64Bytes, Duration


# Input

class InputAudioConfig(DialogflowModel):
    audio_encoding: Optional[str] = Field(default=None, description="e.g. AUDIO_ENCODING_LINEAR_16")
    sample_rate_hertz: Optional[int] = Field(default=None)
    enable_word_info: Optional[bool] = Field(default=None)
    phrase_hints: Optional[List[str]] = Field(default=None)
    model: Optional[str] = Field(default=None)
    model_variant: Optional[str] = Field(default=None)
    single_utterance: Optional[bool] = Field(default=None)
    barge_in_config: Optional[Dict[str, Any]] = Field(default=None)
    opt_out_conformer_model_migration: Optional[bool] = Field(default=None)


class AudioInput(DialogflowModel):
    """Natural language speech audio to be processed."""

    config: Optional[InputAudioConfig] = Field(default=None)
    audio: Optional[Base64Bytes] = Field(default=None, description="Raw audio bytes")


class TextInput(DialogflowModel):
    text: Optional[str] = Field(default=None)


class IntentInput(DialogflowModel):
    intent: Optional[str] = Field(default=None, description="Intent resource name")


class EventInput(DialogflowModel):
    event: Optional[str] = Field(default=None)


class DtmfInput(DialogflowModel):
    digits: Optional[str] = Field(default=None)
    finish_digit: Optional[str] = Field(default=None)


class QueryInput(DialogflowModel):
    """One of text, intent, audio, event or dtmf, plus the language."""

    text: Optional[TextInput] = Field(default=None)
    intent: Optional[IntentInput] = Field(default=None)
    audio: Optional[AudioInput] = Field(default=None)
    event: Optional[EventInput] = Field(default=None)
    dtmf: Optional[DtmfInput] = Field(default=None)
    language_code: Optional[str] = Field(default=None)


class OutputAudioConfig(DialogflowModel):
    audio_encoding: Optional[str] = Field(default=None)
    sample_rate_hertz: Optional[int] = Field(default=None)
    synthesize_speech_config: Optional[Dict[str, Any]] = Field(default=None)


class SessionEntityType(DialogflowModel):
    """Session-scoped overrides or supplements of an entity type."""

    name: Optional[str] = Field(default=None)
    entity_override_mode: Optional[str] = Field(default=None)
    entities: Optional[List[Entity]] = Field(default=None)


class ListSessionEntityTypesResponse(DialogflowModel):
    session_entity_types: Optional[List[SessionEntityType]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class QueryParameters(DialogflowModel):
    """Parameters applied to a single query."""

    time_zone: Optional[str] = Field(default=None)
    geo_location: Optional[Dict[str, Any]] = Field(default=None)
    session_entity_types: Optional[List[SessionEntityType]] = Field(default=None)
    payload: Optional[Dict[str, Any]] = Field(default=None)
    parameters: Optional[Dict[str, Any]] = Field(default=None)
    current_page: Optional[str] = Field(default=None)
    disable_webhook: Optional[bool] = Field(default=None)
    analyze_query_text_sentiment: Optional[bool] = Field(default=None)
    webhook_headers: Optional[Dict[str, str]] = Field(default=None)
    flow_versions: Optional[List[str]] = Field(default=None)
    channel: Optional[str] = Field(default=None)
    session_ttl: Optional[Duration] = Field(default=None, description="Session lifetime, between 5 minutes and 1 day")
    end_user_metadata: Optional[Dict[str, Any]] = Field(default=None)
    search_config: Optional[Dict[str, Any]] = Field(default=None)
    populate_data_store_connection_signals: Optional[bool] = Field(default=None)


# Results

class Match(DialogflowModel):
    intent: Optional[Intent] = Field(default=None)
    event: Optional[str] = Field(default=None)
    parameters: Optional[Dict[str, Any]] = Field(default=None)
    resolved_input: Optional[str] = Field(default=None)
    match_type: Optional[str] = Field(default=None)
    confidence: Optional[float] = Field(default=None)


class QueryResult(DialogflowModel):
    """Result of a conversational query."""

    # Echoed input
    text: Optional[str] = Field(default=None)
    trigger_intent: Optional[str] = Field(default=None)
    transcript: Optional[str] = Field(default=None)
    trigger_event: Optional[str] = Field(default=None)
    dtmf: Optional[DtmfInput] = Field(default=None)
    language_code: Optional[str] = Field(default=None)

    # Outcome
    parameters: Optional[Dict[str, Any]] = Field(default=None)
    response_messages: Optional[List[ResponseMessage]] = Field(default=None)
    webhook_statuses: Optional[List[Status]] = Field(default=None)
    webhook_payloads: Optional[List[Dict[str, Any]]] = Field(default=None)
    current_page: Optional[Page] = Field(default=None)
    current_flow: Optional[Flow] = Field(default=None)
    intent: Optional[Intent] = Field(default=None)
    intent_detection_confidence: Optional[float] = Field(default=None)
    match: Optional[Match] = Field(default=None)

    # Diagnostics
    diagnostic_info: Optional[Dict[str, Any]] = Field(default=None)
    sentiment_analysis_result: Optional[Dict[str, Any]] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)
    allow_answer_feedback: Optional[bool] = Field(default=None)
    data_store_connection_signals: Optional[Dict[str, Any]] = Field(default=None)


class DetectIntentRequest(DialogflowModel):
    query_params: Optional[QueryParameters] = Field(default=None)
    query_input: Optional[QueryInput] = Field(default=None)
    output_audio_config: Optional[OutputAudioConfig] = Field(default=None)


class DetectIntentResponse(DialogflowModel):
    response_id: Optional[str] = Field(default=None)
    query_result: Optional[QueryResult] = Field(default=None)
    output_audio: Optional[Base64Bytes] = Field(default=None, description="Synthesized audio of the response")
    output_audio_config: Optional[OutputAudioConfig] = Field(default=None)
    response_type: Optional[str] = Field(default=None)
    allow_cancellation: Optional[bool] = Field(default=None)


class MatchIntentRequest(DialogflowModel):
    query_params: Optional[QueryParameters] = Field(default=None)
    query_input: Optional[QueryInput] = Field(default=None)
    persist_parameter_changes: Optional[bool] = Field(default=None)


class MatchIntentResponse(DialogflowModel):
    text: Optional[str] = Field(default=None)
    trigger_intent: Optional[str] = Field(default=None)
    transcript: Optional[str] = Field(default=None)
    trigger_event: Optional[str] = Field(default=None)
    matches: Optional[List[Match]] = Field(default=None, description="Matches ordered by confidence")
    current_page: Optional[Page] = Field(default=None)


class FulfillIntentRequest(DialogflowModel):
    match_intent_request: Optional[MatchIntentRequest] = Field(default=None)
    match: Optional[Match] = Field(default=None)
    output_audio_config: Optional[OutputAudioConfig] = Field(default=None)


class FulfillIntentResponse(DialogflowModel):
    response_id: Optional[str] = Field(default=None)
    query_result: Optional[QueryResult] = Field(default=None)
    output_audio: Optional[Base64Bytes] = Field(default=None)
    output_audio_config: Optional[OutputAudioConfig] = Field(default=None)
