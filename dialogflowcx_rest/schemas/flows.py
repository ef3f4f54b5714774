"""
Conversation design records: flows, pages, routes and fulfillments.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .settings import AdvancedSettings
from ..utils.transforms import Base64Bytes, Timestamp


class ResponseMessageText(DialogflowModel):
    text: Optional[List[str]] = Field(default=None, description="Alternative texts, one is picked at random")
    allow_playback_interruption: Optional[bool] = Field(default=None)


class MixedAudioSegment(DialogflowModel):
    """One segment of concatenated audio."""

    audio: Optional[Base64Bytes] = Field(default=None, description="Raw audio synthesized from the response")
    uri: Optional[str] = Field(default=None, description="Client-specific URI pointing to an audio clip")
    allow_playback_interruption: Optional[bool] = Field(default=None)


class MixedAudio(DialogflowModel):
    """Audio built from multiple segments, output only."""

    segments: Optional[List[MixedAudioSegment]] = Field(default=None)


class ResponseMessage(DialogflowModel):
    """A message returned to the end user. Exactly one payload field is set."""

    text: Optional[ResponseMessageText] = Field(default=None)
    payload: Optional[Dict[str, Any]] = Field(default=None, description="Custom channel payload")
    conversation_success: Optional[Dict[str, Any]] = Field(default=None)
    output_audio_text: Optional[Dict[str, Any]] = Field(default=None)
    live_agent_handoff: Optional[Dict[str, Any]] = Field(default=None)
    end_interaction: Optional[Dict[str, Any]] = Field(default=None)
    play_audio: Optional[Dict[str, Any]] = Field(default=None)
    mixed_audio: Optional[MixedAudio] = Field(default=None)
    telephony_transfer_call: Optional[Dict[str, Any]] = Field(default=None)
    knowledge_info_card: Optional[Dict[str, Any]] = Field(default=None)
    response_type: Optional[str] = Field(default=None)
    channel: Optional[str] = Field(default=None)


class Fulfillment(DialogflowModel):
    """Static responses, parameter updates and an optional webhook call."""

    messages: Optional[List[ResponseMessage]] = Field(default=None)
    webhook: Optional[str] = Field(default=None, description="Webhook resource name")
    return_partial_responses: Optional[bool] = Field(default=None)
    tag: Optional[str] = Field(default=None, description="Tag sent to the webhook")
    set_parameter_actions: Optional[List[Dict[str, Any]]] = Field(default=None)
    conditional_cases: Optional[List[Dict[str, Any]]] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)
    enable_generative_fallback: Optional[bool] = Field(default=None)


class EventHandler(DialogflowModel):
    name: Optional[str] = Field(default=None)
    event: Optional[str] = Field(default=None, description="Name of the event to handle")
    trigger_fulfillment: Optional[Fulfillment] = Field(default=None)
    target_page: Optional[str] = Field(default=None)
    target_flow: Optional[str] = Field(default=None)
    target_playbook: Optional[str] = Field(default=None)


class TransitionRoute(DialogflowModel):
    """Route taken when an intent matches and/or a condition holds."""

    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    intent: Optional[str] = Field(default=None, description="Intent resource name")
    condition: Optional[str] = Field(default=None)
    trigger_fulfillment: Optional[Fulfillment] = Field(default=None)
    target_page: Optional[str] = Field(default=None)
    target_flow: Optional[str] = Field(default=None)


class NluSettings(DialogflowModel):
    model_type: Optional[str] = Field(default=None, description="MODEL_TYPE_STANDARD or MODEL_TYPE_ADVANCED")
    classification_threshold: Optional[float] = Field(default=None)
    model_training_mode: Optional[str] = Field(default=None)


class Flow(DialogflowModel):
    """A conversation topic and its pages."""

    name: Optional[str] = Field(default=None, description="Flow resource name")
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    transition_routes: Optional[List[TransitionRoute]] = Field(default=None)
    event_handlers: Optional[List[EventHandler]] = Field(default=None)
    transition_route_groups: Optional[List[str]] = Field(default=None)
    nlu_settings: Optional[NluSettings] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)
    knowledge_connector_settings: Optional[Dict[str, Any]] = Field(default=None)
    multi_language_settings: Optional[Dict[str, Any]] = Field(default=None)
    locked: Optional[bool] = Field(default=None)


class FormParameter(DialogflowModel):
    display_name: Optional[str] = Field(default=None)
    required: Optional[bool] = Field(default=None)
    entity_type: Optional[str] = Field(default=None)
    is_list: Optional[bool] = Field(default=None)
    fill_behavior: Optional[Dict[str, Any]] = Field(default=None)
    default_value: Optional[Any] = Field(default=None)
    redact: Optional[bool] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)


class Form(DialogflowModel):
    parameters: Optional[List[FormParameter]] = Field(default=None)


class Page(DialogflowModel):
    """A state in a flow."""

    name: Optional[str] = Field(default=None, description="Page resource name")
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    entry_fulfillment: Optional[Fulfillment] = Field(default=None)
    form: Optional[Form] = Field(default=None)
    transition_route_groups: Optional[List[str]] = Field(default=None)
    transition_routes: Optional[List[TransitionRoute]] = Field(default=None)
    event_handlers: Optional[List[EventHandler]] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)
    knowledge_connector_settings: Optional[Dict[str, Any]] = Field(default=None)


class TransitionRouteGroup(DialogflowModel):
    """Reusable set of transition routes."""

    name: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)
    transition_routes: Optional[List[TransitionRoute]] = Field(default=None)


class ListFlowsResponse(DialogflowModel):
    flows: Optional[List[Flow]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ListPagesResponse(DialogflowModel):
    pages: Optional[List[Page]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ListTransitionRouteGroupsResponse(DialogflowModel):
    transition_route_groups: Optional[List[TransitionRouteGroup]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ValidationMessage(DialogflowModel):
    resource_type: Optional[str] = Field(default=None)
    resources: Optional[List[str]] = Field(default=None)
    resource_names: Optional[List[Dict[str, Any]]] = Field(default=None)
    severity: Optional[str] = Field(default=None, description="INFO, WARNING or ERROR")
    detail: Optional[str] = Field(default=None)


class FlowValidationResult(DialogflowModel):
    name: Optional[str] = Field(default=None)
    validation_messages: Optional[List[ValidationMessage]] = Field(default=None)
    update_time: Optional[Timestamp] = Field(default=None, description="Last time the flow was validated")


class ValidateFlowRequest(DialogflowModel):
    language_code: Optional[str] = Field(default=None)


class TrainFlowRequest(DialogflowModel):
    pass


class ExportFlowRequest(DialogflowModel):
    flow_uri: Optional[str] = Field(default=None, description="Optional gs:// destination")
    include_referenced_flows: Optional[bool] = Field(default=None)


class ExportFlowResponse(DialogflowModel):
    """Result of the export operation."""

    flow_uri: Optional[str] = Field(default=None)
    flow_content: Optional[Base64Bytes] = Field(default=None, description="Uncompressed raw byte content for flow")


class ImportFlowRequest(DialogflowModel):
    flow_uri: Optional[str] = Field(default=None)
    flow_content: Optional[Base64Bytes] = Field(default=None)
    import_option: Optional[str] = Field(default=None, description="KEEP or FALLBACK")
    flow_import_strategy: Optional[Dict[str, Any]] = Field(default=None)


class ImportFlowResponse(DialogflowModel):
    flow: Optional[str] = Field(default=None, description="Name of the imported flow")
