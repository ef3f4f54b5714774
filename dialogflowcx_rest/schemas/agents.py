"""
Agent records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .flows import FlowValidationResult
from .settings import AdvancedSettings, SpeechToTextSettings, TextToSpeechSettings
from ..utils.transforms import Base64Bytes


class Agent(DialogflowModel):
    """
    A Dialogflow CX agent.

    ``name``, ``display_name``, ``default_language_code`` and ``time_zone``
    are required on creation; the service rejects the call otherwise.
    """

    # Identity
    name: Optional[str] = Field(default=None, description="Agent resource name")
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    avatar_uri: Optional[str] = Field(default=None)

    # Language
    default_language_code: Optional[str] = Field(default=None)
    supported_language_codes: Optional[List[str]] = Field(default=None)
    time_zone: Optional[str] = Field(default=None, description="IANA time zone, e.g. America/New_York")

    # Entry points
    start_flow: Optional[str] = Field(default=None)
    start_playbook: Optional[str] = Field(default=None)

    # Settings
    security_settings: Optional[str] = Field(default=None, description="SecuritySettings resource name")
    speech_to_text_settings: Optional[SpeechToTextSettings] = Field(default=None)
    text_to_speech_settings: Optional[TextToSpeechSettings] = Field(default=None)
    advanced_settings: Optional[AdvancedSettings] = Field(default=None)
    git_integration_settings: Optional[Dict[str, Any]] = Field(default=None)
    gen_app_builder_settings: Optional[Dict[str, Any]] = Field(default=None)
    answer_feedback_settings: Optional[Dict[str, Any]] = Field(default=None)
    personalization_settings: Optional[Dict[str, Any]] = Field(default=None)
    client_certificate_settings: Optional[Dict[str, Any]] = Field(default=None)
    enable_stackdriver_logging: Optional[bool] = Field(default=None)
    enable_spell_correction: Optional[bool] = Field(default=None)
    enable_multi_language_training: Optional[bool] = Field(default=None)
    locked: Optional[bool] = Field(default=None)


class ListAgentsResponse(DialogflowModel):
    agents: Optional[List[Agent]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ExportAgentRequest(DialogflowModel):
    agent_uri: Optional[str] = Field(default=None, description="Optional gs:// destination")
    data_format: Optional[str] = Field(default=None, description="BLOB or JSON_PACKAGE")
    environment: Optional[str] = Field(default=None)
    git_destination: Optional[Dict[str, Any]] = Field(default=None)
    include_bigquery_export_settings: Optional[bool] = Field(default=None)


class ExportAgentResponse(DialogflowModel):
    """Result of the export operation."""

    agent_uri: Optional[str] = Field(default=None)
    agent_content: Optional[Base64Bytes] = Field(default=None, description="Uncompressed raw byte content for agent")
    commit_sha: Optional[str] = Field(default=None)


class RestoreAgentRequest(DialogflowModel):
    agent_uri: Optional[str] = Field(default=None)
    agent_content: Optional[Base64Bytes] = Field(default=None)
    git_source: Optional[Dict[str, Any]] = Field(default=None)
    restore_option: Optional[str] = Field(default=None, description="KEEP or FALLBACK")


class ValidateAgentRequest(DialogflowModel):
    language_code: Optional[str] = Field(default=None)


class AgentValidationResult(DialogflowModel):
    name: Optional[str] = Field(default=None)
    flow_validation_results: Optional[List[FlowValidationResult]] = Field(default=None)
