"""
Settings blocks shared by agents, flows, pages and form parameters.
"""

from typing import Optional, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from ..utils.transforms import Duration


class GcsDestination(DialogflowModel):
    """Google Cloud Storage location for exported data."""

    uri: Optional[str] = Field(default=None, description="gs:// URI")


class SpeechSettings(DialogflowModel):
    """Speech recognition tuning."""

    endpointer_sensitivity: Optional[int] = Field(
        default=None,
        description="Sensitivity of the speech model that detects end of speech (0-100)"
    )
    no_speech_timeout: Optional[Duration] = Field(
        default=None,
        description="Timeout before giving up on speech input"
    )
    use_timeout_based_endpointing: Optional[bool] = Field(default=None)
    models: Optional[Dict[str, str]] = Field(
        default=None,
        description="Speech model per language code"
    )


class DtmfSettings(DialogflowModel):
    """DTMF input handling."""

    enabled: Optional[bool] = Field(default=None)
    max_digits: Optional[int] = Field(default=None)
    finish_digit: Optional[str] = Field(default=None)
    interdigit_timeout_duration: Optional[Duration] = Field(default=None)
    endpointing_timeout_duration: Optional[Duration] = Field(default=None)


class LoggingSettings(DialogflowModel):
    enable_stackdriver_logging: Optional[bool] = Field(default=None)
    enable_interaction_logging: Optional[bool] = Field(default=None)
    enable_consent_based_redaction: Optional[bool] = Field(default=None)


class AdvancedSettings(DialogflowModel):
    """
    Hierarchical advanced settings for agent, flow, page, fulfillment and
    parameter. Settings exposed at a lower level override the higher one.
    """

    audio_export_gcs_destination: Optional[GcsDestination] = Field(default=None)
    speech_settings: Optional[SpeechSettings] = Field(default=None)
    dtmf_settings: Optional[DtmfSettings] = Field(default=None)
    logging_settings: Optional[LoggingSettings] = Field(default=None)


class SpeechToTextSettings(DialogflowModel):
    enable_speech_adaptation: Optional[bool] = Field(default=None)


class TextToSpeechSettings(DialogflowModel):
    synthesize_speech_configs: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Speech synthesis config per language code"
    )
