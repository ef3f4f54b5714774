"""
Security settings records.
"""

from typing import Optional, List
from pydantic import Field

from .base import DialogflowModel


class AudioExportSettings(DialogflowModel):
    gcs_bucket: Optional[str] = Field(default=None)
    audio_export_pattern: Optional[str] = Field(default=None)
    enable_audio_redaction: Optional[bool] = Field(default=None)
    audio_format: Optional[str] = Field(default=None)
    store_tts_audio: Optional[bool] = Field(default=None)


class InsightsExportSettings(DialogflowModel):
    enable_insights_export: Optional[bool] = Field(default=None)


class SecuritySettings(DialogflowModel):
    """Redaction, retention and export settings referenced by agents."""

    name: Optional[str] = Field(default=None)
    display_name: Optional[str] = Field(default=None)

    # Redaction
    redaction_strategy: Optional[str] = Field(default=None)
    redaction_scope: Optional[str] = Field(default=None)
    inspect_template: Optional[str] = Field(default=None, description="DLP inspect template name")
    deidentify_template: Optional[str] = Field(default=None, description="DLP deidentify template name")

    # Retention
    retention_window_days: Optional[int] = Field(default=None)
    retention_strategy: Optional[str] = Field(default=None)
    purge_data_types: Optional[List[str]] = Field(default=None)

    # Export
    audio_export_settings: Optional[AudioExportSettings] = Field(default=None)
    insights_export_settings: Optional[InsightsExportSettings] = Field(default=None)


class ListSecuritySettingsResponse(DialogflowModel):
    security_settings: Optional[List[SecuritySettings]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)
