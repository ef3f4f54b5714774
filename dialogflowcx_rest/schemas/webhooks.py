"""
Webhook records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from ..utils.transforms import Base64Bytes, Duration


class GenericWebService(DialogflowModel):
    """Configuration for a generic web service."""

    uri: Optional[str] = Field(default=None, description="Webhook URI, must be https")
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)
    request_headers: Optional[Dict[str, str]] = Field(default=None)
    allowed_ca_certs: Optional[List[Base64Bytes]] = Field(
        default=None,
        description="DER encoded CA certificates used for HTTPS verification"
    )
    oauth_config: Optional[Dict[str, Any]] = Field(default=None)
    service_agent_auth: Optional[str] = Field(default=None)
    webhook_type: Optional[str] = Field(default=None, description="STANDARD or FLEXIBLE")
    http_method: Optional[str] = Field(default=None)
    request_body: Optional[str] = Field(default=None)
    parameter_mapping: Optional[Dict[str, str]] = Field(default=None)


class ServiceDirectoryConfig(DialogflowModel):
    """Webhook reached through Service Directory."""

    service: Optional[str] = Field(default=None, description="Service Directory service name")
    generic_web_service: Optional[GenericWebService] = Field(default=None)


class Webhook(DialogflowModel):
    """A webhook called from fulfillments."""

    name: Optional[str] = Field(default=None, description="Webhook resource name")
    display_name: Optional[str] = Field(default=None)
    generic_web_service: Optional[GenericWebService] = Field(default=None)
    service_directory: Optional[ServiceDirectoryConfig] = Field(default=None)
    timeout: Optional[Duration] = Field(
        default=None,
        description="Webhook call timeout, 5 seconds when unset"
    )
    disabled: Optional[bool] = Field(default=None)


class ListWebhooksResponse(DialogflowModel):
    webhooks: Optional[List[Webhook]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)
