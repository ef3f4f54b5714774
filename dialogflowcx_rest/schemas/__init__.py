"""Typed records mirrored from the Dialogflow CX v3 API."""

from .base import DialogflowModel
from .common import Operation, Status, Location
from .agents import Agent
from .flows import Flow, Page, TransitionRouteGroup
from .intents import Intent
from .entity_types import EntityType
from .webhooks import Webhook
from .environments import Environment, Deployment, ContinuousTestResult
from .experiments import Experiment
from .versions import Version
from .changelogs import Changelog
from .sessions import DetectIntentRequest, DetectIntentResponse, SessionEntityType
from .security_settings import SecuritySettings

__all__ = [
    "DialogflowModel",
    "Operation",
    "Status",
    "Location",
    "Agent",
    "Flow",
    "Page",
    "TransitionRouteGroup",
    "Intent",
    "EntityType",
    "Webhook",
    "Environment",
    "Deployment",
    "ContinuousTestResult",
    "Experiment",
    "Version",
    "Changelog",
    "DetectIntentRequest",
    "DetectIntentResponse",
    "SessionEntityType",
    "SecuritySettings",
]
