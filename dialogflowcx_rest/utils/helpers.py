"""
Helper utilities for the Dialogflow CX REST client.
"""

import sys
from typing import List, Optional, Union
from loguru import logger

from ..config import settings


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Replace loguru's default handler with a single stderr sink.

    Args:
        level: Minimum level (defaults to settings.log_level)
        format: Optional loguru format string
    """
    logger.remove()
    kwargs = {"level": (level or settings.log_level).upper()}
    if format:
        kwargs["format"] = format
    logger.add(sys.stderr, **kwargs)


def format_field_mask(mask: Union[str, List[str]]) -> str:
    """Render update mask paths in the comma-separated FieldMask form."""
    if isinstance(mask, str):
        return mask
    return ",".join(mask)


def agent_path(project_id: str, location: str, agent_id: str) -> str:
    """Build an agent resource name."""
    return f"projects/{project_id}/locations/{location}/agents/{agent_id}"


def flow_path(project_id: str, location: str, agent_id: str, flow_id: str) -> str:
    """Build a flow resource name."""
    return f"{agent_path(project_id, location, agent_id)}/flows/{flow_id}"


def page_path(
    project_id: str, location: str, agent_id: str, flow_id: str, page_id: str
) -> str:
    """Build a page resource name."""
    return f"{flow_path(project_id, location, agent_id, flow_id)}/pages/{page_id}"


def session_path(project_id: str, location: str, agent_id: str, session_id: str) -> str:
    """Build a session resource name for the draft environment."""
    return f"{agent_path(project_id, location, agent_id)}/sessions/{session_id}"


def environment_session_path(
    project_id: str,
    location: str,
    agent_id: str,
    environment_id: str,
    session_id: str,
) -> str:
    """Build a session resource name inside a named environment."""
    return (
        f"{agent_path(project_id, location, agent_id)}/"
        f"environments/{environment_id}/sessions/{session_id}"
    )
