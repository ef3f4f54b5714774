"""
Credential handles passed to the transport.
"""

import asyncio
from typing import Dict, List, Optional, Protocol

import google.auth
from google.auth.credentials import Credentials
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from loguru import logger

from .config import settings

DEFAULT_SCOPES = [
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/dialogflow",
]


class CredentialsClient(Protocol):
    """Anything able to produce authorization headers for a request."""

    async def get_request_headers(self, url: str) -> Dict[str, str]:
        ...


class GoogleAuth:
    """Adapter exposing google-auth credentials as a credential handle."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials
        self._refresh_lock = asyncio.Lock()

    @classmethod
    def from_service_account_file(
        cls, path: str, scopes: Optional[List[str]] = None
    ) -> "GoogleAuth":
        """Load a service account key file."""
        credentials = service_account.Credentials.from_service_account_file(
            path, scopes=scopes or DEFAULT_SCOPES
        )
        return cls(credentials)

    @classmethod
    def default(cls, scopes: Optional[List[str]] = None) -> "GoogleAuth":
        """Use application default credentials."""
        credentials, project_id = google.auth.default(scopes=scopes or DEFAULT_SCOPES)
        logger.debug(f"Using application default credentials (project: {project_id})")
        return cls(credentials)

    @classmethod
    def from_settings(cls) -> "GoogleAuth":
        """Use settings.gcp_credentials_path when set, default credentials otherwise."""
        if settings.gcp_credentials_path:
            return cls.from_service_account_file(settings.gcp_credentials_path)
        return cls.default()

    async def get_request_headers(self, url: str) -> Dict[str, str]:
        """
        Get the Authorization header, refreshing the token when needed.

        Args:
            url: Request URL (unused by OAuth2 credentials)

        Returns:
            Headers to merge into the request
        """
        if not self.credentials.valid:
            async with self._refresh_lock:
                # Another request may have refreshed while this one waited
                if not self.credentials.valid:
                    # google-auth refreshes synchronously; run in executor to avoid blocking
                    loop = asyncio.get_event_loop()
                    await loop.run_in_executor(None, self.credentials.refresh, Request())
                    logger.debug("Refreshed Google credentials")

        headers: Dict[str, str] = {}
        self.credentials.apply(headers)
        return headers
