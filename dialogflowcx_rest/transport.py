"""
Shared HTTP transport for the Dialogflow CX REST API.
Performs one authenticated JSON request per call and surfaces failures as exceptions.
"""

import json
from typing import Any, Dict, List, Optional
import aiohttp
from loguru import logger

from .auth import CredentialsClient
from .config import settings


class GoogleApiError(Exception):
    """Non-2xx response from a Google API."""

    def __init__(
        self,
        code: int,
        message: str,
        status: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
        body: Optional[str] = None,
    ):
        prefix = f"{code} {status}" if status else str(code)
        super().__init__(f"{prefix}: {message}")
        self.code = code
        self.message = message
        self.status = status
        self.details = details or []
        self.body = body

    @classmethod
    def from_response(cls, http_status: int, reason: Optional[str], text: str) -> "GoogleApiError":
        """
        Build an error from a failed response.

        Google APIs wrap failures as ``{"error": {"code", "message", "status",
        "details"}}``. Bodies that are not in that shape are kept as the message.
        """
        try:
            payload = json.loads(text) if text else {}
        except ValueError:
            payload = {}

        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            return cls(
                code=http_status,
                message=error.get("message") or reason or "",
                status=error.get("status"),
                details=error.get("details"),
                body=text,
            )
        return cls(code=http_status, message=text or reason or "", body=text)


async def request(
    url: str,
    *,
    client: Optional[CredentialsClient] = None,
    method: str = "GET",
    body: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Issue a single request and return the parsed JSON body.

    Args:
        url: Fully formed request URL, query string included
        client: Credential handle supplying the Authorization header
        method: HTTP method
        body: JSON-encoded request body

    Returns:
        Parsed JSON object, ``{}`` for an empty response

    Raises:
        GoogleApiError: On a non-2xx status
        aiohttp.ClientError: On network failure
    """
    headers = {"Accept": "application/json"}
    if body is not None:
        headers["Content-Type"] = "application/json"
    if client is not None:
        headers.update(await client.get_request_headers(url))

    logger.debug(f"{method} {url}")

    async with aiohttp.ClientSession() as session:
        async with session.request(
            method,
            url,
            headers=headers,
            data=body,
            timeout=aiohttp.ClientTimeout(total=settings.api_timeout),
        ) as response:
            text = await response.text()

            if response.status >= 400:
                logger.error(
                    f"Dialogflow API error: {response.status}, "
                    f"message='{response.reason}', "
                    f"url='{response.url}', "
                    f"response='{text}'"
                )
                raise GoogleApiError.from_response(response.status, response.reason, text)

            if not text.strip():
                return {}
            return json.loads(text)
