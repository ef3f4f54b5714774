"""
Unit tests for credential handles.
"""

import asyncio
import time
from unittest.mock import Mock, patch

import pytest

from dialogflowcx_rest.auth import DEFAULT_SCOPES, GoogleAuth
from dialogflowcx_rest.config import settings


def make_credentials(valid: bool) -> Mock:
    """Create google-auth credentials stand-in."""
    credentials = Mock()
    credentials.valid = valid

    def apply(headers):
        headers["authorization"] = "Bearer access-token"

    credentials.apply.side_effect = apply
    return credentials


class TestGoogleAuth:
    """Unit tests for GoogleAuth."""

    @pytest.mark.asyncio
    async def test_valid_credentials_not_refreshed(self):
        """Test that a valid token is applied as-is."""
        credentials = make_credentials(valid=True)
        auth = GoogleAuth(credentials)

        headers = await auth.get_request_headers("https://dialogflow.googleapis.com/v3/x")

        assert headers == {"authorization": "Bearer access-token"}
        credentials.refresh.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_credentials_refreshed(self):
        """Test that expired credentials are refreshed first."""
        credentials = make_credentials(valid=False)
        auth = GoogleAuth(credentials)

        with patch("dialogflowcx_rest.auth.Request") as mock_request_cls:
            headers = await auth.get_request_headers("https://dialogflow.googleapis.com/v3/x")

        credentials.refresh.assert_called_once_with(mock_request_cls.return_value)
        assert headers["authorization"] == "Bearer access-token"

    @pytest.mark.asyncio
    async def test_concurrent_requests_refresh_once(self):
        """Test that requests waiting on an expired token share one refresh."""
        credentials = make_credentials(valid=False)

        def refresh(request):
            time.sleep(0.05)
            credentials.valid = True

        credentials.refresh.side_effect = refresh
        auth = GoogleAuth(credentials)

        with patch("dialogflowcx_rest.auth.Request"):
            results = await asyncio.gather(
                *[auth.get_request_headers("https://dialogflow.googleapis.com/v3/x") for _ in range(5)]
            )

        credentials.refresh.assert_called_once()
        assert all(headers == {"authorization": "Bearer access-token"} for headers in results)

    def test_from_service_account_file(self):
        """Test loading a key file with the default scopes."""
        with patch(
            "dialogflowcx_rest.auth.service_account.Credentials.from_service_account_file"
        ) as mock_load:
            auth = GoogleAuth.from_service_account_file("/secrets/key.json")

        mock_load.assert_called_once_with("/secrets/key.json", scopes=DEFAULT_SCOPES)
        assert auth.credentials is mock_load.return_value

    def test_default_credentials(self):
        """Test application default credentials."""
        credentials = make_credentials(valid=True)
        with patch("google.auth.default", return_value=(credentials, "my-project")) as mock_default:
            auth = GoogleAuth.default(scopes=["https://www.googleapis.com/auth/dialogflow"])

        mock_default.assert_called_once_with(scopes=["https://www.googleapis.com/auth/dialogflow"])
        assert auth.credentials is credentials

    def test_from_settings_uses_key_file(self):
        """Test that a configured key path takes precedence."""
        with patch.object(settings, "gcp_credentials_path", "/secrets/key.json"), patch.object(
            GoogleAuth, "from_service_account_file"
        ) as mock_file, patch.object(GoogleAuth, "default") as mock_default:
            GoogleAuth.from_settings()

        mock_file.assert_called_once_with("/secrets/key.json")
        mock_default.assert_not_called()

    def test_from_settings_falls_back_to_default(self):
        """Test fallback to application default credentials."""
        with patch.object(settings, "gcp_credentials_path", None), patch.object(
            GoogleAuth, "default"
        ) as mock_default:
            GoogleAuth.from_settings()

        mock_default.assert_called_once_with()
