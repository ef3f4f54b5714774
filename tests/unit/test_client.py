"""
Unit tests for the Dialogflow CX request dispatcher.
"""

import json
from datetime import timedelta
from unittest.mock import AsyncMock, Mock, patch

import pytest

from dialogflowcx_rest.client import DialogflowCX
from dialogflowcx_rest.transport import GoogleApiError
from dialogflowcx_rest.schemas.agents import Agent, ExportAgentRequest, ListAgentsResponse
from dialogflowcx_rest.schemas.common import InlineSource, Operation
from dialogflowcx_rest.schemas.flows import Flow, FlowValidationResult
from dialogflowcx_rest.schemas.intents import ImportIntentsRequest
from dialogflowcx_rest.schemas.sessions import (
    AudioInput,
    DetectIntentRequest,
    DetectIntentResponse,
    QueryInput,
)
from dialogflowcx_rest.schemas.webhooks import Webhook

BASE_URL = "https://dialogflow.googleapis.com/"
AGENT = "projects/my-project/locations/global/agents/my-agent"


class TestDialogflowCX:
    """Unit tests for DialogflowCX."""

    @pytest.fixture
    def auth(self):
        """Credential handle stand-in."""
        return Mock()

    @pytest.fixture
    def cx(self, auth):
        """Create a client for testing."""
        return DialogflowCX(client=auth, base_url=BASE_URL)

    @pytest.fixture
    def mock_request(self):
        """Patch the transport used by the client."""
        with patch("dialogflowcx_rest.client.request", new_callable=AsyncMock) as mock:
            mock.return_value = {}
            yield mock

    def test_base_url_gets_trailing_slash(self):
        """Test base URL normalization."""
        assert DialogflowCX(base_url="http://localhost:8080").base_url == "http://localhost:8080/"

    def test_base_url_from_settings(self):
        """Test the default endpoint."""
        with patch("dialogflowcx_rest.client.settings") as mock_settings:
            mock_settings.get_dialogflow_base_url.return_value = "https://us-central1-dialogflow.googleapis.com/"
            cx = DialogflowCX()

        assert cx.base_url == "https://us-central1-dialogflow.googleapis.com/"

    @pytest.mark.asyncio
    async def test_get_builds_url(self, cx, auth, mock_request):
        """Test a plain GET."""
        mock_request.return_value = {"name": AGENT, "displayName": "Pets"}

        agent = await cx.projects_locations_agents_get(AGENT)

        mock_request.assert_awaited_once_with(
            f"{BASE_URL}v3/{AGENT}", client=auth, method="GET", body=None
        )
        assert isinstance(agent, Agent)
        assert agent.display_name == "Pets"

    @pytest.mark.asyncio
    async def test_list_omits_unset_query_params(self, cx, mock_request):
        """Test that only given options reach the query string."""
        mock_request.return_value = {"agents": [{"displayName": "a"}], "nextPageToken": "t2"}

        result = await cx.projects_locations_agents_list(
            "projects/my-project/locations/global", page_size=10
        )

        url = mock_request.call_args.args[0]
        assert url == f"{BASE_URL}v3/projects/my-project/locations/global/agents?pageSize=10"
        assert isinstance(result, ListAgentsResponse)
        assert result.agents[0].display_name == "a"
        assert result.next_page_token == "t2"

    @pytest.mark.asyncio
    async def test_list_without_options_has_no_query(self, cx, mock_request):
        """Test that no query string is added when no option is given."""
        await cx.projects_locations_agents_flows_list(AGENT)

        assert mock_request.call_args.args[0] == f"{BASE_URL}v3/{AGENT}/flows"

    @pytest.mark.asyncio
    async def test_patch_sends_body_and_update_mask(self, cx, mock_request):
        """Test PATCH with a field mask list."""
        name = f"{AGENT}/webhooks/w1"
        mock_request.return_value = {"name": name, "timeout": "10s"}

        webhook = await cx.projects_locations_agents_webhooks_patch(
            name,
            Webhook(timeout=timedelta(seconds=10)),
            update_mask=["timeout", "disabled"],
        )

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{name}?updateMask=timeout%2Cdisabled"
        assert call.kwargs["method"] == "PATCH"
        assert json.loads(call.kwargs["body"]) == {"timeout": "10s"}
        assert webhook.timeout == timedelta(seconds=10)

    @pytest.mark.asyncio
    async def test_flow_patch_query_params(self, cx, mock_request):
        """Test languageCode and updateMask together."""
        name = f"{AGENT}/flows/f1"

        await cx.projects_locations_agents_flows_patch(
            name, Flow(display_name="Default"), language_code="en", update_mask="displayName"
        )

        assert mock_request.call_args.args[0] == (
            f"{BASE_URL}v3/{name}?languageCode=en&updateMask=displayName"
        )

    @pytest.mark.asyncio
    async def test_boolean_query_param(self, cx, mock_request):
        """Test that booleans are sent in lowercase."""
        name = f"{AGENT}/entityTypes/e1"

        result = await cx.projects_locations_agents_entity_types_delete(name, force=True)

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{name}?force=true"
        assert call.kwargs["method"] == "DELETE"
        assert result is None

    @pytest.mark.asyncio
    async def test_delete_returns_none(self, cx, mock_request):
        """Test methods returning Empty."""
        assert await cx.projects_locations_agents_delete(AGENT) is None

    @pytest.mark.asyncio
    async def test_verb_suffix(self, cx, mock_request):
        """Test custom method URLs."""
        mock_request.return_value = {"name": "projects/my-project/locations/global/operations/op1"}

        operation = await cx.projects_locations_agents_export(
            AGENT, ExportAgentRequest(agent_uri="gs://bucket/agent.blob")
        )

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{AGENT}:export"
        assert call.kwargs["method"] == "POST"
        assert json.loads(call.kwargs["body"]) == {"agentUri": "gs://bucket/agent.blob"}
        assert isinstance(operation, Operation)

    @pytest.mark.asyncio
    async def test_optional_request_defaults_to_empty_body(self, cx, mock_request):
        """Test that an omitted request is sent as an empty object."""
        await cx.projects_locations_agents_flows_train(f"{AGENT}/flows/f1")

        assert mock_request.call_args.kwargs["body"] == "{}"

    @pytest.mark.asyncio
    async def test_collection_verb(self, cx, mock_request):
        """Test verbs on collections and byte fields in request bodies."""
        await cx.projects_locations_agents_intents_import_(
            AGENT, ImportIntentsRequest(intents_content=InlineSource(content=b"\x01\x02\x03"))
        )

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{AGENT}/intents:import"
        assert json.loads(call.kwargs["body"]) == {"intentsContent": {"content": "AQID"}}

    @pytest.mark.asyncio
    async def test_detect_intent_marshalling(self, cx, mock_request):
        """Test audio bytes in the request and the response."""
        session = f"{AGENT}/sessions/s1"
        mock_request.return_value = {
            "responseId": "r1",
            "queryResult": {"text": "hi", "languageCode": "en"},
            "outputAudio": "AAE=",
        }

        response = await cx.projects_locations_agents_sessions_detect_intent(
            session,
            DetectIntentRequest(
                query_input=QueryInput(audio=AudioInput(audio=bytes([1, 2, 3])), language_code="en")
            ),
        )

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{session}:detectIntent"
        assert json.loads(call.kwargs["body"]) == {
            "queryInput": {"audio": {"audio": "AQID"}, "languageCode": "en"}
        }
        assert isinstance(response, DetectIntentResponse)
        assert response.output_audio == b"\x00\x01"
        assert response.query_result.text == "hi"

    @pytest.mark.asyncio
    async def test_validation_result(self, cx, mock_request):
        """Test a GET with languageCode on a sub-resource."""
        name = f"{AGENT}/flows/f1/validationResult"
        mock_request.return_value = {"name": name, "updateTime": "2024-01-01T00:00:00Z"}

        result = await cx.projects_locations_agents_flows_get_validation_result(
            name, language_code="fr"
        )

        assert mock_request.call_args.args[0] == f"{BASE_URL}v3/{name}?languageCode=fr"
        assert isinstance(result, FlowValidationResult)
        assert result.update_time.year == 2024

    @pytest.mark.asyncio
    async def test_calculate_coverage(self, cx, mock_request):
        """Test the coverage query."""
        await cx.projects_locations_agents_test_cases_calculate_coverage(AGENT, type="INTENT")

        assert mock_request.call_args.args[0] == (
            f"{BASE_URL}v3/{AGENT}/testCases:calculateCoverage?type=INTENT"
        )

    @pytest.mark.asyncio
    async def test_operations_cancel(self, cx, mock_request):
        """Test cancel without a body."""
        name = "projects/my-project/locations/global/operations/op1"

        assert await cx.projects_locations_operations_cancel(name) is None

        call = mock_request.call_args
        assert call.args[0] == f"{BASE_URL}v3/{name}:cancel"
        assert call.kwargs["body"] is None

    @pytest.mark.asyncio
    async def test_errors_propagate(self, cx, mock_request):
        """Test that transport errors are not caught."""
        mock_request.side_effect = GoogleApiError(404, "Agent not found", status="NOT_FOUND")

        with pytest.raises(GoogleApiError) as exc_info:
            await cx.projects_locations_agents_get(AGENT)

        assert exc_info.value.code == 404
        assert exc_info.value.status == "NOT_FOUND"
