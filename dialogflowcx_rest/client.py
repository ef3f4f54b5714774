"""
Dialogflow CX v3 REST client.

One coroutine per REST method. Each call builds ``{base_url}v3/{resource}``,
appends the query parameters that were given, serializes the request record,
performs a single request through the shared transport and deserializes the
response record.
"""

import json
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlencode

from pydantic import BaseModel

from .auth import CredentialsClient
from .config import settings
from .transport import request
from .utils.helpers import format_field_mask
from .utils.transforms import deserialize, serialize
from .schemas.agents import (
    Agent,
    AgentValidationResult,
    ExportAgentRequest,
    ListAgentsResponse,
    RestoreAgentRequest,
    ValidateAgentRequest,
)
from .schemas.changelogs import Changelog, ListChangelogsResponse
from .schemas.common import (
    ListLocationsResponse,
    ListOperationsResponse,
    Location,
    Operation,
)
from .schemas.entity_types import (
    EntityType,
    ExportEntityTypesRequest,
    ImportEntityTypesRequest,
    ListEntityTypesResponse,
)
from .schemas.environments import (
    Deployment,
    DeployFlowRequest,
    Environment,
    ListContinuousTestResultsResponse,
    ListDeploymentsResponse,
    ListEnvironmentsResponse,
    LookupEnvironmentHistoryResponse,
    RunContinuousTestRequest,
)
from .schemas.experiments import (
    Experiment,
    ListExperimentsResponse,
    StartExperimentRequest,
    StopExperimentRequest,
)
from .schemas.flows import (
    ExportFlowRequest,
    Flow,
    FlowValidationResult,
    ImportFlowRequest,
    ListFlowsResponse,
    ListPagesResponse,
    ListTransitionRouteGroupsResponse,
    Page,
    TrainFlowRequest,
    TransitionRouteGroup,
    ValidateFlowRequest,
)
from .schemas.intents import (
    ExportIntentsRequest,
    ImportIntentsRequest,
    Intent,
    ListIntentsResponse,
)
from .schemas.security_settings import ListSecuritySettingsResponse, SecuritySettings
from .schemas.sessions import (
    DetectIntentRequest,
    DetectIntentResponse,
    FulfillIntentRequest,
    FulfillIntentResponse,
    ListSessionEntityTypesResponse,
    MatchIntentRequest,
    MatchIntentResponse,
    SessionEntityType,
)
from .schemas.testcases import (
    BatchDeleteTestCasesRequest,
    BatchRunTestCasesRequest,
    CalculateCoverageResponse,
    ExportTestCasesRequest,
    ImportTestCasesRequest,
    ListTestCaseResultsResponse,
    ListTestCasesResponse,
    RunTestCaseRequest,
    TestCase,
    TestCaseResult,
)
from .schemas.versions import (
    CompareVersionsRequest,
    CompareVersionsResponse,
    ListVersionsResponse,
    LoadVersionRequest,
    Version,
)
from .schemas.webhooks import ListWebhooksResponse, Webhook

FieldMask = Union[str, List[str]]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return format_field_mask(list(value))
    return str(value)


class DialogflowCX:
    """
    Client for the Dialogflow CX v3 REST API.

    Resource names are interpolated into the URL as given; the service
    validates them. Errors raised by the transport propagate unchanged.
    Methods returning ``google.protobuf.Empty`` return ``None``.

    Example:
        >>> cx = DialogflowCX(GoogleAuth.from_settings())
        >>> agent = await cx.projects_locations_agents_get(settings.get_dialogflow_agent_path())
    """

    def __init__(
        self,
        client: Optional[CredentialsClient] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize the client.

        Args:
            client: Credential handle forwarded to every request
            base_url: API root; derived from settings.dialogflow_location when omitted
        """
        base_url = base_url or settings.get_dialogflow_base_url()
        if not base_url.endswith("/"):
            base_url += "/"
        self._client = client
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str, **params: Any) -> str:
        url = f"{self._base_url}v3/{path}"
        query = [(key, _query_value(value)) for key, value in params.items() if value is not None]
        if query:
            url += "?" + urlencode(query)
        return url

    async def _send(
        self,
        method: str,
        path: str,
        req: Optional[BaseModel] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        url = self._url(path, **params)
        body = json.dumps(serialize(req)) if req is not None else None
        return await request(url, client=self._client, method=method, body=body)

    # ------------------------------------------------------------------
    # Locations and operations
    # ------------------------------------------------------------------

    async def projects_locations_get(self, name: str) -> Location:
        """Gets information about a location."""
        data = await self._send("GET", name)
        return deserialize(Location, data)

    async def projects_locations_list(
        self,
        name: str,
        *,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListLocationsResponse:
        """Lists information about the supported locations for this service."""
        data = await self._send(
            "GET", f"{name}/locations",
            filter=filter, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListLocationsResponse, data)

    async def projects_locations_operations_cancel(self, name: str) -> None:
        """Starts asynchronous cancellation on a long-running operation."""
        await self._send("POST", f"{name}:cancel")

    async def projects_locations_operations_get(self, name: str) -> Operation:
        """Gets the latest state of a long-running operation."""
        data = await self._send("GET", name)
        return deserialize(Operation, data)

    async def projects_locations_operations_list(
        self,
        name: str,
        *,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListOperationsResponse:
        """Lists operations that match the specified filter."""
        data = await self._send(
            "GET", f"{name}/operations",
            filter=filter, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListOperationsResponse, data)

    async def projects_operations_cancel(self, name: str) -> None:
        """Starts asynchronous cancellation on a long-running operation."""
        await self._send("POST", f"{name}:cancel")

    async def projects_operations_get(self, name: str) -> Operation:
        """Gets the latest state of a long-running operation."""
        data = await self._send("GET", name)
        return deserialize(Operation, data)

    async def projects_operations_list(
        self,
        name: str,
        *,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListOperationsResponse:
        """Lists operations that match the specified filter."""
        data = await self._send(
            "GET", f"{name}/operations",
            filter=filter, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListOperationsResponse, data)

    # ------------------------------------------------------------------
    # Agents
    # ------------------------------------------------------------------

    async def projects_locations_agents_create(self, parent: str, req: Agent) -> Agent:
        """
        Creates an agent in the specified location.

        Args:
            parent: Location to create the agent in,
                ``projects/<Project ID>/locations/<Location ID>``
            req: Agent to create

        Returns:
            The created agent
        """
        data = await self._send("POST", f"{parent}/agents", req)
        return deserialize(Agent, data)

    async def projects_locations_agents_delete(self, name: str) -> None:
        """Deletes the specified agent."""
        await self._send("DELETE", name)

    async def projects_locations_agents_export(
        self, name: str, req: Optional[ExportAgentRequest] = None
    ) -> Operation:
        """
        Exports the specified agent to a binary file.

        The returned operation's ``response`` is an ``ExportAgentResponse``
        once it is done.
        """
        data = await self._send("POST", f"{name}:export", req or ExportAgentRequest())
        return deserialize(Operation, data)

    async def projects_locations_agents_get(self, name: str) -> Agent:
        """Retrieves the specified agent."""
        data = await self._send("GET", name)
        return deserialize(Agent, data)

    async def projects_locations_agents_get_validation_result(
        self, name: str, *, language_code: Optional[str] = None
    ) -> AgentValidationResult:
        """
        Gets the latest agent validation result.

        Args:
            name: ``projects/<Project ID>/locations/<Location ID>/agents/<Agent ID>/validationResult``
            language_code: Language of the validation result
        """
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(AgentValidationResult, data)

    async def projects_locations_agents_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListAgentsResponse:
        """Returns the list of all agents in the specified location."""
        data = await self._send(
            "GET", f"{parent}/agents", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListAgentsResponse, data)

    async def projects_locations_agents_patch(
        self, name: str, req: Agent, *, update_mask: Optional[FieldMask] = None
    ) -> Agent:
        """
        Updates the specified agent.

        Args:
            name: Agent resource name
            req: Agent fields to write
            update_mask: Fields to update; all fields when omitted
        """
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(Agent, data)

    async def projects_locations_agents_restore(
        self, name: str, req: RestoreAgentRequest
    ) -> Operation:
        """Restores the specified agent from a binary file, replacing all resources."""
        data = await self._send("POST", f"{name}:restore", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_validate(
        self, name: str, req: Optional[ValidateAgentRequest] = None
    ) -> AgentValidationResult:
        """Validates the specified agent and creates or updates its validation results."""
        data = await self._send("POST", f"{name}:validate", req or ValidateAgentRequest())
        return deserialize(AgentValidationResult, data)

    # Changelogs

    async def projects_locations_agents_changelogs_get(self, name: str) -> Changelog:
        """Retrieves the specified changelog."""
        data = await self._send("GET", name)
        return deserialize(Changelog, data)

    async def projects_locations_agents_changelogs_list(
        self,
        parent: str,
        *,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListChangelogsResponse:
        """Returns the list of changelogs, e.g. ``filter='action = "Update"'``."""
        data = await self._send(
            "GET", f"{parent}/changelogs",
            filter=filter, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListChangelogsResponse, data)

    # Entity types

    async def projects_locations_agents_entity_types_create(
        self, parent: str, req: EntityType, *, language_code: Optional[str] = None
    ) -> EntityType:
        """Creates an entity type in the specified agent."""
        data = await self._send("POST", f"{parent}/entityTypes", req, languageCode=language_code)
        return deserialize(EntityType, data)

    async def projects_locations_agents_entity_types_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """
        Deletes the specified entity type.

        With ``force`` the entity type is deleted together with any
        references to it; otherwise a referenced entity type is not deleted.
        """
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_entity_types_export(
        self, parent: str, req: ExportEntityTypesRequest
    ) -> Operation:
        """Exports the selected entity types."""
        data = await self._send("POST", f"{parent}/entityTypes:export", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_entity_types_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> EntityType:
        """Retrieves the specified entity type."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(EntityType, data)

    async def projects_locations_agents_entity_types_import_(
        self, parent: str, req: ImportEntityTypesRequest
    ) -> Operation:
        """Imports the specified entity types into the agent."""
        data = await self._send("POST", f"{parent}/entityTypes:import", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_entity_types_list(
        self,
        parent: str,
        *,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListEntityTypesResponse:
        """Returns the list of all entity types in the specified agent."""
        data = await self._send(
            "GET", f"{parent}/entityTypes",
            languageCode=language_code, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListEntityTypesResponse, data)

    async def projects_locations_agents_entity_types_patch(
        self,
        name: str,
        req: EntityType,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> EntityType:
        """Updates the specified entity type."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(EntityType, data)

    # ------------------------------------------------------------------
    # Environments
    # ------------------------------------------------------------------

    async def projects_locations_agents_environments_create(
        self, parent: str, req: Environment
    ) -> Operation:
        """Creates an environment; the operation resolves to the Environment."""
        data = await self._send("POST", f"{parent}/environments", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_environments_delete(self, name: str) -> None:
        """Deletes the specified environment."""
        await self._send("DELETE", name)

    async def projects_locations_agents_environments_deploy_flow(
        self, environment: str, req: DeployFlowRequest
    ) -> Operation:
        """Deploys a flow to the specified environment."""
        data = await self._send("POST", f"{environment}:deployFlow", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_environments_get(self, name: str) -> Environment:
        """Retrieves the specified environment."""
        data = await self._send("GET", name)
        return deserialize(Environment, data)

    async def projects_locations_agents_environments_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListEnvironmentsResponse:
        """Returns the list of all environments in the specified agent."""
        data = await self._send(
            "GET", f"{parent}/environments", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListEnvironmentsResponse, data)

    async def projects_locations_agents_environments_lookup_environment_history(
        self,
        name: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> LookupEnvironmentHistoryResponse:
        """Looks up the history of the specified environment."""
        data = await self._send(
            "GET", f"{name}:lookupEnvironmentHistory",
            pageSize=page_size, pageToken=page_token,
        )
        return deserialize(LookupEnvironmentHistoryResponse, data)

    async def projects_locations_agents_environments_patch(
        self, name: str, req: Environment, *, update_mask: Optional[FieldMask] = None
    ) -> Operation:
        """Updates the specified environment."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(Operation, data)

    async def projects_locations_agents_environments_run_continuous_test(
        self, environment: str, req: Optional[RunContinuousTestRequest] = None
    ) -> Operation:
        """Kicks off a continuous test under the specified environment."""
        data = await self._send(
            "POST", f"{environment}:runContinuousTest", req or RunContinuousTestRequest()
        )
        return deserialize(Operation, data)

    async def projects_locations_agents_environments_continuous_test_results_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListContinuousTestResultsResponse:
        """Fetches a list of continuous test results for a given environment."""
        data = await self._send(
            "GET", f"{parent}/continuousTestResults",
            pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListContinuousTestResultsResponse, data)

    async def projects_locations_agents_environments_deployments_get(
        self, name: str
    ) -> Deployment:
        """Retrieves the specified deployment."""
        data = await self._send("GET", name)
        return deserialize(Deployment, data)

    async def projects_locations_agents_environments_deployments_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListDeploymentsResponse:
        """Returns the list of all deployments in the specified environment."""
        data = await self._send(
            "GET", f"{parent}/deployments", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListDeploymentsResponse, data)

    # Experiments

    async def projects_locations_agents_environments_experiments_create(
        self, parent: str, req: Experiment
    ) -> Experiment:
        """Creates an experiment in the specified environment."""
        data = await self._send("POST", f"{parent}/experiments", req)
        return deserialize(Experiment, data)

    async def projects_locations_agents_environments_experiments_delete(
        self, name: str
    ) -> None:
        """Deletes the specified experiment."""
        await self._send("DELETE", name)

    async def projects_locations_agents_environments_experiments_get(
        self, name: str
    ) -> Experiment:
        """Retrieves the specified experiment."""
        data = await self._send("GET", name)
        return deserialize(Experiment, data)

    async def projects_locations_agents_environments_experiments_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListExperimentsResponse:
        """Returns the list of all experiments in the specified environment."""
        data = await self._send(
            "GET", f"{parent}/experiments", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListExperimentsResponse, data)

    async def projects_locations_agents_environments_experiments_patch(
        self, name: str, req: Experiment, *, update_mask: Optional[FieldMask] = None
    ) -> Experiment:
        """Updates the specified experiment."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(Experiment, data)

    async def projects_locations_agents_environments_experiments_start(
        self, name: str, req: Optional[StartExperimentRequest] = None
    ) -> Experiment:
        """Starts the experiment, moving it from DRAFT to RUNNING."""
        data = await self._send("POST", f"{name}:start", req or StartExperimentRequest())
        return deserialize(Experiment, data)

    async def projects_locations_agents_environments_experiments_stop(
        self, name: str, req: Optional[StopExperimentRequest] = None
    ) -> Experiment:
        """Stops the experiment, moving it from RUNNING to DONE."""
        data = await self._send("POST", f"{name}:stop", req or StopExperimentRequest())
        return deserialize(Experiment, data)

    # Environment sessions

    async def projects_locations_agents_environments_sessions_detect_intent(
        self, session: str, req: DetectIntentRequest
    ) -> DetectIntentResponse:
        """Processes a natural language query in a session of the given environment."""
        data = await self._send("POST", f"{session}:detectIntent", req)
        return deserialize(DetectIntentResponse, data)

    async def projects_locations_agents_environments_sessions_fulfill_intent(
        self, session: str, req: FulfillIntentRequest
    ) -> FulfillIntentResponse:
        """Fulfills a matched intent returned by MatchIntent."""
        data = await self._send("POST", f"{session}:fulfillIntent", req)
        return deserialize(FulfillIntentResponse, data)

    async def projects_locations_agents_environments_sessions_match_intent(
        self, session: str, req: MatchIntentRequest
    ) -> MatchIntentResponse:
        """Returns preliminary intent match results without changing session status."""
        data = await self._send("POST", f"{session}:matchIntent", req)
        return deserialize(MatchIntentResponse, data)

    async def projects_locations_agents_environments_sessions_entity_types_create(
        self, parent: str, req: SessionEntityType
    ) -> SessionEntityType:
        """Creates a session entity type."""
        data = await self._send("POST", f"{parent}/entityTypes", req)
        return deserialize(SessionEntityType, data)

    async def projects_locations_agents_environments_sessions_entity_types_delete(
        self, name: str
    ) -> None:
        """Deletes the specified session entity type."""
        await self._send("DELETE", name)

    async def projects_locations_agents_environments_sessions_entity_types_get(
        self, name: str
    ) -> SessionEntityType:
        """Retrieves the specified session entity type."""
        data = await self._send("GET", name)
        return deserialize(SessionEntityType, data)

    async def projects_locations_agents_environments_sessions_entity_types_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListSessionEntityTypesResponse:
        """Returns the list of all session entity types in the specified session."""
        data = await self._send(
            "GET", f"{parent}/entityTypes", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListSessionEntityTypesResponse, data)

    async def projects_locations_agents_environments_sessions_entity_types_patch(
        self, name: str, req: SessionEntityType, *, update_mask: Optional[FieldMask] = None
    ) -> SessionEntityType:
        """Updates the specified session entity type."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(SessionEntityType, data)

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    async def projects_locations_agents_flows_create(
        self, parent: str, req: Flow, *, language_code: Optional[str] = None
    ) -> Flow:
        """
        Creates a flow in the specified agent.

        Args:
            parent: Agent resource name
            req: Flow to create
            language_code: Language of the translatable fields in ``req``
        """
        data = await self._send("POST", f"{parent}/flows", req, languageCode=language_code)
        return deserialize(Flow, data)

    async def projects_locations_agents_flows_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """Deletes a specified flow, with its references when ``force`` is set."""
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_flows_export(
        self, name: str, req: Optional[ExportFlowRequest] = None
    ) -> Operation:
        """Exports the specified flow to a binary file."""
        data = await self._send("POST", f"{name}:export", req or ExportFlowRequest())
        return deserialize(Operation, data)

    async def projects_locations_agents_flows_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> Flow:
        """Retrieves the specified flow."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(Flow, data)

    async def projects_locations_agents_flows_get_validation_result(
        self, name: str, *, language_code: Optional[str] = None
    ) -> FlowValidationResult:
        """Gets the latest flow validation result (``.../flows/<Flow ID>/validationResult``)."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(FlowValidationResult, data)

    async def projects_locations_agents_flows_import_(
        self, parent: str, req: ImportFlowRequest
    ) -> Operation:
        """Imports the specified flow into the agent."""
        data = await self._send("POST", f"{parent}/flows:import", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_flows_list(
        self,
        parent: str,
        *,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListFlowsResponse:
        """Returns the list of all flows in the specified agent."""
        data = await self._send(
            "GET", f"{parent}/flows",
            languageCode=language_code, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListFlowsResponse, data)

    async def projects_locations_agents_flows_patch(
        self,
        name: str,
        req: Flow,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> Flow:
        """Updates the specified flow."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(Flow, data)

    async def projects_locations_agents_flows_train(
        self, name: str, req: Optional[TrainFlowRequest] = None
    ) -> Operation:
        """Trains the specified flow."""
        data = await self._send("POST", f"{name}:train", req or TrainFlowRequest())
        return deserialize(Operation, data)

    async def projects_locations_agents_flows_validate(
        self, name: str, req: Optional[ValidateFlowRequest] = None
    ) -> FlowValidationResult:
        """Validates the specified flow and creates or updates its validation results."""
        data = await self._send("POST", f"{name}:validate", req or ValidateFlowRequest())
        return deserialize(FlowValidationResult, data)

    # Pages

    async def projects_locations_agents_flows_pages_create(
        self, parent: str, req: Page, *, language_code: Optional[str] = None
    ) -> Page:
        """Creates a page in the specified flow."""
        data = await self._send("POST", f"{parent}/pages", req, languageCode=language_code)
        return deserialize(Page, data)

    async def projects_locations_agents_flows_pages_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """Deletes the specified page."""
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_flows_pages_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> Page:
        """Retrieves the specified page."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(Page, data)

    async def projects_locations_agents_flows_pages_list(
        self,
        parent: str,
        *,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListPagesResponse:
        """Returns the list of all pages in the specified flow."""
        data = await self._send(
            "GET", f"{parent}/pages",
            languageCode=language_code, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListPagesResponse, data)

    async def projects_locations_agents_flows_pages_patch(
        self,
        name: str,
        req: Page,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> Page:
        """Updates the specified page."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(Page, data)

    # Flow-level transition route groups

    async def projects_locations_agents_flows_transition_route_groups_create(
        self, parent: str, req: TransitionRouteGroup, *, language_code: Optional[str] = None
    ) -> TransitionRouteGroup:
        """Creates a transition route group in the specified flow."""
        data = await self._send(
            "POST", f"{parent}/transitionRouteGroups", req, languageCode=language_code
        )
        return deserialize(TransitionRouteGroup, data)

    async def projects_locations_agents_flows_transition_route_groups_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """Deletes the specified transition route group."""
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_flows_transition_route_groups_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> TransitionRouteGroup:
        """Retrieves the specified transition route group."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(TransitionRouteGroup, data)

    async def projects_locations_agents_flows_transition_route_groups_list(
        self,
        parent: str,
        *,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListTransitionRouteGroupsResponse:
        """Returns the list of all transition route groups in the specified flow."""
        data = await self._send(
            "GET", f"{parent}/transitionRouteGroups",
            languageCode=language_code, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListTransitionRouteGroupsResponse, data)

    async def projects_locations_agents_flows_transition_route_groups_patch(
        self,
        name: str,
        req: TransitionRouteGroup,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> TransitionRouteGroup:
        """Updates the specified transition route group."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(TransitionRouteGroup, data)

    # Versions

    async def projects_locations_agents_flows_versions_compare_versions(
        self, base_version: str, req: CompareVersionsRequest
    ) -> CompareVersionsResponse:
        """Compares the specified base version with a target version."""
        data = await self._send("POST", f"{base_version}:compareVersions", req)
        return deserialize(CompareVersionsResponse, data)

    async def projects_locations_agents_flows_versions_create(
        self, parent: str, req: Version
    ) -> Operation:
        """Creates a version in the specified flow; the operation resolves to the Version."""
        data = await self._send("POST", f"{parent}/versions", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_flows_versions_delete(self, name: str) -> None:
        """Deletes the specified version."""
        await self._send("DELETE", name)

    async def projects_locations_agents_flows_versions_get(self, name: str) -> Version:
        """Retrieves the specified version."""
        data = await self._send("GET", name)
        return deserialize(Version, data)

    async def projects_locations_agents_flows_versions_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListVersionsResponse:
        """Returns the list of all versions in the specified flow."""
        data = await self._send(
            "GET", f"{parent}/versions", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListVersionsResponse, data)

    async def projects_locations_agents_flows_versions_load(
        self, name: str, req: Optional[LoadVersionRequest] = None
    ) -> Operation:
        """Loads resources in the specified version to the draft flow."""
        data = await self._send("POST", f"{name}:load", req or LoadVersionRequest())
        return deserialize(Operation, data)

    async def projects_locations_agents_flows_versions_patch(
        self, name: str, req: Version, *, update_mask: Optional[FieldMask] = None
    ) -> Version:
        """Updates the specified version."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(Version, data)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    async def projects_locations_agents_intents_create(
        self, parent: str, req: Intent, *, language_code: Optional[str] = None
    ) -> Intent:
        """Creates an intent in the specified agent."""
        data = await self._send("POST", f"{parent}/intents", req, languageCode=language_code)
        return deserialize(Intent, data)

    async def projects_locations_agents_intents_delete(self, name: str) -> None:
        """Deletes the specified intent."""
        await self._send("DELETE", name)

    async def projects_locations_agents_intents_export(
        self, parent: str, req: ExportIntentsRequest
    ) -> Operation:
        """Exports the selected intents."""
        data = await self._send("POST", f"{parent}/intents:export", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_intents_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> Intent:
        """Retrieves the specified intent."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(Intent, data)

    async def projects_locations_agents_intents_import_(
        self, parent: str, req: ImportIntentsRequest
    ) -> Operation:
        """Imports the specified intents into the agent."""
        data = await self._send("POST", f"{parent}/intents:import", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_intents_list(
        self,
        parent: str,
        *,
        intent_view: Optional[str] = None,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListIntentsResponse:
        """
        Returns the list of all intents in the specified agent.

        Args:
            parent: Agent resource name
            intent_view: ``INTENT_VIEW_PARTIAL`` omits training phrases,
                ``INTENT_VIEW_FULL`` includes them
            language_code: Language to list intents for
            page_size: Maximum number of items to return (at most 1000)
            page_token: ``next_page_token`` of a previous list call
        """
        data = await self._send(
            "GET", f"{parent}/intents",
            intentView=intent_view, languageCode=language_code,
            pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListIntentsResponse, data)

    async def projects_locations_agents_intents_patch(
        self,
        name: str,
        req: Intent,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> Intent:
        """Updates the specified intent."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(Intent, data)

    # ------------------------------------------------------------------
    # Sessions (draft environment)
    # ------------------------------------------------------------------

    async def projects_locations_agents_sessions_detect_intent(
        self, session: str, req: DetectIntentRequest
    ) -> DetectIntentResponse:
        """
        Processes a natural language query and returns structured, actionable data.

        Args:
            session: ``projects/<Project ID>/locations/<Location ID>/agents/<Agent ID>/sessions/<Session ID>``
            req: Query input, parameters and output audio settings

        Returns:
            Detected intent, response messages and optional synthesized audio
        """
        data = await self._send("POST", f"{session}:detectIntent", req)
        return deserialize(DetectIntentResponse, data)

    async def projects_locations_agents_sessions_fulfill_intent(
        self, session: str, req: FulfillIntentRequest
    ) -> FulfillIntentResponse:
        """Fulfills a matched intent returned by MatchIntent."""
        data = await self._send("POST", f"{session}:fulfillIntent", req)
        return deserialize(FulfillIntentResponse, data)

    async def projects_locations_agents_sessions_match_intent(
        self, session: str, req: MatchIntentRequest
    ) -> MatchIntentResponse:
        """Returns preliminary intent match results without changing session status."""
        data = await self._send("POST", f"{session}:matchIntent", req)
        return deserialize(MatchIntentResponse, data)

    async def projects_locations_agents_sessions_entity_types_create(
        self, parent: str, req: SessionEntityType
    ) -> SessionEntityType:
        """Creates a session entity type."""
        data = await self._send("POST", f"{parent}/entityTypes", req)
        return deserialize(SessionEntityType, data)

    async def projects_locations_agents_sessions_entity_types_delete(self, name: str) -> None:
        """Deletes the specified session entity type."""
        await self._send("DELETE", name)

    async def projects_locations_agents_sessions_entity_types_get(
        self, name: str
    ) -> SessionEntityType:
        """Retrieves the specified session entity type."""
        data = await self._send("GET", name)
        return deserialize(SessionEntityType, data)

    async def projects_locations_agents_sessions_entity_types_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListSessionEntityTypesResponse:
        """Returns the list of all session entity types in the specified session."""
        data = await self._send(
            "GET", f"{parent}/entityTypes", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListSessionEntityTypesResponse, data)

    async def projects_locations_agents_sessions_entity_types_patch(
        self, name: str, req: SessionEntityType, *, update_mask: Optional[FieldMask] = None
    ) -> SessionEntityType:
        """Updates the specified session entity type."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(SessionEntityType, data)

    # ------------------------------------------------------------------
    # Test cases
    # ------------------------------------------------------------------

    async def projects_locations_agents_test_cases_batch_delete(
        self, parent: str, req: BatchDeleteTestCasesRequest
    ) -> None:
        """Batch deletes test cases."""
        await self._send("POST", f"{parent}/testCases:batchDelete", req)

    async def projects_locations_agents_test_cases_batch_run(
        self, parent: str, req: BatchRunTestCasesRequest
    ) -> Operation:
        """Kicks off a batch run of test cases."""
        data = await self._send("POST", f"{parent}/testCases:batchRun", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_test_cases_calculate_coverage(
        self, agent: str, *, type: Optional[str] = None
    ) -> CalculateCoverageResponse:
        """
        Calculates the test coverage for an agent.

        Args:
            agent: Agent resource name
            type: ``INTENT``, ``PAGE_TRANSITION`` or ``TRANSITION_ROUTE_GROUP``
        """
        data = await self._send("GET", f"{agent}/testCases:calculateCoverage", type=type)
        return deserialize(CalculateCoverageResponse, data)

    async def projects_locations_agents_test_cases_create(
        self, parent: str, req: TestCase
    ) -> TestCase:
        """Creates a test case for the given agent."""
        data = await self._send("POST", f"{parent}/testCases", req)
        return deserialize(TestCase, data)

    async def projects_locations_agents_test_cases_export(
        self, parent: str, req: ExportTestCasesRequest
    ) -> Operation:
        """Exports the test cases under the agent to a Cloud Storage bucket or a local file."""
        data = await self._send("POST", f"{parent}/testCases:export", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_test_cases_get(self, name: str) -> TestCase:
        """Gets a test case."""
        data = await self._send("GET", name)
        return deserialize(TestCase, data)

    async def projects_locations_agents_test_cases_import_(
        self, parent: str, req: ImportTestCasesRequest
    ) -> Operation:
        """Imports the test cases from a Cloud Storage bucket or a local file."""
        data = await self._send("POST", f"{parent}/testCases:import", req)
        return deserialize(Operation, data)

    async def projects_locations_agents_test_cases_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
        view: Optional[str] = None,
    ) -> ListTestCasesResponse:
        """Fetches a list of test cases for a given agent."""
        data = await self._send(
            "GET", f"{parent}/testCases",
            pageSize=page_size, pageToken=page_token, view=view,
        )
        return deserialize(ListTestCasesResponse, data)

    async def projects_locations_agents_test_cases_patch(
        self, name: str, req: TestCase, *, update_mask: Optional[FieldMask] = None
    ) -> TestCase:
        """Updates the specified test case."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(TestCase, data)

    async def projects_locations_agents_test_cases_run(
        self, name: str, req: Optional[RunTestCaseRequest] = None
    ) -> Operation:
        """Kicks off a test case run."""
        data = await self._send("POST", f"{name}:run", req or RunTestCaseRequest())
        return deserialize(Operation, data)

    async def projects_locations_agents_test_cases_results_get(
        self, name: str
    ) -> TestCaseResult:
        """Gets a test case result."""
        data = await self._send("GET", name)
        return deserialize(TestCaseResult, data)

    async def projects_locations_agents_test_cases_results_list(
        self,
        parent: str,
        *,
        filter: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListTestCaseResultsResponse:
        """Fetches the list of run results for the given test case."""
        data = await self._send(
            "GET", f"{parent}/results",
            filter=filter, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListTestCaseResultsResponse, data)

    # ------------------------------------------------------------------
    # Agent-level transition route groups
    # ------------------------------------------------------------------

    async def projects_locations_agents_transition_route_groups_create(
        self, parent: str, req: TransitionRouteGroup, *, language_code: Optional[str] = None
    ) -> TransitionRouteGroup:
        """Creates a transition route group shared across the agent's flows."""
        data = await self._send(
            "POST", f"{parent}/transitionRouteGroups", req, languageCode=language_code
        )
        return deserialize(TransitionRouteGroup, data)

    async def projects_locations_agents_transition_route_groups_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """Deletes the specified transition route group."""
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_transition_route_groups_get(
        self, name: str, *, language_code: Optional[str] = None
    ) -> TransitionRouteGroup:
        """Retrieves the specified transition route group."""
        data = await self._send("GET", name, languageCode=language_code)
        return deserialize(TransitionRouteGroup, data)

    async def projects_locations_agents_transition_route_groups_list(
        self,
        parent: str,
        *,
        language_code: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListTransitionRouteGroupsResponse:
        """Returns the list of all transition route groups in the specified agent."""
        data = await self._send(
            "GET", f"{parent}/transitionRouteGroups",
            languageCode=language_code, pageSize=page_size, pageToken=page_token,
        )
        return deserialize(ListTransitionRouteGroupsResponse, data)

    async def projects_locations_agents_transition_route_groups_patch(
        self,
        name: str,
        req: TransitionRouteGroup,
        *,
        language_code: Optional[str] = None,
        update_mask: Optional[FieldMask] = None,
    ) -> TransitionRouteGroup:
        """Updates the specified transition route group."""
        data = await self._send(
            "PATCH", name, req, languageCode=language_code, updateMask=update_mask
        )
        return deserialize(TransitionRouteGroup, data)

    # ------------------------------------------------------------------
    # Webhooks
    # ------------------------------------------------------------------

    async def projects_locations_agents_webhooks_create(
        self, parent: str, req: Webhook
    ) -> Webhook:
        """Creates a webhook in the specified agent."""
        data = await self._send("POST", f"{parent}/webhooks", req)
        return deserialize(Webhook, data)

    async def projects_locations_agents_webhooks_delete(
        self, name: str, *, force: Optional[bool] = None
    ) -> None:
        """
        Deletes the specified webhook.

        Without ``force`` a webhook still referenced by a fulfillment is kept
        and the service returns an error.
        """
        await self._send("DELETE", name, force=force)

    async def projects_locations_agents_webhooks_get(self, name: str) -> Webhook:
        """Retrieves the specified webhook."""
        data = await self._send("GET", name)
        return deserialize(Webhook, data)

    async def projects_locations_agents_webhooks_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListWebhooksResponse:
        """Returns the list of all webhooks in the specified agent."""
        data = await self._send(
            "GET", f"{parent}/webhooks", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListWebhooksResponse, data)

    async def projects_locations_agents_webhooks_patch(
        self, name: str, req: Webhook, *, update_mask: Optional[FieldMask] = None
    ) -> Webhook:
        """Updates the specified webhook."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(Webhook, data)

    # ------------------------------------------------------------------
    # Security settings
    # ------------------------------------------------------------------

    async def projects_locations_security_settings_create(
        self, parent: str, req: SecuritySettings
    ) -> SecuritySettings:
        """Creates security settings in the specified location."""
        data = await self._send("POST", f"{parent}/securitySettings", req)
        return deserialize(SecuritySettings, data)

    async def projects_locations_security_settings_delete(self, name: str) -> None:
        """Deletes the specified security settings."""
        await self._send("DELETE", name)

    async def projects_locations_security_settings_get(self, name: str) -> SecuritySettings:
        """Retrieves the specified security settings."""
        data = await self._send("GET", name)
        return deserialize(SecuritySettings, data)

    async def projects_locations_security_settings_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListSecuritySettingsResponse:
        """Returns the list of all security settings in the specified location."""
        data = await self._send(
            "GET", f"{parent}/securitySettings", pageSize=page_size, pageToken=page_token
        )
        return deserialize(ListSecuritySettingsResponse, data)

    async def projects_locations_security_settings_patch(
        self, name: str, req: SecuritySettings, *, update_mask: Optional[FieldMask] = None
    ) -> SecuritySettings:
        """Updates the specified security settings."""
        data = await self._send("PATCH", name, req, updateMask=update_mask)
        return deserialize(SecuritySettings, data)
