"""
Environment, deployment and continuous test records.
"""

from typing import Optional, List
from pydantic import Field

from .base import DialogflowModel
from .webhooks import Webhook
from ..utils.transforms import Timestamp


class VersionConfig(DialogflowModel):
    version: Optional[str] = Field(default=None, description="Flow version resource name")


class TestCasesConfig(DialogflowModel):
    test_cases: Optional[List[str]] = Field(default=None)
    enable_continuous_run: Optional[bool] = Field(default=None)
    enable_predeployment_run: Optional[bool] = Field(default=None)


class WebhookConfig(DialogflowModel):
    """Webhook overrides applied inside one environment."""

    webhook_overrides: Optional[List[Webhook]] = Field(
        default=None,
        description="Webhooks overriding the agent's webhooks of the same name"
    )


class Environment(DialogflowModel):
    """A named set of flow versions serving traffic."""

    name: Optional[str] = Field(default=None, description="Environment resource name")
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    version_configs: Optional[List[VersionConfig]] = Field(default=None)
    update_time: Optional[Timestamp] = Field(default=None, description="Last update time, output only")
    test_cases_config: Optional[TestCasesConfig] = Field(default=None)
    webhook_config: Optional[WebhookConfig] = Field(default=None)


class ListEnvironmentsResponse(DialogflowModel):
    environments: Optional[List[Environment]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class LookupEnvironmentHistoryResponse(DialogflowModel):
    environments: Optional[List[Environment]] = Field(default=None, description="Previous snapshots, newest first")
    next_page_token: Optional[str] = Field(default=None)


class ContinuousTestResult(DialogflowModel):
    name: Optional[str] = Field(default=None)
    result: Optional[str] = Field(default=None, description="PASSED or FAILED")
    test_case_results: Optional[List[str]] = Field(default=None)
    run_time: Optional[Timestamp] = Field(default=None)


class ListContinuousTestResultsResponse(DialogflowModel):
    continuous_test_results: Optional[List[ContinuousTestResult]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class RunContinuousTestRequest(DialogflowModel):
    pass


class RunContinuousTestResponse(DialogflowModel):
    continuous_test_result: Optional[ContinuousTestResult] = Field(default=None)


class DeploymentResult(DialogflowModel):
    deployment_test_results: Optional[List[str]] = Field(default=None)
    experiment: Optional[str] = Field(default=None)


class Deployment(DialogflowModel):
    """A deployment of a flow version to an environment."""

    name: Optional[str] = Field(default=None)
    flow_version: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None, description="RUNNING, SUCCEEDED or FAILED")
    result: Optional[DeploymentResult] = Field(default=None)
    start_time: Optional[Timestamp] = Field(default=None)
    end_time: Optional[Timestamp] = Field(default=None)


class ListDeploymentsResponse(DialogflowModel):
    deployments: Optional[List[Deployment]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class DeployFlowRequest(DialogflowModel):
    flow_version: Optional[str] = Field(default=None, description="Flow version to deploy")


class DeployFlowResponse(DialogflowModel):
    environment: Optional[Environment] = Field(default=None)
    deployment: Optional[str] = Field(default=None)
