"""
Test case records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from .common import Status
from .flows import Page
from .intents import Intent
from .sessions import QueryInput
from ..utils.transforms import Base64Bytes, Timestamp


class TestRunDifference(DialogflowModel):
    type: Optional[str] = Field(default=None, description="INTENT, PAGE, PARAMETERS, UTTERANCE or FLOW")
    description: Optional[str] = Field(default=None)


class UserInput(DialogflowModel):
    input: Optional[QueryInput] = Field(default=None)
    injected_parameters: Optional[Dict[str, Any]] = Field(default=None)
    is_webhook_enabled: Optional[bool] = Field(default=None)
    enable_sentiment_analysis: Optional[bool] = Field(default=None)


class VirtualAgentOutput(DialogflowModel):
    session_parameters: Optional[Dict[str, Any]] = Field(default=None)
    differences: Optional[List[TestRunDifference]] = Field(default=None)
    diagnostic_info: Optional[Dict[str, Any]] = Field(default=None)
    triggered_intent: Optional[Intent] = Field(default=None)
    current_page: Optional[Page] = Field(default=None)
    text_responses: Optional[List[Dict[str, Any]]] = Field(default=None)
    status: Optional[Status] = Field(default=None)


class ConversationTurn(DialogflowModel):
    """One exchange between the user and the virtual agent."""

    user_input: Optional[UserInput] = Field(default=None)
    virtual_agent_output: Optional[VirtualAgentOutput] = Field(default=None)


class TestConfig(DialogflowModel):
    tracking_parameters: Optional[List[str]] = Field(default=None)
    flow: Optional[str] = Field(default=None)
    page: Optional[str] = Field(default=None)


class TestCaseResult(DialogflowModel):
    """Result of one test case run."""

    name: Optional[str] = Field(default=None)
    environment: Optional[str] = Field(default=None)
    conversation_turns: Optional[List[ConversationTurn]] = Field(default=None)
    test_result: Optional[str] = Field(default=None, description="PASSED or FAILED")
    test_time: Optional[Timestamp] = Field(default=None)


class TestCase(DialogflowModel):
    """A recorded conversation replayed against the agent."""

    name: Optional[str] = Field(default=None)
    tags: Optional[List[str]] = Field(default=None, description="Tags, each prefixed with #")
    display_name: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    test_config: Optional[TestConfig] = Field(default=None)
    test_case_conversation_turns: Optional[List[ConversationTurn]] = Field(default=None)
    creation_time: Optional[Timestamp] = Field(default=None)
    last_test_result: Optional[TestCaseResult] = Field(default=None)


class ListTestCasesResponse(DialogflowModel):
    test_cases: Optional[List[TestCase]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class ListTestCaseResultsResponse(DialogflowModel):
    test_case_results: Optional[List[TestCaseResult]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class BatchDeleteTestCasesRequest(DialogflowModel):
    names: Optional[List[str]] = Field(default=None)


class BatchRunTestCasesRequest(DialogflowModel):
    environment: Optional[str] = Field(default=None)
    test_cases: Optional[List[str]] = Field(default=None)


class BatchRunTestCasesResponse(DialogflowModel):
    results: Optional[List[TestCaseResult]] = Field(default=None)


class RunTestCaseRequest(DialogflowModel):
    environment: Optional[str] = Field(default=None)


class RunTestCaseResponse(DialogflowModel):
    result: Optional[TestCaseResult] = Field(default=None)


class CalculateCoverageResponse(DialogflowModel):
    agent: Optional[str] = Field(default=None)
    intent_coverage: Optional[Dict[str, Any]] = Field(default=None)
    transition_coverage: Optional[Dict[str, Any]] = Field(default=None)
    route_group_coverage: Optional[Dict[str, Any]] = Field(default=None)


class ExportTestCasesRequest(DialogflowModel):
    gcs_uri: Optional[str] = Field(default=None)
    data_format: Optional[str] = Field(default=None, description="BLOB or JSON")
    filter: Optional[str] = Field(default=None)


class ExportTestCasesResponse(DialogflowModel):
    gcs_uri: Optional[str] = Field(default=None)
    content: Optional[Base64Bytes] = Field(default=None, description="Uncompressed raw byte content for test cases")


class ImportTestCasesRequest(DialogflowModel):
    gcs_uri: Optional[str] = Field(default=None)
    content: Optional[Base64Bytes] = Field(default=None)


class ImportTestCasesResponse(DialogflowModel):
    names: Optional[List[str]] = Field(default=None)
