"""
Experiment records.
"""

from typing import Optional, List, Dict, Any
from pydantic import Field

from .base import DialogflowModel
from ..utils.transforms import Duration, Timestamp


class VersionVariant(DialogflowModel):
    version: Optional[str] = Field(default=None)
    traffic_allocation: Optional[float] = Field(default=None, description="Percentage of traffic, 0-1")
    is_control_group: Optional[bool] = Field(default=None)


class VersionVariants(DialogflowModel):
    variants: Optional[List[VersionVariant]] = Field(default=None)


class VariantsHistory(DialogflowModel):
    version_variants: Optional[VersionVariants] = Field(default=None)
    update_time: Optional[Timestamp] = Field(default=None)


class ExperimentDefinition(DialogflowModel):
    condition: Optional[str] = Field(default=None)
    version_variants: Optional[VersionVariants] = Field(default=None)


class RolloutStep(DialogflowModel):
    display_name: Optional[str] = Field(default=None)
    traffic_percent: Optional[int] = Field(default=None)
    min_duration: Optional[Duration] = Field(default=None)


class RolloutConfig(DialogflowModel):
    rollout_steps: Optional[List[RolloutStep]] = Field(default=None)
    rollout_condition: Optional[str] = Field(default=None)
    failure_condition: Optional[str] = Field(default=None)


class RolloutState(DialogflowModel):
    step: Optional[str] = Field(default=None)
    step_index: Optional[int] = Field(default=None)
    start_time: Optional[Timestamp] = Field(default=None)


class ExperimentResult(DialogflowModel):
    version_metrics: Optional[List[Dict[str, Any]]] = Field(default=None)
    last_update_time: Optional[Timestamp] = Field(default=None)


class Experiment(DialogflowModel):
    """Traffic split between flow versions within an environment."""

    name: Optional[str] = Field(default=None, description="Experiment resource name")
    display_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None, description="DRAFT, RUNNING, DONE or ROLLOUT_FAILED")
    definition: Optional[ExperimentDefinition] = Field(default=None)
    rollout_config: Optional[RolloutConfig] = Field(default=None)
    rollout_state: Optional[RolloutState] = Field(default=None)
    rollout_failure_reason: Optional[str] = Field(default=None)
    result: Optional[ExperimentResult] = Field(default=None)

    # Lifecycle
    create_time: Optional[Timestamp] = Field(default=None)
    start_time: Optional[Timestamp] = Field(default=None)
    end_time: Optional[Timestamp] = Field(default=None)
    last_update_time: Optional[Timestamp] = Field(default=None)
    experiment_length: Optional[Duration] = Field(
        default=None,
        description="Maximum run time before the experiment ends"
    )
    variants_history: Optional[List[VariantsHistory]] = Field(default=None)


class ListExperimentsResponse(DialogflowModel):
    experiments: Optional[List[Experiment]] = Field(default=None)
    next_page_token: Optional[str] = Field(default=None)


class StartExperimentRequest(DialogflowModel):
    pass


class StopExperimentRequest(DialogflowModel):
    pass
