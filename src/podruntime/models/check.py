# src/podruntime/models/check.py
"""
This module defines the Pydantic models for the check's configuration and
its results. They are shared by the evaluator, the reporters and the CLI.
"""

from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_PODS = "all"


class CheckStatus(IntEnum):
    """Nagios/Sensu plugin states. The value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class PodClassification(str, Enum):
    WITHIN_THRESHOLD = "within_threshold"
    WARNING = "warning"
    CRITICAL = "critical"


class CheckConfig(BaseModel):
    """
    Immutable settings for a single check run, built once from the command
    line and passed explicitly to the collector, the evaluator and the reporter.
    """

    model_config = ConfigDict(frozen=True)

    api_server: Optional[str] = Field(None, description="URL of the Kubernetes API server.")
    api_version: str = Field("v1", description="Kubernetes API version.")
    pods: Optional[str] = Field(ALL_PODS, description="Comma-separated pod names, or 'all'.")
    label_selector: Optional[str] = Field(
        None, description="Server-side label selector. When set, even empty, the pod name list is ignored."
    )
    warn_threshold: Optional[int] = Field(None, ge=0, description="Warning threshold in seconds.")
    critical_threshold: Optional[int] = Field(None, ge=0, description="Critical threshold in seconds.")


class PodEvaluation(BaseModel):
    """The classification of one Running pod against the configured thresholds."""

    pod_name: str
    namespace: Optional[str] = None
    classification: PodClassification
    elapsed_seconds: int
    threshold: Optional[int] = Field(None, description="The breached threshold, if any.")


class CheckResult(BaseModel):
    status: CheckStatus
    message: str
    evaluations: List[PodEvaluation] = Field(default_factory=list)
