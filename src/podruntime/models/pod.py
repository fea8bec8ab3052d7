# src/podruntime/models/pod.py
"""
Pydantic models describing the pods fetched from the Kubernetes API and the
outcome of the fetch itself.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PodPhase(str, Enum):
    """The coarse lifecycle state reported in a pod's status."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class PodRecord(BaseModel):
    """
    Read-only projection of a Kubernetes pod, holding only what the runtime
    check needs. Fetched fresh on every run.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the Kubernetes pod.")
    namespace: Optional[str] = Field(None, description="The namespace the pod belongs to.")
    phase: Optional[str] = Field(None, description="The pod phase, e.g. 'Running'.")
    start_time: Optional[datetime] = Field(
        None, description="When the kubelet acknowledged the pod. Unset until the pod is scheduled."
    )

    @property
    def is_running(self) -> bool:
        return self.phase == PodPhase.RUNNING.value


class FetchErrorKind(str, Enum):
    CONNECTION = "connection"
    API = "api"


class FetchError(BaseModel):
    """Why the pod listing could not be obtained."""

    kind: FetchErrorKind
    message: str


class PodFetchResult(BaseModel):
    """
    Either the list of pods returned by the API server or the reason no list
    could be obtained. Items may be None when the server returned null entries.
    """

    pods: List[Optional[PodRecord]] = Field(default_factory=list)
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
