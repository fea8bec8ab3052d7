# src/podruntime/core/aggregator.py
"""
Folds per-pod evaluations into the single status a check run reports.
"""

from typing import Iterable, List

from ..models.check import CheckResult, CheckStatus, PodClassification, PodEvaluation
from ..models.pod import FetchError, FetchErrorKind

OK_MESSAGE = "All pods within threshold"
CONNECTION_FAILED_MESSAGE = "Unable to connect to Kubernetes API server"


def breach_notice(evaluation: PodEvaluation) -> str:
    return f"{evaluation.pod_name} exceeds threshold {evaluation.threshold}"


def aggregate_evaluations(evaluations: Iterable[PodEvaluation]) -> CheckResult:
    """Aggregate evaluations into one CheckResult.

    Critical dominates warning, which dominates ok. The message lists only
    the pods at the reported severity, in encounter order.
    """
    evaluations = list(evaluations)
    critical: List[PodEvaluation] = [e for e in evaluations if e.classification == PodClassification.CRITICAL]
    warning: List[PodEvaluation] = [e for e in evaluations if e.classification == PodClassification.WARNING]

    if critical:
        status, breaches = CheckStatus.CRITICAL, critical
    elif warning:
        status, breaches = CheckStatus.WARNING, warning
    else:
        return CheckResult(status=CheckStatus.OK, message=OK_MESSAGE, evaluations=evaluations)

    message = " ".join(breach_notice(e) for e in breaches)
    return CheckResult(status=status, message=message, evaluations=evaluations)


def result_from_fetch_error(error: FetchError) -> CheckResult:
    """A failed connection is a warning; an error answer from the API server is unknown."""
    if error.kind == FetchErrorKind.CONNECTION:
        return CheckResult(status=CheckStatus.WARNING, message=CONNECTION_FAILED_MESSAGE)
    return CheckResult(status=CheckStatus.UNKNOWN, message=f"Check failed to run: {error.message}")
