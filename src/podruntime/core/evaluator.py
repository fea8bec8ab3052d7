# src/podruntime/core/evaluator.py
"""
Selects the pods a check run cares about and classifies how long each
Running pod has been alive against the configured thresholds.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from ..models.check import ALL_PODS, CheckConfig, PodClassification, PodEvaluation
from ..models.pod import PodRecord
from ..utils.date_utils import seconds_between

logger = logging.getLogger(__name__)


def parse_pod_list(value: Optional[str]) -> List[str]:
    """
    Splits a comma-separated pod list. An empty string yields [""], which
    matches no real pod name.
    """
    if value and "," in value:
        return value.split(",")
    if value is not None:
        return [value]
    return [""]


def build_inclusion_set(config: CheckConfig) -> Set[str]:
    """
    Pod names this run evaluates. A label selector, even an empty one, takes
    over the filtering, so the name list is ignored in that case.
    """
    if config.label_selector is not None:
        return {ALL_PODS}
    return set(parse_pod_list(config.pods))


def select_pods(pods: Iterable[Optional[PodRecord]], inclusion_set: Set[str]) -> Iterator[PodRecord]:
    """Yields the Running pods named in the inclusion set, in encounter order."""
    match_all = ALL_PODS in inclusion_set
    for pod in pods:
        if pod is None:
            continue
        if not match_all and pod.name not in inclusion_set:
            continue
        if not pod.is_running:
            continue
        yield pod


def classify(elapsed: int, config: CheckConfig) -> Tuple[PodClassification, Optional[int]]:
    """
    Classifies an elapsed runtime and returns the breached threshold, if any.
    Critical is checked first; a threshold is only breached when elapsed is
    strictly greater than it.
    """
    crit = config.critical_threshold
    warn = config.warn_threshold
    if crit is not None and elapsed > crit:
        return PodClassification.CRITICAL, crit
    if warn is not None and elapsed > warn:
        return PodClassification.WARNING, warn
    return PodClassification.WITHIN_THRESHOLD, None


def evaluate_pods(
    pods: Iterable[Optional[PodRecord]],
    config: CheckConfig,
    now: Optional[datetime] = None,
) -> List[PodEvaluation]:
    """
    Evaluates every selected Running pod against the thresholds in config.

    Args:
        pods: Pods as returned by the collector; None entries are ignored.
        config: The run's CheckConfig.
        now: The reference instant. Defaults to the current UTC time.

    Returns:
        One PodEvaluation per evaluated pod, in encounter order. Running pods
        without a start time are skipped and logged.
    """
    now = now or datetime.now(timezone.utc)
    inclusion_set = build_inclusion_set(config)
    evaluations: List[PodEvaluation] = []

    for pod in select_pods(pods, inclusion_set):
        if pod.start_time is None:
            logger.warning(f"Pod {pod.name} is Running but has no start time; skipping.")
            continue

        elapsed = seconds_between(pod.start_time, now)
        classification, threshold = classify(elapsed, config)
        evaluations.append(
            PodEvaluation(
                pod_name=pod.name,
                namespace=pod.namespace,
                classification=classification,
                elapsed_seconds=elapsed,
                threshold=threshold,
            )
        )
        logger.debug(f"Pod {pod.name} running for {elapsed}s: {classification.value}")

    return evaluations
