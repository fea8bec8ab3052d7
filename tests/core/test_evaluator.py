# tests/core/test_evaluator.py
"""
Tests for pod selection and threshold classification.
"""

from datetime import timedelta

import pytest

from podruntime.core.evaluator import (
    build_inclusion_set,
    classify,
    evaluate_pods,
    parse_pod_list,
    select_pods,
)
from podruntime.models.check import CheckConfig, PodClassification
from podruntime.models.pod import PodRecord


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", [""]),
        ("a,b", ["a", "b"]),
        ("all", ["all"]),
        ("single-pod", ["single-pod"]),
        (None, [""]),
    ],
)
def test_parse_pod_list(value, expected):
    assert parse_pod_list(value) == expected


def test_inclusion_set_from_pod_list():
    assert build_inclusion_set(CheckConfig(pods="web-1,web-2")) == {"web-1", "web-2"}


def test_label_selector_ignores_pod_list():
    """With a label selector the server does the filtering, so every returned pod is kept."""
    config = CheckConfig(pods="web-1,web-2", label_selector="app=web")
    assert build_inclusion_set(config) == {"all"}


def test_empty_label_selector_still_ignores_pod_list():
    config = CheckConfig(pods="web-1", label_selector="")
    assert build_inclusion_set(config) == {"all"}


def test_default_inclusion_set_is_all():
    assert build_inclusion_set(CheckConfig()) == {"all"}


def test_empty_pod_list_inclusion_set():
    assert build_inclusion_set(CheckConfig(pods="")) == {""}


def test_select_pods_skips_none_and_non_running(make_pod):
    pods = [
        None,
        make_pod("running"),
        make_pod("pending", phase="Pending", running_for=None),
        make_pod("succeeded", phase="Succeeded"),
        make_pod("failed", phase="Failed"),
        make_pod("unknown", phase="Unknown"),
    ]

    selected = list(select_pods(pods, {"all"}))

    assert [p.name for p in selected] == ["running"]


def test_select_pods_by_name(make_pod):
    pods = [make_pod("web-1"), make_pod("web-2"), make_pod("db-0")]

    selected = list(select_pods(pods, {"web-2", "db-0"}))

    assert [p.name for p in selected] == ["web-2", "db-0"]


def test_empty_name_list_matches_nothing(make_pod):
    assert list(select_pods([make_pod("web-1")], {""})) == []


@pytest.mark.parametrize(
    "elapsed, warn, crit, expected",
    [
        (4000, 1800, 3600, (PodClassification.CRITICAL, 3600)),
        (2000, 1800, 3600, (PodClassification.WARNING, 1800)),
        (1000, 1800, 3600, (PodClassification.WITHIN_THRESHOLD, None)),
        (3600, 1800, 3600, (PodClassification.WARNING, 1800)),  # equal is not a breach
        (1800, 1800, 3600, (PodClassification.WITHIN_THRESHOLD, None)),
        (700, 600, None, (PodClassification.WARNING, 600)),
        (700, None, 600, (PodClassification.CRITICAL, 600)),
        (10**9, None, None, (PodClassification.WITHIN_THRESHOLD, None)),
        (1, None, 0, (PodClassification.CRITICAL, 0)),
    ],
)
def test_classify(elapsed, warn, crit, expected):
    config = CheckConfig(warn_threshold=warn, critical_threshold=crit)
    assert classify(elapsed, config) == expected


def test_evaluate_pods_computes_elapsed(make_pod, now):
    config = CheckConfig(warn_threshold=1800, critical_threshold=3600)
    pods = [make_pod("old", running_for=4000), make_pod("young", running_for=10)]

    evaluations = evaluate_pods(pods, config, now=now)

    assert [e.pod_name for e in evaluations] == ["old", "young"]
    assert evaluations[0].elapsed_seconds == 4000
    assert evaluations[0].classification == PodClassification.CRITICAL
    assert evaluations[0].threshold == 3600
    assert evaluations[0].namespace == "default"
    assert evaluations[1].classification == PodClassification.WITHIN_THRESHOLD
    assert evaluations[1].threshold is None


def test_evaluate_pods_truncates_fractional_seconds(now):
    pod = PodRecord(name="p", phase="Running", start_time=now - timedelta(seconds=600, milliseconds=999))
    config = CheckConfig(warn_threshold=600)

    evaluations = evaluate_pods([pod], config, now=now)

    assert evaluations[0].elapsed_seconds == 600
    assert evaluations[0].classification == PodClassification.WITHIN_THRESHOLD


def test_evaluate_pods_skips_running_pod_without_start_time(make_pod, now, caplog):
    config = CheckConfig(critical_threshold=1)
    pods = [make_pod("no-start", running_for=None), make_pod("started", running_for=100)]

    with caplog.at_level("WARNING", logger="podruntime.core.evaluator"):
        evaluations = evaluate_pods(pods, config, now=now)

    assert [e.pod_name for e in evaluations] == ["started"]
    assert "no-start" in caplog.text


def test_evaluate_pods_without_thresholds(make_pod, now):
    pods = [make_pod("a", running_for=10**7), make_pod("b", running_for=0)]

    evaluations = evaluate_pods(pods, CheckConfig(), now=now)

    assert all(e.classification == PodClassification.WITHIN_THRESHOLD for e in evaluations)


def test_evaluate_pods_never_evaluates_non_running(make_pod, now):
    config = CheckConfig(warn_threshold=0, critical_threshold=0)
    pods = [make_pod("pending", phase="Pending", running_for=9999), make_pod("done", phase="Succeeded")]

    assert evaluate_pods(pods, config, now=now) == []
