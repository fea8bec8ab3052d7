# tests/conftest.py

from datetime import datetime, timedelta, timezone

import pytest

from podruntime.models.pod import PodRecord

NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    check never picks up a real cluster address from the developer's shell.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("KUBERNETES_MASTER", raising=False)
    monkeypatch.delenv("KUBE_API_VERSION", raising=False)


@pytest.fixture
def now():
    """The reference instant used to compute pod runtimes."""
    return NOW


@pytest.fixture
def make_pod():
    """
    Factory fixture building a PodRecord that has been alive for `running_for`
    seconds at NOW. Pass running_for=None for a pod without a start time.
    """

    def _make_pod(name, phase="Running", running_for=60, namespace="default"):
        start_time = None if running_for is None else NOW - timedelta(seconds=running_for)
        return PodRecord(name=name, namespace=namespace, phase=phase, start_time=start_time)

    return _make_pod
