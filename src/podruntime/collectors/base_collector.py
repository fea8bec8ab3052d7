# src/podruntime/collectors/base_collector.py
"""
This module defines the abstract base class for data collectors, so the
check can be driven by any source that yields pods (the live API server in
production, a stub in tests).
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.pod import PodFetchResult


class BaseCollector(ABC):
    """
    Abstract Base Class for pod collectors.
    """

    @abstractmethod
    async def collect(self, label_selector: Optional[str] = None) -> PodFetchResult:
        """
        Fetches pods from the source, optionally restricted by a label
        selector, and returns them as a PodFetchResult. Failures are reported
        through the result's error rather than raised.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
