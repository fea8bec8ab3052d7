# src/podruntime/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.check import CheckResult


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """
    @abstractmethod
    def report(self, result: CheckResult):
        """
        Takes the result of a check run and presents it in a specific format
        (e.g., plugin status line, console table).
        """
        pass
