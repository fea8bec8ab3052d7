# src/podruntime/reporters/plugin_reporter.py
"""
A reporter that speaks the Nagios/Sensu plugin protocol: one status line on
standard output and the status as the process exit code.
"""

import logging

import typer

from ..models.check import CheckResult
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


class PluginReporter(BaseReporter):
    """
    Emits '<check name> <STATUS>: <message>' and exits with the status code.
    """

    def __init__(self, check_name: str = "PodRuntime"):
        self.check_name = check_name

    def format(self, result: CheckResult) -> str:
        return f"{self.check_name} {result.status.name}: {result.message}"

    def report(self, result: CheckResult):
        """
        Prints the status line and terminates the command.

        Raises:
            typer.Exit: Always, carrying the status as exit code.
        """
        logger.debug(f"Reporting {result.status.name} with exit code {int(result.status)}")
        typer.echo(self.format(result))
        raise typer.Exit(code=int(result.status))
