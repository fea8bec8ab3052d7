# src/podruntime/reporters/console_reporter.py
"""
A reporter that displays every evaluated pod in a formatted table.
"""

import logging

from rich.console import Console
from rich.table import Table

from ..models.check import CheckResult, PodClassification
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

CLASSIFICATION_STYLES = {
    PodClassification.WITHIN_THRESHOLD: "green",
    PodClassification.WARNING: "yellow",
    PodClassification.CRITICAL: "red",
}


class ConsoleReporter(BaseReporter):
    """
    Renders per-pod evaluations using the 'rich' library. Writes to standard
    error so the plugin status line on standard output stays a single line.
    """

    def __init__(self):
        self.console = Console(stderr=True)

    def report(self, result: CheckResult):
        """
        Displays the evaluated pods in a table, longest running first.
        """
        if not result.evaluations:
            self.console.print("No running pods evaluated.", style="yellow")
            return

        table = Table(
            title=f"Pod Runtime: {result.status.name}",
            header_style="bold magenta",
        )
        table.add_column("Pod Name", style="cyan")
        table.add_column("Namespace", style="cyan")
        table.add_column("Status")
        table.add_column("Runtime (s)", justify="right")
        table.add_column("Threshold (s)", style="dim", justify="right")

        sorted_evaluations = sorted(result.evaluations, key=lambda e: e.elapsed_seconds, reverse=True)

        for evaluation in sorted_evaluations:
            style = CLASSIFICATION_STYLES[evaluation.classification]
            table.add_row(
                evaluation.pod_name,
                evaluation.namespace or "",
                f"[{style}]{evaluation.classification.value}[/{style}]",
                f"{evaluation.elapsed_seconds}",
                "" if evaluation.threshold is None else f"{evaluation.threshold}",
            )

        self.console.print(table)
