# src/podruntime/cli/main.py
"""
This module is the main entry point for the check-kube-pods-runtime CLI.

It parses the command line into a CheckConfig, runs the check once and
reports the result with the plugin exit code convention.
"""

import asyncio
import logging
import traceback
from typing import Optional

import click
import typer
from typer.core import TyperCommand
from typing_extensions import Annotated

from ..core.check import run_check
from ..core.config import config
from ..models.check import ALL_PODS, CheckConfig, CheckResult, CheckStatus
from ..reporters.console_reporter import ConsoleReporter
from ..reporters.plugin_reporter import PluginReporter

logger = logging.getLogger(__name__)


def _usage_error_types():
    """
    UsageError classes a Typer command may raise: click's own, and the copy
    bundled with Typer releases that vendor click.
    """
    types = {click.UsageError}
    types.update(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")
    return tuple(types)


USAGE_ERRORS = _usage_error_types()


def setup_logging():
    """Configures the root logger once the configuration is known to be valid."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


class CheckCommand(TyperCommand):
    """Custom Click Command that reports usage errors with the UNKNOWN exit code."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except USAGE_ERRORS as e:
            # Exit code 2 would read as CRITICAL to a monitoring agent.
            e.exit_code = int(CheckStatus.UNKNOWN)
            raise


app = typer.Typer(
    name="check-kube-pods-runtime",
    help="Check whether Kubernetes pods have been running longer than expected.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of kube-pod-runtime.
    """
    if value:
        from .. import __version__

        typer.echo(f"kube-pod-runtime version: {__version__}")
        raise typer.Exit()


@app.command(cls=CheckCommand)
def check(
    api_server: Annotated[
        Optional[str],
        typer.Option("--api-server", "-s", help="URL to the API server. Defaults to $KUBERNETES_MASTER."),
    ] = None,
    api_version: Annotated[
        Optional[str],
        typer.Option("--api-version", "-v", help="API version. Defaults to $KUBE_API_VERSION or 'v1'."),
    ] = None,
    pods: Annotated[
        str,
        typer.Option("--pods", "-p", help="Comma-separated list of pods to check, or 'all'."),
    ] = ALL_PODS,
    label_selector: Annotated[
        Optional[str],
        typer.Option("--filter", "-f", help="Label selector for the pods to check. Overrides --pods."),
    ] = None,
    warn: Annotated[
        Optional[int],
        typer.Option("--warn", "-w", min=0, help="Runtime in seconds above which a pod is a warning."),
    ] = None,
    critical: Annotated[
        Optional[int],
        typer.Option("--critical", "-c", min=0, help="Runtime in seconds above which a pod is critical."),
    ] = None,
    details: Annotated[
        bool,
        typer.Option("--details", help="Print a table of every evaluated pod on stderr."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
):
    """
    Check if Running pods exceed the configured runtime thresholds.
    """
    try:
        config.validate_instance()
    except ValueError as e:
        PluginReporter().report(CheckResult(status=CheckStatus.UNKNOWN, message=f"Invalid configuration: {e}"))
    setup_logging()

    check_config = CheckConfig(
        api_server=api_server or config.KUBERNETES_MASTER,
        api_version=api_version or config.KUBE_API_VERSION,
        pods=pods,
        label_selector=label_selector,
        warn_threshold=warn,
        critical_threshold=critical,
    )
    logger.debug(f"Running check with {check_config!r}")

    try:
        result = asyncio.run(run_check(check_config))
    except Exception as e:
        logger.error(f"Pod runtime check failed: {e}")
        logger.debug(traceback.format_exc())
        result = CheckResult(status=CheckStatus.UNKNOWN, message=f"Check failed to run: {e}")

    if details:
        ConsoleReporter().report(result)

    PluginReporter().report(result)


if __name__ == "__main__":
    app()
