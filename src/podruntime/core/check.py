# src/podruntime/core/check.py
"""
Runs one pod runtime check: fetch, evaluate, aggregate.
"""

import logging
from datetime import datetime
from typing import Optional

from ..collectors.base_collector import BaseCollector
from ..collectors.pod_collector import PodCollector
from ..models.check import CheckConfig, CheckResult
from .aggregator import aggregate_evaluations, result_from_fetch_error
from .evaluator import evaluate_pods

logger = logging.getLogger(__name__)


async def run_check(
    config: CheckConfig,
    collector: Optional[BaseCollector] = None,
    now: Optional[datetime] = None,
) -> CheckResult:
    """
    Performs a single linear pass of the check.

    When the pods cannot be fetched, the fetch error decides the result and
    no pod is evaluated.
    """
    collector = collector or PodCollector(api_server=config.api_server, api_version=config.api_version)

    fetched = await collector.collect(label_selector=config.label_selector)
    if not fetched.ok:
        return result_from_fetch_error(fetched.error)

    evaluations = evaluate_pods(fetched.pods, config, now=now)
    logger.info(f"Evaluated {len(evaluations)} of {len(fetched.pods)} fetched pods.")
    return aggregate_evaluations(evaluations)
