# src/podruntime/collectors/pod_collector.py
"""
Collects the name, phase and start time of pods from the Kubernetes API.
"""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional

import aiohttp
from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import ClusterConnectionError, PodListError
from ..core.k8s_client import build_core_v1_api
from ..models.pod import FetchError, FetchErrorKind, PodFetchResult, PodRecord
from ..utils.date_utils import ensure_utc
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


def to_pod_record(pod) -> Optional[PodRecord]:
    """Projects a V1Pod onto a PodRecord. None stays None."""
    if pod is None:
        return None

    metadata = pod.metadata
    status = pod.status
    start_time = getattr(status, "start_time", None) if status else None
    if isinstance(start_time, datetime):
        start_time = ensure_utc(start_time)
    elif start_time is not None:
        logger.warning(f"Pod {metadata.name} has an unusable start time: {start_time!r}")
        start_time = None

    return PodRecord(
        name=metadata.name,
        namespace=metadata.namespace,
        phase=status.phase if status else None,
        start_time=start_time,
    )


class PodCollector(BaseCollector):
    """
    Connects to the K8s API server and lists pods, optionally filtered
    server-side by a label selector.
    """

    def __init__(self, api_server: Optional[str] = None, api_version: str = "v1"):
        self.api_server = api_server
        self.api_version = api_version
        self._api = None

    async def _ensure_client(self):
        """Lazily initialize the Kubernetes client."""
        if self._api:
            return self._api

        self._api = await build_core_v1_api(self.api_server, self.api_version)
        logger.debug("PodCollector initialized Kubernetes client.")
        return self._api

    async def _list_pods(self, label_selector: Optional[str]) -> List[Optional[PodRecord]]:
        api = await self._ensure_client()
        try:
            if label_selector is not None:
                pod_list = await api.list_pod_for_all_namespaces(label_selector=label_selector, watch=False)
            else:
                pod_list = await api.list_pod_for_all_namespaces(watch=False)
        except ApiException as e:
            raise PodListError(f"{e.status} {e.reason}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise ClusterConnectionError(str(e)) from e

        return [to_pod_record(pod) for pod in pod_list.items or []]

    async def collect(self, label_selector: Optional[str] = None) -> PodFetchResult:
        """
        Fetches pods and wraps them, or the reason they could not be fetched,
        in a PodFetchResult.
        """
        try:
            pods = await self._list_pods(label_selector)
        except ClusterConnectionError as e:
            logger.error(f"Unable to connect to Kubernetes API server: {e}")
            return PodFetchResult(error=FetchError(kind=FetchErrorKind.CONNECTION, message=str(e)))
        except PodListError as e:
            logger.error(f"Kubernetes API server rejected the pod listing: {e}")
            return PodFetchResult(error=FetchError(kind=FetchErrorKind.API, message=str(e)))
        finally:
            await self.close()

        logger.debug(f"Collected {len(pods)} pods.")
        return PodFetchResult(pods=pods)

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("PodCollector Kubernetes client closed.")
            self._api = None
