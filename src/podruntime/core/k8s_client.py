import logging
from typing import Optional
from urllib.parse import urlparse

from kubernetes_asyncio import client, config

from .exceptions import ClusterConnectionError

logger = logging.getLogger(__name__)

# Pods are served by the core API group, which only has a v1.
SUPPORTED_API_VERSIONS = ("v1",)


async def ensure_k8s_config() -> bool:
    """
    Loads the default Kubernetes configuration, trying in-cluster first and
    then the local kubeconfig.

    Returns:
        bool: True if a configuration was loaded, False otherwise.
    """
    try:
        logger.debug("Attempting to load in-cluster Kubernetes config...")
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes configuration.")
        return True
    except config.ConfigException:
        logger.debug("In-cluster config not found.")
    except Exception as e:
        logger.warning(f"Unexpected error loading in-cluster config: {e}")

    try:
        logger.debug("Attempting to load local kubeconfig...")
        await config.load_kube_config()
        logger.info("Loaded Kubernetes configuration from kubeconfig file.")
        return True
    except config.ConfigException:
        logger.warning("Could not find kubeconfig file.")
    except Exception as e:
        logger.warning(f"Unexpected error loading kubeconfig: {e}")

    logger.warning("Failed to load any Kubernetes configuration.")
    return False


def _validate_server_url(api_server: str) -> str:
    parsed = urlparse(api_server)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ClusterConnectionError(f"Invalid Kubernetes API server URL: '{api_server}'")
    return api_server.rstrip("/")


async def build_core_v1_api(api_server: Optional[str] = None, api_version: str = "v1") -> client.CoreV1Api:
    """
    Returns a CoreV1Api bound to the given API server, or to the in-cluster /
    kubeconfig configuration when no server is given.

    Raises:
        ClusterConnectionError: If the version is unsupported, the URL is
            malformed, or no configuration could be loaded.
    """
    if api_version not in SUPPORTED_API_VERSIONS:
        raise ClusterConnectionError(f"Unsupported Kubernetes API version: '{api_version}'")

    if api_server:
        configuration = client.Configuration()
        configuration.host = _validate_server_url(api_server)
        logger.debug(f"Using Kubernetes API server {configuration.host}")
        return client.CoreV1Api(client.ApiClient(configuration=configuration))

    if await ensure_k8s_config():
        return client.CoreV1Api()

    raise ClusterConnectionError("No Kubernetes configuration could be loaded")
