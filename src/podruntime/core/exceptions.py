class PodRuntimeError(Exception):
    """Base exception for kube-pod-runtime."""

    pass


class ClusterConnectionError(PodRuntimeError):
    """Raised when no usable Kubernetes API client can be built or reached."""

    pass


class PodListError(PodRuntimeError):
    """Raised when the API server answers the pod listing with an error."""

    pass
