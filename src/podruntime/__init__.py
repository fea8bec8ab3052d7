# src/podruntime/__init__.py
"""
kube-pod-runtime: a monitoring check that flags Kubernetes pods running
longer than expected.
"""

__version__ = "0.1.0"
