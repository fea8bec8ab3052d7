# src/podruntime/cli/__init__.py
"""
kube-pod-runtime CLI Package

This package exposes the top-level Typer `app` so tests and the console
entrypoint can import `podruntime.cli.app`.
"""

from .main import app

__all__ = ["app"]
