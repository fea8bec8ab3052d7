# src/podruntime/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config:
    """
    Handles the check's process-level defaults by loading values from environment variables.

    The values are resolved at access time so tests (and wrappers that tweak
    the environment before invoking the check) always see the current value.
    Per-run settings live in the immutable CheckConfig built by the CLI.
    """

    # --- Logging variables ---
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "WARNING")

    # --- Kubernetes variables ---
    @property
    def KUBERNETES_MASTER(self) -> str | None:
        return os.getenv("KUBERNETES_MASTER") or None

    @property
    def KUBE_API_VERSION(self) -> str:
        return os.getenv("KUBE_API_VERSION", "v1")

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        if not self.KUBE_API_VERSION:
            raise ValueError("KUBE_API_VERSION must not be empty")
        if self.KUBERNETES_MASTER is None:
            logging.getLogger(__name__).debug(
                "KUBERNETES_MASTER is not set; in-cluster config or kubeconfig will be used."
            )


# Instantiate the config to be imported by other modules; the CLI validates it per run.
config = Config()
