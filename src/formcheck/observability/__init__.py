"""
Logging and metrics for formcheck.
"""

from .logger import configure_logging, get_logger, log_operation, setup_logger
from .metrics import generate_metrics, get_sample_value, start_metrics_server

__all__ = [
    "configure_logging",
    "get_logger",
    "setup_logger",
    "log_operation",
    "generate_metrics",
    "get_sample_value",
    "start_metrics_server",
]
