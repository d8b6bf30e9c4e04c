"""Observability layer - logging and metrics."""

from src.observability.logging import setup_logging
from src.observability.metrics import ParserMetrics, get_metrics, write_metrics

__all__ = ["setup_logging", "ParserMetrics", "get_metrics", "write_metrics"]
