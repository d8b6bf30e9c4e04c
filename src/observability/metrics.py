"""
Prometheus metrics for the event line parser.

Defines and exposes metrics for:
- Files scanned (tagged or not)
- Lines scanned
- Events built
- Parse failures by error kind

Metrics live in the default Prometheus registry unless another is given.
Short-lived CLI runs export them with write_metrics() in the text
exposition format (e.g. for the node_exporter textfile collector).
"""

import logging

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    write_to_textfile,
)

logger = logging.getLogger(__name__)


class ParserMetrics:
    """
    Prometheus metrics collector for event parsing.

    Usage:
        metrics = get_metrics()
        metrics.record_event(success=True)
        metrics.record_failure("empty_title")
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        """Initialize Prometheus metrics."""

        self.files_scanned = Counter(
            "md_events_files_scanned_total",
            "Total number of files scanned",
            ["tagged"],  # tagged: true, false
            registry=registry,
        )

        self.lines_scanned = Counter(
            "md_events_lines_scanned_total",
            "Total number of lines inspected",
            registry=registry,
        )

        self.events_built = Counter(
            "md_events_events_built_total",
            "Total number of event lines processed",
            ["status"],  # status: success, error
            registry=registry,
        )

        self.parse_failures = Counter(
            "md_events_parse_failures_total",
            "Total event line parse failures",
            ["kind"],
            registry=registry,
        )

        logger.info("Prometheus metrics initialized")

    # Convenience methods

    def record_file(self, tagged: bool) -> None:
        """Record a scanned file and whether it carried the event tag."""
        self.files_scanned.labels(tagged=str(tagged).lower()).inc()

    def record_lines(self, count: int = 1) -> None:
        """Record inspected lines."""
        self.lines_scanned.inc(count)

    def record_event(self, success: bool) -> None:
        """Record the outcome of building one event line."""
        self.events_built.labels(status="success" if success else "error").inc()

    def record_failure(self, kind: str) -> None:
        """
        Record a parse failure.

        Args:
            kind: Error kind (see EventParseError.kind)
        """
        self.events_built.labels(status="error").inc()
        self.parse_failures.labels(kind=kind).inc()


# Global metrics instance
_metrics: ParserMetrics | None = None


def get_metrics() -> ParserMetrics:
    """Get global metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = ParserMetrics()
    return _metrics


def write_metrics(path: str, registry: CollectorRegistry = REGISTRY) -> None:
    """
    Write the registry's metrics to a file in Prometheus text format.

    Args:
        path: Destination file (replaced atomically)
        registry: Registry to export
    """
    write_to_textfile(path, registry)
    logger.debug(f"Metrics written to {path}")
