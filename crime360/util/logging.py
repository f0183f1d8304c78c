"""
Structured operation logging for the Crime 360 engine.
Every engine entry point reports what it did, how long it took and how much it matched.
"""

import logging
from typing import Any, Dict, List

class StructuredLogger:
    """Structured logger for store loading, searches and aggregations."""

    def __init__(self, name: str = "crime360"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_store_load(self, dataset: str, incident_count: int, person_count: int, source: str = "builtin"):
        """Log a seed dataset being loaded into a record store."""
        details = {
            "dataset": dataset,
            "incidents": incident_count,
            "persons": person_count,
            "source": source
        }
        self.log_operation("store.load", "success", details)

    def log_search(self, operation: str, took_ms: float, total: int, returned: int, details: Dict[str, Any] = None):
        """Log a search execution with its timing."""
        log_details = {
            "took_ms": took_ms,
            "total": total,
            "returned": returned
        }
        if details:
            log_details.update(details)

        self.log_operation(f"search.{operation}", "success", log_details)

    def log_aggregation(self, kind: str, record_count: int, details: Dict[str, Any] = None):
        """Log an aggregation over a set of incident records."""
        log_details = {"records": record_count}
        if details:
            log_details.update(details)

        self.log_operation(f"aggregation.{kind}", "success", log_details)

    def log_failure(self, operation: str, error: Exception, details: Dict[str, Any] = None):
        """Log a failed operation with the error type and message."""
        log_details = {
            "error_type": type(error).__name__,
            "error": str(error)[:200]
        }
        if details:
            log_details.update(details)

        message = f"Operation: {operation}, Status: failed, Details: {log_details}"
        self.logger.error(message)

# Global logger instance
logger = StructuredLogger()


def summarize_query(text: str = None, filters: Dict[str, Any] = None, sensitive_fields: List[str] = None) -> Dict[str, Any]:
    """Build a loggable summary of a query without leaking free text."""
    if sensitive_fields is None:
        sensitive_fields = ['text', 'name', 'phone', 'address']

    summary: Dict[str, Any] = {"term_present": bool(text and text.strip())}
    if filters:
        sanitized = {}
        for k, v in filters.items():
            if k in sensitive_fields:
                sanitized[k] = "[REDACTED]"
            elif v in (None, (), []):
                continue
            else:
                sanitized[k] = v
        summary["filters"] = sanitized
    return summary
