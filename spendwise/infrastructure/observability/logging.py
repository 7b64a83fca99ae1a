"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from spendwise.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_summary(
    request_id: str,
    workspace_id: str,
    status: str,
    weekly_spent: float,
    warning_icons: int,
    duration_ms: float,
) -> None:
    """Log structured summary outcome"""
    logging.info(
        "Summary computed",
        extra={
            "request_id": request_id,
            "workspace_id": workspace_id,
            "step": "summary_complete",
            "weekly_status": status,
            "weekly_spent": weekly_spent,
            "warning_icons": warning_icons,
            "duration_ms": duration_ms,
        },
    )


def log_purchase_event(request_id: str, workspace_id: str, purchase_id: str, action: str) -> None:
    """Log purchase lifecycle changes (created, updated, deleted, ...)"""
    logging.info(
        f"Purchase {action}",
        extra={
            "request_id": request_id,
            "workspace_id": workspace_id,
            "purchase_id": purchase_id,
            "step": f"purchase_{action}",
        },
    )
