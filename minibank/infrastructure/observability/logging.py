"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "minibank", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "minibank") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transfer(
    request_id: str,
    from_id: Optional[int],
    to_id: Optional[int],
    amount: float,
    outcome: str,
) -> None:
    """Log structured transfer outcome"""
    logging.info(
        "Transfer completed",
        extra={
            "request_id": request_id,
            "step": "transfer_complete",
            "from_id": from_id,
            "to_id": to_id,
            "amount": amount,
            "transfer_outcome": outcome,
        },
    )


def log_account_event(request_id: str, account_id: Optional[int], operation: str, outcome: str) -> None:
    """Log account create/delete events"""
    logging.info(
        "Account %s %s",
        operation,
        outcome,
        extra={
            "request_id": request_id,
            "step": f"account_{operation}",
            "account_id": account_id,
            "outcome": outcome,
        },
    )
