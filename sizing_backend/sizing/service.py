# sizing/service.py
import json
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from sizing.config import Settings, get_settings
from sizing.core.pump import size_pump
from sizing.errors import ComputationFault, InputValidationError

logger = logging.getLogger(__name__)

AVAILABLE_FUNCTIONS = {
    "pump": "available",
    "health": "available",
}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def health_document(settings: Optional[Settings] = None) -> dict:
    settings = settings or get_settings()
    return {
        "status": "healthy",
        "message": "Pump sizing API is running",
        "timestamp": utc_timestamp(),
        "version": settings.api_version,
        "environment": settings.environment,
        "functions": dict(AVAILABLE_FUNCTIONS),
    }


def validation_error_body(exc: InputValidationError) -> dict:
    return {"error": exc.message}


def server_error_body(exc: BaseException) -> dict:
    return {
        "error": "Server error during pump calculation",
        "details": str(exc),
        "timestamp": utc_timestamp(),
    }


def handle_pump_request(body: bytes) -> Tuple[int, dict]:
    """
    Run the pump calculator on a raw JSON request body.

    Returns (status_code, response_body); never raises.
    """
    try:
        payload = json.loads(body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return 400, {"error": "Request body is not valid JSON"}

    if not isinstance(payload, dict):
        return 400, {"error": "Request body must be a JSON object"}

    try:
        result = size_pump(payload)
    except InputValidationError as exc:
        logger.info("Rejected pump request: %s", exc.message)
        return 400, validation_error_body(exc)
    except ComputationFault as exc:
        logger.exception("Pump calculation error (body=%r)", body)
        return 500, server_error_body(exc)
    except Exception as exc:
        logger.exception("Unexpected pump calculation error (body=%r)", body)
        return 500, server_error_body(exc)

    return 200, result.model_dump(mode="json")
