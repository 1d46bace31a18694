"""
Request handling shared by the Flask app and the Lambda handler.

Handlers take already-decoded input and return (status_code, body); the
adapters only translate to and from their transport.
"""

import logging

from .processor import INPUT_ERRORS, StatementProcessor

logger = logging.getLogger(__name__)

SERVICE_INFO = {
    "message": "Theater Statement API",
    "version": "1.0",
    "endpoints": {"statement": "/statement [POST]", "health": "/health [GET]"},
}

# Reused across requests; holds only immutable configuration
default_processor = StatementProcessor()


def failure(status_code: int, error: str, status: str = "failed") -> tuple[int, dict]:
    return status_code, {"error": error, "status": status}


def handle_health(**extra) -> tuple[int, dict]:
    return 200, {"status": "healthy", **extra}


def handle_api_info(**extra) -> tuple[int, dict]:
    return 200, {"status": "ok", **SERVICE_INFO, **extra}


def handle_statement(input_data, processor: StatementProcessor | None = None) -> tuple[int, dict]:
    """
    Generate a statement for a decoded request body.

    Bad input (unknown plays, unknown types, missing or malformed fields)
    is a 400 `validation_failed`; anything else is a 500 with a generic
    message so internals are not disclosed.
    """
    if not input_data:
        return failure(400, "No input data provided")

    processor = processor or default_processor
    try:
        return 200, processor.process_from_dict(input_data)
    except INPUT_ERRORS as e:
        return failure(400, str(e), "validation_failed")
    except Exception:
        logger.exception("Unexpected error while generating statement")
        return failure(500, "An unexpected error occurred during processing")
