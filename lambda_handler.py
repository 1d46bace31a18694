"""
AWS Lambda entry point: adapts API Gateway proxy events (REST and HTTP API
v2) to the handlers in theater.api.
"""

import base64
import json
import logging
import os

from theater import api

logging.getLogger().setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

ENVIRONMENT = os.environ.get("ENVIRONMENT", "dev")

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def decode_body(event):
    """Return the JSON request body as Python data, or None when empty."""
    body = event.get("body")
    if not isinstance(body, str):
        return body
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body) if body else None


def _statement(event):
    try:
        input_data = decode_body(event)
    except ValueError as e:  # JSON, base64 and UTF-8 decode errors
        return api.failure(400, f"Invalid JSON: {e}")
    return api.handle_statement(input_data)


ROUTES = {
    ("GET", "/health"): lambda event: api.handle_health(environment=ENVIRONMENT),
    ("GET", "/api"): lambda event: api.handle_api_info(environment=ENVIRONMENT, runtime="AWS Lambda"),
    ("POST", "/statement"): _statement,
}


def lambda_handler(event, context):
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("path") or event.get("rawPath", "")

    if method == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    route = ROUTES.get((method, path))
    if route is None:
        status_code, body = api.failure(404, "Not found")
        body["path"] = path
    else:
        status_code, body = route(event)
    return {"statusCode": status_code, "headers": CORS_HEADERS, "body": json.dumps(body)}
