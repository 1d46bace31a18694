"""Local Flask app. Production runs behind lambda_handler.py."""

import logging
import os

from flask import Flask, jsonify, request
from flask_cors import CORS

from theater import api

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())

app = Flask(__name__)
CORS(app)


def respond(result):
    status_code, body = result
    return jsonify(body), status_code


@app.get("/health")
def health():
    return respond(api.handle_health())


@app.get("/api")
def api_info():
    return respond(api.handle_api_info())


@app.post("/statement")
def statement():
    # silent: malformed JSON arrives as None and is reported as missing input
    return respond(api.handle_statement(request.get_json(force=True, silent=True)))


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8080)))
