"""
logger.py - Logging setup and per-request access logging
"""

import logging
import time

from flask import g, request

LOGGER_PREFIX = "mock_interview"


def configure_logging(level="INFO", log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a'))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def get_logger(name):
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def register_request_logging(app):
    access_log = get_logger("request")

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        duration_ms = round((time.perf_counter() - started) * 1000, 1) if started else 0.0
        status = response.status_code
        level = logging.ERROR if status >= 500 else logging.WARNING if status >= 400 else logging.INFO
        user = g.get("current_user")
        access_log.log(
            level, "%s %s %s %.1fms user=%s",
            request.method, request.path, status, duration_ms,
            user.id if user is not None else "-",
        )
        return response
