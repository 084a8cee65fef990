# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structured event logging for the mockup wizard.

Every event is emitted through `analytics_logger` with its fields under the
record's `extra_data`, which JsonFormatter flattens into the JSON line.
"""

import functools
import json
import logging
import os
import time
from contextlib import contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from config.default import Default
from state.mockup_wizard_state import PageState


class JsonFormatter(logging.Formatter):
    """Renders a record and its `extra_data` as a single JSON object."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        payload.update(getattr(record, "extra_data", {}))
        return json.dumps(payload, default=str)


def _make_handler() -> logging.Handler:
    # On Cloud Run the Cloud Logging handler turns extra fields into jsonPayload.
    if os.environ.get("K_SERVICE"):
        return cloud_logging.Client().get_default_handler()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    return handler


def get_logger(name: str) -> logging.Logger:
    """Returns `name`'s logger, attaching the JSON or Cloud handler once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(Default().LOG_LEVEL.upper())
        logger.addHandler(_make_handler())
        logger.propagate = False
    return logger


analytics_logger = get_logger("mockup_studio.analytics")


def _current_context() -> tuple[str, str]:
    """Returns (step, session_id) of the active wizard, if any."""
    try:
        state = me.state(PageState)
        return state.current_step, state.session_id
    except Exception:
        # No Mesop request context, e.g. the HTTP API or tests.
        return "unknown", "unknown"


def _log_event(event_type: str, message: str, **fields):
    step, session_id = _current_context()
    extra_data = {
        "event_type": event_type,
        "step": step,
        "session_id": session_id,
        **fields,
    }
    analytics_logger.info(message, extra={"extra_data": extra_data})


def log_ui_click(element_id: str, **extras):
    _log_event("ui_click", f"Click on {element_id}", element_id=element_id, **extras)


def log_step_change(from_step: str, to_step: str):
    _log_event(
        "step_change",
        f"Wizard moved {from_step} -> {to_step}",
        from_step=from_step,
        to_step=to_step,
    )


def log_model_call(model_name: str, status: str, duration_ms: float = 0, details: dict = None):
    _log_event(
        "model_call",
        f"Model call to {model_name}: {status}",
        model_name=model_name,
        status=status,
        duration_ms=round(duration_ms, 2),
        details=details or {},
    )


def track_click(element_id: str):
    """Wraps a Mesop event handler so each invocation is logged as a click."""

    def decorator(handler):
        @functools.wraps(handler)
        def wrapper(*args, **kwargs):
            log_ui_click(element_id)
            return handler(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def track_model_call(model_name: str, **details):
    """Times the enclosed model call and logs its outcome; errors propagate."""
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return (time.perf_counter() - started) * 1000

    try:
        yield
    except Exception as e:
        log_model_call(
            model_name,
            status="failure",
            duration_ms=elapsed_ms(),
            details={"error": str(e), "error_type": type(e).__name__, **details},
        )
        raise
    log_model_call(model_name, status="success", duration_ms=elapsed_ms(), details=details)
