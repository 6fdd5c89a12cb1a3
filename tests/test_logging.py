import json
import logging
import structlog
from incidentdesk.logging import build_formatter


def _record(name="uvicorn.error", level=logging.WARNING, msg="server %s", args=("up",)):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_stdlib_records_render_as_json():
    out = json.loads(build_formatter(json_logs=True).format(_record()))
    assert out["event"] == "server up"
    assert out["level"] == "warning"
    assert out["logger"] == "uvicorn.error"
    assert "timestamp" in out


def test_stdlib_records_pick_up_request_context():
    structlog.contextvars.bind_contextvars(request_id="req-42")
    try:
        out = json.loads(build_formatter(json_logs=True).format(_record("sqlalchemy.pool", logging.INFO, "checkout", ())))
    finally:
        structlog.contextvars.clear_contextvars()
    assert out["request_id"] == "req-42"
    assert out["event"] == "checkout"


def test_console_renderer_is_plain_text():
    line = build_formatter(json_logs=False).format(_record())
    assert "server up" in line
    assert not line.lstrip().startswith("{")
