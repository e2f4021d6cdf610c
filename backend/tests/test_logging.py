"""
Tests for the loguru setup and request-bound loggers.
"""
from app.utils.logging import NO_REQUEST, configure_logging, get_logger


def test_unbound_lines_use_placeholder(log_records):
    get_logger().info("service started")

    assert log_records[-1]["message"] == "service started"
    assert log_records[-1]["extra"]["request_id"] == NO_REQUEST


def test_request_id_bound_once(log_records):
    log = get_logger("pal-20260101000000-abcd1234")
    log.info("first")
    log.bind(base_hex="#c68642").info("second")

    assert [r["extra"]["request_id"] for r in log_records[-2:]] == [
        "pal-20260101000000-abcd1234", "pal-20260101000000-abcd1234"
    ]
    assert log_records[-1]["extra"]["base_hex"] == "#c68642"


def test_configure_is_idempotent(log_records):
    """Reconfiguring does not drop sinks added after the first call."""
    configure_logging()
    get_logger().warning("still captured")

    assert log_records[-1]["message"] == "still captured"
