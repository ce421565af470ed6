import io
import json
import logging

from catalog.logs import JsonFormatter, OperationLogContext, configure_logging


def test_json_formatter_line():
    rec = logging.LogRecord("catalog.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    rec.fields = {"request_id": "abc"}
    out = json.loads(JsonFormatter().format(rec))
    assert out["level"] == "warning"
    assert out["logger"] == "catalog.test"
    assert out["msg"] == "hello world"
    assert out["request_id"] == "abc"
    assert out["time"].endswith("+00:00")


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    old_level = root.level
    try:
        configure_logging("DEBUG", stream=io.StringIO())
        configure_logging("WARNING", stream=io.StringIO())
        ours = [h for h in root.handlers if h.name == "catalog-json"]
        assert len(ours) == 1
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
        root.setLevel(old_level)


def test_operation_log_context_write(caplog):
    log = OperationLogContext("LISTRACES")
    log.set_entity("race", 3)
    log.set_payload({"filter": {"meetingIds": [1]}})
    log.set_result_count(2)
    with caplog.at_level(logging.INFO, logger="catalog.operations"):
        rec = log.write("OK")
    assert rec["action"] == "LISTRACES"
    assert rec["entity_id"] == 3
    assert rec["result_count"] == 2
    assert rec["latency_ms"] >= 0
    assert caplog.records[-1].fields["request_id"] == log.request_id


def test_operation_log_context_error_level(caplog):
    with caplog.at_level(logging.INFO, logger="catalog.operations"):
        OperationLogContext("GETRACE").write("NOT_FOUND", "race with id 9 not found")
    assert caplog.records[-1].levelno == logging.ERROR
    assert caplog.records[-1].fields["err_msg"] == "race with id 9 not found"
