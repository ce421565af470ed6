import json, logging, sys, time, uuid, datetime as dt
from typing import Optional

_HANDLER_NAME = "catalog-json"

logger = logging.getLogger("catalog.operations")


class JsonFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, msg (+ exc, extra fields)."""

    def format(self, record: logging.LogRecord) -> str:
        rec = {
            "time": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, dict):
            rec.update(fields)
        if record.exc_info:
            rec["exc"] = self.formatException(record.exc_info)
        return json.dumps(rec, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """Install the JSON stdout handler on the root logger once and set its level."""
    root = logging.getLogger()
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    return root


class OperationLogContext:
    """Per-request operation record, emitted as a single structured log line."""

    def __init__(self, action: str, log: Optional[logging.Logger] = None):
        self.action = action
        self.log = log or logger
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.entity_type = None
        self.entity_id = None
        self.result_count = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = eid

    def set_payload(self, obj): self.payload = obj
    def set_result_count(self, n: int): self.result_count = n

    def to_record(self, result: str = "OK", err: Optional[str] = None) -> dict:
        return {
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "payload": self.payload,
            "result": result,
            "result_count": self.result_count,
            "err_msg": err,
            "latency_ms": int((time.perf_counter() - self.start) * 1000),
        }

    def write(self, result: str = "OK", err: Optional[str] = None) -> dict:
        rec = self.to_record(result, err)
        level = logging.INFO if result == "OK" else logging.ERROR
        self.log.log(level, "%s %s", self.action, result, extra={"fields": rec})
        return rec
