import json, logging, time, uuid
from typing import Optional

from .config import get_config

ops_logger = logging.getLogger("submission_service.ops")

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None):
    lvl = (level or get_config()["log_level"]).upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.INFO), format=_FORMAT)
    logging.getLogger("submission_service").setLevel(getattr(logging, lvl, logging.INFO))


class LogContext:
    """Per-request operation record, emitted as one log line on write()."""

    def __init__(self, action: str, user: str = "anonymous"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = str(eid)

    def set_payload(self, obj): self.payload = obj

    def write(self, result: str = "OK", err: Optional[str] = None):
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "payload": self.payload,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        level = logging.INFO if result == "OK" else logging.WARNING
        ops_logger.log(level, json.dumps(rec, ensure_ascii=False, default=str))
        return rec
