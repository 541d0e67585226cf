# mountfs/logging.py
import logging
import os
from typing import Any, Dict

# Arguments carrying file bodies; logged by size only
PAYLOAD_KEYS = {"content", "lines"}


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=level or os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def redact_args(args: Dict[str, Any]) -> Dict[str, Any]:
    safe = dict(args)
    for k, v in list(safe.items()):
        if k in PAYLOAD_KEYS and v is not None:
            safe[k] = f"<{len(v)} {'chars' if isinstance(v, str) else 'items'}>"
    return safe


def log_tool_call(logger: logging.Logger, name: str, args: Dict[str, Any]):
    logger.info("tool_call %s %s", name, redact_args(args))
