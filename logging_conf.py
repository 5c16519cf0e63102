import json
import logging
import sys

import config


class JsonFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message, traceback."""

    def format(self, record):
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None, json_output=None):
    """Attach a stdout handler to the root logger. Safe to call twice."""
    level = level or config.LOG_LEVEL
    json_output = config.LOG_JSON if json_output is None else json_output

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        if getattr(h, "_gst_engine", False):
            root.removeHandler(h)

    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(JsonFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    h._gst_engine = True
    root.addHandler(h)
    return root
