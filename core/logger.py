import json
import sys
from datetime import datetime

LOG_FILE = "log.json"
LOG_LEVEL = "INFO"

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "SUCCESS": 25,
    "WARNING": 30,
    "ERROR": 40,
}


def configure(path: str = None, level: str = None):
    global LOG_FILE, LOG_LEVEL
    if path:
        LOG_FILE = path
    if level:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        LOG_LEVEL = level


def log_event(event_type: str, message: str, extra: dict = None):
    """
    Logs events to a JSON file for debugging & monitoring.
    Events below LOG_LEVEL are dropped.
    """
    if LEVELS.get(event_type, LEVELS["INFO"]) < LEVELS[LOG_LEVEL]:
        return

    entry = {
        "time": datetime.now().isoformat(),
        "type": event_type,
        "message": message
    }
    if extra:
        entry["extra"] = extra

    try:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError as e:
        print(f"Log write error: {e}", file=sys.stderr)
