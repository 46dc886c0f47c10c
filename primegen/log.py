import sys
from datetime import datetime, timezone

from . import config

def now():
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")

def log(line: str):
    """Timestamped diagnostic line. Goes to PRIMEGEN_LOG and, when verbose, stderr."""
    line = f"{now()} {line.rstrip()}"
    if config.LOG_PATH:
        with open(config.LOG_PATH, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    if config.VERBOSE:
        print(line, file=sys.stderr, flush=True)
