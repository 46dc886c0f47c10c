import os

WORKERS         = int(os.getenv("PRIMEGEN_WORKERS", "0") or "0") or (os.cpu_count() or 1)
WITNESSES       = int(os.getenv("PRIMEGEN_WITNESSES", "10"))
LOG_PATH        = os.getenv("PRIMEGEN_LOG", "")
VERBOSE         = os.getenv("PRIMEGEN_VERBOSE", "0").strip().lower() in ("1", "true", "yes")

# caps for the web API; the CLI has none
MAX_API_BITS    = int(os.getenv("PRIMEGEN_MAX_API_BITS", "4096"))
MAX_API_COUNT   = int(os.getenv("PRIMEGEN_MAX_API_COUNT", "16"))
