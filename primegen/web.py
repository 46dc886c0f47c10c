import time
from flask import Blueprint, request, jsonify
from werkzeug.exceptions import BadRequest

from . import config
from .engine import InvalidTarget, SearchEngine, SearchTarget

primes_bp = Blueprint("primes_bp", __name__)

def _int_arg(name: str, default=None) -> int:
    raw = request.args.get(name, "").strip()
    if not raw:
        if default is None:
            raise BadRequest(f"missing {name}")
        return default
    try:
        return int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be integer")

# /api/primes?bits=256&count=2
@primes_bp.get("/api/primes")
def api_primes():
    bits = _int_arg("bits")
    count = _int_arg("count", 1)
    if bits > config.MAX_API_BITS:
        raise BadRequest(f"bits must be <= {config.MAX_API_BITS}")
    if count > config.MAX_API_COUNT:
        raise BadRequest(f"count must be <= {config.MAX_API_COUNT}")
    try:
        target = SearchTarget.from_bits(bits, count)
    except InvalidTarget as e:
        raise BadRequest(str(e))

    t0 = time.perf_counter()
    events = SearchEngine(target, sink=None).run()
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return jsonify({
        "ok": True,
        "bits": target.bits,
        "count": target.count,
        "duration_ms": dt_ms,
        "primes": [{"ordinal": ev.ordinal, "value": str(ev.value)} for ev in events],
    })

@primes_bp.get("/api/health")
def api_health():
    return jsonify(ok=True, workers=config.WORKERS)
