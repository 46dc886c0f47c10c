import sys, argparse, time

from .engine import InvalidTarget, SearchEngine, SearchTarget
from .primality import PrimalityOracle

USAGE = ("Usage: <bits> <count=1>\n"
         "\t - bits - the number of bits of the prime number, this must be a "
         "multiple of 8, and at least 32 bits.\n"
         "\t - count - the number of prime numbers to generate, defaults to 1.")

class UsageError(Exception):
    pass

class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)

def build_parser():
    ap = _Parser(add_help=False)
    ap.add_argument("bits", type=int)
    ap.add_argument("count", type=int, nargs="?", default=1)
    ap.add_argument("--workers", type=int, default=None, help="worker threads (default: CPU count)")
    ap.add_argument("--witnesses", type=int, default=None, help="Miller-Rabin rounds")
    return ap

def format_elapsed(seconds: float) -> str:
    """hh:mm:ss.fffffff"""
    ticks = int(round(seconds * 10_000_000))
    s, frac = divmod(ticks, 10_000_000)
    h, s = divmod(s, 3600)
    m, s = divmod(s, 60)
    return f"{h:02d}:{m:02d}:{s:02d}.{frac:07d}"

def main(argv=None):
    try:
        args = build_parser().parse_args(argv)
        target = SearchTarget.from_bits(args.bits, args.count)
    except (UsageError, InvalidTarget):
        print(USAGE)
        return 1

    print(f"BitLength: {target.bits} bits", flush=True)
    engine = SearchEngine(target, workers=args.workers, oracle=PrimalityOracle(args.witnesses))
    t0 = time.perf_counter()
    engine.run()
    print(f"Time to Generate: {format_elapsed(time.perf_counter() - t0)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
