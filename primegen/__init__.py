from .candidates import CandidateSource, draw
from .primality import PrimalityOracle, RandomWitnessSource, WitnessSource, is_probable_prime
from .coordinator import DiscoveryEvent, ResultCoordinator, SearchState
from .engine import InvalidTarget, SearchEngine, SearchTarget, search
__all__ = [
    "CandidateSource", "draw",
    "PrimalityOracle", "RandomWitnessSource", "WitnessSource", "is_probable_prime",
    "DiscoveryEvent", "ResultCoordinator", "SearchState",
    "InvalidTarget", "SearchEngine", "SearchTarget", "search",
]
