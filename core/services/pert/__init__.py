from .engine import PertEngine
from .models import NetworkEdge, NetworkNode, PertResult
from .network import PertNetwork, build_network

__all__ = [
    "PertEngine",
    "PertResult",
    "NetworkNode",
    "NetworkEdge",
    "PertNetwork",
    "build_network",
]
