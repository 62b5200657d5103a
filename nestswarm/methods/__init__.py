# nestswarm/methods/__init__.py
from .base import BaseMethod, ProgressCallback
from .result import MethodResult

from .cuckoo import CuckooSearch, NestState, levy_flight
from .pso import PSO, ParticleState

METHODS = {
    "cuckoo": CuckooSearch,
    "pso": PSO,
}

__all__ = [
    "BaseMethod",
    "MethodResult",
    "ProgressCallback",
    "CuckooSearch",
    "NestState",
    "levy_flight",
    "PSO",
    "ParticleState",
    "METHODS",
]
