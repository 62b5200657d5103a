from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MethodResult:
    method_name: str
    best_solution: Any
    best_fitness: float

    # best fitness after each generation, for convergence plots
    history: List[float] = field(default_factory=list)

    metrics: Dict[str, Any] = field(default_factory=dict)

    time_sec: float = 0.0
    iterations: int = 0
    status: str = "ok"  # ok / failed
    params_used: Dict[str, Any] = field(default_factory=dict)
    seed: Optional[int] = None

    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
