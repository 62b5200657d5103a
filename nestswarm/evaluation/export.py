# nestswarm/evaluation/export.py

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict

import numpy as np

from nestswarm.methods.result import MethodResult


def result_to_dict(result: MethodResult) -> Dict[str, Any]:
    best = result.best_solution
    if best is not None:
        best = np.asarray(getattr(best, "variables", best)).tolist()
    return {
        "method_name": result.method_name,
        "best_fitness": float(result.best_fitness),
        "best_solution": best,
        "history": [float(x) for x in result.history],
        "metrics": result.metrics,
        "time_sec": float(result.time_sec),
        "iterations": int(result.iterations),
        "status": result.status,
        "params_used": result.params_used,
        "seed": result.seed,
        "message": result.message,
    }


def save_result_json(path: str, result: MethodResult, extra: Dict[str, Any] | None = None) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    payload = result_to_dict(result)
    if extra:
        payload["extra"] = extra

    # -inf best_fitness of a failed run is written as the JSON extension -Infinity
    p.write_text(json.dumps(payload, indent=2, default=float), encoding="utf-8")


def load_result_json(path: str) -> Dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))
