# nestswarm/solutions/solution.py

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Optional, Sequence

import numpy as np


def as_variables(values: Sequence[float]) -> np.ndarray:
    """Copy ``values`` into a flat, read-only float vector."""
    x = np.array(values, dtype=float).reshape(-1)
    x.setflags(write=False)
    return x


@dataclass(eq=False)
class Solution:
    """
    One candidate point in the search space.

    ``variables`` is frozen once the solution exists; a population changes a
    member only by replacing it. ``state`` holds whatever the algorithm that
    owns the population needs to remember about the point (a nest's birth
    generation, a particle's velocity and personal best).
    """

    variables: np.ndarray
    state: Optional[Any] = None

    def __post_init__(self):
        self.variables = as_variables(self.variables)

    @property
    def num_variables(self) -> int:
        return int(self.variables.size)

    def render(self, fitness: Optional[float] = None) -> str:
        parts = [f"x{i} = {v:.6f}" for i, v in enumerate(self.variables)]
        text = "Solution(" + ", ".join(parts) + ")"
        if fitness is not None:
            text += f" fitness = {fitness:.6f}"
        return text

    def render_all(self, fitness: Optional[float] = None) -> str:
        lines = [self.render(fitness)]
        if self.state is not None:
            lines.append(f"  {type(self.state).__name__}:")
            for name, value in _state_items(self.state):
                lines.append(f"    {name} = {_format_value(value)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def _state_items(state: Any):
    if is_dataclass(state):
        return [(f.name, getattr(state, f.name)) for f in fields(state)]
    return sorted(vars(state).items())


def _format_value(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return np.array2string(value, precision=6, separator=", ")
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)
