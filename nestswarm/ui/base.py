# nestswarm/ui/base.py

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from nestswarm.errors import InvalidInputError
from nestswarm.solutions import Solution


class OptimizationUI(ABC):
    """
    Presentation boundary: collects named problem parameters as text and
    shows solutions. The search code never calls into it.
    """

    @abstractmethod
    def get_variable_input(self, var_name: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def print_solution(self, solution: Solution, problem: Optional[Any] = None) -> None:
        raise NotImplementedError

    def get_float_input(self, var_name: str) -> float:
        text = self.get_variable_input(var_name)
        try:
            return float(text)
        except (TypeError, ValueError):
            raise InvalidInputError(var_name, "is not a number") from None

    def get_positive_float_input(self, var_name: str) -> float:
        value = self.get_float_input(var_name)
        if not value > 0:
            raise InvalidInputError(var_name, "must be positive")
        return value
