# nestswarm/errors.py

from __future__ import annotations


class OptimizationError(Exception):
    """Base class for failures raised while searching."""


class InfeasibleGenerationError(OptimizationError):
    """No feasible candidate could be generated within the retry budget."""

    def __init__(self, attempts: int, message: str | None = None):
        self.attempts = attempts
        super().__init__(
            message
            or f"Could not generate a feasible solution after {attempts} attempts. "
            "Perhaps you should widen your constraints."
        )


class DimensionMismatchError(OptimizationError, ValueError):
    def __init__(self, expected: int, got: int, where: str = "solution"):
        self.expected = expected
        self.got = got
        super().__init__(f"{where} dimension mismatch: expected {expected}, got {got}")


class NotSolvedError(OptimizationError, RuntimeError):
    def __init__(self, method_name: str):
        super().__init__(f"{method_name} has no population yet; call solve() first.")


class InvalidInputError(ValueError):
    """Malformed text supplied for a named problem variable."""

    def __init__(self, var_name: str, reason: str):
        self.var_name = var_name
        self.reason = reason
        super().__init__(f"{var_name} {reason}")
