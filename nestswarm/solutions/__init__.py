from .solution import Solution, as_variables
from .solution_set import SolutionSet

__all__ = ["Solution", "SolutionSet", "as_variables"]
