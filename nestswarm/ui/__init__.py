from .base import OptimizationUI
from .console import ConsoleUI, population_table

__all__ = ["OptimizationUI", "ConsoleUI", "population_table"]
