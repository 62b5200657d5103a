# nestswarm/ui/console.py

from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional

from colorama import Fore, Style
from tabulate import tabulate

from nestswarm.errors import InvalidInputError
from nestswarm.solutions import Solution
from .base import OptimizationUI


class ConsoleUI(OptimizationUI):
    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        max_prompts: int = 3,
    ):
        if max_prompts < 1:
            raise ValueError("max_prompts must be >= 1")
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.max_prompts = max_prompts

    def get_variable_input(self, var_name: str) -> str:
        return self.input_fn(f"{var_name}: ")

    def ask_float(self, var_name: str, positive: bool = False) -> float:
        """Prompt until a valid number is entered; re-raises after ``max_prompts`` failures."""
        getter = self.get_positive_float_input if positive else self.get_float_input
        for attempt in range(1, self.max_prompts + 1):
            try:
                return getter(var_name)
            except InvalidInputError as e:
                self.output_fn(f"{Fore.YELLOW}{e}{Style.RESET_ALL}")
                if attempt == self.max_prompts:
                    raise

    def print_solution(self, solution: Solution, problem: Optional[Any] = None) -> None:
        fitness = problem.fitness(solution) if problem is not None else None
        self.output_fn(f"{Fore.GREEN}{solution.render(fitness)}{Style.RESET_ALL}")

    def print_all(self, solutions: Iterable[Solution], problem: Optional[Any] = None) -> None:
        for solution in solutions:
            fitness = problem.fitness(solution) if problem is not None else None
            self.output_fn(solution.render_all(fitness))

    def print_population(self, solutions: Iterable[Solution], problem: Any) -> None:
        self.output_fn(population_table(solutions, problem))


def population_table(solutions: Iterable[Solution], problem: Any) -> str:
    rows: List[List[Any]] = []
    for rank, solution in enumerate(solutions, start=1):
        rows.append([rank, *solution.variables.tolist(), problem.fitness(solution)])
    headers = ["rank", *[f"x{i}" for i in range(problem.num_variables)], "fitness"]
    return tabulate(rows, headers=headers, floatfmt=".6f")
