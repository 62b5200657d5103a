from .logging import get_logger, print_experiment_header, print_results_table
from .seeding import make_rng

__all__ = [
    "get_logger",
    "print_experiment_header",
    "print_results_table",
    "make_rng",
]
