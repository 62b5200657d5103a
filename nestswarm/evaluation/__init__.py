from .export import load_result_json, result_to_dict, save_result_json
from .plots import Plotter, mean_with_ci
from .statistics import compare_methods, paired_runs

__all__ = [
    "load_result_json",
    "result_to_dict",
    "save_result_json",
    "Plotter",
    "mean_with_ci",
    "compare_methods",
    "paired_runs",
]
