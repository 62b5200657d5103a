from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np
import scipy.stats as stats


def _pad(histories: List[List[float]]) -> np.ndarray:
    """Extend shorter histories with their last value so they stack."""
    max_len = max(len(h) for h in histories)
    return np.array([list(h) + [h[-1]] * (max_len - len(h)) for h in histories], dtype=float)


def mean_with_ci(histories: List[List[float]], confidence_level: float = 0.95):
    padded = _pad(histories)
    mean = padded.mean(axis=0)
    std = padded.std(axis=0)
    n = len(padded)
    if n > 1:
        # t distribution, few seeds
        t_value = stats.t.ppf((1 + confidence_level) / 2, n - 1)
        ci = t_value * std / np.sqrt(n)
    else:
        ci = std
    return mean, ci


class Plotter:
    def __init__(self, output_dir: str = "results/figures"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        plt.style.use("seaborn-v0_8-darkgrid")
        plt.rcParams["figure.figsize"] = [12, 8]
        plt.rcParams["font.size"] = 11
        plt.rcParams["axes.grid"] = True
        plt.rcParams["grid.alpha"] = 0.3

    def save_fig(self, filename: str, dpi: int = 150, tight: bool = True) -> Path:
        path = self.output_dir / filename
        if tight:
            plt.tight_layout()
        plt.savefig(path, dpi=dpi, bbox_inches="tight")
        plt.close()
        return path

    def plot_convergence(
        self,
        results_data: List[Dict[str, Any]],
        problem_name: str,
        confidence_level: float = 0.95,
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Best-fitness curves of every run, grouped by method, with the mean and
        a confidence band per method on top and the final-fitness spread
        below.

        ``results_data`` holds dicts shaped like ``result_to_dict`` output
        (``method_name``, ``seed``, ``history``).
        """
        methods_data: Dict[str, Dict[Any, List[float]]] = {}
        for result in results_data:
            history = result.get("history") or []
            if not history:
                continue
            method = result.get("method_name", "unknown")
            methods_data.setdefault(method, {})[result.get("seed", 0)] = history

        if not methods_data:
            return None

        colors = plt.cm.tab10(np.linspace(0, 1, max(len(methods_data), 2)))
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 10), gridspec_kw={"height_ratios": [2, 1]})

        for idx, (method, seeds_data) in enumerate(methods_data.items()):
            color = colors[idx]
            for history in seeds_data.values():
                ax1.plot(history, alpha=0.25, linewidth=0.8, color=color)

            mean, ci = mean_with_ci(list(seeds_data.values()), confidence_level)
            x = np.arange(1, len(mean) + 1)
            ax1.plot(x, mean, color=color, linewidth=2.5, label=f"{method} (mean)")
            ax1.fill_between(x, mean - ci, mean + ci, alpha=0.2, color=color,
                             label=f"{method} ({int(confidence_level * 100)}% CI)")

        ax1.set_xlabel("Generation")
        ax1.set_ylabel("Best fitness")
        ax1.set_title(f"Convergence - {problem_name}", fontweight="bold")
        ax1.legend(loc="lower right")

        labels = list(methods_data.keys())
        finals = [[h[-1] for h in methods_data[m].values()] for m in labels]
        ax2.boxplot(finals)
        ax2.set_xticks(range(1, len(labels) + 1))
        ax2.set_xticklabels(labels)
        ax2.set_ylabel("Final best fitness")
        ax2.set_title("Final fitness across seeds", fontweight="bold")

        return self.save_fig(filename or f"convergence_{problem_name}.png")
