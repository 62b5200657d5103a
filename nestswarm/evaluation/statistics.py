# nestswarm/evaluation/statistics.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Union

import numpy as np
import pandas as pd
from scipy.stats import wilcoxon

Rows = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def paired_runs(results: Rows, method_a: str, method_b: str, metric: str = "best_fitness") -> pd.DataFrame:
    """
    Line up the runs of two methods by seed.

    ``results`` is a benchmark DataFrame or rows shaped like the benchmark
    summary (``method``, ``seed``, metric) or like ``result_to_dict`` output
    (``method_name`` instead of ``method``). Failed runs are left out, and
    only seeds both methods completed are kept.
    """
    df = results.copy() if isinstance(results, pd.DataFrame) else pd.DataFrame(list(results))
    if "method" not in df.columns and "method_name" in df.columns:
        df = df.rename(columns={"method_name": "method"})

    missing = {"method", "seed", metric} - set(df.columns)
    if missing:
        raise ValueError(f"results missing columns: {sorted(missing)}. Found: {list(df.columns)}")

    if "status" in df.columns:
        df = df[df["status"] == "ok"]

    a = df.loc[df["method"] == method_a, ["seed", metric]]
    b = df.loc[df["method"] == method_b, ["seed", metric]]
    if a.empty or b.empty:
        raise ValueError(f"methods not found in results. Have: {df['method'].unique().tolist()}")
    if a["seed"].duplicated().any() or b["seed"].duplicated().any():
        raise ValueError("each method must have at most one run per seed")

    paired = a.merge(b, on="seed", suffixes=("_a", "_b")).sort_values("seed")
    return paired.rename(columns={f"{metric}_a": "a", f"{metric}_b": "b"}).reset_index(drop=True)


def compare_methods(
    results: Rows,
    method_a: str,
    method_b: str,
    metric: str = "best_fitness",
    alternative: str = "two-sided",
    higher_is_better: bool = True,
    alpha: float = 0.05,
) -> Dict[str, Any]:
    """
    Wilcoxon signed-rank test on runs of two methods paired by seed.

    ``alternative`` is passed to scipy for the differences ``a - b``:
    "greater" tests that ``method_a`` scores higher, "less" that it scores
    lower. ``better`` names the method favoured by the median paired
    difference (``None`` when it is zero) and ``significant`` says whether
    ``p_value < alpha``.
    """
    paired = paired_runs(results, method_a, method_b, metric)
    if len(paired) < 2:
        raise ValueError(f"need at least 2 paired seeds, got {len(paired)}")

    da = paired["a"].to_numpy(dtype=float)
    db = paired["b"].to_numpy(dtype=float)

    # zsplit keeps zero differences in the ranking instead of dropping them
    stat, p = wilcoxon(da, db, alternative=alternative, zero_method="zsplit")

    median_diff = float(np.median(da - db))
    if median_diff == 0:
        better = None
    elif (median_diff > 0) == higher_is_better:
        better = method_a
    else:
        better = method_b

    return {
        "metric": metric,
        "method_a": method_a,
        "method_b": method_b,
        "alternative": alternative,
        "n": int(len(paired)),
        "seeds": paired["seed"].tolist(),
        "mean_a": float(da.mean()),
        "mean_b": float(db.mean()),
        "median_diff": median_diff,
        "statistic": float(stat),
        "p_value": float(p),
        "better": better,
        "significant": bool(p < alpha),
    }
