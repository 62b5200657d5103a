import os
from dataclasses import asdict

import pandas as pd

from nestswarm.evaluation import Plotter, compare_methods, result_to_dict, save_result_json
from nestswarm.methods import PSO, CuckooSearch
from nestswarm.problems import FunctionOptimizationProblem
from nestswarm.utils.logging import print_experiment_header, print_results_table


def run_benchmark(func_name="rastrigin", dim=10, seeds=(1, 2, 3, 4, 5)):
    problem = FunctionOptimizationProblem(func_name=func_name, dim=dim)
    info = problem.info()

    methods = [
        ("CuckooSearch", CuckooSearch, {"n_nests": 25, "n_generations": 3000}),
        ("PSO", PSO, {"n_particles": 30, "max_iterations": 500}),
    ]

    os.makedirs("results/raw", exist_ok=True)
    os.makedirs("results/processed", exist_ok=True)

    rows = []
    runs = []
    total = len(methods) * len(seeds)
    for mname, mcls, params in methods:
        for seed in seeds:
            print_experiment_header(f"{mname} on {info.name} (seed {seed})", len(runs) + 1, total)
            res = mcls(params, seed=seed).run(problem)
            save_result_json(f"results/raw/{mname.lower()}_{info.name}_seed{seed}.json", res, extra=asdict(info))
            runs.append(result_to_dict(res))

            rows.append({
                "method": mname,
                "problem": info.name,
                "seed": seed,
                "best_fitness": res.best_fitness,
                "time_sec": res.time_sec,
                "iterations": res.iterations,
                "status": res.status,
            })

    print_results_table(rows, title=f"BENCHMARK {info.name}")

    df = pd.DataFrame(rows)
    csv_path = f"results/processed/benchmark_{info.name}_{len(seeds)}runs.csv"
    df.to_csv(csv_path, index=False)
    print(f"\nSaved summary -> {csv_path}")
    print(df.groupby("method")[["best_fitness", "time_sec"]].agg(["mean", "std"]))

    if len(seeds) > 1:
        test = compare_methods(df, "CuckooSearch", "PSO")
        verdict = test["better"] if test["significant"] else "no significant difference"
        print(f"Wilcoxon CuckooSearch vs PSO: statistic={test['statistic']:.3f} "
              f"p={test['p_value']:.4f} -> {verdict}")

    fig = Plotter().plot_convergence(runs, info.name)
    if fig:
        print(f"Saved plot -> {fig}")


if __name__ == "__main__":
    run_benchmark()
