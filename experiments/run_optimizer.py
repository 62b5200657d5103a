from nestswarm.methods import PSO, CuckooSearch
from nestswarm.problems import BoxMinAreaProblem, FenceProblem, MichalewiczMinProblem
from nestswarm.ui import ConsoleUI


def solve_and_show(method, problem, ui, show_population=False):
    res = method.run(problem)
    if not res.ok:
        print(f"{method.name} failed: {res.message}")
        return res

    if show_population:
        ui.print_all(method.get_solutions(problem), problem)
    ui.print_solution(res.best_solution, problem)
    print(f"{problem.info().name} {problem.objective}: {problem.evaluate(res.best_solution):.6f}")
    return res


if __name__ == "__main__":
    ui = ConsoleUI()

    cs = CuckooSearch(seed=42)
    pso = PSO(seed=42)

    michalewicz = MichalewiczMinProblem()
    solve_and_show(cs, michalewicz, ui)
    solve_and_show(pso, michalewicz, ui, show_population=True)

    fence = FenceProblem(ui.ask_float("fence length", positive=True))
    solve_and_show(CuckooSearch({"n_generations": 5000}, seed=42), fence, ui)

    box = BoxMinAreaProblem(ui.ask_float("box volume", positive=True))
    solve_and_show(CuckooSearch({"n_generations": 5000}, seed=42), box, ui)
