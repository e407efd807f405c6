"""Example: a chain hung between two supports at the same height."""

from catenary_solver import PolishOptions, polish_solution, solve
from catenary_solver.geometry import BoundaryConditions

SPAN = 1.0
LENGTH = 1.5


def main() -> None:
    conditions = BoundaryConditions(SPAN, 0.0, LENGTH)
    result = solve(conditions.d, conditions.h, conditions.length)
    if result is None:
        print("No solution")
        return

    print("Solved\nMethod:", result.method)
    print(f"a = {result.a:.9f}, x0 = {result.x0:.9f}, residual = {result.residual:.3e}")

    polished = polish_solution(conditions, result, PolishOptions())
    print("Polished:", polished.improved, f"residual = {polished.result.residual:.3e}")

    shape = result.shape()
    print(f"Sag below supports: {-shape.lowest_height:.6f}")
    for x, y in zip(*shape.sample(conditions.d, count=11)):
        print(f"  ({x:.3f}, {y:.6f})")


if __name__ == "__main__":
    main()
