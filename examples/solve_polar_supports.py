"""Example: second support given by angle and distance from the first."""

from catenary_solver import solve_polar
from catenary_solver.geometry import BoundaryConditions

ANGLE_DEG = -14.5
RADIUS = 0.99
LENGTH = 1.0


def main() -> None:
    conditions = BoundaryConditions.from_polar(ANGLE_DEG, RADIUS, LENGTH)
    print(f"Supports: d={conditions.d:.6f} h={conditions.h:.6f} slack={conditions.slack:.6f}")

    result = solve_polar(ANGLE_DEG, RADIUS, LENGTH)
    if result is None:
        print("No solution")
        return

    tension = result.shape().vertex_shift
    print("Solved\nMethod:", result.method, "iterations:", result.iterations)
    print(f"a = {result.a:.9f}, x0 = {result.x0:.9f}, lambda = {tension:.9f}")
    print(f"Residual: {result.residual:.3e}")


if __name__ == "__main__":
    main()
