import argparse
import logging
import sys
from typing import Optional, Sequence

from catenary_solver import (
    BoundaryConditions,
    PolishOptions,
    polish_solution,
    solve_supports,
    solver_config_with,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    # The solver package may already have installed a default handler.
    logging.getLogger().setLevel(log_level)


def _boundary_conditions(parser: argparse.ArgumentParser, args: argparse.Namespace) -> BoundaryConditions:
    cartesian = args.span is not None or args.offset is not None
    polar = args.angle is not None or args.radius is not None
    if cartesian and polar:
        parser.error("use either --span/--offset or --angle/--radius, not both")
    if polar:
        if args.angle is None or args.radius is None:
            parser.error("--angle and --radius must be given together")
        return BoundaryConditions.from_polar(args.angle, args.radius, args.length)
    if args.span is None:
        parser.error("--span (or --angle/--radius) is required")
    return BoundaryConditions(args.span, args.offset or 0.0, args.length)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Solve the shape of a hanging chain between two supports")
    parser.add_argument("--span", type=float, help="Horizontal distance d between the supports")
    parser.add_argument(
        "--offset",
        type=float,
        help="Vertical offset h of the second support (default: 0)",
    )
    parser.add_argument(
        "--angle",
        type=float,
        help="Angle of the second support in degrees from horizontal, positive upward",
    )
    parser.add_argument("--radius", type=float, help="Distance of the second support from the first")
    parser.add_argument("--length", type=float, required=True, help="Chain length L")
    parser.add_argument(
        "--tolerance",
        type=float,
        help="Early-exit residual tolerance for Newton and Levenberg-Marquardt (default: 1e-8)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Iteration cap for Newton and Levenberg-Marquardt (default: 200)",
    )
    parser.add_argument(
        "--polish",
        action="store_true",
        help="Refine the accepted solution with scipy least squares",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    conditions = _boundary_conditions(parser, args)
    try:
        config = solver_config_with(tolerance=args.tolerance, max_iterations=args.max_iterations)
    except ValueError as exc:
        parser.error(str(exc))

    print("Supports:")
    print(f"  d: {conditions.d:.6f}")
    print(f"  h: {conditions.h:.6f}")
    print(f"  L: {conditions.length:.6f}")
    print(f"  chord: {conditions.chord:.6f}")
    print(f"  slack: {conditions.slack:.6f}")

    result = solve_supports(conditions, config)
    if result is None:
        logger.error("Could not find a valid catenary for the given supports")
        print("No solution")
        raise SystemExit(1)

    if args.polish:
        polished = polish_solution(conditions, result, PolishOptions(enable=True))
        for note in polished.notes:
            logger.info("Polish: %s", note)
        print("Polish:")
        print(f"  improved: {polished.improved}")
        print(f"  evaluations: {polished.evaluations}")
        result = polished.result

    shape = result.shape()
    print("Solved")
    print(f"  method: {result.method}")
    print(f"  converged: {result.converged}")
    print(f"  a: {result.a:.9f}")
    print(f"  x0: {result.x0:.9f}")
    print(f"  lambda: {shape.vertex_shift:.9f}")
    print(f"  residual: {result.residual:.3e}")


if __name__ == "__main__":
    main(sys.argv[1:])
