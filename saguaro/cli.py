"""Command line front end: solve a DIMACS CNF file."""

from __future__ import annotations

import sys
from typing import AbstractSet, Optional, Sequence

from saguaro.cnf import Lit
from saguaro.parser import ParseError, parse
from saguaro.solver import Unsatisfiable, solve


def format_assignments(assignments: AbstractSet[Lit], num_vars: int) -> str:
    """Each variable from 1 to ``num_vars``, negated unless assigned true."""
    return "".join(
        f"{var if var in assignments else -var} " for var in range(1, num_vars + 1)
    )


def format_solution(assignments: Optional[AbstractSet[Lit]], num_vars: int) -> str:
    """The solution in DIMACS output form; None means unsatisfiable."""
    if assignments is None:
        return "s UNSATISFIABLE"
    return f"s SATISFIABLE\nv {format_assignments(assignments, num_vars)}0"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: saguaro <cnf file>")
        return 0

    filename = args[0]
    try:
        with open(filename, encoding="utf-8") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError):
        print(f'Failed to load file "{filename}"')
        return 1

    try:
        cnf = parse(contents)
    except ParseError:
        print("Syntax error in CNF")
        return 1

    try:
        solution: Optional[set[Lit]] = solve(cnf)
    except Unsatisfiable:
        solution = None

    print(format_solution(solution, cnf.num_vars))
    return 0


if __name__ == "__main__":
    sys.exit(main())