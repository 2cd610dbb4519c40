"""Building formulas from named variables and solving them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from saguaro.cnf import Cnf
from saguaro.solver import Unsatisfiable
from saguaro.solver import solve as solve_cnf


@dataclass(frozen=True)
class Literal:
    """A named variable, possibly negated."""

    var: str
    negated: bool = False


@dataclass(frozen=True)
class Or:
    """A disjunction of literals."""

    lits: tuple[Literal, ...]


@dataclass(frozen=True)
class And:
    """A conjunction of disjunctions."""

    clauses: tuple[Or, ...]


@dataclass(frozen=True)
class Formula:
    """A complete formula ready to be solved."""

    expr: And


def formula(expr: And) -> Formula:
    """Wrap a conjunction as a formula."""
    return Formula(expr)


def and_(clauses: Iterable[Or]) -> And:
    """Conjoin disjunctions."""
    return And(tuple(clauses))


def or_(lits: Iterable[Literal]) -> Or:
    """Disjoin literals."""
    return Or(tuple(lits))


def bool_(name: str) -> Literal:
    """A positive literal of the named variable."""
    return Literal(name, False)


def not_(lit: Literal) -> Literal:
    """The negation of a literal."""
    return Literal(lit.var, not lit.negated)


def to_cnf(formula: Formula) -> tuple[Cnf, dict[int, str]]:
    """Number variables from 1 in order of first use.

    Returns the CNF and a map from variable number to name.
    """
    indices: dict[str, int] = {}
    clauses = []
    for disjunction in formula.expr.clauses:
        clause = []
        for lit in disjunction.lits:
            index = indices.setdefault(lit.var, len(indices) + 1)
            clause.append(-index if lit.negated else index)
        clauses.append(clause)
    names = {index: name for name, index in indices.items()}
    return Cnf(clauses, len(indices)), names


def solve(formula: Formula) -> dict[str, Union[bool, list[str]]]:
    """Solve the formula.

    Returns ``{"sat": False}`` when unsatisfiable, otherwise ``{"sat": True,
    "assignments": [...]}`` listing the variables assigned true.
    """
    cnf, names = to_cnf(formula)
    try:
        assignment = solve_cnf(cnf)
    except Unsatisfiable:
        return {"sat": False}
    return {
        "sat": True,
        "assignments": [names[lit] for lit in sorted(assignment) if lit > 0],
    }