"""Conflict-driven clause learning search over a :class:`Cnf`."""

from __future__ import annotations

from typing import Optional, Sequence

from saguaro.cnf import Clause, Cnf, Lit
from saguaro.trail import KAPPA, Assignments, Trail


class Unsatisfiable(Exception):
    """Raised when a formula has no satisfying assignment."""


def solve(cnf: Cnf) -> set[Lit]:
    """Find a satisfying set of literals for the formula.

    Learned clauses are appended to ``cnf``. Raises :class:`Unsatisfiable`
    when no assignment exists.
    """
    trail = Trail(cnf.num_vars)
    return _cdcl(cnf, trail)


def _cdcl(cnf: Cnf, trail: Trail) -> set[Lit]:
    while True:
        # Propagate until no new clause is learned.
        while True:
            unsat_clauses = [c for c in cnf.clauses if _is_clause_unsat(c, trail)]
            learned = _unit_prop_and_learn(unsat_clauses, trail)
            if learned is None:
                break
            cnf.add_clause(learned)

        choice = _next_unassigned(cnf, trail)
        if choice is None:
            return trail.assignments()
        trail.push(choice)


def _unit_prop_and_learn(unsat_clauses: Sequence[Clause], trail: Trail) -> Optional[Clause]:
    """Propagate units; on conflict learn a clause and backtrack.

    Returns the learned clause, or None when propagation found no conflict.
    """
    if _unit_prop(unsat_clauses, trail):
        return None
    if trail.dec_level() == 0:
        raise Unsatisfiable("conflict at decision level zero")

    cut_set = _find_uip_cut_set(trail)

    # Nodes outside the cut that have an edge into it.
    reason: set[Lit] = set()
    for lit in cut_set:
        reason.update(p for p in trail.parents(lit) if p not in cut_set)

    for lit in cut_set:
        trail.remove(lit)

    learned = sorted(-lit for lit in reason)
    _backtrack(trail)
    return learned


def _backtrack(trail: Trail) -> None:
    """Pop nodes until two decisions have been removed or the trail is empty."""
    seen_levels = 0
    while (node := trail.pop()) is not None:
        if node.is_decision():
            seen_levels += 1
        if seen_levels == 2:
            break


def _find_uip_cut_set(trail: Trail) -> set[Lit]:
    scope = trail.latest_decision_children()
    track: set[Lit] = {KAPPA}
    cut_set: set[Lit] = set()

    while True:
        latest = trail.latest_in_set(track)
        cut_set.add(latest)
        track.discard(latest)
        track.update(p for p in trail.parents(latest) if p in scope)
        if len(track) == 1:
            return cut_set


def _unit_prop(unsat_clauses: Sequence[Clause], trail: Trail) -> bool:
    """Propagate unit clauses; return False on a conflict, True otherwise."""
    while True:
        unit_clauses = [
            clause
            for clause in unsat_clauses
            if _is_clause_unsat(clause, trail) and _is_clause_unit(clause, trail)
        ]
        if not unit_clauses:
            return True

        clause = unit_clauses[0]
        unit = next(lit for lit in clause if trail.is_unassigned(lit))

        conflicting = next(
            (
                other
                for other in unit_clauses
                if any(trail.is_unassigned(lit) and unit == -lit for lit in other)
            ),
            None,
        )
        trail.push(unit, clause)
        if conflicting is not None:
            trail.push(KAPPA, conflicting)
            return False


def _next_unassigned(cnf: Cnf, assign: Assignments) -> Optional[Lit]:
    """Some unassigned literal from an unsatisfied clause, if there is one."""
    for clause in cnf.clauses:
        if _is_clause_unsat(clause, assign):
            for lit in clause:
                if assign.is_unassigned(lit):
                    return lit
    return None


def _is_clause_unsat(clause: Clause, assign: Assignments) -> bool:
    return not any(assign.is_sat(lit) for lit in clause)


def _is_clause_unit(clause: Clause, assign: Assignments) -> bool:
    return sum(1 for lit in clause if assign.is_unassigned(lit)) == 1