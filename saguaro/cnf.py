"""Formulas in conjunctive normal form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

Var = int
Lit = int
Clause = list[int]


@dataclass
class Cnf:
    """A formula as a list of clauses over variables numbered from 1."""

    clauses: list[Clause] = field(default_factory=list)
    num_vars: int = 0

    def add_clause(self, clause: Iterable[Lit]) -> None:
        """Append a clause to the end of the formula."""
        self.clauses.append(list(clause))