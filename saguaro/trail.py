"""The assignment trail and implication graph used during search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Iterator, Optional

from saguaro.cnf import Lit

KAPPA: Lit = 0
"""The literal that stands for the conflict node."""


class Assignments(ABC):
    """Something that knows which literals are satisfied."""

    @abstractmethod
    def is_sat(self, lit: Lit) -> bool:
        """Whether the literal has a satisfying assignment."""

    def is_unassigned(self, lit: Lit) -> bool:
        """Whether neither the literal nor its negation is satisfied."""
        return not self.is_sat(lit) and not self.is_sat(-lit)

    @abstractmethod
    def assignments(self) -> set[Lit]:
        """The set of literals with satisfying assignments."""


@dataclass(frozen=True)
class TrailNode:
    """A literal on the trail with the clause that implied it, if any."""

    lit: Lit
    reason: Optional[tuple[Lit, ...]] = None

    def is_decision(self) -> bool:
        """Whether the literal was decided rather than implied."""
        return self.reason is None

    @property
    def label(self) -> str:
        if self.reason is None:
            return "dec"
        return " v ".join(str(lit) for lit in self.reason)

    def __str__(self) -> str:
        return self.label


class Trail(Assignments):
    """An ordered record of assigned literals and why they were assigned."""

    def __init__(self, num_vars: int) -> None:
        self._num_vars = num_vars
        self._nodes: list[TrailNode] = []
        self._assigned: set[Lit] = set()
        self._dec_level = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TrailNode]:
        return iter(self._nodes)

    def _check(self, lit: Lit) -> None:
        if lit == KAPPA:
            raise ValueError("the conflict node has no assignment")
        if abs(lit) > self._num_vars:
            raise ValueError(f"literal {lit} is out of range for {self._num_vars} variables")

    def _set_assigned(self, lit: Lit, assigned: bool) -> None:
        if lit == KAPPA:
            return
        self._check(lit)
        if assigned:
            self._assigned.add(lit)
        else:
            self._assigned.discard(lit)

    def _find(self, lit: Lit) -> TrailNode:
        for node in self._nodes:
            if node.lit == lit:
                return node
        raise LookupError(f"literal {lit} is not on the trail")

    def push(self, lit: Lit, reason: Optional[Iterable[Lit]] = None) -> None:
        """Append a literal; a reason of None marks a decision."""
        if lit != KAPPA:
            self._check(lit)
        node = TrailNode(lit, None if reason is None else tuple(reason))
        if node.is_decision():
            self._dec_level += 1
        self._nodes.append(node)
        self._set_assigned(lit, True)

    def pop(self) -> Optional[TrailNode]:
        """Remove and return the latest node, or None if the trail is empty."""
        if not self._nodes:
            return None
        node = self._nodes.pop()
        if node.is_decision():
            self._dec_level -= 1
        self._set_assigned(node.lit, False)
        return node

    def remove(self, lit: Lit) -> None:
        """Remove the first node holding the literal and unassign it."""
        self._nodes.remove(self._find(lit))
        self._set_assigned(lit, False)

    def dec_level(self) -> int:
        """The current decision level."""
        return self._dec_level

    def latest_decision_children(self) -> set[Lit]:
        """The literals from the latest decision to the top of the trail."""
        children: set[Lit] = set()
        for node in reversed(self._nodes):
            children.add(node.lit)
            if node.is_decision():
                return children
        raise LookupError("there is no decision on the trail")

    def parents(self, lit: Lit) -> set[Lit]:
        """The trail literals whose negations appear in the literal's reason."""
        node = self._find(lit)
        if node.reason is None:
            return set()
        return {
            other.lit
            for other in self._nodes
            if other.lit != lit and other.lit != -lit and -other.lit in node.reason
        }

    def latest_in_set(self, lits: AbstractSet[Lit]) -> Lit:
        """The most recently pushed literal that belongs to the given set."""
        for node in reversed(self._nodes):
            if node.lit in lits:
                return node.lit
        raise LookupError("no literal of the set is on the trail")

    def is_sat(self, lit: Lit) -> bool:
        self._check(lit)
        return lit in self._assigned

    def assignments(self) -> set[Lit]:
        return {node.lit for node in self._nodes}

    def to_dot(self) -> str:
        """Render the implication graph in Graphviz dot syntax."""
        edges = ""
        for node in self._nodes:
            node_edges = "".join(
                f'{parent}->{node.lit} [label="{node.label}"] '
                for parent in sorted(self.parents(node.lit))
            )
            edges = f"{edges}{node_edges} "
        dec_nodes = "".join(
            f'{node.lit} [color="gold"]' for node in self._nodes if node.is_decision()
        )
        return f"digraph G {{ {dec_nodes} {edges} }}"

    def __str__(self) -> str:
        return self.to_dot()