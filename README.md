# saguaro

Saguaro is a small SAT solver that uses conflict-driven clause learning
(CDCL). It reads problems in DIMACS CNF format. For each problem it
reports either a satisfying assignment or that the formula is
unsatisfiable.

## Installation

```
pip install .
```

## Command line

```
saguaro problem.cnf
```

A problem file looks like this:

```
c a small example
p cnf 3 3
1 2 3 0
-2 1 0
-3 -1 0
```

Output follows the usual competition style:

```
s SATISFIABLE
v 1 -2 -3 0
```

When there is no solution the output is `s UNSATISFIABLE`. The `v` line
lists every variable from 1 to the declared count. A variable appears
positive if it is assigned true and negated otherwise.

Running the command without a file argument prints a usage line. If the
file cannot be read, it prints `Failed to load file "<name>"` and exits
with status 1. If the CNF has a syntax error, it prints
`Syntax error in CNF` and exits with status 1.

## Library

To parse and solve DIMACS text:

```python
from saguaro.parser import parse
from saguaro.solver import solve, Unsatisfiable

cnf = parse("p cnf 2 2\n1 2 0\n-1 0\n")
try:
    model = solve(cnf)          # a set of literals on the trail: {-1, 2}
except Unsatisfiable:
    print("no solution")
```

- `parse` raises `saguaro.parser.ParseError`, a subclass of `ValueError`, on malformed input. The problem line must give a positive variable count and a positive clause count. Lines that start with `c` are comments.
- `solve` appends every clause it learns to the `Cnf` it is given.

You can also build a `Cnf` directly from a list of clauses. Each clause is a list of non-zero integers:

```python
from saguaro.cnf import Cnf

cnf = Cnf([[1, 2], [-1, -2]], 2)
cnf.add_clause([1])
```

### Named variables

With `saguaro.formula` you can state a formula with variable names
instead of numbers:

```python
from saguaro.formula import formula, and_, or_, bool_, not_, solve

f = formula(and_([
    or_([bool_("rain"), bool_("sprinkler")]),
    or_([not_(bool_("rain"))]),
]))
result = solve(f)
# {"sat": True, "assignments": ["sprinkler"]}
```

- `assignments` lists the names of the variables set to true.
- When the formula has no solution, the result is `{"sat": False}`.
- `to_cnf(f)` returns the numbered `Cnf` together with a dict that maps each variable number to its name. Numbers are given in order of first use.

### Inspecting the search

The search keeps its state in `saguaro.trail.Trail`, which records each
assigned literal and the clause that implied it. `Trail.to_dot()`
renders the current implication graph in Graphviz dot syntax.

## Tests

```
pip install .[test]
pytest
```