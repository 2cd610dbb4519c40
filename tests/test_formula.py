from saguaro.formula import (
    And,
    Formula,
    Literal,
    Or,
    and_,
    bool_,
    formula,
    not_,
    or_,
    solve,
    to_cnf,
)


def test_builders_produce_structures():
    a = bool_("a")
    expr = and_([or_([a])])
    f = formula(expr)
    assert a == Literal("a", False)
    assert expr == And((Or((a,)),))
    assert f == Formula(expr)


def test_not_twice_is_identity():
    a = bool_("a")
    assert not_(a).negated is True
    assert not_(not_(a)) == a


def test_to_cnf_numbers_variables_in_order_of_first_use():
    a, b = bool_("a"), bool_("b")
    f = formula(and_([or_([a, not_(b)]), or_([b]), or_([not_(a), b])]))
    cnf, names = to_cnf(f)
    assert cnf.clauses == [[1, -2], [2], [-1, 2]]
    assert cnf.num_vars == 2
    assert names == {1: "a", 2: "b"}


def test_to_cnf_round_trips_names():
    vars_ = [bool_(n) for n in ("x", "y", "z")]
    f = formula(and_([or_(vars_), or_([not_(vars_[2])])]))
    cnf, names = to_cnf(f)
    rebuilt = [
        [Literal(names[abs(lit)], lit < 0) for lit in clause] for clause in cnf.clauses
    ]
    assert rebuilt == [list(o.lits) for o in f.expr.clauses]


def test_solve_satisfiable():
    a, b = bool_("a"), bool_("b")
    f = formula(and_([or_([a, not_(b)]), or_([b])]))
    result = solve(f)
    assert result["sat"] is True
    assert sorted(result["assignments"]) == ["a", "b"]


def test_solve_result_satisfies_formula():
    x, y, z = bool_("x"), bool_("y"), bool_("z")
    f = formula(and_([or_([x, y, z]), or_([not_(y), x]), or_([not_(z), not_(x)])]))
    result = solve(f)
    assert result["sat"] is True
    true_vars = set(result["assignments"])
    for disjunction in f.expr.clauses:
        assert any((lit.var in true_vars) != lit.negated for lit in disjunction.lits)


def test_solve_unsatisfiable():
    x = bool_("x")
    assert solve(formula(and_([or_([x]), or_([not_(x)])]))) == {"sat": False}