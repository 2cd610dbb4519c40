import pytest

from saguaro.cnf import Cnf
from saguaro.parser import ParseError, parse


@pytest.mark.parametrize(
    "text",
    [
        "",
        "bad input",
        "p cnf 12",
        "p cnf 0 0",
        "p cnf 0 0\naaa",
    ],
)
def test_parse_rejects(text):
    with pytest.raises(ParseError):
        parse(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("p cnf 2 1\n1 2 0", Cnf([[1, 2]], 2)),
        (
            "c with comment p cnf 5 1\np cnf 2 1\nc another comment\n1 2 0",
            Cnf([[1, 2]], 2),
        ),
        (
            "p cnf 3 3 1 2 3 0 -2 1 0 -3 -1 0",
            Cnf([[1, 2, 3], [-2, 1], [-3, -1]], 3),
        ),
    ],
)
def test_parse_accepts(text, expected):
    actual = parse(text)
    assert actual.num_vars == expected.num_vars
    assert actual.clauses == expected.clauses


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("p cnf 1")


def test_clause_without_terminator_rejected():
    with pytest.raises(ParseError):
        parse("p cnf 2 1\n1 2")


def test_malformed_integer_rejected():
    with pytest.raises(ParseError):
        parse("p cnf 2 1\n1-2 0")


def test_integer_out_of_range_rejected():
    with pytest.raises(ParseError):
        parse("p cnf 2 1\n99999999999 0")


def test_negative_counts_rejected():
    with pytest.raises(ParseError):
        parse("p cnf -2 1\n1 0")


def test_clause_count_is_not_enforced():
    cnf = parse("p cnf 2 1\n1 0\n-2 0\n")
    assert cnf.clauses == [[1], [-2]]


def test_comments_between_clauses():
    cnf = parse("p cnf 2 2\n1 0\nc note\n-1 2 0\n")
    assert cnf.clauses == [[1], [-1, 2]]