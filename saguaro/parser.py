"""Parser for the DIMACS CNF text format."""

from __future__ import annotations

from saguaro.cnf import Clause, Cnf

_WHITESPACE = frozenset(" \t\n\r\x0c")
_INT_CHARS = frozenset("-0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the input is not a valid DIMACS CNF document."""


class _Reader:
    """A cursor over the input text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def advance(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def expect(self, seq: str) -> None:
        for expected in seq:
            if self.advance() != expected:
                raise ParseError(f"expected {seq!r}")

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE:
            self._pos += 1

    def skip_irrelevant(self) -> None:
        """Skip any run of comment lines and whitespace."""
        while self.peek() == "c" or self.peek() in _WHITESPACE:
            if self.peek() == "c":
                newline = self._text.find("\n", self._pos)
                self._pos = len(self._text) if newline < 0 else newline
            self.skip_whitespace()

    def scan_int(self) -> int:
        """Read an integer; the character that ends it is consumed too."""
        if self.peek() not in _INT_CHARS:
            raise ParseError(f"expected an integer at offset {self._pos}")
        image = []
        while (ch := self.advance()) is not None and ch in _INT_CHARS:
            image.append(ch)
        text = "".join(image)
        try:
            value = int(text)
        except ValueError:
            raise ParseError(f"invalid integer {text!r}") from None
        if not _INT_MIN <= value <= _INT_MAX:
            raise ParseError(f"integer out of range: {text}")
        return value


def _parse_problem_def(reader: _Reader) -> tuple[int, int]:
    reader.expect("p cnf ")
    num_vars = reader.scan_int()
    reader.skip_whitespace()
    num_clauses = reader.scan_int()
    if num_vars <= 0 or num_clauses <= 0:
        raise ParseError("problem line needs positive variable and clause counts")
    return num_vars, num_clauses


def _parse_clause(reader: _Reader) -> Clause:
    clause: Clause = []
    reader.skip_irrelevant()
    while True:
        reader.skip_whitespace()
        lit = reader.scan_int()
        if lit == 0:
            return clause
        clause.append(lit)


def parse(text: str) -> Cnf:
    """Parse a DIMACS CNF document into a :class:`Cnf`."""
    reader = _Reader(text)
    reader.skip_irrelevant()
    num_vars, _num_clauses = _parse_problem_def(reader)

    clauses: list[Clause] = []
    reader.skip_irrelevant()
    while not reader.at_end():
        clauses.append(_parse_clause(reader))
        reader.skip_irrelevant()

    return Cnf(clauses, num_vars)