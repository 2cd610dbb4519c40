"""A CDCL SAT solver with a DIMACS CNF parser, a command line front end and named-variable formulas."""

__version__ = "0.1.1"