# (C) 2024 Irreducible Inc.

"""Exceptions raised by polynomial construction and accessors."""


class PolynomialError(Exception):
    """Base class for polynomial errors."""

    pass


class PolynomialParseError(PolynomialError, ValueError):
    """The source text does not follow the `[coefficient exponent] ...` grammar.

    Raised for a coefficient or exponent token that cannot be read, a bracket group that holds fewer than two tokens,
    and a `[` that is never closed.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at offset {position})")
        self.position = position


class EmptyPolynomialError(PolynomialError, ValueError):
    """An operation that needs at least one term was called on the empty polynomial."""

    pass
