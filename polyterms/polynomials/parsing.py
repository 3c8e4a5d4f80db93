# (C) 2024 Irreducible Inc.

import logging
from typing import TypeVar

from ..coefficients.domain import CoefficientDomain
from ..utils.utils import Term, has_inversion, sort_descending
from .exceptions import PolynomialParseError

T = TypeVar("T")

logger = logging.getLogger(__name__)

OPEN = "["
CLOSE = "]"


def parse_terms(source: str, domain: CoefficientDomain[T]) -> list[Term]:
    """Reads the terms of a polynomial from its text form.

    The text is a sequence of bracket groups `[coefficient exponent]`, e.g. 3x⁵ − 7x² + 11 is `[3 5] [-7 2] [11 0]`.
    Whitespace is insignificant, anything before the first `[` or between a `]` and the next `[` is skipped, and any
    tokens after the exponent inside a group are ignored. Terms whose coefficient is negligible in `domain` are
    dropped. The terms keep their input order unless some exponent is greater than the one kept just before it, in
    which case they are sorted by descending exponent.
    """
    terms: list[Term] = []
    start = source.find(OPEN)
    while start != -1:
        end = source.find(CLOSE, start + 1)
        if end == -1:
            raise PolynomialParseError(f"unterminated term, expected '{CLOSE}'", start)
        tokens = source[start + 1 : end].split()
        if len(tokens) < 2:
            raise PolynomialParseError("term needs a coefficient and an exponent", start)
        try:
            coefficient = domain.parse(tokens[0])
        except (ValueError, ArithmeticError) as e:
            raise PolynomialParseError(f"bad coefficient {tokens[0]!r}", start) from e
        try:
            exponent = int(tokens[1])
        except ValueError as e:
            raise PolynomialParseError(f"bad exponent {tokens[1]!r}", start) from e

        if not domain.is_negligible(coefficient):
            terms.append((coefficient, exponent))
        start = source.find(OPEN, end + 1)

    # common case is input already in descending order
    resorted = has_inversion(e for _, e in terms)
    if resorted:
        sort_descending(terms)
    logger.debug("parsed %d terms (resorted=%s)", len(terms), resorted)
    return terms
