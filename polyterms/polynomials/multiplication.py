# (C) 2024 Irreducible Inc.

"""Two ways of multiplying term lists.

Both return the product in canonical form: one term per distinct exponent, by descending exponent. If either operand
has no terms the product is the single term (0, 0) rather than an empty list. Neither drops coefficients that cancel
to zero, so e.g. (x + 1)(x − 1) keeps a 0x term.
"""

import logging
from typing import TypeVar

from ..coefficients.domain import CoefficientDomain
from ..utils.utils import Term, collapse_sorted, sort_descending

T = TypeVar("T")

logger = logging.getLogger(__name__)


def zero_product(domain: CoefficientDomain[T]) -> list[Term]:
    return [(domain.zero(), 0)]


def multiply_combine(left: list[Term], right: list[Term], domain: CoefficientDomain[T]) -> list[Term]:
    """Sort-and-merge product: expand every pairwise product, sort by exponent, then sum runs of equal exponents."""
    if not left or not right:
        return zero_product(domain)
    expanded = [(c1 * c2, e1 + e2) for c1, e1 in left for c2, e2 in right]
    sort_descending(expanded)
    product = collapse_sorted(expanded, domain.zero())
    logger.debug("combine: %d x %d terms -> %d expanded -> %d", len(left), len(right), len(expanded), len(product))
    return product


def multiply_group(left: list[Term], right: list[Term], domain: CoefficientDomain[T]) -> list[Term]:
    """Accumulating product: sum every pairwise product straight into a table keyed by exponent."""
    if not left or not right:
        return zero_product(domain)
    accumulator: dict[int, T] = {}
    for c1, e1 in left:
        for c2, e2 in right:
            exponent = e1 + e2
            accumulator[exponent] = accumulator.get(exponent, domain.zero()) + c1 * c2
    product = [(accumulator[exponent], exponent) for exponent in sorted(accumulator)]
    sort_descending(product)
    logger.debug("group: %d x %d terms -> %d", len(left), len(right), len(product))
    return product
