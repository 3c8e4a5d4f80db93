# (C) 2024 Irreducible Inc.

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

Term = tuple[T, int]  # (coefficient, exponent)


def exponent_of(term: Term) -> int:
    return term[1]


def sort_descending(terms: list[Term]) -> None:
    """Sorts terms in place by descending exponent. Terms with equal exponents keep their relative order."""
    terms.sort(key=exponent_of, reverse=True)


def has_inversion(exponents: Iterable[int]) -> bool:
    """Whether some exponent is greater than the one immediately before it."""
    last = None
    for exponent in exponents:
        if last is not None and exponent > last:
            return True
        last = exponent
    return False


def collapse_sorted(terms: list[Term], zero: T) -> list[Term]:
    """Sums runs of equal exponents in a list already sorted by exponent.

    Returns one term per distinct exponent, in the order of the input. Coefficients that sum to zero are kept.
    """
    collapsed: list[Term] = []
    if not terms:
        return collapsed
    exponent = terms[0][1]
    coefficient = zero
    for c, e in terms:
        if e == exponent:
            coefficient = coefficient + c
        else:
            collapsed.append((coefficient, exponent))
            exponent = e
            coefficient = c
    collapsed.append((coefficient, exponent))
    return collapsed


def is_canonical(terms: list[Term]) -> bool:
    """Whether exponents are strictly descending, i.e. unique and in canonical order."""
    return all(terms[i][1] > terms[i + 1][1] for i in range(len(terms) - 1))


def drop_negligible(terms: Iterable[Term], is_negligible: Callable[[T], bool]) -> list[Term]:
    return [(c, e) for c, e in terms if not is_negligible(c)]
