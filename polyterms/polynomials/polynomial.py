# (C) 2024 Irreducible Inc.

from __future__ import annotations

from copy import deepcopy
from typing import Any, Generic, Iterable, Iterator, Optional, Self, TypeVar

from ..coefficients.domain import FLOAT, CoefficientDomain
from ..utils.utils import Term
from .exceptions import EmptyPolynomialError
from .multiplication import multiply_combine, multiply_group
from .parsing import parse_terms

T = TypeVar("T")


class Polynomial(Generic[T]):
    """A single-variable polynomial stored as a sequence of (coefficient, exponent) terms.

    Exponents are integers and may be negative. Parsing and both products leave the terms in canonical form (one term
    per exponent, by descending exponent), and `max_degree` and the index accessors rely on that order. The empty
    polynomial is the zero polynomial. A polynomial never changes after construction; every product is a new one.
    """

    def __init__(self, domain: CoefficientDomain[T] = FLOAT, source: Optional[str] = None) -> None:
        if not isinstance(domain, CoefficientDomain):
            raise TypeError(f"domain must be a CoefficientDomain, not {type(domain).__name__}")
        self.domain = domain
        self._terms: list[Term] = [] if source is None else parse_terms(source, domain)

    @classmethod
    def from_terms(cls, domain: CoefficientDomain[T], terms: Iterable[Term]) -> Self:
        """Builds a polynomial holding exactly `terms`, in the given order. Nothing is merged, sorted or dropped."""
        polynomial = cls(domain)
        polynomial._terms = [(c, int(e)) for c, e in terms]
        return polynomial

    @property
    def terms(self) -> tuple[Term, ...]:
        return tuple(self._terms)

    def copy(self) -> Self:
        """An independent copy. Coefficients are copied too; galois field elements are mutable arrays."""
        return self.from_terms(self.domain, [(deepcopy(c), e) for c, e in self._terms])

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.from_terms(self.domain, [(deepcopy(c, memo), e) for c, e in self._terms])

    def _check_domain(self, other: Polynomial[T]) -> None:
        if self.domain != other.domain:
            raise ValueError(f"cannot multiply polynomials over {self.domain!r} and {other.domain!r}")

    def multiply_combine(self, other: Polynomial[T]) -> Polynomial[T]:
        """The product, computed by sorting all pairwise products and merging equal exponents."""
        self._check_domain(other)
        return self.from_terms(self.domain, multiply_combine(self._terms, other._terms, self.domain))

    def multiply_group(self, other: Polynomial[T]) -> Polynomial[T]:
        """The product, computed by accumulating pairwise products per exponent."""
        self._check_domain(other)
        return self.from_terms(self.domain, multiply_group(self._terms, other._terms, self.domain))

    def __mul__(self, other: Polynomial[T]) -> Polynomial[T]:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply_combine(other)

    def max_degree(self) -> int:
        """The exponent of the leading term."""
        if not self._terms:
            raise EmptyPolynomialError("the empty polynomial has no degree")
        return self._terms[0][1]

    def find_term(self, k: int) -> Optional[Term]:
        """The k-th term, or None when k is not a valid index. Negative indices are not valid."""
        if 0 <= k < len(self._terms):
            return self._terms[k]
        return None

    def exponent_at(self, k: int) -> int:
        # 0 for an invalid index, which is indistinguishable from a stored exponent of 0
        term = self.find_term(k)
        return 0 if term is None else term[1]

    def coefficient_at(self, k: int) -> T:
        term = self.find_term(k)
        return self.domain.zero() if term is None else term[0]

    def evaluate_wide(self, x: Any) -> Any:
        """Evaluates term by term, accumulating in the domain's accumulation type (double precision for reals)."""
        argument = self.domain.widen(x)
        result = self.domain.accumulator_zero()
        for c, e in self._terms:
            result = result + argument**e * self.domain.widen(c)
        return result

    def evaluate(self, x: Any) -> T:
        """Evaluates at x and converts the result back to the coefficient type."""
        return self.domain.narrow(self.evaluate_wide(x))

    def __call__(self, x: Any) -> T:
        return self.evaluate(x)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.domain != other.domain or len(self._terms) != len(other._terms):
            return False
        return all(bool(c1 == c2) and e1 == e2 for (c1, e1), (c2, e2) in zip(self._terms, other._terms))

    def to_source(self) -> str:
        """Renders the terms in the text form accepted by the constructor."""
        return " ".join(f"[{self.domain.format(c)} {e}]" for c, e in self._terms)

    def __str__(self) -> str:
        return self.to_source()

    def __repr__(self) -> str:
        return f"Polynomial({self.domain!r}, {self.to_source()!r})"
