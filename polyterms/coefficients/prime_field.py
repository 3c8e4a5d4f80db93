# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import Type

from galois import GF, FieldArray

from .domain import CoefficientDomain


class PrimeFieldDomain(CoefficientDomain[FieldArray]):
    """Coefficients in the prime field GF(p), backed by galois.

    Grammar tokens are integers and are reduced mod p, so `[-1 2]` over GF(7) is the term 6x². A coefficient is
    negligible only when it is exactly zero, and evaluation stays inside the field: there is no wider type to
    accumulate in.
    """

    def __init__(self, prime: int) -> None:
        self.p = prime
        self.field: Type[FieldArray] = GF(prime)  # raises ValueError when p is not a prime power
        if self.field.degree != 1:
            raise ValueError(f"{prime} is not a prime")

    def parse(self, token: str) -> FieldArray:
        return self.from_int(int(token))

    def from_int(self, val: int) -> FieldArray:
        return self.field(val % self.p)

    def is_negligible(self, coeff: FieldArray) -> bool:
        return bool(coeff == self.field(0))

    def widen(self, value: FieldArray | int) -> FieldArray:
        if isinstance(value, FieldArray):
            return value
        return self.from_int(value)

    def accumulator_zero(self) -> FieldArray:
        return self.zero()

    def narrow(self, acc: FieldArray) -> FieldArray:
        return acc

    def format(self, coeff: FieldArray) -> str:
        return str(int(coeff))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeFieldDomain):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash((PrimeFieldDomain, self.p))

    def __repr__(self) -> str:
        return f"PrimeFieldDomain({self.p})"
