# (C) 2024 Irreducible Inc.

from __future__ import annotations

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Callable, Generic, TypeVar

import numpy as np

T = TypeVar("T")

DEFAULT_TOLERANCE = 1e-6


class CoefficientDomain(ABC, Generic[T]):
    """The numeric type that polynomial coefficients are drawn from.

    A polynomial never inspects its coefficients directly. Everything that depends on the concrete coefficient type
    (reading a grammar token, deciding whether a coefficient counts as zero, and the precision used while evaluating)
    goes through the domain the polynomial was built with. Coefficients themselves are plain values that support
    `+`, `*` and `==` among each other.
    """

    @abstractmethod
    def parse(self, token: str) -> T:
        """Converts a single grammar token to a coefficient. Raises ValueError for tokens that are not literals."""
        pass

    @abstractmethod
    def from_int(self, val: int) -> T:
        pass

    def zero(self) -> T:
        return self.from_int(0)

    def one(self) -> T:
        return self.from_int(1)

    @abstractmethod
    def is_negligible(self, coeff: T) -> bool:
        """Whether the parser treats the coefficient as zero and drops its term."""
        pass

    @abstractmethod
    def widen(self, value: T) -> Any:
        """Converts a coefficient (or evaluation argument) to the accumulation type used by evaluation."""
        pass

    @abstractmethod
    def accumulator_zero(self) -> Any:
        pass

    @abstractmethod
    def narrow(self, acc: Any) -> T:
        """Converts an accumulated evaluation result back to the coefficient type."""
        pass

    def format(self, coeff: T) -> str:
        return str(coeff)


class RealDomain(CoefficientDomain[T]):
    """Real-valued coefficients built by a scalar constructor such as float, int, Fraction or a numpy scalar type.

    Evaluation accumulates in double precision (numpy.float64) whatever the scalar type is, and converts the sum back
    with the scalar constructor. For integer scalar types that conversion truncates toward zero.
    """

    def __init__(self, scalar_type: Callable[[Any], T], tolerance: float = DEFAULT_TOLERANCE) -> None:
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        self.scalar_type = scalar_type
        self.tolerance = tolerance

    def parse(self, token: str) -> T:
        return self.scalar_type(token)

    def from_int(self, val: int) -> T:
        return self.scalar_type(val)

    def is_negligible(self, coeff: T) -> bool:
        return not bool(abs(coeff) > self.tolerance)  # type: ignore[operator]

    def widen(self, value: T) -> np.float64:
        return np.float64(float(value))  # type: ignore[arg-type]

    def accumulator_zero(self) -> np.float64:
        return np.float64(0.0)

    def narrow(self, acc: np.float64) -> T:
        return self.scalar_type(acc)

    def format(self, coeff: T) -> str:
        if isinstance(coeff, float) and coeff.is_integer():
            return str(int(coeff))
        return str(coeff)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RealDomain):
            return NotImplemented
        return self.scalar_type is other.scalar_type and self.tolerance == other.tolerance

    def __hash__(self) -> int:
        return hash((RealDomain, self.scalar_type, self.tolerance))

    def __repr__(self) -> str:
        name = getattr(self.scalar_type, "__name__", repr(self.scalar_type))
        return f"RealDomain({name}, tolerance={self.tolerance!r})"


FLOAT: RealDomain[float] = RealDomain(float)
INTEGER: RealDomain[int] = RealDomain(int)
RATIONAL: RealDomain[Fraction] = RealDomain(Fraction)
