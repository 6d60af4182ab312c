"""
Time-varying parameters bound to an integration strategy.
"""

import copy
import logging
from typing import Generic, TypeVar

from quantmath.config import Time
from quantmath.integration.strategies import IntegrationStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MovedFromError(RuntimeError):
    """Raised when a Parameter is used after its contents were moved out."""


class Parameter(Generic[T]):
    """
    A quantity of type T whose integral over time is given by one strategy.

    A Parameter exclusively owns its value and its strategy. Implicit copies
    (``copy.copy`` / ``copy.deepcopy``) are refused; use :meth:`clone` for an
    independent duplicate and :meth:`move` / :meth:`assign` to transfer
    ownership.

    Parameters
    ----------
    initial_value : T
        Value held by the parameter
    strategy : IntegrationStrategy[T]
        Strategy used by :meth:`integrate` and :meth:`mean`
    """

    def __init__(self, initial_value: T, strategy: IntegrationStrategy[T]):
        if not isinstance(strategy, IntegrationStrategy):
            raise ValueError("strategy must be an IntegrationStrategy")
        self._object = initial_value
        self._strategy = strategy
        self._moved = False

    def __copy__(self):
        raise TypeError("Parameter cannot be copied implicitly; use clone()")

    def __deepcopy__(self, memo):
        raise TypeError("Parameter cannot be copied implicitly; use clone()")

    def __repr__(self) -> str:
        if self._moved:
            return "Parameter(<moved-from>)"
        return f"Parameter(object={self._object!r}, strategy={type(self._strategy).__name__})"

    def _check_alive(self) -> None:
        if self._moved:
            raise MovedFromError("Parameter has been moved from and holds no value")

    @property
    def is_moved(self) -> bool:
        """True once the contents have been moved to another Parameter."""
        return self._moved

    @property
    def object(self) -> T:
        self._check_alive()
        return self._object

    @property
    def strategy(self) -> IntegrationStrategy[T]:
        self._check_alive()
        return self._strategy

    def integrate(self, t1: Time, t2: Time) -> T:
        """Integral over [t1, t2] as computed by the bound strategy."""
        self._check_alive()
        return self._strategy.integrate(t1, t2)

    def mean(self, t1: Time, t2: Time) -> T:
        """
        Time average over [t1, t2].

        Raises
        ------
        ValueError
            If the interval has zero width
        """
        self._check_alive()
        if t1 == t2:
            raise ValueError("mean requires t1 != t2 (zero-width interval)")
        return self.integrate(t1, t2) / (t2 - t1)

    def clone(self) -> "Parameter[T]":
        """Return an independent deep copy of value and strategy."""
        self._check_alive()
        return Parameter(copy.deepcopy(self._object), self._strategy.clone())

    def move(self) -> "Parameter[T]":
        """
        Transfer ownership into a new Parameter.

        This Parameter is left moved-from and may only be reassigned.
        """
        self._check_alive()
        target = Parameter(self._object, self._strategy)
        self._release()
        logger.debug("Moved %r", target)
        return target

    def assign(self, other: "Parameter[T]") -> "Parameter[T]":
        """
        Move-assign: take over the value and strategy of ``other``.

        Both are replaced together; ``other`` is left moved-from. Assigning
        a Parameter to itself is a no-op.
        """
        if not isinstance(other, Parameter):
            raise ValueError("other must be a Parameter")
        if other is self:
            return self
        other._check_alive()
        self._object, self._strategy = other._object, other._strategy
        self._moved = False
        other._release()
        return self

    def _release(self) -> None:
        self._object = None
        self._strategy = None
        self._moved = True
