"""
Abstract interface for univariate probability distributions.
"""

from abc import ABC, abstractmethod


class DistributionFunction(ABC):
    """Density, cumulative and inverse cumulative functions of a distribution."""

    @abstractmethod
    def density(self, x: float) -> float:
        """Probability density at x."""

    @abstractmethod
    def cumulative(self, x: float) -> float:
        """Probability P(X <= x)."""

    @abstractmethod
    def inverse_cumulative(self, p: float) -> float:
        """Value x such that cumulative(x) = p."""
