"""
Integration strategies for time-varying quantities.

Each strategy integrates a quantity of type T over an interval [t1, t2]:

- AnalyticIntegration: exact, from a known antiderivative
- NumericIntegration: Newton-Cotes quadrature of the integrand
- DiscreteDataIntegration: uniform average of sampled values

None of them validate the ordering of t1 and t2; a reversed interval yields
the sign-flipped result.
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Generic, TypeVar

import numpy as np

from quantmath.config import IntegrationConfig, Time, get_config
from quantmath.integration.quadrature import create_quadrature

T = TypeVar("T")


class IntegrationStrategy(ABC, Generic[T]):
    """Interface for T-valued integration over an interval."""

    @abstractmethod
    def integrate(self, t1: Time, t2: Time) -> T:
        """Integrate over [t1, t2]."""

    def clone(self) -> "IntegrationStrategy[T]":
        """Return an independent deep copy of this strategy."""
        return copy.deepcopy(self)


class AnalyticIntegration(IntegrationStrategy[T]):
    """
    Integration through a closed-form antiderivative.

    Parameters
    ----------
    antiderivative : Callable[[float], T]
        Function F whose derivative is the integrand
    """

    def __init__(self, antiderivative: Callable[[Time], T]):
        if not callable(antiderivative):
            raise ValueError("antiderivative must be callable")
        self._antiderivative = antiderivative

    @property
    def antiderivative(self) -> Callable[[Time], T]:
        return self._antiderivative

    def integrate(self, t1: Time, t2: Time) -> T:
        return self._antiderivative(t2) - self._antiderivative(t1)


class NumericIntegration(IntegrationStrategy[T]):
    """
    Integration by composite Newton-Cotes quadrature.

    Parameters
    ----------
    integrand : Callable[[float], T]
        Function to integrate
    config : IntegrationConfig, optional
        Quadrature rule and interval count; defaults to the global
        configuration at construction time

    Notes
    -----
    Accuracy and cost are governed by the configured rule and interval count.
    """

    def __init__(self, integrand: Callable[[Time], T], config: IntegrationConfig | None = None):
        if not callable(integrand):
            raise ValueError("integrand must be callable")
        self._integrand = integrand
        self._config = config if config is not None else get_config()
        self._quadrature = create_quadrature(self._config.rule)

    @property
    def integrand(self) -> Callable[[Time], T]:
        return self._integrand

    @property
    def config(self) -> IntegrationConfig:
        """Quadrature settings fixed at construction."""
        return self._config

    def integrate(self, t1: Time, t2: Time) -> T:
        return self._quadrature(t1, t2, self._config.n_intervals, self._integrand)


class DiscreteDataIntegration(IntegrationStrategy[T]):
    """
    Integration from already-sampled values.

    Parameters
    ----------
    samples : Iterable[T]
        Ordered sampled values, real or complex; a private copy is stored

    Notes
    -----
    This is an approximation, not a weighted quadrature: the integral is
    ``(t2 - t1) / N * sum(samples)``, the interval length times the plain
    sample mean. Sample positions in time are ignored, so results are only
    sensible for samples evenly spread over the integration interval.
    """

    def __init__(self, samples: Iterable[T]):
        data = np.array(list(samples))
        if len(data) == 0:
            raise ValueError("samples must contain at least one value")
        self._samples = data

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the stored samples."""
        view = self._samples.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._samples.shape[0]

    def integrate(self, t1: Time, t2: Time) -> T:
        weight = (t2 - t1) / len(self)
        result = weight * self._samples.sum(axis=0)
        if np.ndim(result) == 0:
            return result.item()
        return result


class IntegrationType(Enum):
    """Kinds of integration strategy."""

    ANALYTIC = "analytic"
    NUMERIC = "numeric"
    DATAPOINTS = "datapoints"


def make_strategy(
    kind: IntegrationType | str,
    source: Any,
    config: IntegrationConfig | None = None,
) -> IntegrationStrategy:
    """
    Build an integration strategy of the requested kind.

    Parameters
    ----------
    kind : IntegrationType or str
        'analytic', 'numeric' or 'datapoints'
    source : callable or iterable
        Antiderivative (analytic), integrand (numeric) or samples (datapoints)
    config : IntegrationConfig, optional
        Quadrature settings for numeric integration

    Returns
    -------
    IntegrationStrategy
        Strategy bound to the given source
    """
    try:
        kind = IntegrationType(kind)
    except ValueError:
        raise ValueError(
            "IntegrationType should be one of 'analytic', 'numeric' or 'datapoints'"
        ) from None

    if kind is IntegrationType.ANALYTIC:
        return AnalyticIntegration(source)
    if kind is IntegrationType.NUMERIC:
        return NumericIntegration(source, config)
    return DiscreteDataIntegration(source)
