"""
Composite closed Newton-Cotes quadrature.

``create_quadrature(rule)`` returns a callable
``quadrature(t1, t2, n_intervals, integrand)`` evaluating the integral of
``integrand`` over [t1, t2]. The integrand may return floats or NumPy arrays of
a fixed shape; weights are contracted over the node axis.
"""

import logging
import numbers
from collections.abc import Callable
from typing import Any

import numpy as np

from quantmath.config import QuadratureRule, Time

logger = logging.getLogger(__name__)

# Per-block weights and their common factor (h multiplies the sum)
NEWTON_COTES_WEIGHTS = {
    QuadratureRule.TRAPEZOIDAL: (1.0 / 2.0, np.array([1.0, 1.0])),
    QuadratureRule.SIMPSONS: (1.0 / 3.0, np.array([1.0, 4.0, 1.0])),
    QuadratureRule.SIMPSONS_THREE_EIGHTHS: (3.0 / 8.0, np.array([1.0, 3.0, 3.0, 1.0])),
    QuadratureRule.BOOLES: (2.0 / 45.0, np.array([7.0, 32.0, 12.0, 32.0, 7.0])),
}

Quadrature = Callable[[Time, Time, int, Callable[[Time], Any]], Any]


def composite_weights(rule: QuadratureRule, n_intervals: int) -> np.ndarray:
    """
    Node weights of a composite Newton-Cotes rule on a unit-spaced grid.

    Parameters
    ----------
    rule : QuadratureRule
        Newton-Cotes formula
    n_intervals : int
        Number of panels; must be a positive multiple of the rule order

    Returns
    -------
    np.ndarray
        Array of shape (n_intervals + 1,); multiply by the step size to integrate
    """
    order = rule.value
    if n_intervals <= 0 or n_intervals % order != 0:
        raise ValueError(f"n_intervals must be a positive multiple of {order} for {rule.name}")

    factor, block = NEWTON_COTES_WEIGHTS[rule]
    weights = np.zeros(n_intervals + 1)
    for start in range(0, n_intervals, order):
        weights[start:start + order + 1] += block
    return factor * weights


def create_quadrature(rule: QuadratureRule) -> Quadrature:
    """
    Build a quadrature evaluator for the given Newton-Cotes rule.

    Parameters
    ----------
    rule : QuadratureRule
        Newton-Cotes formula

    Returns
    -------
    Callable
        ``quadrature(t1, t2, n_intervals, integrand)``

    Notes
    -----
    The interval count is rounded up to the next multiple of the rule order,
    so Simpson's rule with 1001 intervals evaluates 1002 panels.
    """
    if rule not in NEWTON_COTES_WEIGHTS:
        raise ValueError(f"Unknown quadrature rule: {rule!r}")

    order = rule.value

    def quadrature(t1: Time, t2: Time, n_intervals: int, integrand: Callable[[Time], Any]):
        if (
            isinstance(n_intervals, bool)
            or not isinstance(n_intervals, numbers.Integral)
            or n_intervals <= 0
        ):
            raise ValueError("n_intervals must be a positive integer")

        n_panels = -(-n_intervals // order) * order
        weights = composite_weights(rule, n_panels)
        nodes = np.linspace(t1, t2, n_panels + 1)
        h = (t2 - t1) / n_panels

        values = np.asarray([integrand(t) for t in nodes])
        result = h * np.tensordot(weights, values, axes=(0, 0))

        if np.ndim(result) == 0:
            return result.item()
        return result

    logger.debug("Created %s quadrature (order %d)", rule.name, order)
    return quadrature
