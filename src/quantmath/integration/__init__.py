"""
Integration package initialization.
"""

from quantmath.integration.parameter import MovedFromError, Parameter
from quantmath.integration.quadrature import composite_weights, create_quadrature
from quantmath.integration.strategies import (
    AnalyticIntegration,
    DiscreteDataIntegration,
    IntegrationStrategy,
    IntegrationType,
    NumericIntegration,
    make_strategy,
)

__all__ = [
    "AnalyticIntegration",
    "DiscreteDataIntegration",
    "IntegrationStrategy",
    "IntegrationType",
    "MovedFromError",
    "NumericIntegration",
    "Parameter",
    "composite_weights",
    "create_quadrature",
    "make_strategy",
]
