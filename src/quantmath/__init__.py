"""
Quantitative finance math toolkit.

Standard normal distribution approximations and time-varying parameters
integrated through interchangeable strategies.
"""

from quantmath._version import __version__

# Configuration
from quantmath.config import (
    IntegrationConfig,
    Money,
    QuadratureRule,
    Time,
    get_config,
    set_config,
)

# Distributions
from quantmath.distributions.normal import (
    NormalDistribution,
    norm_cdf,
    norm_inv_cdf,
    norm_pdf,
)

# Integration
from quantmath.integration.parameter import MovedFromError, Parameter
from quantmath.integration.quadrature import create_quadrature
from quantmath.integration.strategies import (
    AnalyticIntegration,
    DiscreteDataIntegration,
    IntegrationStrategy,
    IntegrationType,
    NumericIntegration,
    make_strategy,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "IntegrationConfig",
    "Money",
    "QuadratureRule",
    "Time",
    "get_config",
    "set_config",
    # Distributions
    "NormalDistribution",
    "norm_cdf",
    "norm_inv_cdf",
    "norm_pdf",
    # Integration
    "AnalyticIntegration",
    "DiscreteDataIntegration",
    "IntegrationStrategy",
    "IntegrationType",
    "MovedFromError",
    "NumericIntegration",
    "Parameter",
    "create_quadrature",
    "make_strategy",
]
