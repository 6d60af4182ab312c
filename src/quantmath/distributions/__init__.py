"""
Probability distribution functions.
"""

from quantmath.distributions.base import DistributionFunction
from quantmath.distributions.normal import (
    NormalDistribution,
    norm_cdf,
    norm_inv_cdf,
    norm_pdf,
)

__all__ = [
    "DistributionFunction",
    "NormalDistribution",
    "norm_cdf",
    "norm_inv_cdf",
    "norm_pdf",
]
