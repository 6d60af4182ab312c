"""
Global configuration for integration.

Holds the time and money aliases and the quadrature settings consumed by
numeric integration strategies.
"""

import logging
import numbers
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

Time = float
Money = float


class QuadratureRule(Enum):
    """Closed Newton-Cotes formulas, valued by the number of panels per block."""

    TRAPEZOIDAL = 1
    SIMPSONS = 2
    SIMPSONS_THREE_EIGHTHS = 3
    BOOLES = 4


INTEGRATION_CHOICE = QuadratureRule.SIMPSONS
NUM_INT_INTERVALS = 1000


@dataclass(frozen=True)
class IntegrationConfig:
    """
    Quadrature settings for numeric integration.

    Attributes
    ----------
    rule : QuadratureRule
        Newton-Cotes formula used by the quadrature provider
    n_intervals : int
        Number of subintervals the integration range is split into
    """

    rule: QuadratureRule = INTEGRATION_CHOICE
    n_intervals: int = NUM_INT_INTERVALS

    def __post_init__(self):
        if not isinstance(self.rule, QuadratureRule):
            raise ValueError(f"rule must be a QuadratureRule, got {self.rule!r}")
        if (
            isinstance(self.n_intervals, bool)
            or not isinstance(self.n_intervals, numbers.Integral)
            or self.n_intervals <= 0
        ):
            raise ValueError("n_intervals must be a positive integer")


_config = IntegrationConfig()


def get_config() -> IntegrationConfig:
    """Return the process-wide default integration configuration."""
    return _config


def set_config(config: IntegrationConfig) -> IntegrationConfig:
    """
    Replace the process-wide default integration configuration.

    Strategies already constructed keep the configuration they were built with.

    Returns
    -------
    IntegrationConfig
        The previous configuration, so callers can restore it
    """
    global _config
    if not isinstance(config, IntegrationConfig):
        raise ValueError("config must be an IntegrationConfig")
    previous = _config
    _config = config
    logger.debug(
        "Integration config set to rule=%s n_intervals=%d",
        config.rule.name,
        config.n_intervals,
    )
    return previous
