"""
Standard normal distribution functions via polynomial approximations.

The cumulative function uses the five-coefficient rational approximation
(Abramowitz & Stegun 26.2.17, absolute error below 7.5e-8) with an asymptotic
tail beyond |x| > 7. The inverse cumulative function combines the
Beasley-Springer approximation in the centre with Moro's polynomial in the
tails, as presented in Joshi, "C++ Design Patterns and Derivatives Pricing".
"""

import math

from quantmath.distributions.base import DistributionFunction

INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)

# Abramowitz & Stegun 26.2.17
CDF_SCALE = 0.2316419
CDF_COEFFS = (
    0.319381530,
    -0.356563782,
    1.781477937,
    -1.821255978,
    1.330274429,
)
CDF_TAIL_CUTOFF = 7.0

# Beasley-Springer (central region)
BS_NUMERATOR = (
    2.50662823884,
    -18.61500062529,
    41.39119773534,
    -25.44106049637,
)
BS_DENOMINATOR = (
    -8.47351093090,
    23.08336743743,
    -21.06224101826,
    3.13082909833,
)
BS_REGION = 0.42

# Moro (tails)
MORO_COEFFS = (
    0.3374754822726147,
    0.9761690190917186,
    0.1607979714918209,
    0.0276438810333863,
    0.0038405729373609,
    0.0003951896511919,
    0.0000321767881768,
    0.0000002888167364,
    0.0000003960315187,
)


def _horner(coeffs: tuple[float, ...], x: float) -> float:
    """Evaluate sum(coeffs[i] * x**i)."""
    result = 0.0
    for c in reversed(coeffs):
        result = result * x + c
    return result


class NormalDistribution(DistributionFunction):
    """
    Standard normal N(0, 1) distribution functions.

    The class carries no state. A single shared instance is created at import
    time and returned by ``NormalDistribution.instance()``; it is safe to use
    from several threads without locking.
    """

    @classmethod
    def instance(cls) -> "NormalDistribution":
        """Return the shared process-wide instance."""
        return _NORMAL

    def density(self, x: float) -> float:
        """
        Probability density function.

        Parameters
        ----------
        x : float
            Input value

        Returns
        -------
        float
            φ(x) = exp(-x²/2)/√(2π)
        """
        return INV_SQRT_2PI * math.exp(-0.5 * x * x)

    def cumulative(self, x: float) -> float:
        """
        Cumulative distribution function P(Z <= x).

        Parameters
        ----------
        x : float
            Input value

        Returns
        -------
        float
            Approximate CDF value, absolute error below 7.5e-8

        Notes
        -----
        For x < -7 the tail is approximated by φ(x)/√(1 + x²); for x > 7 the
        value is obtained by reflection, 1 - N(-x).
        """
        if x < -CDF_TAIL_CUTOFF:
            return self.density(x) / math.sqrt(1.0 + x * x)
        if x > CDF_TAIL_CUTOFF:
            return 1.0 - self.cumulative(-x)

        t = 1.0 / (1.0 + CDF_SCALE * abs(x))
        result = 1.0 - self.density(x) * t * _horner(CDF_COEFFS, t)

        # The approximation is one-sided; reflect into the lower half
        if x <= 0.0:
            result = 1.0 - result
        return result

    def inverse_cumulative(self, p: float) -> float:
        """
        Inverse cumulative distribution function (quantile).

        Parameters
        ----------
        p : float
            Probability in the open interval (0, 1)

        Returns
        -------
        float
            x such that N(x) ≈ p

        Raises
        ------
        ValueError
            If p is not strictly between 0 and 1

        Notes
        -----
        Uses Beasley-Springer for |p - 0.5| < 0.42 and Moro's tail polynomial
        in log(-log(p)) otherwise. The approximation is only meaningful on
        (0, 1), so other inputs are rejected rather than evaluated.
        """
        if not 0.0 < p < 1.0:
            raise ValueError(f"probability p must be in (0, 1), got {p}")

        x = p - 0.5

        if abs(x) < BS_REGION:
            y = x * x
            return x * _horner(BS_NUMERATOR, y) / (_horner(BS_DENOMINATOR, y) * y + 1.0)

        r = p if x <= 0.0 else 1.0 - p
        r = math.log(-math.log(r))
        r = _horner(MORO_COEFFS, r)

        if x < 0.0:
            r = -r
        return r


_NORMAL = NormalDistribution()


def norm_pdf(x: float) -> float:
    """Standard normal density, see :meth:`NormalDistribution.density`."""
    return _NORMAL.density(x)


def norm_cdf(x: float) -> float:
    """Standard normal CDF, see :meth:`NormalDistribution.cumulative`."""
    return _NORMAL.cumulative(x)


def norm_inv_cdf(p: float) -> float:
    """Standard normal quantile, see :meth:`NormalDistribution.inverse_cumulative`."""
    return _NORMAL.inverse_cumulative(p)
