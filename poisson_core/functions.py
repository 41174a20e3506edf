"""Stateless Poisson formulas.

Every function takes the rate parameter explicitly and validates it on its own,
so each one can be used standalone. Invalid numeric input never raises:

  - lam that is NaN, infinite or <= 0 -> NaN
  - NaN in any argument               -> NaN

Special functions come from scipy.special.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.special import gammaincc, gammaln, ndtri

from . import settings


log = logging.getLogger("poisson_core.functions")

NAN = float("nan")
PINF = float("inf")
NINF = float("-inf")

_HALF_LN_TWO_PI_E = 0.5 * math.log(2.0 * math.pi * math.e)


def _bad_lambda(lam: float) -> bool:
    return math.isnan(lam) or math.isinf(lam) or lam <= 0.0


def _is_support_point(x: float) -> bool:
    return x >= 0.0 and math.isfinite(x) and x.is_integer()


# ---------------------------------------------------------------------------
# Moments and shape statistics
# ---------------------------------------------------------------------------


def mean(lam: float) -> float:
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return lam


def variance(lam: float) -> float:
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return lam


def stdev(lam: float) -> float:
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return math.sqrt(lam)


def skewness(lam: float) -> float:
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return 1.0 / math.sqrt(lam)


def kurtosis(lam: float) -> float:
    """Excess kurtosis."""
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return 1.0 / lam


def mode(lam: float) -> float:
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    return float(math.floor(lam))


def median(lam: float) -> float:
    """Approximate median floor(lam + 1/3 - 0.02/lam)."""
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    v = lam + 1.0 / 3.0 - 0.02 / lam
    # Subnormal lam sends 0.02/lam to inf.
    if not math.isfinite(v):
        return v
    return float(math.floor(v))


def entropy(lam: float) -> float:
    """Entropy in nats.

    Below settings.ENTROPY_ASYMPTOTIC_MIN_LAMBDA the exact series

      H = lam * (1 - ln lam) + exp(-lam) * sum_k lam^k ln(k!) / k!

    is summed over k in [0, lam + ENTROPY_TAIL_SDS * sqrt(lam) + 20]. At or above
    the threshold the asymptotic expansion is used:

      H ~ 0.5 ln(2 pi e lam) - 1/(12 lam) - 1/(24 lam^2) - 19/(360 lam^3)
    """
    lam = float(lam)
    if _bad_lambda(lam):
        return NAN
    if lam >= settings.ENTROPY_ASYMPTOTIC_MIN_LAMBDA:
        return (
            _HALF_LN_TWO_PI_E
            + 0.5 * math.log(lam)
            - 1.0 / (12.0 * lam)
            - 1.0 / (24.0 * lam * lam)
            - 19.0 / (360.0 * lam * lam * lam)
        )

    k_max = int(math.ceil(lam + settings.ENTROPY_TAIL_SDS * math.sqrt(lam) + 20.0))
    k = np.arange(k_max + 1, dtype=float)
    log_fact = gammaln(k + 1.0)
    weights = np.exp(k * math.log(lam) - lam - log_fact)
    return float(lam * (1.0 - math.log(lam)) + np.sum(weights * log_fact))


# ---------------------------------------------------------------------------
# Evaluators
# ---------------------------------------------------------------------------


def _cdf_unchecked(k: float, lam: float) -> float:
    return float(gammaincc(k + 1.0, lam))


def cdf(x: float, lam: float) -> float:
    """P(X <= x). Non-integer x is floored onto the support."""
    x = float(x)
    lam = float(lam)
    if math.isnan(x) or _bad_lambda(lam):
        return NAN
    if x < 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    return _cdf_unchecked(math.floor(x), lam)


def logpmf(x: float, lam: float) -> float:
    """ln P(X = x); -inf off the support (negative or non-integer x)."""
    x = float(x)
    lam = float(lam)
    if math.isnan(x) or _bad_lambda(lam):
        return NAN
    if not _is_support_point(x):
        return NINF
    return x * math.log(lam) - lam - float(gammaln(x + 1.0))


def pmf(x: float, lam: float) -> float:
    """P(X = x); 0 off the support."""
    lp = logpmf(x, lam)
    if math.isnan(lp):
        return NAN
    return math.exp(lp)


def mgf(t: float, lam: float) -> float:
    """E[exp(tX)] = exp(lam * (e^t - 1))."""
    t = float(t)
    lam = float(lam)
    if math.isnan(t) or _bad_lambda(lam):
        return NAN
    try:
        return math.exp(lam * math.expm1(t))
    except OverflowError:
        return PINF


def quantile(p: float, lam: float) -> float:
    """Smallest integer k >= 0 with cdf(k) >= p.

    p outside [0, 1] yields NaN; p == 1 yields +inf.
    """
    p = float(p)
    lam = float(lam)
    if math.isnan(p) or _bad_lambda(lam) or p < 0.0 or p > 1.0:
        return NAN
    if p == 0.0:
        return 0.0
    if p == 1.0:
        return PINF

    # Cornish-Fisher starting point, then walk to the exact boundary.
    sigma = math.sqrt(lam)
    z = float(ndtri(p))
    guess = lam + sigma * (z + (z * z - 1.0) / (6.0 * sigma))
    k = max(0.0, float(round(guess)))

    # Unit steps stop once k exceeds float integer precision.
    steps = 0
    if _cdf_unchecked(k, lam) >= p:
        while k > 0.0 and k - 1.0 != k and _cdf_unchecked(k - 1.0, lam) >= p:
            k -= 1.0
            steps += 1
    else:
        while k + 1.0 != k:
            k += 1.0
            steps += 1
            if _cdf_unchecked(k, lam) >= p:
                break

    log.debug("quantile p=%r lam=%r guess=%.3f result=%d steps=%d", p, lam, guess, int(k), steps)
    return k
