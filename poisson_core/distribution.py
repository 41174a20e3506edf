from __future__ import annotations

import logging

from . import functions as F
from .errors import InvalidArgument
from .validation import coerce_lambda


log = logging.getLogger("poisson_core.distribution")


class Poisson:
    """Poisson distribution with a single validated rate parameter.

    The rate lives in ``lambda_`` (``lambda`` is reserved in Python). Derived
    statistics are properties recomputed from the current rate on every access,
    and the evaluators read the rate at call time, so reassigning ``lambda_``
    takes effect immediately.

    Instances are plain mutable objects without internal locking. Share one
    across threads only under external synchronization, or derive per-thread
    copies with ``with_lambda``.

    Example:
      >>> dist = Poisson(2.0)
      >>> round(dist.pmf(3.0), 3)
      0.18
      >>> dist.quantile(0.5)
      2.0
    """

    def __init__(self, lambda_: float = 1.0):
        self._lambda = coerce_lambda(lambda_, context="invalid argument")

    def __repr__(self) -> str:
        return f"Poisson(lambda_={self._lambda!r})"

    @property
    def lambda_(self) -> float:
        return self._lambda

    @lambda_.setter
    def lambda_(self, value: float) -> None:
        try:
            new = coerce_lambda(value, context="invalid assignment")
        except InvalidArgument:
            log.debug("rejected lambda_=%r (keeping %r)", value, self._lambda)
            raise
        log.debug("lambda_ %r -> %r", self._lambda, new)
        self._lambda = new

    def with_lambda(self, value: float) -> "Poisson":
        """Return a new distribution with rate ``value``; ``self`` is unchanged."""
        return type(self)(value)

    # Derived statistics

    @property
    def entropy(self) -> float:
        return F.entropy(self._lambda)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis, 1/lambda."""
        return F.kurtosis(self._lambda)

    @property
    def mean(self) -> float:
        return F.mean(self._lambda)

    @property
    def median(self) -> float:
        return F.median(self._lambda)

    @property
    def mode(self) -> float:
        return F.mode(self._lambda)

    @property
    def skewness(self) -> float:
        return F.skewness(self._lambda)

    @property
    def stdev(self) -> float:
        return F.stdev(self._lambda)

    @property
    def variance(self) -> float:
        return F.variance(self._lambda)

    # Evaluators

    def cdf(self, x: float) -> float:
        return F.cdf(x, self._lambda)

    def logpmf(self, x: float) -> float:
        return F.logpmf(x, self._lambda)

    def mgf(self, t: float) -> float:
        return F.mgf(t, self._lambda)

    def pmf(self, x: float) -> float:
        return F.pmf(x, self._lambda)

    def quantile(self, p: float) -> float:
        return F.quantile(p, self._lambda)
