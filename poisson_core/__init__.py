"""Poisson distribution object and the standalone formulas behind it."""

from .distribution import Poisson
from .errors import InvalidArgument
from .functions import (
    cdf,
    entropy,
    kurtosis,
    logpmf,
    mean,
    median,
    mgf,
    mode,
    pmf,
    quantile,
    skewness,
    stdev,
    variance,
)

__all__ = [
    "Poisson",
    "InvalidArgument",
    "cdf",
    "entropy",
    "kurtosis",
    "logpmf",
    "mean",
    "median",
    "mgf",
    "mode",
    "pmf",
    "quantile",
    "skewness",
    "stdev",
    "variance",
]
