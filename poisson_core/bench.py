"""Micro-benchmarks for the Poisson distribution object.

Covers instantiation, lambda_ get/set, every derived statistic and every
evaluator. Statistics are timed while lambda_ is re-drawn each iteration so the
recompute path is measured, not a cached value.

Example:
  python -m poisson_core.bench --iterations 200000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np
import pandas as pd

from .distribution import Poisson
from .logging_config import setup_logging


log = logging.getLogger("poisson_core.bench")

EPS = float(np.finfo(float).eps)
FIXED_LAMBDA = 5.54


@dataclass(frozen=True)
class BenchResult:
    name: str
    iterations: int
    elapsed_s: float
    failures: int

    @property
    def ns_per_op(self) -> float:
        if self.iterations <= 0:
            return float("nan")
        return self.elapsed_s * 1e9 / self.iterations


def _time_case(name: str, op: Callable[[int], object], iterations: int) -> BenchResult:
    failures = 0
    t0 = time.perf_counter()
    for i in range(iterations):
        y = op(i)
        if isinstance(y, float) and math.isnan(y):
            failures += 1
    elapsed = time.perf_counter() - t0
    if failures:
        log.warning("%s: %d/%d results were NaN", name, failures, iterations)
    return BenchResult(name=name, iterations=iterations, elapsed_s=elapsed, failures=failures)


def _stat_case(name: str, dist: Poisson, lams: List[float]) -> Callable[[int], object]:
    def op(i: int) -> object:
        dist.lambda_ = lams[i]
        return getattr(dist, name)

    return op


def run_benchmarks(iterations: int = 100_000, seed: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    lams = (10.0 * rng.random(iterations) + EPS).tolist()
    # Kurtosis and skewness blow up near zero; keep those draws >= 1.
    lams_ge1 = (10.0 * rng.random(iterations) + 1.0 + EPS).tolist()
    xs = (10.0 * rng.random(iterations)).tolist()
    ts = rng.random(iterations).tolist()
    ps = rng.random(iterations).tolist()

    dist = Poisson(FIXED_LAMBDA)

    def set_lambda(i: int) -> object:
        dist.lambda_ = lams[i]
        return dist.lambda_

    cases: List[tuple] = [
        ("instantiation", lambda i: Poisson(lams[i]).lambda_),
        ("get:lambda", lambda i: dist.lambda_),
        ("set:lambda", set_lambda),
    ]
    for name in ("entropy", "mean", "median", "mode", "stdev", "variance"):
        cases.append((name, _stat_case(name, dist, lams)))
    for name in ("kurtosis", "skewness"):
        cases.append((name, _stat_case(name, dist, lams_ge1)))

    evaluators = Poisson(FIXED_LAMBDA)
    cases.extend([
        ("cdf", lambda i: evaluators.cdf(xs[i])),
        ("logpmf", lambda i: evaluators.logpmf(xs[i])),
        ("pmf", lambda i: evaluators.pmf(xs[i])),
        ("mgf", lambda i: evaluators.mgf(ts[i])),
        ("quantile", lambda i: evaluators.quantile(ps[i])),
    ])

    rows = []
    for name, op in cases:
        r = _time_case(name, op, iterations)
        log.info("%-13s %10.1f ns/op", r.name, r.ns_per_op)
        rows.append({
            "case": r.name,
            "iterations": r.iterations,
            "elapsed_s": r.elapsed_s,
            "ns_per_op": r.ns_per_op,
            "nan_results": r.failures,
        })
    return pd.DataFrame(rows)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark the Poisson distribution object.")
    ap.add_argument("--iterations", type=int, default=100_000)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--log-level", default=None)
    args = ap.parse_args(argv)

    if args.iterations <= 0:
        print("--iterations must be positive")
        return 2

    setup_logging(args.log_level, component="bench")
    df = run_benchmarks(iterations=args.iterations, seed=args.seed)
    print(df.to_string(index=False, float_format=lambda v: f"{v:.4g}"))
    return 0 if int(df["nan_results"].sum()) == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
