"""Command-line front end.

Examples:
  python -m poisson_core summary --lambda 4
  python -m poisson_core eval pmf 0 1 2 3 --lambda 2
  python -m poisson_core table --lambda 2 --stop 10

Defaults come from (highest first): command-line flags, a YAML config file
(--config or CONFIG_PATH; keys: lambda, log_level, max_rows), environment
variables (POISSON_LAMBDA, POISSON_LOG_LEVEL, POISSON_LOG_DIR,
POISSON_TABLE_MAX_ROWS).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import pandas as pd
import yaml

from . import settings
from .distribution import Poisson
from .errors import InvalidArgument
from .logging_config import setup_logging


log = logging.getLogger("poisson_core.cli")

STAT_NAMES = ("mean", "median", "mode", "variance", "stdev", "skewness", "kurtosis", "entropy")
EVALUATORS = ("cdf", "logpmf", "pmf", "mgf", "quantile")

# Upper probability used to pick the default end of `table`.
TABLE_TAIL_P = 1.0 - 1e-6


def load_config(path: Optional[str]) -> dict:
    path = path or os.getenv("CONFIG_PATH")
    if not path:
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _build_parser(cfg: dict) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--lambda",
        dest="lam",
        type=float,
        default=cfg.get("lambda", os.getenv("POISSON_LAMBDA", "1.0")),
        help="Rate parameter (mean), must be finite and > 0",
    )
    common.add_argument("--log-level", default=cfg.get("log_level", settings.LOG_LEVEL))
    common.add_argument("--log-dir", default=os.getenv("POISSON_LOG_DIR"), help="Also write a daily log file here")

    ap = argparse.ArgumentParser(prog="poisson_core", description="Evaluate a Poisson distribution.")
    ap.add_argument("--config", help="YAML config file (defaults to CONFIG_PATH)")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("summary", parents=[common], help="Print the derived statistics")

    p_eval = sub.add_parser("eval", parents=[common], help="Evaluate cdf/logpmf/pmf/mgf/quantile")
    p_eval.add_argument("function", choices=EVALUATORS)
    p_eval.add_argument("values", nargs="+", type=float)

    p_table = sub.add_parser("table", parents=[common], help="Tabulate pmf/logpmf/cdf over integers")
    p_table.add_argument("--start", type=int, default=0)
    p_table.add_argument("--stop", type=int, default=None, help="Inclusive; defaults to the 1-1e-6 quantile")
    p_table.add_argument(
        "--max-rows",
        type=int,
        default=str(cfg["max_rows"]) if "max_rows" in cfg else settings.TABLE_MAX_ROWS,
    )
    return ap


def build_table(dist: Poisson, start: int, stop: int) -> pd.DataFrame:
    ks = list(range(max(0, start), stop + 1))
    return pd.DataFrame({
        "k": ks,
        "pmf": [dist.pmf(k) for k in ks],
        "logpmf": [dist.logpmf(k) for k in ks],
        "cdf": [dist.cdf(k) for k in ks],
    })


def _run_summary(dist: Poisson) -> None:
    print(f"lambda\t{dist.lambda_!r}")
    for name in STAT_NAMES:
        print(f"{name}\t{getattr(dist, name)!r}")


def _run_eval(dist: Poisson, function: str, values: List[float]) -> None:
    fn = getattr(dist, function)
    for v in values:
        print(f"{v!r}\t{fn(v)!r}")


def _run_table(dist: Poisson, start: int, stop: Optional[int], max_rows: int) -> int:
    if max_rows < 1:
        print(f"error: --max-rows must be >= 1 (got {max_rows})", file=sys.stderr)
        return 2
    if stop is None:
        stop = int(dist.quantile(TABLE_TAIL_P))
    if stop < start:
        print(f"error: --stop ({stop}) must be >= --start ({start})", file=sys.stderr)
        return 2
    if stop - max(0, start) + 1 > max_rows:
        capped = max(0, start) + max_rows - 1
        log.warning("table truncated to %d rows (stop %d -> %d)", max_rows, stop, capped)
        stop = capped
    print(build_table(dist, start, stop).to_string(index=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    cfg = load_config(known.config)

    args = _build_parser(cfg).parse_args(argv)
    setup_logging(args.log_level, component="cli", base_dir=args.log_dir)

    try:
        dist = Poisson(args.lam)
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    log.debug("command=%s %r", args.command, dist)
    if args.command == "summary":
        _run_summary(dist)
    elif args.command == "eval":
        _run_eval(dist, args.function, args.values)
    elif args.command == "table":
        return _run_table(dist, args.start, args.stop, args.max_rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
