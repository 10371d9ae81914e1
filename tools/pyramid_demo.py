#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core import (
    NaivePyramidSolver,
    Pyramid,
    PyramidError,
    PyramidSolver,
    SolverMismatchError,
    TabulatingPyramidSolver,
    check_totals,
    generate_pyramid,
)

logger = logging.getLogger("pyramid_demo")

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_INVALID = 2


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def naive_max_rows() -> int:
    return _env_int("PYRAMID_NAIVE_MAX_ROWS", 24, lo=1, hi=40)


def load_pyramid_yaml(path: Path) -> Pyramid:
    """Load a pyramid from a YAML file holding a list of lists (or ``{levels: ...}``)."""
    obj: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(obj, Mapping):
        obj = obj.get("levels")
    if not isinstance(obj, list):
        raise TypeError(f"{path}: expected a list of levels")
    return Pyramid(obj)


def _solvers(choice: str) -> dict[str, PyramidSolver]:
    out: dict[str, PyramidSolver] = {}
    if choice in ("naive", "both"):
        out["naive"] = NaivePyramidSolver()
    if choice in ("tabulating", "both"):
        out["tabulating"] = TabulatingPyramidSolver()
    return out


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Maximum path total through an inverted pyramid")
    ap.add_argument("--grid", type=Path, default=None, help="YAML file with the pyramid levels")
    ap.add_argument("--rows", type=int, default=4)
    ap.add_argument("--range", dest="value_range", type=int, default=100)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--signed", action="store_true")
    ap.add_argument("--solver", choices=("naive", "tabulating", "both"), default="tabulating")
    ap.add_argument("--force", action="store_true", help="run the naive solver on large pyramids anyway")
    ap.add_argument("--show", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.grid is not None:
            pyramid = load_pyramid_yaml(args.grid)
        else:
            pyramid = generate_pyramid(args.rows, args.value_range, seed=args.seed, signed=args.signed)
    except (PyramidError, ValueError, TypeError, OSError, yaml.YAMLError) as exc:
        print(f"[pyramid-demo] FAIL (input): {exc}")
        return EXIT_INVALID

    limit = naive_max_rows()
    if args.solver in ("naive", "both") and pyramid.rows > limit and not args.force:
        print(f"[pyramid-demo] FAIL (input): naive solver limited to {limit} levels, got {pyramid.rows} (use --force)")
        return EXIT_INVALID

    if args.show:
        print(pyramid)

    solvers = _solvers(args.solver)
    totals: dict[str, int] = {}
    for name, solver in solvers.items():
        start = time.perf_counter()
        total = totals[name] = solver.pyramid_maximum_total(pyramid)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        print(f"[pyramid-demo] {name}: total={total} rows={pyramid.rows} elapsed_ms={elapsed_ms:.3f}")

    if len(solvers) > 1:
        try:
            total = check_totals(totals)
        except SolverMismatchError as exc:
            logger.error("cross-check failed: %s", exc)
            print(f"[pyramid-demo] FAIL (mismatch): {exc}")
            return EXIT_MISMATCH
        print(f"[pyramid-demo] OK: solvers agree on total={total}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
