# apps/cli/run.py
"""
CLI entry point for benchmarking guessing strategies.

This script:
  1) Validates the candidate list (prints counts + SHA, length histogram).
  2) Loads the list and instantiates the requested solver.
  3) Plays one game per secret (robco.harness.iter_batch) with a live
     progress indicator and writes:
       - CSV:  per-case results + guess/correctness history columns
       - JSON: manifest with config and the candidate-list report
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger
from tqdm import tqdm

from robco.datasets import validate_candidates, pretty_summary, load_candidates
from robco.harness import iter_batch, write_report, DEFAULT_MAX_ATTEMPTS
from robco.solvers import create_solver, get_solver_ids

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    """
    Parse CLI args, validate the candidates, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="robco: benchmark guessing strategies")
    ap.add_argument("--candidates", required=True,
                    help="path to candidate passwords (one per line)")
    ap.add_argument("--solver", default="filtration",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="guesses allowed before the terminal locks")
    ap.add_argument("--sample", type=int,
                    help="play only this many secrets (drawn deterministically by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    if args.max_attempts < 1:
        ap.error("--max-attempts must be at least 1")
    if args.sample is not None and args.sample < 1:
        ap.error("--sample must be at least 1")

    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose else logging.INFO)

    # 1) Validate the list and print a one-liner summary
    rep = validate_candidates(args.candidates)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)
    if not rep["passed"]:
        log.error("no usable candidates in %s", args.candidates)
        return 1

    # 2) Load list and instantiate solver
    candidates = load_candidates(args.candidates)
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        log.error("%s", e)
        return 1

    total = min(args.sample, len(candidates)) if args.sample else len(candidates)
    games = iter_batch(solver, candidates, max_attempts=args.max_attempts,
                       seed=args.seed, sample=args.sample)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        games = tqdm(games, total=total, ncols=80, desc="Hacking", unit="game")

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Run batch with live progress
    for idx, r in enumerate(games, 1):
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    print(f"Solved {wins}/{len(results)} terminals with {solver.id} "
          f"(max {args.max_attempts} attempts)")

    # 5) Write outputs (CSV + manifest)
    csv_path, manifest_path = write_report(
        results, args.outdir, max_attempts=args.max_attempts,
        manifest={"config": vars(args), "candidates": rep, "solver_id": solver.id},
    )

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
