"""
Benchmark reports.

write_report() stores one batch as a pair of files sharing a UTC run id:
  - run_<id>.csv            one row per game (write_csv)
  - run_<id>_manifest.json  run configuration and summary
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import json
import time


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns: solver, secret, success, guesses, pool_size, time_ms, then
    guess_i / corr_i for every attempt up to max_attempts (blank when the
    game ended earlier).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "secret", "success", "guesses", "pool_size", "time_ms"]
    for i in range(1, max_attempts + 1):
        fields += [f"guess_{i}", f"corr_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "pool_size": r.get("pool_size", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            for i, (g, corr) in enumerate(r.get("history", []), start=1):
                row[f"guess_{i}"] = g
                row[f"corr_{i}"] = corr
            w.writerow(row)

    return str(p)


def write_report(results: List[Dict], outdir: str, *, max_attempts: int,
                 manifest: Dict) -> Tuple[str, str]:
    """
    Write the CSV and the JSON manifest for one batch into `outdir`.

    `manifest` is extended with run_id, num_cases and num_solved.
    Returns (csv_path, manifest_path).
    """
    run_id = time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)

    csv_path = write_csv(results, str(out / f"run_{run_id}.csv"), max_attempts)

    manifest = dict(manifest)
    manifest.update(
        run_id=run_id,
        num_cases=len(results),
        num_solved=sum(1 for r in results if r["success"]),
    )
    manifest_path = out / f"run_{run_id}_manifest.json"
    with manifest_path.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)

    return csv_path, str(manifest_path)
