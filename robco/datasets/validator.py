"""
Candidate-list validator.

What this module does:
- Validate a candidate password file (one password per line).
- Flag blank lines, duplicates and mixed password lengths; compute SHA-256
  of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty
  one-line summary.

Mixed lengths are legal (commonality truncates to the shorter string) but
unusual for a real terminal, where every password on screen has the same
length, so they are reported as an issue without failing validation.

Typical use:
    from robco.datasets import validate_candidates, pretty_summary
    rep = validate_candidates("words/terminal_7.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


@dataclass
class CandidateReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of non-blank lines
    unique_count: int    # distinct passwords after stripping
    blank_lines: int     # empty/whitespace-only lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # length -> count
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_candidates(path: str) -> Dict:
    """
    Validate a candidate file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see CandidateReport) with:
          - counts, SHA-256, blank/duplicate diagnostics, length histogram
          - `passed` boolean (file exists and has at least one password)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = CandidateReport(path, False, 0, 0, 0, "",
                              issues=[f"candidates file not found: {path}"])
        return asdict(rep)

    words: List[str] = []
    blanks = 0
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w:
                words.append(w)
            else:
                blanks += 1

    unique = set(words)
    lengths = Counter(len(w) for w in unique)
    issues: List[str] = []

    if not words:
        issues.append("candidates file contains 0 passwords")
    if blanks:
        issues.append(f"candidates has {blanks} blank line(s)")
    if len(words) != len(unique):
        issues.append(f"candidates contains {len(words) - len(unique)} duplicate line(s)")
    if len(lengths) > 1:
        issues.append(f"candidates have mixed lengths {sorted(lengths)}")

    rep = CandidateReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        blank_lines=blanks,
        sha256=_sha256_file(p),
        lengths=dict(sorted(lengths.items())),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        candidates=12 (uniq=12, sha=abc123def456) | lengths={7: 12} | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"candidates={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths={report['lengths']} | {status}"
    )
