from __future__ import annotations
from pathlib import Path
from typing import List


def load_candidates(p: Path | str) -> List[str]:
    """
    Candidate passwords from a UTF-8 file: one per line, surrounding
    whitespace stripped, blanks dropped, duplicates dropped (first
    occurrence wins).

    Case is kept as-is; terminal passwords compare exactly.
    Raises FileNotFoundError if the path doesn't exist.
    """
    seen, out = set(), []
    for ln in Path(p).read_text(encoding="utf-8").splitlines():
        w = ln.strip()
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return out
