from .core import run_case, iter_batch, run_batch, pick_secrets, DEFAULT_MAX_ATTEMPTS
from .io import write_csv, write_report

__all__ = [
    "run_case", "iter_batch", "run_batch", "pick_secrets", "DEFAULT_MAX_ATTEMPTS",
    "write_csv", "write_report",
]
