from .core import MAX_GUESSES, run_case, run_batch, run_parallel
from .stats import Summary, summarize, rank_words, pretty_summary
from .io import write_csv, write_manifest, write_report

__all__ = [
    "MAX_GUESSES", "run_case", "run_batch", "run_parallel",
    "Summary", "summarize", "rank_words", "pretty_summary",
    "write_csv", "write_manifest", "write_report",
]
