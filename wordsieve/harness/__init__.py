from .core import run_case, run_batch, summarize
from .io import write_results, format_rounds, parse_rounds

__all__ = ["run_case", "run_batch", "summarize", "write_results", "format_rounds", "parse_rounds"]
