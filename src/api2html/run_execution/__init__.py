"""Run execution domain exports."""

from .documentation_run_use_case import RunExecutionError, execute_documentation_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_documentation_run",
]
