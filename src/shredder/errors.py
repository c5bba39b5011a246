# errors.py
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class ConversionError(Exception):
    """
    Structured conversion error.

    Only `str(err)` crosses the `convert()` boundary; `kind` and `details`
    are there for callers that drive the loader/normalizer directly.
    """
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class ParseError(ConversionError):
    def __init__(self, diagnostic: str, **details):
        super().__init__(
            kind="parse_error",
            message=f"Parse error: {diagnostic}",
            details=details,
        )


class NoJobsError(ConversionError):
    def __init__(self, reason: str = "missing"):
        super().__init__(
            kind="no_jobs",
            message="No jobs found in YAML.",
            details={"reason": reason},
        )


class NoStepsError(ConversionError):
    def __init__(self, job_count: int = 0):
        super().__init__(
            kind="no_steps",
            message="No steps found in any job.",
            details={"jobs": job_count},
        )
