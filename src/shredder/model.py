# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class Step:
    """
    A single step inside a workflow job.

    Either a shell step (`run`) or an action step (`uses` + `with`).
    A step may carry neither, in which case nothing is emitted for it.
    """
    name: Optional[str] = None
    run: Optional[str] = None
    uses: Optional[str] = None
    with_: Dict[str, Any] = field(default_factory=dict)
    raw: Any = None  # the element exactly as it appeared in the document

    @classmethod
    def from_raw(cls, raw: Any) -> Step:
        if not isinstance(raw, Mapping):
            return cls(raw=raw)

        params = raw.get("with")
        return cls(
            name=_as_text(raw.get("name")),
            run=_as_text(raw.get("run")),
            uses=_as_text(raw.get("uses")),
            with_=dict(params) if isinstance(params, Mapping) else {},
            raw=raw,
        )

    @property
    def is_run(self) -> bool:
        return bool(self.run)

    @property
    def is_uses(self) -> bool:
        return bool(self.uses)

    @property
    def action(self) -> Optional[str]:
        """`owner/action` without the `@ref` suffix."""
        if not self.uses:
            return None
        return self.uses.split("@", 1)[0]


@dataclass
class Job:
    """A named group of steps. `needs`, `strategy` and `if` are not modelled."""
    name: str
    steps: List[Step] = field(default_factory=list)


@dataclass
class WorkflowDocument:
    """Parsed workflow: jobs keyed by name, in declaration order."""
    jobs: Dict[str, Job]
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConversionResult:
    code: str
    error: Optional[str] = None

    @classmethod
    def success(cls, code: str) -> ConversionResult:
        return cls(code=code)

    @classmethod
    def failure(cls, error: str) -> ConversionResult:
        return cls(code="", error=error or "Conversion failed.")

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "error": self.error}


def _as_text(value: Any) -> Optional[str]:
    # YAML hands back ints/floats/bools for bare scalars (e.g. `run: 42`).
    # Falsy values (`run: false`, `run: 0`, `name: ""`) count as absent.
    if not value:
        return None
    return value if isinstance(value, str) else str(value)
