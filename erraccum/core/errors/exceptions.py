# erraccum/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..record import ErrorRecord


@dataclass(eq=False)
class AccumulatedError(Exception):
    """
    The aggregate failure raised by ``Accumulator.try_()``.

    ``message`` and ``name`` are JSON arrays of the per-record messages and
    names in insertion order; ``trace`` joins every record trace with line
    breaks.
    """
    message: str
    name: str
    trace: str
    records: Tuple["ErrorRecord", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        # Exception pickles only args; rebuild from every field instead
        return (type(self), (self.message, self.name, self.trace, self.records))

    @property
    def messages(self) -> List[Any]:
        return [r.message for r in self.records]

    @property
    def names(self) -> List[str]:
        return [r.name for r in self.records]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "trace": self.trace,
            "records": [r.to_dict() for r in self.records],
        }

    def to_record(self) -> "ErrorRecord":
        from ..record import ErrorRecord
        return ErrorRecord(name=self.name, message=self.message, trace=self.trace)


class ConfigError(ValueError):
    """
    Raised when an accumulator is built from an invalid configuration.
    """

    def __init__(self, issues: List[Any]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(f"[{i.path}] {i.message}" for i in self.issues))
