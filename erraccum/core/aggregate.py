# erraccum/core/aggregate.py
from __future__ import annotations

from typing import Optional, Sequence

from .errors import AccumulatedError
from .record import ErrorRecord
from .render import encode_items


def build_aggregate(records: Sequence[ErrorRecord]) -> Optional[AccumulatedError]:
    """
    Combine records into one AccumulatedError, or None if there are none.

    message / name are JSON arrays in record order; message entries keep
    their original types.
    """
    if not records:
        return None

    snapshot = tuple(records)
    return AccumulatedError(
        message=encode_items(r.message for r in snapshot),
        name=encode_items(r.name for r in snapshot),
        trace="\n".join(r.trace for r in snapshot),
        records=snapshot,
    )
