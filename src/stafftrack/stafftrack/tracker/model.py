from __future__ import annotations

from dataclasses import dataclass, field

from ..event_types.model import EventType
from ..logs.model import EventLog
from ..staff.model import Staff


@dataclass(frozen=True)
class AppData:
    """Aggregate root persisted as one document.

    `staff` and `event_types` keep insertion order; `logs` are newest-first
    by insertion, regardless of their `date`.
    """

    staff: tuple[Staff, ...] = field(default_factory=tuple)
    event_types: tuple[EventType, ...] = field(default_factory=tuple)
    logs: tuple[EventLog, ...] = field(default_factory=tuple)
