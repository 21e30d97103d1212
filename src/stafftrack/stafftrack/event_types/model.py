from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class EventType:
    """Domain entity: a kind of event (sick leave, class cover, ...).

    `default_value` is only the value proposed for new logs of this type;
    logs keep their own value and are never re-synced with it.
    `color` is a display token passed through untouched.
    """

    id: str
    name: str
    description: str
    default_value: Number
    color: str
