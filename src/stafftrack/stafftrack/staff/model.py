from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff member whose events are tracked.

    The id is assigned at creation and never changes; the name may be renamed.
    """

    id: str
    name: str
