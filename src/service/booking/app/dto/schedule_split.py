from datetime import datetime, timezone
from typing import Generic, List, Optional, Protocol, Sequence, TypeVar

import attrs


class _HasStartAt(Protocol):
    @property
    def start_at(self) -> datetime: ...


T = TypeVar('T', bound=_HasStartAt)


@attrs.define(frozen=True)
class UpcomingAndPast(Generic[T]):
    upcoming: List[T]
    past: List[T]


def split_upcoming_and_past(items: Sequence[T], *, now: Optional[datetime] = None) -> UpcomingAndPast[T]:
    """
    Partition by `start_at > now`: a slot starting exactly now counts as past.

    Every item lands in exactly one list; input order is preserved.
    """
    now = now or datetime.now(timezone.utc)
    upcoming: List[T] = []
    past: List[T] = []
    for item in items:
        (upcoming if item.start_at > now else past).append(item)
    return UpcomingAndPast(upcoming=upcoming, past=past)
