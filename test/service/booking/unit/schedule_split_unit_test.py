from datetime import datetime, timedelta, timezone

import attrs
import pytest

from src.service.booking.app.dto.schedule_split import split_upcoming_and_past


@attrs.define(frozen=True)
class _Slot:
    name: str
    start_at: datetime


@pytest.mark.unit
class TestSplitUpcomingAndPast:
    @pytest.fixture
    def now(self) -> datetime:
        return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def test_every_item_lands_in_exactly_one_list(self, now: datetime) -> None:
        # Arrange
        items = [_Slot(f's{i}', now + timedelta(hours=h)) for i, h in enumerate([-48, -1, 1, 24, -3])]

        # Act
        result = split_upcoming_and_past(items, now=now)

        # Assert
        assert len(result.upcoming) + len(result.past) == len(items)
        assert {s.name for s in result.upcoming} == {'s2', 's3'}
        assert {s.name for s in result.past} == {'s0', 's1', 's4'}

    def test_preserves_input_order(self, now: datetime) -> None:
        items = [_Slot('a', now + timedelta(days=2)), _Slot('b', now + timedelta(days=1))]

        result = split_upcoming_and_past(items, now=now)

        assert [s.name for s in result.upcoming] == ['a', 'b']

    def test_slot_starting_now_is_past(self, now: datetime) -> None:
        result = split_upcoming_and_past([_Slot('now', now)], now=now)

        assert result.upcoming == []
        assert [s.name for s in result.past] == ['now']

    def test_empty_input(self, now: datetime) -> None:
        result = split_upcoming_and_past([], now=now)

        assert result.upcoming == [] and result.past == []
