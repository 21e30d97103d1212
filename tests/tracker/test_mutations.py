from __future__ import annotations

from stafftrack.event_types.model import EventType
from stafftrack.logs.model import EventLog
from stafftrack.staff.model import Staff
from stafftrack.tracker import mutations
from stafftrack.tracker.model import AppData


def make_log(log_id, staff_id="1", type_id="1", year="2024-25", value=1):
    return EventLog(
        id=log_id,
        staff_id=staff_id,
        event_type_id=type_id,
        date="2025-01-10",
        academic_year=year,
        value=value,
        notes="",
    )


def sample_data() -> AppData:
    return AppData(
        staff=(Staff("1", "Alice"), Staff("2", "Bob")),
        event_types=(
            EventType("1", "Sick Leave", "", 1, "#ef4444"),
            EventType("2", "Class Cover", "", -1, "#3b82f6"),
        ),
        logs=(
            make_log("a", staff_id="1", type_id="1", year="2024-25"),
            make_log("b", staff_id="2", type_id="2", year="2023-24", value=-1),
            make_log("c", staff_id="1", type_id="2", year="2023-24", value=-1),
            make_log("d", staff_id="2", type_id="1", year="2024-25"),
        ),
    )


def test_add_staff_appends_in_insertion_order():
    data = mutations.add_staff(sample_data(), Staff("3", "Charlie"))

    assert [s.id for s in data.staff] == ["1", "2", "3"]


def test_add_log_prepends_regardless_of_date():
    older = EventLog("z", "1", "1", "1999-01-01", "1998-99", 1, "")
    data = mutations.add_log(sample_data(), older)

    assert data.logs[0].id == "z"
    assert len(data.logs) == 5


def test_delete_staff_cascades_to_exactly_their_logs():
    before = sample_data()
    after = mutations.delete_staff(before, "1")

    assert [s.id for s in after.staff] == ["2"]
    assert [log.id for log in after.logs] == ["b", "d"]
    assert after.event_types == before.event_types


def test_delete_unknown_staff_is_a_noop():
    before = sample_data()

    assert mutations.delete_staff(before, "missing") == before


def test_delete_event_type_keeps_its_logs():
    before = sample_data()
    after = mutations.delete_event_type(before, "1")

    assert [t.id for t in after.event_types] == ["2"]
    assert after.logs == before.logs


def test_delete_log_removes_only_that_log():
    after = mutations.delete_log(sample_data(), "b")

    assert [log.id for log in after.logs] == ["a", "c", "d"]
    assert mutations.delete_log(after, "b") == after


def test_delete_logs_by_year_is_idempotent():
    once = mutations.delete_logs_by_year(sample_data(), "2023-24")
    twice = mutations.delete_logs_by_year(once, "2023-24")

    assert [log.id for log in once.logs] == ["a", "d"]
    assert all(log.academic_year != "2023-24" for log in once.logs)
    assert twice == once
    assert len(once.staff) == 2 and len(once.event_types) == 2


def test_clear_all_logs_keeps_staff_and_types():
    before = sample_data()
    after = mutations.clear_all_logs(before)

    assert after.logs == ()
    assert after.staff == before.staff
    assert after.event_types == before.event_types


def test_rename_staff_keeps_position_and_logs():
    before = sample_data()
    after = mutations.rename_staff(before, "1", "Alicia")

    assert [s.name for s in after.staff] == ["Alicia", "Bob"]
    assert after.logs == before.logs
    assert mutations.rename_staff(before, "missing", "X") == before


def test_mutations_do_not_modify_input():
    before = sample_data()
    mutations.clear_all_logs(before)
    mutations.delete_staff(before, "1")

    assert before == sample_data()


def test_delete_logs_by_year_matches_unknown_group_for_blank_years():
    data = AppData(staff=(), event_types=(), logs=(make_log("a", year=""), make_log("b", year="2024-25")))

    remaining = mutations.delete_logs_by_year(data, "Unknown")

    assert [log.id for log in remaining.logs] == ["b"]
