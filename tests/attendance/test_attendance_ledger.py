from datetime import date

from src.payroll_system.payroll_system.attendance.ledger import AttendanceLedger


def test_marking_same_date_twice_keeps_latest_record():
    ledger = AttendanceLedger()
    ledger.mark(date(2025, 1, 6), True, 8)
    ledger.mark(date(2025, 1, 6), False, 0)

    assert len(ledger) == 1
    assert ledger.get(date(2025, 1, 6)).present is False
    assert ledger.present_days() == 0
    assert ledger.absent_days() == 1


def test_present_plus_absent_equals_distinct_dates():
    ledger = AttendanceLedger()
    marks = [
        (date(2025, 1, 6), True, 8),
        (date(2025, 1, 7), False, 0),
        (date(2025, 1, 6), True, 6),
        (date(2025, 1, 8), True, 4),
        (date(2025, 1, 7), True, 7),
    ]
    for d, present, hours in marks:
        ledger.mark(d, present, hours)

    distinct = {d for d, _, _ in marks}
    assert ledger.present_days() + ledger.absent_days() == len(distinct)
    assert ledger.present_days() == 3


def test_hours_in_month_counts_only_present_records_of_that_month():
    ledger = AttendanceLedger()
    ledger.mark(date(2025, 1, 6), True, 8)
    ledger.mark(date(2025, 1, 7), True, 5)
    ledger.mark(date(2025, 1, 8), False, 3)
    ledger.mark(date(2025, 2, 3), True, 8)
    ledger.mark(date(2024, 1, 6), True, 8)

    assert ledger.hours_in_month(1, 2025) == 13
    assert ledger.hours_in_month(3, 2025) == 0


def test_default_hours_follow_presence():
    ledger = AttendanceLedger()
    ledger.mark(date(2025, 1, 6), True)
    ledger.mark(date(2025, 1, 7), False)

    assert ledger.get(date(2025, 1, 6)).hours_worked == 8
    assert ledger.get(date(2025, 1, 7)).hours_worked == 0


def test_hours_are_stored_as_given():
    ledger = AttendanceLedger()
    ledger.mark(date(2025, 1, 6), True, 30)

    assert ledger.hours_in_month(1, 2025) == 30


def test_records_are_sorted_by_date():
    ledger = AttendanceLedger()
    ledger.mark(date(2025, 1, 9), True, 8)
    ledger.mark(date(2025, 1, 2), True, 8)

    assert [r.work_date for r in ledger.records()] == [date(2025, 1, 2), date(2025, 1, 9)]
