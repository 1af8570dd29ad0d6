from datetime import date

import pytest

from src.payroll_system.payroll_system.core.enums import LeaveStatus
from src.payroll_system.payroll_system.core.exceptions import InvalidLeaveRange
from src.payroll_system.payroll_system.leave.ledger import LeaveLedger


def test_leave_days_is_inclusive_span():
    ledger = LeaveLedger()
    req = ledger.request(date(2025, 1, 10), date(2025, 1, 12), "Family trip")

    assert req.leave_days == 3
    assert req.status == LeaveStatus.PENDING


def test_single_day_leave_counts_one_day():
    req = LeaveLedger().request(date(2025, 3, 1), date(2025, 3, 1), "Doctor")
    assert req.leave_days == 1


def test_leave_spanning_months_counts_all_days():
    req = LeaveLedger().request(date(2025, 1, 30), date(2025, 2, 2), "Trip")
    assert req.leave_days == 4


def test_approve_reduces_available_balance():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "Family trip")

    assert ledger.available_balance(20) == 20
    assert ledger.approve(0) is True
    assert ledger.available_balance(20) == 17


def test_pending_requests_do_not_count_against_balance():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.request(date(2025, 2, 10), date(2025, 2, 11), "b")
    ledger.approve(1)

    assert ledger.available_balance(20) == 18


def test_balance_can_go_negative():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 1), date(2025, 1, 25), "Long trip")
    ledger.approve(0)

    assert ledger.available_balance(20) == -5


def test_reject_removes_request():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.request(date(2025, 1, 20), date(2025, 1, 20), "b")

    assert ledger.reject(0) is True
    assert [r.reason for r in ledger.history()] == ["b"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_out_of_range_index_is_a_silent_no_op(index):
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    before = ledger.history()

    assert ledger.approve(index) is False
    assert ledger.reject(index) is False
    assert ledger.history() == before


def test_approving_twice_keeps_request_approved():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.approve(0)
    ledger.approve(0)

    assert ledger.history()[0].status == LeaveStatus.APPROVED
    assert ledger.available_balance(20) == 17


def test_request_ids_stay_stable_after_rejection():
    ledger = LeaveLedger()
    first = ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    second = ledger.request(date(2025, 1, 20), date(2025, 1, 21), "b")

    assert ledger.reject_request(first.request_id) is True
    assert ledger.approve_request(second.request_id) is True
    assert ledger.get(second.request_id).is_approved
    assert ledger.approve_request(first.request_id) is False


def test_request_ids_are_not_reused():
    ledger = LeaveLedger()
    first = ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.reject_request(first.request_id)
    again = ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")

    assert again.request_id != first.request_id


def test_history_is_a_copy_in_insertion_order():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.request(date(2025, 1, 5), date(2025, 1, 5), "b")

    snapshot = ledger.history()
    snapshot.clear()

    assert [r.reason for r in ledger.history()] == ["a", "b"]


def test_end_before_start_is_rejected():
    ledger = LeaveLedger()
    with pytest.raises(InvalidLeaveRange):
        ledger.request(date(2025, 1, 12), date(2025, 1, 10), "oops")
    assert len(ledger) == 0


def test_pending_lists_only_unapproved():
    ledger = LeaveLedger()
    ledger.request(date(2025, 1, 10), date(2025, 1, 12), "a")
    ledger.request(date(2025, 1, 20), date(2025, 1, 21), "b")
    ledger.approve(0)

    assert [r.reason for r in ledger.pending()] == ["b"]
