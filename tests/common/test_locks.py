import gc
from datetime import date

from src.confession_attendance.confession_attendance.common.locks import DateLocks


def test_same_date_shares_one_lock_and_is_reentrant():
    locks = DateLocks()
    lock = locks.for_date(date(2024, 6, 15))

    assert locks.for_date(date(2024, 6, 15)) is lock
    assert locks.for_date(date(2024, 6, 22)) is not lock

    with lock:
        # Finalize clears the draft while holding the same date's lock
        with locks.for_date(date(2024, 6, 15)):
            pass


def test_unreferenced_locks_are_dropped():
    locks = DateLocks()
    lock = locks.for_date(date(2024, 6, 15))
    locks.for_date(date(2024, 6, 22))

    gc.collect()

    assert len(locks) == 1
    assert locks.for_date(date(2024, 6, 15)) is lock
