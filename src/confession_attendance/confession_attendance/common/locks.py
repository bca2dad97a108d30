from __future__ import annotations

import threading
import weakref
from datetime import date


class DateLocks:
    """One in-process lock per calendar date.

    Roster rebuilds, draft saves and final submissions for the same date run
    one at a time; different dates do not block each other. A date's lock is
    dropped once nobody holds a reference to it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: "weakref.WeakValueDictionary[date, threading.RLock]" = weakref.WeakValueDictionary()

    def for_date(self, day: date) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(day)
            if lock is None:
                lock = threading.RLock()
                self._locks[day] = lock
            return lock

    def __len__(self) -> int:
        return len(self._locks)
