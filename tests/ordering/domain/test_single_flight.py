"""Tests for the per-key lock used around cart mutations."""

import threading
import time

from marketplace.ordering.checkout.guard import SingleFlight


class TestSingleFlight:
    def test_lock_released_after_use(self):
        guard = SingleFlight()
        with guard.hold("user-1"):
            assert guard.active_keys() == {"user-1"}
        assert guard.active_keys() == set()

    def test_reentrant_for_same_thread(self):
        guard = SingleFlight()
        with guard.hold("user-1"):
            with guard.hold("user-1"):
                assert "user-1" in guard.active_keys()
        assert guard.active_keys() == set()

    def test_same_key_is_serialized(self):
        guard = SingleFlight()
        inside = []
        overlaps = []

        def work():
            with guard.hold("user-1"):
                if inside:
                    overlaps.append(True)
                inside.append(True)
                time.sleep(0.01)
                inside.pop()

        threads = [threading.Thread(target=work) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert overlaps == []
        assert guard.active_keys() == set()

    def test_released_on_error(self):
        guard = SingleFlight()
        try:
            with guard.hold("user-1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert guard.active_keys() == set()
