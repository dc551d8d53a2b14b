"""Unit tests for IdSequence."""

import threading

import pytest

from shared_kernel.identifiers import IdSequence


class TestIdSequence:
    """Tests for sequential ID allocation."""

    def test_starts_at_one(self):
        sequence = IdSequence()

        assert sequence.next_value() == 1
        assert sequence.next_value() == 2

    def test_custom_start(self):
        sequence = IdSequence(start=10)

        assert sequence.next_value() == 10

    def test_rejects_non_positive_start(self):
        with pytest.raises(ValueError):
            IdSequence(start=0)

    def test_concurrent_allocation_never_repeats(self):
        """Values handed out across threads are unique and contiguous."""
        sequence = IdSequence()
        results: list[int] = []
        results_lock = threading.Lock()

        def allocate():
            local = [sequence.next_value() for _ in range(200)]
            with results_lock:
                results.extend(local)

        threads = [threading.Thread(target=allocate) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(1, 1601))
