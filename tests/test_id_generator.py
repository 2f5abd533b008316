"""Tests for teammate/id_generator.py."""

from concurrent.futures import ThreadPoolExecutor
import threading

from teammate.id_generator import IdGenerator


class TestNextId:
    def test_starts_at_one(self):
        ids = IdGenerator()
        assert ids.next_id() == "P0001"
        assert ids.next_id() == "P0002"

    def test_peek_does_not_consume(self):
        ids = IdGenerator()
        assert ids.peek_next_id() == "P0001"
        assert ids.next_id() == "P0001"

    def test_issued_count(self):
        ids = IdGenerator()
        assert ids.issued_count == 0
        ids.next_id()
        ids.next_id()
        assert ids.issued_count == 2

    def test_custom_prefix_and_width(self):
        ids = IdGenerator(prefix="X", width=2)
        assert ids.next_id() == "X01"

    def test_concurrent_callers_get_distinct_ids(self):
        ids = IdGenerator()
        thread_count = 20
        barrier = threading.Barrier(thread_count)

        def worker(_: int) -> str:
            barrier.wait()
            return ids.next_id()

        with ThreadPoolExecutor(max_workers=thread_count) as pool:
            issued = list(pool.map(worker, range(thread_count)))

        assert len(set(issued)) == thread_count
        assert ids.issued_count == thread_count

    def test_concurrent_reconcile_never_loses_ids(self):
        ids = IdGenerator()

        def issue(_: int) -> str:
            return ids.next_id()

        def reconcile(n: int) -> str:
            ids.reconcile(n)
            return ""

        with ThreadPoolExecutor(max_workers=8) as pool:
            issued = list(pool.map(issue, range(200)))
            list(pool.map(reconcile, range(0, 50)))
            issued += list(pool.map(issue, range(200)))

        assert len(set(issued)) == 400


class TestReconcile:
    def test_moves_counter_forward(self):
        ids = IdGenerator()
        ids.reconcile(41)
        assert ids.next_id() == "P0042"

    def test_never_moves_backward(self):
        ids = IdGenerator()
        ids.reconcile(10)
        ids.reconcile(3)
        assert ids.next_id() == "P0011"

    def test_from_ids_skips_malformed(self):
        ids = IdGenerator()
        ids.reconcile_from_ids(["P0007", "bogus", "P0012", "Q0099", ""])
        assert ids.next_id() == "P0013"

    def test_from_empty_ids_keeps_counter(self):
        ids = IdGenerator()
        ids.next_id()
        ids.reconcile_from_ids([])
        assert ids.next_id() == "P0002"


class TestAdvanceIfCollides:
    def test_advances_past_reloaded_id(self):
        ids = IdGenerator()
        ids.advance_if_collides("P0005")
        assert ids.next_id() == "P0006"

    def test_lower_id_does_not_rewind(self):
        ids = IdGenerator()
        ids.reconcile(20)
        ids.advance_if_collides("P0003")
        assert ids.next_id() == "P0021"

    def test_equal_to_next_advances(self):
        ids = IdGenerator()
        ids.advance_if_collides("P0001")
        assert ids.next_id() == "P0002"

    def test_malformed_id_ignored(self):
        ids = IdGenerator()
        ids.advance_if_collides("not-an-id")
        assert ids.next_id() == "P0001"


class TestReset:
    def test_reset_restores_initial_value(self):
        ids = IdGenerator()
        ids.reconcile(99)
        ids.next_id()
        ids.reset()
        assert ids.issued_count == 0
        assert ids.next_id() == "P0001"

    def test_instances_are_independent(self):
        a = IdGenerator()
        b = IdGenerator()
        a.next_id()
        assert b.next_id() == "P0001"


class TestFormatting:
    def test_parse_numeric(self):
        ids = IdGenerator()
        assert ids.parse_numeric("P0042") == 42
        assert ids.parse_numeric(" P12345 ") == 12345
        assert ids.parse_numeric("P") is None
        assert ids.parse_numeric(None) is None

    def test_format_id_pads(self):
        assert IdGenerator().format_id(7) == "P0007"
