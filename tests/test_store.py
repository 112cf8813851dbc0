"""
Tests for the store layer.

Covers chunking, batched writes and their failure mode, and the in-memory
store's table semantics.
"""

import pytest
from psycopg2.extras import Json

from lpg_seed.errors import BatchWriteError, StoreError
from lpg_seed.store import MemoryStore, chunked, write_batched
from lpg_seed.store.postgres import _adapt


def make_rows(count: int, prefix: str = "r") -> list[dict]:
    return [{"id": f"{prefix}{i}", "value": i} for i in range(count)]


class FailingStore(MemoryStore):
    """Rejects the Nth insert call (1-based)."""

    def __init__(self, fail_on_call: int) -> None:
        super().__init__()
        self.fail_on_call = fail_on_call
        self.calls = 0

    def insert(self, collection, records):
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise StoreError("payload too large")
        super().insert(collection, records)


class TestChunked:
    """Tests for chunked()."""

    def test_splits_into_ordered_chunks(self):
        chunks = chunked(make_rows(120), 50)
        assert [len(c) for c in chunks] == [50, 50, 20]
        assert chunks[1][0]["id"] == "r50"

    def test_empty_input(self):
        assert chunked([], 50) == []

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            chunked(make_rows(3), 0)


class TestWriteBatched:
    """Tests for write_batched()."""

    def test_120_records_in_batches_of_50(self):
        store = MemoryStore()
        written = write_batched(store, "people", make_rows(120), 50)

        assert written == 3
        assert store.insert_calls == [("people", 50), ("people", 50), ("people", 20)]
        assert [row["id"] for row in store.fetch_all("people")] == [f"r{i}" for i in range(120)]

    def test_no_records_no_calls(self):
        store = MemoryStore()
        assert write_batched(store, "people", [], 50) == 0
        assert store.insert_calls == []

    def test_failed_batch_raises_and_keeps_earlier_chunks(self):
        store = FailingStore(fail_on_call=2)

        with pytest.raises(BatchWriteError) as exc_info:
            write_batched(store, "people", make_rows(120), 50)

        err = exc_info.value
        assert err.collection == "people"
        assert err.batch_index == 1
        assert err.batch_count == 3
        assert isinstance(err, StoreError)
        assert "Batch 2/3 of 'people'" in str(err)
        # First chunk stays written; the third is never attempted
        assert store.count("people") == 50
        assert store.calls == 2


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_exists(self):
        store = MemoryStore()
        assert not store.exists("tags")
        store.insert("tags", make_rows(1))
        assert store.exists("tags")

    def test_duplicate_id_rejects_whole_insert(self):
        store = MemoryStore()
        store.insert("tags", make_rows(2))

        with pytest.raises(StoreError, match="duplicate key"):
            store.insert("tags", [{"id": "new"}, {"id": "r0"}])
        assert store.count("tags") == 2

    def test_duplicate_within_one_insert(self):
        with pytest.raises(StoreError):
            MemoryStore().insert("tags", [{"id": "x"}, {"id": "x"}])

    def test_fetch_where_filters_columns_and_limit(self):
        store = MemoryStore({"tags": [{"id": "a", "kind": "x"}, {"id": "b", "kind": "x"}, {"id": "c", "kind": "y"}]})

        assert [r["id"] for r in store.fetch_where("tags", {"kind": "x"})] == ["a", "b"]
        assert store.fetch_where("tags", {"kind": "x"}, columns=["id"], limit=1) == [{"id": "a"}]
        assert store.fetch_where("tags", {"kind": "z"}) == []

    def test_has_id(self):
        store = MemoryStore({"people": [{"id": "p1"}]})
        assert store.has_id("people", "p1")
        assert not store.has_id("people", "p2")
        assert not store.has_id("missing", "p1")

    def test_reads_are_copies(self):
        store = MemoryStore({"people": [{"id": "p1", "address": {"city": "A"}}]})
        row = store.fetch_all("people")[0]
        row["address"]["city"] = "B"
        assert store.fetch_all("people")[0]["address"]["city"] == "A"


class TestPostgresAdapt:
    """Tests for value adaptation before insert."""

    def test_wraps_json_like_values(self):
        assert isinstance(_adapt({"a": 1}), Json)
        assert isinstance(_adapt([1, 2]), Json)

    def test_leaves_scalars(self):
        assert _adapt("x") == "x"
        assert _adapt(None) is None
