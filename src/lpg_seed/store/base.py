"""
Store interface and batched writes.

The seeder only needs four store operations:
- exists: "select id limit 1" idempotency gate
- fetch_all: "select *" re-fetch of an already seeded collection
- fetch_where: equality-filtered lookups used by the fixture scenarios
- insert: bulk insert of a list of row dicts

write_batched() splits large inserts into chunks so no single request
exceeds the store's payload ceiling. A failed chunk aborts the write; chunks
already written stay written.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .. import console
from ..errors import BatchWriteError, StoreError

Row = dict[str, Any]


class Store(ABC):
    """Minimal relational store used by the generators."""

    @abstractmethod
    def exists(self, collection: str) -> bool:
        """True if the collection holds at least one record."""

    @abstractmethod
    def fetch_all(self, collection: str) -> list[Row]:
        """Every record in the collection."""

    @abstractmethod
    def fetch_where(
        self,
        collection: str,
        filters: dict[str, Any],
        columns: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> list[Row]:
        """
        Records whose columns equal every value in filters.

        Args:
            collection: Table name
            filters: Column -> required value
            columns: Columns to return (None = all)
            limit: Maximum rows to return (None = no limit)
        """

    @abstractmethod
    def insert(self, collection: str, records: Sequence[Row]) -> None:
        """Insert all records in one request."""

    def close(self) -> None:
        pass

    def has_id(self, collection: str, record_id: str) -> bool:
        """True if a record with this id exists."""
        return bool(self.fetch_where(collection, {"id": record_id}, columns=["id"], limit=1))


def chunked(records: Sequence[Row], size: int) -> list[Sequence[Row]]:
    """Split records into consecutive chunks of at most size items."""
    if size <= 0:
        raise ValueError(f"Batch size must be positive, got {size}")
    return [records[i : i + size] for i in range(0, len(records), size)]


def write_batched(
    store: Store,
    collection: str,
    records: Sequence[Row],
    batch_size: int,
) -> int:
    """
    Insert records in chunks of at most batch_size, in order.

    Args:
        store: Target store
        collection: Table name
        records: Rows to insert
        batch_size: Maximum rows per insert request

    Returns:
        Number of chunks written

    Raises:
        BatchWriteError: On the first chunk the store rejects
    """
    batches = chunked(records, batch_size)
    for index, batch in enumerate(batches):
        try:
            store.insert(collection, batch)
        except StoreError as err:
            console.error(
                f"Error inserting {collection} (batch {index + 1}/{len(batches)}, "
                f"{len(batch)} rows): {err}"
            )
            raise BatchWriteError(collection, index, len(batches), err) from err
        console.debug(f"Inserted {collection} batch {index + 1}/{len(batches)} ({len(batch)} rows)")
    return len(batches)
