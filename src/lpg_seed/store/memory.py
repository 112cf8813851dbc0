"""
MemoryStore - In-process store for dry runs and tests.

Behaves like a set of tables with a primary key on "id": inserting a
duplicate id rejects the whole request, as a real insert would.
"""

import copy
from collections.abc import Sequence
from typing import Any

from ..errors import StoreError
from .base import Row, Store


class MemoryStore(Store):
    """
    Dict-of-lists store.

    Attributes:
        tables: Table name -> list of rows
        insert_calls: (table, row count) for every accepted insert, in order
    """

    def __init__(self, tables: dict[str, list[Row]] | None = None) -> None:
        self.tables: dict[str, list[Row]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.insert_calls: list[tuple[str, int]] = []

    def exists(self, collection: str) -> bool:
        return bool(self.tables.get(collection))

    def fetch_all(self, collection: str) -> list[Row]:
        return [copy.deepcopy(row) for row in self.tables.get(collection, [])]

    def fetch_where(
        self,
        collection: str,
        filters: dict[str, Any],
        columns: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> list[Row]:
        results = []
        for row in self.tables.get(collection, []):
            if all(row.get(column) == value for column, value in filters.items()):
                if columns:
                    results.append({column: row.get(column) for column in columns})
                else:
                    results.append(copy.deepcopy(row))
                if limit is not None and len(results) >= limit:
                    break
        return results

    def insert(self, collection: str, records: Sequence[Row]) -> None:
        table = self.tables.setdefault(collection, [])
        existing = {row.get("id") for row in table}
        incoming = set()
        for record in records:
            record_id = record.get("id")
            if record_id is None:
                raise StoreError(f"{collection}: record without id")
            if record_id in existing or record_id in incoming:
                raise StoreError(
                    f"{collection}: duplicate key value violates unique constraint (id={record_id})"
                )
            incoming.add(record_id)
        table.extend(copy.deepcopy(dict(record)) for record in records)
        self.insert_calls.append((collection, len(records)))

    def count(self, collection: str) -> int:
        return len(self.tables.get(collection, []))

    def counts(self) -> dict[str, int]:
        return {name: len(rows) for name, rows in self.tables.items()}
