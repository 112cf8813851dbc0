"""
PostgresStore - psycopg2-backed store.

Each insert call is committed on its own, so a batched write that fails
midway leaves the earlier chunks in place (see write_batched). JSON-like
values (dicts, lists) are adapted to jsonb with psycopg2's Json wrapper.
"""

from collections.abc import Sequence
from typing import Any

import psycopg2
from psycopg2 import sql
from psycopg2.extensions import connection as PgConnection
from psycopg2.extras import Json, RealDictCursor, execute_values

from ..errors import StoreError
from .base import Row, Store


def _adapt(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return Json(value)
    return value


class PostgresStore(Store):
    """Store backed by a single PostgreSQL connection."""

    def __init__(self, conn: PgConnection) -> None:
        self.conn = conn

    @classmethod
    def from_dsn(cls, dsn: str) -> "PostgresStore":
        """
        Open a connection from a libpq DSN or URL.

        Raises:
            StoreError: If the connection cannot be established
        """
        try:
            return cls(psycopg2.connect(dsn))
        except psycopg2.Error as err:
            raise StoreError(f"Could not connect to database: {err}") from err

    def close(self) -> None:
        self.conn.close()

    def _run(self, query: sql.Composable, params: Sequence[Any] = ()) -> list[Row]:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(query, params)
                rows = [dict(row) for row in cur.fetchall()]
            self.conn.commit()
            return rows
        except psycopg2.Error as err:
            self.conn.rollback()
            raise StoreError(str(err).strip()) from err

    def exists(self, collection: str) -> bool:
        query = sql.SQL("SELECT id FROM {} LIMIT 1").format(sql.Identifier(collection))
        return bool(self._run(query))

    def fetch_all(self, collection: str) -> list[Row]:
        query = sql.SQL("SELECT * FROM {}").format(sql.Identifier(collection))
        return self._run(query)

    def fetch_where(
        self,
        collection: str,
        filters: dict[str, Any],
        columns: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> list[Row]:
        col_spec = (
            sql.SQL(", ").join(sql.Identifier(c) for c in columns) if columns else sql.SQL("*")
        )
        query = sql.SQL("SELECT {} FROM {}").format(col_spec, sql.Identifier(collection))
        params: list[Any] = []
        if filters:
            conditions = [
                sql.SQL("{} = %s").format(sql.Identifier(column)) for column in filters
            ]
            query += sql.SQL(" WHERE ") + sql.SQL(" AND ").join(conditions)
            params.extend(_adapt(value) for value in filters.values())
        if limit is not None:
            query += sql.SQL(" LIMIT %s")
            params.append(limit)
        return self._run(query, params)

    def insert(self, collection: str, records: Sequence[Row]) -> None:
        if not records:
            return
        # Union of keys in first-seen order; missing values insert as NULL
        columns: list[str] = []
        for record in records:
            for key in record:
                if key not in columns:
                    columns.append(key)

        query = sql.SQL("INSERT INTO {} ({}) VALUES %s").format(
            sql.Identifier(collection),
            sql.SQL(", ").join(sql.Identifier(c) for c in columns),
        )
        values = [tuple(_adapt(record.get(c)) for c in columns) for record in records]
        try:
            with self.conn.cursor() as cur:
                execute_values(cur, query.as_string(self.conn), values, page_size=len(values))
            self.conn.commit()
        except psycopg2.Error as err:
            self.conn.rollback()
            raise StoreError(str(err).strip()) from err
