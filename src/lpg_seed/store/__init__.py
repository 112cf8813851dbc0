"""
Persistence layer.

- Store: abstract interface (exists, fetch_all, fetch_where, insert)
- write_batched: chunked inserts that stop at the first failed chunk
- MemoryStore: in-process tables for dry runs and tests
- PostgresStore: psycopg2 implementation
"""

from .base import Row, Store, chunked, write_batched
from .memory import MemoryStore
from .postgres import PostgresStore

__all__ = [
    "Row",
    "Store",
    "chunked",
    "write_batched",
    "MemoryStore",
    "PostgresStore",
]
