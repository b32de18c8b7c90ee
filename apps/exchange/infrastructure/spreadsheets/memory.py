"""
In-memory table source.
Serves fixture tables keyed by resource path; useful for tests and for
callers that already hold the rows.
"""

from typing import Any, Mapping, Sequence

from apps.exchange.domain.exceptions import ResourceMissing
from apps.exchange.domain.interfaces import Sheet, Table, TableSource


class InMemoryTableSource(TableSource):

    def __init__(self, tables: Mapping[str, Table] | None = None):
        self._tables = dict(tables or {})

    @classmethod
    def from_rows(cls, resource_path: str, sheets: Mapping[str, Sequence[Sequence[Any]]]) -> "InMemoryTableSource":
        """Build a source holding one table, given ``{sheet_name: rows}``."""
        table = Table(sheets=tuple(
            Sheet(name=name, rows=tuple(tuple(row) for row in rows))
            for name, rows in sheets.items()
        ))
        return cls({resource_path: table})

    def open_table(self, resource_path: str) -> Table:
        try:
            return self._tables[resource_path]
        except KeyError:
            raise ResourceMissing(f"Resource '{resource_path}' not found")
