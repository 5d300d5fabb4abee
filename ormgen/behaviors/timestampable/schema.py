"""
In-memory schema model for the host side of the behavior contract.

Behaviors only ever read the table's columns and platform, and add columns; this module gives
hosts and tests a concrete implementation of exactly that surface.
"""

from dataclasses import dataclass, field
from typing import Optional

from dbt_common.dataclass_schema import StrEnum

from ormgen.behaviors.timestampable.column import Column, ColumnSpec


class PlatformKind(StrEnum):
    Default = "default"
    MySQL = "mysql"
    Postgres = "pgsql"
    SQLite = "sqlite"
    MSSQL = "mssql"
    Oracle = "oracle"


@dataclass(frozen=True)
class Platform:
    kind: PlatformKind = PlatformKind.Default


@dataclass
class Database:
    name: str
    platform: Optional[Platform] = None


@dataclass
class Table:
    name: str
    columns: list[Column] = field(default_factory=list)
    database: Optional[Database] = None

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def has_column(self, name: str) -> bool:
        return self.get_column(name) is not None

    def get_column(self, name: str) -> Optional[Column]:
        lowered = name.lower()
        for column in self.columns:
            if column.name.lower() == lowered:
                return column
        return None

    def add_column(self, spec: ColumnSpec, first: bool = False) -> Column:
        column = Column.from_spec(spec, table=self)
        if first:
            self.columns.insert(0, column)
        else:
            self.columns.append(column)
        return column


def platform_kind(table: Optional[Table]) -> Optional[PlatformKind]:
    """The dialect bound to the table through its database, or None while unbound."""

    if table is None or table.database is None or table.database.platform is None:
        return None
    return table.database.platform.kind
