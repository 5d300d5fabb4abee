from typing import Optional

from ormgen.behaviors.timestampable.behaviors.timestampable import TimestampableBehavior
from ormgen.behaviors.timestampable.column import Column
from ormgen.behaviors.timestampable.schema import Database, Platform, PlatformKind, Table


def gen_table(
    name: str = "book",
    kind: Optional[PlatformKind] = PlatformKind.Default,
    columns: tuple[str, ...] = ("id", "title"),
) -> Table:
    database = Database(name="bookstore", platform=Platform(kind)) if kind else None
    return Table(
        name=name, columns=[Column(name=c, type="INTEGER") for c in columns], database=database
    )


def gen_behavior(table: Table, **parameters) -> TimestampableBehavior:
    behavior = TimestampableBehavior(parameters)
    behavior.set_table(table)
    behavior.modify_table()
    return behavior
