from collections.abc import Callable
from dataclasses import dataclass

from ormgen.behaviors.timestampable.column import Column
from ormgen.behaviors.timestampable.schema import Table
from ormgen.behaviors.timestampable.utils import camelize

DEFAULT_NOW_EXPRESSION = "int(time.time())"


@dataclass(frozen=True)
class BuilderContext:
    """What a class builder tells a behavior about the class it is generating.

    The constant and setter names are opaque to behaviors; they are spliced into fragments as-is.
    `now_expression` is the source expression generated code evaluates for the current time in
    seconds since the epoch; hosts that inject a clock into their records can point it there.
    """

    object_class_name: str
    query_class_name: str
    column_constant: Callable[[Column], str]
    column_setter: Callable[[Column], str]
    now_expression: str = DEFAULT_NOW_EXPRESSION

    @classmethod
    def for_table(
        cls, table: Table, now_expression: str = DEFAULT_NOW_EXPRESSION
    ) -> "BuilderContext":
        class_name = camelize(table.name)
        return cls(
            object_class_name=class_name,
            query_class_name=f"{class_name}Query",
            column_constant=lambda column: f"{class_name}TableMap.COL_{column.name.upper()}",
            column_setter=lambda column: f"set_{column.name.lower()}",
            now_expression=now_expression,
        )
