from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from ormgen.behaviors.timestampable.behaviors.base import Behavior
from ormgen.behaviors.timestampable.builder import BuilderContext
from ormgen.behaviors.timestampable.column import ColumnSpec
from ormgen.behaviors.timestampable.config import UPDATE, TimestampableConfig
from ormgen.behaviors.timestampable.logging import logger
from ormgen.behaviors.timestampable.schema import PlatformKind
from ormgen.include import timestampable as include

# http://jasonbos.co/two-timestamp-columns-in-mysql/
MYSQL_ZERO_TIMESTAMP = "'0000-00-00 00:00:00'"
MYSQL_ON_UPDATE_TIMESTAMP = "CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP"
POSTGRES_CURRENT_TIMESTAMP = "current_timestamp"


def timestamp_column_spec(field: str, name: str, kind: Optional[PlatformKind]) -> ColumnSpec:
    """Build the definition of one timestamp column for the bound dialect.

    MySQL cannot give a second TIMESTAMP column a NULL default, so every column there is required;
    the update column is maintained by the database itself. Postgres only gets a default for the
    update column. An unbound table and every other dialect get a plain nullable TIMESTAMP.
    """

    if kind is None:
        return ColumnSpec(name=name)
    if kind == PlatformKind.MySQL:
        if field == UPDATE:
            return ColumnSpec(name=name, required=True, default_expr=MYSQL_ON_UPDATE_TIMESTAMP)
        return ColumnSpec(name=name, required=True, default_expr=MYSQL_ZERO_TIMESTAMP)
    if kind == PlatformKind.Postgres and field == UPDATE:
        return ColumnSpec(name=name, default_expr=POSTGRES_CURRENT_TIMESTAMP)
    return ColumnSpec(name=name)


class TimestampableBehavior(Behavior):
    """Gives a generated model the ability to track creation, last modification and, optionally,
    deletion dates, stored in dedicated TIMESTAMP columns.
    """

    name: ClassVar[str] = "timestampable"
    include_path: ClassVar[str] = include.PACKAGE_PATH

    parameters = dict(TimestampableConfig.DEFAULTS)

    _config: Optional[TimestampableConfig] = None

    def set_parameters(self, parameters: Mapping[str, Any]) -> None:
        super().set_parameters(parameters)
        self._config = None

    @property
    def config(self) -> TimestampableConfig:
        if self._config is None:
            self._config = TimestampableConfig.from_parameters(self.get_parameters())
        return self._config

    @property
    def database_maintains_update_column(self) -> bool:
        """Under MySQL the update column's ON UPDATE default already stamps it, so generated code
        must not write it as well."""

        return self.platform_kind == PlatformKind.MySQL

    def _modify_table(self) -> None:
        config = self.config
        table = self.table
        kind = self.platform_kind

        for field in config.processing_order():
            if not config.is_enabled(field):
                continue

            column_name = config.column_for(field)
            if table.has_column(column_name):
                logger.debug(
                    f"Table '{table.name}' already has a '{column_name}' column, "
                    f"leaving it untouched"
                )
                continue

            spec = timestamp_column_spec(field, column_name, kind)
            table.add_column(spec, first=config.first)
            dialect = kind.value if kind else "unbound"
            position = "first" if config.first else "last"
            logger.debug(
                f"Added {field} column '{column_name}' to table '{table.name}' "
                f"(dialect: {dialect}, position: {position})"
            )

    def _column_context(self, param: str, builder: BuilderContext) -> dict[str, str]:
        column = self.get_column_for_parameter(param)
        return {
            "constant": builder.column_constant(column),
            "setter": builder.column_setter(column),
            "now": builder.now_expression,
        }

    def pre_insert(self, builder: BuilderContext) -> str:
        config = self.config
        params = []
        if config.with_created_at():
            params.append("create_column")
        if config.with_updated_at() and not self.database_maintains_update_column:
            params.append("update_column")

        return "\n".join(
            self.render("stamp_on_insert.py.jinja", **self._column_context(param, builder))
            for param in params
        )

    def pre_update(self, builder: BuilderContext) -> str:
        if self.config.with_updated_at() and not self.database_maintains_update_column:
            return self.render(
                "stamp_on_update.py.jinja", **self._column_context("update_column", builder)
            )
        return ""

    def object_methods(self, builder: BuilderContext) -> str:
        if not self.config.with_updated_at():
            return ""

        return self.render(
            "object_methods.py.jinja",
            object_class_name=builder.object_class_name,
            update_constant=self._column_context("update_column", builder)["constant"],
        )

    def query_methods(self, builder: BuilderContext) -> str:
        config = self.config
        fragments = []

        if config.with_updated_at():
            fragments.append(
                self.render(
                    "updated_query_methods.py.jinja",
                    query_class_name=builder.query_class_name,
                    **self._column_context("update_column", builder),
                )
            )

        if config.with_created_at():
            fragments.append(
                self.render(
                    "created_query_methods.py.jinja",
                    query_class_name=builder.query_class_name,
                    **self._column_context("create_column", builder),
                )
            )

        return "\n\n".join(fragments)
