import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, ClassVar, Optional

from dbt_common.exceptions import DbtRuntimeError
from jinja2 import Environment, FileSystemLoader

from ormgen.behaviors.timestampable.builder import BuilderContext
from ormgen.behaviors.timestampable.column import Column
from ormgen.behaviors.timestampable.schema import Database, PlatformKind, Table, platform_kind


@lru_cache(maxsize=None)
def get_template_env(include_path: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(os.path.join(include_path, "templates")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        autoescape=False,
    )


class Behavior(ABC):
    """Base class for a behavior attached to one table for the length of a generation run.

    Subclasses declare their parameter defaults and implement `_modify_table`; every builder
    extension point returns an empty fragment unless overridden.
    """

    name: ClassVar[str]
    include_path: ClassVar[str]

    # Defaults for the parameters this behavior understands. Anything else the host passes in is
    # ignored.
    parameters: ClassVar[dict[str, Any]] = {}

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self._parameters: dict[str, Any] = dict(self.parameters)
        self._table: Optional[Table] = None
        self.table_modified = False
        if parameters:
            self.set_parameters(parameters)

    def set_parameters(self, parameters: Mapping[str, Any]) -> None:
        self._parameters.update({k: v for k, v in parameters.items() if k in self.parameters})

    def get_parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    def get_parameter(self, name: str) -> Any:
        return self._parameters.get(name)

    def set_table(self, table: Table) -> None:
        self._table = table

    @property
    def table(self) -> Table:
        if self._table is None:
            raise DbtRuntimeError(f"Behavior '{self.name}' is not attached to a table")
        return self._table

    @property
    def database(self) -> Optional[Database]:
        return self._table.database if self._table is not None else None

    @property
    def platform_kind(self) -> Optional[PlatformKind]:
        return platform_kind(self._table)

    def get_column_for_parameter(self, param: str) -> Column:
        column_name = self.get_parameter(param)
        column = self.table.get_column(str(column_name))
        if column is None:
            raise DbtRuntimeError(
                f"Behavior '{self.name}' expects column '{column_name}' on table "
                f"'{self.table.name}'"
            )
        return column

    def modify_table(self) -> None:
        if self.table_modified:
            return
        self._modify_table()
        self.table_modified = True

    @abstractmethod
    def _modify_table(self) -> None:
        pass

    def render(self, template_name: str, **context: Any) -> str:
        template = get_template_env(self.include_path).get_template(template_name)
        return template.render(**context).strip("\n")

    def pre_save(self, builder: BuilderContext) -> str:
        return ""

    def post_save(self, builder: BuilderContext) -> str:
        return ""

    def pre_insert(self, builder: BuilderContext) -> str:
        return ""

    def post_insert(self, builder: BuilderContext) -> str:
        return ""

    def pre_update(self, builder: BuilderContext) -> str:
        return ""

    def post_update(self, builder: BuilderContext) -> str:
        return ""

    def pre_delete(self, builder: BuilderContext) -> str:
        return ""

    def post_delete(self, builder: BuilderContext) -> str:
        return ""

    def object_methods(self, builder: BuilderContext) -> str:
        return ""

    def query_methods(self, builder: BuilderContext) -> str:
        return ""
