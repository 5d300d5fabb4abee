from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from ormgen.behaviors.timestampable.utils import boolean_value

CREATE = "create"
UPDATE = "update"
DELETE = "delete"

FIELDS = (CREATE, UPDATE, DELETE)


class TimestampableConfig(BaseModel):
    """Resolved parameters of a timestampable behavior.

    Ex: `disable_deleted_at` defaults to true, so only the create and update columns are tracked
    unless the schema asks for soft-delete timestamps as well.
    """

    model_config = ConfigDict(frozen=True)

    DEFAULTS: ClassVar[dict[str, Any]] = {
        "create_column": "created_at",
        "update_column": "updated_at",
        "delete_column": "deleted_at",
        "first": False,
        "disable_created_at": False,
        "disable_updated_at": False,
        "disable_deleted_at": True,
    }
    BOOLEAN_OPTIONS: ClassVar[tuple[str, ...]] = (
        "first",
        "disable_created_at",
        "disable_updated_at",
        "disable_deleted_at",
    )

    create_column: str = "created_at"
    update_column: str = "updated_at"
    delete_column: str = "deleted_at"
    first: bool = False
    disable_created_at: bool = False
    disable_updated_at: bool = False
    disable_deleted_at: bool = True

    @classmethod
    def from_parameters(
        cls, raw: Optional[Mapping[str, Any]] = None, strict: Optional[bool] = None
    ) -> Self:
        """Merge the raw behavior parameters over the defaults. Unknown keys are ignored."""

        merged = dict(cls.DEFAULTS)
        if raw:
            merged.update({k: v for k, v in raw.items() if k in cls.DEFAULTS})

        for option in cls.BOOLEAN_OPTIONS:
            merged[option] = boolean_value(merged[option], strict=strict)
        for option in ("create_column", "update_column", "delete_column"):
            merged[option] = str(merged[option])

        return cls(**merged)

    def with_created_at(self) -> bool:
        return not self.disable_created_at

    def with_updated_at(self) -> bool:
        return not self.disable_updated_at

    def with_deleted_at(self) -> bool:
        return not self.disable_deleted_at

    def is_enabled(self, field: str) -> bool:
        return {
            CREATE: self.with_created_at,
            UPDATE: self.with_updated_at,
            DELETE: self.with_deleted_at,
        }[field]()

    def column_for(self, field: str) -> str:
        return {
            CREATE: self.create_column,
            UPDATE: self.update_column,
            DELETE: self.delete_column,
        }[field]

    def processing_order(self) -> tuple[str, ...]:
        """Fields in the order columns get added. With `first`, each column goes to the front of
        the table, so walking the fields backwards leaves them as create, update, delete."""

        if self.first:
            return tuple(reversed(FIELDS))
        return FIELDS
