"""
Direct-callback rendition of the timestampable hooks.

Hosts that drive plain Python records instead of generating source text register these callbacks
at the same extension points; they follow the exact rules the generated fragments encode.
"""

from collections.abc import MutableMapping
from typing import Any, Optional, Protocol, TypeVar

from ormgen.behaviors.timestampable.clock import Clock, SystemClock
from ormgen.behaviors.timestampable.config import TimestampableConfig
from ormgen.behaviors.timestampable.schema import PlatformKind

SECONDS_PER_DAY = 24 * 60 * 60

GREATER_EQUAL = ">="


class Record(Protocol):
    modified_columns: MutableMapping[str, bool]

    def is_modified(self) -> bool: ...

    def is_column_modified(self, name: str) -> bool: ...

    def set_column(self, name: str, value: Any) -> None: ...


class Query(Protocol):
    def add_using_alias(self, column: str, value: Any, comparison: str) -> Any: ...

    def add_descending_order_by_column(self, column: str) -> Any: ...

    def add_ascending_order_by_column(self, column: str) -> Any: ...


R = TypeVar("R", bound=Record)
Q = TypeVar("Q", bound=Query)


class TimestampableCallbacks:
    def __init__(
        self,
        config: TimestampableConfig,
        platform_kind: Optional[PlatformKind] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config
        self.platform_kind = platform_kind
        self.clock = clock or SystemClock()

    @property
    def stamps_update_column(self) -> bool:
        return self.config.with_updated_at() and self.platform_kind != PlatformKind.MySQL

    def pre_insert(self, record: Record) -> None:
        now = self.clock.now()
        if self.config.with_created_at() and not record.is_column_modified(
            self.config.create_column
        ):
            record.set_column(self.config.create_column, now)
        if self.stamps_update_column and not record.is_column_modified(self.config.update_column):
            record.set_column(self.config.update_column, now)

    def pre_update(self, record: Record) -> None:
        if not self.stamps_update_column:
            return
        # A save without pending changes must not bump the update date
        if record.is_modified() and not record.is_column_modified(self.config.update_column):
            record.set_column(self.config.update_column, self.clock.now())

    def keep_update_date_unchanged(self, record: R) -> R:
        if self.config.with_updated_at():
            record.modified_columns[self.config.update_column] = True
        return record

    def recently_updated(self, query: Q, nb_days: int = 7) -> Q:
        return self._recently(query, self.config.update_column, nb_days)

    def last_updated_first(self, query: Q) -> Q:
        return query.add_descending_order_by_column(self.config.update_column)

    def first_updated_first(self, query: Q) -> Q:
        return query.add_ascending_order_by_column(self.config.update_column)

    def recently_created(self, query: Q, nb_days: int = 7) -> Q:
        return self._recently(query, self.config.create_column, nb_days)

    def last_created_first(self, query: Q) -> Q:
        return query.add_descending_order_by_column(self.config.create_column)

    def first_created_first(self, query: Q) -> Q:
        return query.add_ascending_order_by_column(self.config.create_column)

    def _recently(self, query: Q, column: str, nb_days: int) -> Q:
        return query.add_using_alias(
            column, self.clock.now() - nb_days * SECONDS_PER_DAY, GREATER_EQUAL
        )
