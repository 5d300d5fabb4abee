from dataclasses import dataclass, field
from typing import Any, Optional

TIMESTAMP = "TIMESTAMP"


@dataclass(frozen=True)
class ColumnSpec:
    """Definition of a column a behavior asks the table to add. The table owns the resulting
    Column from then on."""

    name: str
    type: str = TIMESTAMP
    required: bool = False
    default_expr: Optional[str] = None


@dataclass
class Column:
    name: str
    type: str = TIMESTAMP
    required: bool = False
    default_expr: Optional[str] = None
    table: Optional[Any] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_spec(cls, spec: ColumnSpec, table: Optional[Any] = None) -> "Column":
        return cls(
            name=spec.name,
            type=spec.type,
            required=spec.required,
            default_expr=spec.default_expr,
            table=table,
        )

    @property
    def nullable(self) -> bool:
        return not self.required

    def __str__(self) -> str:
        parts = [self.name, self.type]
        if self.required:
            parts.append("NOT NULL")
        if self.default_expr is not None:
            parts.append(f"DEFAULT {self.default_expr}")
        return " ".join(parts)
