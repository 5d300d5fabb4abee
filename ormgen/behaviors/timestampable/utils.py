import re
from typing import Any, Optional

from dbt_common.exceptions import DbtValidationError

from ormgen.behaviors.timestampable.global_state import GlobalState
from ormgen.behaviors.timestampable.logging import logger

TRUE_LITERALS = frozenset({"true", "1", "yes", "on"})
FALSE_LITERALS = frozenset({"false", "0", "no", "off", ""})


def boolean_value(value: Any, strict: Optional[bool] = None) -> bool:
    """Coerce a loosely-typed behavior parameter to a bool.

    Native bools pass through, integers 1/0 map to True/False, None is False, and strings are
    matched case-insensitively against TRUE_LITERALS and FALSE_LITERALS. Anything else is
    malformed: it coerces to False with a warning, or raises DbtValidationError when strict
    (defaulting to the ORMGEN_STRICT_BEHAVIOR_PARAMETERS setting).
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_LITERALS:
            return True
        if normalized in FALSE_LITERALS:
            return False

    if strict is None:
        strict = GlobalState.get_strict_parameters()
    if strict:
        raise DbtValidationError(f"Invalid boolean behavior parameter: {value!r}")
    logger.warning(f"Unrecognized boolean behavior parameter {value!r}, treating it as false")
    return False


def camelize(name: str) -> str:
    """Turn a table or column name into the CamelCase name used for generated classes."""
    parts = re.split(r"[^0-9A-Za-z]+", name)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)
